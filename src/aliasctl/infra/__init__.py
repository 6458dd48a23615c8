"""Infrastructure layer — filesystem and subprocess integration.

Every raw ``OSError`` must be caught here and re-raised as an
:class:`~aliasctl.exceptions.AliasctlError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from aliasctl.infra.file_access import InMemoryFileAccess, LocalFileAccess
from aliasctl.infra.shell_runner import ShellCommandRunner, shell_argv

__all__: list[str] = [
    "InMemoryFileAccess",
    "LocalFileAccess",
    "ShellCommandRunner",
    "shell_argv",
]
