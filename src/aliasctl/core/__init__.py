"""Core / service layer — alias semantics and the storage round-trip.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or process I/O — only through :mod:`protocols`.
* No imports from ``cli`` or ``infra``.
"""

from aliasctl.core.alias_store import AliasStore
from aliasctl.core.models import AliasConfig, AliasResult, CommandResult, LookupStatus
from aliasctl.core.protocols import CommandRunner, FileAccess
from aliasctl.core.storage import dump_config, load_config, parse_config, save_config

__all__: list[str] = [
    "AliasConfig",
    "AliasResult",
    "AliasStore",
    "CommandResult",
    "CommandRunner",
    "FileAccess",
    "LookupStatus",
    "dump_config",
    "load_config",
    "parse_config",
    "save_config",
]
