"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the store and the storage round-trip can be
exercised without touching the disk or spawning processes.
"""

from __future__ import annotations

from typing import Protocol

from aliasctl.core.models import CommandResult


class FileAccess(Protocol):
    """Contract for whole-file text storage backends.

    Any object that implements :meth:`read_text` and :meth:`write_text`
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def read_text(self, path: str) -> str:
        """Return the full contents of *path* as text.

        Raises
        ------
        ConfigNotFoundError
            When *path* does not exist.
        ConfigLoadError
            When *path* exists but cannot be read.
        """
        ...  # pragma: no cover

    def write_text(self, path: str, text: str) -> None:
        """Replace the contents of *path* with *text*.

        Raises
        ------
        ConfigSaveError
            When the write fails for any reason.
        """
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for shell command execution backends."""

    def run(self, command: str) -> CommandResult:
        """Run *command* through the host shell and wait for it to exit.

        A nonzero exit status is reported through the returned
        :class:`CommandResult`, not raised.

        Raises
        ------
        CommandSpawnError
            When the shell itself cannot be started.
        """
        ...  # pragma: no cover
