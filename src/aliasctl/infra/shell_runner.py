"""Infrastructure: run alias commands through the host shell.

This module is the **only** place that spawns subprocesses.  The command
string is handed to the platform shell verbatim — aliases are meant to
carry pipes, globs and redirections.

Rules
-----
* Blocks until the child exits; no timeout, no retries.
* A nonzero exit status is data, not an error.
* Failure to start the shell raises :class:`CommandSpawnError`.
"""

from __future__ import annotations

import logging
import platform
import subprocess

from aliasctl.core.models import CommandResult
from aliasctl.exceptions import CommandSpawnError

logger = logging.getLogger(__name__)


def shell_argv(command: str) -> list[str]:
    """Return the argv that runs *command* in the current OS's shell."""
    if platform.system().lower() == "windows":
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


class ShellCommandRunner:
    """Concrete :class:`~aliasctl.core.protocols.CommandRunner`.

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def run(self, command: str) -> CommandResult:
        argv = shell_argv(command)
        logger.debug("Spawning %s", argv[:2])
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise CommandSpawnError(
                f"Failed to start shell '{argv[0]}': {exc}",
                hint="Make sure a system shell is installed and on PATH.",
            ) from exc

        logger.debug("Shell exited with status %d", completed.returncode)
        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
