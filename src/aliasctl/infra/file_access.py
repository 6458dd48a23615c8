"""Infrastructure: concrete :class:`~aliasctl.core.protocols.FileAccess` backends.

:class:`LocalFileAccess` is the only place in the codebase that reads or
writes the configuration file on disk.  Every ``OSError`` is caught here
and re-raised as a :class:`~aliasctl.exceptions.ConfigError` subclass.

Rules
-----
* Whole-file reads and writes only — no patching, no locking.
* No create-if-missing fallback.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from aliasctl.exceptions import (
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigSaveError,
    config_example_hint,
)

logger = logging.getLogger(__name__)

ENCODING: str = "utf-8"


def _not_found(path: str) -> ConfigNotFoundError:
    return ConfigNotFoundError(
        f"Configuration file not found: {path}",
        hint=config_example_hint(
            "Create it (or pass --config / set ALIASCTL_CONFIG) with at least:"
        ),
    )


class LocalFileAccess:
    """Filesystem-backed :class:`FileAccess`.

    This class satisfies the :class:`~aliasctl.core.protocols.FileAccess`
    protocol structurally — no explicit inheritance required.
    """

    def read_text(self, path: str) -> str:
        logger.debug("Reading %s", path)
        try:
            return Path(path).read_text(encoding=ENCODING)
        except FileNotFoundError as exc:
            raise _not_found(path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigLoadError(f"Cannot read {path}: {exc}") from exc

    def write_text(self, path: str, text: str) -> None:
        logger.debug("Writing %d characters to %s", len(text), path)
        try:
            Path(path).write_text(text, encoding=ENCODING)
        except OSError as exc:
            raise ConfigSaveError(
                f"Cannot write {path}: {exc}",
                hint="The change was applied but not saved; re-run it once the file is writable.",
            ) from exc


class InMemoryFileAccess:
    """Dict-backed :class:`FileAccess` for tests and embedding.

    Parameters
    ----------
    files:
        Optional initial ``path → text`` contents.  The mapping is copied.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.writes: list[str] = []
        """Paths written, in order — lets callers assert write-back behaviour."""

    def read_text(self, path: str) -> str:
        try:
            return self.files[path]
        except KeyError as exc:
            raise _not_found(path) from exc

    def write_text(self, path: str, text: str) -> None:
        self.files[path] = text
        self.writes.append(path)
