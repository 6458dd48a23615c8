"""Custom exception hierarchy for aliasctl.

All exceptions that cross layer boundaries must inherit from
:class:`AliasctlError`.  Raw ``OSError``/``TOMLDecodeError`` instances
must NEVER propagate beyond the layer that triggered them — they are
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
AliasctlError
├── ConfigError
│   ├── ConfigLoadError
│   │   └── ConfigNotFoundError
│   ├── ConfigParseError
│   └── ConfigSaveError
└── CommandSpawnError

"Alias not found" and "group not found" are deliberately absent: they
are informational outcomes reported by the store, not errors.
"""

from __future__ import annotations


class AliasctlError(Exception):
    """Base exception for all aliasctl errors.

    Every fatal condition maps to a subclass of this exception so that
    the CLI error boundary can render a clean message without leaking
    internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration file ----------------------------------------------------

class ConfigError(AliasctlError):
    """Common parent for configuration file failures."""


class ConfigLoadError(ConfigError):
    """Raised when the configuration file cannot be read."""


class ConfigNotFoundError(ConfigLoadError):
    """Raised when the configuration file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid alias TOML."""


class ConfigSaveError(ConfigError):
    """Raised when writing the configuration file back fails.

    The in-memory mutation has already been applied when this is raised.
    """


# --- Command execution -----------------------------------------------------

class CommandSpawnError(AliasctlError):
    """Raised when the host shell itself cannot be started."""


MINIMAL_CONFIG_EXAMPLE: str = "[alias]\n[alias.general]\nls = \"ls -l\""


def config_example_hint(prefix: str) -> str:
    """Return *prefix* followed by an indented minimal config example."""
    example = "\n".join(f"    {line}" for line in MINIMAL_CONFIG_EXAMPLE.splitlines())
    return f"{prefix}\n{example}"
