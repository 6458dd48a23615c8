"""Domain models for aliasctl.

:class:`AliasConfig` is the only mutable model — it is the in-memory
image of the configuration file and the store edits it in place.
Everything else is a **frozen** value object with no behaviour beyond
data access.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from aliasctl.exceptions import ConfigParseError, config_example_hint


AliasMap = dict[str, str]
"""Alias name → command string for a single scope."""


# ---------------------------------------------------------------------------
# Persisted configuration
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class AliasConfig:
    """Two-level alias mapping: the general scope plus named groups."""

    general: AliasMap = field(default_factory=dict)
    """Default (ungrouped) scope.  Always present, may be empty."""

    group: dict[str, AliasMap] | None = None
    """Named groups, or ``None`` until the first grouped alias is added."""

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> AliasConfig:
        """Build a config from a parsed TOML document.

        Raises
        ------
        ConfigParseError
            When the ``alias``/``alias.general`` tables are missing or a
            command is not a string.
        """
        alias_table = document.get("alias")
        if not isinstance(alias_table, dict):
            raise ConfigParseError(
                "Configuration has no [alias] table.",
                hint=config_example_hint("A minimal configuration looks like:"),
            )

        general_table = alias_table.get("general")
        if not isinstance(general_table, dict):
            raise ConfigParseError(
                "Configuration has no [alias.general] table.",
                hint=config_example_hint("A minimal configuration looks like:"),
            )
        general = _alias_map(general_table, "alias.general")

        group: dict[str, AliasMap] | None = None
        if "group" in alias_table:
            group_table = alias_table["group"]
            if not isinstance(group_table, dict):
                raise ConfigParseError("[alias.group] must be a table of tables.")
            group = {}
            for name, table in group_table.items():
                if not isinstance(table, dict):
                    raise ConfigParseError(
                        f"[alias.group.{name}] must be a table of aliases."
                    )
                group[name] = _alias_map(table, f"alias.group.{name}")

        return cls(general=general, group=group)

    def to_document(self) -> dict[str, Any]:
        """Return the TOML document for this config (inverse of :meth:`from_document`)."""
        alias_table: dict[str, Any] = {"general": dict(self.general)}
        if self.group is not None:
            alias_table["group"] = {
                name: dict(aliases) for name, aliases in self.group.items()
            }
        return {"alias": alias_table}


def _alias_map(table: dict[str, Any], where: str) -> AliasMap:
    for alias, command in table.items():
        if not isinstance(command, str):
            raise ConfigParseError(
                f"Alias '{alias}' in [{where}] must map to a command string, "
                f"got {type(command).__name__}.",
            )
    return dict(table)


# ---------------------------------------------------------------------------
# Operation outcomes
# ---------------------------------------------------------------------------

class LookupStatus(enum.Enum):
    """Outcome of resolving an alias or scope inside the store."""

    FOUND = "found"
    ALIAS_NOT_FOUND = "Alias not found"
    GROUP_NOT_FOUND = "Group not found"
    NO_ALIASES = "No aliases found"

    @property
    def message(self) -> str | None:
        """User-facing text, or ``None`` for :attr:`FOUND`."""
        if self is LookupStatus.FOUND:
            return None
        return self.value


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of one shell command."""

    returncode: int
    stdout: str
    stderr: str


@dataclass(frozen=True, slots=True)
class AliasResult:
    """What a store operation produced.

    ``entries`` holds ``(alias, command)`` pairs for list/show, and
    ``command_result`` is set only by a successful execute.
    """

    status: LookupStatus
    entries: tuple[tuple[str, str], ...] = ()
    command_result: CommandResult | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND
