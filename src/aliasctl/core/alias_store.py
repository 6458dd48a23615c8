"""Core alias store — add/remove/list/show/execute over an :class:`AliasConfig`.

The store owns the two-level ``group → alias → command`` mapping and
enforces its access rules.  It never prints: every operation returns an
:class:`~aliasctl.core.models.AliasResult` that the CLI layer renders.

Scope resolution
----------------
* ``group=None`` always resolves to ``config.general``.
* ``group="name"`` resolves to the nested mapping only when the group
  table exists and contains ``name``; otherwise there is *no mapping*,
  which is distinct from an empty one.
"""

from __future__ import annotations

import logging

from aliasctl.core.models import AliasConfig, AliasMap, AliasResult, LookupStatus
from aliasctl.core.protocols import CommandRunner

logger = logging.getLogger(__name__)


class AliasStore:
    """Mutable view over one loaded configuration.

    Parameters
    ----------
    config:
        The configuration to operate on.  Edited in place.
    runner:
        Any object satisfying the :class:`CommandRunner` protocol; only
        :meth:`execute` uses it.
    """

    def __init__(self, config: AliasConfig, runner: CommandRunner) -> None:
        self._config: AliasConfig = config
        self._runner: CommandRunner = runner
        self._dirty: bool = False

    @property
    def config(self) -> AliasConfig:
        return self._config

    @property
    def dirty(self) -> bool:
        """``True`` once an add or a successful remove has been applied."""
        return self._dirty

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _get_scope(self, group: str | None) -> AliasMap | None:
        if group is None:
            return self._config.general
        if self._config.group is None:
            return None
        return self._config.group.get(group)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, alias: str, command: str, group: str | None = None) -> AliasResult:
        """Bind *alias* to *command*, creating *group* on demand.

        An existing binding in the same scope is overwritten.
        """
        if group is None:
            scope = self._config.general
        else:
            if self._config.group is None:
                self._config.group = {}
            scope = self._config.group.setdefault(group, {})

        previous = scope.get(alias)
        scope[alias] = command
        self._dirty = True
        logger.debug(
            "%s alias %r in %s",
            "Updated" if previous is not None else "Added",
            alias,
            _scope_label(group),
        )
        return AliasResult(LookupStatus.FOUND, entries=((alias, command),))

    def remove(self, alias: str, group: str | None = None) -> AliasResult:
        """Delete *alias* from its scope.  Emptied groups are kept."""
        scope = self._get_scope(group)
        if scope is None:
            return AliasResult(LookupStatus.GROUP_NOT_FOUND)
        if alias not in scope:
            return AliasResult(LookupStatus.ALIAS_NOT_FOUND)

        command = scope.pop(alias)
        self._dirty = True
        logger.debug("Removed alias %r from %s", alias, _scope_label(group))
        return AliasResult(LookupStatus.FOUND, entries=((alias, command),))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, group: str | None = None) -> AliasResult:
        """Return every ``(alias, command)`` pair in the scope."""
        scope = self._get_scope(group)
        if scope is None:
            return AliasResult(LookupStatus.GROUP_NOT_FOUND)
        if not scope:
            return AliasResult(LookupStatus.NO_ALIASES)
        return AliasResult(LookupStatus.FOUND, entries=tuple(scope.items()))

    def show(self, alias: str, group: str | None = None) -> AliasResult:
        scope = self._get_scope(group)
        if scope is None:
            return AliasResult(LookupStatus.GROUP_NOT_FOUND)
        if alias not in scope:
            return AliasResult(LookupStatus.ALIAS_NOT_FOUND)
        return AliasResult(LookupStatus.FOUND, entries=((alias, scope[alias]),))

    def execute(self, alias: str, group: str | None = None) -> AliasResult:
        """Run the command bound to *alias* through the command runner.

        Raises
        ------
        CommandSpawnError
            Propagated unchanged from the runner.
        """
        scope = self._get_scope(group)
        if scope is None:
            return AliasResult(LookupStatus.GROUP_NOT_FOUND)
        if alias not in scope:
            return AliasResult(LookupStatus.ALIAS_NOT_FOUND)

        command = scope[alias]
        logger.debug("Executing alias %r: %s", alias, command)
        outcome = self._runner.run(command)
        return AliasResult(
            LookupStatus.FOUND,
            entries=((alias, command),),
            command_result=outcome,
        )

    def contains(self, alias: str, group: str | None = None) -> bool:
        scope = self._get_scope(group)
        return scope is not None and alias in scope


def _scope_label(group: str | None) -> str:
    return "general" if group is None else f"group {group!r}"
