"""Route a parsed ``alias`` sub-command to the store and render the outcome.

Routing (:func:`dispatch`) and rendering (:func:`render_result`) are kept
apart so that the routing step stays free of output and can be tested
against the returned :class:`~aliasctl.core.models.AliasResult`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from aliasctl.cli.console import output
from aliasctl.core.alias_store import AliasStore
from aliasctl.core.models import AliasResult, CommandResult


class AliasOperation(enum.Enum):
    ADD = "add"
    REMOVE = "remove"
    LIST = "list"
    SHOW = "show"
    EXEC = "exec"


@dataclass(frozen=True, slots=True)
class AliasRequest:
    """One user-selected operation and its arguments.

    ``alias`` is required by every operation except LIST and ``command``
    only by ADD; argparse enforces this before a request is built.
    """

    operation: AliasOperation
    alias: str | None = None
    command: str | None = None
    group: str | None = None


def dispatch(request: AliasRequest, store: AliasStore) -> AliasResult:
    """Forward *request* to the store operation of the same name."""
    op = request.operation
    if op is AliasOperation.LIST:
        return store.list(request.group)

    if request.alias is None:
        raise ValueError(f"{op.value} requires an alias name")

    if op is AliasOperation.ADD:
        if request.command is None:
            raise ValueError("add requires a command")
        return store.add(request.alias, request.command, request.group)
    if op is AliasOperation.REMOVE:
        return store.remove(request.alias, request.group)
    if op is AliasOperation.SHOW:
        return store.show(request.alias, request.group)
    return store.execute(request.alias, request.group)


def render_result(request: AliasRequest, result: AliasResult) -> None:
    """Print *result* to stdout in the form the user asked for."""
    message = result.status.message
    if message is not None:
        output.print(message)
        return

    if request.operation in (AliasOperation.ADD, AliasOperation.REMOVE):
        # Mutations are silent on success.
        return

    if request.operation is AliasOperation.EXEC:
        if result.command_result is not None:
            render_command_result(result.command_result)
        return

    for alias, command in result.entries:
        output.print(f"{alias}: {command}")


def format_status(returncode: int) -> str:
    """Describe an exit status; negative codes mean the child was killed by a signal."""
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status: {returncode}"


def render_command_result(outcome: CommandResult) -> None:
    output.print(f"status: {format_status(outcome.returncode)}")
    output.print(f"stdout: {outcome.stdout}")
    output.print(f"stderr: {outcome.stderr}")
