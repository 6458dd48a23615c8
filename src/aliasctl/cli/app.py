"""CLI application entry point and command routing for aliasctl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~aliasctl.exceptions.AliasctlError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — alias semantics belong to
  :class:`~aliasctl.core.alias_store.AliasStore`.
* One invocation is exactly one load → one operation → at most one save.
* The configuration is written back only when the store reports a
  mutation; read-only commands never rewrite the file.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from aliasctl.cli import exit_codes
from aliasctl.cli.console import configure_logging, console, escape
from aliasctl.cli.dispatcher import AliasOperation, AliasRequest, dispatch, render_result
from aliasctl.core.protocols import CommandRunner, FileAccess
from aliasctl.exceptions import AliasctlError
from aliasctl.version import __version__

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: str = "config.toml"
CONFIG_ENV_VAR: str = "ALIASCTL_CONFIG"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_alias_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-a", "--alias", required=True, help="Alias name.")


def _add_group_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-g",
        "--group",
        default=None,
        help="Group name.  Omit to use the general scope.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``aliasctl alias add|remove|list|show|exec ...``
    * ``aliasctl --version``
    """
    parser = argparse.ArgumentParser(
        prog="aliasctl",
        description="Manage named shortcuts for shell commands.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="PATH",
        help=(
            f"Configuration file.  Defaults to ${CONFIG_ENV_VAR}, "
            f"then ./{DEFAULT_CONFIG_PATH}."
        ),
    )

    commands = parser.add_subparsers(dest="verb")
    alias_parser = commands.add_parser("alias", help="Alias usage")
    actions = alias_parser.add_subparsers(dest="operation", required=True)

    add = actions.add_parser(AliasOperation.ADD.value, help="Add alias")
    _add_alias_option(add)
    add.add_argument(
        "-c",
        "--command",
        dest="command_text",
        required=True,
        help="Shell command to bind.",
    )
    _add_group_option(add)

    remove = actions.add_parser(AliasOperation.REMOVE.value, help="Remove alias")
    _add_alias_option(remove)
    _add_group_option(remove)

    list_ = actions.add_parser(AliasOperation.LIST.value, help="List aliases")
    _add_group_option(list_)

    show = actions.add_parser(AliasOperation.SHOW.value, help="Show alias")
    _add_alias_option(show)
    _add_group_option(show)

    exec_ = actions.add_parser(AliasOperation.EXEC.value, help="Execute alias")
    _add_alias_option(exec_)
    _add_group_option(exec_)

    return parser


def _request_from_args(args: argparse.Namespace) -> AliasRequest:
    return AliasRequest(
        operation=AliasOperation(args.operation),
        alias=getattr(args, "alias", None),
        command=getattr(args, "command_text", None),
        group=args.group,
    )


def resolve_config_path(explicit: str | None) -> str:
    """Return the config path: ``--config``, then the env var, then the default."""
    if explicit:
        return explicit
    return os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_alias(
    request: AliasRequest,
    config_path: str,
    *,
    file_access: FileAccess | None = None,
    runner: CommandRunner | None = None,
) -> int:
    """Load the config, apply *request*, and save when it changed anything."""
    from aliasctl.core.alias_store import AliasStore
    from aliasctl.core.storage import load_config, save_config
    from aliasctl.infra.file_access import LocalFileAccess
    from aliasctl.infra.shell_runner import ShellCommandRunner

    file_access = file_access if file_access is not None else LocalFileAccess()
    runner = runner if runner is not None else ShellCommandRunner()

    config = load_config(file_access, config_path)
    store = AliasStore(config, runner)

    result = dispatch(request, store)
    render_result(request, result)

    if store.dirty:
        save_config(file_access, config_path, store.config)
    else:
        logger.debug("No changes; %s left untouched", config_path)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    file_access: FileAccess | None = None,
    runner: CommandRunner | None = None,
) -> int:
    """Run the aliasctl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    file_access, runner:
        Optional port implementations.  Default to the local filesystem
        and the host shell; tests pass in-memory substitutes.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verb is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    config_path = resolve_config_path(args.config)
    logger.debug("Using configuration file %s", config_path)

    return _handle_alias(
        _request_from_args(args),
        config_path,
        file_access=file_access,
        runner=runner,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AliasctlError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
