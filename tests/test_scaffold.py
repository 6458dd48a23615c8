"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from aliasctl import __version__
from aliasctl.cli import exit_codes
from aliasctl.cli.app import main
from aliasctl.exceptions import (
    AliasctlError,
    CommandSpawnError,
    ConfigError,
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigSaveError,
    config_example_hint,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigError,
            ConfigLoadError,
            ConfigNotFoundError,
            ConfigParseError,
            ConfigSaveError,
            CommandSpawnError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[AliasctlError]
    ) -> None:
        assert issubclass(exc_class, AliasctlError)

    def test_not_found_is_a_load_error(self) -> None:
        assert issubclass(ConfigNotFoundError, ConfigLoadError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(AliasctlError, Exception)

    def test_hint_is_stored(self) -> None:
        err = AliasctlError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = AliasctlError("boom")
        assert err.hint is None

    def test_config_example_hint(self) -> None:
        hint = config_example_hint("Example:")
        assert hint.splitlines()[0] == "Example:"
        assert '    ls = "ls -l"' in hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "alias" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_alias_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from aliasctl.cli import app as app_module

        seen: list[object] = []
        monkeypatch.setattr(
            app_module,
            "_handle_alias",
            lambda request, path, **_kw: seen.append((request, path)) or exit_codes.SUCCESS,
        )
        code = main(["alias", "show", "-a", "ls", "-g", "aws"])
        assert code == exit_codes.SUCCESS
        request, path = seen[0]  # type: ignore[misc]
        assert request.alias == "ls"
        assert request.group == "aws"
        assert path == "config.toml"
