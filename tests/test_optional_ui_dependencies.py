"""Regression tests for the optional Rich dependency.

Every command must keep working with plain ``print`` output when Rich
is not installed.
"""

from __future__ import annotations

import logging
import sys

import pytest

from aliasctl.cli import exit_codes
from aliasctl.cli.app import main
from aliasctl.cli.console import configure_logging, escape
from aliasctl.infra.file_access import InMemoryFileAccess
from conftest import CONFIG_PATH, SAMPLE_CONFIG, FakeRunner


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_list_falls_back_to_print(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    files = InMemoryFileAccess({CONFIG_PATH: SAMPLE_CONFIG})

    code = main(["-v", "alias", "list", "-g", "aws"], file_access=files, runner=FakeRunner())
    assert code == exit_codes.SUCCESS
    assert "aws_help: aws --help" in capsys.readouterr().out


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    configure_logging(verbose=True)
    handlers = logging.getLogger("aliasctl").handlers
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert escape("[alias]") == "[alias]"
