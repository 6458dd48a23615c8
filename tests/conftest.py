"""Shared pytest fixtures and configuration for the aliasctl test suite.

Guidelines
----------
* No test reads or writes ``config.toml`` in the working directory.
* The file-access port is replaced with :class:`InMemoryFileAccess`.
* Shell execution is replaced with :class:`FakeRunner` unless a test
  patches ``subprocess.run`` explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from aliasctl.core.alias_store import AliasStore
from aliasctl.core.models import AliasConfig, CommandResult
from aliasctl.infra.file_access import InMemoryFileAccess

CONFIG_PATH = "config.toml"

SAMPLE_CONFIG = """\
[alias]
[alias.general]
ls = "ls -l"
ll = "ls -al"

[alias.group.aws]
aws_help = "aws --help"
aws_version = "aws --version"
"""

GENERAL_ONLY_CONFIG = """\
[alias]
[alias.general]
ls = "ls -l"
"""


class FakeRunner:
    """Records commands instead of spawning a shell."""

    def __init__(self, result: CommandResult | None = None) -> None:
        self.commands: list[str] = []
        self.result = result or CommandResult(returncode=0, stdout="ran\n", stderr="")

    def run(self, command: str) -> CommandResult:
        self.commands.append(command)
        return self.result


def sample_config() -> AliasConfig:
    return AliasConfig(
        general={"ls": "ls -l", "ll": "ls -al"},
        group={"aws": {"aws_help": "aws --help", "aws_version": "aws --version"}},
    )


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def store(runner: FakeRunner) -> AliasStore:
    return AliasStore(sample_config(), runner)


@pytest.fixture()
def files() -> InMemoryFileAccess:
    return InMemoryFileAccess({CONFIG_PATH: SAMPLE_CONFIG})


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ALIASCTL_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_aliasctl_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("aliasctl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
