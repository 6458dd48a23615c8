"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and every alias command keep
working when Rich is not installed.

Two proxies are exported:

* :data:`console` — diagnostics (errors, hints) on **stderr**, rendered
  with Rich markup when available.
* :data:`output` — command results on **stdout**.  Never goes through
  Rich: alias commands and child output are written verbatim
  (no emoji codes, no tab expansion, no control-character stripping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from aliasctl.exceptions import AliasctlError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``AliasctlError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise AliasctlError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except AliasctlError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


class _OutputProxy:
	"""Plain stdout writer for user data."""

	def print(self, *objects: object) -> None:
		print(*objects, file=sys.stdout)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is not installed."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


console = _ConsoleProxy()
output = _OutputProxy()


def configure_logging(verbose: bool) -> None:
	"""Route ``aliasctl`` log records to stderr.

	DEBUG when *verbose*, WARNING otherwise.  Uses ``RichHandler`` when
	Rich is installed.
	"""
	level = logging.DEBUG if verbose else logging.WARNING
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
	else:
		handler = RichHandler(
			console=get_rich_console(),
			show_path=False,
			markup=False,
		)

	logger = logging.getLogger("aliasctl")
	for existing in list(logger.handlers):
		logger.removeHandler(existing)
	logger.addHandler(handler)
	logger.setLevel(level)
