"""Allow ``python -m aliasctl`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m aliasctl`` behaves identically to the ``aliasctl`` console
script.
"""

from __future__ import annotations

from aliasctl.cli.app import cli

if __name__ == "__main__":
    cli()
