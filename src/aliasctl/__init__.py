"""aliasctl — named shortcuts for shell commands.

Aliases live in a TOML file, optionally grouped, and can be listed,
inspected, removed or executed from the command line.
"""

from aliasctl.version import __version__

__all__: list[str] = ["__version__"]
