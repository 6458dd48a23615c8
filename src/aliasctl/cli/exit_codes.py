"""Exit-code constants used by the CLI layer.

Informational outcomes ("Alias not found", "Group not found",
"No aliases found") are not errors and exit with :data:`SUCCESS`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed, including informational not-found outcomes."""

GENERAL_ERROR: int = 1
"""A known AliasctlError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
