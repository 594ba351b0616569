"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
Subcommand handlers may return any other integer; it is passed through
to the process unchanged.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — also used for the soft-failure paths (bad mode, no mode)."""

GENERAL_ERROR: int = 1
"""A known SecvarctlError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

ARG_PARSE_FAIL: int = 3
"""No subcommand followed the global flags."""

UNKNOWN_COMMAND: int = 4
"""The subcommand is not in the selected backend's command table."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
