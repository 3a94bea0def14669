"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — every source was wrapped and the sink was closed."""

GENERAL_ERROR: int = 1
"""Runtime failure: an I/O error or an unexpected exception."""

USAGE_ERROR: int = 64
"""Help was shown, or the command line was invalid.  ``EX_USAGE`` from sysexits.h."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
