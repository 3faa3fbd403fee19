"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the application operation completed without error."""

GENERAL_ERROR: int = 1
"""The application operation failed. The error was written to stderr."""

UNEXPECTED_ERROR: int = 2
"""A defect in the bootstrap itself, outside the application operation."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
