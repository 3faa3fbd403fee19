"""Custom exception hierarchy for quantcycle.

Errors raised by the package itself inherit from :class:`QuantCycleError`
so the CLI error boundary can render a message and an optional hint
without leaking a stack trace.  The application operation may raise
anything; the runner captures it regardless of type.

Hierarchy
---------
QuantCycleError
├── ApplicationError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class QuantCycleError(Exception):
    """Base exception for all quantcycle errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class ApplicationError(QuantCycleError):
    """Raised when the application operation fails."""


class ConfigurationError(QuantCycleError):
    """Raised when configuration values cannot be accepted."""


class EnvironmentError(QuantCycleError):
    """Raised when a required runtime dependency is not available."""
