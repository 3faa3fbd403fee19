"""Domain models for quantcycle.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and construction helpers.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CliArguments:
    """Arguments record produced from the raw process argument vector.

    Every field is optional and independently present or absent.
    """

    verbose: bool = False
    """``True`` when ``-v``/``--verbose`` was given."""

    input: str | None = None
    """Value of ``-i``/``--input``, passed through unchanged."""

    output: str | None = None
    """Value of ``-o``/``--output``, passed through unchanged."""


# ---------------------------------------------------------------------------
# Application configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AppConfig:
    """Configuration handed to the application constructor."""

    verbose: bool = False

    @classmethod
    def from_arguments(cls, args: CliArguments) -> AppConfig:
        """Build the configuration subset the application accepts.

        Only ``verbose`` is forwarded; ``input`` and ``output`` stay on
        the arguments record.
        """
        return cls(verbose=bool(args.verbose))


# ---------------------------------------------------------------------------
# Operation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunOutcome:
    """Settled result of the application operation.

    Either a success (``error is None``) or a failure carrying the
    exception the operation raised.
    """

    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> RunOutcome:
        return cls()

    @classmethod
    def failure(cls, error: BaseException) -> RunOutcome:
        return cls(error=error)
