"""Core layer — domain models, the application contract, and the runner.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli``.
* Failures are returned or raised, never rendered.
"""

from quantcycle.core.application import QuantCycle
from quantcycle.core.models import AppConfig, CliArguments, RunOutcome
from quantcycle.core.protocols import Application
from quantcycle.core.runner import run_application

__all__: list[str] = [
    "AppConfig",
    "Application",
    "CliArguments",
    "QuantCycle",
    "RunOutcome",
    "run_application",
]
