"""Shared pytest fixtures and configuration for the quantcycle test suite.

Guidelines
----------
* The application class is replaced at its import location
  (``quantcycle.core.application.QuantCycle``) — the bootstrap imports
  it lazily.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from quantcycle.core.models import AppConfig


class RecordingApp:
    """Stand-in application that records its construction config."""

    instances: list[RecordingApp] = []
    error: BaseException | None = None

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.executed = False
        RecordingApp.instances.append(self)

    async def execute(self) -> None:
        self.executed = True
        if RecordingApp.error is not None:
            raise RecordingApp.error


@pytest.fixture
def recording_app(monkeypatch: pytest.MonkeyPatch) -> type[RecordingApp]:
    """Install :class:`RecordingApp` in place of the real application."""
    RecordingApp.instances = []
    RecordingApp.error = None
    monkeypatch.setattr("quantcycle.core.application.QuantCycle", RecordingApp)
    return RecordingApp


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("quantcycle")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
