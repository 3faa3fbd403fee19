"""Core runner — drives the application operation to completion.

The asynchronous completion or failure of :meth:`Application.execute`
is re-expressed as a :class:`~quantcycle.core.models.RunOutcome`
returned from a blocking call.

Guarantees
----------
* Exactly one event loop is started and closed per call.
* Every ``Exception`` or ``asyncio.CancelledError`` raised by the
  operation is captured, never retried.
* ``KeyboardInterrupt`` and ``SystemExit`` are not captured.
* No ``print()``; callers decide how to report a failure.
"""

from __future__ import annotations

import asyncio
import logging

from quantcycle.core.models import RunOutcome
from quantcycle.core.protocols import Application

logger = logging.getLogger(__name__)


async def _settle(app: Application) -> RunOutcome:
    try:
        await app.execute()
    except (Exception, asyncio.CancelledError) as exc:
        logger.debug("Application operation failed: %r", exc)
        return RunOutcome.failure(exc)
    logger.debug("Application operation completed")
    return RunOutcome.success()


def run_application(app: Application) -> RunOutcome:
    """Run ``app.execute()`` on a fresh event loop and return its outcome."""
    logger.debug("Starting application operation on %s", type(app).__name__)
    return asyncio.run(_settle(app))
