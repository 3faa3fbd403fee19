"""Protocols (interfaces) consumed by the core layer.

The runner depends ONLY on these protocols, never on the concrete
application class, so any object with a matching ``execute`` coroutine
can be run.
"""

from __future__ import annotations

from typing import Protocol


class Application(Protocol):
    """Contract for the object driven by the bootstrapper.

    Any object that implements :meth:`execute` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    async def execute(self) -> None:
        """Perform the application's work.

        Completes normally on success.  Any exception raised is treated
        as an application failure by the runner.
        """
        ...  # pragma: no cover
