"""The QuantCycle application object.

Its real work lives outside this package.  The class here satisfies the
:class:`~quantcycle.core.protocols.Application` contract so the
bootstrap can construct and run it.
"""

from __future__ import annotations

import logging

from quantcycle.core.models import AppConfig

logger = logging.getLogger(__name__)


class QuantCycle:
    """Application entry object.

    Parameters
    ----------
    config:
        Configuration subset built by the bootstrap.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config: AppConfig = config

    async def execute(self) -> None:
        """Run the application operation."""
        logger.debug("QuantCycle starting (verbose=%s)", self.config.verbose)
        logger.debug("QuantCycle finished")
