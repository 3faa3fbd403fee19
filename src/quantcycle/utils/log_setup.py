"""Logging configuration for the quantcycle package.

A single handler is attached to the ``quantcycle`` package logger and
writes to stderr.  Rich is used for rendering when it is installed; a
plain :class:`logging.StreamHandler` is used otherwise.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "quantcycle"
PLAIN_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_MARKER = "_quantcycle_handler"


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    verbose:
        ``DEBUG`` level when true, ``WARNING`` otherwise.

    Calling this again replaces the previously installed handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for existing in logger.handlers[:]:
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)

    handler = _build_handler()
    handler.setLevel(level)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)

    logger.debug("Logging configured. Level=%s", logging.getLevelName(level))
    return logger
