"""Structured logging configuration."""

from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a structlog logger that emits through stdlib ``logging``.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger rendering JSON events. Processors are bound to this
        logger only, so structlog's global configuration is left to the
        application, and levels and handlers follow the stdlib logger ``name``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
