"""structlog setup on top of the standard logging module."""

import logging
import sys

import structlog

from backend.app.core.settings import get_settings


def setup_logging() -> None:
    """
    Configure structlog and stdlib logging.
    Key/value lines go to stdout by default; set LOG_JSON=true for JSON lines.
    """
    settings = get_settings()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    renderer = structlog.processors.JSONRenderer() if settings.log_json else structlog.processors.KeyValueRenderer(
        key_order=["timestamp", "level", "event"]
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger("quotations")
