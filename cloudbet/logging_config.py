"""Structured logging setup."""

import logging

import structlog

from cloudbet.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Logging level name; defaults to the configured log_level
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(format="%(message)s", level=level_name)
    logging.getLogger().setLevel(level_name)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
