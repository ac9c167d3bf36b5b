"""
Password Hasher Logging
=======================
Structured logging setup for applications embedding the hasher.

Usage:
    from passhash_core.log import setup_logging

    setup_logging(level="DEBUG", json_output=False)

Modules in this package log through ``structlog.get_logger(__name__)``.
Passwords, salts, keys and hash bytes are never passed to a logger.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import load_settings


def setup_logging(level: Optional[str] = None, json_output: bool = True) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to PASSHASH_LOG_LEVEL.
        json_output: Render JSON lines (production) instead of console output
    """
    level_name = (level or load_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).info("logging_configured", level=level_name)
