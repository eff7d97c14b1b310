"""Structured logging for the Helix client.

The library itself only calls ``structlog.get_logger``; applications that want
the JSON output used in production call :func:`setup_logging` once at startup.
"""

import logging
from typing import Any, Optional

import structlog

from .config import get_global_settings


def setup_logging(log_level: Optional[str] = None, json_logs: bool = True) -> None:
    """
    Configure structlog on top of the stdlib logging module.

    :param log_level: Log level name; falls back to ``Settings.log_level``
    :param json_logs: Render JSON lines, or a human readable console format
    """
    level_name = (log_level or get_global_settings().log_level).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to the ``helix_api`` component."""
    return structlog.get_logger(name, component="helix_api")
