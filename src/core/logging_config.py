"""Structured logging configuration.

This module initializes structlog with a stable JSON line format.
Events go to stderr so CLI result lines on stdout stay parseable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL

_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and level filtering.

    Args:
        level: Minimum level name, e.g. ``INFO`` or ``DEBUG``.
    """
    global _CONFIGURED_LEVEL
    normalized_level = level.upper()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(normalized_level)
        ),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
    _CONFIGURED_LEVEL = normalized_level


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger whose events carry the module name.
    """
    if _CONFIGURED_LEVEL is None:
        configure_logging()
    return structlog.get_logger(name, module=name)


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    # Resolve stderr per call so redirected streams are honored.
    return structlog.PrintLogger(file=sys.stderr)
