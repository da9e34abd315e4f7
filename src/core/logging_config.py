"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Events render as JSON lines on stderr, filtered at a per-logger level.
Each logger resolves its level when it first logs, so importing a
module never reads STRATA_LOG_LEVEL.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import structlog

from core.config import log_level_from_env

_CONFIGURED = False


def get_logger(name: str, level: str | None = None) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        level: Optional level for this logger only; read from
            STRATA_LOG_LEVEL on first use when omitted.

    Returns:
        A lazy structlog logger with structured output.

    Raises:
        StrataConfigError: On first use, if STRATA_LOG_LEVEL is invalid.
    """
    _configure_once()
    return structlog.wrap_logger(
        None,
        wrapper_class=_filtering_wrapper(level),
        logger_factory_args=(name,),
    )


def _configure_once() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def _filtering_wrapper(level: str | None) -> Callable[..., Any]:
    """Build a wrapper factory that picks its filter level at bind time.

    Args:
        level: Fixed level name, or None to read STRATA_LOG_LEVEL.

    Returns:
        Callable with the bound-logger constructor signature.
    """

    def build(logger: Any, processors: Any, context: Any) -> Any:
        level_name = level or log_level_from_env()
        wrapper_class = structlog.make_filtering_bound_logger(_level_number(level_name))
        return wrapper_class(logger, processors, context)

    return build


def _level_number(level_name: str) -> int:
    """Translate a level name into its numeric stdlib value.

    Args:
        level_name: Level name such as "DEBUG".

    Returns:
        Numeric logging level.
    """
    return int(getattr(logging, level_name.upper()))
