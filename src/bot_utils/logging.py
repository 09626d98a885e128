"""Structured logging with structlog.

Logs always go to stderr: stdout is reserved for the analysis payload the
CLI prints.
"""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


@lru_cache(maxsize=1)
def _configure_logging(*, is_production: bool, min_level: int) -> None:
    """Configure structlog for the application.

    Args:
        is_production: Use JSON output for production, colorized for dev.
        min_level: Lowest stdlib level that is emitted.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if is_production:
        # JSON lines for log aggregation
        structlog.configure(
            processors=[
                *shared_processors,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=True,
        )
    else:
        structlog.configure(
            processors=[
                *shared_processors,
                structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=True,
        )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger for a specific module/service.

    Args:
        name: Logger name (typically module name like "bot_scoring.cli").

    Returns:
        Configured structlog logger with service context.

    Example:
        >>> log = get_logger("bot_scoring.cli")
        >>> log.info("analysis_complete", bot_likelihood=100, override=True)
    """
    from bot_utils.settings import get_settings

    settings = get_settings()
    _configure_logging(is_production=settings.is_production, min_level=settings.min_level)

    return structlog.get_logger(service=name)
