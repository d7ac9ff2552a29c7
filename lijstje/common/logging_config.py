"""
Structured logging setup (structlog)

Call configure_logging() once at process start. Library modules only do
`logger = structlog.get_logger()` and emit snake_case events with context.
"""
import logging
from typing import Optional

import structlog

from lijstje.common.config import get_settings


def configure_logging(level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """
    Configure structlog processors and the minimum log level.

    Args:
        level: Log level name, defaults to LOG_LEVEL from settings
        json: Render JSON lines (production) instead of console output
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    render_json = settings.log_json if json is None else json

    renderer = (
        structlog.processors.JSONRenderer()
        if render_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
