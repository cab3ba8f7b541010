"""Structured logging setup."""

import logging
import sys

import structlog

from core.config import Settings, settings


def setup_logging(app_settings: Settings | None = None) -> None:
    """Configure structlog for the whole process.

    Renders to the console when attached to a terminal and to JSON lines
    otherwise, unless ``LOG_JSON`` forces JSON.
    """
    app_settings = app_settings or settings
    level = logging.getLevelName(app_settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer: structlog.types.Processor
    if app_settings.log_json or not sys.stdout.isatty():
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        # Each create_app() may reconfigure, so loggers must not pin the first config.
        cache_logger_on_first_use=False,
    )
