"""
Structured logging setup.

Modules log through ``structlog.get_logger()`` with dotted event names;
this wires the level filter and renderer from Settings once at startup.
"""

import logging

import structlog

from core.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog: console output for local use, JSON for production."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.strip().upper())

    if settings.log_format.strip().lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
    structlog.get_logger().debug("logging.configured", app=settings.app_name, level=settings.log_level)
