"""structlog setup shared by the library and its pytest plugin.

Console rendering by default, JSON lines when ``CLASSMOCK_LOG_JSON`` is set.
Events below ``CLASSMOCK_LOG_LEVEL`` are dropped by the bound logger itself.
A host application that already configured structlog keeps its own setup.
"""

from __future__ import annotations

import logging

import structlog

from classmock.config import Settings, get_settings


def configure_logging(settings: Settings | None = None, *, force: bool = False) -> None:
    """Configure structlog unless it is already configured.

    Args:
        settings: Settings to read the level and renderer from. Defaults to
            ``get_settings()``.
        force: Reconfigure even if structlog was already set up.
    """
    if structlog.is_configured() and not force:
        return

    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if settings.log_json
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
