"""
structlog setup for applications using resultex.

The library never configures logging on import. Call one of these from the
application's entry point:

    configure_structlog("DEBUG", renderer="json")
    configure_from_settings()          # reads RESULTEX_* environment variables
"""

from __future__ import annotations

import logging
from typing import Literal

import structlog

from resultex.config import ResultexSettings


def configure_structlog(
    log_level: str | int = "INFO",
    renderer: Literal["console", "json"] = "console",
) -> None:
    """
    Configure structlog for structured logging.

    In production: JSON lines to stdout (machine-readable).
    In development: colored, human-readable console output.
    Accepts a level name or a stdlib numeric level; unknown names fall back to INFO.
    """
    level = (
        log_level
        if isinstance(log_level, int)
        else getattr(logging, log_level.upper(), logging.INFO)
    )
    final_renderer = (
        structlog.processors.JSONRenderer()
        if renderer == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            final_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: ResultexSettings | None = None) -> ResultexSettings:
    """Load settings (from the environment unless given) and configure structlog."""
    settings = settings or ResultexSettings()
    configure_structlog(settings.numeric_log_level, renderer=settings.log_renderer)
    return settings
