"""Structured logging setup.

Modules log through ``get_logger(__name__)`` with key/value context. Nothing is
configured at import time; applications call ``configure_logging`` once.

Usage:
    from worldgraph.config import configure_logging, get_logger

    configure_logging(WorldSettings(log_level="DEBUG"))
    logger = get_logger(__name__)
    logger.info("World constructed", rooms=3)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from worldgraph.config.settings import WorldSettings


def configure_logging(settings: WorldSettings | None = None) -> None:
    """Configure structlog processors and the level filter.

    Args:
        settings: Source of ``log_level`` and ``log_json``. Cached settings are
            used when omitted.
    """
    if settings is None:
        from worldgraph.config.settings import get_settings

        settings = get_settings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
