"""Configuration module: Pydantic Settings and structlog setup.

Usage:
    from worldgraph.config import WorldSettings, configure_logging

    configure_logging(WorldSettings(log_level="INFO"))
"""

from worldgraph.config.log import configure_logging, get_logger
from worldgraph.config.settings import WorldSettings, get_settings

__all__ = [
    "WorldSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
