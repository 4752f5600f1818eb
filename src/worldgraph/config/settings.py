"""Configuration settings using Pydantic Settings.

Usage:
    from worldgraph.config import WorldSettings

    # Load from environment variables (WORLDGRAPH_*) or .env
    settings = WorldSettings()

    # Or override with explicit values
    settings = WorldSettings(reject_duplicate_ids=False)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorldSettings(BaseSettings):
    """Settings for world construction and logging.

    Attributes:
        reject_duplicate_ids: Raise on repeated room or item identifiers. When
            disabled, the first room registered under an identifier wins every
            lookup.
        default_title: Title used when the record source does not supply one.
        log_level: Minimum level emitted by ``configure_logging``.
        log_json: Render log lines as JSON instead of console text.

    Environment Variables:
        WORLDGRAPH_REJECT_DUPLICATE_IDS
        WORLDGRAPH_DEFAULT_TITLE
        WORLDGRAPH_LOG_LEVEL
        WORLDGRAPH_LOG_JSON
    """

    model_config = SettingsConfigDict(
        env_prefix="WORLDGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reject_duplicate_ids: bool = True
    default_title: str = "Untitled World"
    log_level: str = Field(default="WARNING", description="DEBUG, INFO, WARNING or ERROR")
    log_json: bool = False


@lru_cache
def get_settings() -> WorldSettings:
    """Get cached settings instance."""
    return WorldSettings()
