"""Configuration management for the initiative tracker.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file.

Example:
    >>> from initiative_tracker.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.log_level)
    'INFO'

Environment Variables:
    INITIATIVE_TRACKER_DEBUG: Enable debug mode
    INITIATIVE_TRACKER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    INITIATIVE_TRACKER_JSON_LOGS: Emit JSON log lines instead of console output
    INITIATIVE_TRACKER_GAME_DICE_SEED: Seed for the default dice roller
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from initiative_tracker.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Configuration for dice and encounter behavior.

    Attributes:
        dice_seed: Seed for the default dice roller. ``None`` draws from
            system entropy.
    """

    model_config = SettingsConfigDict(
        env_prefix="INITIATIVE_TRACKER_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    dice_seed: int | None = Field(
        default=None,
        description="Seed for the default dice roller",
    )


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        game: Dice and encounter settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="INITIATIVE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
