"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        TrackerError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        GameEngineError, CombatError, DiceRollError, TurnManagementError:
            Encounter and dice errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_logging_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from initiative_tracker.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from initiative_tracker.core.exceptions import (
    CombatError,
    ConfigurationError,
    DiceRollError,
    GameEngineError,
    TrackerError,
    TurnManagementError,
)
from initiative_tracker.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Exceptions
    "TrackerError",
    "ConfigurationError",
    "GameEngineError",
    "CombatError",
    "DiceRollError",
    "TurnManagementError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
