"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DungeonCrawlerError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        GameEngineError: Engine errors (state, dice, monster creation).

    Configuration:
        Settings: Main application settings class.
        GameSettings: Engine rule settings.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context / clear_context / bound_context: Logging context helpers.
"""

from __future__ import annotations

from dungeon_crawler.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dungeon_crawler.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    DungeonCrawlerError,
    GameEngineError,
    InvalidGameStateError,
    MonsterCreationError,
)
from dungeon_crawler.core.logging import (
    bind_context,
    bound_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DungeonCrawlerError",
    "ConfigurationError",
    "GameEngineError",
    "InvalidGameStateError",
    "DiceRollError",
    "MonsterCreationError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "bound_context",
]
