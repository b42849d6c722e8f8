"""Configuration management for the dungeon crawler engine.

This module provides centralized configuration management using
pydantic-settings, supporting environment variables, .env files, and
runtime configuration overrides.

Example:
    >>> from dungeon_crawler.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.flee_chance
    50

Environment Variables:
    DUNGEON_CRAWLER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DUNGEON_CRAWLER_LOG_JSON: Emit JSON logs instead of console output
    DUNGEON_CRAWLER_GAME_FLEE_CHANCE: Percent chance that fleeing succeeds
    DUNGEON_CRAWLER_GAME_REST_STAMINA: Stamina restored by resting between rooms
    DUNGEON_CRAWLER_GAME_SEED: Seed for the default dice roller
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dungeon_crawler.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Tunable rules of the combat and exploration engine.

    Attributes:
        flee_chance: Percent chance that a flee attempt succeeds.
        rest_stamina: Maximum stamina restored by a rest between rooms.
        extra_monster_chance: Percent chance that a room gets one extra monster.
        min_monsters_per_room: Lower clamp for the room roster size.
        max_monsters_per_room: Upper clamp for the room roster size.
        max_difficulty: Highest difficulty a monster can be scaled to.
        inventory_capacity: Default number of items a character can carry.
        default_species: Species used when a dungeon lists none.
        seed: Optional seed for the default dice roller.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CRAWLER_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    flee_chance: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Percent chance that fleeing succeeds",
    )
    rest_stamina: int = Field(
        default=20,
        ge=0,
        description="Stamina restored by resting between rooms",
    )
    extra_monster_chance: int = Field(
        default=30,
        ge=0,
        le=100,
        description="Percent chance of an extra monster in a room",
    )
    min_monsters_per_room: int = Field(
        default=1,
        ge=1,
        description="Minimum monsters in a non-empty room",
    )
    max_monsters_per_room: int = Field(
        default=4,
        ge=1,
        description="Maximum monsters in a room",
    )
    max_difficulty: int = Field(
        default=3,
        ge=1,
        description="Highest monster difficulty",
    )
    inventory_capacity: int = Field(
        default=20,
        ge=1,
        description="Default inventory capacity",
    )
    default_species: str = Field(
        default="goblin",
        min_length=1,
        description="Fallback species for dungeons without monster types",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the default dice roller",
    )

    @field_validator("default_species", mode="after")
    @classmethod
    def normalize_species(cls, value: str) -> str:
        """Store species names the way the monster factory looks them up.

        Raises:
            ConfigurationError: If the name is not a known species.
        """
        from dungeon_crawler.models.enums import Species

        name = value.strip().lower()
        try:
            Species(name)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown default species: {value!r}",
                config_key="default_species",
                details={"valid_species": [species.value for species in Species]},
            ) from exc
        return name

    @model_validator(mode="after")
    def validate_room_bounds(self) -> Self:
        """Ensure the room size clamp is a valid range.

        Raises:
            ConfigurationError: If min_monsters_per_room > max_monsters_per_room.
        """
        if self.min_monsters_per_room > self.max_monsters_per_room:
            raise ConfigurationError(
                f"min_monsters_per_room ({self.min_monsters_per_room}) must not exceed "
                f"max_monsters_per_room ({self.max_monsters_per_room})",
                config_key="min_monsters_per_room",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version.
        log_level: Logging level.
        log_json: Emit JSON logs.
        game: Engine rule settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CRAWLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="Dungeon Crawler",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON logs",
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
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    This is primarily useful for testing or when environment variables
    have changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
