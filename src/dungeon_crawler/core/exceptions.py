"""Custom exception hierarchy for the dungeon crawler engine.

All exceptions inherit from DungeonCrawlerError, enabling unified error
handling at the application boundary while preserving domain-specific
context in the ``details`` mapping.

Most failure modes of the engine are absorbed internally and reported as
outcome values; these exceptions cover programming errors and invalid
configuration.

Example:
    >>> from dungeon_crawler.core.exceptions import MonsterCreationError
    >>> raise MonsterCreationError("Unknown monster", species="dragon")
"""

from __future__ import annotations

from typing import Any


class DungeonCrawlerError(Exception):
    """Base exception for all dungeon crawler errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(DungeonCrawlerError):
    """Base exception for all game engine errors.

    Raised when there are issues with encounter state, monster creation
    or random number generation.
    """


class InvalidGameStateError(GameEngineError):
    """Raised when an operation is attempted in the wrong state.

    This typically occurs when a combat round is requested for an
    encounter that has already ended.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


class DiceRollError(GameEngineError):
    """Raised when a random roll is requested with an invalid range."""

    def __init__(
        self,
        message: str,
        *,
        sides: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with range context.

        Args:
            message: Human-readable error description.
            sides: The requested number of outcomes.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if sides is not None:
            combined_details["sides"] = sides
        super().__init__(message, details=combined_details)


class MonsterCreationError(GameEngineError):
    """Raised when a monster cannot be instantiated.

    The encounter generator catches this and skips the affected slot.
    """

    def __init__(
        self,
        message: str,
        *,
        species: str | None = None,
        difficulty: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize monster creation error with species context.

        Args:
            message: Human-readable error description.
            species: The species name that was requested.
            difficulty: The requested difficulty.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if species is not None:
            combined_details["species"] = species
        if difficulty is not None:
            combined_details["difficulty"] = difficulty
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DungeonCrawlerError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "DungeonCrawlerError",
    "GameEngineError",
    "InvalidGameStateError",
    "DiceRollError",
    "MonsterCreationError",
    "ConfigurationError",
]
