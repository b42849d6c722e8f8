"""Random number source for the engine.

Every engine component receives its randomness explicitly through a
:class:`RandomSource`. The default :class:`DiceRoller` owns a private
``random.Random`` so seeding one roller never affects another, or the
global ``random`` module.

Example:
    >>> roller = DiceRoller(seed=42)
    >>> 0 <= roller.below(6) < 6
    True
    >>> 0 <= roller.percent() < 100
    True
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable

from dungeon_crawler.core.config import GameSettings, get_settings
from dungeon_crawler.core.constants import PERCENT_DIE
from dungeon_crawler.core.exceptions import DiceRollError
from dungeon_crawler.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer source consumed by the engine."""

    def below(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``."""
        ...

    def percent(self) -> int:
        """Return a uniform integer in ``[0, 100)``."""
        ...


class DiceRoller:
    """Default :class:`RandomSource` backed by ``random.Random``.

    Example:
        >>> roller = DiceRoller(seed=7)
        >>> roller.chance(100)
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
        """
        self._seed = seed
        self._random = random.Random(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @classmethod
    def from_settings(cls, settings: GameSettings | None = None) -> DiceRoller:
        """Create a roller seeded from the engine settings."""
        settings = settings or get_settings().game
        return cls(seed=settings.seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def below(self, n: int) -> int:
        """Roll a uniform integer in ``[0, n)``.

        A single-outcome roll returns 0 without consuming randomness.

        Args:
            n: Number of possible outcomes.

        Returns:
            The rolled value.

        Raises:
            DiceRollError: If ``n`` is not positive.
        """
        if n <= 0:
            raise DiceRollError(f"Cannot roll below {n}", sides=n)
        if n == 1:
            return 0
        return self._random.randrange(n)

    def percent(self) -> int:
        """Roll a percentile value in ``[0, 100)``."""
        return self._random.randrange(PERCENT_DIE)

    def chance(self, percent: int) -> bool:
        """Roll a percentile check that succeeds ``percent`` times in 100."""
        return self.percent() < percent

    def choice(self, options: list[str] | tuple[str, ...]) -> str:
        """Pick one option uniformly.

        Raises:
            DiceRollError: If there are no options.
        """
        return options[self.below(len(options))]


def roll_chance(rng: RandomSource, percent: int) -> bool:
    """Percentile check against any :class:`RandomSource`."""
    return rng.percent() < percent


__all__ = [
    "RandomSource",
    "DiceRoller",
    "roll_chance",
]
