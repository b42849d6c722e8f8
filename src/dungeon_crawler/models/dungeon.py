"""Dungeon configuration and the preset dungeons.

A :class:`Dungeon` is read-only input to the engine. The model accepts
zero rooms and an empty species list; the explorer and the encounter
generator fall back to one room and the default species in that case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dungeon_crawler.core.logging import get_logger


logger = get_logger(__name__)


class Dungeon(BaseModel):
    """Immutable dungeon configuration.

    Attributes:
        name: Dungeon name.
        description: Flavour text.
        room_count: Number of rooms to clear.
        monster_types: Species names that may spawn, picked uniformly.
        gold_reward: Flat gold granted on completion.
        exp_reward: Flat experience granted on completion.
        monsters_per_room_base: Monsters per room before the extra roll.
        difficulty: Monster scaling factor.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1, description="Dungeon name")
    description: str = Field(default="", description="Flavour text")
    room_count: int = Field(default=1, ge=0, description="Rooms to clear")
    monster_types: tuple[str, ...] = Field(default=(), description="Species that may spawn")
    gold_reward: int = Field(default=0, ge=0, description="Completion gold")
    exp_reward: int = Field(default=0, ge=0, description="Completion experience")
    monsters_per_room_base: int = Field(default=1, ge=1, description="Base monsters per room")
    difficulty: int = Field(default=1, ge=1, description="Monster difficulty")

    @field_validator("monster_types", mode="before")
    @classmethod
    def coerce_monster_types(cls, v: object) -> object:
        """Accept any iterable of names and drop blank entries."""
        if isinstance(v, str):
            v = (v,)
        if isinstance(v, (list, tuple, set, frozenset)):
            return tuple(name.strip() for name in v if isinstance(name, str) and name.strip())
        return v

    def __str__(self) -> str:
        return (
            f"{self.name}: {self.description} (Rooms: {self.room_count}, "
            f"Reward: {self.gold_reward} gold, {self.exp_reward} exp)"
        )


# =============================================================================
# Presets
# =============================================================================


def create_goblin_cave() -> Dungeon:
    return Dungeon(
        name="Goblin Cave",
        description="A dark cave filled with goblins. Perfect for beginners.",
        room_count=4,
        monster_types=("goblin",),
        gold_reward=150,
        exp_reward=100,
        monsters_per_room_base=2,
        difficulty=1,
    )


def create_swamp_of_trolls() -> Dungeon:
    return Dungeon(
        name="Swamp of Trolls",
        description="A dangerous swamp where powerful trolls lurk. For experienced adventurers.",
        room_count=6,
        monster_types=("troll",),
        gold_reward=400,
        exp_reward=300,
        monsters_per_room_base=1,
        difficulty=2,
    )


def available_dungeons() -> list[Dungeon]:
    """Get the selectable dungeons in menu order."""
    return [create_goblin_cave(), create_swamp_of_trolls()]


def create_dungeon_by_choice(choice: int) -> Dungeon:
    """Create a dungeon from a 1-based menu choice.

    Unknown choices fall back to the Goblin Cave.
    """
    if choice == 2:
        return create_swamp_of_trolls()
    if choice != 1:
        logger.warning("Invalid dungeon choice, using Goblin Cave", choice=choice)
    return create_goblin_cave()


__all__ = [
    "Dungeon",
    "create_goblin_cave",
    "create_swamp_of_trolls",
    "available_dungeons",
    "create_dungeon_by_choice",
]
