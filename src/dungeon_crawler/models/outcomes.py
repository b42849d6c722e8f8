"""Result values reported by the combat and exploration engines.

Defeat, escape and completion are ordinary outcomes, never exceptions.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from dungeon_crawler.models.enums import EncounterStatus, ExplorationStatus
from dungeon_crawler.models.items import Item


class CombatOutcome(BaseModel):
    """Final result of one room encounter.

    Gold and items are only carried by victories.

    Attributes:
        status: Terminal encounter status.
        gold_earned: Gold from defeated monsters.
        items_looted: Items dropped by defeated monsters, in drop order.
        rounds: Number of rounds played.
        monsters_defeated: Number of monsters killed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    status: EncounterStatus
    gold_earned: int = Field(default=0, ge=0)
    items_looted: tuple[Item, ...] = ()
    rounds: int = Field(default=0, ge=0)
    monsters_defeated: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_rewards(self) -> Self:
        if self.status is EncounterStatus.ACTIVE:
            raise ValueError("an active encounter has no outcome")
        if self.status is not EncounterStatus.VICTORY and (self.gold_earned or self.items_looted):
            raise ValueError(f"{self.status.value} outcome cannot carry rewards")
        return self

    @classmethod
    def victory(
        cls,
        gold_earned: int = 0,
        items_looted: tuple[Item, ...] | list[Item] = (),
        *,
        rounds: int = 0,
        monsters_defeated: int = 0,
    ) -> CombatOutcome:
        return cls(
            status=EncounterStatus.VICTORY,
            gold_earned=gold_earned,
            items_looted=tuple(items_looted),
            rounds=rounds,
            monsters_defeated=monsters_defeated,
        )

    @classmethod
    def defeat(cls, *, rounds: int = 0, monsters_defeated: int = 0) -> CombatOutcome:
        return cls(status=EncounterStatus.DEFEAT, rounds=rounds, monsters_defeated=monsters_defeated)

    @classmethod
    def fled(cls, *, rounds: int = 0, monsters_defeated: int = 0) -> CombatOutcome:
        return cls(status=EncounterStatus.FLED, rounds=rounds, monsters_defeated=monsters_defeated)

    @property
    def is_victory(self) -> bool:
        return self.status is EncounterStatus.VICTORY


class RoomOutcome(BaseModel):
    """What happened in one dungeon room."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    room_number: int = Field(ge=1)
    monster_count: int = Field(default=0, ge=0)
    combat: CombatOutcome | None = Field(default=None, description="None for an empty room")
    rested: bool = False
    stamina_restored: int = Field(default=0, ge=0)
    items_left_behind: tuple[Item, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.combat is None


class ExplorationResult(BaseModel):
    """Final result of a dungeon run.

    Attributes:
        dungeon_name: Name of the explored dungeon.
        status: How the run ended.
        rooms_cleared: Rooms cleared or found empty.
        rooms_total: Rooms the run had to clear.
        gold_earned: Monster gold plus the completion reward, if any.
        experience_earned: Completion experience, if any.
        items_looted: Items that went into the inventory.
        room_outcomes: Per-room details in order.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    dungeon_name: str
    status: ExplorationStatus
    rooms_cleared: int = Field(default=0, ge=0)
    rooms_total: int = Field(default=0, ge=0)
    gold_earned: int = Field(default=0, ge=0)
    experience_earned: int = Field(default=0, ge=0)
    items_looted: tuple[Item, ...] = ()
    room_outcomes: tuple[RoomOutcome, ...] = ()

    @computed_field(description="Whether the dungeon was completed")
    @property
    def is_success(self) -> bool:
        return self.status is ExplorationStatus.COMPLETED


__all__ = [
    "CombatOutcome",
    "RoomOutcome",
    "ExplorationResult",
]
