"""Decision sources: where the engine gets player choices from.

A menu or CLI implements :class:`DecisionSource` and may block for as
long as it likes; the engine simply waits for the answer.
:class:`AutoPilot` answers without asking anyone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from dungeon_crawler.models.enums import PlayerAction


if TYPE_CHECKING:
    from dungeon_crawler.engine.combat import CombatEncounter
    from dungeon_crawler.models.actors import PlayerCharacter
    from dungeon_crawler.models.dungeon import Dungeon


@runtime_checkable
class DecisionSource(Protocol):
    """Supplies player decisions to the combat and exploration engines."""

    def choose_action(self, encounter: CombatEncounter) -> PlayerAction:
        """Choose to attack or flee for the next combat round."""
        ...

    def confirm_entry(self, dungeon: Dungeon) -> bool:
        """Confirm entering a dungeon."""
        ...

    def confirm_rest(self, player: PlayerCharacter, room_number: int) -> bool:
        """Confirm resting after clearing a room."""
        ...


class AutoPilot:
    """Non-interactive decision source.

    Always enters, always rests and attacks every round. With
    ``flee_below`` set, it tries to flee whenever the character's health
    percentage is below that threshold.
    """

    def __init__(self, *, flee_below: float | None = None, rest: bool = True) -> None:
        self.flee_below = flee_below
        self.rest = rest

    def choose_action(self, encounter: CombatEncounter) -> PlayerAction:
        if self.flee_below is not None and encounter.player.health.percentage < self.flee_below:
            return PlayerAction.FLEE
        return PlayerAction.ATTACK

    def confirm_entry(self, dungeon: Dungeon) -> bool:
        return True

    def confirm_rest(self, player: PlayerCharacter, room_number: int) -> bool:
        return self.rest


__all__ = [
    "DecisionSource",
    "AutoPilot",
]
