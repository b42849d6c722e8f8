"""Dungeon exploration: the room-by-room state machine.

A run moves through ``not_started -> confirming -> room_loop`` and ends
``completed``, ``failed`` or ``aborted``. Escaping a fight ends the run
like a defeat but is reported with its own status.

Rewards from cleared rooms are credited to the character as soon as the
room is cleared, so a later defeat never takes them back. The dungeon's
completion reward is only granted when every room is cleared.
"""

from __future__ import annotations

from collections.abc import Iterable

from dungeon_crawler.core.config import GameSettings, get_settings
from dungeon_crawler.core.logging import bound_context, get_logger
from dungeon_crawler.engine.combat import CombatEngine
from dungeon_crawler.engine.decisions import DecisionSource
from dungeon_crawler.engine.dice import RandomSource
from dungeon_crawler.engine.encounters import EncounterGenerator
from dungeon_crawler.engine.stamina import (
    StaminaObserver,
    notify_stamina_changed,
    notify_stamina_recovered,
)
from dungeon_crawler.models.actors import PlayerCharacter
from dungeon_crawler.models.dungeon import Dungeon
from dungeon_crawler.models.enums import EncounterStatus, ExplorationPhase, ExplorationStatus
from dungeon_crawler.models.items import Item
from dungeon_crawler.models.outcomes import CombatOutcome, ExplorationResult, RoomOutcome


logger = get_logger(__name__)


class DungeonExplorer:
    """Runs a character through a dungeon.

    Example:
        >>> explorer = DungeonExplorer(DiceRoller(seed=5), AutoPilot())
        >>> result = explorer.explore(hero, create_goblin_cave())
        >>> result.status
    """

    def __init__(
        self,
        rng: RandomSource,
        decisions: DecisionSource,
        *,
        settings: GameSettings | None = None,
        generator: EncounterGenerator | None = None,
        combat: CombatEngine | None = None,
        observers: Iterable[StaminaObserver] = (),
    ) -> None:
        """Initialize the explorer.

        Args:
            rng: Random source shared by room generation and combat.
            decisions: Source of entry, combat and rest decisions.
            settings: Engine settings. Defaults to the global settings.
            generator: Encounter generator. Defaults to one using ``rng``.
            combat: Combat engine. Defaults to one using ``rng``.
            observers: Stamina observers for attacks and rests.
        """
        self._rng = rng
        self._decisions = decisions
        self._settings = settings or get_settings().game
        self._observers: list[StaminaObserver] = list(observers)
        self._generator = generator or EncounterGenerator(rng, settings=self._settings)
        self._combat = combat or CombatEngine(
            rng,
            settings=self._settings,
            observers=self._observers,
        )
        self._phase = ExplorationPhase.NOT_STARTED

    @property
    def phase(self) -> ExplorationPhase:
        """Phase reached by the most recent run."""
        return self._phase

    def room_total(self, dungeon: Dungeon) -> int:
        if dungeon.room_count >= 1:
            return dungeon.room_count
        logger.warning("Dungeon has no rooms, exploring one room", dungeon=dungeon.name)
        return 1

    def explore(self, player: PlayerCharacter, dungeon: Dungeon) -> ExplorationResult:
        """Explore a dungeon from the first room to the last.

        Args:
            player: The exploring character. Health, stamina, gold and
                inventory are updated in place.
            dungeon: The dungeon to explore.

        Returns:
            The result of the run.
        """
        with bound_context(dungeon=dungeon.name, character=player.name):
            return self._run(player, dungeon)

    def _run(self, player: PlayerCharacter, dungeon: Dungeon) -> ExplorationResult:
        self._phase = ExplorationPhase.NOT_STARTED
        rooms_total = self.room_total(dungeon)

        if not player.is_alive:
            logger.warning("Defeated character cannot explore")
            self._phase = ExplorationPhase.FAILED
            return ExplorationResult(
                dungeon_name=dungeon.name,
                status=ExplorationStatus.FAILED,
                rooms_total=rooms_total,
            )

        self._phase = ExplorationPhase.CONFIRMING
        if not self._decisions.confirm_entry(dungeon):
            logger.info("Dungeon entry declined")
            self._phase = ExplorationPhase.ABORTED
            return ExplorationResult(
                dungeon_name=dungeon.name,
                status=ExplorationStatus.ABORTED,
                rooms_total=rooms_total,
            )

        logger.info("Entering dungeon", rooms=rooms_total, difficulty=dungeon.difficulty)
        self._phase = ExplorationPhase.ROOM_LOOP

        gold = 0
        looted: list[Item] = []
        rooms: list[RoomOutcome] = []

        for room_number in range(1, rooms_total + 1):
            monsters = self._generator.generate_room(dungeon, room_number=room_number)
            if not monsters:
                logger.info("Room empty", room=room_number)
                rooms.append(RoomOutcome(room_number=room_number))
                continue

            outcome = self._combat.resolve(player, monsters, self._decisions)
            if not outcome.is_victory:
                rooms.append(
                    RoomOutcome(room_number=room_number, monster_count=len(monsters), combat=outcome)
                )
                return self._end_early(dungeon, outcome, rooms_total, rooms, gold, looted)

            player.add_gold(outcome.gold_earned)
            gold += outcome.gold_earned
            kept, left_behind = self._collect_items(player, outcome.items_looted, room_number)
            looted.extend(kept)

            rested, restored = False, 0
            if room_number < rooms_total and self._decisions.confirm_rest(player, room_number):
                rested, restored = True, self._rest(player)

            logger.info(
                "Room cleared",
                room=room_number,
                gold=outcome.gold_earned,
                items=len(kept),
                rested=rested,
            )
            rooms.append(
                RoomOutcome(
                    room_number=room_number,
                    monster_count=len(monsters),
                    combat=outcome,
                    rested=rested,
                    stamina_restored=restored,
                    items_left_behind=tuple(left_behind),
                )
            )

        player.add_gold(dungeon.gold_reward)
        player.add_experience(dungeon.exp_reward)
        self._phase = ExplorationPhase.COMPLETED
        logger.info(
            "Dungeon completed",
            gold=gold + dungeon.gold_reward,
            experience=dungeon.exp_reward,
        )
        return ExplorationResult(
            dungeon_name=dungeon.name,
            status=ExplorationStatus.COMPLETED,
            rooms_cleared=len(rooms),
            rooms_total=rooms_total,
            gold_earned=gold + dungeon.gold_reward,
            experience_earned=dungeon.exp_reward,
            items_looted=tuple(looted),
            room_outcomes=tuple(rooms),
        )

    def _end_early(
        self,
        dungeon: Dungeon,
        outcome: CombatOutcome,
        rooms_total: int,
        rooms: list[RoomOutcome],
        gold: int,
        looted: list[Item],
    ) -> ExplorationResult:
        self._phase = ExplorationPhase.FAILED
        if outcome.status is EncounterStatus.FLED:
            status = ExplorationStatus.FLED
            logger.info("Fled from dungeon", room=len(rooms))
        else:
            status = ExplorationStatus.FAILED
            logger.info("Character defeated", room=len(rooms))
        return ExplorationResult(
            dungeon_name=dungeon.name,
            status=status,
            rooms_cleared=len(rooms) - 1,
            rooms_total=rooms_total,
            gold_earned=gold,
            items_looted=tuple(looted),
            room_outcomes=tuple(rooms),
        )

    def _collect_items(
        self,
        player: PlayerCharacter,
        items: Iterable[Item],
        room_number: int,
    ) -> tuple[list[Item], list[Item]]:
        kept: list[Item] = []
        left_behind: list[Item] = []
        for item in items:
            if player.inventory.add_item(item):
                kept.append(item)
            else:
                left_behind.append(item)
                logger.warning("Inventory full, item left behind", room=room_number, item=item.name)
        return kept, left_behind

    def _rest(self, player: PlayerCharacter) -> int:
        old = player.stamina.current
        restored = player.restore_stamina(min(self._settings.rest_stamina, player.stamina.missing))
        if restored:
            notify_stamina_changed(self._observers, player, old, player.stamina.current)
            notify_stamina_recovered(self._observers, player, restored)
        logger.debug("Rested", stamina=player.stamina.current, restored=restored)
        return restored


__all__ = [
    "DungeonExplorer",
]
