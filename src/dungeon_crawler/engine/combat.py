"""Turn-based combat for a single room.

A :class:`CombatEncounter` holds the state of one fight between the
player and a room's monster roster. Each call to
:meth:`CombatEncounter.play_round` resolves one full round:

1. The player attacks the first living monster, or tries to flee.
2. Monsters brought to 0 health are removed and looted.
3. Every surviving monster attacks the player, in roster order.
4. The encounter ends in defeat if the player fell, otherwise in
   victory if no monster is left.

:class:`CombatEngine` drives an encounter to its end with a
:class:`~dungeon_crawler.engine.decisions.DecisionSource`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from dungeon_crawler.core.config import GameSettings, get_settings
from dungeon_crawler.core.exceptions import InvalidGameStateError
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.engine.damage import resolve_monster_attack, resolve_player_attack
from dungeon_crawler.engine.dice import RandomSource
from dungeon_crawler.engine.loot import loot_monster
from dungeon_crawler.engine.stamina import StaminaObserver, notify_stamina_changed
from dungeon_crawler.models.actors import Monster, PlayerCharacter
from dungeon_crawler.models.enums import AttackEvent, EncounterStatus, PlayerAction
from dungeon_crawler.models.items import Item
from dungeon_crawler.models.outcomes import CombatOutcome


if TYPE_CHECKING:
    from dungeon_crawler.engine.decisions import DecisionSource

logger = get_logger(__name__)


# =============================================================================
# Round Reporting
# =============================================================================


class CombatEventType(StrEnum):
    """Kinds of things that happen during a round."""

    PLAYER_ATTACK = "player_attack"
    MONSTER_ATTACK = "monster_attack"
    REGENERATION = "regeneration"
    MONSTER_DEFEATED = "monster_defeated"
    FLEE_SUCCEEDED = "flee_succeeded"
    FLEE_FAILED = "flee_failed"


@dataclass(frozen=True)
class CombatEvent:
    """One step of a combat round, for display.

    Attributes:
        type: What happened.
        actor: Name of the acting character or monster.
        target: Name of the target, if any.
        amount: Damage dealt, health regenerated or gold dropped.
        attack: Flavour of the attack for attack events.
        items: Items dropped for defeat events.
    """

    type: CombatEventType
    actor: str
    target: str | None = None
    amount: int = 0
    attack: AttackEvent | None = None
    items: tuple[Item, ...] = ()

    @property
    def message(self) -> str:
        """Human-readable description of the event."""
        match self.type:
            case CombatEventType.PLAYER_ATTACK | CombatEventType.MONSTER_ATTACK:
                if self.attack is AttackEvent.EXHAUSTED:
                    return f"{self.actor} is too tired to attack!"
                if self.attack is AttackEvent.MISS:
                    return f"{self.actor} misses {self.target}!"
                prefix = {
                    AttackEvent.FURIOUS: "furiously ",
                    AttackEvent.DEVASTATING: "devastatingly ",
                    AttackEvent.SPELL: "with a spell ",
                    AttackEvent.STAFF: "with a staff ",
                }.get(self.attack, "") if self.attack else ""
                return f"{self.actor} attacks {prefix}{self.target} for {self.amount} damage"
            case CombatEventType.REGENERATION:
                return f"{self.actor} regenerates {self.amount} health!"
            case CombatEventType.MONSTER_DEFEATED:
                loot = ", ".join(item.name for item in self.items)
                dropped = f" and dropped {loot}" if loot else ""
                return f"{self.actor} was defeated, leaving {self.amount} gold{dropped}"
            case CombatEventType.FLEE_SUCCEEDED:
                return f"{self.actor} escaped!"
            case CombatEventType.FLEE_FAILED:
                return f"{self.actor} failed to escape!"
        return self.type.value


@dataclass
class RoundReport:
    """Result of one combat round.

    Attributes:
        round_number: 1-based round index.
        action: Action the player took.
        events: Events in the order they happened.
        status: Encounter status after the round.
        player_health: Player health after the round.
        monsters_remaining: Living monsters after the round.
    """

    round_number: int
    action: PlayerAction
    events: list[CombatEvent] = field(default_factory=list)
    status: EncounterStatus = EncounterStatus.ACTIVE
    player_health: int = 0
    monsters_remaining: int = 0

    @property
    def is_final(self) -> bool:
        return self.status.is_terminal


# =============================================================================
# Encounter
# =============================================================================


class CombatEncounter:
    """State of one room fight.

    The encounter owns its monster roster. Monsters already at 0 health
    when the encounter starts are left out of it; an encounter with no
    monsters is won immediately, with no rewards.

    Example:
        >>> encounter = CombatEncounter(hero, monsters, DiceRoller(seed=3))
        >>> while not encounter.is_over:
        ...     encounter.play_round(PlayerAction.ATTACK)
        >>> encounter.outcome().status
    """

    def __init__(
        self,
        player: PlayerCharacter,
        monsters: Iterable[Monster],
        rng: RandomSource,
        *,
        flee_chance: int = 50,
        observers: Iterable[StaminaObserver] = (),
    ) -> None:
        """Initialize the encounter.

        Args:
            player: The fighting character. Mutated in place.
            monsters: Room roster in attack order.
            rng: Random source for every roll of the fight.
            flee_chance: Percent chance that a flee attempt succeeds.
            observers: Stamina observers notified when attacks cost stamina.
        """
        self._player = player
        self._monsters: list[Monster] = [monster for monster in monsters if monster.is_alive]
        self._rng = rng
        self._flee_chance = flee_chance
        self._observers: list[StaminaObserver] = list(observers)

        self._round = 0
        self._gold = 0
        self._items: list[Item] = []
        self._defeated = 0
        self._status = EncounterStatus.ACTIVE
        self._check_termination()

        logger.debug(
            "Encounter started",
            character=player.name,
            monsters=[monster.name for monster in self._monsters],
            status=self._status,
        )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def player(self) -> PlayerCharacter:
        return self._player

    @property
    def monsters(self) -> list[Monster]:
        """Living monsters in attack order."""
        return list(self._monsters)

    @property
    def status(self) -> EncounterStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def round_number(self) -> int:
        return self._round

    @property
    def gold_earned(self) -> int:
        return self._gold

    @property
    def items_looted(self) -> list[Item]:
        return list(self._items)

    @property
    def monsters_defeated(self) -> int:
        return self._defeated

    @property
    def target(self) -> Monster | None:
        """The monster the player will attack next."""
        return self._monsters[0] if self._monsters else None

    # -------------------------------------------------------------------------
    # Round Processing
    # -------------------------------------------------------------------------

    def play_round(self, action: PlayerAction | str) -> RoundReport:
        """Resolve one full round.

        Args:
            action: The player's choice for this round.

        Returns:
            Report of everything that happened.

        Raises:
            InvalidGameStateError: If the encounter has already ended.
        """
        if self.is_over:
            raise InvalidGameStateError(
                "Cannot play a round of a finished encounter",
                current_state=self._status.value,
                expected_states=[EncounterStatus.ACTIVE.value],
            )

        action = PlayerAction(action)
        self._round += 1
        report = RoundReport(round_number=self._round, action=action)

        if action is PlayerAction.FLEE:
            if self._rng.percent() < self._flee_chance:
                report.events.append(
                    CombatEvent(type=CombatEventType.FLEE_SUCCEEDED, actor=self._player.name)
                )
                self._status = EncounterStatus.FLED
                logger.info("Player fled", character=self._player.name, round=self._round)
                return self._finish_report(report)
            report.events.append(CombatEvent(type=CombatEventType.FLEE_FAILED, actor=self._player.name))
        else:
            self._player_attack(report)

        self._remove_defeated(report)
        self._monsters_attack(report)
        self._check_termination()

        if self.is_over:
            logger.info(
                "Encounter ended",
                character=self._player.name,
                status=self._status,
                rounds=self._round,
                gold=self._gold if self._status is EncounterStatus.VICTORY else 0,
            )
        return self._finish_report(report)

    def _player_attack(self, report: RoundReport) -> None:
        target = self.target
        if target is None:
            return

        old_stamina = self._player.stamina.current
        roll = resolve_player_attack(self._player, self._rng)
        if roll.stamina_spent:
            notify_stamina_changed(
                self._observers, self._player, old_stamina, self._player.stamina.current
            )

        if roll.event is AttackEvent.EXHAUSTED:
            report.events.append(
                CombatEvent(
                    type=CombatEventType.PLAYER_ATTACK,
                    actor=self._player.name,
                    target=target.name,
                    attack=roll.event,
                )
            )
            return

        had_regenerated = target.has_regenerated
        health_before = target.health.current
        dealt = target.take_damage(roll.damage)
        report.events.append(
            CombatEvent(
                type=CombatEventType.PLAYER_ATTACK,
                actor=self._player.name,
                target=target.name,
                amount=dealt,
                attack=roll.event,
            )
        )
        if target.has_regenerated and not had_regenerated:
            report.events.append(
                CombatEvent(
                    type=CombatEventType.REGENERATION,
                    actor=target.name,
                    amount=target.health.current - (health_before - dealt),
                )
            )

    def _remove_defeated(self, report: RoundReport) -> None:
        survivors: list[Monster] = []
        for monster in self._monsters:
            if monster.is_alive:
                survivors.append(monster)
                continue
            drop = loot_monster(monster, self._rng)
            self._gold += drop.gold
            self._items.extend(drop.items)
            self._defeated += 1
            report.events.append(
                CombatEvent(
                    type=CombatEventType.MONSTER_DEFEATED,
                    actor=monster.name,
                    amount=drop.gold,
                    items=tuple(drop.items),
                )
            )
        self._monsters = survivors

    def _monsters_attack(self, report: RoundReport) -> None:
        for monster in self._monsters:
            if not self._player.is_alive:
                break
            roll = resolve_monster_attack(monster, self._rng)
            dealt = self._player.take_damage(roll.damage)
            report.events.append(
                CombatEvent(
                    type=CombatEventType.MONSTER_ATTACK,
                    actor=monster.name,
                    target=self._player.name,
                    amount=dealt,
                    attack=roll.event,
                )
            )

    def _check_termination(self) -> None:
        if not self._player.is_alive:
            self._status = EncounterStatus.DEFEAT
        elif not self._monsters:
            self._status = EncounterStatus.VICTORY

    def _finish_report(self, report: RoundReport) -> RoundReport:
        report.status = self._status
        report.player_health = self._player.health.current
        report.monsters_remaining = len(self._monsters)
        for event in report.events:
            logger.debug("Combat event", round=report.round_number, combat_event=event.message)
        return report

    # -------------------------------------------------------------------------
    # Outcome
    # -------------------------------------------------------------------------

    def outcome(self) -> CombatOutcome:
        """Get the final outcome of a finished encounter.

        Raises:
            InvalidGameStateError: If the encounter is still active.
        """
        match self._status:
            case EncounterStatus.VICTORY:
                return CombatOutcome.victory(
                    self._gold,
                    self._items,
                    rounds=self._round,
                    monsters_defeated=self._defeated,
                )
            case EncounterStatus.DEFEAT:
                return CombatOutcome.defeat(rounds=self._round, monsters_defeated=self._defeated)
            case EncounterStatus.FLED:
                return CombatOutcome.fled(rounds=self._round, monsters_defeated=self._defeated)
        raise InvalidGameStateError(
            "Encounter has not ended",
            current_state=self._status.value,
            expected_states=[
                EncounterStatus.VICTORY.value,
                EncounterStatus.DEFEAT.value,
                EncounterStatus.FLED.value,
            ],
        )


# =============================================================================
# Engine
# =============================================================================


class CombatEngine:
    """Runs encounters to completion with a decision source."""

    def __init__(
        self,
        rng: RandomSource,
        *,
        settings: GameSettings | None = None,
        observers: Iterable[StaminaObserver] = (),
    ) -> None:
        self._rng = rng
        self._settings = settings or get_settings().game
        self._observers: list[StaminaObserver] = list(observers)

    def start(self, player: PlayerCharacter, monsters: Sequence[Monster]) -> CombatEncounter:
        """Start an encounter that the caller steps through round by round."""
        return CombatEncounter(
            player,
            monsters,
            self._rng,
            flee_chance=self._settings.flee_chance,
            observers=self._observers,
        )

    def resolve(
        self,
        player: PlayerCharacter,
        monsters: Sequence[Monster],
        decisions: DecisionSource,
    ) -> CombatOutcome:
        """Fight until victory, defeat or escape.

        Args:
            player: The fighting character. Mutated in place.
            monsters: Room roster in attack order.
            decisions: Source of the attack/flee choice for each round.

        Returns:
            The combat outcome.
        """
        encounter = self.start(player, monsters)
        while not encounter.is_over:
            encounter.play_round(decisions.choose_action(encounter))
        return encounter.outcome()


__all__ = [
    "CombatEventType",
    "CombatEvent",
    "RoundReport",
    "CombatEncounter",
    "CombatEngine",
]
