"""Stamina notifications and out-of-combat recovery.

Observers receive stamina events for display or logging only. A failing
observer is logged and skipped; it never changes what the engine does.
Periodic recovery is driven by the caller through
:meth:`StaminaRecovery.tick`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.actors import PlayerCharacter


logger = get_logger(__name__)


@runtime_checkable
class StaminaObserver(Protocol):
    """Receiver of stamina events."""

    def on_stamina_changed(self, player: PlayerCharacter, old: int, new: int) -> None: ...

    def on_stamina_recovered(self, player: PlayerCharacter, amount: int) -> None: ...


class LoggingStaminaObserver:
    """Observer that writes stamina events to the log."""

    def on_stamina_changed(self, player: PlayerCharacter, old: int, new: int) -> None:
        logger.info(
            "Stamina changed",
            character=player.name,
            old=old,
            new=new,
            maximum=player.stamina.maximum,
        )
        if new == 0:
            logger.warning("Character exhausted", character=player.name)

    def on_stamina_recovered(self, player: PlayerCharacter, amount: int) -> None:
        logger.info("Stamina recovered", character=player.name, amount=amount)


def notify_stamina_changed(
    observers: Iterable[StaminaObserver],
    player: PlayerCharacter,
    old: int,
    new: int,
) -> None:
    """Send a stamina change to every observer."""
    for observer in observers:
        try:
            observer.on_stamina_changed(player, old, new)
        except Exception:
            logger.exception("Stamina observer failed", observer=type(observer).__name__)


def notify_stamina_recovered(
    observers: Iterable[StaminaObserver],
    player: PlayerCharacter,
    amount: int,
) -> None:
    """Send a stamina recovery to every observer."""
    for observer in observers:
        try:
            observer.on_stamina_recovered(player, amount)
        except Exception:
            logger.exception("Stamina observer failed", observer=type(observer).__name__)


class StaminaRecovery:
    """Natural stamina recovery for registered characters.

    Each tick restores a class-dependent fraction of max stamina (at
    least 1) to every registered character that is not already full.

    Example:
        >>> recovery = StaminaRecovery()
        >>> recovery.add_character(hero)
        >>> recovery.tick()
    """

    def __init__(self, observers: Iterable[StaminaObserver] = ()) -> None:
        self._characters: list[PlayerCharacter] = []
        self._observers: list[StaminaObserver] = list(observers)

    @property
    def characters(self) -> list[PlayerCharacter]:
        return list(self._characters)

    def add_character(self, player: PlayerCharacter) -> None:
        if any(existing is player for existing in self._characters):
            return
        self._characters.append(player)
        logger.info("Character added to stamina recovery", character=player.name)

    def remove_character(self, player: PlayerCharacter) -> None:
        self._characters = [existing for existing in self._characters if existing is not player]

    def add_observer(self, observer: StaminaObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: StaminaObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @staticmethod
    def recovery_amount(player: PlayerCharacter) -> int:
        rate = player.character_class.recovery_rate
        return max(1, int(player.stamina.maximum * rate))

    def tick(self) -> dict[str, int]:
        """Apply one round of recovery.

        Returns:
            Stamina recovered per character name, for characters that
            recovered anything.
        """
        recovered: dict[str, int] = {}
        for player in self._characters:
            if player.stamina.missing <= 0:
                continue
            old = player.stamina.current
            amount = player.restore_stamina(self.recovery_amount(player))
            if amount <= 0:
                continue
            recovered[player.name] = amount
            notify_stamina_changed(self._observers, player, old, player.stamina.current)
            notify_stamina_recovered(self._observers, player, amount)
        return recovered


__all__ = [
    "StaminaObserver",
    "LoggingStaminaObserver",
    "notify_stamina_changed",
    "notify_stamina_recovered",
    "StaminaRecovery",
]
