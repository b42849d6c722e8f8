"""Tests for stamina observers and natural recovery."""

from __future__ import annotations

from conftest import FailingObserver, RecordingObserver
from dungeon_crawler.engine.stamina import (
    LoggingStaminaObserver,
    StaminaObserver,
    StaminaRecovery,
    notify_stamina_changed,
)
from dungeon_crawler.models.actors import PlayerCharacter
from dungeon_crawler.models.components import StaminaComponent


class TestNotifications:
    """Tests for observer notification."""

    def test_all_observers_notified(self, warrior: PlayerCharacter) -> None:
        """Every observer receives the change."""
        first, second = RecordingObserver(), RecordingObserver()

        notify_stamina_changed([first, second], warrior, 100, 95)

        assert first.changes == second.changes == [("Conan", 100, 95)]

    def test_failing_observer_isolated(self, warrior: PlayerCharacter) -> None:
        """A failing observer does not stop the others."""
        recorder = RecordingObserver()

        notify_stamina_changed([FailingObserver(), recorder], warrior, 100, 95)

        assert recorder.changes == [("Conan", 100, 95)]

    def test_logging_observer(self, warrior: PlayerCharacter) -> None:
        """The logging observer satisfies the protocol and handles exhaustion."""
        observer = LoggingStaminaObserver()

        assert isinstance(observer, StaminaObserver)
        observer.on_stamina_changed(warrior, 5, 0)
        observer.on_stamina_recovered(warrior, 5)


class TestStaminaRecovery:
    """Tests for StaminaRecovery.tick."""

    def test_class_rates(self, warrior: PlayerCharacter, mage: PlayerCharacter) -> None:
        """Warriors recover 5% of max stamina, mages 10%."""
        warrior.stamina.current = 50
        mage.stamina.current = 50
        recovery = StaminaRecovery()
        recovery.add_character(warrior)
        recovery.add_character(mage)

        recovered = recovery.tick()

        assert recovered == {"Conan": 5, "Merlin": 12}
        assert warrior.stamina.current == 55
        assert mage.stamina.current == 62

    def test_minimum_one(self, warrior: PlayerCharacter) -> None:
        """Small pools still recover at least 1."""
        warrior.stamina = StaminaComponent(current=5, maximum=10)
        recovery = StaminaRecovery()
        recovery.add_character(warrior)

        assert recovery.tick() == {"Conan": 1}

    def test_clamped_to_maximum(self, warrior: PlayerCharacter) -> None:
        """Recovery never exceeds max stamina."""
        warrior.stamina.current = 98
        recovery = StaminaRecovery()
        recovery.add_character(warrior)

        assert recovery.tick() == {"Conan": 2}
        assert warrior.stamina.current == 100

    def test_full_characters_skipped(self, warrior: PlayerCharacter) -> None:
        """Full characters recover nothing and trigger no events."""
        observer = RecordingObserver()
        recovery = StaminaRecovery([observer])
        recovery.add_character(warrior)

        assert recovery.tick() == {}
        assert observer.changes == []
        assert observer.recoveries == []

    def test_observers_notified(self, warrior: PlayerCharacter) -> None:
        """Each recovery sends a change and a recovery event."""
        warrior.stamina.current = 40
        observer = RecordingObserver()
        recovery = StaminaRecovery()
        recovery.add_observer(observer)
        recovery.add_character(warrior)

        recovery.tick()

        assert observer.changes == [("Conan", 40, 45)]
        assert observer.recoveries == [("Conan", 5)]

    def test_failing_observer_does_not_block_recovery(self, warrior: PlayerCharacter) -> None:
        """Observer errors leave the recovery applied."""
        warrior.stamina.current = 40
        recovery = StaminaRecovery([FailingObserver()])
        recovery.add_character(warrior)

        assert recovery.tick() == {"Conan": 5}
        assert warrior.stamina.current == 45

    def test_characters_deduplicated(self, warrior: PlayerCharacter) -> None:
        """Adding the same character twice registers it once."""
        warrior.stamina.current = 40
        recovery = StaminaRecovery()
        recovery.add_character(warrior)
        recovery.add_character(warrior)

        recovery.tick()

        assert len(recovery.characters) == 1
        assert warrior.stamina.current == 45

    def test_remove(self, warrior: PlayerCharacter) -> None:
        """Removed characters and observers get nothing."""
        warrior.stamina.current = 40
        observer = RecordingObserver()
        recovery = StaminaRecovery([observer])
        recovery.add_character(warrior)
        recovery.remove_observer(observer)
        recovery.remove_character(warrior)

        assert recovery.tick() == {}
        assert observer.changes == []
        assert warrior.stamina.current == 40
