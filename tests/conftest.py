"""Pytest configuration and shared fixtures.

This module provides common fixtures and test doubles for the dungeon
crawler test suite: scripted random sources and decision sources that
make every roll of a fight explicit.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import pytest

from dungeon_crawler.core.config import GameSettings
from dungeon_crawler.models.actors import Monster, PlayerCharacter, create_player_character
from dungeon_crawler.models.components import HealthComponent
from dungeon_crawler.models.enums import CharacterClass, PlayerAction, Species
from dungeon_crawler.models.items import Item


if TYPE_CHECKING:
    from collections.abc import Generator

    from dungeon_crawler.engine.dice import DiceRoller
    from dungeon_crawler.models.dungeon import Dungeon


# =============================================================================
# Test Doubles
# =============================================================================


class ScriptedRoller:
    """Random source that replays a fixed sequence of values.

    ``below`` and ``percent`` draw from the same queue. ``below(1)``
    returns 0 without drawing, like the real roller.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values: deque[int] = deque(values)
        self.calls: list[tuple[str, int]] = []

    @property
    def remaining(self) -> int:
        return len(self._values)

    def extend(self, values: Iterable[int]) -> None:
        self._values.extend(values)

    def _next(self, n: int) -> int:
        assert self._values, f"ScriptedRoller exhausted (roll below {n})"
        value = self._values.popleft()
        assert 0 <= value < n, f"scripted value {value} out of range [0, {n})"
        return value

    def below(self, n: int) -> int:
        if n == 1:
            return 0
        self.calls.append(("below", n))
        return self._next(n)

    def percent(self) -> int:
        self.calls.append(("percent", 100))
        return self._next(100)


class ScriptedDecisions:
    """Decision source that replays combat actions and records prompts.

    Once the scripted actions run out, it keeps attacking.
    """

    def __init__(
        self,
        actions: Iterable[PlayerAction] = (),
        *,
        enter: bool = True,
        rest: bool = True,
    ) -> None:
        self._actions: deque[PlayerAction] = deque(actions)
        self.enter = enter
        self.rest = rest
        self.entry_prompts: list[str] = []
        self.rest_prompts: list[int] = []
        self.rounds_asked = 0

    def choose_action(self, encounter: Any) -> PlayerAction:
        self.rounds_asked += 1
        if self._actions:
            return self._actions.popleft()
        return PlayerAction.ATTACK

    def confirm_entry(self, dungeon: Dungeon) -> bool:
        self.entry_prompts.append(dungeon.name)
        return self.enter

    def confirm_rest(self, player: PlayerCharacter, room_number: int) -> bool:
        self.rest_prompts.append(room_number)
        return self.rest


class FixedRooms:
    """Encounter generator stand-in that returns prepared rosters.

    Each entry is a zero-argument callable building the room's monsters.
    """

    def __init__(self, rooms: list[Any]) -> None:
        self._rooms = rooms
        self.generated: list[int] = []

    def generate_room(
        self,
        dungeon: Dungeon,
        difficulty: int | None = None,
        *,
        room_number: int = 1,
    ) -> list[Monster]:
        self.generated.append(room_number)
        return list(self._rooms[room_number - 1]())


class RecordingObserver:
    """Stamina observer that records every event."""

    def __init__(self) -> None:
        self.changes: list[tuple[str, int, int]] = []
        self.recoveries: list[tuple[str, int]] = []

    def on_stamina_changed(self, player: PlayerCharacter, old: int, new: int) -> None:
        self.changes.append((player.name, old, new))

    def on_stamina_recovered(self, player: PlayerCharacter, amount: int) -> None:
        self.recoveries.append((player.name, amount))


class FailingObserver:
    """Stamina observer that always raises."""

    def on_stamina_changed(self, player: PlayerCharacter, old: int, new: int) -> None:
        raise RuntimeError("display offline")

    def on_stamina_recovered(self, player: PlayerCharacter, amount: int) -> None:
        raise RuntimeError("display offline")


def make_monster(
    name: str = "Gruk",
    *,
    species: Species = Species.GOBLIN,
    health: int = 10,
    max_health: int | None = None,
    base_damage: int = 4,
    gold_drop: int = 7,
    drop_chance: int = 0,
    possible_drops: list[Item] | None = None,
    regeneration_amount: int = 0,
) -> Monster:
    """Build a monster with explicit stats."""
    return Monster(
        name=name,
        species=species,
        health=HealthComponent(current=health, maximum=max_health or health),
        base_damage=base_damage,
        gold_drop=gold_drop,
        drop_chance=drop_chance,
        possible_drops=possible_drops or [],
        regeneration_amount=regeneration_amount,
    )


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dungeon_crawler.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DUNGEON_CRAWLER_LOG_LEVEL": "DEBUG",
        "DUNGEON_CRAWLER_GAME_FLEE_CHANCE": "75",
        "DUNGEON_CRAWLER_GAME_REST_STAMINA": "30",
        "DUNGEON_CRAWLER_GAME_SEED": "99",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def game_settings() -> GameSettings:
    """Engine settings with the default rules."""
    return GameSettings()


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def warrior() -> PlayerCharacter:
    """A fresh warrior: 120 HP, 100 stamina, 15 damage."""
    return create_player_character("Conan", CharacterClass.WARRIOR)


@pytest.fixture
def mage() -> PlayerCharacter:
    """A fresh mage: 80 HP, 120 stamina, 10 damage, 50 mana."""
    return create_player_character("Merlin", CharacterClass.MAGE)


@pytest.fixture
def adventurer() -> PlayerCharacter:
    """A fresh adventurer: 100 HP, 100 stamina, 12 damage."""
    return create_player_character("Robin", CharacterClass.ADVENTURER)


@pytest.fixture
def goblin() -> Monster:
    """A goblin with 10 HP, 4 damage and 7 gold."""
    return make_monster()


@pytest.fixture
def troll() -> Monster:
    """A troll with 60 HP that regenerates 10 once."""
    return make_monster(
        "Mossback",
        species=Species.TROLL,
        health=60,
        base_damage=10,
        gold_drop=45,
        regeneration_amount=10,
    )


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests.

    Returns:
        DiceRoller instance with fixed seed.
    """
    from dungeon_crawler.engine.dice import DiceRoller

    return DiceRoller(seed=42)


@pytest.fixture
def scripted_roller() -> ScriptedRoller:
    """An empty scripted roller; tests queue values with ``extend``."""
    return ScriptedRoller()


@pytest.fixture
def decisions() -> ScriptedDecisions:
    """Decision source that always enters, attacks and rests."""
    return ScriptedDecisions()
