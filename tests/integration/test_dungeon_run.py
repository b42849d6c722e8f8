"""Integration tests for full dungeon runs.

Runs real characters through the preset dungeons with seeded dice and
checks the bookkeeping that must hold whatever the rolls were.
"""

from __future__ import annotations

import pytest

from dungeon_crawler import (
    AutoPilot,
    CharacterClass,
    DiceRoller,
    Dungeon,
    DungeonExplorer,
    ExplorationStatus,
    GameSettings,
    create_dungeon_by_choice,
    create_goblin_cave,
    create_player_character,
    create_swamp_of_trolls,
)
from dungeon_crawler.core.constants import STARTING_GOLD
from dungeon_crawler.engine.stamina import LoggingStaminaObserver, StaminaRecovery


pytestmark = pytest.mark.integration

TERMINAL = {ExplorationStatus.COMPLETED, ExplorationStatus.FAILED, ExplorationStatus.FLED}


class TestDungeonRuns:
    """Test complete runs through the preset dungeons."""

    @pytest.mark.parametrize("seed", range(12))
    @pytest.mark.parametrize("character_class", list(CharacterClass))
    def test_goblin_cave_bookkeeping(self, seed: int, character_class: CharacterClass) -> None:
        """Gold credited to the character matches the reported earnings."""
        hero = create_player_character("Hero", character_class)
        explorer = DungeonExplorer(DiceRoller(seed=seed), AutoPilot(), settings=GameSettings())
        dungeon = create_goblin_cave()

        result = explorer.explore(hero, dungeon)

        assert result.status in TERMINAL
        assert hero.gold == STARTING_GOLD + result.gold_earned
        assert 0 <= result.rooms_cleared <= result.rooms_total == dungeon.room_count
        assert 0 <= hero.health.current <= hero.health.maximum
        assert 0 <= hero.stamina.current <= hero.stamina.maximum
        assert len(hero.inventory.items) == len(result.items_looted)

        if result.status is ExplorationStatus.COMPLETED:
            assert result.rooms_cleared == dungeon.room_count
            assert hero.experience == dungeon.exp_reward
            assert result.gold_earned >= dungeon.gold_reward
            assert hero.is_alive
        else:
            assert hero.experience == 0
            assert not hero.is_alive

    @pytest.mark.parametrize("seed", range(6))
    def test_swamp_of_trolls(self, seed: int) -> None:
        """Troll rooms fight trolls only and keep the same bookkeeping."""
        hero = create_player_character("Hero", CharacterClass.WARRIOR)
        explorer = DungeonExplorer(DiceRoller(seed=seed), AutoPilot(), settings=GameSettings())

        result = explorer.explore(hero, create_dungeon_by_choice(2))

        assert result.dungeon_name == create_swamp_of_trolls().name
        assert result.status in TERMINAL
        assert hero.gold == STARTING_GOLD + result.gold_earned
        for room in result.room_outcomes:
            assert 1 <= room.monster_count <= 2

    def test_flee_ends_run(self) -> None:
        """A cautious autopilot that always flees ends the run early."""
        hero = create_player_character("Hero", CharacterClass.ADVENTURER)
        settings = GameSettings(flee_chance=100)
        explorer = DungeonExplorer(DiceRoller(seed=3), AutoPilot(flee_below=101), settings=settings)

        result = explorer.explore(hero, create_goblin_cave())

        assert result.status is ExplorationStatus.FLED
        assert result.rooms_cleared == 0
        assert hero.gold == STARTING_GOLD

    def test_seeded_runs_are_reproducible(self) -> None:
        """The same seed yields the same run."""
        results = []
        for _ in range(2):
            hero = create_player_character("Hero", CharacterClass.MAGE)
            explorer = DungeonExplorer(DiceRoller(seed=17), AutoPilot(), settings=GameSettings())
            results.append(explorer.explore(hero, create_goblin_cave()).model_dump())

        assert results[0] == results[1]

    def test_dungeon_without_species(self) -> None:
        """Dungeons without monster types are filled with the default species."""
        hero = create_player_character("Hero", CharacterClass.WARRIOR)
        dungeon = Dungeon(name="Quiet Hollow", room_count=2, monster_types=[], gold_reward=10)
        explorer = DungeonExplorer(DiceRoller(seed=8), AutoPilot(), settings=GameSettings())

        result = explorer.explore(hero, dungeon)

        assert result.status in TERMINAL
        assert all(room.monster_count >= 1 for room in result.room_outcomes)

    def test_recovery_between_runs(self) -> None:
        """Natural recovery tops a character up between runs."""
        hero = create_player_character("Hero", CharacterClass.WARRIOR)
        observer = LoggingStaminaObserver()
        explorer = DungeonExplorer(
            DiceRoller(seed=5),
            AutoPilot(rest=False),
            settings=GameSettings(),
            observers=[observer],
        )
        recovery = StaminaRecovery([observer])
        recovery.add_character(hero)

        explorer.explore(hero, create_goblin_cave())
        before = hero.stamina.current
        recovered = recovery.tick()

        assert hero.stamina.current == min(hero.stamina.maximum, before + recovered.get("Hero", 0))
        if before < hero.stamina.maximum:
            assert recovered["Hero"] > 0
