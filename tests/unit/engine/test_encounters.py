"""Tests for monster creation and room generation."""

from __future__ import annotations

import pytest

from conftest import ScriptedRoller
from dungeon_crawler.core.config import GameSettings
from dungeon_crawler.core.exceptions import MonsterCreationError
from dungeon_crawler.engine.dice import DiceRoller
from dungeon_crawler.engine.encounters import EncounterGenerator, MonsterFactory
from dungeon_crawler.models.dungeon import Dungeon, create_goblin_cave, create_swamp_of_trolls
from dungeon_crawler.models.enums import Species


class TestMonsterFactory:
    """Tests for MonsterFactory."""

    @pytest.fixture
    def factory(self, game_settings: GameSettings) -> MonsterFactory:
        return MonsterFactory(game_settings)

    def test_goblin_stats(self, factory: MonsterFactory) -> None:
        """Goblins scale 15+3d health, 3+d damage, 8+2d gold."""
        goblin = factory.create("goblin", 1, ScriptedRoller([0]))

        assert goblin.name == "Gruk"
        assert goblin.species is Species.GOBLIN
        assert goblin.health.current == goblin.health.maximum == 18
        assert goblin.base_damage == 4
        assert goblin.gold_drop == 10
        assert goblin.drop_chance == 40
        assert len(goblin.possible_drops) == 3
        assert goblin.regeneration_amount == 0
        assert not goblin.has_regenerated

    def test_troll_stats(self, factory: MonsterFactory) -> None:
        """Trolls scale 35+8d health, 8+2d damage, 25+10d gold, 5+d regeneration."""
        troll = factory.create("troll", 2, ScriptedRoller([1]))

        assert troll.name == "Swampfist"
        assert troll.health.maximum == 51
        assert troll.base_damage == 12
        assert troll.gold_drop == 45
        assert troll.regeneration_amount == 7
        assert troll.drop_chance == 60
        assert len(troll.possible_drops) == 7

    def test_generic_monster_stats(self, factory: MonsterFactory) -> None:
        """Generic monsters scale 20+5d health, 4+2d damage, 10+5d gold."""
        rng = ScriptedRoller()

        monster = factory.create("monster", 3, rng)

        assert monster.health.maximum == 35
        assert monster.base_damage == 10
        assert monster.gold_drop == 25
        assert monster.drop_chance == 30
        assert monster.possible_drops == []
        assert rng.calls == []

    def test_lookup_ignores_case_and_whitespace(self, factory: MonsterFactory) -> None:
        """Species names are matched loosely."""
        assert factory.create("  GoBlin ", 1, ScriptedRoller([0])).species is Species.GOBLIN

    def test_unknown_species(self, factory: MonsterFactory) -> None:
        """Unknown species raise MonsterCreationError."""
        with pytest.raises(MonsterCreationError) as exc_info:
            factory.create("dragon", 1, ScriptedRoller())

        assert exc_info.value.details["species"] == "dragon"

    @pytest.mark.parametrize(("difficulty", "health"), [(0, 18), (-3, 18), (3, 24), (10, 24)])
    def test_difficulty_clamped(self, factory: MonsterFactory, difficulty: int, health: int) -> None:
        """Difficulty is clamped into [1, max_difficulty]."""
        assert factory.create("goblin", difficulty, ScriptedRoller([0])).health.maximum == health


class TestEncounterGenerator:
    """Tests for EncounterGenerator."""

    def test_base_count(self, game_settings: GameSettings) -> None:
        """Without the extra roll a cave room has two goblins."""
        rng = ScriptedRoller([30, 0, 1])
        generator = EncounterGenerator(rng, settings=game_settings)

        monsters = generator.generate_room(create_goblin_cave())

        assert [m.name for m in monsters] == ["Gruk", "Snarl"]
        assert rng.remaining == 0

    def test_extra_monster(self, game_settings: GameSettings) -> None:
        """A successful 30% roll adds one monster."""
        rng = ScriptedRoller([29, 0, 0, 0])
        generator = EncounterGenerator(rng, settings=game_settings)

        assert len(generator.generate_room(create_goblin_cave())) == 3

    def test_count_clamped_to_maximum(self, game_settings: GameSettings) -> None:
        """Rooms never exceed four monsters."""
        dungeon = Dungeon(name="Warren", monster_types=["goblin"], monsters_per_room_base=6)
        generator = EncounterGenerator(DiceRoller(seed=4), settings=game_settings)

        for room in range(1, 20):
            assert len(generator.generate_room(dungeon, room_number=room)) == 4

    def test_swamp_room(self, game_settings: GameSettings) -> None:
        """Swamp rooms hold one or two trolls at the dungeon difficulty."""
        generator = EncounterGenerator(DiceRoller(seed=9), settings=game_settings)

        for _ in range(20):
            monsters = generator.generate_room(create_swamp_of_trolls())
            assert 1 <= len(monsters) <= 2
            assert all(m.species is Species.TROLL for m in monsters)
            assert all(m.health.maximum == 51 for m in monsters)

    def test_difficulty_override(self, game_settings: GameSettings) -> None:
        """An explicit difficulty replaces the dungeon's."""
        generator = EncounterGenerator(ScriptedRoller([99, 0, 0]), settings=game_settings)

        monsters = generator.generate_room(create_goblin_cave(), 3)

        assert all(m.health.maximum == 24 for m in monsters)

    def test_empty_species_falls_back_to_default(self, game_settings: GameSettings) -> None:
        """A dungeon without species still spawns goblins."""
        dungeon = Dungeon(name="Hollow", monster_types=[], monsters_per_room_base=2)
        generator = EncounterGenerator(DiceRoller(seed=2), settings=game_settings)

        monsters = generator.generate_room(dungeon)

        assert monsters
        assert all(m.species is Species.GOBLIN for m in monsters)

    def test_configured_default_species(self) -> None:
        """The fallback species comes from settings."""
        settings = GameSettings(default_species="Troll")
        dungeon = Dungeon(name="Hollow", monster_types=[])
        generator = EncounterGenerator(DiceRoller(seed=2), settings=settings)

        assert all(m.species is Species.TROLL for m in generator.generate_room(dungeon))

    def test_invalid_species_skipped(self, game_settings: GameSettings) -> None:
        """Slots with unknown species are skipped, leaving an empty room."""
        dungeon = Dungeon(name="Lair", monster_types=["dragon"], monsters_per_room_base=2)
        generator = EncounterGenerator(DiceRoller(seed=3), settings=game_settings)

        assert generator.generate_room(dungeon) == []

    def test_mixed_species_skips_only_invalid(self, game_settings: GameSettings) -> None:
        """Valid species in a mixed list still spawn."""
        dungeon = Dungeon(name="Lair", monster_types=["goblin", "dragon"], monsters_per_room_base=4)
        generator = EncounterGenerator(DiceRoller(seed=6), settings=game_settings)

        spawned = 0
        for _ in range(20):
            monsters = generator.generate_room(dungeon)
            assert len(monsters) <= 4
            assert all(m.species is Species.GOBLIN for m in monsters)
            spawned += len(monsters)

        assert 0 < spawned < 80

    def test_uniform_species_pick(self, game_settings: GameSettings) -> None:
        """Mixed dungeons spawn every listed species."""
        dungeon = Dungeon(name="Bog", monster_types=["goblin", "troll"], monsters_per_room_base=2)
        generator = EncounterGenerator(DiceRoller(seed=12), settings=game_settings)

        species = {m.species for _ in range(30) for m in generator.generate_room(dungeon)}

        assert species == {Species.GOBLIN, Species.TROLL}
