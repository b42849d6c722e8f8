"""Tests for loot sampling."""

from __future__ import annotations

import pytest

from conftest import ScriptedRoller, make_monster
from dungeon_crawler.engine.dice import DiceRoller
from dungeon_crawler.engine.loot import loot_monster, sample_drops
from dungeon_crawler.models.enums import ItemCategory
from dungeon_crawler.models.items import Item


@pytest.fixture
def table() -> list[Item]:
    return [
        Item(name="Small Healing Potion", category=ItemCategory.POTION, value=15),
        Item(name="Rusty Dagger", category=ItemCategory.WEAPON, value=25, stat_bonus=1),
        Item(name="Goblin Tooth", category=ItemCategory.MISC, value=5),
    ]


class TestSampleDrops:
    """Tests for sample_drops."""

    def test_independent_checks_keep_order(self, table: list[Item]) -> None:
        """Each item is its own check and results keep table order."""
        drops = sample_drops(table, 30, ScriptedRoller([10, 50, 29]))

        assert drops == [table[0], table[2]]

    def test_certain_and_impossible(self, table: list[Item], dice_roller: DiceRoller) -> None:
        """100% drops everything, 0% drops nothing."""
        assert sample_drops(table, 100, dice_roller) == table
        assert sample_drops(table, 0, dice_roller) == []

    @pytest.mark.parametrize(("chance", "expected"), [(150, 3), (-20, 0)])
    def test_chance_clamped(
        self,
        table: list[Item],
        dice_roller: DiceRoller,
        chance: int,
        expected: int,
    ) -> None:
        """Out-of-range chances are clamped into [0, 100]."""
        assert len(sample_drops(table, chance, dice_roller)) == expected

    def test_empty_table(self, dice_roller: DiceRoller) -> None:
        """No table, no drops."""
        assert sample_drops([], 100, dice_roller) == []

    def test_inclusion_rate(self, table: list[Item]) -> None:
        """Over many trials each item drops about 30% of the time."""
        rng = DiceRoller(seed=1234)
        trials = 10_000
        counts = {item.name: 0 for item in table}

        for _ in range(trials):
            for item in sample_drops(table, 30, rng):
                counts[item.name] += 1

        for count in counts.values():
            assert count / trials == pytest.approx(0.30, abs=0.03)


class TestLootMonster:
    """Tests for loot_monster."""

    def test_gold_always_granted(self, table: list[Item]) -> None:
        """The full gold drop is granted regardless of item rolls."""
        monster = make_monster(gold_drop=12, drop_chance=40, possible_drops=table)

        drop = loot_monster(monster, ScriptedRoller([90, 90, 90]))

        assert drop.gold == 12
        assert drop.items == []

    def test_items_sampled(self, table: list[Item]) -> None:
        """Items come from the monster's table and chance."""
        monster = make_monster(gold_drop=12, drop_chance=40, possible_drops=table)

        drop = loot_monster(monster, ScriptedRoller([39, 40, 0]))

        assert drop.items == [table[0], table[2]]
