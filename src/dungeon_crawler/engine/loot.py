"""Loot sampling for defeated monsters."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.engine.dice import RandomSource
from dungeon_crawler.models.actors import Monster
from dungeon_crawler.models.items import Item


logger = get_logger(__name__)


@dataclass(frozen=True)
class LootDrop:
    """Gold and items yielded by one defeated monster."""

    gold: int = 0
    items: list[Item] = field(default_factory=list)


def sample_drops(
    possible_drops: Sequence[Item],
    drop_chance: int,
    rng: RandomSource,
) -> list[Item]:
    """Sample a loot table.

    Each item is an independent percentile check against ``drop_chance``
    (clamped into ``[0, 100]``). Dropped items keep the table order.

    Args:
        possible_drops: Ordered loot table.
        drop_chance: Percent chance for each item.
        rng: Random source.

    Returns:
        The dropped items.
    """
    chance = min(100, max(0, drop_chance))
    return [item for item in possible_drops if rng.percent() < chance]


def loot_monster(monster: Monster, rng: RandomSource) -> LootDrop:
    """Collect the loot of a defeated monster.

    Gold is always granted in full; items are sampled from the monster's
    loot table.
    """
    items = sample_drops(monster.possible_drops, monster.drop_chance, rng)
    logger.debug(
        "Monster looted",
        monster=monster.name,
        gold=monster.gold_drop,
        items=[item.name for item in items],
    )
    return LootDrop(gold=monster.gold_drop, items=items)


__all__ = [
    "LootDrop",
    "sample_drops",
    "loot_monster",
]
