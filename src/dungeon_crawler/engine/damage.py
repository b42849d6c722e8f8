"""Attack and damage resolution.

Damage is computed in two layers. :func:`calculate_damage` applies the
variance policy of the attacker to its base damage; the attack resolvers
then roll the species or class overlays on top (furious hits, misses,
devastating hits, spells).

Every landed hit deals at least 1 damage. The only zero-damage results
are a goblin's clean miss and an attack the player was too tired to make.
"""

from __future__ import annotations

from dataclasses import dataclass

from dungeon_crawler.core.constants import (
    CLASS_ATTACK_SPREAD,
    MAGE_SPELL_BONUS,
    MAGE_SPELL_MANA_COST,
    MAGE_SPELL_SPREAD,
    MAGE_STAFF_SPREAD,
    MIN_HIT_DAMAGE,
)
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.engine.dice import RandomSource
from dungeon_crawler.models.actors import Monster, PlayerCharacter
from dungeon_crawler.models.enums import AttackEvent, CharacterClass, VariancePolicy


logger = get_logger(__name__)


@dataclass(frozen=True)
class AttackRoll:
    """Result of resolving one attack.

    Attributes:
        damage: Damage to apply to the target.
        event: Flavour of the attack.
        stamina_spent: Stamina the attacker paid.
        mana_spent: Mana the attacker paid.
    """

    damage: int
    event: AttackEvent = AttackEvent.NORMAL
    stamina_spent: int = 0
    mana_spent: int = 0

    @property
    def landed(self) -> bool:
        return self.damage > 0


def calculate_damage(
    base_damage: int,
    policy: VariancePolicy,
    rng: RandomSource,
    *,
    flat_bonus: int = 0,
) -> int:
    """Roll damage around a base value.

    The class policy adds a roll in ``[0, 5)`` and the flat bonus. The
    symmetric policies spread the base by ``floor(base * pct / 100)`` in
    both directions.

    Args:
        base_damage: Attacker's base damage. Negative values count as 0.
        policy: Variance policy of the attacker.
        rng: Random source.
        flat_bonus: Bonus added after the roll (equipment).

    Returns:
        Damage, never below 1.
    """
    base = max(0, base_damage)

    if policy is VariancePolicy.CLASS_ADDITIVE:
        return max(MIN_HIT_DAMAGE, base + rng.below(CLASS_ATTACK_SPREAD) + flat_bonus)

    variance = base * policy.percent // 100
    delta = rng.below(2 * variance + 1) - variance
    return max(MIN_HIT_DAMAGE, base + delta + flat_bonus)


def resolve_monster_attack(monster: Monster, rng: RandomSource) -> AttackRoll:
    """Resolve a monster's attack using its species profile.

    The base variance is rolled first, then each overlay the species has
    is rolled on its own percentile check.

    Args:
        monster: The attacking monster.
        rng: Random source.

    Returns:
        The attack roll.
    """
    profile = monster.profile
    damage = calculate_damage(monster.base_damage, profile.variance, rng)

    if profile.fury_chance and rng.percent() < profile.fury_chance:
        return AttackRoll(damage=damage + profile.fury_bonus, event=AttackEvent.FURIOUS)
    if profile.miss_chance and rng.percent() < profile.miss_chance:
        return AttackRoll(damage=0, event=AttackEvent.MISS)

    if profile.devastating_chance and rng.percent() < profile.devastating_chance:
        return AttackRoll(
            damage=damage * profile.devastating_multiplier,
            event=AttackEvent.DEVASTATING,
        )
    if profile.tremor_chance and rng.percent() < profile.tremor_chance:
        return AttackRoll(damage=damage, event=AttackEvent.TREMOR)

    return AttackRoll(damage=damage)


def resolve_player_attack(player: PlayerCharacter, rng: RandomSource) -> AttackRoll:
    """Resolve a player's attack using the character class.

    The class stamina cost is paid first; a character who cannot pay it
    is too tired and the attack is void. Mages cast a spell while they
    have enough mana and fall back to their staff otherwise.

    Args:
        player: The attacking character. Its stamina and mana are spent.
        rng: Random source.

    Returns:
        The attack roll.
    """
    cost = player.character_class.stamina_cost
    if not player.stamina.spend(cost):
        logger.debug(
            "Too tired to attack",
            character=player.name,
            stamina=player.stamina.current,
            cost=cost,
        )
        return AttackRoll(damage=0, event=AttackEvent.EXHAUSTED)

    base = max(0, player.base_damage)
    bonus = player.equipment_bonus

    if player.character_class is CharacterClass.MAGE:
        if player.spend_mana(MAGE_SPELL_MANA_COST):
            damage = base + bonus + MAGE_SPELL_BONUS + rng.below(MAGE_SPELL_SPREAD)
            return AttackRoll(
                damage=max(MIN_HIT_DAMAGE, damage),
                event=AttackEvent.SPELL,
                stamina_spent=cost,
                mana_spent=MAGE_SPELL_MANA_COST,
            )
        damage = base + bonus + rng.below(MAGE_STAFF_SPREAD)
        return AttackRoll(
            damage=max(MIN_HIT_DAMAGE, damage),
            event=AttackEvent.STAFF,
            stamina_spent=cost,
        )

    damage = calculate_damage(base, VariancePolicy.CLASS_ADDITIVE, rng, flat_bonus=bonus)
    return AttackRoll(damage=damage, stamina_spent=cost)


__all__ = [
    "AttackRoll",
    "calculate_damage",
    "resolve_monster_attack",
    "resolve_player_attack",
]
