"""Enumeration types for the dungeon crawler engine.

This module defines the closed vocabularies used across the models and
the engine: item categories, character classes, monster species, damage
variance policies and the states reported by combat and exploration.
"""

from __future__ import annotations

from enum import StrEnum


class ItemCategory(StrEnum):
    """Categories of loot items."""

    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"
    MISC = "misc"

    @property
    def display_name(self) -> str:
        """Get the human-readable category name.

        Returns:
            Display name (e.g., 'Miscellaneous' for MISC).
        """
        if self is ItemCategory.MISC:
            return "Miscellaneous"
        return self.value.capitalize()

    @property
    def is_equippable(self) -> bool:
        """Whether items of this category can be equipped."""
        return self in (ItemCategory.WEAPON, ItemCategory.ARMOR)


class CharacterClass(StrEnum):
    """Playable character classes.

    The class decides the stamina cost and damage formula of an attack,
    and the rate of out-of-combat stamina recovery.
    """

    WARRIOR = "warrior"
    MAGE = "mage"
    ADVENTURER = "adventurer"
    """Generic class with no attack cost."""

    @property
    def stamina_cost(self) -> int:
        """Stamina spent by one attack."""
        return {
            CharacterClass.WARRIOR: 5,
            CharacterClass.MAGE: 3,
            CharacterClass.ADVENTURER: 0,
        }[self]

    @property
    def recovery_rate(self) -> float:
        """Fraction of max stamina recovered per natural recovery tick."""
        return {
            CharacterClass.WARRIOR: 0.05,
            CharacterClass.MAGE: 0.10,
            CharacterClass.ADVENTURER: 0.05,
        }[self]


class Species(StrEnum):
    """Monster species."""

    GOBLIN = "goblin"
    TROLL = "troll"
    MONSTER = "monster"
    """Generic monster with the default variance and no special moves."""


class VariancePolicy(StrEnum):
    """Spread of random damage around a base value."""

    CLASS_ADDITIVE = "class_additive"
    """Small additive roll used by character classes."""

    GOBLIN = "goblin"
    """Symmetric +/-50%."""

    TROLL = "troll"
    """Symmetric +/-10%."""

    MONSTER = "monster"
    """Symmetric +/-20%, the engine-wide default."""

    @property
    def percent(self) -> int:
        """Symmetric variance as a percentage of base damage.

        Returns:
            Variance percent, 0 for the additive class policy.
        """
        return {
            VariancePolicy.CLASS_ADDITIVE: 0,
            VariancePolicy.GOBLIN: 50,
            VariancePolicy.TROLL: 10,
            VariancePolicy.MONSTER: 20,
        }[self]


class AttackEvent(StrEnum):
    """Flavour of a resolved attack."""

    NORMAL = "normal"
    FURIOUS = "furious"
    MISS = "miss"
    DEVASTATING = "devastating"
    TREMOR = "tremor"
    SPELL = "spell"
    STAFF = "staff"
    EXHAUSTED = "exhausted"
    """The attacker was too tired to act."""


class PlayerAction(StrEnum):
    """Choices offered to the player each combat round."""

    ATTACK = "attack"
    FLEE = "flee"


class EncounterStatus(StrEnum):
    """State of a single room encounter."""

    ACTIVE = "active"
    VICTORY = "victory"
    DEFEAT = "defeat"
    FLED = "fled"

    @property
    def is_terminal(self) -> bool:
        """Whether the encounter has ended."""
        return self is not EncounterStatus.ACTIVE


class ExplorationPhase(StrEnum):
    """Phases of the dungeon exploration state machine."""

    NOT_STARTED = "not_started"
    CONFIRMING = "confirming"
    ROOM_LOOP = "room_loop"
    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"


class ExplorationStatus(StrEnum):
    """Final outcome of a dungeon run as reported to the caller."""

    COMPLETED = "completed"
    FAILED = "failed"
    FLED = "fled"
    ABORTED = "aborted"


__all__ = [
    "ItemCategory",
    "CharacterClass",
    "Species",
    "VariancePolicy",
    "AttackEvent",
    "PlayerAction",
    "EncounterStatus",
    "ExplorationPhase",
    "ExplorationStatus",
]
