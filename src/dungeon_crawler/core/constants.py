"""Game-wide constants for the dungeon crawler engine.

Numeric rules that are part of the combat contract live here; tunable
knobs (flee chance, rest amount, room sizes) live in
:mod:`dungeon_crawler.core.config`.
"""

from __future__ import annotations

# =============================================================================
# Rolls
# =============================================================================

PERCENT_DIE = 100
"""Size of the percentile roll used for every probability check."""

# =============================================================================
# Player Attacks
# =============================================================================

CLASS_ATTACK_SPREAD = 5
"""Warrior/default attacks add a roll in [0, 5) to base damage."""

MAGE_SPELL_MANA_COST = 10
"""Mana consumed by a spell attack."""

MAGE_SPELL_BONUS = 5
"""Flat bonus of a spell attack."""

MAGE_SPELL_SPREAD = 10
"""Spell attacks add a roll in [0, 10)."""

MAGE_STAFF_SPREAD = 3
"""Staff attacks (no mana) add a roll in [0, 3)."""

MIN_HIT_DAMAGE = 1
"""Every landed hit deals at least this much damage."""

# =============================================================================
# Monster Attack Overlays
# =============================================================================

GOBLIN_FURY_CHANCE = 20
GOBLIN_FURY_BONUS = 2
GOBLIN_MISS_CHANCE = 10

TROLL_DEVASTATING_CHANCE = 15
TROLL_DEVASTATING_MULTIPLIER = 2
TROLL_TREMOR_CHANCE = 10

TROLL_REGENERATION_THRESHOLD = 0.5
"""Fraction of max health below which a Troll regenerates (once)."""

# =============================================================================
# Characters
# =============================================================================

STARTING_GOLD = 100
"""Gold every new character starts with."""

DEFAULT_CHARACTER_NAME = "Hero"
"""Name used when a character is created with a blank name."""


__all__ = [
    "PERCENT_DIE",
    "CLASS_ATTACK_SPREAD",
    "MAGE_SPELL_MANA_COST",
    "MAGE_SPELL_BONUS",
    "MAGE_SPELL_SPREAD",
    "MAGE_STAFF_SPREAD",
    "MIN_HIT_DAMAGE",
    "GOBLIN_FURY_CHANCE",
    "GOBLIN_FURY_BONUS",
    "GOBLIN_MISS_CHANCE",
    "TROLL_DEVASTATING_CHANCE",
    "TROLL_DEVASTATING_MULTIPLIER",
    "TROLL_TREMOR_CHANCE",
    "TROLL_REGENERATION_THRESHOLD",
    "STARTING_GOLD",
    "DEFAULT_CHARACTER_NAME",
]
