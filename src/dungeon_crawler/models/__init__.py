"""Pydantic V2 models for the dungeon crawler engine.

Submodules:
    enums: Enumeration types (ItemCategory, CharacterClass, Species, ...)
    items: Immutable loot items
    components: Mutable actor components (Health, Stamina, Inventory)
    species: Per-species behaviour profiles
    actors: PlayerCharacter, Monster and the character factory
    dungeon: Dungeon configuration and presets
    outcomes: Combat and exploration result values

Example:
    >>> from dungeon_crawler.models import CharacterClass, create_player_character
    >>> hero = create_player_character("Aria", CharacterClass.MAGE)
    >>> hero.mana
    50
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from dungeon_crawler.models.enums import (
    AttackEvent,
    CharacterClass,
    EncounterStatus,
    ExplorationPhase,
    ExplorationStatus,
    ItemCategory,
    PlayerAction,
    Species,
    VariancePolicy,
)

# =============================================================================
# Items & Components
# =============================================================================
from dungeon_crawler.models.items import Item
from dungeon_crawler.models.components import (
    Component,
    HealthComponent,
    InventoryComponent,
    StaminaComponent,
)

# =============================================================================
# Actors & Species
# =============================================================================
from dungeon_crawler.models.species import (
    SPECIES_PROFILES,
    SpeciesProfile,
    StatScaling,
    get_species_profile,
)
from dungeon_crawler.models.actors import (
    Actor,
    Monster,
    PlayerCharacter,
    create_player_character,
)

# =============================================================================
# Dungeons & Outcomes
# =============================================================================
from dungeon_crawler.models.dungeon import (
    Dungeon,
    available_dungeons,
    create_dungeon_by_choice,
    create_goblin_cave,
    create_swamp_of_trolls,
)
from dungeon_crawler.models.outcomes import (
    CombatOutcome,
    ExplorationResult,
    RoomOutcome,
)


__all__ = [
    # Enums
    "AttackEvent",
    "CharacterClass",
    "EncounterStatus",
    "ExplorationPhase",
    "ExplorationStatus",
    "ItemCategory",
    "PlayerAction",
    "Species",
    "VariancePolicy",
    # Items & components
    "Item",
    "Component",
    "HealthComponent",
    "InventoryComponent",
    "StaminaComponent",
    # Actors & species
    "SPECIES_PROFILES",
    "SpeciesProfile",
    "StatScaling",
    "get_species_profile",
    "Actor",
    "Monster",
    "PlayerCharacter",
    "create_player_character",
    # Dungeons & outcomes
    "Dungeon",
    "available_dungeons",
    "create_dungeon_by_choice",
    "create_goblin_cave",
    "create_swamp_of_trolls",
    "CombatOutcome",
    "ExplorationResult",
    "RoomOutcome",
]
