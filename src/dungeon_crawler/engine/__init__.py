"""Game engine for the dungeon crawler.

Submodules:
    dice: Injectable random source (DiceRoller)
    damage: Damage variance and attack resolution
    loot: Loot sampling for defeated monsters
    encounters: Monster factory and room roster generation
    combat: Round-by-round combat for one room
    exploration: Room-by-room dungeon state machine
    decisions: Decision source protocol and the AutoPilot
    stamina: Stamina observers and natural recovery

Example:
    >>> from dungeon_crawler.engine import AutoPilot, DiceRoller, DungeonExplorer
    >>> from dungeon_crawler.models import create_goblin_cave, create_player_character
    >>>
    >>> hero = create_player_character("Aria", "warrior")
    >>> explorer = DungeonExplorer(DiceRoller(seed=42), AutoPilot(flee_below=20))
    >>> result = explorer.explore(hero, create_goblin_cave())
    >>> print(result.status, result.gold_earned)
"""

from __future__ import annotations

# =============================================================================
# Randomness & Damage
# =============================================================================
from dungeon_crawler.engine.dice import (
    DiceRoller,
    RandomSource,
    roll_chance,
)
from dungeon_crawler.engine.damage import (
    AttackRoll,
    calculate_damage,
    resolve_monster_attack,
    resolve_player_attack,
)
from dungeon_crawler.engine.loot import (
    LootDrop,
    loot_monster,
    sample_drops,
)

# =============================================================================
# Encounters & Combat
# =============================================================================
from dungeon_crawler.engine.encounters import (
    EncounterGenerator,
    MonsterFactory,
)
from dungeon_crawler.engine.combat import (
    CombatEncounter,
    CombatEngine,
    CombatEvent,
    CombatEventType,
    RoundReport,
)

# =============================================================================
# Exploration & Collaborators
# =============================================================================
from dungeon_crawler.engine.decisions import (
    AutoPilot,
    DecisionSource,
)
from dungeon_crawler.engine.stamina import (
    LoggingStaminaObserver,
    StaminaObserver,
    StaminaRecovery,
)
from dungeon_crawler.engine.exploration import DungeonExplorer


__all__ = [
    # Randomness & damage
    "DiceRoller",
    "RandomSource",
    "roll_chance",
    "AttackRoll",
    "calculate_damage",
    "resolve_monster_attack",
    "resolve_player_attack",
    "LootDrop",
    "loot_monster",
    "sample_drops",
    # Encounters & combat
    "EncounterGenerator",
    "MonsterFactory",
    "CombatEncounter",
    "CombatEngine",
    "CombatEvent",
    "CombatEventType",
    "RoundReport",
    # Exploration & collaborators
    "AutoPilot",
    "DecisionSource",
    "LoggingStaminaObserver",
    "StaminaObserver",
    "StaminaRecovery",
    "DungeonExplorer",
]
