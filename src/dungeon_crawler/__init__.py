"""Dungeon Crawler - turn-based dungeon combat engine.

Characters enter dungeons and fight room after room of generated
monsters, collecting gold and loot. The engine is synchronous and
in-process: a caller-supplied decision source answers every prompt, and
all randomness comes from an injected random source.

Example:
    >>> from dungeon_crawler import (
    ...     AutoPilot, DiceRoller, DungeonExplorer,
    ...     create_goblin_cave, create_player_character,
    ... )
    >>> hero = create_player_character("Aria", "mage")
    >>> explorer = DungeonExplorer(DiceRoller(seed=1), AutoPilot())
    >>> result = explorer.explore(hero, create_goblin_cave())

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 models for items, actors, dungeons and outcomes.
    engine: Damage, loot, encounters, combat and exploration.
"""

from __future__ import annotations

# Core
from dungeon_crawler.core.config import GameSettings, Settings, get_settings
from dungeon_crawler.core.exceptions import DungeonCrawlerError
from dungeon_crawler.core.logging import configure_logging, get_logger

# Models
from dungeon_crawler.models import (
    CharacterClass,
    CombatOutcome,
    Dungeon,
    ExplorationResult,
    ExplorationStatus,
    Item,
    ItemCategory,
    Monster,
    PlayerAction,
    PlayerCharacter,
    create_dungeon_by_choice,
    create_goblin_cave,
    create_player_character,
    create_swamp_of_trolls,
)

# Engine
from dungeon_crawler.engine import (
    AutoPilot,
    CombatEncounter,
    CombatEngine,
    DecisionSource,
    DiceRoller,
    DungeonExplorer,
    EncounterGenerator,
    MonsterFactory,
    RandomSource,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "DungeonCrawlerError",
    "GameSettings",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "CharacterClass",
    "CombatOutcome",
    "Dungeon",
    "ExplorationResult",
    "ExplorationStatus",
    "Item",
    "ItemCategory",
    "Monster",
    "PlayerAction",
    "PlayerCharacter",
    "create_dungeon_by_choice",
    "create_goblin_cave",
    "create_player_character",
    "create_swamp_of_trolls",
    # Engine
    "AutoPilot",
    "CombatEncounter",
    "CombatEngine",
    "DecisionSource",
    "DiceRoller",
    "DungeonExplorer",
    "EncounterGenerator",
    "MonsterFactory",
    "RandomSource",
]
