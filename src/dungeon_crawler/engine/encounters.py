"""Monster creation and room encounter generation.

Example:
    >>> from dungeon_crawler.engine.dice import DiceRoller
    >>> from dungeon_crawler.models.dungeon import create_goblin_cave
    >>> generator = EncounterGenerator(DiceRoller(seed=1))
    >>> monsters = generator.generate_room(create_goblin_cave())
    >>> 1 <= len(monsters) <= 4
    True
"""

from __future__ import annotations

from dungeon_crawler.core.config import GameSettings, get_settings
from dungeon_crawler.core.exceptions import MonsterCreationError
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.engine.dice import RandomSource
from dungeon_crawler.models.actors import Monster
from dungeon_crawler.models.components import HealthComponent
from dungeon_crawler.models.dungeon import Dungeon
from dungeon_crawler.models.enums import Species
from dungeon_crawler.models.species import get_species_profile


logger = get_logger(__name__)


class MonsterFactory:
    """Builds monsters scaled by difficulty.

    Stats follow ``base + difficulty * coefficient`` from the species
    profile. Difficulty is clamped into ``[1, max_difficulty]``.
    """

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings or get_settings().game

    @staticmethod
    def resolve_species(species_name: str) -> Species:
        """Look up a species by name, ignoring case and whitespace.

        Raises:
            MonsterCreationError: If the name is not a known species.
        """
        key = species_name.strip().lower() if isinstance(species_name, str) else ""
        try:
            return Species(key)
        except ValueError as exc:
            raise MonsterCreationError(
                f"Unknown monster species: {species_name!r}",
                species=str(species_name),
            ) from exc

    def clamp_difficulty(self, difficulty: int) -> int:
        clamped = max(1, min(difficulty, self._settings.max_difficulty))
        if clamped != difficulty:
            logger.warning(
                "Invalid difficulty adjusted",
                requested=difficulty,
                difficulty=clamped,
            )
        return clamped

    def create(self, species_name: str, difficulty: int, rng: RandomSource) -> Monster:
        """Create a monster.

        Args:
            species_name: Species name (e.g., 'Goblin', 'troll').
            difficulty: Requested difficulty.
            rng: Random source used for the name pick.

        Returns:
            A fresh monster at full health.

        Raises:
            MonsterCreationError: If the species is unknown.
        """
        species = self.resolve_species(species_name)
        profile = get_species_profile(species)
        level = self.clamp_difficulty(difficulty)

        health = profile.health.at(level)
        monster = Monster(
            name=profile.names[rng.below(len(profile.names))],
            species=species,
            health=HealthComponent(current=health, maximum=health),
            base_damage=profile.damage.at(level),
            gold_drop=profile.gold.at(level),
            drop_chance=profile.drop_chance,
            possible_drops=list(profile.drops),
            regeneration_amount=profile.regeneration.at(level) if profile.regenerates else 0,
        )

        logger.debug(
            "Monster created",
            monster=monster.name,
            species=species,
            difficulty=level,
            health=health,
        )
        return monster


class EncounterGenerator:
    """Builds the monster roster of a dungeon room."""

    def __init__(
        self,
        rng: RandomSource,
        *,
        settings: GameSettings | None = None,
        factory: MonsterFactory | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            rng: Random source for roster size, species and names.
            settings: Engine settings. Defaults to the global settings.
            factory: Monster factory. Defaults to one sharing the settings.
        """
        self._rng = rng
        self._settings = settings or get_settings().game
        self._factory = factory or MonsterFactory(self._settings)

    def roster_size(self, dungeon: Dungeon) -> int:
        """Roll the number of monsters in a room."""
        count = dungeon.monsters_per_room_base
        if self._rng.percent() < self._settings.extra_monster_chance:
            count += 1
        return max(
            self._settings.min_monsters_per_room,
            min(count, self._settings.max_monsters_per_room),
        )

    def species_pool(self, dungeon: Dungeon) -> tuple[str, ...]:
        """Species names a room may spawn, falling back to the default."""
        if dungeon.monster_types:
            return dungeon.monster_types
        logger.warning(
            "Dungeon has no monster types, using default species",
            dungeon=dungeon.name,
            species=self._settings.default_species,
        )
        return (self._settings.default_species,)

    def generate_room(
        self,
        dungeon: Dungeon,
        difficulty: int | None = None,
        *,
        room_number: int = 1,
    ) -> list[Monster]:
        """Generate the monsters of one room.

        Slots whose monster cannot be created are skipped, so the result
        may be empty.

        Args:
            dungeon: Dungeon being explored.
            difficulty: Monster difficulty. Defaults to the dungeon's.
            room_number: Room index, for logging.

        Returns:
            The room roster in attack order.
        """
        level = dungeon.difficulty if difficulty is None else difficulty
        pool = self.species_pool(dungeon)
        count = self.roster_size(dungeon)

        monsters: list[Monster] = []
        for slot in range(count):
            species_name = pool[self._rng.below(len(pool))]
            try:
                monsters.append(self._factory.create(species_name, level, self._rng))
            except MonsterCreationError as exc:
                logger.warning(
                    "Skipping monster slot",
                    room=room_number,
                    slot=slot,
                    error=exc.message,
                    **exc.details,
                )

        logger.info(
            "Room generated",
            dungeon=dungeon.name,
            room=room_number,
            monsters=[monster.name for monster in monsters],
        )
        return monsters


__all__ = [
    "MonsterFactory",
    "EncounterGenerator",
]
