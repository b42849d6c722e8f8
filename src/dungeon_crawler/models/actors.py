"""Actors: player characters and monsters.

Both share the :class:`Actor` base (name, health, base damage). Player
characters add stamina, an inventory, gold and mana; monsters add their
species, loot table and the one-shot regeneration state.

Example:
    >>> hero = create_player_character("Aria", CharacterClass.WARRIOR)
    >>> hero.health.maximum, hero.stamina.maximum, hero.base_damage
    (120, 100, 15)
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from dungeon_crawler.core.config import get_settings
from dungeon_crawler.core.constants import (
    DEFAULT_CHARACTER_NAME,
    STARTING_GOLD,
    TROLL_REGENERATION_THRESHOLD,
)
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.components import (
    HealthComponent,
    InventoryComponent,
    StaminaComponent,
)
from dungeon_crawler.models.enums import CharacterClass, Species
from dungeon_crawler.models.items import Item
from dungeon_crawler.models.species import SpeciesProfile, get_species_profile


logger = get_logger(__name__)


# =============================================================================
# Base Actor
# =============================================================================


class Actor(BaseModel):
    """Anything that has health and can attack.

    Attributes:
        uid: Unique identifier.
        name: Display name.
        health: Health component.
        base_damage: Damage before variance and bonuses.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    uid: UUID = Field(default_factory=uuid4, description="Unique actor ID")
    name: str = Field(min_length=1, max_length=100, description="Actor name")
    health: HealthComponent = Field(default_factory=HealthComponent)
    base_damage: int = Field(default=0, ge=0, description="Base attack damage")

    @computed_field(description="Whether the actor is still standing")
    @property
    def is_alive(self) -> bool:
        return not self.health.is_defeated

    def take_damage(self, amount: int) -> int:
        """Apply damage and return the amount actually dealt."""
        return self.health.apply_damage(amount)

    def heal(self, amount: int) -> int:
        return self.health.apply_healing(amount)


# =============================================================================
# Player Character
# =============================================================================


class PlayerCharacter(Actor):
    """A player-owned character.

    Mana is only used by mages; other classes keep it at zero.
    """

    character_class: CharacterClass = Field(default=CharacterClass.ADVENTURER)
    stamina: StaminaComponent = Field(default_factory=StaminaComponent)
    inventory: InventoryComponent = Field(default_factory=InventoryComponent)

    gold: int = Field(default=0, ge=0, description="Gold carried")
    experience: int = Field(default=0, ge=0, description="Experience points")
    level: int = Field(default=1, ge=1, description="Character level")

    mana: int = Field(default=0, ge=0, description="Current mana")
    max_mana: int = Field(default=0, ge=0, description="Maximum mana")

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return DEFAULT_CHARACTER_NAME
        if isinstance(v, str):
            return v.strip()
        return v

    @computed_field(description="Damage bonus from equipped items")
    @property
    def equipment_bonus(self) -> int:
        return self.inventory.equipment_bonus

    def add_gold(self, amount: int) -> None:
        if amount > 0:
            self.gold += amount

    def add_experience(self, amount: int) -> None:
        if amount > 0:
            self.experience += amount

    def restore_stamina(self, amount: int) -> int:
        """Restore stamina (negative amounts ignored) and return the gain."""
        return self.stamina.restore(amount)

    def spend_mana(self, amount: int) -> bool:
        if amount <= 0:
            return True
        if self.mana < amount:
            return False
        self.mana -= amount
        return True

    def rest(self) -> None:
        """Fully restore health, stamina and mana outside a dungeon."""
        self.health.restore_full()
        self.stamina.restore(self.stamina.missing)
        self.mana = self.max_mana
        logger.info("Character rested", character=self.name)

    def __str__(self) -> str:
        return (
            f"{self.name} the {self.character_class.value.capitalize()} "
            f"(HP {self.health.current}/{self.health.maximum}, "
            f"Stamina {self.stamina.current}/{self.stamina.maximum}, Gold {self.gold})"
        )


# =============================================================================
# Monster
# =============================================================================


class Monster(Actor):
    """A hostile creature spawned for a single room.

    Species behaviour (variance, overlays, regeneration) comes from the
    species profile rather than from subclasses.
    """

    species: Species = Field(default=Species.MONSTER)
    gold_drop: int = Field(default=0, ge=0, description="Gold granted on defeat")
    drop_chance: int = Field(default=0, ge=0, le=100, description="Percent chance per drop")
    possible_drops: list[Item] = Field(default_factory=list, description="Ordered loot table")
    regeneration_amount: int = Field(default=0, ge=0, description="Health healed on regeneration")
    has_regenerated: bool = Field(default=False, description="Whether regeneration has fired")

    @property
    def profile(self) -> SpeciesProfile:
        return get_species_profile(self.species)

    def take_damage(self, amount: int) -> int:
        """Apply damage, then run the one-shot regeneration check.

        Returns:
            Damage actually dealt, before any regeneration.
        """
        dealt = super().take_damage(amount)
        self.try_regenerate()
        return dealt

    def try_regenerate(self) -> int:
        """Heal once when a regenerating monster falls below half health.

        Returns:
            Health restored, 0 if nothing happened.
        """
        if not self.profile.regenerates or self.has_regenerated or not self.is_alive:
            return 0
        if self.health.current >= self.health.maximum * TROLL_REGENERATION_THRESHOLD:
            return 0
        healed = self.health.apply_healing(self.regeneration_amount)
        self.has_regenerated = True
        logger.debug(
            "Monster regenerated",
            monster=self.name,
            healed=healed,
            health=self.health.current,
        )
        return healed

    def __str__(self) -> str:
        return f"{self.name} ({self.profile.display_name}, HP {self.health.current}/{self.health.maximum})"


# =============================================================================
# Factory Functions
# =============================================================================


_CLASS_STATS: dict[CharacterClass, tuple[int, int, int, int]] = {
    # health, stamina, damage, mana
    CharacterClass.WARRIOR: (120, 100, 15, 0),
    CharacterClass.MAGE: (80, 120, 10, 50),
    CharacterClass.ADVENTURER: (100, 100, 12, 0),
}


def create_player_character(
    name: str,
    character_class: CharacterClass | str = CharacterClass.ADVENTURER,
    *,
    inventory_capacity: int | None = None,
) -> PlayerCharacter:
    """Create a new level 1 character with the class starting stats.

    Args:
        name: Character name; blank names become the default name.
        character_class: Class or class name.
        inventory_capacity: Number of items the character can carry.
            Defaults to the configured inventory capacity.

    Returns:
        The new character with starting gold.
    """
    character_class = CharacterClass(character_class)
    if inventory_capacity is None:
        inventory_capacity = get_settings().game.inventory_capacity
    health, stamina, damage, mana = _CLASS_STATS[character_class]

    return PlayerCharacter(
        name=name,
        character_class=character_class,
        health=HealthComponent(current=health, maximum=health),
        stamina=StaminaComponent(current=stamina, maximum=stamina),
        inventory=InventoryComponent(capacity=inventory_capacity),
        base_damage=damage,
        gold=STARTING_GOLD,
        mana=mana,
        max_mana=mana,
    )


__all__ = [
    "Actor",
    "PlayerCharacter",
    "Monster",
    "create_player_character",
]
