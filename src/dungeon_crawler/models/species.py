"""Per-species behaviour profiles.

Monsters are not subclassed by species. Each species instead has a
frozen :class:`SpeciesProfile` carrying its damage variance, attack
overlays, regeneration rule, stat scaling, drop table and name pool.
The shared attack dispatch in :mod:`dungeon_crawler.engine.damage` and
the :class:`~dungeon_crawler.engine.encounters.MonsterFactory` read these
profiles.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dungeon_crawler.core.constants import (
    GOBLIN_FURY_BONUS,
    GOBLIN_FURY_CHANCE,
    GOBLIN_MISS_CHANCE,
    TROLL_DEVASTATING_CHANCE,
    TROLL_DEVASTATING_MULTIPLIER,
    TROLL_TREMOR_CHANCE,
)
from dungeon_crawler.models.enums import ItemCategory, Species, VariancePolicy
from dungeon_crawler.models.items import Item


class StatScaling(BaseModel):
    """Linear stat formula: ``base + difficulty * coefficient``."""

    model_config = ConfigDict(frozen=True)

    base: int = Field(ge=0)
    coefficient: int = Field(ge=0)

    def at(self, difficulty: int) -> int:
        return self.base + difficulty * self.coefficient


class SpeciesProfile(BaseModel):
    """Behaviour parameters of one monster species.

    Attributes:
        species: The species described.
        variance: Damage variance policy.
        fury_chance: Percent chance of a furious hit (flat bonus).
        fury_bonus: Flat damage added by a furious hit.
        miss_chance: Percent chance of a clean miss, rolled when not furious.
        devastating_chance: Percent chance of a devastating hit.
        devastating_multiplier: Damage multiplier of a devastating hit.
        tremor_chance: Percent chance of a flavour-only tremor event,
            rolled when not devastating.
        regenerates: Whether the species heals once below half health.
        health: Health scaling.
        damage: Base damage scaling.
        gold: Gold drop scaling.
        regeneration: Regeneration amount scaling.
        drop_chance: Percent chance for each possible drop.
        names: Pool of names for spawned monsters.
        drops: Ordered table of possible drops.
    """

    model_config = ConfigDict(frozen=True)

    species: Species
    variance: VariancePolicy

    fury_chance: int = Field(default=0, ge=0, le=100)
    fury_bonus: int = Field(default=0, ge=0)
    miss_chance: int = Field(default=0, ge=0, le=100)
    devastating_chance: int = Field(default=0, ge=0, le=100)
    devastating_multiplier: int = Field(default=1, ge=1)
    tremor_chance: int = Field(default=0, ge=0, le=100)

    regenerates: bool = False

    health: StatScaling
    damage: StatScaling
    gold: StatScaling
    regeneration: StatScaling = StatScaling(base=0, coefficient=0)

    drop_chance: int = Field(default=0, ge=0, le=100)
    names: tuple[str, ...] = Field(min_length=1)
    drops: tuple[Item, ...] = ()

    @property
    def display_name(self) -> str:
        return self.species.value.capitalize()


# =============================================================================
# Species Registry
# =============================================================================


GOBLIN_PROFILE = SpeciesProfile(
    species=Species.GOBLIN,
    variance=VariancePolicy.GOBLIN,
    fury_chance=GOBLIN_FURY_CHANCE,
    fury_bonus=GOBLIN_FURY_BONUS,
    miss_chance=GOBLIN_MISS_CHANCE,
    health=StatScaling(base=15, coefficient=3),
    damage=StatScaling(base=3, coefficient=1),
    gold=StatScaling(base=8, coefficient=2),
    drop_chance=40,
    names=("Gruk", "Snarl", "Grik", "Zog", "Mog", "Brak", "Skrim", "Nix", "Grot", "Vex"),
    drops=(
        Item(name="Small Healing Potion", category=ItemCategory.POTION, value=15),
        Item(name="Rusty Dagger", category=ItemCategory.WEAPON, value=25, stat_bonus=1),
        Item(name="Goblin Tooth", category=ItemCategory.MISC, value=5),
    ),
)

TROLL_PROFILE = SpeciesProfile(
    species=Species.TROLL,
    variance=VariancePolicy.TROLL,
    devastating_chance=TROLL_DEVASTATING_CHANCE,
    devastating_multiplier=TROLL_DEVASTATING_MULTIPLIER,
    tremor_chance=TROLL_TREMOR_CHANCE,
    regenerates=True,
    health=StatScaling(base=35, coefficient=8),
    damage=StatScaling(base=8, coefficient=2),
    gold=StatScaling(base=25, coefficient=10),
    regeneration=StatScaling(base=5, coefficient=1),
    drop_chance=60,
    names=(
        "Mossback",
        "Swampfist",
        "Mudcrusher",
        "Thornhide",
        "Bogstomper",
        "Slimeclaw",
        "Marshbane",
        "Rotgut",
        "Murkwater",
        "Mireking",
    ),
    drops=(
        Item(name="Iron Club", category=ItemCategory.WEAPON, value=80, stat_bonus=4),
        Item(name="Swamp Hammer", category=ItemCategory.WEAPON, value=120, stat_bonus=6),
        Item(name="Troll Leather Armor", category=ItemCategory.ARMOR, value=100, stat_bonus=3),
        Item(name="Bone Helm", category=ItemCategory.ARMOR, value=60, stat_bonus=2),
        Item(name="Medium Healing Potion", category=ItemCategory.POTION, value=50),
        Item(name="Magic Moss", category=ItemCategory.MISC, value=40),
        Item(name="Troll Tusk", category=ItemCategory.MISC, value=75),
    ),
)

MONSTER_PROFILE = SpeciesProfile(
    species=Species.MONSTER,
    variance=VariancePolicy.MONSTER,
    health=StatScaling(base=20, coefficient=5),
    damage=StatScaling(base=4, coefficient=2),
    gold=StatScaling(base=10, coefficient=5),
    drop_chance=30,
    names=("Monster",),
)

SPECIES_PROFILES: dict[Species, SpeciesProfile] = {
    Species.GOBLIN: GOBLIN_PROFILE,
    Species.TROLL: TROLL_PROFILE,
    Species.MONSTER: MONSTER_PROFILE,
}


def get_species_profile(species: Species) -> SpeciesProfile:
    return SPECIES_PROFILES[species]


__all__ = [
    "StatScaling",
    "SpeciesProfile",
    "GOBLIN_PROFILE",
    "TROLL_PROFILE",
    "MONSTER_PROFILE",
    "SPECIES_PROFILES",
    "get_species_profile",
]
