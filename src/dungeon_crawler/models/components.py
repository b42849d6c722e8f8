"""Mutable state components attached to actors.

Components are plain pydantic data containers with a handful of
clamping helpers. The engine mutates them in place; every helper keeps
its component inside its valid range instead of raising.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from dungeon_crawler.models.enums import ItemCategory
from dungeon_crawler.models.items import Item


# =============================================================================
# Base Component
# =============================================================================


class Component(BaseModel):
    """Base class for all actor components.

    Components are mutated by the engine, so assignments are validated.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",  # computed fields appear in dumps
    )


# =============================================================================
# Health & Stamina
# =============================================================================


class HealthComponent(Component):
    """Hit points of an actor.

    An actor whose current health reaches 0 is defeated.
    """

    current: int = Field(default=10, ge=0, description="Current health")
    maximum: int = Field(default=10, ge=1, description="Maximum health")

    @model_validator(mode="after")
    def validate_current(self) -> Self:
        if self.current > self.maximum:
            raise ValueError(f"current health ({self.current}) exceeds maximum ({self.maximum})")
        return self

    @computed_field(description="Health as percentage")
    @property
    def percentage(self) -> float:
        return (self.current / self.maximum) * 100

    @computed_field(description="Whether the actor is defeated")
    @property
    def is_defeated(self) -> bool:
        return self.current == 0

    def apply_damage(self, amount: int) -> int:
        """Apply damage and return actual damage dealt.

        Amounts of zero or less are ignored.
        """
        if amount <= 0:
            return 0
        actual = min(self.current, amount)
        self.current -= actual
        return actual

    def apply_healing(self, amount: int) -> int:
        """Apply healing and return actual health restored."""
        if amount <= 0:
            return 0
        before = self.current
        self.current = min(self.maximum, self.current + amount)
        return self.current - before

    def restore_full(self) -> None:
        self.current = self.maximum


class StaminaComponent(Component):
    """Stamina pool spent by attacks and refilled by rest and recovery."""

    current: int = Field(default=100, ge=0, description="Current stamina")
    maximum: int = Field(default=100, ge=0, description="Maximum stamina")

    @model_validator(mode="after")
    def validate_current(self) -> Self:
        if self.current > self.maximum:
            raise ValueError(f"current stamina ({self.current}) exceeds maximum ({self.maximum})")
        return self

    @computed_field(description="Stamina missing from the maximum")
    @property
    def missing(self) -> int:
        return self.maximum - self.current

    def spend(self, cost: int) -> bool:
        """Spend stamina if enough is available.

        Args:
            cost: Stamina to spend. Non-positive costs always succeed.

        Returns:
            True if the stamina was spent, False if the pool was too low
            (in which case nothing changes).
        """
        if cost <= 0:
            return True
        if self.current < cost:
            return False
        self.current -= cost
        return True

    def restore(self, amount: int) -> int:
        """Restore stamina, clamped at the maximum.

        Negative amounts are ignored.

        Returns:
            Stamina actually restored.
        """
        if amount <= 0:
            return 0
        before = self.current
        self.current = min(self.maximum, self.current + amount)
        return self.current - before


# =============================================================================
# Inventory
# =============================================================================


class InventoryComponent(Component):
    """Items carried by a character and the subset currently equipped.

    At most one item per equippable category can be equipped, and only
    items that are carried can be equipped.
    """

    items: list[Item] = Field(default_factory=list, description="Carried items in pickup order")
    capacity: int = Field(default=20, ge=1, description="Maximum number of carried items")
    equipped: dict[ItemCategory, Item] = Field(
        default_factory=dict,
        description="Equipped item per category",
    )

    @computed_field(description="Whether the inventory is full")
    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    @computed_field(description="Total sale value of carried items")
    @property
    def total_value(self) -> int:
        return sum(item.value for item in self.items)

    @computed_field(description="Sum of stat bonuses of equipped items")
    @property
    def equipment_bonus(self) -> int:
        return sum(item.stat_bonus for item in self.equipped.values())

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def add_item(self, item: Item) -> bool:
        """Add an item. Returns False when the inventory is full."""
        if self.is_full:
            return False
        self.items.append(item)
        return True

    def remove_item(self, item: Item) -> bool:
        """Remove an item, unequipping it first. Returns success."""
        if item not in self.items:
            return False
        if self.equipped.get(item.category) == item:
            self.unequip(item.category)
        self.items.remove(item)
        return True

    def equip(self, item: Item) -> bool:
        """Equip a carried item, replacing whatever was in its category.

        Returns:
            False if the item is not equippable or not carried.
        """
        if not item.is_equippable or item not in self.items:
            return False
        self.equipped[item.category] = item
        return True

    def unequip(self, category: ItemCategory) -> Item | None:
        """Unequip the item in a category and return it."""
        return self.equipped.pop(category, None)

    def items_by_category(self, category: ItemCategory) -> list[Item]:
        return [item for item in self.items if item.category == category]


__all__ = [
    "Component",
    "HealthComponent",
    "StaminaComponent",
    "InventoryComponent",
]
