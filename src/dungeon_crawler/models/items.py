"""Loot items.

Items are immutable values. Two items are the same item when their name
and category match, regardless of value or bonus.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from dungeon_crawler.models.enums import ItemCategory


class Item(BaseModel):
    """A piece of loot.

    Attributes:
        name: Display name.
        category: Item category.
        value: Sale value in gold.
        stat_bonus: Damage bonus granted while equipped.

    Example:
        >>> sword = Item(name="Iron Club", category=ItemCategory.WEAPON, value=80, stat_bonus=4)
        >>> sword.is_equippable
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    name: str = Field(min_length=1, max_length=100, description="Display name")
    category: ItemCategory = Field(description="Item category")
    value: int = Field(default=0, ge=0, description="Value in gold")
    stat_bonus: int = Field(default=0, ge=0, description="Bonus while equipped")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        """Trim surrounding whitespace from item names."""
        if isinstance(v, str):
            return v.strip()
        return v

    @computed_field(description="Whether the item can be equipped")
    @property
    def is_equippable(self) -> bool:
        return self.category.is_equippable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.name == other.name and self.category == other.category

    def __hash__(self) -> int:
        return hash((self.name, self.category))

    def __str__(self) -> str:
        bonus = f" (+{self.stat_bonus})" if self.stat_bonus > 0 else ""
        return f"{self.name} [{self.category.display_name}] Value: {self.value} gold{bonus}"


__all__ = ["Item"]
