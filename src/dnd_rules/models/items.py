"""Inventory item and stat bonus schemas.

An InventoryItem only contributes its StatBonuses while it is equipped,
and, if it requires attunement, while it is attuned as well. Attunement
is only possible on an equipped item, which the model enforces at
construction.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dnd_rules.models.enums import Ability, ItemRarity, ItemType


class StatBonuses(BaseModel):
    """Additive bonuses granted by an item.

    Attributes:
        strength: Bonus to Strength.
        dexterity: Bonus to Dexterity.
        constitution: Bonus to Constitution.
        intelligence: Bonus to Intelligence.
        wisdom: Bonus to Wisdom.
        charisma: Bonus to Charisma.
        ac_bonus: Bonus to armor class.
        hp_bonus: Bonus to maximum hit points.

    Example:
        >>> ring = StatBonuses(strength=2)
        >>> (ring + StatBonuses(ac_bonus=1)).ac_bonus
        1
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: int = 0
    dexterity: int = 0
    constitution: int = 0
    intelligence: int = 0
    wisdom: int = 0
    charisma: int = 0
    ac_bonus: int = 0
    hp_bonus: int = 0

    def __add__(self, other: StatBonuses) -> StatBonuses:
        if not isinstance(other, StatBonuses):
            return NotImplemented
        return StatBonuses(**{
            name: getattr(self, name) + getattr(other, name)
            for name in StatBonuses.model_fields
        })

    def for_ability(self, ability: Ability) -> int:
        """Get the bonus for one ability."""
        return getattr(self, ability.value)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, name) == 0 for name in StatBonuses.model_fields)


class InventoryItem(BaseModel):
    """An item carried by a character.

    Attributes:
        id: Unique item identifier.
        name: Item name.
        item_type: Item category.
        rarity: Magic item rarity.
        description: Free-text description.
        quantity: Stack size.
        damage: Damage notation for weapons (e.g. "1d8").
        armor_value: Base armor value for armor.
        stat_bonuses: Bonuses granted while the item contributes.
        equipped: Whether the item is worn or wielded.
        requires_attunement: Whether bonuses need attunement.
        is_attuned: Whether the character is attuned to the item.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    name: str = Field(min_length=1, max_length=100, description="Item name")
    item_type: ItemType = Field(default=ItemType.MISC, description="Item category")
    rarity: ItemRarity = Field(default=ItemRarity.COMMON, description="Item rarity")
    description: str | None = Field(default=None, description="Item description")
    quantity: Annotated[int, Field(ge=1, description="Stack size")] = 1
    damage: str | None = Field(default=None, description="Weapon damage notation")
    armor_value: Annotated[int | None, Field(ge=0, description="Base armor value")] = None
    stat_bonuses: StatBonuses = Field(default_factory=StatBonuses)
    equipped: bool = False
    requires_attunement: bool = False
    is_attuned: bool = False

    @model_validator(mode="after")
    def validate_attunement(self) -> "InventoryItem":
        """Attunement requires the item to be equipped."""
        if self.is_attuned and not self.equipped:
            raise ValueError(f"Item '{self.name}' cannot be attuned while unequipped")
        return self

    @property
    def contributes_bonuses(self) -> bool:
        """Whether the item's bonuses currently apply."""
        if not self.equipped:
            return False
        return self.is_attuned or not self.requires_attunement


__all__ = [
    "StatBonuses",
    "InventoryItem",
]
