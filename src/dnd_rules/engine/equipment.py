"""Equipment bonuses and equip/attunement transitions.

An item contributes its bonuses only while it is equipped, and, if it
requires attunement, only while it is attuned. Bonuses are summed fresh
on every call and never cached.

Transitions take an inventory list and return a new list with the one
item replaced. The input list and its items are never modified.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from dnd_rules.core.config import get_settings
from dnd_rules.core.exceptions import (
    AttunementLimitExceeded,
    AttunementNotRequired,
    ItemAlreadyAttuned,
    ItemAlreadyEquipped,
    ItemNotAttuned,
    ItemNotEquipped,
    ItemNotFound,
    ItemStillAttuned,
)
from dnd_rules.core.logging import get_logger
from dnd_rules.engine.stats import calculate_modifier, effective_ability_scores
from dnd_rules.models.character import Character
from dnd_rules.models.enums import Ability
from dnd_rules.models.items import InventoryItem, StatBonuses


logger = get_logger(__name__)


@dataclass(frozen=True)
class EffectiveStats:
    """Character statistics with equipment applied.

    Attributes:
        ability_scores: Base scores plus bonuses (not capped).
        modifiers: Modifiers of the effective scores.
        armor_class: Armor class plus the AC bonus.
        max_hit_points: Maximum hit points plus the HP bonus.
        bonuses: The aggregated equipment bonuses.
    """

    ability_scores: dict[Ability, int]
    modifiers: dict[Ability, int]
    armor_class: int
    max_hit_points: int
    bonuses: StatBonuses


# =============================================================================
# Aggregation
# =============================================================================


def item_contributes(item: InventoryItem) -> bool:
    """Whether an item's bonuses currently apply."""
    return item.contributes_bonuses


def calculate_equipped_bonuses(items: Sequence[InventoryItem]) -> StatBonuses:
    """Sum the bonuses of every contributing item."""
    total = StatBonuses()
    for item in items:
        if item_contributes(item):
            total = total + item.stat_bonuses
    return total


def count_attuned(items: Sequence[InventoryItem]) -> int:
    return sum(1 for item in items if item.is_attuned)


def effective_stats(character: Character) -> EffectiveStats:
    """Recompute the character's stats with current equipment."""
    bonuses = calculate_equipped_bonuses(character.inventory)
    scores = effective_ability_scores(character.ability_scores, bonuses)
    stats = EffectiveStats(
        ability_scores=scores,
        modifiers={ability: calculate_modifier(score) for ability, score in scores.items()},
        armor_class=character.armor_class + bonuses.ac_bonus,
        max_hit_points=character.max_hit_points + bonuses.hp_bonus,
        bonuses=bonuses,
    )
    logger.debug(
        "Effective stats computed",
        character_id=str(character.id),
        armor_class=stats.armor_class,
        max_hit_points=stats.max_hit_points,
    )
    return stats


# =============================================================================
# Transitions
# =============================================================================


def _find_item(items: Sequence[InventoryItem], item_id: UUID | str) -> int:
    for index, item in enumerate(items):
        if str(item.id) == str(item_id):
            return index
    logger.warning("Item not found", item_id=str(item_id))
    raise ItemNotFound("Item not found in inventory", item_id=str(item_id))


def _replace(
    items: Sequence[InventoryItem],
    index: int,
    **changes: bool,
) -> list[InventoryItem]:
    item = items[index]
    updated = InventoryItem.model_validate(item.model_dump() | changes)
    return [*items[:index], updated, *items[index + 1:]]


def equip_item(items: Sequence[InventoryItem], item_id: UUID | str) -> list[InventoryItem]:
    """Equip an item.

    Raises:
        ItemNotFound: If no item has this id.
        ItemAlreadyEquipped: If the item is already equipped.
    """
    index = _find_item(items, item_id)
    item = items[index]
    if item.equipped:
        logger.warning("Item already equipped", item_id=str(item.id))
        raise ItemAlreadyEquipped(f"{item.name} is already equipped", item_id=str(item.id))

    logger.info("Item equipped", item_id=str(item.id), name=item.name)
    return _replace(items, index, equipped=True)


def unequip_item(items: Sequence[InventoryItem], item_id: UUID | str) -> list[InventoryItem]:
    """Unequip an item. Attuned items must be unattuned first.

    Raises:
        ItemNotFound: If no item has this id.
        ItemNotEquipped: If the item is not equipped.
        ItemStillAttuned: If the item is attuned.
    """
    index = _find_item(items, item_id)
    item = items[index]
    if not item.equipped:
        logger.warning("Item not equipped", item_id=str(item.id))
        raise ItemNotEquipped(f"{item.name} is not equipped", item_id=str(item.id))
    if item.is_attuned:
        logger.warning("Item still attuned", item_id=str(item.id))
        raise ItemStillAttuned(
            f"Unattune {item.name} before unequipping it",
            item_id=str(item.id),
        )

    logger.info("Item unequipped", item_id=str(item.id), name=item.name)
    return _replace(items, index, equipped=False)


def attune_item(items: Sequence[InventoryItem], item_id: UUID | str) -> list[InventoryItem]:
    """Attune to an equipped item that requires attunement.

    Raises:
        ItemNotFound: If no item has this id.
        AttunementNotRequired: If the item does not need attunement.
        ItemNotEquipped: If the item is not equipped.
        ItemAlreadyAttuned: If the item is already attuned.
        AttunementLimitExceeded: If the attunement limit is already reached.
    """
    index = _find_item(items, item_id)
    item = items[index]
    item_key = str(item.id)

    if not item.requires_attunement:
        logger.warning("Attunement not required", item_id=item_key)
        raise AttunementNotRequired(
            f"{item.name} does not require attunement",
            item_id=item_key,
        )
    if not item.equipped:
        logger.warning("Attunement requires equipped item", item_id=item_key)
        raise ItemNotEquipped(
            f"{item.name} must be equipped before attuning",
            item_id=item_key,
        )
    if item.is_attuned:
        logger.warning("Item already attuned", item_id=item_key)
        raise ItemAlreadyAttuned(f"{item.name} is already attuned", item_id=item_key)

    limit = get_settings().rules.max_attuned_items
    attuned = count_attuned(items)
    if attuned >= limit:
        logger.warning("Attunement limit reached", item_id=item_key, attuned=attuned, limit=limit)
        raise AttunementLimitExceeded(
            f"Cannot attune to more than {limit} items",
            item_id=item_key,
            limit=limit,
        )

    logger.info("Item attuned", item_id=item_key, name=item.name, attuned=attuned + 1)
    return _replace(items, index, is_attuned=True)


def unattune_item(items: Sequence[InventoryItem], item_id: UUID | str) -> list[InventoryItem]:
    """End attunement to an item.

    Raises:
        ItemNotFound: If no item has this id.
        ItemNotAttuned: If the item is not attuned.
    """
    index = _find_item(items, item_id)
    item = items[index]
    if not item.is_attuned:
        logger.warning("Item not attuned", item_id=str(item.id))
        raise ItemNotAttuned(f"{item.name} is not attuned", item_id=str(item.id))

    logger.info("Item unattuned", item_id=str(item.id), name=item.name)
    return _replace(items, index, is_attuned=False)


__all__ = [
    "EffectiveStats",
    "item_contributes",
    "calculate_equipped_bonuses",
    "count_attuned",
    "effective_stats",
    "equip_item",
    "unequip_item",
    "attune_item",
    "unattune_item",
]
