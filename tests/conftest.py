"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the D&D 5E rules core test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dnd_rules.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_RULES_DEBUG": "true",
        "DND_RULES_MAX_ATTUNED_ITEMS": "4",
        "DND_RULES_DICE_SEED": "7",
        "DND_RULES_LOG_LEVEL": "DEBUG",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_ability_scores() -> dict[str, int]:
    """Provide sample ability scores.

    Returns:
        Dictionary of ability scores.
    """
    return {
        "strength": 15,
        "dexterity": 14,
        "constitution": 14,
        "intelligence": 10,
        "wisdom": 12,
        "charisma": 8,
    }


@pytest.fixture
def sample_character(sample_ability_scores: dict[str, int]) -> Any:
    """Create a level 1 Fighter.

    Returns:
        Character instance.
    """
    from dnd_rules.models.character import AbilityScores, Character
    from dnd_rules.models.enums import CharacterClass, CharacterRace

    return Character(
        name="Test Fighter",
        race=CharacterRace.HUMAN,
        character_class=CharacterClass.FIGHTER,
        level=1,
        ability_scores=AbilityScores(**sample_ability_scores),
        hit_points=12,
        max_hit_points=12,
        armor_class=12,
    )


@pytest.fixture
def ring_of_strength() -> Any:
    """An unequipped ring granting +2 Strength that requires attunement.

    Returns:
        InventoryItem instance.
    """
    from dnd_rules.models.enums import ItemRarity, ItemType
    from dnd_rules.models.items import InventoryItem, StatBonuses

    return InventoryItem(
        name="Ring of Strength",
        item_type=ItemType.ACCESSORY,
        rarity=ItemRarity.RARE,
        stat_bonuses=StatBonuses(strength=2),
        requires_attunement=True,
    )


@pytest.fixture
def shield() -> Any:
    """An unequipped +1 shield that needs no attunement.

    Returns:
        InventoryItem instance.
    """
    from dnd_rules.models.enums import ItemRarity, ItemType
    from dnd_rules.models.items import InventoryItem, StatBonuses

    return InventoryItem(
        name="Shield +1",
        item_type=ItemType.ARMOR,
        rarity=ItemRarity.UNCOMMON,
        armor_value=2,
        stat_bonuses=StatBonuses(ac_bonus=1),
    )


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> Any:
    """Create a DiceRoller with a fixed seed for reproducible tests.

    Returns:
        DiceRoller instance with fixed seed.
    """
    from dnd_rules.engine.dice import DiceRoller

    return DiceRoller(seed=42)
