"""Data models and static rules tables.

Record types (AbilityScores, Character, InventoryItem ...) are frozen
pydantic models. Static tables are read-only mappings loaded at import.
"""

from __future__ import annotations

from dnd_rules.models.character import (
    AbilityScoreImprovement,
    AbilityScores,
    ASIHistoryEntry,
    Character,
)
from dnd_rules.models.enums import (
    Ability,
    CharacterClass,
    CharacterRace,
    ItemRarity,
    ItemType,
    RollKind,
    SpellSchool,
)
from dnd_rules.models.features import (
    CLASS_FEATURES,
    AbilityUses,
    ClassFeatureDefinition,
    FixedUses,
    ProficiencyUses,
    UnlimitedUses,
    UsesPerRest,
)
from dnd_rules.models.items import InventoryItem, StatBonuses
from dnd_rules.models.progression import (
    CLASS_HIT_DIE,
    PRIMARY_ABILITIES,
    SPELL_SLOTS_BY_CLASS,
    SPELLCASTING_CLASSES,
    WARLOCK_PACT_SLOTS,
    XP_THRESHOLDS,
)
from dnd_rules.models.races import RACES, RaceDefinition, racial_bonuses
from dnd_rules.models.spells import CLASS_SPELLS, SpellDefinition


__all__ = [
    # Enums
    "Ability",
    "CharacterClass",
    "CharacterRace",
    "RollKind",
    "ItemType",
    "ItemRarity",
    "SpellSchool",
    # Character
    "AbilityScores",
    "AbilityScoreImprovement",
    "ASIHistoryEntry",
    "Character",
    # Items
    "StatBonuses",
    "InventoryItem",
    # Features
    "FixedUses",
    "ProficiencyUses",
    "AbilityUses",
    "UnlimitedUses",
    "UsesPerRest",
    "ClassFeatureDefinition",
    "CLASS_FEATURES",
    # Spells
    "SpellDefinition",
    "CLASS_SPELLS",
    # Progression tables
    "XP_THRESHOLDS",
    "CLASS_HIT_DIE",
    "SPELL_SLOTS_BY_CLASS",
    "WARLOCK_PACT_SLOTS",
    "SPELLCASTING_CLASSES",
    "PRIMARY_ABILITIES",
    # Races
    "RaceDefinition",
    "RACES",
    "racial_bonuses",
]
