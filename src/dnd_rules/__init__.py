"""D&D 5E Rules Core.

Deterministic rules resolution for a D&D 5th Edition campaign service:
dice, ability scores and derived stats, class progression, experience and
leveling, and equipment bonuses. Randomness is limited to the dice engine.
Everything else is a pure function of its inputs.

Example:
    >>> from dnd_rules import AbilityScores, create_character, add_experience, level_up
    >>>
    >>> sheet = create_character(
    ...     "Thorin", "Dwarf", "Fighter", AbilityScores(strength=15, constitution=14)
    ... )
    >>> result = add_experience(sheet.character, 300)
    >>> level_up(result.character).character.level
    2

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 records and static rules tables.
    engine: Dice, stats, class progression, leveling and equipment.
"""

from __future__ import annotations

# Core
from dnd_rules.core.config import Settings, get_settings
from dnd_rules.core.exceptions import DndRulesError

# Engine
from dnd_rules.engine import (
    CharacterSheet,
    DiceRoll,
    DiceRoller,
    EffectiveStats,
    ExperienceResult,
    LevelUpResult,
    add_experience,
    apply_ability_score_improvement,
    attune_item,
    calculate_equipped_bonuses,
    calculate_max_hp,
    calculate_modifier,
    create_character,
    effective_stats,
    equip_item,
    format_roll,
    level_up,
    modify_hit_points,
    parse_notation,
    roll,
    unattune_item,
    unequip_item,
)

# Models
from dnd_rules.models import (
    Ability,
    AbilityScoreImprovement,
    AbilityScores,
    Character,
    CharacterClass,
    CharacterRace,
    InventoryItem,
    StatBonuses,
)


__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "DndRulesError",
    # Models
    "Ability",
    "AbilityScores",
    "AbilityScoreImprovement",
    "Character",
    "CharacterClass",
    "CharacterRace",
    "InventoryItem",
    "StatBonuses",
    # Engine
    "DiceRoll",
    "DiceRoller",
    "parse_notation",
    "roll",
    "format_roll",
    "calculate_modifier",
    "calculate_max_hp",
    "CharacterSheet",
    "create_character",
    "modify_hit_points",
    "ExperienceResult",
    "LevelUpResult",
    "add_experience",
    "level_up",
    "apply_ability_score_improvement",
    "EffectiveStats",
    "effective_stats",
    "calculate_equipped_bonuses",
    "equip_item",
    "unequip_item",
    "attune_item",
    "unattune_item",
]
