"""Rules engine for the D&D 5E rules core.

Submodules:
    dice: Notation parsing and rolling with advantage/disadvantage (d20 library)
    stats: Ability modifiers, proficiency, armor class and hit points
    classes: Class features, spell slots and spell lists by level
    leveling: Experience, level-up and Ability Score Improvements
    equipment: Equipment bonuses and equip/attunement transitions
    characters: Character creation and hit point changes

Example:
    >>> from dnd_rules.engine import add_experience, level_up
    >>>
    >>> result = add_experience(fighter, 300)
    >>> if result.should_level_up:
    ...     fighter = level_up(result.character).character
"""

from __future__ import annotations

from dnd_rules.engine.characters import (
    CharacterSheet,
    create_character,
    is_unconscious,
    modify_hit_points,
)
from dnd_rules.engine.classes import (
    features_for_level,
    initial_spells,
    is_spellcaster,
    newly_unlocked_features,
    pact_magic_for_level,
    primary_abilities,
    resolve_uses_per_rest,
    saving_throw_proficiencies,
    spell_slots_for_level,
    spellcasting_ability,
    spells_for_class,
)
from dnd_rules.engine.dice import (
    DiceNotation,
    DiceRoll,
    DiceRoller,
    format_roll,
    is_critical_hit,
    is_critical_miss,
    parse_notation,
    roll,
    roll_with_advantage,
    roll_with_disadvantage,
)
from dnd_rules.engine.equipment import (
    EffectiveStats,
    attune_item,
    calculate_equipped_bonuses,
    count_attuned,
    effective_stats,
    equip_item,
    item_contributes,
    unattune_item,
    unequip_item,
)
from dnd_rules.engine.leveling import (
    ExperienceResult,
    LevelUpResult,
    add_experience,
    apply_ability_score_improvement,
    can_level_up,
    experience_for_level,
    experience_to_next_level,
    level_for_experience,
    level_up,
)
from dnd_rules.engine.stats import (
    base_armor_class,
    calculate_armor_class,
    calculate_max_hp,
    calculate_modifier,
    calculate_modifiers,
    default_ability_scores,
    effective_ability_scores,
    format_modifier,
    hit_die_for,
    is_valid_ability_score,
    max_hp_at_level_one,
    point_buy_cost,
    proficiency_bonus,
    standard_array,
    validate_ability_score,
    validate_point_buy,
)


__all__ = [
    # Dice
    "DiceNotation",
    "DiceRoll",
    "DiceRoller",
    "parse_notation",
    "is_critical_hit",
    "is_critical_miss",
    "format_roll",
    "roll",
    "roll_with_advantage",
    "roll_with_disadvantage",
    # Stats
    "calculate_modifier",
    "calculate_modifiers",
    "format_modifier",
    "proficiency_bonus",
    "base_armor_class",
    "calculate_armor_class",
    "hit_die_for",
    "max_hp_at_level_one",
    "calculate_max_hp",
    "is_valid_ability_score",
    "validate_ability_score",
    "point_buy_cost",
    "validate_point_buy",
    "standard_array",
    "default_ability_scores",
    "effective_ability_scores",
    # Classes
    "features_for_level",
    "newly_unlocked_features",
    "resolve_uses_per_rest",
    "spell_slots_for_level",
    "pact_magic_for_level",
    "is_spellcaster",
    "spellcasting_ability",
    "spells_for_class",
    "initial_spells",
    "primary_abilities",
    "saving_throw_proficiencies",
    # Leveling
    "ExperienceResult",
    "LevelUpResult",
    "experience_for_level",
    "level_for_experience",
    "experience_to_next_level",
    "can_level_up",
    "add_experience",
    "level_up",
    "apply_ability_score_improvement",
    # Equipment
    "EffectiveStats",
    "item_contributes",
    "calculate_equipped_bonuses",
    "count_attuned",
    "effective_stats",
    "equip_item",
    "unequip_item",
    "attune_item",
    "unattune_item",
    # Characters
    "CharacterSheet",
    "create_character",
    "modify_hit_points",
    "is_unconscious",
]
