"""Ability scores and derived statistics.

Pure functions over scores, levels and classes: modifiers, proficiency
bonus, armor class, hit points and point-buy costs.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from dnd_rules.core.config import get_settings
from dnd_rules.core.constants import (
    DEFAULT_ABILITY_SCORE,
    POINT_BUY_COSTS,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    POINT_BUY_TOTAL,
    STANDARD_ARRAY,
)
from dnd_rules.core.exceptions import InvalidAbilityScore, InvalidPointBuy, UnknownCharacterClass
from dnd_rules.core.logging import get_logger
from dnd_rules.models.character import AbilityScores
from dnd_rules.models.enums import Ability, CharacterClass
from dnd_rules.models.items import StatBonuses
from dnd_rules.models.progression import CLASS_HIT_DIE


logger = get_logger(__name__)


# =============================================================================
# Modifiers
# =============================================================================


def calculate_modifier(score: int) -> int:
    """Calculate an ability modifier.

    Args:
        score: Ability score.

    Returns:
        ``(score - 10) // 2``, rounded toward negative infinity.

    Example:
        >>> calculate_modifier(15)
        2
        >>> calculate_modifier(9)
        -1
    """
    return (score - 10) // 2


def calculate_modifiers(scores: AbilityScores | Mapping[Ability, int]) -> dict[Ability, int]:
    """Modifiers for all six abilities."""
    if isinstance(scores, AbilityScores):
        scores = scores.as_dict()
    return {ability: calculate_modifier(score) for ability, score in scores.items()}


def format_modifier(modifier: int) -> str:
    """Format a modifier with an explicit sign (``+2``, ``-1``, ``+0``)."""
    return f"{modifier:+d}"


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus for a character level (+2 at 1-4 up to +6 at 17-20)."""
    return (level - 1) // 4 + 2


# =============================================================================
# Armor Class and Hit Points
# =============================================================================


def base_armor_class(dexterity_modifier: int) -> int:
    """Unarmored AC: 10 + Dexterity modifier."""
    return 10 + dexterity_modifier


def calculate_armor_class(dexterity: int, armor_value: int | None = None) -> int:
    """Armor class from a Dexterity score and optional worn armor.

    Args:
        dexterity: Dexterity score.
        armor_value: Base value of worn armor, or None when unarmored.

    Returns:
        ``armor_value + dex_mod`` with armor, otherwise ``10 + dex_mod``.
    """
    dex_mod = calculate_modifier(dexterity)
    if armor_value is not None:
        return armor_value + dex_mod
    return base_armor_class(dex_mod)


def hit_die_for(character_class: CharacterClass | str) -> int:
    """Hit die size for a class.

    Raises:
        UnknownCharacterClass: If the class is not a PHB class.
    """
    try:
        return CLASS_HIT_DIE[CharacterClass(character_class)]
    except ValueError as exc:
        raise UnknownCharacterClass(
            f"Unknown character class: {character_class}",
            details={"character_class": str(character_class)},
        ) from exc


def max_hp_at_level_one(character_class: CharacterClass | str, constitution_modifier: int) -> int:
    """Level 1 hit points: full hit die + CON modifier, minimum 1."""
    return max(1, hit_die_for(character_class) + constitution_modifier)


def calculate_max_hp(character_class: CharacterClass | str, constitution: int, level: int) -> int:
    """Maximum hit points using the fixed average per level.

    Level 1 gets the full hit die plus the CON modifier. Each later level
    adds ``hit_die // 2 + 1 + con_mod``. The result is never below the
    character level.

    Args:
        character_class: Character class.
        constitution: Constitution score.
        level: Character level.

    Returns:
        Maximum hit points.

    Example:
        >>> calculate_max_hp(CharacterClass.FIGHTER, 14, 3)
        28
    """
    hit_die = hit_die_for(character_class)
    con_mod = calculate_modifier(constitution)
    hp = hit_die + con_mod + (hit_die // 2 + 1 + con_mod) * (level - 1)
    return max(hp, level)


# =============================================================================
# Ability Score Validation and Generation
# =============================================================================


def is_valid_ability_score(score: int) -> bool:
    rules = get_settings().rules
    return rules.ability_score_min <= score <= rules.ability_score_max


def validate_ability_score(score: int, ability: Ability | None = None) -> int:
    """Validate a single ability score.

    Raises:
        InvalidAbilityScore: If the score is out of range.
    """
    if not is_valid_ability_score(score):
        rules = get_settings().rules
        raise InvalidAbilityScore(
            f"Ability score must be between {rules.ability_score_min} "
            f"and {rules.ability_score_max}",
            ability=ability.value if ability else None,
            score=score,
        )
    return score


def point_buy_cost(scores: AbilityScores | Mapping[Ability, int]) -> int | float:
    """Total point-buy cost of a set of scores.

    Any score outside 8..15 makes the build impossible and yields
    ``math.inf``.
    """
    if isinstance(scores, AbilityScores):
        scores = scores.as_dict()
    total = 0
    for score in scores.values():
        cost = POINT_BUY_COSTS.get(score)
        if cost is None:
            return math.inf
        total += cost
    return total


def validate_point_buy(
    scores: AbilityScores | Mapping[Ability, int],
    budget: int = POINT_BUY_TOTAL,
) -> int:
    """Validate a point-buy build and return the points spent.

    Raises:
        InvalidPointBuy: If a score is outside 8..15 or the build is over budget.
    """
    cost = point_buy_cost(scores)
    if math.isinf(cost):
        logger.warning("Point buy score out of range")
        raise InvalidPointBuy(
            f"Point buy scores must be between {POINT_BUY_MIN} and {POINT_BUY_MAX}",
        )
    if cost > budget:
        logger.warning("Point buy over budget", cost=cost, budget=budget)
        raise InvalidPointBuy(
            f"Point buy costs {cost} points, budget is {budget}",
            details={"cost": cost, "budget": budget},
        )
    return int(cost)


def standard_array() -> tuple[int, ...]:
    """The standard array, highest first."""
    return STANDARD_ARRAY


def default_ability_scores() -> AbilityScores:
    """All six scores at 10."""
    return AbilityScores(**{ability.value: DEFAULT_ABILITY_SCORE for ability in Ability})


def effective_ability_scores(base: AbilityScores, bonuses: StatBonuses) -> dict[Ability, int]:
    """Base scores plus equipment bonuses.

    Equipment may push a score past the normal cap, so the result is a
    plain mapping and is not range-checked.
    """
    return {ability: base.get(ability) + bonuses.for_ability(ability) for ability in Ability}


__all__ = [
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
]
