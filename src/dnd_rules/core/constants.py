"""Rules constants for the D&D 5E rules core.

These are the Player's Handbook values. Limits that a table may house-rule
are mirrored in ``dnd_rules.core.config`` and read from there at call time.
"""

from __future__ import annotations

from types import MappingProxyType

# =============================================================================
# Ability Scores
# =============================================================================

MIN_ABILITY_SCORE = 3
"""Lowest ability score a character may have."""

PC_ABILITY_SCORE_CAP = 20
"""Maximum base ability score for player characters (RAW D&D 5E)."""

DEFAULT_ABILITY_SCORE = 10
"""Score assigned to every ability before generation."""

# =============================================================================
# Point Buy Constants (PHB p.13)
# =============================================================================

POINT_BUY_TOTAL = 27
"""Total points available for point buy character creation."""

POINT_BUY_MIN = 8
"""Minimum ability score in point buy."""

POINT_BUY_MAX = 15
"""Maximum ability score in point buy (before racial bonuses)."""

POINT_BUY_COSTS = MappingProxyType({
    8: 0,
    9: 1,
    10: 2,
    11: 3,
    12: 4,
    13: 5,
    14: 7,
    15: 9,
})

# =============================================================================
# Standard Array (PHB p.13)
# =============================================================================

STANDARD_ARRAY = (15, 14, 13, 12, 10, 8)
"""Standard array values for ability scores."""

# =============================================================================
# Dice
# =============================================================================

SUPPORTED_DICE = (4, 6, 8, 10, 12, 20, 100)
"""Die sizes accepted by the notation parser."""

MIN_DICE_COUNT = 1
MAX_DICE_COUNT = 100

CRITICAL_HIT_FACE = 20
CRITICAL_MISS_FACE = 1

# =============================================================================
# Progression
# =============================================================================

MIN_CHARACTER_LEVEL = 1
MAX_CHARACTER_LEVEL = 20

ASI_LEVELS = frozenset({4, 8, 12, 16, 19})
"""Levels at which every class gains an Ability Score Improvement."""

ASI_POINT_TOTAL = 2
"""An ASI is +2 to one ability or +1 to two abilities."""

# =============================================================================
# Equipment
# =============================================================================

MAX_ATTUNED_ITEMS = 3
"""Maximum simultaneously attuned magic items (DMG p.138)."""


__all__ = [
    # Ability Scores
    "MIN_ABILITY_SCORE",
    "PC_ABILITY_SCORE_CAP",
    "DEFAULT_ABILITY_SCORE",
    # Point Buy
    "POINT_BUY_TOTAL",
    "POINT_BUY_MIN",
    "POINT_BUY_MAX",
    "POINT_BUY_COSTS",
    # Standard Array
    "STANDARD_ARRAY",
    # Dice
    "SUPPORTED_DICE",
    "MIN_DICE_COUNT",
    "MAX_DICE_COUNT",
    "CRITICAL_HIT_FACE",
    "CRITICAL_MISS_FACE",
    # Progression
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "ASI_LEVELS",
    "ASI_POINT_TOTAL",
    # Equipment
    "MAX_ATTUNED_ITEMS",
]
