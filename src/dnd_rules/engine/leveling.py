"""Experience, level-up and Ability Score Improvements.

Awarding experience never changes the level by itself. It reports whether
the character can level up, and ``level_up`` then advances exactly one
level per call, so a character that overshoots several thresholds needs
several calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from dnd_rules.core.config import get_settings
from dnd_rules.core.constants import ASI_LEVELS
from dnd_rules.core.exceptions import (
    AbilityScoreExceedsMax,
    InvalidASITotal,
    InvalidExperienceDelta,
    LevelUpNotAvailable,
    NoPendingASI,
)
from dnd_rules.core.logging import get_logger
from dnd_rules.engine.classes import newly_unlocked_features, spell_slots_for_level
from dnd_rules.engine.stats import calculate_max_hp
from dnd_rules.models.character import AbilityScoreImprovement, ASIHistoryEntry, Character
from dnd_rules.models.features import ClassFeatureDefinition
from dnd_rules.models.progression import XP_THRESHOLDS


logger = get_logger(__name__)


@dataclass(frozen=True)
class ExperienceResult:
    """Outcome of awarding experience.

    Attributes:
        character: The updated character.
        should_level_up: Whether the character can now level up.
        next_level_experience: XP needed for the next level, None at the cap.
    """

    character: Character
    should_level_up: bool
    next_level_experience: int | None


@dataclass(frozen=True)
class LevelUpResult:
    """Outcome of gaining one level.

    Attributes:
        character: The updated character.
        hp_gained: Increase in maximum hit points.
        ability_score_improvement: Whether the new level grants an ASI.
        new_features: Class features unlocked at the new level.
        spell_slots: Spell slots at the new level.
    """

    character: Character
    hp_gained: int
    ability_score_improvement: bool
    new_features: tuple[ClassFeatureDefinition, ...] = ()
    spell_slots: dict[int, int] = field(default_factory=dict)


# =============================================================================
# Experience Table
# =============================================================================


def experience_for_level(level: int) -> int:
    """Total XP required to reach ``level``. Unknown levels return 0."""
    return XP_THRESHOLDS.get(level, 0)


def level_for_experience(experience: int) -> int:
    """Highest level whose threshold ``experience`` has reached."""
    max_level = get_settings().rules.max_character_level
    level = 1
    for candidate, threshold in XP_THRESHOLDS.items():
        if candidate <= max_level and experience >= threshold:
            level = max(level, candidate)
    return level


def experience_to_next_level(level: int) -> int | None:
    """XP threshold of the level after ``level``, None at the level cap."""
    if level >= get_settings().rules.max_character_level:
        return None
    return XP_THRESHOLDS.get(level + 1)


def can_level_up(character: Character) -> bool:
    """Whether the character has the XP for its next level."""
    if character.level >= get_settings().rules.max_character_level:
        return False
    return character.experience >= experience_for_level(character.level + 1)


# =============================================================================
# Operations
# =============================================================================


def add_experience(character: Character, amount: int) -> ExperienceResult:
    """Award experience points.

    Args:
        character: The character receiving XP.
        amount: XP to add (must not be negative).

    Returns:
        ExperienceResult with the updated character.

    Raises:
        InvalidExperienceDelta: If ``amount`` is negative or not an integer.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        logger.warning("Rejected non-integer experience", character_id=str(character.id), amount=amount)
        raise InvalidExperienceDelta(
            "Experience amount must be an integer",
            character_id=str(character.id),
            level=character.level,
            details={"amount": repr(amount)},
        )
    if amount < 0:
        logger.warning("Rejected negative experience", character_id=str(character.id), amount=amount)
        raise InvalidExperienceDelta(
            "Experience amount cannot be negative",
            character_id=str(character.id),
            level=character.level,
            details={"amount": amount},
        )

    updated = character.updated(experience=character.experience + amount)
    result = ExperienceResult(
        character=updated,
        should_level_up=can_level_up(updated),
        next_level_experience=experience_to_next_level(updated.level),
    )
    logger.info(
        "Experience added",
        character_id=str(character.id),
        amount=amount,
        experience=updated.experience,
        should_level_up=result.should_level_up,
    )
    return result


def level_up(character: Character) -> LevelUpResult:
    """Advance the character by exactly one level.

    Maximum hit points are recalculated for the new level and current hit
    points rise by the same amount. Reaching an ASI level sets
    ``pending_asi``.

    Raises:
        LevelUpNotAvailable: If the character lacks the XP or is at the cap.
    """
    if not can_level_up(character):
        logger.warning(
            "Level up not available",
            character_id=str(character.id),
            level=character.level,
            experience=character.experience,
        )
        raise LevelUpNotAvailable(
            "Not enough experience to level up"
            if character.level < get_settings().rules.max_character_level
            else "Character is already at the maximum level",
            character_id=str(character.id),
            level=character.level,
            details={"experience": character.experience},
        )

    new_level = character.level + 1
    new_max_hp = calculate_max_hp(
        character.character_class,
        character.ability_scores.constitution,
        new_level,
    )
    hp_gained = new_max_hp - character.max_hit_points
    grants_asi = new_level in ASI_LEVELS

    updated = character.updated(
        level=new_level,
        max_hit_points=new_max_hp,
        hit_points=max(0, min(character.hit_points + hp_gained, new_max_hp)),
        pending_asi=character.pending_asi or grants_asi,
    )
    result = LevelUpResult(
        character=updated,
        hp_gained=hp_gained,
        ability_score_improvement=grants_asi,
        new_features=newly_unlocked_features(character.character_class, character.level, new_level),
        spell_slots=spell_slots_for_level(character.character_class, new_level),
    )
    logger.info(
        "Level up applied",
        character_id=str(character.id),
        new_level=new_level,
        hp_gained=hp_gained,
        pending_asi=updated.pending_asi,
    )
    return result


def apply_ability_score_improvement(
    character: Character,
    improvement: AbilityScoreImprovement,
    *,
    applied_at: datetime | None = None,
) -> Character:
    """Apply a pending Ability Score Improvement.

    The deltas must be non-negative and sum to exactly 2 (+2 to one ability
    or +1 to two), and no resulting score may exceed the cap.

    Args:
        character: Character with a pending ASI.
        improvement: Requested deltas.
        applied_at: Timestamp for the history entry, defaults to now (UTC).

    Returns:
        The updated character.

    Raises:
        NoPendingASI: If the character has no pending improvement.
        InvalidASITotal: If the deltas are negative or do not sum to 2.
        AbilityScoreExceedsMax: If a score would exceed the cap.
    """
    rules = get_settings().rules
    character_id = str(character.id)

    if not character.pending_asi:
        logger.warning("No pending ASI", character_id=character_id, level=character.level)
        raise NoPendingASI(
            "Character has no pending ability score improvement",
            character_id=character_id,
            level=character.level,
        )

    changes = improvement.changes()
    if any(delta < 0 for delta in changes.values()) or improvement.total != rules.asi_total:
        logger.warning("Invalid ASI total", character_id=character_id, total=improvement.total)
        raise InvalidASITotal(
            f"Ability score improvement must add exactly {rules.asi_total} points",
            character_id=character_id,
            level=character.level,
            details={"total": improvement.total},
        )

    for ability, delta in changes.items():
        new_score = character.ability_scores.get(ability) + delta
        if new_score > rules.ability_score_max:
            logger.warning(
                "ASI exceeds maximum",
                character_id=character_id,
                ability=ability.value,
                new_score=new_score,
            )
            raise AbilityScoreExceedsMax(
                f"{ability.full_name} cannot exceed {rules.ability_score_max}",
                character_id=character_id,
                level=character.level,
                details={"ability": ability.value, "new_score": new_score},
            )

    entry = ASIHistoryEntry(
        level=character.level,
        changes=changes,
        applied_at=applied_at or datetime.now(UTC),
    )
    updated = character.updated(
        ability_scores=character.ability_scores.with_changes(changes),
        pending_asi=False,
        asi_history=[*character.asi_history, entry],
    )
    logger.info(
        "Ability score improvement applied",
        character_id=character_id,
        level=character.level,
        changes={ability.value: delta for ability, delta in changes.items()},
    )
    return updated


__all__ = [
    "ExperienceResult",
    "LevelUpResult",
    "experience_for_level",
    "level_for_experience",
    "experience_to_next_level",
    "can_level_up",
    "add_experience",
    "level_up",
    "apply_ability_score_improvement",
]
