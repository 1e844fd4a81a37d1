"""Character creation and hit point changes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from dnd_rules.core.config import get_settings
from dnd_rules.core.exceptions import CharacterError, UnknownCharacterClass
from dnd_rules.core.logging import get_logger
from dnd_rules.engine.classes import features_for_level, initial_spells, spell_slots_for_level
from dnd_rules.engine.leveling import experience_for_level
from dnd_rules.engine.stats import calculate_armor_class, calculate_max_hp
from dnd_rules.models.character import AbilityScores, Character
from dnd_rules.models.enums import Ability, CharacterClass, CharacterRace
from dnd_rules.models.features import ClassFeatureDefinition
from dnd_rules.models.races import racial_bonuses
from dnd_rules.models.spells import SpellDefinition


logger = get_logger(__name__)


@dataclass(frozen=True)
class CharacterSheet:
    """A newly created character with its starting class resources.

    Attributes:
        character: The character record.
        spells: Starting spells.
        spell_slots: Spell slots by spell level.
        features: Class features unlocked at the starting level.
    """

    character: Character
    spells: tuple[SpellDefinition, ...] = ()
    spell_slots: dict[int, int] = field(default_factory=dict)
    features: tuple[ClassFeatureDefinition, ...] = ()


def _coerce_class(character_class: CharacterClass | str) -> CharacterClass:
    try:
        return CharacterClass(character_class)
    except ValueError as exc:
        raise UnknownCharacterClass(
            f"Unknown character class: {character_class}",
            details={"character_class": str(character_class)},
        ) from exc


def _coerce_race(race: CharacterRace | str) -> CharacterRace:
    try:
        return CharacterRace(race)
    except ValueError as exc:
        raise CharacterError(
            f"Unknown race: {race}",
            details={"race": str(race)},
        ) from exc


def create_character(
    name: str,
    race: CharacterRace | str,
    character_class: CharacterClass | str,
    ability_scores: AbilityScores | Mapping[Ability, int],
    *,
    level: int = 1,
    apply_racial_bonuses: bool = False,
    background: str | None = None,
    armor_value: int | None = None,
) -> CharacterSheet:
    """Create a character at full health.

    Args:
        name: Character name.
        race: Character race.
        character_class: Character class.
        ability_scores: Base scores, before racial bonuses.
        level: Starting level.
        apply_racial_bonuses: Add the race's fixed bonuses, capped at 20.
        background: Optional background name.
        armor_value: Base value of worn armor, None when unarmored.

    Returns:
        The character with its starting spells, slots and features.

    Raises:
        InvalidAbilityScore: If a score is out of range.
        UnknownCharacterClass: If the class is not a PHB class.
        CharacterError: If the race is unknown.
    """
    character_class = _coerce_class(character_class)
    race = _coerce_race(race)
    if not isinstance(ability_scores, AbilityScores):
        ability_scores = AbilityScores(
            **{Ability(ability).value: score for ability, score in ability_scores.items()}
        )

    if apply_racial_bonuses:
        cap = get_settings().rules.ability_score_max
        boosted = {
            ability: min(ability_scores.get(ability) + bonus, cap) - ability_scores.get(ability)
            for ability, bonus in racial_bonuses(race).items()
        }
        ability_scores = ability_scores.with_changes(boosted)

    max_hp = calculate_max_hp(character_class, ability_scores.constitution, level)
    character = Character(
        name=name,
        race=race,
        character_class=character_class,
        level=level,
        ability_scores=ability_scores,
        hit_points=max_hp,
        max_hit_points=max_hp,
        armor_class=calculate_armor_class(ability_scores.dexterity, armor_value),
        experience=experience_for_level(level),
        background=background,
    )
    sheet = CharacterSheet(
        character=character,
        spells=initial_spells(character_class, level),
        spell_slots=spell_slots_for_level(character_class, level),
        features=features_for_level(character_class, level),
    )
    logger.info(
        "Character created",
        character_id=str(character.id),
        name=name,
        character_class=character_class.value,
        level=level,
        max_hit_points=max_hp,
    )
    return sheet


def modify_hit_points(character: Character, amount: int) -> Character:
    """Apply damage (negative) or healing (positive), clamped to [0, max]."""
    new_hp = max(0, min(character.hit_points + amount, character.max_hit_points))
    logger.info(
        "Hit points modified",
        character_id=str(character.id),
        amount=amount,
        hit_points=new_hp,
    )
    return character.updated(hit_points=new_hp)


def is_unconscious(character: Character) -> bool:
    return character.hit_points == 0


__all__ = [
    "CharacterSheet",
    "create_character",
    "modify_hit_points",
    "is_unconscious",
]
