"""Class progression queries.

Lookups over the static class tables: which features a class has at a
level, how many uses a feature grants, spell slots, pact magic, spell
lists and the spells a new character starts with.
"""

from __future__ import annotations

from dnd_rules.core.logging import get_logger
from dnd_rules.engine.stats import calculate_modifier, proficiency_bonus
from dnd_rules.models.character import AbilityScores
from dnd_rules.models.enums import Ability, CharacterClass
from dnd_rules.models.features import (
    CLASS_FEATURES,
    AbilityUses,
    ClassFeatureDefinition,
    FixedUses,
    ProficiencyUses,
)
from dnd_rules.models.progression import (
    PRIMARY_ABILITIES,
    SAVING_THROW_PROFICIENCIES,
    SPELL_SLOTS_BY_CLASS,
    SPELLCASTING_ABILITY,
    SPELLCASTING_CLASSES,
    WARLOCK_PACT_SLOTS,
)
from dnd_rules.models.spells import CLASS_SPELLS, SpellDefinition


logger = get_logger(__name__)


# =============================================================================
# Features
# =============================================================================


def features_for_level(
    character_class: CharacterClass,
    level: int,
) -> tuple[ClassFeatureDefinition, ...]:
    """All features unlocked at or below ``level``, in table order."""
    return tuple(
        feature
        for feature in CLASS_FEATURES.get(character_class, ())
        if feature.unlock_level <= level
    )


def newly_unlocked_features(
    character_class: CharacterClass,
    old_level: int,
    new_level: int,
) -> tuple[ClassFeatureDefinition, ...]:
    """Features gained when moving from ``old_level`` to ``new_level``."""
    return tuple(
        feature
        for feature in CLASS_FEATURES.get(character_class, ())
        if old_level < feature.unlock_level <= new_level
    )


def resolve_uses_per_rest(
    feature: ClassFeatureDefinition,
    *,
    level: int,
    ability_scores: AbilityScores,
) -> int:
    """Number of uses a feature grants per rest.

    Args:
        feature: The feature.
        level: Character level.
        ability_scores: Scores used for ability-based features.

    Returns:
        The use count. Zero for features that are not a countable resource.

    Example:
        >>> divine_sense = features_for_level(CharacterClass.PALADIN, 1)[0]
        >>> resolve_uses_per_rest(
        ...     divine_sense, level=1, ability_scores=AbilityScores(charisma=16)
        ... )
        4
    """
    uses = feature.uses_per_rest
    if isinstance(uses, FixedUses):
        return uses.count
    if isinstance(uses, ProficiencyUses):
        return proficiency_bonus(level)
    if isinstance(uses, AbilityUses):
        return max(1, 1 + calculate_modifier(ability_scores.get(Ability(uses.ability))))
    return 0


# =============================================================================
# Spellcasting
# =============================================================================


def spell_slots_for_level(character_class: CharacterClass, level: int) -> dict[int, int]:
    """Spell slots by spell level, as a fresh dict.

    Classes without a slot table, and levels outside 1-20, get ``{}``.
    """
    table = SPELL_SLOTS_BY_CLASS.get(character_class)
    if table is None:
        return {}
    return dict(table.get(level, {}))


def pact_magic_for_level(level: int) -> tuple[int, int] | None:
    """Warlock pact magic as ``(slot_count, slot_level)``."""
    return WARLOCK_PACT_SLOTS.get(level)


def is_spellcaster(character_class: CharacterClass) -> bool:
    return character_class in SPELLCASTING_CLASSES


def spellcasting_ability(character_class: CharacterClass) -> Ability | None:
    return SPELLCASTING_ABILITY.get(character_class)


def spells_for_class(character_class: CharacterClass) -> tuple[SpellDefinition, ...]:
    """The class spell list, or an empty tuple if none is modelled."""
    return CLASS_SPELLS.get(character_class, ())


def initial_spells(character_class: CharacterClass, level: int = 1) -> tuple[SpellDefinition, ...]:
    """Spells a newly created character starts with.

    Wizards get the first three cantrips and first four 1st-level spells.
    Clerics get every cantrip and the first three 1st-level spells.
    Paladins get the first three 1st-level spells from level 2. Every
    other class starts with none.
    """
    spells = spells_for_class(character_class)
    cantrips = [spell for spell in spells if spell.level == 0]
    first_level = [spell for spell in spells if spell.level == 1]

    selected: list[SpellDefinition] = []
    if character_class == CharacterClass.WIZARD:
        selected = cantrips[:3] + first_level[:4]
    elif character_class == CharacterClass.CLERIC:
        selected = cantrips + first_level[:3]
    elif character_class == CharacterClass.PALADIN and level >= 2:
        selected = first_level[:3]

    logger.debug(
        "Initial spells selected",
        character_class=character_class.value,
        level=level,
        spells=[spell.name for spell in selected],
    )
    return tuple(selected)


# =============================================================================
# Class Abilities
# =============================================================================


def primary_abilities(character_class: CharacterClass) -> tuple[Ability, ...]:
    return PRIMARY_ABILITIES[character_class]


def saving_throw_proficiencies(character_class: CharacterClass) -> tuple[Ability, ...]:
    return SAVING_THROW_PROFICIENCIES[character_class]


__all__ = [
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
]
