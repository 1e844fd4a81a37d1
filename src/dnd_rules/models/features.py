"""Class feature definitions by class.

Each class maps to an ordered tuple of ClassFeatureDefinition entries in
unlock order. Classes that have not been modelled yet map to an empty tuple
so lookups degrade to "no features" rather than failing.

How often a feature can be used between rests is an explicit tagged union
discriminated on ``kind``:

- ``FixedUses(count=N)``: N uses per rest.
- ``ProficiencyUses()``: uses equal to the proficiency bonus.
- ``AbilityUses(ability=...)``: 1 + the ability modifier, minimum 1.
- ``UnlimitedUses()``: passive, at-will or governed by special rules.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from dnd_rules.models.enums import Ability, CharacterClass


# =============================================================================
# Uses Per Rest (tagged union)
# =============================================================================


class FixedUses(BaseModel):
    """A fixed number of uses per rest."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    count: int = Field(ge=1, description="Uses per rest")


class ProficiencyUses(BaseModel):
    """Uses equal to the character's proficiency bonus."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["proficiency"] = "proficiency"


class AbilityUses(BaseModel):
    """Uses derived from an ability modifier (1 + modifier, minimum 1)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ability"] = "ability"
    ability: Literal[Ability.CHA, Ability.WIS]


class UnlimitedUses(BaseModel):
    """Not a countable per-rest resource."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unlimited"] = "unlimited"


UsesPerRest = Annotated[
    FixedUses | ProficiencyUses | AbilityUses | UnlimitedUses,
    Field(discriminator="kind"),
]

UNLIMITED = UnlimitedUses()
PROFICIENCY = ProficiencyUses()


class ClassFeatureDefinition(BaseModel):
    """A class feature and the level it unlocks at.

    Attributes:
        name: Feature name.
        unlock_level: Class level at which the feature is gained.
        description: Rules summary.
        uses_per_rest: How often the feature may be used between rests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Feature name")
    unlock_level: int = Field(ge=1, le=20, description="Level the feature unlocks at")
    description: str = Field(default="", description="Rules summary")
    uses_per_rest: UsesPerRest = Field(default=UNLIMITED, description="Usage specifier")


def _feature(
    name: str,
    unlock_level: int,
    description: str,
    uses: FixedUses | ProficiencyUses | AbilityUses | UnlimitedUses = UNLIMITED,
) -> ClassFeatureDefinition:
    return ClassFeatureDefinition(
        name=name,
        unlock_level=unlock_level,
        description=description,
        uses_per_rest=uses,
    )


# =============================================================================
# Feature Tables
# =============================================================================

BARBARIAN_FEATURES: tuple[ClassFeatureDefinition, ...] = (
    _feature(
        "Rage",
        1,
        "As a bonus action, enter a rage for 1 minute: advantage on Strength checks "
        "and saves, bonus melee damage, and resistance to bludgeoning, piercing and "
        "slashing damage.",
        FixedUses(count=2),
    ),
    _feature(
        "Unarmored Defense",
        1,
        "While wearing no armor, AC equals 10 + Dexterity modifier + Constitution modifier.",
    ),
    _feature(
        "Reckless Attack",
        2,
        "Gain advantage on Strength melee attacks this turn; attacks against you have "
        "advantage until your next turn.",
    ),
    _feature(
        "Danger Sense",
        2,
        "Advantage on Dexterity saving throws against effects you can see.",
    ),
    _feature(
        "Extra Attack",
        5,
        "Attack twice instead of once when you take the Attack action.",
    ),
)

CLERIC_FEATURES: tuple[ClassFeatureDefinition, ...] = (
    _feature(
        "Divine Domain",
        1,
        "Choose a domain (Life, War, Light ...) that grants domain spells and features.",
    ),
    _feature(
        "Channel Divinity",
        2,
        "Channel divine energy directly from your deity; the effect depends on your domain.",
        FixedUses(count=1),
    ),
    _feature(
        "Destroy Undead",
        5,
        "Undead of CR 1/2 or lower that fail the save against Turn Undead are destroyed.",
    ),
    _feature(
        "Divine Intervention",
        10,
        "Call on your deity for aid; roll d100 and succeed on a result at or below your "
        "cleric level. On success it cannot be used again for 7 days.",
    ),
)

FIGHTER_FEATURES: tuple[ClassFeatureDefinition, ...] = (
    _feature(
        "Fighting Style",
        1,
        "Adopt a fighting style: Archery, Defense, Dueling ...",
    ),
    _feature(
        "Second Wind",
        1,
        "As a bonus action, regain 1d10 + fighter level hit points.",
        FixedUses(count=1),
    ),
    _feature(
        "Action Surge",
        2,
        "Take one additional action on your turn.",
        FixedUses(count=1),
    ),
    _feature(
        "Extra Attack",
        5,
        "Attack twice instead of once when you take the Attack action.",
    ),
    _feature(
        "Indomitable",
        9,
        "Reroll a saving throw that you fail.",
        FixedUses(count=1),
    ),
)

PALADIN_FEATURES: tuple[ClassFeatureDefinition, ...] = (
    _feature(
        "Divine Sense",
        1,
        "As an action, detect celestials, fiends and undead within 60 feet and learn "
        "their type.",
        AbilityUses(ability=Ability.CHA),
    ),
    _feature(
        "Lay on Hands",
        1,
        "A pool of healing equal to paladin level x 5, restored on a long rest. Spend 5 "
        "points to cure a disease or neutralize a poison.",
    ),
    _feature(
        "Fighting Style",
        2,
        "Adopt a fighting style: Defense, Dueling, Great Weapon Fighting ...",
    ),
    _feature(
        "Divine Smite",
        2,
        "On a melee hit, expend a spell slot to deal 2d8 extra radiant damage, +1d8 per "
        "slot level above 1st (max 5d8), +1d8 against undead or fiends.",
    ),
    _feature(
        "Divine Health",
        3,
        "You are immune to disease.",
    ),
    _feature(
        "Sacred Oath",
        3,
        "Swear an oath (Devotion, Vengeance ...) that grants further features.",
    ),
    _feature(
        "Extra Attack",
        5,
        "Attack twice instead of once when you take the Attack action.",
    ),
    _feature(
        "Aura of Protection",
        6,
        "You and friendly creatures within 10 feet add your Charisma modifier to saving throws.",
    ),
)

RANGER_FEATURES: tuple[ClassFeatureDefinition, ...] = (
    _feature(
        "Favored Foe",
        1,
        "When you hit a creature, mark it as your favored enemy for 1 minute and deal "
        "an extra 1d4 damage to it once per turn.",
        PROFICIENCY,
    ),
    _feature(
        "Natural Explorer",
        1,
        "You are a master of navigating one type of favored terrain.",
    ),
    _feature(
        "Fighting Style",
        2,
        "Adopt a fighting style: Archery, Defense, Dueling, Two-Weapon Fighting ...",
    ),
    _feature(
        "Primeval Awareness",
        3,
        "Expend a spell slot to sense certain creature types within 1 mile.",
    ),
    _feature(
        "Extra Attack",
        5,
        "Attack twice instead of once when you take the Attack action.",
    ),
)

ROGUE_FEATURES: tuple[ClassFeatureDefinition, ...] = (
    _feature(
        "Sneak Attack",
        1,
        "Once per turn, deal an extra 1d6 damage (scaling with level) when you have "
        "advantage or an ally is adjacent to the target.",
    ),
    _feature(
        "Thieves' Cant",
        1,
        "You know the secret language of thieves for hidden messages.",
    ),
    _feature(
        "Cunning Action",
        2,
        "Dash, Disengage or Hide as a bonus action.",
    ),
    _feature(
        "Uncanny Dodge",
        5,
        "As a reaction, halve the damage of an attack you can see.",
    ),
    _feature(
        "Evasion",
        7,
        "Take no damage on a successful Dexterity save against area effects, and half "
        "on a failure.",
    ),
)

WIZARD_FEATURES: tuple[ClassFeatureDefinition, ...] = (
    _feature(
        "Arcane Recovery",
        1,
        "During a short rest, recover expended spell slots with a combined level up to "
        "half your wizard level (rounded up); none of 6th level or higher.",
        FixedUses(count=1),
    ),
    _feature(
        "Arcane Tradition",
        2,
        "Choose a school of magic to specialize in (Evocation, Abjuration ...).",
    ),
    _feature(
        "Spell Mastery",
        18,
        "Choose one 1st-level and one 2nd-level spell from your spellbook and cast them "
        "at their lowest level without expending a slot.",
    ),
    _feature(
        "Signature Spells",
        20,
        "Choose two 3rd-level spells that are always prepared; cast each once without "
        "expending a slot.",
        FixedUses(count=2),
    ),
)

CLASS_FEATURES: Mapping[CharacterClass, tuple[ClassFeatureDefinition, ...]] = MappingProxyType({
    CharacterClass.BARBARIAN: BARBARIAN_FEATURES,
    CharacterClass.BARD: (),
    CharacterClass.CLERIC: CLERIC_FEATURES,
    CharacterClass.DRUID: (),
    CharacterClass.FIGHTER: FIGHTER_FEATURES,
    CharacterClass.MONK: (),
    CharacterClass.PALADIN: PALADIN_FEATURES,
    CharacterClass.RANGER: RANGER_FEATURES,
    CharacterClass.ROGUE: ROGUE_FEATURES,
    CharacterClass.SORCERER: (),
    CharacterClass.WARLOCK: (),
    CharacterClass.WIZARD: WIZARD_FEATURES,
})


__all__ = [
    # Uses per rest
    "FixedUses",
    "ProficiencyUses",
    "AbilityUses",
    "UnlimitedUses",
    "UsesPerRest",
    "UNLIMITED",
    "PROFICIENCY",
    # Definitions
    "ClassFeatureDefinition",
    "CLASS_FEATURES",
]
