"""Spell definitions and per-class spell lists.

Only the spells needed to seed starting spellbooks are listed. Lists are
ordered cantrips first, then by spell level, and that order is what
initial spell selection slices from.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from dnd_rules.models.enums import CharacterClass, SpellSchool


class SpellDefinition(BaseModel):
    """A spell as listed in a class spell list.

    Attributes:
        name: Spell name.
        level: Spell level (0 for cantrips).
        school: School of magic.
        casting_time: Casting time (e.g. "1 action").
        range: Range (e.g. "60 feet", "Self").
        components: Components (e.g. "V, S, M (...)").
        duration: Duration (e.g. "Instantaneous").
        description: Rules summary.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    level: Annotated[int, Field(ge=0, le=9)]
    school: SpellSchool
    casting_time: str = "1 action"
    range: str
    components: str
    duration: str
    description: str = ""

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0


def _spell(
    name: str,
    level: int,
    school: SpellSchool,
    range_: str,
    components: str,
    duration: str,
    description: str,
    casting_time: str = "1 action",
) -> SpellDefinition:
    return SpellDefinition(
        name=name,
        level=level,
        school=school,
        casting_time=casting_time,
        range=range_,
        components=components,
        duration=duration,
        description=description,
    )


# =============================================================================
# Shared Spells
# =============================================================================

BLESS = _spell(
    "Bless", 1, SpellSchool.ENCHANTMENT, "30 feet",
    "V, S, M (a sprinkling of holy water)", "Concentration, up to 1 minute",
    "Up to three creatures add 1d4 to attack rolls and saving throws.",
)

CURE_WOUNDS = _spell(
    "Cure Wounds", 1, SpellSchool.EVOCATION, "Touch", "V, S", "Instantaneous",
    "A creature you touch regains 1d8 + your spellcasting modifier hit points.",
)


# =============================================================================
# Class Spell Lists
# =============================================================================

PALADIN_SPELLS: tuple[SpellDefinition, ...] = (
    BLESS,
    CURE_WOUNDS,
    _spell(
        "Divine Favor", 1, SpellSchool.EVOCATION, "Self", "V, S",
        "Concentration, up to 1 minute",
        "Your weapon attacks deal an extra 1d4 radiant damage.",
        casting_time="1 bonus action",
    ),
    _spell(
        "Shield of Faith", 1, SpellSchool.ABJURATION, "60 feet",
        "V, S, M (a small parchment with a bit of holy text written on it)",
        "Concentration, up to 10 minutes",
        "A creature of your choice gains +2 AC for the duration.",
        casting_time="1 bonus action",
    ),
    _spell(
        "Thunderous Smite", 1, SpellSchool.EVOCATION, "Self", "V",
        "Concentration, up to 1 minute",
        "Your next melee hit deals an extra 2d6 thunder damage and may push the "
        "target 10 feet and knock it prone.",
        casting_time="1 bonus action",
    ),
    _spell(
        "Aid", 2, SpellSchool.ABJURATION, "30 feet",
        "V, S, M (a tiny strip of white cloth)", "8 hours",
        "Up to three creatures gain 5 to their hit point maximum and current hit points.",
    ),
    _spell(
        "Lesser Restoration", 2, SpellSchool.ABJURATION, "Touch", "V, S", "Instantaneous",
        "End one disease or one of the blinded, deafened, paralyzed or poisoned conditions.",
    ),
    _spell(
        "Zone of Truth", 2, SpellSchool.ENCHANTMENT, "60 feet", "V, S", "10 minutes",
        "Creatures in a 15-foot sphere that fail a Charisma save cannot deliberately lie.",
    ),
)

WIZARD_SPELLS: tuple[SpellDefinition, ...] = (
    _spell(
        "Fire Bolt", 0, SpellSchool.EVOCATION, "120 feet", "V, S", "Instantaneous",
        "Ranged spell attack dealing 1d10 fire damage.",
    ),
    _spell(
        "Mage Hand", 0, SpellSchool.CONJURATION, "30 feet", "V, S", "1 minute",
        "A spectral hand manipulates objects up to 10 pounds.",
    ),
    _spell(
        "Ray of Frost", 0, SpellSchool.EVOCATION, "60 feet", "V, S", "Instantaneous",
        "Ranged spell attack dealing 1d8 cold damage and reducing speed by 10 feet.",
    ),
    _spell(
        "Light", 0, SpellSchool.EVOCATION, "Touch",
        "V, M (a firefly or phosphorescent moss)", "1 hour",
        "An object sheds bright light in a 20-foot radius.",
    ),
    _spell(
        "Magic Missile", 1, SpellSchool.EVOCATION, "120 feet", "V, S", "Instantaneous",
        "Three darts each deal 1d4 + 1 force damage and always hit.",
    ),
    _spell(
        "Shield", 1, SpellSchool.ABJURATION, "Self", "V, S", "1 round",
        "+5 AC until the start of your next turn, including against the triggering attack.",
        casting_time="1 reaction",
    ),
    _spell(
        "Detect Magic", 1, SpellSchool.DIVINATION, "Self", "V, S",
        "Concentration, up to 10 minutes",
        "Sense the presence of magic within 30 feet.",
    ),
    _spell(
        "Burning Hands", 1, SpellSchool.EVOCATION, "Self (15-foot cone)", "V, S",
        "Instantaneous",
        "Creatures in the cone take 3d6 fire damage, half on a Dexterity save.",
    ),
    _spell(
        "Sleep", 1, SpellSchool.ENCHANTMENT, "90 feet",
        "V, S, M (a pinch of fine sand, rose petals, or a cricket)", "1 minute",
        "Creatures totalling 5d8 hit points fall unconscious, weakest first.",
    ),
    _spell(
        "Scorching Ray", 2, SpellSchool.EVOCATION, "120 feet", "V, S", "Instantaneous",
        "Three rays, each a ranged spell attack dealing 2d6 fire damage.",
    ),
    _spell(
        "Misty Step", 2, SpellSchool.CONJURATION, "Self", "V", "Instantaneous",
        "Teleport up to 30 feet to an unoccupied space you can see.",
        casting_time="1 bonus action",
    ),
    _spell(
        "Invisibility", 2, SpellSchool.ILLUSION, "Touch",
        "V, S, M (an eyelash encased in gum arabic)", "Concentration, up to 1 hour",
        "A creature becomes invisible until it attacks or casts a spell.",
    ),
    _spell(
        "Fireball", 3, SpellSchool.EVOCATION, "150 feet",
        "V, S, M (a tiny ball of bat guano and sulfur)", "Instantaneous",
        "A 20-foot-radius sphere deals 8d6 fire damage, half on a Dexterity save.",
    ),
    _spell(
        "Lightning Bolt", 3, SpellSchool.EVOCATION, "Self (100-foot line)",
        "V, S, M (a bit of fur and a rod of amber, crystal, or glass)", "Instantaneous",
        "A 100-foot line deals 8d6 lightning damage, half on a Dexterity save.",
    ),
    _spell(
        "Counterspell", 3, SpellSchool.ABJURATION, "60 feet", "S", "Instantaneous",
        "Interrupt a creature casting a spell of 3rd level or lower.",
        casting_time="1 reaction",
    ),
)

CLERIC_SPELLS: tuple[SpellDefinition, ...] = (
    _spell(
        "Sacred Flame", 0, SpellSchool.EVOCATION, "60 feet", "V, S", "Instantaneous",
        "The target takes 1d8 radiant damage on a failed Dexterity save.",
    ),
    _spell(
        "Spare the Dying", 0, SpellSchool.NECROMANCY, "Touch", "V, S", "Instantaneous",
        "A living creature at 0 hit points becomes stable.",
    ),
    _spell(
        "Guidance", 0, SpellSchool.DIVINATION, "Touch", "V, S",
        "Concentration, up to 1 minute",
        "The target adds 1d4 to one ability check of its choice.",
    ),
    CURE_WOUNDS,
    _spell(
        "Healing Word", 1, SpellSchool.EVOCATION, "60 feet", "V", "Instantaneous",
        "A creature you can see regains 1d4 + your spellcasting modifier hit points.",
        casting_time="1 bonus action",
    ),
    BLESS,
)

CLASS_SPELLS: Mapping[CharacterClass, tuple[SpellDefinition, ...]] = MappingProxyType({
    CharacterClass.PALADIN: PALADIN_SPELLS,
    CharacterClass.WIZARD: WIZARD_SPELLS,
    CharacterClass.CLERIC: CLERIC_SPELLS,
})


__all__ = [
    "SpellDefinition",
    "PALADIN_SPELLS",
    "WIZARD_SPELLS",
    "CLERIC_SPELLS",
    "CLASS_SPELLS",
]
