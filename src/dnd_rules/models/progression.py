"""D&D 5E Level Progression Data.

This module contains the static tables needed for character progression:
- XP thresholds for each level
- Hit dice by class
- Spell slots by class and level
- Warlock pact magic
- Spellcasting ability, primary abilities and saving throws by class

Every table is read-only and loaded once at import. Queries over these
tables live in ``dnd_rules.engine``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from dnd_rules.models.enums import Ability, CharacterClass


# =============================================================================
# XP Thresholds (PHB p.15)
# =============================================================================

XP_THRESHOLDS: Mapping[int, int] = MappingProxyType({
    1: 0,
    2: 300,
    3: 900,
    4: 2700,
    5: 6500,
    6: 14000,
    7: 23000,
    8: 34000,
    9: 48000,
    10: 64000,
    11: 85000,
    12: 100000,
    13: 120000,
    14: 140000,
    15: 165000,
    16: 195000,
    17: 225000,
    18: 265000,
    19: 305000,
    20: 355000,
})


# =============================================================================
# Hit Dice by Class
# =============================================================================

CLASS_HIT_DIE: Mapping[CharacterClass, int] = MappingProxyType({
    CharacterClass.BARBARIAN: 12,
    CharacterClass.FIGHTER: 10,
    CharacterClass.PALADIN: 10,
    CharacterClass.RANGER: 10,
    CharacterClass.BARD: 8,
    CharacterClass.CLERIC: 8,
    CharacterClass.DRUID: 8,
    CharacterClass.MONK: 8,
    CharacterClass.ROGUE: 8,
    CharacterClass.WARLOCK: 8,
    CharacterClass.SORCERER: 6,
    CharacterClass.WIZARD: 6,
})


# =============================================================================
# Spell Slots by Level
# =============================================================================

def _freeze(table: dict[int, dict[int, int]]) -> Mapping[int, Mapping[int, int]]:
    return MappingProxyType({level: MappingProxyType(slots) for level, slots in table.items()})


# Full casters: Bard, Cleric, Druid, Sorcerer, Wizard
FULL_CASTER_SLOTS = _freeze({
    1:  {1: 2},
    2:  {1: 3},
    3:  {1: 4, 2: 2},
    4:  {1: 4, 2: 3},
    5:  {1: 4, 2: 3, 3: 2},
    6:  {1: 4, 2: 3, 3: 3},
    7:  {1: 4, 2: 3, 3: 3, 4: 1},
    8:  {1: 4, 2: 3, 3: 3, 4: 2},
    9:  {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
    10: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
    11: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
    12: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
    13: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
    14: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
    15: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
    16: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
    17: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1, 9: 1},
    18: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 1, 7: 1, 8: 1, 9: 1},
    19: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 1, 8: 1, 9: 1},
    20: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 2, 8: 1, 9: 1},
})

# Half casters: Paladin, Ranger (start at level 2)
HALF_CASTER_SLOTS = _freeze({
    1:  {},
    2:  {1: 2},
    3:  {1: 3},
    4:  {1: 3},
    5:  {1: 4, 2: 2},
    6:  {1: 4, 2: 2},
    7:  {1: 4, 2: 3},
    8:  {1: 4, 2: 3},
    9:  {1: 4, 2: 3, 3: 2},
    10: {1: 4, 2: 3, 3: 2},
    11: {1: 4, 2: 3, 3: 3},
    12: {1: 4, 2: 3, 3: 3},
    13: {1: 4, 2: 3, 3: 3, 4: 1},
    14: {1: 4, 2: 3, 3: 3, 4: 1},
    15: {1: 4, 2: 3, 3: 3, 4: 2},
    16: {1: 4, 2: 3, 3: 3, 4: 2},
    17: {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
    18: {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
    19: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
    20: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
})

# Warlock pact magic, level: (num_slots, slot_level)
WARLOCK_PACT_SLOTS: Mapping[int, tuple[int, int]] = MappingProxyType({
    1:  (1, 1),
    2:  (2, 1),
    3:  (2, 2),
    4:  (2, 2),
    5:  (2, 3),
    6:  (2, 3),
    7:  (2, 4),
    8:  (2, 4),
    9:  (2, 5),
    10: (2, 5),
    11: (3, 5),
    12: (3, 5),
    13: (3, 5),
    14: (3, 5),
    15: (3, 5),
    16: (3, 5),
    17: (4, 5),
    18: (4, 5),
    19: (4, 5),
    20: (4, 5),
})

# Warlocks use pact magic and martial classes never cast, so neither has an
# entry here; lookups for them fall through to an empty mapping.
SPELL_SLOTS_BY_CLASS: Mapping[CharacterClass, Mapping[int, Mapping[int, int]]] = MappingProxyType({
    CharacterClass.BARD: FULL_CASTER_SLOTS,
    CharacterClass.CLERIC: FULL_CASTER_SLOTS,
    CharacterClass.DRUID: FULL_CASTER_SLOTS,
    CharacterClass.SORCERER: FULL_CASTER_SLOTS,
    CharacterClass.WIZARD: FULL_CASTER_SLOTS,
    CharacterClass.PALADIN: HALF_CASTER_SLOTS,
    CharacterClass.RANGER: HALF_CASTER_SLOTS,
})


# =============================================================================
# Spellcasting Ability by Class
# =============================================================================

SPELLCASTING_CLASSES = frozenset({
    CharacterClass.BARD,
    CharacterClass.CLERIC,
    CharacterClass.DRUID,
    CharacterClass.PALADIN,
    CharacterClass.RANGER,
    CharacterClass.SORCERER,
    CharacterClass.WARLOCK,
    CharacterClass.WIZARD,
})

SPELLCASTING_ABILITY: Mapping[CharacterClass, Ability] = MappingProxyType({
    CharacterClass.BARD: Ability.CHA,
    CharacterClass.CLERIC: Ability.WIS,
    CharacterClass.DRUID: Ability.WIS,
    CharacterClass.PALADIN: Ability.CHA,
    CharacterClass.RANGER: Ability.WIS,
    CharacterClass.SORCERER: Ability.CHA,
    CharacterClass.WARLOCK: Ability.CHA,
    CharacterClass.WIZARD: Ability.INT,
})


# =============================================================================
# Primary Abilities and Saving Throw Proficiencies
# =============================================================================

PRIMARY_ABILITIES: Mapping[CharacterClass, tuple[Ability, ...]] = MappingProxyType({
    CharacterClass.BARBARIAN: (Ability.STR, Ability.CON),
    CharacterClass.BARD: (Ability.CHA,),
    CharacterClass.CLERIC: (Ability.WIS,),
    CharacterClass.DRUID: (Ability.WIS,),
    CharacterClass.FIGHTER: (Ability.STR, Ability.DEX),
    CharacterClass.MONK: (Ability.DEX, Ability.WIS),
    CharacterClass.PALADIN: (Ability.STR, Ability.CHA),
    CharacterClass.RANGER: (Ability.DEX, Ability.WIS),
    CharacterClass.ROGUE: (Ability.DEX,),
    CharacterClass.SORCERER: (Ability.CHA,),
    CharacterClass.WARLOCK: (Ability.CHA,),
    CharacterClass.WIZARD: (Ability.INT,),
})

SAVING_THROW_PROFICIENCIES: Mapping[CharacterClass, tuple[Ability, Ability]] = MappingProxyType({
    CharacterClass.BARBARIAN: (Ability.STR, Ability.CON),
    CharacterClass.BARD: (Ability.DEX, Ability.CHA),
    CharacterClass.CLERIC: (Ability.WIS, Ability.CHA),
    CharacterClass.DRUID: (Ability.INT, Ability.WIS),
    CharacterClass.FIGHTER: (Ability.STR, Ability.CON),
    CharacterClass.MONK: (Ability.STR, Ability.DEX),
    CharacterClass.PALADIN: (Ability.WIS, Ability.CHA),
    CharacterClass.RANGER: (Ability.STR, Ability.DEX),
    CharacterClass.ROGUE: (Ability.DEX, Ability.INT),
    CharacterClass.SORCERER: (Ability.CON, Ability.CHA),
    CharacterClass.WARLOCK: (Ability.WIS, Ability.CHA),
    CharacterClass.WIZARD: (Ability.INT, Ability.WIS),
})


__all__ = [
    # XP
    "XP_THRESHOLDS",
    # Hit dice
    "CLASS_HIT_DIE",
    # Spell slots
    "FULL_CASTER_SLOTS",
    "HALF_CASTER_SLOTS",
    "WARLOCK_PACT_SLOTS",
    "SPELL_SLOTS_BY_CLASS",
    # Spellcasting
    "SPELLCASTING_CLASSES",
    "SPELLCASTING_ABILITY",
    # Class abilities
    "PRIMARY_ABILITIES",
    "SAVING_THROW_PROFICIENCIES",
]
