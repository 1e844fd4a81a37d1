"""Enumeration types for the D&D 5E rules core.

These enums are the closed vocabularies the rules tables are keyed on:
abilities, the twelve PHB classes, the nine PHB races, roll tags, item
categories and schools of magic.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """D&D 5E ability scores.

    The six core abilities that define a character's physical
    and mental characteristics.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name


class CharacterClass(StrEnum):
    """The twelve Player's Handbook classes."""

    BARBARIAN = "Barbarian"
    BARD = "Bard"
    CLERIC = "Cleric"
    DRUID = "Druid"
    FIGHTER = "Fighter"
    MONK = "Monk"
    PALADIN = "Paladin"
    RANGER = "Ranger"
    ROGUE = "Rogue"
    SORCERER = "Sorcerer"
    WARLOCK = "Warlock"
    WIZARD = "Wizard"


class CharacterRace(StrEnum):
    """Playable races."""

    HUMAN = "Human"
    ELF = "Elf"
    DWARF = "Dwarf"
    HALFLING = "Halfling"
    DRAGONBORN = "Dragonborn"
    GNOME = "Gnome"
    HALF_ELF = "Half-Elf"
    HALF_ORC = "Half-Orc"
    TIEFLING = "Tiefling"


class RollKind(StrEnum):
    """Semantic tag attached to a dice roll for transcripts."""

    ATTACK = "attack"
    DAMAGE = "damage"
    SAVING_THROW = "saving_throw"
    SKILL_CHECK = "skill_check"
    ABILITY_CHECK = "ability_check"
    INITIATIVE = "initiative"
    HEALING = "healing"
    CUSTOM = "custom"


class ItemType(StrEnum):
    """Inventory item categories."""

    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"
    ACCESSORY = "accessory"
    MISC = "misc"


class ItemRarity(StrEnum):
    """Magic item rarity (DMG p.135)."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    VERY_RARE = "very_rare"
    LEGENDARY = "legendary"


class SpellSchool(StrEnum):
    """D&D 5E schools of magic."""

    ABJURATION = "abjuration"
    CONJURATION = "conjuration"
    DIVINATION = "divination"
    ENCHANTMENT = "enchantment"
    EVOCATION = "evocation"
    ILLUSION = "illusion"
    NECROMANCY = "necromancy"
    TRANSMUTATION = "transmutation"


__all__ = [
    "Ability",
    "CharacterClass",
    "CharacterRace",
    "RollKind",
    "ItemType",
    "ItemRarity",
    "SpellSchool",
]
