"""Racial ability score bonuses and traits.

Half-Elves also choose +1 to two other abilities; that choice belongs to
the player and is not applied automatically.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from dnd_rules.models.enums import Ability, CharacterRace


class RaceDefinition(BaseModel):
    """Static data for a playable race."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    race: CharacterRace
    description: str
    ability_bonuses: Mapping[Ability, int] = Field(default_factory=dict, validate_default=True)
    traits: tuple[str, ...] = ()

    @field_validator("ability_bonuses", mode="after")
    @classmethod
    def freeze_bonuses(cls, value: Mapping[Ability, int]) -> Mapping[Ability, int]:
        return MappingProxyType(dict(value))

    @field_serializer("ability_bonuses")
    def serialize_bonuses(self, value: Mapping[Ability, int]) -> dict[Ability, int]:
        return dict(value)


RACES: Mapping[CharacterRace, RaceDefinition] = MappingProxyType({
    CharacterRace.HUMAN: RaceDefinition(
        race=CharacterRace.HUMAN,
        description="Versatile and ambitious, quick to adapt.",
        ability_bonuses={ability: 1 for ability in Ability},
        traits=("Versatility", "Extra language"),
    ),
    CharacterRace.ELF: RaceDefinition(
        race=CharacterRace.ELF,
        description="Graceful, long-lived folk with a natural bond to magic.",
        ability_bonuses={Ability.DEX: 2},
        traits=("Darkvision (60 feet)", "Fey Ancestry", "Trance", "Keen Senses"),
    ),
    CharacterRace.DWARF: RaceDefinition(
        race=CharacterRace.DWARF,
        description="Hardy and stubborn warriors of stone halls.",
        ability_bonuses={Ability.CON: 2},
        traits=("Darkvision (60 feet)", "Dwarven Resilience", "Stonecunning"),
    ),
    CharacterRace.HALFLING: RaceDefinition(
        race=CharacterRace.HALFLING,
        description="Small, nimble adventurers with luck on their side.",
        ability_bonuses={Ability.DEX: 2},
        traits=("Lucky", "Brave", "Halfling Nimbleness"),
    ),
    CharacterRace.DRAGONBORN: RaceDefinition(
        race=CharacterRace.DRAGONBORN,
        description="Proud descendants of dragons.",
        ability_bonuses={Ability.STR: 2, Ability.CHA: 1},
        traits=("Draconic Ancestry", "Breath Weapon", "Damage Resistance"),
    ),
    CharacterRace.GNOME: RaceDefinition(
        race=CharacterRace.GNOME,
        description="Small, inventive and endlessly curious.",
        ability_bonuses={Ability.INT: 2},
        traits=("Darkvision (60 feet)", "Gnome Cunning"),
    ),
    CharacterRace.HALF_ELF: RaceDefinition(
        race=CharacterRace.HALF_ELF,
        description="Human versatility joined with elven grace.",
        ability_bonuses={Ability.CHA: 2},
        traits=("Darkvision (60 feet)", "Fey Ancestry", "Skill Versatility"),
    ),
    CharacterRace.HALF_ORC: RaceDefinition(
        race=CharacterRace.HALF_ORC,
        description="Orcish strength with human endurance.",
        ability_bonuses={Ability.STR: 2, Ability.CON: 1},
        traits=("Darkvision (60 feet)", "Relentless Endurance", "Savage Attacks"),
    ),
    CharacterRace.TIEFLING: RaceDefinition(
        race=CharacterRace.TIEFLING,
        description="Bearers of an infernal bloodline.",
        ability_bonuses={Ability.CHA: 2, Ability.INT: 1},
        traits=("Darkvision (60 feet)", "Hellish Resistance", "Infernal Legacy"),
    ),
})


def racial_bonuses(race: CharacterRace) -> dict[Ability, int]:
    """Get the fixed ability bonuses for a race."""
    return dict(RACES[race].ability_bonuses)


__all__ = [
    "RaceDefinition",
    "RACES",
    "racial_bonuses",
]
