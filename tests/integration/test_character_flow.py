"""Integration tests for the character lifecycle.

Covers the full progression flow: create a character, award experience,
level up across an ASI level, apply the improvement and take damage.
"""

from __future__ import annotations

import pytest

from dnd_rules.core.exceptions import LevelUpNotAvailable, NoPendingASI
from dnd_rules.engine import (
    add_experience,
    apply_ability_score_improvement,
    create_character,
    effective_stats,
    is_unconscious,
    level_up,
    modify_hit_points,
    resolve_uses_per_rest,
)
from dnd_rules.models import (
    Ability,
    AbilityScoreImprovement,
    AbilityScores,
    CharacterClass,
    CharacterRace,
)


class TestFighterProgression:
    """Take a Fighter from level 1 to level 5."""

    def test_first_level(self, sample_ability_scores: dict[str, int]) -> None:
        """A Fighter reaches level 2 at 300 XP without an ASI."""
        sheet = create_character(
            "Tordek",
            CharacterRace.DWARF,
            CharacterClass.FIGHTER,
            AbilityScores(**sample_ability_scores),
        )

        awarded = add_experience(sheet.character, 300)
        assert awarded.should_level_up

        result = level_up(awarded.character)

        assert result.character.level == 2
        assert result.character.max_hit_points == 20
        assert result.ability_score_improvement is False
        assert result.character.pending_asi is False

    def test_to_level_four_and_improve(self, sample_ability_scores: dict[str, int]) -> None:
        """Two awards and three level-ups lead to a pending ASI."""
        character = create_character(
            "Tordek",
            CharacterRace.DWARF,
            CharacterClass.FIGHTER,
            AbilityScores(**sample_ability_scores),
        ).character

        character = level_up(add_experience(character, 300).character).character
        character = add_experience(character, 2400).character
        assert character.experience == 2700

        character = level_up(character).character
        assert character.level == 3
        result = level_up(character)
        character = result.character

        assert character.level == 4
        assert character.max_hit_points == 36
        assert result.ability_score_improvement is True
        assert character.pending_asi is True

        with pytest.raises(LevelUpNotAvailable):
            level_up(character)

        character = apply_ability_score_improvement(
            character, AbilityScoreImprovement(strength=2)
        )

        assert character.ability_scores.strength == 17
        assert character.pending_asi is False
        assert [entry.level for entry in character.asi_history] == [4]
        assert effective_stats(character).modifiers[Ability.STR] == 3

        with pytest.raises(NoPendingASI):
            apply_ability_score_improvement(
                character, AbilityScoreImprovement(dexterity=2)
            )

    def test_damage_then_level(self, sample_ability_scores: dict[str, int]) -> None:
        """A wounded character keeps its missing hit points after levelling."""
        character = create_character(
            "Tordek",
            CharacterRace.DWARF,
            CharacterClass.FIGHTER,
            AbilityScores(**sample_ability_scores),
        ).character

        character = modify_hit_points(character, -12)
        assert is_unconscious(character)

        character = level_up(add_experience(character, 300).character).character

        assert character.hit_points == 8
        assert not is_unconscious(character)


class TestPaladinProgression:
    """Class resources change as a Paladin levels."""

    def test_paladin_gains_spellcasting(self) -> None:
        """Level 2 brings spell slots and smiting."""
        sheet = create_character(
            "Anya",
            CharacterRace.HUMAN,
            CharacterClass.PALADIN,
            AbilityScores(strength=15, charisma=15),
            apply_racial_bonuses=True,
        )
        character = sheet.character

        assert character.ability_scores.charisma == 16
        assert sheet.spells == ()
        assert sheet.spell_slots == {}

        divine_sense = sheet.features[0]
        assert (
            resolve_uses_per_rest(
                divine_sense, level=character.level, ability_scores=character.ability_scores
            )
            == 4
        )

        result = level_up(add_experience(character, 300).character)

        assert result.spell_slots == {1: 2}
        assert [f.name for f in result.new_features] == ["Fighting Style", "Divine Smite"]
