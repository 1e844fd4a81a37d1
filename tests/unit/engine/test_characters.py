"""Tests for character creation and hit point changes."""

from __future__ import annotations

from typing import Any

import pytest

from dnd_rules.core.exceptions import CharacterError, InvalidAbilityScore, UnknownCharacterClass
from dnd_rules.engine.characters import create_character, is_unconscious, modify_hit_points
from dnd_rules.models.character import AbilityScores
from dnd_rules.models.enums import Ability, CharacterClass, CharacterRace


class TestCreateCharacter:
    """Tests for create_character."""

    def test_level_one_fighter(self, sample_ability_scores: dict[str, int]) -> None:
        """Test a level 1 Fighter starts at full health."""
        sheet = create_character(
            "Bruenor",
            CharacterRace.DWARF,
            CharacterClass.FIGHTER,
            AbilityScores(**sample_ability_scores),
        )
        character = sheet.character

        assert character.level == 1
        assert character.max_hit_points == 12
        assert character.hit_points == 12
        assert character.armor_class == 12
        assert character.experience == 0
        assert character.pending_asi is False
        assert [f.name for f in sheet.features] == ["Fighting Style", "Second Wind"]
        assert sheet.spells == ()
        assert sheet.spell_slots == {}

    def test_scores_unchanged_without_racial_bonuses(
        self, sample_ability_scores: dict[str, int]
    ) -> None:
        """Test racial bonuses are opt-in."""
        sheet = create_character(
            "Grom",
            CharacterRace.HALF_ORC,
            CharacterClass.BARBARIAN,
            AbilityScores(**sample_ability_scores),
        )

        assert sheet.character.ability_scores.strength == 15

    def test_racial_bonuses(self, sample_ability_scores: dict[str, int]) -> None:
        """Test racial bonuses raise scores and derived HP."""
        sheet = create_character(
            "Grom",
            CharacterRace.HALF_ORC,
            CharacterClass.BARBARIAN,
            AbilityScores(**sample_ability_scores),
            apply_racial_bonuses=True,
        )
        scores = sheet.character.ability_scores

        assert scores.strength == 17
        assert scores.constitution == 15
        assert sheet.character.max_hit_points == 14

    def test_racial_bonus_capped(self) -> None:
        """Test racial bonuses cannot push a score past 20."""
        sheet = create_character(
            "Quick",
            CharacterRace.ELF,
            CharacterClass.ROGUE,
            AbilityScores(dexterity=19),
            apply_racial_bonuses=True,
        )

        assert sheet.character.ability_scores.dexterity == 20

    def test_string_inputs(self) -> None:
        """Test class and race names are accepted."""
        sheet = create_character(
            "Elminster",
            "Human",
            "Wizard",
            {Ability.INT: 16, Ability.CON: 12},
        )

        assert sheet.character.character_class == CharacterClass.WIZARD
        assert sheet.character.race == CharacterRace.HUMAN
        assert sheet.character.ability_scores.intelligence == 16
        assert sheet.character.max_hit_points == 7

    def test_wizard_spells(self) -> None:
        """Test wizards start with spells and slots."""
        sheet = create_character(
            "Elminster", CharacterRace.HUMAN, CharacterClass.WIZARD, AbilityScores()
        )

        assert len(sheet.spells) == 7
        assert sheet.spell_slots == {1: 2}

    def test_higher_starting_level(self) -> None:
        """Test characters can start above level 1."""
        sheet = create_character(
            "Veteran",
            CharacterRace.HUMAN,
            CharacterClass.FIGHTER,
            AbilityScores(constitution=14),
            level=3,
        )

        assert sheet.character.level == 3
        assert sheet.character.max_hit_points == 28
        assert sheet.character.experience == 900
        assert "Action Surge" in [f.name for f in sheet.features]

    def test_paladin_spells_from_level_two(self) -> None:
        """Test paladins starting at level 2 get spells."""
        sheet = create_character(
            "Galahad",
            CharacterRace.HUMAN,
            CharacterClass.PALADIN,
            AbilityScores(),
            level=2,
        )

        assert len(sheet.spells) == 3
        assert sheet.spell_slots == {1: 2}

    def test_armor_value(self) -> None:
        """Test worn armor sets the base AC."""
        sheet = create_character(
            "Tank",
            CharacterRace.DWARF,
            CharacterClass.FIGHTER,
            AbilityScores(dexterity=12),
            armor_value=16,
        )

        assert sheet.character.armor_class == 17

    def test_background(self) -> None:
        """Test the background is stored."""
        sheet = create_character(
            "Sage",
            CharacterRace.GNOME,
            CharacterClass.WIZARD,
            AbilityScores(),
            background="Sage",
        )

        assert sheet.character.background == "Sage"

    def test_unknown_class(self) -> None:
        """Test unknown classes raise."""
        with pytest.raises(UnknownCharacterClass):
            create_character("Bad", CharacterRace.HUMAN, "Artificer", AbilityScores())

    def test_unknown_race(self) -> None:
        """Test unknown races raise."""
        with pytest.raises(CharacterError):
            create_character("Bad", "Warforged", CharacterClass.FIGHTER, AbilityScores())

    def test_invalid_score(self) -> None:
        """Test out-of-range scores raise."""
        with pytest.raises(InvalidAbilityScore):
            create_character(
                "Bad", CharacterRace.HUMAN, CharacterClass.FIGHTER, {Ability.STR: 25}
            )


class TestHitPoints:
    """Tests for damage and healing."""

    def test_damage(self, sample_character: Any) -> None:
        """Test damage lowers hit points."""
        assert modify_hit_points(sample_character, -5).hit_points == 7

    def test_damage_clamped(self, sample_character: Any) -> None:
        """Test hit points stop at zero."""
        character = modify_hit_points(sample_character, -50)

        assert character.hit_points == 0
        assert is_unconscious(character)

    def test_healing_clamped(self, sample_character: Any) -> None:
        """Test healing stops at maximum."""
        hurt = modify_hit_points(sample_character, -10)

        assert modify_hit_points(hurt, 100).hit_points == 12

    def test_conscious(self, sample_character: Any) -> None:
        """Test a character above zero is conscious."""
        assert not is_unconscious(sample_character)
