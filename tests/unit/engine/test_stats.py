"""Tests for ability scores and derived statistics."""

from __future__ import annotations

import math

import pytest

from dnd_rules.core.exceptions import InvalidAbilityScore, InvalidPointBuy, UnknownCharacterClass
from dnd_rules.engine.stats import (
    base_armor_class,
    calculate_armor_class,
    calculate_max_hp,
    calculate_modifier,
    calculate_modifiers,
    default_ability_scores,
    effective_ability_scores,
    format_modifier,
    hit_die_for,
    is_valid_ability_score,
    max_hp_at_level_one,
    point_buy_cost,
    proficiency_bonus,
    standard_array,
    validate_ability_score,
    validate_point_buy,
)
from dnd_rules.models.character import AbilityScores
from dnd_rules.models.enums import Ability, CharacterClass
from dnd_rules.models.items import StatBonuses


class TestModifiers:
    """Tests for ability modifiers."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1, -5), (3, -4), (8, -1), (9, -1), (10, 0), (11, 0), (15, 2), (20, 5), (30, 10)],
    )
    def test_calculate_modifier(self, score: int, expected: int) -> None:
        """Test modifier rounds toward negative infinity."""
        assert calculate_modifier(score) == expected

    def test_calculate_modifiers(self, sample_ability_scores: dict[str, int]) -> None:
        """Test all six modifiers at once."""
        modifiers = calculate_modifiers(AbilityScores(**sample_ability_scores))

        assert modifiers[Ability.STR] == 2
        assert modifiers[Ability.CHA] == -1
        assert len(modifiers) == 6

    @pytest.mark.parametrize(("modifier", "text"), [(2, "+2"), (-1, "-1"), (0, "+0")])
    def test_format_modifier(self, modifier: int, text: str) -> None:
        """Test signed formatting."""
        assert format_modifier(modifier) == text


class TestProficiencyBonus:
    """Tests for proficiency bonus."""

    @pytest.mark.parametrize(
        ("level", "bonus"),
        [(1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (12, 4), (13, 5), (16, 5), (17, 6), (20, 6)],
    )
    def test_bands(self, level: int, bonus: int) -> None:
        """Test each four-level band."""
        assert proficiency_bonus(level) == bonus


class TestArmorClass:
    """Tests for armor class."""

    def test_base_armor_class(self) -> None:
        """Test unarmored AC."""
        assert base_armor_class(2) == 12
        assert base_armor_class(-1) == 9

    def test_with_armor(self) -> None:
        """Test worn armor replaces the base 10."""
        assert calculate_armor_class(14, armor_value=11) == 13

    def test_without_armor(self) -> None:
        """Test no armor falls back to 10 + DEX."""
        assert calculate_armor_class(8) == 9


class TestHitPoints:
    """Tests for hit dice and maximum hit points."""

    @pytest.mark.parametrize(
        ("character_class", "die"),
        [
            (CharacterClass.BARBARIAN, 12),
            (CharacterClass.FIGHTER, 10),
            (CharacterClass.PALADIN, 10),
            (CharacterClass.RANGER, 10),
            (CharacterClass.CLERIC, 8),
            (CharacterClass.ROGUE, 8),
            (CharacterClass.WIZARD, 6),
            (CharacterClass.SORCERER, 6),
        ],
    )
    def test_hit_die(self, character_class: CharacterClass, die: int) -> None:
        """Test hit die table."""
        assert hit_die_for(character_class) == die

    def test_hit_die_accepts_class_name(self) -> None:
        """Test string class names are accepted."""
        assert hit_die_for("Monk") == 8

    def test_unknown_class(self) -> None:
        """Test unknown classes are rejected."""
        with pytest.raises(UnknownCharacterClass):
            hit_die_for("Artificer")

    def test_level_one(self) -> None:
        """Test level 1 HP is full hit die plus CON."""
        assert max_hp_at_level_one(CharacterClass.FIGHTER, 2) == 12
        assert max_hp_at_level_one(CharacterClass.WIZARD, -4) == 2

    def test_level_one_minimum(self) -> None:
        """Test level 1 HP never drops below 1."""
        assert max_hp_at_level_one(CharacterClass.WIZARD, -6) == 1

    def test_fighter_level_three(self) -> None:
        """Test per-level average accrual."""
        # 10 + 2 at level 1, then (5 + 1 + 2) twice
        assert calculate_max_hp(CharacterClass.FIGHTER, 14, 3) == 28

    def test_wizard_level_five(self) -> None:
        """Test accrual for a d6 class."""
        # 6 + 1, then (3 + 1 + 1) four times
        assert calculate_max_hp(CharacterClass.WIZARD, 12, 5) == 27

    def test_never_below_level(self) -> None:
        """Test low CON cannot drop HP below the level."""
        assert calculate_max_hp(CharacterClass.WIZARD, 3, 10) == 10

    def test_level_one_matches_helper(self) -> None:
        """Test both level 1 computations agree."""
        assert calculate_max_hp(CharacterClass.CLERIC, 16, 1) == max_hp_at_level_one(
            CharacterClass.CLERIC, 3
        )


class TestAbilityScoreValidation:
    """Tests for ability score bounds."""

    @pytest.mark.parametrize("score", [3, 10, 20])
    def test_valid(self, score: int) -> None:
        """Test boundary scores are valid."""
        assert is_valid_ability_score(score)
        assert validate_ability_score(score) == score

    @pytest.mark.parametrize("score", [2, 21, 0])
    def test_invalid(self, score: int) -> None:
        """Test out-of-range scores raise."""
        assert not is_valid_ability_score(score)
        with pytest.raises(InvalidAbilityScore) as exc_info:
            validate_ability_score(score, Ability.STR)
        assert exc_info.value.details["ability"] == "strength"


class TestPointBuy:
    """Tests for point-buy costs."""

    def test_standard_build(self) -> None:
        """Test a legal 27-point build."""
        scores = {
            Ability.STR: 15,
            Ability.DEX: 14,
            Ability.CON: 13,
            Ability.INT: 12,
            Ability.WIS: 10,
            Ability.CHA: 8,
        }
        assert point_buy_cost(scores) == 9 + 7 + 5 + 4 + 2 + 0
        assert validate_point_buy(scores) == 27

    def test_all_eights_cost_nothing(self) -> None:
        """Test the minimum build."""
        assert point_buy_cost({ability: 8 for ability in Ability}) == 0

    def test_out_of_range_is_infinite(self) -> None:
        """Test a score outside 8..15 makes the cost infinite."""
        assert point_buy_cost({Ability.STR: 16}) == math.inf
        assert point_buy_cost({Ability.STR: 7}) == math.inf

    def test_accepts_ability_scores(self) -> None:
        """Test AbilityScores input."""
        assert point_buy_cost(default_ability_scores()) == 12

    def test_out_of_range_rejected(self) -> None:
        """Test validation rejects impossible builds."""
        with pytest.raises(InvalidPointBuy):
            validate_point_buy({Ability.STR: 17})

    def test_over_budget_rejected(self) -> None:
        """Test validation rejects builds over budget."""
        with pytest.raises(InvalidPointBuy) as exc_info:
            validate_point_buy({ability: 15 for ability in Ability})
        assert exc_info.value.details["cost"] == 54


class TestGeneration:
    """Tests for score generation helpers."""

    def test_standard_array(self) -> None:
        """Test the standard array values."""
        assert standard_array() == (15, 14, 13, 12, 10, 8)

    def test_default_scores(self) -> None:
        """Test defaults are all 10."""
        assert default_ability_scores().as_dict() == {ability: 10 for ability in Ability}


class TestEffectiveScores:
    """Tests for base plus equipment scores."""

    def test_bonuses_added(self) -> None:
        """Test bonuses add to base scores."""
        scores = effective_ability_scores(
            AbilityScores(strength=15),
            StatBonuses(strength=2, wisdom=1),
        )
        assert scores[Ability.STR] == 17
        assert scores[Ability.WIS] == 11
        assert scores[Ability.DEX] == 10

    def test_not_capped(self) -> None:
        """Test equipment can push a score past 20."""
        scores = effective_ability_scores(AbilityScores(strength=20), StatBonuses(strength=2))
        assert scores[Ability.STR] == 22
