"""Tests for class progression queries."""

from __future__ import annotations

import pytest

from dnd_rules.engine.classes import (
    features_for_level,
    initial_spells,
    is_spellcaster,
    newly_unlocked_features,
    pact_magic_for_level,
    primary_abilities,
    resolve_uses_per_rest,
    saving_throw_proficiencies,
    spell_slots_for_level,
    spellcasting_ability,
    spells_for_class,
)
from dnd_rules.models.character import AbilityScores
from dnd_rules.models.enums import Ability, CharacterClass
from dnd_rules.models.features import (
    AbilityUses,
    ClassFeatureDefinition,
    FixedUses,
    ProficiencyUses,
    UnlimitedUses,
)


def names(features: tuple[ClassFeatureDefinition, ...]) -> list[str]:
    return [feature.name for feature in features]


class TestFeaturesForLevel:
    """Tests for feature lookup."""

    def test_fighter_level_two(self) -> None:
        """Test features unlock in table order."""
        assert names(features_for_level(CharacterClass.FIGHTER, 2)) == [
            "Fighting Style",
            "Second Wind",
            "Action Surge",
        ]

    def test_paladin_level_five(self) -> None:
        """Test paladin features through level 5."""
        assert names(features_for_level(CharacterClass.PALADIN, 5)) == [
            "Divine Sense",
            "Lay on Hands",
            "Fighting Style",
            "Divine Smite",
            "Divine Health",
            "Sacred Oath",
            "Extra Attack",
        ]

    def test_wizard_level_twenty(self) -> None:
        """Test capstone features appear at 20."""
        assert "Signature Spells" in names(features_for_level(CharacterClass.WIZARD, 20))
        assert "Signature Spells" not in names(features_for_level(CharacterClass.WIZARD, 19))

    @pytest.mark.parametrize(
        "character_class",
        [CharacterClass.BARD, CharacterClass.MONK, CharacterClass.WARLOCK],
    )
    def test_unmodelled_classes_are_empty(self, character_class: CharacterClass) -> None:
        """Test classes without data return no features."""
        assert features_for_level(character_class, 20) == ()


class TestNewlyUnlockedFeatures:
    """Tests for features gained on level-up."""

    def test_fighter_four_to_five(self) -> None:
        """Test Extra Attack unlocks at 5."""
        assert names(newly_unlocked_features(CharacterClass.FIGHTER, 4, 5)) == ["Extra Attack"]

    def test_no_change(self) -> None:
        """Test no features between levels without unlocks."""
        assert newly_unlocked_features(CharacterClass.ROGUE, 2, 4) == ()

    def test_excludes_old_level(self) -> None:
        """Test features at the old level are not repeated."""
        assert "Second Wind" not in names(newly_unlocked_features(CharacterClass.FIGHTER, 1, 2))


class TestResolveUsesPerRest:
    """Tests for uses-per-rest resolution."""

    def feature(self, uses: object) -> ClassFeatureDefinition:
        return ClassFeatureDefinition(name="Test", unlock_level=1, uses_per_rest=uses)

    def test_fixed(self) -> None:
        """Test fixed counts are returned as-is."""
        result = resolve_uses_per_rest(
            self.feature(FixedUses(count=2)), level=1, ability_scores=AbilityScores()
        )
        assert result == 2

    @pytest.mark.parametrize(("level", "expected"), [(1, 2), (5, 3), (17, 6)])
    def test_proficiency(self, level: int, expected: int) -> None:
        """Test proficiency-based uses follow the proficiency bonus."""
        result = resolve_uses_per_rest(
            self.feature(ProficiencyUses()), level=level, ability_scores=AbilityScores()
        )
        assert result == expected

    @pytest.mark.parametrize(("charisma", "expected"), [(16, 4), (10, 1), (8, 1), (3, 1)])
    def test_charisma(self, charisma: int, expected: int) -> None:
        """Test ability uses are 1 + modifier with a minimum of 1."""
        result = resolve_uses_per_rest(
            self.feature(AbilityUses(ability=Ability.CHA)),
            level=1,
            ability_scores=AbilityScores(charisma=charisma),
        )
        assert result == expected

    def test_wisdom(self) -> None:
        """Test wisdom-based uses."""
        result = resolve_uses_per_rest(
            self.feature(AbilityUses(ability=Ability.WIS)),
            level=1,
            ability_scores=AbilityScores(wisdom=14),
        )
        assert result == 3

    def test_unlimited(self) -> None:
        """Test non-resource features resolve to zero."""
        result = resolve_uses_per_rest(
            self.feature(UnlimitedUses()), level=20, ability_scores=AbilityScores()
        )
        assert result == 0

    def test_divine_sense(self) -> None:
        """Test the paladin table entry resolves from charisma."""
        divine_sense = features_for_level(CharacterClass.PALADIN, 1)[0]
        result = resolve_uses_per_rest(
            divine_sense, level=1, ability_scores=AbilityScores(charisma=16)
        )
        assert result == 4


class TestSpellSlots:
    """Tests for spell slot lookup."""

    def test_full_caster(self) -> None:
        """Test wizard slots at level 5."""
        assert spell_slots_for_level(CharacterClass.WIZARD, 5) == {1: 4, 2: 3, 3: 2}

    def test_half_caster_starts_at_two(self) -> None:
        """Test paladins have no slots at level 1."""
        assert spell_slots_for_level(CharacterClass.PALADIN, 1) == {}
        assert spell_slots_for_level(CharacterClass.PALADIN, 2) == {1: 2}

    def test_non_caster(self) -> None:
        """Test martial classes have no slots."""
        assert spell_slots_for_level(CharacterClass.FIGHTER, 10) == {}

    def test_out_of_range_level(self) -> None:
        """Test unknown levels have no slots."""
        assert spell_slots_for_level(CharacterClass.WIZARD, 21) == {}

    def test_returns_copy(self) -> None:
        """Test callers cannot modify the static table."""
        slots = spell_slots_for_level(CharacterClass.CLERIC, 1)
        slots[1] = 99
        assert spell_slots_for_level(CharacterClass.CLERIC, 1) == {1: 2}

    def test_pact_magic(self) -> None:
        """Test warlock pact slots."""
        assert pact_magic_for_level(1) == (1, 1)
        assert pact_magic_for_level(11) == (3, 5)
        assert pact_magic_for_level(0) is None


class TestSpells:
    """Tests for spell lists and initial spells."""

    @pytest.mark.parametrize(
        "character_class",
        [
            CharacterClass.BARD,
            CharacterClass.CLERIC,
            CharacterClass.DRUID,
            CharacterClass.PALADIN,
            CharacterClass.RANGER,
            CharacterClass.SORCERER,
            CharacterClass.WARLOCK,
            CharacterClass.WIZARD,
        ],
    )
    def test_spellcasters(self, character_class: CharacterClass) -> None:
        """Test the eight spellcasting classes."""
        assert is_spellcaster(character_class)
        assert spellcasting_ability(character_class) is not None

    @pytest.mark.parametrize(
        "character_class",
        [CharacterClass.BARBARIAN, CharacterClass.FIGHTER, CharacterClass.MONK, CharacterClass.ROGUE],
    )
    def test_non_spellcasters(self, character_class: CharacterClass) -> None:
        """Test martial classes do not cast."""
        assert not is_spellcaster(character_class)
        assert spellcasting_ability(character_class) is None

    def test_wizard_initial_spells(self) -> None:
        """Test wizards get three cantrips and four 1st-level spells."""
        spells = initial_spells(CharacterClass.WIZARD)
        assert [s.name for s in spells] == [
            "Fire Bolt",
            "Mage Hand",
            "Ray of Frost",
            "Magic Missile",
            "Shield",
            "Detect Magic",
            "Burning Hands",
        ]

    def test_cleric_initial_spells(self) -> None:
        """Test clerics get every cantrip and three 1st-level spells."""
        spells = initial_spells(CharacterClass.CLERIC)
        assert [s.name for s in spells] == [
            "Sacred Flame",
            "Spare the Dying",
            "Guidance",
            "Cure Wounds",
            "Healing Word",
            "Bless",
        ]

    def test_paladin_level_one_has_none(self) -> None:
        """Test paladins start casting at level 2."""
        assert initial_spells(CharacterClass.PALADIN, 1) == ()

    def test_paladin_level_two(self) -> None:
        """Test paladins get three 1st-level spells from level 2."""
        spells = initial_spells(CharacterClass.PALADIN, 2)
        assert [s.name for s in spells] == ["Bless", "Cure Wounds", "Divine Favor"]

    def test_other_classes_have_none(self) -> None:
        """Test classes without a seeding rule start empty."""
        assert initial_spells(CharacterClass.SORCERER) == ()
        assert initial_spells(CharacterClass.FIGHTER) == ()

    def test_spell_list_order(self) -> None:
        """Test cantrips come first in class lists."""
        levels = [spell.level for spell in spells_for_class(CharacterClass.WIZARD)]
        assert levels == sorted(levels)

    def test_unlisted_class(self) -> None:
        """Test classes without a spell list."""
        assert spells_for_class(CharacterClass.DRUID) == ()


class TestClassAbilities:
    """Tests for primary abilities and saving throws."""

    def test_primary_abilities(self) -> None:
        """Test a few primary abilities."""
        assert primary_abilities(CharacterClass.WIZARD) == (Ability.INT,)
        assert primary_abilities(CharacterClass.PALADIN) == (Ability.STR, Ability.CHA)

    def test_saving_throws(self) -> None:
        """Test saving throw proficiencies."""
        assert saving_throw_proficiencies(CharacterClass.ROGUE) == (Ability.DEX, Ability.INT)
