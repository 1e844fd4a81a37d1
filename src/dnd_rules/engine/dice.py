"""Dice rolling mechanics for D&D 5E.

Notation is the ``[count]d<sides>[+|-modifier]`` subset used at the table:
``d20``, ``1d20+5``, ``2d6-1``. It is parsed and validated here, and the
individual dice are drawn through the d20 library.

Advantage and disadvantage apply to single-die rolls only. Both draws are
retained on the result so transcripts can show what was rolled.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Any

import d20

from dnd_rules.core.config import get_settings
from dnd_rules.core.constants import CRITICAL_HIT_FACE, CRITICAL_MISS_FACE, MIN_DICE_COUNT
from dnd_rules.core.exceptions import (
    AdvantageRequiresSingleDie,
    ConflictingRollModes,
    InvalidDiceCount,
    InvalidDiceType,
    InvalidNotation,
)
from dnd_rules.core.logging import get_logger
from dnd_rules.models.enums import RollKind


logger = get_logger(__name__)

NOTATION_PATTERN = re.compile(r"^(\d*)d(\d+)([+-]\d+)?$")


@dataclass(frozen=True)
class DiceNotation:
    """A validated dice notation.

    Attributes:
        notation: Normalized notation (lowercase, no whitespace).
        count: Number of dice.
        sides: Faces per die.
        modifier: Flat modifier added to the sum.
    """

    notation: str
    count: int
    sides: int
    modifier: int


@dataclass(frozen=True)
class DiceRoll:
    """The outcome of one roll.

    Attributes:
        notation: Normalized notation that was rolled.
        count: Number of dice in the notation.
        sides: Faces per die.
        modifier: Flat modifier.
        rolls: Every retained die result. Two entries for advantage or
            disadvantage.
        total: Final result including the modifier.
        kind: Optional tag describing what the roll was for.
        advantage: Rolled with advantage.
        disadvantage: Rolled with disadvantage.
    """

    notation: str
    count: int
    sides: int
    modifier: int
    rolls: tuple[int, ...]
    total: int
    kind: RollKind | None = None
    advantage: bool = False
    disadvantage: bool = False

    @property
    def is_critical_hit(self) -> bool:
        return is_critical_hit(self)

    @property
    def is_critical_miss(self) -> bool:
        return is_critical_miss(self)


def parse_notation(notation: str) -> DiceNotation:
    """Parse and validate dice notation.

    Args:
        notation: Dice notation such as ``"1d20+5"`` or ``"d6"``.

    Returns:
        The parsed notation.

    Raises:
        InvalidNotation: If the string is not dice notation.
        InvalidDiceCount: If the dice count is out of range.
        InvalidDiceType: If the die size is not supported.
    """
    normalized = re.sub(r"\s", "", notation.strip().lower())
    match = NOTATION_PATTERN.match(normalized)
    if match is None:
        raise InvalidNotation(f"Invalid dice notation: {notation}", notation=notation)

    count_str, sides_str, modifier_str = match.groups()
    count = int(count_str) if count_str else 1
    sides = int(sides_str)
    modifier = int(modifier_str) if modifier_str else 0

    dice_settings = get_settings().dice
    if count < MIN_DICE_COUNT or count > dice_settings.max_dice_count:
        raise InvalidDiceCount(
            f"Dice count must be between {MIN_DICE_COUNT} and {dice_settings.max_dice_count}",
            notation=notation,
            count=count,
        )
    if sides not in dice_settings.supported_sides:
        raise InvalidDiceType(
            f"Unsupported die: d{sides}",
            notation=notation,
            sides=sides,
        )

    return DiceNotation(notation=normalized, count=count, sides=sides, modifier=modifier)


def is_critical_hit(roll: DiceRoll) -> bool:
    """A d20 roll where any retained die shows 20."""
    return roll.sides == 20 and any(r == CRITICAL_HIT_FACE for r in roll.rolls)


def is_critical_miss(roll: DiceRoll) -> bool:
    """A d20 roll where every retained die shows 1."""
    return (
        roll.sides == 20
        and len(roll.rolls) > 0
        and all(r == CRITICAL_MISS_FACE for r in roll.rolls)
    )


def format_roll(roll: DiceRoll) -> str:
    """Render a roll for transcripts.

    Example:
        >>> format_roll(DiceRoll("1d20+5", 1, 20, 5, (13,), 18))
        '1d20+5 → [13] +5 = 18'
    """
    rolls_str = ", ".join(str(r) for r in roll.rolls)
    modifier_str = f" {roll.modifier:+d}" if roll.modifier else ""
    text = f"{roll.notation} → [{rolls_str}]{modifier_str} = {roll.total}"

    if roll.advantage:
        text += " (Advantage)"
    if roll.disadvantage:
        text += " (Disadvantage)"
    if is_critical_hit(roll):
        text += " CRITICAL HIT!"
    if is_critical_miss(roll):
        text += " CRITICAL MISS!"
    return text


def _check_notation(modifier: int) -> str:
    return f"1d20{modifier:+d}"


class DiceRoller:
    """Dice rolling with D&D 5E mechanics.

    d20 draws from the module-level ``random`` generator, so a seed is
    process-wide: creating a seeded roller reseeds every roller in the
    process. Rolls are reproducible from the point of seeding as long as
    nothing else draws in between.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> result = roller.roll("1d20+5")
        >>> 6 <= result.total <= 25
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional seed applied to the global ``random`` module.
                Falls back to the configured ``DND_RULES_DICE_SEED``.
        """
        if seed is None:
            seed = get_settings().dice.seed
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        """The seed applied when this roller was created, if any."""
        return self._seed

    def _draw(self, count: int, sides: int) -> list[int]:
        """Draw ``count`` independent dice through d20."""
        result = d20.roll(f"{count}d{sides}")
        return self._extract_dice_values(result.expr)

    def _extract_dice_values(self, expr: Any) -> list[int]:
        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if getattr(die, "kept", True):
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values

    def roll(self, notation: str, kind: RollKind | None = None) -> DiceRoll:
        """Roll dice according to the given notation.

        Args:
            notation: Dice notation (e.g., '1d20+5', '2d6+3').
            kind: Optional tag for the roll.

        Returns:
            DiceRoll containing roll results.

        Raises:
            DiceError: If the notation is invalid.
        """
        parsed = parse_notation(notation)
        rolls = tuple(self._draw(parsed.count, parsed.sides))
        result = DiceRoll(
            notation=parsed.notation,
            count=parsed.count,
            sides=parsed.sides,
            modifier=parsed.modifier,
            rolls=rolls,
            total=sum(rolls) + parsed.modifier,
            kind=kind,
        )
        logger.info("Dice rolled", notation=result.notation, rolls=rolls, total=result.total)
        return result

    def _roll_twice(
        self,
        notation: str,
        kind: RollKind | None,
        *,
        advantage: bool,
    ) -> DiceRoll:
        parsed = parse_notation(notation)
        if parsed.count != 1:
            mode = "Advantage" if advantage else "Disadvantage"
            logger.warning("Rejected roll mode", notation=notation, count=parsed.count)
            raise AdvantageRequiresSingleDie(
                f"{mode} only works with single die rolls",
                notation=notation,
            )

        rolls = tuple(self._draw(2, parsed.sides))
        kept = max(rolls) if advantage else min(rolls)
        result = DiceRoll(
            notation=parsed.notation,
            count=parsed.count,
            sides=parsed.sides,
            modifier=parsed.modifier,
            rolls=rolls,
            total=kept + parsed.modifier,
            kind=kind,
            advantage=advantage,
            disadvantage=not advantage,
        )
        logger.info(
            "Dice rolled",
            notation=result.notation,
            rolls=rolls,
            total=result.total,
            advantage=result.advantage,
            disadvantage=result.disadvantage,
        )
        return result

    def roll_with_advantage(self, notation: str, kind: RollKind | None = None) -> DiceRoll:
        """Roll a single die twice and keep the higher result."""
        return self._roll_twice(notation, kind, advantage=True)

    def roll_with_disadvantage(self, notation: str, kind: RollKind | None = None) -> DiceRoll:
        """Roll a single die twice and keep the lower result."""
        return self._roll_twice(notation, kind, advantage=False)

    def roll_check(
        self,
        notation: str,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
        kind: RollKind | None = None,
    ) -> DiceRoll:
        """Roll normally, with advantage or with disadvantage.

        Raises:
            ConflictingRollModes: If both advantage and disadvantage are set.
        """
        if advantage and disadvantage:
            raise ConflictingRollModes(
                "Cannot roll with both advantage and disadvantage",
                notation=notation,
            )
        if advantage:
            return self.roll_with_advantage(notation, kind)
        if disadvantage:
            return self.roll_with_disadvantage(notation, kind)
        return self.roll(notation, kind)

    def roll_ability_check(
        self,
        modifier: int,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
    ) -> DiceRoll:
        """Roll an ability check (1d20 + modifier)."""
        return self.roll_check(
            _check_notation(modifier),
            advantage=advantage,
            disadvantage=disadvantage,
            kind=RollKind.ABILITY_CHECK,
        )

    def roll_attack(
        self,
        attack_bonus: int,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
    ) -> DiceRoll:
        """Roll an attack (1d20 + attack bonus)."""
        return self.roll_check(
            _check_notation(attack_bonus),
            advantage=advantage,
            disadvantage=disadvantage,
            kind=RollKind.ATTACK,
        )

    def roll_saving_throw(
        self,
        modifier: int,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
    ) -> DiceRoll:
        """Roll a saving throw (1d20 + save modifier)."""
        return self.roll_check(
            _check_notation(modifier),
            advantage=advantage,
            disadvantage=disadvantage,
            kind=RollKind.SAVING_THROW,
        )

    def roll_initiative(
        self,
        dexterity_modifier: int,
        *,
        advantage: bool = False,
        disadvantage: bool = False,
    ) -> DiceRoll:
        """Roll initiative (1d20 + Dexterity modifier)."""
        return self.roll_check(
            _check_notation(dexterity_modifier),
            advantage=advantage,
            disadvantage=disadvantage,
            kind=RollKind.INITIATIVE,
        )


# Module-level convenience roller
_default_roller: DiceRoller | None = None


def _get_default_roller() -> DiceRoller:
    global _default_roller  # noqa: PLW0603
    if _default_roller is None:
        _default_roller = DiceRoller()
    return _default_roller


def roll(notation: str, kind: RollKind | None = None) -> DiceRoll:
    """Convenience function to roll dice.

    Example:
        >>> result = roll("2d6+3")
        >>> 5 <= result.total <= 15
        True
    """
    return _get_default_roller().roll(notation, kind)


def roll_with_advantage(notation: str, kind: RollKind | None = None) -> DiceRoll:
    return _get_default_roller().roll_with_advantage(notation, kind)


def roll_with_disadvantage(notation: str, kind: RollKind | None = None) -> DiceRoll:
    return _get_default_roller().roll_with_disadvantage(notation, kind)


__all__ = [
    "DiceNotation",
    "DiceRoll",
    "DiceRoller",
    "parse_notation",
    "is_critical_hit",
    "is_critical_miss",
    "format_roll",
    "roll",
    "roll_with_advantage",
    "roll_with_disadvantage",
]
