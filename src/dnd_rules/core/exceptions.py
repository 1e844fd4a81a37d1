"""Custom exception hierarchy for the D&D 5E rules core.

Every rules violation the core can detect is raised as a subclass of
DndRulesError. The enclosing service layer catches DndRulesError at its
boundary and maps ``error_code`` to a 4xx response; nothing in here is
fatal to the process and nothing is retried.

Example:
    >>> from dnd_rules.core.exceptions import InvalidDiceType
    >>> raise InvalidDiceType("Unsupported die", notation="1d7", sides=7)
"""

from __future__ import annotations

from typing import Any, ClassVar


class DndRulesError(Exception):
    """Base exception for all rules-core errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
        error_code: Stable identifier of the failure kind.
    """

    error_code: ClassVar[str] = "DndRulesError"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DndRulesError):
    """Raised when rules configuration is invalid."""

    error_code = "ConfigurationError"

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Dice Exceptions
# =============================================================================


class DiceError(DndRulesError):
    """Base exception for dice notation and rolling errors."""

    error_code = "DiceError"

    def __init__(
        self,
        message: str,
        *,
        notation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice error with notation context.

        Args:
            message: Human-readable error description.
            notation: The dice notation that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if notation is not None:
            combined_details["notation"] = notation
        super().__init__(message, details=combined_details)


class InvalidNotation(DiceError):
    """Raised when a dice string does not match ``[count]d<sides>[+|-mod]``."""

    error_code = "InvalidNotation"


class InvalidDiceCount(DiceError):
    """Raised when the number of dice is outside the allowed range."""

    error_code = "InvalidDiceCount"

    def __init__(
        self,
        message: str,
        *,
        notation: str | None = None,
        count: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if count is not None:
            combined_details["count"] = count
        super().__init__(message, notation=notation, details=combined_details)


class InvalidDiceType(DiceError):
    """Raised when the die size is not one of the supported polyhedrals."""

    error_code = "InvalidDiceType"

    def __init__(
        self,
        message: str,
        *,
        notation: str | None = None,
        sides: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if sides is not None:
            combined_details["sides"] = sides
        super().__init__(message, notation=notation, details=combined_details)


class AdvantageRequiresSingleDie(DiceError):
    """Raised when advantage or disadvantage is requested for more than one die."""

    error_code = "AdvantageRequiresSingleDie"


class ConflictingRollModes(DiceError):
    """Raised when advantage and disadvantage are requested together."""

    error_code = "ConflictingRollModes"


# =============================================================================
# Character Exceptions
# =============================================================================


class CharacterError(DndRulesError):
    """Base exception for character construction and ability score errors."""

    error_code = "CharacterError"


class InvalidAbilityScore(CharacterError):
    """Raised when an ability score falls outside the allowed range."""

    error_code = "InvalidAbilityScore"

    def __init__(
        self,
        message: str,
        *,
        ability: str | None = None,
        score: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ability score error with field context.

        Args:
            message: Human-readable error description.
            ability: Name of the ability that failed validation.
            score: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if ability:
            combined_details["ability"] = ability
        if score is not None:
            combined_details["score"] = score
        super().__init__(message, details=combined_details)


class InvalidPointBuy(CharacterError):
    """Raised when a point-buy build is out of range or over budget."""

    error_code = "InvalidPointBuy"


class UnknownCharacterClass(CharacterError):
    """Raised when a class name is not one of the twelve PHB classes."""

    error_code = "UnknownCharacterClass"


# =============================================================================
# Progression Exceptions
# =============================================================================


class ProgressionError(DndRulesError):
    """Base exception for experience, leveling and ASI errors."""

    error_code = "ProgressionError"

    def __init__(
        self,
        message: str,
        *,
        character_id: str | None = None,
        level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize progression error with character context.

        Args:
            message: Human-readable error description.
            character_id: Identifier of the character involved.
            level: Character level when the error occurred.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if character_id:
            combined_details["character_id"] = character_id
        if level is not None:
            combined_details["level"] = level
        super().__init__(message, details=combined_details)


class InvalidExperienceDelta(ProgressionError):
    """Raised when a negative amount of experience is awarded."""

    error_code = "InvalidExperienceDelta"


class LevelUpNotAvailable(ProgressionError):
    """Raised when level-up is invoked below the next XP threshold or at level 20."""

    error_code = "LevelUpNotAvailable"


class NoPendingASI(ProgressionError):
    """Raised when an ASI is applied to a character without one pending."""

    error_code = "NoPendingASI"


class InvalidASITotal(ProgressionError):
    """Raised when the ASI deltas do not add up to exactly the allowed total."""

    error_code = "InvalidASITotal"


class AbilityScoreExceedsMax(ProgressionError):
    """Raised when an ASI would push an ability score above the cap."""

    error_code = "AbilityScoreExceedsMax"


# =============================================================================
# Inventory Exceptions
# =============================================================================


class InventoryError(DndRulesError):
    """Base exception for equip and attunement transitions."""

    error_code = "InventoryError"

    def __init__(
        self,
        message: str,
        *,
        item_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize inventory error with item context.

        Args:
            message: Human-readable error description.
            item_id: Identifier of the item involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if item_id:
            combined_details["item_id"] = item_id
        super().__init__(message, details=combined_details)


class ItemNotFound(InventoryError):
    """Raised when an item id is not present in the inventory."""

    error_code = "ItemNotFound"


class ItemAlreadyEquipped(InventoryError):
    error_code = "ItemAlreadyEquipped"


class ItemNotEquipped(InventoryError):
    error_code = "ItemNotEquipped"


class ItemStillAttuned(InventoryError):
    """Raised when unequipping an item that is still attuned."""

    error_code = "ItemStillAttuned"


class AttunementNotRequired(InventoryError):
    error_code = "AttunementNotRequired"


class ItemAlreadyAttuned(InventoryError):
    error_code = "ItemAlreadyAttuned"


class ItemNotAttuned(InventoryError):
    error_code = "ItemNotAttuned"


class AttunementLimitExceeded(InventoryError):
    """Raised when attuning would exceed the simultaneous attunement limit."""

    error_code = "AttunementLimitExceeded"

    def __init__(
        self,
        message: str,
        *,
        item_id: str | None = None,
        limit: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if limit is not None:
            combined_details["limit"] = limit
        super().__init__(message, item_id=item_id, details=combined_details)


__all__ = [
    # Base exception
    "DndRulesError",
    # Configuration exceptions
    "ConfigurationError",
    # Dice exceptions
    "DiceError",
    "InvalidNotation",
    "InvalidDiceCount",
    "InvalidDiceType",
    "AdvantageRequiresSingleDie",
    "ConflictingRollModes",
    # Character exceptions
    "CharacterError",
    "InvalidAbilityScore",
    "InvalidPointBuy",
    "UnknownCharacterClass",
    # Progression exceptions
    "ProgressionError",
    "InvalidExperienceDelta",
    "LevelUpNotAvailable",
    "NoPendingASI",
    "InvalidASITotal",
    "AbilityScoreExceedsMax",
    # Inventory exceptions
    "InventoryError",
    "ItemNotFound",
    "ItemAlreadyEquipped",
    "ItemNotEquipped",
    "ItemStillAttuned",
    "AttunementNotRequired",
    "ItemAlreadyAttuned",
    "ItemNotAttuned",
    "AttunementLimitExceeded",
]
