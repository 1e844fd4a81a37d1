"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DndRulesError: Base exception for all rules errors.
        DiceError, CharacterError, ProgressionError, InventoryError:
            Domain bases for the classified failures.

    Configuration:
        Settings: Top-level settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up structlog.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dnd_rules.core.config import (
    DiceSettings,
    LoggingSettings,
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_rules.core.exceptions import (
    AbilityScoreExceedsMax,
    AdvantageRequiresSingleDie,
    AttunementLimitExceeded,
    AttunementNotRequired,
    CharacterError,
    ConfigurationError,
    ConflictingRollModes,
    DiceError,
    DndRulesError,
    InvalidAbilityScore,
    InvalidASITotal,
    InvalidDiceCount,
    InvalidDiceType,
    InvalidExperienceDelta,
    InvalidNotation,
    InvalidPointBuy,
    InventoryError,
    ItemAlreadyAttuned,
    ItemAlreadyEquipped,
    ItemNotAttuned,
    ItemNotEquipped,
    ItemNotFound,
    ItemStillAttuned,
    LevelUpNotAvailable,
    NoPendingASI,
    ProgressionError,
    UnknownCharacterClass,
)
from dnd_rules.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Base exception
    "DndRulesError",
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
    # Configuration
    "Settings",
    "RulesSettings",
    "DiceSettings",
    "LoggingSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
