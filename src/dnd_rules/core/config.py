"""Configuration management for the D&D 5E rules core.

Rule limits that a table might house-rule (attunement slots, dice caps,
ability score bounds) are exposed through pydantic-settings so they can be
overridden with environment variables or a .env file. The defaults are the
Player's Handbook values.

Example:
    >>> from dnd_rules.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.max_attuned_items
    3

Environment Variables:
    DND_RULES_MAX_ATTUNED_ITEMS: Simultaneous attunement limit
    DND_RULES_DICE_MAX_DICE_COUNT: Largest dice pool a notation may request
    DND_RULES_DICE_SEED: Seed for reproducible rolls
    DND_RULES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_rules.core.constants import (
    ASI_POINT_TOTAL,
    MAX_ATTUNED_ITEMS,
    MAX_CHARACTER_LEVEL,
    MAX_DICE_COUNT,
    MIN_ABILITY_SCORE,
    MIN_CHARACTER_LEVEL,
    PC_ABILITY_SCORE_CAP,
    SUPPORTED_DICE,
)
from dnd_rules.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Core D&D 5E rule limits.

    Attributes:
        max_attuned_items: Items a character may be attuned to at once.
        ability_score_min: Lowest legal base ability score.
        ability_score_max: Highest legal base ability score.
        max_character_level: Level cap.
        asi_total: Points granted by one Ability Score Improvement.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_attuned_items: int = Field(
        default=MAX_ATTUNED_ITEMS,
        ge=1,
        le=10,
        description="Simultaneous attunement limit",
    )
    ability_score_min: int = Field(
        default=MIN_ABILITY_SCORE,
        ge=1,
        description="Lowest legal ability score",
    )
    ability_score_max: int = Field(
        default=PC_ABILITY_SCORE_CAP,
        le=30,
        description="Highest legal ability score",
    )
    max_character_level: int = Field(
        default=MAX_CHARACTER_LEVEL,
        ge=MIN_CHARACTER_LEVEL,
        le=MAX_CHARACTER_LEVEL,
        description="Character level cap",
    )
    asi_total: int = Field(
        default=ASI_POINT_TOTAL,
        ge=1,
        description="Points granted by one ASI",
    )

    @model_validator(mode="after")
    def validate_score_bounds(self) -> "RulesSettings":
        """Ensure the ability score range is not empty.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If ability_score_min >= ability_score_max.
        """
        if self.ability_score_min >= self.ability_score_max:
            raise ConfigurationError(
                f"ability_score_min ({self.ability_score_min}) must be less than "
                f"ability_score_max ({self.ability_score_max})",
                config_key="ability_score_min",
            )
        return self


class DiceSettings(BaseSettings):
    """Configuration for the dice engine.

    Attributes:
        max_dice_count: Largest number of dice one notation may roll.
        supported_sides: Die sizes accepted by the notation parser.
        seed: Optional seed for reproducible rolls.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RULES_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_dice_count: int = Field(
        default=MAX_DICE_COUNT,
        ge=1,
        le=1000,
        description="Largest dice pool per notation",
    )
    supported_sides: list[int] = Field(
        default_factory=lambda: list(SUPPORTED_DICE),
        min_length=1,
        description="Accepted die sizes",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for reproducible rolls",
    )

    @field_validator("supported_sides", mode="after")
    @classmethod
    def validate_sides(cls, value: list[int]) -> list[int]:
        """Reject die sizes that cannot be rolled.

        Args:
            value: Configured die sizes.

        Returns:
            The validated die sizes.

        Raises:
            ConfigurationError: If any die has fewer than two sides.
        """
        invalid = [sides for sides in value if sides < 2]
        if invalid:
            raise ConfigurationError(
                f"Dice must have at least 2 sides, got {invalid}",
                config_key="supported_sides",
            )
        return value


class LoggingSettings(BaseSettings):
    """Configuration for structured logging.

    Attributes:
        level: Logging level.
        json_format: Emit JSON lines instead of console output.
        log_file: Optional file to mirror log output into.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RULES_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_format: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )


class Settings(BaseSettings):
    """Top-level settings aggregating all configuration domains.

    Attributes:
        app_name: Library name.
        app_version: Library version string.
        debug: Enable debug mode.
        rules: Rule limits.
        dice: Dice engine settings.
        logging: Logging settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D 5E Rules Core",
        description="Library name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Library version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)
    dice: DiceSettings = Field(default_factory=DiceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load rules settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "DiceSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
