"""Pydantic V2 schemas for player characters.

Character records are immutable. Every engine operation that changes a
character validates and returns a new record through ``Character.updated``,
so the invariants below hold for every record the engine hands back:

- ability scores are within the configured bounds (3..20 by default)
- ``0 <= hit_points <= max_hit_points``
- no more than ``max_attuned_items`` inventory items are attuned
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Annotated, Any
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationInfo,
    field_validator,
    model_validator,
)

from dnd_rules.core.config import get_settings
from dnd_rules.core.exceptions import InvalidAbilityScore
from dnd_rules.models.enums import Ability, CharacterClass, CharacterRace
from dnd_rules.models.items import InventoryItem


class AbilityScores(BaseModel):
    """The six base ability scores.

    Scores outside the configured range raise InvalidAbilityScore rather
    than a pydantic ValidationError so callers see one error type for
    out-of-range scores wherever they come from.

    Example:
        >>> scores = AbilityScores(strength=15, dexterity=14)
        >>> scores.get(Ability.STR)
        15
        >>> scores.modifiers()[Ability.DEX]
        2
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: int = Field(default=10, description="Physical power")
    dexterity: int = Field(default=10, description="Agility and reflexes")
    constitution: int = Field(default=10, description="Health and stamina")
    intelligence: int = Field(default=10, description="Reasoning and memory")
    wisdom: int = Field(default=10, description="Awareness and insight")
    charisma: int = Field(default=10, description="Force of personality")

    @field_validator(
        "strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma",
        mode="after",
    )
    @classmethod
    def validate_score(cls, value: int, info: ValidationInfo) -> int:
        """Reject scores outside the configured bounds.

        Raises:
            InvalidAbilityScore: If the score is out of range.
        """
        rules = get_settings().rules
        if not rules.ability_score_min <= value <= rules.ability_score_max:
            raise InvalidAbilityScore(
                f"{info.field_name.capitalize()} must be between "
                f"{rules.ability_score_min} and {rules.ability_score_max}",
                ability=info.field_name,
                score=value,
            )
        return value

    def get(self, ability: Ability) -> int:
        """Get the score for an ability."""
        return getattr(self, ability.value)

    def as_dict(self) -> dict[Ability, int]:
        return {ability: self.get(ability) for ability in Ability}

    def with_changes(self, deltas: Mapping[Ability, int]) -> AbilityScores:
        """Return new scores with the given deltas added.

        Args:
            deltas: Per-ability amounts to add.

        Returns:
            A new AbilityScores instance.

        Raises:
            InvalidAbilityScore: If a resulting score is out of range.
        """
        values = {ability.value: score for ability, score in self.as_dict().items()}
        for ability, delta in deltas.items():
            values[ability.value] += delta
        return AbilityScores(**values)

    def modifiers(self) -> dict[Ability, int]:
        """Ability modifiers, ``(score - 10) // 2`` for each ability."""
        return {ability: (score - 10) // 2 for ability, score in self.as_dict().items()}


class AbilityScoreImprovement(BaseModel):
    """Requested deltas for one Ability Score Improvement.

    Abilities left unset are not changed. Deltas must be plain integers,
    so booleans are rejected. Whether the deltas form a legal improvement
    is decided by the leveling engine, not here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: StrictInt | None = None
    dexterity: StrictInt | None = None
    constitution: StrictInt | None = None
    intelligence: StrictInt | None = None
    wisdom: StrictInt | None = None
    charisma: StrictInt | None = None

    def changes(self) -> dict[Ability, int]:
        """Non-zero deltas keyed by ability."""
        result: dict[Ability, int] = {}
        for ability in Ability:
            delta = getattr(self, ability.value)
            if delta:
                result[ability] = delta
        return result

    @property
    def total(self) -> int:
        return sum(self.changes().values())


class ASIHistoryEntry(BaseModel):
    """A record of one applied Ability Score Improvement.

    Attributes:
        level: Character level the improvement was taken at.
        changes: Deltas that were applied.
        applied_at: When the improvement was applied (timezone-aware).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Annotated[int, Field(ge=1, le=20)]
    changes: dict[Ability, int]
    applied_at: datetime

    @field_validator("applied_at")
    @classmethod
    def validate_timezone(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("applied_at must be timezone-aware")
        return value


class Character(BaseModel):
    """A player character.

    Attributes:
        id: Unique character identifier.
        name: Character name.
        race: Character race.
        character_class: Character class (single-class only).
        level: Character level (1-20).
        ability_scores: Base ability scores, without equipment bonuses.
        hit_points: Current hit points.
        max_hit_points: Maximum hit points.
        armor_class: Armor class without equipment bonuses.
        experience: Total experience points.
        pending_asi: Whether an Ability Score Improvement is waiting.
        asi_history: Improvements applied so far, oldest first.
        inventory: Items carried.
        background: Optional background name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    name: str = Field(min_length=1, max_length=100, description="Character name")
    race: CharacterRace
    character_class: CharacterClass
    level: Annotated[int, Field(ge=1, le=20, description="Character level")] = 1
    ability_scores: AbilityScores = Field(default_factory=AbilityScores)
    hit_points: Annotated[int, Field(ge=0, description="Current hit points")]
    max_hit_points: Annotated[int, Field(ge=1, description="Maximum hit points")]
    armor_class: Annotated[int, Field(ge=0, description="Armor class")] = 10
    experience: Annotated[int, Field(ge=0, description="Total experience")] = 0
    pending_asi: bool = False
    asi_history: tuple[ASIHistoryEntry, ...] = ()
    inventory: tuple[InventoryItem, ...] = ()
    background: str | None = None

    @model_validator(mode="after")
    def validate_invariants(self) -> "Character":
        """Check hit point bounds and the attunement limit."""
        if self.hit_points > self.max_hit_points:
            raise ValueError(
                f"hit_points ({self.hit_points}) cannot exceed "
                f"max_hit_points ({self.max_hit_points})"
            )
        limit = get_settings().rules.max_attuned_items
        attuned = sum(1 for item in self.inventory if item.is_attuned)
        if attuned > limit:
            raise ValueError(f"{attuned} attuned items exceeds the limit of {limit}")
        return self

    def updated(self, **changes: Any) -> Character:
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate(self.model_dump() | changes)


__all__ = [
    "AbilityScores",
    "AbilityScoreImprovement",
    "ASIHistoryEntry",
    "Character",
]
