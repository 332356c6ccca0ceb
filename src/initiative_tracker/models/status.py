"""Status conditions and the ordered, duplicate-free set that holds them.

Most conditions are plain names. Exhaustion carries a level and Grappled
carries the identifier of the grappling combatant. The identifier is only
a key: nothing here looks it up or checks that the grappler still exists.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator


MAX_EXHAUSTION_LEVEL = 6


class ConditionKind(StrEnum):
    """D&D 5E conditions."""

    BLINDED = "blinded"
    CHARMED = "charmed"
    DEAFENED = "deafened"
    EXHAUSTION = "exhaustion"
    FRIGHTENED = "frightened"
    GRAPPLED = "grappled"
    INCAPACITATED = "incapacitated"
    INVISIBLE = "invisible"
    PARALYZED = "paralyzed"
    PETRIFIED = "petrified"
    POISONED = "poisoned"
    PRONE = "prone"
    RESTRAINED = "restrained"
    STUNNED = "stunned"
    UNCONSCIOUS = "unconscious"


class StatusCondition(BaseModel):
    """A single condition afflicting a combatant.

    Two conditions are equal when their kind and payload are equal, so
    ``Grappled`` by two different combatants counts as two conditions.

    Attributes:
        kind: Which condition this is.
        level: Exhaustion level, only set for exhaustion.
        grappler: Identifier of the grappling combatant, only set for grappled.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ConditionKind = Field(description="Condition name")
    level: int | None = Field(
        default=None,
        ge=1,
        le=MAX_EXHAUSTION_LEVEL,
        description="Exhaustion level",
    )
    grappler: UUID | None = Field(default=None, description="Grappling combatant")

    @model_validator(mode="after")
    def check_payload(self) -> Self:
        """Ensure the payload matches the condition kind."""
        if (self.kind == ConditionKind.EXHAUSTION) != (self.level is not None):
            raise ValueError("an exhaustion level is required for, and only for, exhaustion")
        if (self.kind == ConditionKind.GRAPPLED) != (self.grappler is not None):
            raise ValueError("a grappler is required for, and only for, grappled")
        return self

    @classmethod
    def exhaustion(cls, level: int) -> StatusCondition:
        """Build an exhaustion condition at the given level."""
        return cls(kind=ConditionKind.EXHAUSTION, level=level)

    @classmethod
    def grappled(cls, by: UUID) -> StatusCondition:
        """Build a grappled condition held by the given combatant."""
        return cls(kind=ConditionKind.GRAPPLED, grappler=by)

    @property
    def label(self) -> str:
        """Display text, e.g. ``Poisoned`` or ``Exhaustion (2)``."""
        name = self.kind.value.capitalize()
        if self.level is not None:
            return f"{name} ({self.level})"
        return name

    def __str__(self) -> str:
        return self.label


BLINDED = StatusCondition(kind=ConditionKind.BLINDED)
CHARMED = StatusCondition(kind=ConditionKind.CHARMED)
DEAFENED = StatusCondition(kind=ConditionKind.DEAFENED)
FRIGHTENED = StatusCondition(kind=ConditionKind.FRIGHTENED)
INCAPACITATED = StatusCondition(kind=ConditionKind.INCAPACITATED)
INVISIBLE = StatusCondition(kind=ConditionKind.INVISIBLE)
PARALYZED = StatusCondition(kind=ConditionKind.PARALYZED)
PETRIFIED = StatusCondition(kind=ConditionKind.PETRIFIED)
POISONED = StatusCondition(kind=ConditionKind.POISONED)
PRONE = StatusCondition(kind=ConditionKind.PRONE)
RESTRAINED = StatusCondition(kind=ConditionKind.RESTRAINED)
STUNNED = StatusCondition(kind=ConditionKind.STUNNED)
UNCONSCIOUS = StatusCondition(kind=ConditionKind.UNCONSCIOUS)


class StatusSet(RootModel[list[StatusCondition]]):
    """Active conditions in the order they were applied, without duplicates."""

    root: list[StatusCondition] = Field(default_factory=list)

    @model_validator(mode="after")
    def drop_duplicates(self) -> Self:
        unique: list[StatusCondition] = []
        for condition in self.root:
            if condition not in unique:
                unique.append(condition)
        self.root = unique
        return self

    def add(self, condition: StatusCondition) -> bool:
        """Append a condition unless an equal one is already present.

        Returns:
            True if the condition was added, False if it was already there.
        """
        if condition in self.root:
            return False
        self.root.append(condition)
        return True

    def remove(self, condition: StatusCondition) -> bool:
        """Remove the matching condition.

        Returns:
            True if it was removed, False if it was not present.
        """
        try:
            self.root.remove(condition)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self.root.clear()

    def as_tuple(self) -> tuple[StatusCondition, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self.root)

    def __contains__(self, condition: object) -> bool:
        return condition in self.root

    def __iter__(self) -> Iterator[StatusCondition]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


__all__ = [
    "MAX_EXHAUSTION_LEVEL",
    "ConditionKind",
    "StatusCondition",
    "StatusSet",
    "BLINDED",
    "CHARMED",
    "DEAFENED",
    "FRIGHTENED",
    "INCAPACITATED",
    "INVISIBLE",
    "PARALYZED",
    "PETRIFIED",
    "POISONED",
    "PRONE",
    "RESTRAINED",
    "STUNNED",
    "UNCONSCIOUS",
]
