"""Ability scores and the score-to-modifier table.

Scores are bounded to 0..30. Out-of-range input is clamped rather than
rejected, so a typo at the table never blocks adding a combatant.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


MIN_ABILITY_SCORE = 0
"""Lowest storable ability score."""

MAX_ABILITY_SCORE = 30
"""Highest storable ability score (RAW D&D 5E cap for monsters)."""

DEFAULT_ABILITY_SCORE = 10
"""Score used for any ability not supplied (modifier 0)."""


class Ability(StrEnum):
    """The six D&D ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'DEX').
        """
        return self.name


def calc_modifier(score: int) -> int:
    """Calculate the ability modifier for a score.

    Follows the 5E table: 1 gives -5, 10-11 give 0, 30 gives +10, one step
    for every two points. A score of 0 shares the -5 floor with 1.

    Args:
        score: Ability score in 0..30.

    Returns:
        The modifier for the score.
    """
    return (score - 10) // 2


class AbilityScores(BaseModel):
    """The six ability scores of a combatant.

    Immutable once constructed. Every score is clamped into 0..30 on the
    way in, and the six modifiers are derived on read.

    Example:
        >>> stats = AbilityScores.new(16, 14, 12, 10, 8, 30)
        >>> stats.dex_mod
        2
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    strength: int = Field(default=DEFAULT_ABILITY_SCORE, description="Physical power")
    dexterity: int = Field(default=DEFAULT_ABILITY_SCORE, description="Agility and reflexes")
    constitution: int = Field(default=DEFAULT_ABILITY_SCORE, description="Health and stamina")
    intelligence: int = Field(default=DEFAULT_ABILITY_SCORE, description="Reasoning and memory")
    wisdom: int = Field(default=DEFAULT_ABILITY_SCORE, description="Perception and insight")
    charisma: int = Field(default=DEFAULT_ABILITY_SCORE, description="Force of personality")

    @field_validator(
        "strength",
        "dexterity",
        "constitution",
        "intelligence",
        "wisdom",
        "charisma",
        mode="before",
    )
    @classmethod
    def clamp_score(cls, v: Any) -> Any:
        """Clamp a score into the storable range."""
        if isinstance(v, bool) or not isinstance(v, int):
            return v
        return max(MIN_ABILITY_SCORE, min(v, MAX_ABILITY_SCORE))

    @classmethod
    def new(
        cls,
        strength: int,
        dexterity: int,
        constitution: int,
        intelligence: int,
        wisdom: int,
        charisma: int,
    ) -> AbilityScores:
        """Build scores positionally in the usual STR/DEX/CON/INT/WIS/CHA order."""
        return cls(
            strength=strength,
            dexterity=dexterity,
            constitution=constitution,
            intelligence=intelligence,
            wisdom=wisdom,
            charisma=charisma,
        )

    def score(self, ability: Ability) -> int:
        """Get the raw score for an ability."""
        return getattr(self, ability.value)

    def modifier(self, ability: Ability) -> int:
        """Get the modifier for an ability."""
        return calc_modifier(self.score(ability))

    @computed_field(description="Strength modifier")
    @property
    def str_mod(self) -> int:
        return calc_modifier(self.strength)

    @computed_field(description="Dexterity modifier")
    @property
    def dex_mod(self) -> int:
        return calc_modifier(self.dexterity)

    @computed_field(description="Constitution modifier")
    @property
    def con_mod(self) -> int:
        return calc_modifier(self.constitution)

    @computed_field(description="Intelligence modifier")
    @property
    def int_mod(self) -> int:
        return calc_modifier(self.intelligence)

    @computed_field(description="Wisdom modifier")
    @property
    def wis_mod(self) -> int:
        return calc_modifier(self.wisdom)

    @computed_field(description="Charisma modifier")
    @property
    def cha_mod(self) -> int:
        return calc_modifier(self.charisma)


__all__ = [
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "DEFAULT_ABILITY_SCORE",
    "Ability",
    "AbilityScores",
    "calc_modifier",
]
