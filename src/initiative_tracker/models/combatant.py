"""Combatants and their damage, healing, status, and initiative rules.

A combatant is either a Player or a Monster. Both wrap the same
CombatantProperties record and share one set of mutation methods; they
differ only in the kind-specific field (player level vs. challenge
rating). The union is discriminated on ``kind`` so a roster round-trips
through ``model_dump``/``model_validate``.

HP STATE MACHINE:
- Alive:  hp > 0
- Downed: hp == 0, not dead (recoverable)
- Dead:   hp == 0, dead (reached once overkill meets a full max_hp
  below zero; any positive healing revives)

All mutations here are total. Out-of-range input is corrected, never
rejected, and nothing raises once a combatant has been built.
"""

from __future__ import annotations

import random
from enum import StrEnum
from typing import Annotated, Any, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from initiative_tracker.core.logging import get_logger
from initiative_tracker.engine.dice import d20_plus, get_default_roller
from initiative_tracker.models.stats import AbilityScores
from initiative_tracker.models.status import StatusCondition, StatusSet


logger = get_logger(__name__)


class DamageOutcome(StrEnum):
    """What a single hit did to a combatant."""

    SURVIVED = "survived"
    DOWNED = "downed"
    DIED = "died"


class CombatantState(StrEnum):
    """Position in the HP state machine."""

    ALIVE = "alive"
    DOWNED = "downed"
    DEAD = "dead"


class CombatantProperties(BaseModel):
    """State shared by every kind of combatant.

    ``hp`` is kept within ``0..max_hp``. Supplying a current hp above the
    maximum clamps it down, and leaving it out starts at full health.
    When ``is_dead`` is not given it follows ``hp == 0``.

    Attributes:
        name: Player name or statblock name.
        hp: Current hit points.
        max_hp: Maximum hit points, fixed after creation.
        ac: Armor class, fixed after creation.
        is_dead: Whether the combatant has died.
        statuses: Active conditions in the order applied.
        initiative: Stored initiative, ``None`` until rolled or set.
        stats: Ability scores, fixed after creation.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, description="Display name")
    hp: int = Field(ge=0, description="Current hit points")
    max_hp: int = Field(ge=1, description="Maximum hit points")
    ac: int = Field(ge=0, description="Armor class")
    is_dead: bool = Field(default=False, description="Whether the combatant is dead")
    statuses: StatusSet = Field(default_factory=StatusSet, description="Active conditions")
    initiative: int | None = Field(default=None, ge=0, description="Initiative, if rolled")
    stats: AbilityScores = Field(default_factory=AbilityScores, description="Ability scores")

    @model_validator(mode="before")
    @classmethod
    def normalize_hp(cls, data: Any) -> Any:
        """Clamp hp into ``0..max_hp`` and derive ``is_dead`` when absent."""
        if not isinstance(data, dict):
            return data
        max_hp = data.get("max_hp")
        if not isinstance(max_hp, int):
            return data

        data = dict(data)
        hp = data.get("hp")
        if hp is None:
            hp = max_hp
        elif isinstance(hp, int):
            hp = max(0, min(hp, max_hp))
        data["hp"] = hp
        if data.get("is_dead") is None and isinstance(hp, int):
            data["is_dead"] = hp == 0
        return data

    @classmethod
    def new(
        cls,
        name: str,
        current_hp: int | None,
        max_hp: int,
        ac: int,
        stats: AbilityScores | None = None,
    ) -> CombatantProperties:
        """Build a fresh record with no statuses and no initiative."""
        return cls(
            name=name,
            hp=current_hp,
            max_hp=max_hp,
            ac=ac,
            stats=stats if stats is not None else AbilityScores(),
        )


class Combatant(BaseModel):
    """Behavior shared by players and monsters.

    Read accessors never mutate. ``get_initiative`` is the one read that
    may roll, when nothing is stored yet.
    """

    model_config = ConfigDict(extra="ignore")

    uid: UUID = Field(default_factory=uuid4, description="Unique identifier")
    props: CombatantProperties

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.props.name

    @property
    def hp(self) -> int:
        return self.props.hp

    @property
    def max_hp(self) -> int:
        return self.props.max_hp

    @property
    def ac(self) -> int:
        return self.props.ac

    @property
    def stats(self) -> AbilityScores:
        return self.props.stats

    @property
    def statuses(self) -> tuple[StatusCondition, ...]:
        return self.props.statuses.as_tuple()

    @property
    def is_dead(self) -> bool:
        return self.props.is_dead

    @property
    def is_alive(self) -> bool:
        return not self.props.is_dead

    @property
    def state(self) -> CombatantState:
        """Current position in the HP state machine."""
        if self.props.is_dead:
            return CombatantState.DEAD
        if self.props.hp == 0:
            return CombatantState.DOWNED
        return CombatantState.ALIVE

    # -------------------------------------------------------------------------
    # Damage and healing
    # -------------------------------------------------------------------------

    def heal(self, amount: int) -> None:
        """Restore hp, saturating at ``max_hp``.

        Any positive amount received at 0 hp revives the combatant.
        """
        amount = max(amount, 0)
        if self.props.hp == 0 and amount > 0:
            self.props.is_dead = False
        self.props.hp = min(self.props.hp + amount, self.props.max_hp)
        logger.debug("Combatant healed", combatant=self.name, amount=amount, hp=self.props.hp)

    def damage(self, amount: int) -> DamageOutcome:
        """Take damage and report what it did.

        Damage beyond the remaining hp is overkill. Overkill of at least
        ``max_hp`` kills outright; less leaves the combatant downed.

        Returns:
            SURVIVED if hp is still above zero, DOWNED if it hit zero with
            overkill below ``max_hp``, DIED otherwise.
        """
        amount = max(amount, 0)
        delta = self.props.hp - amount
        self.props.hp = max(delta, 0)

        if delta > 0:
            outcome = DamageOutcome.SURVIVED
        elif delta <= -self.props.max_hp:
            self.props.is_dead = True
            outcome = DamageOutcome.DIED
        else:
            outcome = DamageOutcome.DOWNED

        logger.debug(
            "Combatant damaged",
            combatant=self.name,
            amount=amount,
            hp=self.props.hp,
            outcome=outcome.value,
        )
        if outcome is DamageOutcome.DIED:
            logger.info("Combatant died", combatant=self.name, overkill=-delta)
        return outcome

    # -------------------------------------------------------------------------
    # Statuses
    # -------------------------------------------------------------------------

    def get_statuses(self) -> tuple[StatusCondition, ...]:
        """Active conditions in the order they were applied."""
        return self.props.statuses.as_tuple()

    def add_status(self, status: StatusCondition) -> None:
        """Apply a condition. Applying one that is already present does nothing."""
        if self.props.statuses.add(status):
            logger.debug("Status added", combatant=self.name, status=status.label)

    def remove_status(self, status: StatusCondition) -> bool:
        """Remove a condition.

        Returns:
            True if it was removed, False if the combatant did not have it.
        """
        removed = self.props.statuses.remove(status)
        logger.debug("Status removed", combatant=self.name, status=status.label, found=removed)
        return removed

    def clear_status(self) -> None:
        self.props.statuses.clear()

    # -------------------------------------------------------------------------
    # Initiative
    # -------------------------------------------------------------------------

    def roll_initiative(self, rng: random.Random | None = None) -> int:
        """Roll ``1d20 + DEX modifier``, floored at 0, and store it.

        Args:
            rng: Generator to draw from. Defaults to the process-wide roller.

        Returns:
            The stored initiative. Any earlier value is overwritten.
        """
        if rng is None:
            rng = get_default_roller().rng
        result = d20_plus(self.stats.dex_mod).roll(rng)
        initiative = max(result.total, 0)
        self.props.initiative = initiative
        logger.info(
            "Initiative rolled",
            combatant=self.name,
            roll=initiative,
            dex_mod=self.stats.dex_mod,
        )
        return initiative

    def set_initiative(self, value: int) -> None:
        """Store an explicit initiative, replacing any roll.

        Values above 20 are legitimate; negatives are floored at 0.
        """
        self.props.initiative = max(value, 0)

    def get_initiative(self, rng: random.Random | None = None) -> int:
        """Return the stored initiative, rolling one first if none is stored."""
        if self.props.initiative is not None:
            return self.props.initiative
        return self.roll_initiative(rng)

    def clear_initiative(self) -> None:
        self.props.initiative = None

    def has_initiative(self) -> bool:
        return self.props.initiative is not None

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    @property
    def kind_display(self) -> str:
        """Kind label shown in summaries. Subclasses name their own kind."""
        return "Combatant"

    def to_summary(self) -> str:
        """One-line description for list views. Does not roll initiative."""
        initiative = "-" if self.props.initiative is None else str(self.props.initiative)
        summary = (
            f"{self.name} ({self.kind_display}) - HP: {self.hp}/{self.max_hp}, "
            f"AC: {self.ac}, Init: {initiative}, Status: {self.state.value}"
        )
        if len(self.props.statuses):
            summary += f" [{', '.join(s.label for s in self.props.statuses)}]"
        return summary


class Player(Combatant):
    """A player character."""

    kind: Literal["player"] = "player"
    level: int = Field(default=1, ge=1, description="Character level")

    @property
    def kind_display(self) -> str:
        return f"Level {self.level}"


class Monster(Combatant):
    """A DM-controlled creature."""

    kind: Literal["monster"] = "monster"
    challenge_rating: float = Field(default=0.0, ge=0.0, description="Challenge rating")

    @property
    def kind_display(self) -> str:
        return f"CR {format_challenge_rating(self.challenge_rating)}"


AnyCombatant = Annotated[Player | Monster, Field(discriminator="kind")]


def format_challenge_rating(cr: float) -> str:
    """Render a challenge rating the way statblocks print it (``1/4``, ``5``)."""
    fractions = {0.125: "1/8", 0.25: "1/4", 0.5: "1/2"}
    if cr in fractions:
        return fractions[cr]
    if cr.is_integer():
        return str(int(cr))
    return str(cr)


def new_player(
    name: str,
    max_hp: int,
    ac: int,
    current_hp: int | None = None,
    stats: AbilityScores | None = None,
    level: int | None = None,
) -> Player:
    """Create a player character.

    Args:
        name: Player name.
        max_hp: Maximum hit points.
        ac: Armor class.
        current_hp: Starting hp; full health when omitted, clamped to max_hp.
        stats: Ability scores; all 10s when omitted.
        level: Character level; 1 when omitted.
    """
    player = Player(
        props=CombatantProperties.new(name, current_hp, max_hp, ac, stats),
        level=level if level is not None else 1,
    )
    logger.debug("Player created", combatant=name, uid=str(player.uid))
    return player


def new_monster(
    name: str,
    max_hp: int,
    ac: int,
    current_hp: int | None = None,
    stats: AbilityScores | None = None,
    challenge_rating: float | None = None,
) -> Monster:
    """Create a monster.

    Args:
        name: Statblock name.
        max_hp: Maximum hit points.
        ac: Armor class.
        current_hp: Starting hp; full health when omitted, clamped to max_hp.
        stats: Ability scores; all 10s when omitted.
        challenge_rating: Challenge rating; 0 when omitted.
    """
    monster = Monster(
        props=CombatantProperties.new(name, current_hp, max_hp, ac, stats),
        challenge_rating=challenge_rating if challenge_rating is not None else 0.0,
    )
    logger.debug("Monster created", combatant=name, uid=str(monster.uid))
    return monster


__all__ = [
    "DamageOutcome",
    "CombatantState",
    "CombatantProperties",
    "Combatant",
    "Player",
    "Monster",
    "AnyCombatant",
    "format_challenge_rating",
    "new_player",
    "new_monster",
]
