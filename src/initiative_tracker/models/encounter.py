"""The encounter roster and its turn order.

The surrounding application owns one Encounter per session. It keeps
combatants in the order they were added (the display order) and derives
turn order from initiative on demand. The acting combatant is tracked by
identifier, so changes to the roster never move the turn on their own.
"""

from __future__ import annotations

import random
from collections.abc import Iterator
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from initiative_tracker.core.exceptions import CombatError, TurnManagementError
from initiative_tracker.core.logging import get_logger
from initiative_tracker.models.combatant import AnyCombatant, Monster, Player


logger = get_logger(__name__)


class Encounter(BaseModel):
    """An ordered roster of combatants with round/turn tracking.

    Attributes:
        name: Encounter name.
        combatants: Roster in insertion order.
        round_number: Current round, 0 before the encounter starts.
        current_uid: Identifier of the acting combatant during combat.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Encounter", min_length=1, description="Encounter name")
    combatants: list[AnyCombatant] = Field(default_factory=list, description="Roster")
    round_number: int = Field(default=0, ge=0, description="Current round")
    current_uid: UUID | None = Field(default=None, description="Acting combatant")

    # -------------------------------------------------------------------------
    # Roster
    # -------------------------------------------------------------------------

    def add(self, combatant: Player | Monster, rng: random.Random | None = None) -> None:
        """Append a combatant to the roster.

        Joining a running encounter rolls initiative straight away if the
        newcomer has none. The acting combatant keeps the turn either way.
        """
        if self.is_active and not combatant.has_initiative():
            combatant.roll_initiative(rng)
        self.combatants.append(combatant)
        logger.info("Combatant added", encounter=self.name, combatant=combatant.name)

    def get(self, uid: UUID) -> Player | Monster:
        """Look up a combatant by identifier.

        Raises:
            CombatError: If no combatant has this identifier.
        """
        for combatant in self.combatants:
            if combatant.uid == uid:
                return combatant
        raise CombatError(
            "Combatant not found in encounter",
            combatant_id=str(uid),
            round_number=self.round_number,
        )

    def remove(self, uid: UUID) -> Player | Monster:
        """Remove a combatant and return it.

        Removing the acting combatant passes the turn to the next in line,
        starting a new round if it was last. Other combatants' conditions
        that reference it are left alone.

        Raises:
            CombatError: If no combatant has this identifier.
        """
        combatant = self.get(uid)
        if self.is_active and uid == self.current_uid:
            order = self.turn_order()
            removed_at = next(i for i, c in enumerate(order) if c.uid == uid)
            rest = order[:removed_at] + order[removed_at + 1 :]
            if rest:
                self.current_uid = rest[self._advance(rest, removed_at - 1)].uid
            else:
                self.current_uid = None
        self.combatants.remove(combatant)
        logger.info("Combatant removed", encounter=self.name, combatant=combatant.name)
        return combatant

    @property
    def players(self) -> list[Player]:
        return [c for c in self.combatants if isinstance(c, Player)]

    @property
    def monsters(self) -> list[Monster]:
        return [c for c in self.combatants if isinstance(c, Monster)]

    def __iter__(self) -> Iterator[Player | Monster]:  # type: ignore[override]
        return iter(self.combatants)

    def __len__(self) -> int:
        return len(self.combatants)

    # -------------------------------------------------------------------------
    # Initiative
    # -------------------------------------------------------------------------

    def roll_initiative(self, rng: random.Random | None = None, *, reroll: bool = False) -> None:
        """Roll initiative for every combatant without one, or for all if ``reroll``."""
        for combatant in self.combatants:
            if reroll or not combatant.has_initiative():
                combatant.roll_initiative(rng)

    def turn_order(self, rng: random.Random | None = None) -> list[Player | Monster]:
        """Combatants sorted by initiative, highest first.

        Ties go to the higher DEX modifier, then to roster order. Anyone
        without initiative rolls first.
        """
        initiatives = {c.uid: c.get_initiative(rng) for c in self.combatants}
        return sorted(
            self.combatants,
            key=lambda c: (initiatives[c.uid], c.stats.dex_mod),
            reverse=True,
        )

    # -------------------------------------------------------------------------
    # Turns
    # -------------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.round_number > 0

    @property
    def current(self) -> Player | Monster | None:
        """The combatant whose turn it is, or None outside combat."""
        if not self.is_active or self.current_uid is None:
            return None
        for combatant in self.combatants:
            if combatant.uid == self.current_uid:
                return combatant
        return None

    def start(self, rng: random.Random | None = None) -> Player | Monster:
        """Roll any missing initiative and begin round 1.

        Raises:
            TurnManagementError: If the roster is empty.
        """
        if not self.combatants:
            raise TurnManagementError("Cannot start combat: no combatants in encounter")

        self.roll_initiative(rng)
        order = self.turn_order()
        self.round_number = 1
        first = next((c for c in order if c.is_alive), order[0])
        self.current_uid = first.uid
        logger.info("Combat started", encounter=self.name, first=first.name)
        return first

    def next_turn(self) -> Player | Monster:
        """Advance to the next living combatant, wrapping into a new round.

        If everyone is dead the turn still advances by one.

        Raises:
            TurnManagementError: If combat has not started or the roster is empty.
        """
        if not self.is_active:
            raise TurnManagementError("Combat hasn't started yet")
        if not self.combatants:
            raise TurnManagementError(
                "No combatants left in encounter",
                details={"round_number": self.round_number},
            )

        order = self.turn_order()
        position = next((i for i, c in enumerate(order) if c.uid == self.current_uid), -1)
        current = order[self._advance(order, position)]
        self.current_uid = current.uid
        logger.debug("Next turn", combatant=current.name, round=self.round_number)
        return current

    def _advance(self, order: list[Player | Monster], position: int) -> int:
        """Step from ``position`` to the next living combatant in ``order``."""
        anyone_alive = any(c.is_alive for c in order)
        for _ in range(len(order)):
            position += 1
            if position >= len(order):
                position = 0
                self.round_number += 1
                logger.info("New round started", encounter=self.name, round=self.round_number)
            if order[position].is_alive or not anyone_alive:
                break
        return position

    def end(self) -> None:
        """Finish combat: clear every initiative and reset the round counter."""
        for combatant in self.combatants:
            combatant.clear_initiative()
        self.round_number = 0
        self.current_uid = None
        logger.info("Combat ended", encounter=self.name)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def representations(self) -> list[str]:
        """Summary lines in roster order, for list views."""
        return [c.to_summary() for c in self.combatants]


__all__ = ["Encounter"]
