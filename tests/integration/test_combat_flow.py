"""Integration tests for combat flow.

Tests complete encounters from initiative to resolution.
"""

from __future__ import annotations

import random

from initiative_tracker.engine.dice import DiceRoller
from initiative_tracker.models import (
    POISONED,
    AbilityScores,
    CombatantState,
    DamageOutcome,
    Encounter,
    StatusCondition,
    new_monster,
    new_player,
)


class TestCombatFlow:
    """Test complete combat scenarios."""

    def test_goblin_ambush(self) -> None:
        """Run a short fight: initiative, attacks, a death, and the end of combat."""
        rng = random.Random(2024)
        roller = DiceRoller(rng=rng)

        fighter = new_player(
            "Fighter",
            max_hp=12,
            ac=16,
            stats=AbilityScores.new(16, 14, 14, 10, 12, 8),
            level=2,
        )
        goblin = new_monster(
            "Goblin",
            max_hp=7,
            ac=15,
            stats=AbilityScores(strength=8, dexterity=14),
            challenge_rating=0.25,
        )

        encounter = Encounter(name="Goblin Ambush")
        encounter.add(fighter)
        encounter.add(goblin)

        first = encounter.start(rng)
        assert first in (fighter, goblin)
        assert all(2 <= c.get_initiative() <= 22 for c in encounter)

        # Goblin hits the fighter with a scimitar
        hit = roller.roll("1d6+2").total
        assert fighter.damage(hit) is DamageOutcome.SURVIVED
        assert fighter.hp == 12 - hit

        # Fighter drops the goblin outright
        assert goblin.damage(7 + 7) is DamageOutcome.DIED
        assert goblin.state is CombatantState.DEAD

        # The goblin's turns are skipped from now on
        for _ in range(4):
            assert encounter.next_turn() is fighter
        assert encounter.round_number >= 3

        encounter.end()
        assert encounter.current is None
        assert not fighter.has_initiative()
        assert "Status: dead" in encounter.representations()[1]

    def test_downed_player_is_healed_back(self) -> None:
        """A downed player keeps their turn and comes back with healing."""
        cleric = new_player("Cleric", max_hp=10, ac=18)
        rogue = new_player("Rogue", max_hp=9, ac=14)
        ogre = new_monster("Ogre", max_hp=59, ac=11, challenge_rating=2)
        for combatant, initiative in ((cleric, 8), (rogue, 17), (ogre, 12)):
            combatant.set_initiative(initiative)

        encounter = Encounter()
        for combatant in (cleric, rogue, ogre):
            encounter.add(combatant)

        assert encounter.start() is rogue
        assert encounter.next_turn() is ogre
        assert rogue.damage(13) is DamageOutcome.DOWNED
        rogue.add_status(StatusCondition.exhaustion(1))

        assert encounter.next_turn() is cleric
        rogue.heal(4)
        assert rogue.state is CombatantState.ALIVE
        assert rogue.hp == 4

        assert encounter.next_turn() is rogue
        assert encounter.round_number == 2

    def test_grapple_outlives_grappler(self) -> None:
        """Removing a grappler leaves the condition on its victim."""
        crab = new_monster("Giant Crab", max_hp=13, ac=15, challenge_rating=0.125)
        bard = new_player("Bard", max_hp=8, ac=13)
        bard.add_status(StatusCondition.grappled(crab.uid))
        bard.add_status(POISONED)

        encounter = Encounter()
        encounter.add(crab)
        encounter.add(bard)
        encounter.remove(crab.uid)

        assert len(encounter) == 1
        assert bard.get_statuses()[0].grappler == crab.uid
        assert bard.remove_status(StatusCondition.grappled(crab.uid)) is True
        assert bard.get_statuses() == (POISONED,)

    def test_roster_survives_serialization(self) -> None:
        """An encounter in progress restores with turn state intact."""
        encounter = Encounter(name="Crypt")
        encounter.add(new_player("Paladin", max_hp=20, ac=18))
        encounter.add(new_monster("Skeleton", max_hp=13, ac=13, challenge_rating=0.25))
        encounter.combatants[0].set_initiative(15)
        encounter.combatants[1].set_initiative(11)
        encounter.start()
        encounter.next_turn()

        restored = Encounter.model_validate_json(encounter.model_dump_json())

        assert restored.round_number == 1
        assert restored.current is not None
        assert restored.current.name == "Skeleton"
        assert restored.next_turn().name == "Paladin"
        assert restored.round_number == 2
