"""Combatant state models.

Submodules:
    stats: Ability scores and modifiers.
    status: Status conditions and the ordered set holding them.
    combatant: Player/Monster union with damage, healing, status, and
        initiative rules.
    encounter: The roster and its turn order.
"""

from __future__ import annotations

from initiative_tracker.models.combatant import (
    AnyCombatant,
    Combatant,
    CombatantProperties,
    CombatantState,
    DamageOutcome,
    Monster,
    Player,
    format_challenge_rating,
    new_monster,
    new_player,
)
from initiative_tracker.models.encounter import Encounter
from initiative_tracker.models.stats import (
    DEFAULT_ABILITY_SCORE,
    MAX_ABILITY_SCORE,
    MIN_ABILITY_SCORE,
    Ability,
    AbilityScores,
    calc_modifier,
)
from initiative_tracker.models.status import (
    BLINDED,
    CHARMED,
    DEAFENED,
    FRIGHTENED,
    INCAPACITATED,
    INVISIBLE,
    MAX_EXHAUSTION_LEVEL,
    PARALYZED,
    PETRIFIED,
    POISONED,
    PRONE,
    RESTRAINED,
    STUNNED,
    UNCONSCIOUS,
    ConditionKind,
    StatusCondition,
    StatusSet,
)


__all__ = [
    # Stats
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "DEFAULT_ABILITY_SCORE",
    "Ability",
    "AbilityScores",
    "calc_modifier",
    # Statuses
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
    # Combatants
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
    # Roster
    "Encounter",
]
