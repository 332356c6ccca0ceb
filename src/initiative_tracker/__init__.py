"""Initiative Tracker - combat state for tabletop encounters.

Holds a roster of combatants, applies damage and healing, tracks status
conditions, and resolves initiative order for a single local session.

Example:
    >>> import random
    >>> from initiative_tracker import Encounter, new_monster, new_player, POISONED
    >>>
    >>> encounter = Encounter(name="Goblin Ambush")
    >>> hero = new_player("Thorin", max_hp=30, ac=16, level=3)
    >>> goblin = new_monster("Goblin", max_hp=7, ac=15, challenge_rating=0.25)
    >>> encounter.add(hero)
    >>> encounter.add(goblin)
    >>>
    >>> first = encounter.start(random.Random(1))
    >>> outcome = goblin.damage(10)
    >>> hero.add_status(POISONED)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Ability scores, statuses, combatants, and the encounter roster.
    engine: Dice expressions and rollers.
"""

from __future__ import annotations

# Core
from initiative_tracker.core.config import Settings, get_settings
from initiative_tracker.core.exceptions import TrackerError
from initiative_tracker.core.logging import configure_logging, get_logger

# Dice
from initiative_tracker.engine.dice import DiceRoller, parse

# Models
from initiative_tracker.models import (
    BLINDED,
    CHARMED,
    DEAFENED,
    FRIGHTENED,
    INCAPACITATED,
    INVISIBLE,
    PARALYZED,
    PETRIFIED,
    POISONED,
    PRONE,
    RESTRAINED,
    STUNNED,
    UNCONSCIOUS,
    AbilityScores,
    AnyCombatant,
    CombatantState,
    ConditionKind,
    DamageOutcome,
    Encounter,
    Monster,
    Player,
    StatusCondition,
    new_monster,
    new_player,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "TrackerError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Dice
    "DiceRoller",
    "parse",
    # Models
    "AbilityScores",
    "ConditionKind",
    "StatusCondition",
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
    "DamageOutcome",
    "CombatantState",
    "Player",
    "Monster",
    "AnyCombatant",
    "new_player",
    "new_monster",
    "Encounter",
]
