"""Dice engine.

Submodules:
    dice: Dice expressions, notation parsing (d20 library), and rollers.
"""

from __future__ import annotations

from initiative_tracker.engine.dice import (
    Constant,
    Dice,
    DiceExpr,
    DiceRoller,
    RollResult,
    Sum,
    d20_plus,
    get_default_roller,
    parse,
    reset_default_roller,
)


__all__ = [
    "RollResult",
    "Dice",
    "Constant",
    "Sum",
    "DiceExpr",
    "DiceRoller",
    "d20_plus",
    "parse",
    "get_default_roller",
    "reset_default_roller",
]
