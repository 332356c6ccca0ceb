"""Dice expressions for D&D 5E rolls.

A deliberately small expression model: roll N dice of S sides, add a
constant, or sum two sub-expressions. Every roll draws from a
``random.Random`` handed in by the caller, so a seeded generator gives
repeatable results in tests and replays.

Dice notation is parsed with the d20 library and lowered onto these
nodes; notation outside the model (keep/drop operators, multiplication,
sets) is rejected.

Example:
    >>> import random
    >>> expr = parse("1d20+3")
    >>> result = expr.roll(random.Random(7))
    >>> 4 <= result.total <= 23
    True
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, TypeAlias

import d20
from d20 import diceast

from initiative_tracker.core.config import get_settings
from initiative_tracker.core.exceptions import DiceRollError
from initiative_tracker.core.logging import get_logger


logger = get_logger(__name__)

_parser = d20.Roller()


@dataclass(frozen=True)
class RollResult:
    """The outcome of rolling an expression.

    Attributes:
        total: Sum of kept dice and constants.
        dice: Individual die faces, in roll order.
    """

    total: int
    dice: tuple[int, ...] = ()


@dataclass(frozen=True)
class Dice:
    """``count`` dice with ``sides`` faces each."""

    count: int
    sides: int

    def __post_init__(self) -> None:
        if self.count < 1 or self.sides < 1:
            raise DiceRollError(
                "Dice need at least one die and one side",
                expression=f"{self.count}d{self.sides}",
            )

    @property
    def notation(self) -> str:
        return f"{self.count}d{self.sides}"

    def roll(self, rng: random.Random) -> RollResult:
        faces = tuple(rng.randint(1, self.sides) for _ in range(self.count))
        return RollResult(total=sum(faces), dice=faces)


@dataclass(frozen=True)
class Constant:
    """A flat number, such as an ability modifier."""

    value: int

    @property
    def notation(self) -> str:
        return str(self.value)

    def roll(self, rng: random.Random) -> RollResult:
        return RollResult(total=self.value)


@dataclass(frozen=True)
class Sum:
    """The sum of two expressions."""

    left: DiceExpr
    right: DiceExpr

    @property
    def notation(self) -> str:
        right = self.right.notation
        if right.startswith("-"):
            return f"{self.left.notation}{right}"
        return f"{self.left.notation}+{right}"

    def roll(self, rng: random.Random) -> RollResult:
        left = self.left.roll(rng)
        right = self.right.roll(rng)
        return RollResult(total=left.total + right.total, dice=left.dice + right.dice)


DiceExpr: TypeAlias = Dice | Constant | Sum


def d20_plus(modifier: int) -> DiceExpr:
    """Build ``1d20 + modifier``, the shape of checks and initiative."""
    return Sum(Dice(1, 20), Constant(modifier))


def parse(expression: str) -> DiceExpr:
    """Parse dice notation into an expression.

    Args:
        expression: Notation such as ``'1d20+5'`` or ``'2d6 - 1'``.

    Returns:
        The equivalent expression tree.

    Raises:
        DiceRollError: If the notation is empty, malformed, or uses
            operators this model does not support.
    """
    if not expression or not expression.strip():
        raise DiceRollError("Empty dice expression", expression=expression)

    try:
        tree = _parser.parse(expression)
    except d20.RollError as exc:
        raise DiceRollError(f"Invalid dice expression: {exc}", expression=expression) from exc

    return _lower(tree.roll, expression)


def _lower(node: Any, expression: str) -> DiceExpr:
    """Convert a d20 AST node into this module's expression nodes."""
    if isinstance(node, diceast.Parenthetical):
        return _lower(node.value, expression)

    if isinstance(node, diceast.Literal):
        if isinstance(node.value, float) and not node.value.is_integer():
            raise DiceRollError("Fractional constants are not supported", expression=expression)
        return Constant(int(node.value))

    if isinstance(node, diceast.Dice):
        sides = 100 if node.size == "%" else int(node.size)
        return Dice(int(node.num), sides)

    if isinstance(node, diceast.UnOp):
        inner = _lower(node.value, expression)
        if node.op == "+":
            return inner
        if node.op == "-" and isinstance(inner, Constant):
            return Constant(-inner.value)

    if isinstance(node, diceast.BinOp):
        left = _lower(node.left, expression)
        right = _lower(node.right, expression)
        if node.op == "+":
            return Sum(left, right)
        if node.op == "-" and isinstance(right, Constant):
            return Sum(left, Constant(-right.value))

    raise DiceRollError(
        f"Unsupported dice notation: {type(node).__name__}",
        expression=expression,
    )


class DiceRoller:
    """Rolls expressions against one owned random generator.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> roller.roll("2d6+3").total  # doctest: +SKIP
        10
    """

    def __init__(self, *, seed: int | None = None, rng: random.Random | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Seed for a fresh generator. Ignored when ``rng`` is given.
            rng: An existing generator to draw from.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        logger.debug("DiceRoller initialized", seed=seed, injected=rng is not None)

    def roll(self, expression: str | DiceExpr) -> RollResult:
        """Roll notation or a prebuilt expression.

        Raises:
            DiceRollError: If string notation cannot be parsed.
        """
        expr = parse(expression) if isinstance(expression, str) else expression
        result = expr.roll(self.rng)
        logger.debug("Dice rolled", expression=expr.notation, total=result.total)
        return result

    def roll_initiative(self, dexterity_modifier: int) -> RollResult:
        """Roll ``1d20 + dexterity_modifier``."""
        return self.roll(d20_plus(dexterity_modifier))


@lru_cache(maxsize=1)
def get_default_roller() -> DiceRoller:
    """Get the process-wide roller, seeded from ``GameSettings.dice_seed``."""
    return DiceRoller(seed=get_settings().game.dice_seed)


def reset_default_roller() -> None:
    """Discard the process-wide roller so the next access re-reads settings."""
    get_default_roller.cache_clear()


__all__ = [
    "RollResult",
    "Dice",
    "Constant",
    "Sum",
    "DiceExpr",
    "d20_plus",
    "parse",
    "DiceRoller",
    "get_default_roller",
    "reset_default_roller",
]
