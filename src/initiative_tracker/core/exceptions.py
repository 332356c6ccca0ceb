"""Custom exception hierarchy for the initiative tracker.

Combatant mutations are total and never raise. The exceptions defined here
cover the edges of the system: configuration loading, dice notation, and
roster/turn bookkeeping. All of them inherit from TrackerError so the
surrounding application can handle them in one place.

Example:
    >>> from initiative_tracker.core.exceptions import DiceRollError
    >>> raise DiceRollError("Unsupported operator", expression="2d6*2")
"""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base exception for all initiative tracker errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(TrackerError):
    """Base exception for encounter and dice errors."""


class CombatError(GameEngineError):
    """Raised when a roster operation refers to a combatant it cannot use.

    This covers lookups and removals of unknown combatant identifiers.
    """

    def __init__(
        self,
        message: str,
        *,
        combatant_id: str | None = None,
        round_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize combat error with combat context.

        Args:
            message: Human-readable error description.
            combatant_id: Identifier of the combatant involved.
            round_number: Current combat round when error occurred.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if combatant_id:
            combined_details["combatant_id"] = combatant_id
        if round_number is not None:
            combined_details["round_number"] = round_number
        super().__init__(message, details=combined_details)


class DiceRollError(GameEngineError):
    """Raised when dice notation cannot be turned into a rollable expression."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression is not None:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


class TurnManagementError(GameEngineError):
    """Raised when turn order is advanced in an invalid encounter state."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(TrackerError):
    """Raised when application configuration is invalid or cannot be loaded."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "TrackerError",
    "GameEngineError",
    "CombatError",
    "DiceRollError",
    "TurnManagementError",
    "ConfigurationError",
]
