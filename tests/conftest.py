"""Pytest configuration and shared fixtures.

This module provides common fixtures for the initiative tracker test suite.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pytest

from initiative_tracker.models import AbilityScores, Monster, Player, new_monster, new_player


if TYPE_CHECKING:
    from collections.abc import Generator

    from initiative_tracker.engine.dice import DiceRoller


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings and the default roller around each test."""
    from initiative_tracker.core.config import clear_settings_cache
    from initiative_tracker.engine.dice import reset_default_roller

    clear_settings_cache()
    reset_default_roller()
    yield
    clear_settings_cache()
    reset_default_roller()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "INITIATIVE_TRACKER_DEBUG": "true",
        "INITIATIVE_TRACKER_LOG_LEVEL": "DEBUG",
        "INITIATIVE_TRACKER_JSON_LOGS": "true",
        "INITIATIVE_TRACKER_GAME_DICE_SEED": "1234",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """A seeded generator for reproducible rolls."""
    return random.Random(1234)


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests."""
    from initiative_tracker.engine.dice import DiceRoller

    return DiceRoller(seed=42)


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_stats() -> AbilityScores:
    """Fighter-ish ability scores (DEX 14, modifier +2)."""
    return AbilityScores.new(16, 14, 15, 10, 12, 8)


@pytest.fixture
def sample_player(sample_stats: AbilityScores) -> Player:
    """A level 5 player at full health."""
    return new_player("Thorin", max_hp=44, ac=18, stats=sample_stats, level=5)


@pytest.fixture
def sample_monster() -> Monster:
    """A goblin at full health."""
    return new_monster(
        "Goblin",
        max_hp=7,
        ac=15,
        stats=AbilityScores(strength=8, dexterity=14),
        challenge_rating=0.25,
    )
