"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from initiative_tracker.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from initiative_tracker.core.exceptions import ConfigurationError


class TestGameSettings:
    """Tests for GameSettings configuration."""

    def test_default_seed_is_unset(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that no dice seed is configured by default."""
        monkeypatch.chdir(tmp_path)

        assert GameSettings().dice_seed is None

    def test_seed_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test dice seed read from the environment."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("INITIATIVE_TRACKER_GAME_DICE_SEED", "99")

        assert GameSettings().dice_seed == 99


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_environment_overrides(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test values picked up from environment variables."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True
        assert settings.game.dice_seed == 1234

    def test_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values read from a .env file in the working directory."""
        (tmp_path / ".env").write_text("INITIATIVE_TRACKER_LOG_LEVEL=WARNING\n")
        monkeypatch.chdir(tmp_path)

        assert Settings().log_level == "WARNING"


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)

        assert get_settings() is get_settings()

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_value_raises_configuration_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that a bad environment value surfaces as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("INITIATIVE_TRACKER_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "original_error" in exc_info.value.details
