"""
Tests for Arbiter configuration.

Tests environment-driven settings and generation config.
"""

import logging

import pytest
from pydantic import ValidationError

from arbiter import GenConfig
from arbiter.constants import SIZE_DEFAULT
from arbiter.core.config import Settings, get_settings


class TestSettings:
    """Test environment settings."""

    def test_defaults(self, monkeypatch):
        """Test no seed and the default size without env vars."""
        monkeypatch.delenv("ARBITER_SEED", raising=False)
        monkeypatch.delenv("ARBITER_SIZE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.seed is None
        assert settings.size == SIZE_DEFAULT

    def test_from_env(self, monkeypatch):
        """Test ARBITER_SEED and ARBITER_SIZE are read."""
        monkeypatch.setenv("ARBITER_SEED", "42")
        monkeypatch.setenv("ARBITER_SIZE", "3")

        settings = Settings(_env_file=None)

        assert settings.seed == 42
        assert settings.size == 3

    def test_negative_seed_rejected(self, monkeypatch):
        """Test a negative seed fails validation."""
        monkeypatch.setenv("ARBITER_SEED", "-5")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_size_rejected(self, monkeypatch):
        """Test a negative size fails validation."""
        monkeypatch.setenv("ARBITER_SIZE", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_cached(self):
        """Test get_settings returns one cached instance."""
        assert get_settings() is get_settings()


class TestGenConfig:
    """Test generation config."""

    def test_with_seed(self):
        """Test with_seed keeps the default size."""
        config = GenConfig.with_seed(12345)

        assert config.seed == 12345
        assert config.size == SIZE_DEFAULT

    def test_with_seed_and_size(self):
        """Test with_seed accepts an explicit size."""
        config = GenConfig.with_seed(0, size=0)

        assert config.seed == 0
        assert config.size == 0

    def test_seed_negative_fails(self):
        """Test a negative seed is rejected."""
        with pytest.raises(AssertionError):
            GenConfig.with_seed(-1)

    def test_size_negative_fails(self):
        """Test a negative size is rejected."""
        with pytest.raises(AssertionError):
            GenConfig(seed=1, size=-1)

    def test_from_env_or_random(self, monkeypatch):
        """Test seed and size come from the environment."""
        monkeypatch.setenv("ARBITER_SEED", "42")
        monkeypatch.setenv("ARBITER_SIZE", "7")

        config = GenConfig.from_env_or_random()

        assert config.seed == 42
        assert config.size == 7

    def test_from_env_or_random_no_env(self, monkeypatch):
        """Test a random non-negative seed without ARBITER_SEED."""
        monkeypatch.delenv("ARBITER_SEED", raising=False)

        config = GenConfig.from_env_or_random()

        assert config.seed >= 0

    def test_random_seed_is_logged(self, monkeypatch, caplog):
        """Test the chosen seed is logged for replay."""
        monkeypatch.delenv("ARBITER_SEED", raising=False)
        caplog.set_level(logging.INFO, logger="arbiter.gen.config")

        config = GenConfig.from_env_or_random()

        assert f"ARBITER_SEED={config.seed}" in caplog.text
