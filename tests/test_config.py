"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from config import AppConfig, GameConfig


class TestGameConfig:
    """Tests for GameConfig."""

    def test_defaults(self):
        """Test the standard session rules."""
        with patch.dict(os.environ, {}, clear=True):
            game = GameConfig()

        assert game.starting_wallet == 100
        assert game.min_bet == 20
        assert game.bet_increment == 20
        assert game.max_bet == 100
        assert game.seed is None

    def test_env_overrides(self):
        """Test wallet and seed from the environment."""
        with patch.dict(os.environ, {"POKER_STARTING_WALLET": "240", "POKER_SEED": "99"}):
            game = GameConfig()

        assert game.starting_wallet == 240
        assert game.seed == 99

    def test_blank_seed_is_unseeded(self):
        """Test that an empty POKER_SEED means no seed."""
        with patch.dict(os.environ, {"POKER_SEED": "  "}):
            assert GameConfig().seed is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"starting_wallet": -1},
            {"min_bet": 0},
            {"bet_increment": 0},
            {"min_bet": 40, "max_bet": 20},
            {"bet_increment": 30},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test that inconsistent ladders are refused."""
        with pytest.raises(ValueError):
            GameConfig(seed=None, **{"starting_wallet": 100, **kwargs})

    def test_frozen(self):
        """Test that configuration is immutable."""
        game = GameConfig(starting_wallet=100, seed=None)
        with pytest.raises(AttributeError):
            game.min_bet = 5


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        """Test log level and debug defaults."""
        with patch.dict(os.environ, {}, clear=True):
            app = AppConfig()

        assert app.debug is False
        assert app.log_level == "WARNING"
        assert isinstance(app.game, GameConfig)

    def test_env_overrides(self):
        """Test DEBUG and LOG_LEVEL from the environment."""
        with patch.dict(os.environ, {"DEBUG": "TRUE", "LOG_LEVEL": "debug"}):
            app = AppConfig()

        assert app.debug is True
        assert app.log_level == "DEBUG"
