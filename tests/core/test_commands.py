"""Tests for typed command parsing."""

import pytest

from poker_core.errors import CommandError
from poker_core.game.commands import parse_bet, parse_hold_selection


def bet(text: str) -> int:
    return parse_bet(text, min_bet=20, max_bet=100, increment=20)


class TestParseBet:
    """Tests for bet amounts."""

    @pytest.mark.parametrize("text,expected", [("20", 20), (" 60 ", 60), ("100", 100)])
    def test_valid_bets(self, text, expected):
        """Test amounts on the ladder."""
        assert bet(text) == expected

    @pytest.mark.parametrize("text", ["", "twenty", "4O", "20 40"])
    def test_unparseable(self, text):
        """Test non-integer input."""
        with pytest.raises(CommandError, match="Invalid bet"):
            bet(text)

    @pytest.mark.parametrize("text", ["0", "10", "120", "-20"])
    def test_out_of_range(self, text):
        """Test amounts outside min..max."""
        with pytest.raises(CommandError, match="between"):
            bet(text)

    def test_off_ladder(self):
        """Test an amount between steps."""
        with pytest.raises(CommandError, match="step"):
            bet("50")

    def test_command_error_is_value_error(self):
        """Test that callers can catch it as a ValueError."""
        with pytest.raises(ValueError):
            bet("x")


class TestParseHoldSelection:
    """Tests for hold positions."""

    def test_positions_are_one_based(self):
        """Test the conversion to slot indices."""
        assert parse_hold_selection("1 3 5") == {0, 2, 4}

    def test_commas_and_spaces(self):
        """Test mixed separators."""
        assert parse_hold_selection("1,2 ,  4") == {0, 1, 3}

    def test_duplicates_collapse(self):
        """Test that repeating a position holds it once."""
        assert parse_hold_selection("2 2 2") == {1}

    def test_empty_means_nothing_held(self):
        """Test the empty selection."""
        assert parse_hold_selection("") == frozenset()
        assert parse_hold_selection("   ") == frozenset()

    def test_too_many_tokens(self):
        """Test more than five positions."""
        with pytest.raises(CommandError, match="At most"):
            parse_hold_selection("1 2 3 4 5 1")

    @pytest.mark.parametrize("text", ["0", "6", "1 9"])
    def test_out_of_range(self, text):
        """Test positions outside 1..5."""
        with pytest.raises(CommandError, match="out of range"):
            parse_hold_selection(text)

    @pytest.mark.parametrize("text", ["a", "1 b", "1.5"])
    def test_not_a_number(self, text):
        """Test tokens that are not integers."""
        with pytest.raises(CommandError, match="Invalid card selection"):
            parse_hold_selection(text)
