"""Tests for the state enumeration and transition table."""

import pytest

from poker_core.game import GameState, VideoPokerGame
from poker_core.game.state import VALID_TRANSITIONS, is_valid_transition


class TestTransitions:
    """Tests for the transition table."""

    @pytest.mark.parametrize(
        "source,dest",
        [
            (GameState.BETTING, GameState.HAND_SELECTION),
            (GameState.HAND_SELECTION, GameState.PAYOUT),
            (GameState.PAYOUT, GameState.BETTING),
            (GameState.PAYOUT, GameState.GAME_OVER),
            (GameState.GAME_OVER, GameState.BETTING),
        ],
    )
    def test_round_flow(self, source, dest):
        """Test the allowed forward moves."""
        assert is_valid_transition(source, dest)

    @pytest.mark.parametrize(
        "source,dest",
        [
            (GameState.BETTING, GameState.PAYOUT),
            (GameState.HAND_SELECTION, GameState.BETTING),
            (GameState.GAME_OVER, GameState.PAYOUT),
            (GameState.SESSION_ENDED, GameState.BETTING),
        ],
    )
    def test_skips_are_invalid(self, source, dest):
        """Test moves the game never makes."""
        assert not is_valid_transition(source, dest)

    def test_every_state_can_end_the_session(self):
        """Test that quit is reachable from every live state."""
        for state in GameState:
            if state is not GameState.SESSION_ENDED:
                assert is_valid_transition(state, GameState.SESSION_ENDED)

    def test_session_ended_is_terminal(self):
        """Test the terminal state."""
        assert VALID_TRANSITIONS[GameState.SESSION_ENDED] == []

    def test_table_follows_engine_triggers(self):
        """Test that every trigger the engine's machine declares is in the table, and nothing else."""
        expected = set()
        for transition in VideoPokerGame.TRANSITIONS:
            dest = GameState[transition["dest"].upper()]
            if transition["source"] == "*":
                expected.update((state, dest) for state in GameState if state is not dest)
            else:
                expected.add((GameState[transition["source"].upper()], dest))

        table = {(source, dest) for source, dests in VALID_TRANSITIONS.items() for dest in dests}
        assert table == expected

    def test_str(self):
        """Test the display name."""
        assert str(GameState.HAND_SELECTION) == "Hand Selection"
