"""Tests for the terminal application loop and renderer."""

import io

import pytest
from rich.console import Console

from poker_core.game import EventType, GameState
from terminal_ui.main import Application, build_parser
from terminal_ui.renderer import card_text, render_frame


@pytest.fixture
def console():
    """A console writing to memory."""
    return Console(file=io.StringIO(), width=100, force_terminal=False, color_system=None)


@pytest.fixture
def app(game, console):
    """An application around a seeded game."""
    return Application(game, console=console)


def output(console: Console) -> str:
    return console.file.getvalue()


class TestApplication:
    """Tests for Application.process and run."""

    def test_enter_deals(self, app):
        """Test that Enter while betting deals a hand."""
        events = app.process("")
        assert app.game.state == GameState.HAND_SELECTION
        assert any(e.event_type == EventType.BET_PLACED for e in events)
        assert not app.messages

    def test_invalid_bet_shows_message(self, app):
        """Test that a rejected bet is reported and nothing changes."""
        app.process("55")
        assert app.game.state == GameState.BETTING
        assert len(app.messages) == 1
        assert "step" in app.messages[0]

    def test_insufficient_funds_message(self, app):
        """Test the funds message when the wallet is short."""
        app.game.round_state.wallet = 0
        app.process("")
        assert app.messages[0].startswith("Insufficient funds")

    def test_unknown_key_message(self, app):
        """Test feedback for unmapped keys."""
        assert app.process("zzz") == []
        assert "Unknown key" in app.messages[0]

    def test_run_until_quit(self, app, monkeypatch):
        """Test the loop ends when the player quits."""
        lines = iter(["", "h", "", "q"])
        monkeypatch.setattr(app, "read_line", lambda: next(lines))
        app.run()
        assert app.game.is_session_over
        assert "Final wallet" in output(app.console)

    def test_end_of_input_quits(self, app, monkeypatch):
        """Test that EOF on stdin is treated as quit."""

        def raise_eof(prompt=""):
            raise EOFError

        monkeypatch.setattr(app.console, "input", raise_eof)
        assert app.read_line() == "q"


class TestRenderer:
    """Tests for the rich renderables."""

    def test_frame_contains_status(self, game, console):
        """Test the header and paytable text."""
        game.cycle_bet()
        console.print(render_frame(game.snapshot()))
        text = output(console)
        assert "Wallet 100" in text
        assert "Bet 40" in text
        assert "Straight Flush" in text
        assert "1600" in text

    def test_frame_shows_hand_and_holds(self, game, console):
        """Test dealt cards and hold marks."""
        game.confirm()
        game.toggle_hold()
        console.print(render_frame(game.snapshot(), ["bad input"]))
        text = output(console)
        first = game.hand.slots[0]
        assert str(first.suit) in text
        assert "HELD" in text
        assert "bad input" in text

    def test_card_text_colours(self):
        """Test suit colouring."""
        assert "red" in str(card_text("10♥").style)
        assert "red" not in str(card_text("K♠").style)
        assert "_" in card_text(None).plain


class TestParser:
    """Tests for command-line arguments."""

    def test_seed_and_log_level(self):
        """Test argument parsing."""
        args = build_parser().parse_args(["--seed", "7", "--log-level", "debug"])
        assert args.seed == 7
        assert args.log_level == "debug"

    def test_defaults(self):
        """Test that unset arguments defer to configuration."""
        args = build_parser().parse_args([])
        assert args.seed is None
        assert args.log_level is None
