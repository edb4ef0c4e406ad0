"""Main entry point for the terminal video poker game."""

import argparse
import logging
from collections import deque
from random import Random

from rich.console import Console
from rich.logging import RichHandler

from config import AppConfig, config
from poker_core.game.engine import VideoPokerGame
from poker_core.game.events import GameEvent
from poker_core.game.intents import Intent
from terminal_ui.config import LAYOUT
from terminal_ui.keymap import parse_input
from terminal_ui.renderer import render_frame

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Call once at program start."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


class Application:
    """Reads player input, forwards it to the engine and redraws."""

    def __init__(self, game: VideoPokerGame, console: Console | None = None) -> None:
        self.game = game
        self.console = console or Console()
        self.messages: deque[str] = deque(maxlen=LAYOUT.MESSAGE_LINES)

    def render(self) -> None:
        """Draw the current snapshot."""
        self.console.clear()
        self.console.print(render_frame(self.game.snapshot(), self.messages))

    def process(self, line: str) -> list[GameEvent]:
        """Apply one line of input and collect messages for rejected input."""
        self.messages.clear()
        command = parse_input(line, self.game.state)
        if command is None:
            self.messages.append(f"Unknown key: {line.strip()!r}")
            return []

        if isinstance(command, Intent):
            events = self.game.handle(command)
        else:
            events = self.game.submit(command)

        for event in events:
            if event.is_error:
                self.messages.append(event.data.get("message") or self._funds_message(event))
        return events

    @staticmethod
    def _funds_message(event: GameEvent) -> str:
        return f"Insufficient funds: need {event.data.get('required')}, have {event.data.get('available')}"

    def read_line(self) -> str:
        """Block until the player enters a line; end of input counts as quit."""
        try:
            return self.console.input("> ")
        except (EOFError, KeyboardInterrupt):
            return "q"

    def run(self) -> None:
        """Main loop: render, wait for a key, apply it, until the session ends."""
        while not self.game.is_session_over:
            self.render()
            self.process(self.read_line())

        snapshot = self.game.snapshot()
        self.console.print(f"Thanks for playing. Final wallet: {snapshot.wallet} after {snapshot.round} round(s).")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Five-card-draw video poker in the terminal")
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a reproducible session")
    parser.add_argument("--log-level", default=None, help="Logging level (default from LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None, app_config: AppConfig = config) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or ("DEBUG" if app_config.debug else app_config.log_level))

    seed = args.seed if args.seed is not None else app_config.game.seed
    game = VideoPokerGame(app_config.game, rng=Random(seed))
    try:
        Application(game).run()
    except Exception:
        logger.exception("Engine failure in state %s", game.state)
        raise


if __name__ == "__main__":
    main()
