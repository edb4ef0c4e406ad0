"""Display constants for the terminal UI."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Colors:
    """Rich style names used by the renderer."""

    CARD_RED: str = "bold red1"
    CARD_BLACK: str = "bold white"
    CARD_EMPTY: str = "dim"
    CARD_BORDER: str = "white"
    CURSOR_BORDER: str = "bold yellow"
    HELD: str = "bold green1"
    GOLD: str = "bold yellow"
    TEXT_MUTED: str = "grey62"
    ERROR: str = "bold red"
    HIGHLIGHT_ROW: str = "bold black on yellow"


@dataclass(frozen=True)
class Layout:
    """Sizes and fixed text."""

    TITLE: str = "Video Poker"
    CARD_WIDTH: int = 7
    MESSAGE_LINES: int = 3
    HELD_MARK: str = "HELD"


COLORS = Colors()
LAYOUT = Layout()
