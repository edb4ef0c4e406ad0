"""Player intents delivered by the presentation layer."""

from enum import Enum, auto


class Intent(Enum):
    """A single key-press worth of player intention."""

    CYCLE_BET = auto()
    CONFIRM = auto()
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()
    TOGGLE_HOLD = auto()
    NEW_GAME = auto()
    DECLINE = auto()
    QUIT = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()
