"""Round engine and state management."""

from poker_core.game.events import GameEvent, EventType
from poker_core.game.intents import Intent
from poker_core.game.state import GameState
from poker_core.game.engine import GameSnapshot, RoundState, VideoPokerGame

__all__ = [
    "GameEvent",
    "EventType",
    "Intent",
    "GameState",
    "GameSnapshot",
    "RoundState",
    "VideoPokerGame",
]
