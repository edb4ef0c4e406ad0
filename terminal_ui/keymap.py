"""Translate a line of player input into an engine intent or typed command."""

from poker_core.game.intents import Intent
from poker_core.game.state import GameState

KEY_INTENTS: dict[str, Intent] = {
    "": Intent.CONFIRM,
    "c": Intent.CONFIRM,
    "enter": Intent.CONFIRM,
    "b": Intent.CYCLE_BET,
    "bet": Intent.CYCLE_BET,
    "a": Intent.CURSOR_LEFT,
    "<": Intent.CURSOR_LEFT,
    "left": Intent.CURSOR_LEFT,
    "d": Intent.CURSOR_RIGHT,
    ">": Intent.CURSOR_RIGHT,
    "right": Intent.CURSOR_RIGHT,
    "h": Intent.TOGGLE_HOLD,
    "space": Intent.TOGGLE_HOLD,
    "hold": Intent.TOGGLE_HOLD,
    "y": Intent.NEW_GAME,
    "yes": Intent.NEW_GAME,
    "n": Intent.DECLINE,
    "no": Intent.DECLINE,
    "q": Intent.QUIT,
    "quit": Intent.QUIT,
    "esc": Intent.QUIT,
    "escape": Intent.QUIT,
    "\x1b": Intent.QUIT,
}

# Which keys each state advertises in the prompt
STATE_HELP: dict[GameState, str] = {
    GameState.BETTING: "[b] raise bet  [Enter] deal or type an amount  [q] quit",
    GameState.HAND_SELECTION: "[a]/[d] move  [h] hold  [Enter] draw  or type positions like 1 3 5  [q] quit",
    GameState.PAYOUT: "[Enter] continue  [q] quit",
    GameState.GAME_OVER: "Play again? [y] yes  [n] no",
    GameState.SESSION_ENDED: "",
}


def parse_input(line: str, state: GameState) -> Intent | str | None:
    """
    Map raw input to what the engine should receive.

    Returns:
        An Intent for a key, the stripped text for a typed bet or hold
        selection, or None if the input means nothing in this state
    """
    # A line of only spaces is the space bar, not Enter.
    if line and not line.strip():
        return Intent.TOGGLE_HOLD

    key = line.strip().lower()
    if key in KEY_INTENTS:
        return KEY_INTENTS[key]

    if key[:1].isdigit() and state in (GameState.BETTING, GameState.HAND_SELECTION):
        return key
    return None
