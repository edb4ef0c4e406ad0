"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: BETTING → HAND_SELECTION → PAYOUT → BETTING (or GAME_OVER when broke)
    """

    # Choosing the bet for the next hand
    BETTING = auto()

    # Cards dealt, player picks which to hold
    HAND_SELECTION = auto()

    # Final hand shown with its prize
    PAYOUT = auto()

    # Wallet is empty, waiting for new-game or decline
    GAME_OVER = auto()

    # Player quit or declined a new game
    SESSION_ENDED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# State machine triggers, in the form the transitions library expects
TRANSITIONS: list[dict[str, str]] = [
    {"trigger": "start_hand", "source": "betting", "dest": "hand_selection"},
    {"trigger": "finish_hand", "source": "hand_selection", "dest": "payout"},
    {"trigger": "next_round", "source": "payout", "dest": "betting"},
    {"trigger": "go_broke", "source": "payout", "dest": "game_over"},
    {"trigger": "restart", "source": "game_over", "dest": "betting"},
    {"trigger": "end_session", "source": "*", "dest": "session_ended"},
]


def _build_valid_transitions() -> dict[GameState, list[GameState]]:
    table: dict[GameState, list[GameState]] = {state: [] for state in GameState}
    for transition in TRANSITIONS:
        dest = GameState[transition["dest"].upper()]
        if transition["source"] == "*":
            sources = [state for state in GameState if state is not dest]
        else:
            sources = [GameState[transition["source"].upper()]]
        for source in sources:
            table[source].append(dest)
    return table


# Valid state transitions, derived from the trigger list
VALID_TRANSITIONS: dict[GameState, list[GameState]] = _build_valid_transitions()


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
