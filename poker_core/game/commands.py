"""Parsing of typed player commands.

Parsers validate the whole input before returning anything, so the engine
either applies a command completely or not at all.
"""

import re

from poker_core.errors import CommandError
from poker_core.hand import HAND_SIZE

_TOKEN_SPLIT = re.compile(r"[\s,]+")


def parse_bet(text: str, min_bet: int, max_bet: int, increment: int) -> int:
    """
    Parse a typed bet amount.

    Args:
        text: Raw player input, e.g. "40"
        min_bet: Smallest allowed bet
        max_bet: Largest allowed bet
        increment: Bets must be min_bet plus a multiple of this

    Returns:
        The bet amount

    Raises:
        CommandError: if the text is not an integer on the bet ladder
    """
    stripped = text.strip()
    try:
        amount = int(stripped)
    except ValueError:
        raise CommandError(f"Invalid bet: {stripped!r}") from None

    if amount < min_bet or amount > max_bet:
        raise CommandError(f"Bet must be between {min_bet} and {max_bet}")
    if (amount - min_bet) % increment:
        raise CommandError(f"Bet must be a step of {increment} from {min_bet}")
    return amount


def parse_hold_selection(text: str) -> frozenset[int]:
    """
    Parse 1-based slot numbers such as "1 3 5" into 0-based slot indices.

    Repeated numbers collapse into one. An empty string selects nothing.

    Raises:
        CommandError: on more than five tokens, a non-integer token or a
            number outside 1..5
    """
    tokens = [t for t in _TOKEN_SPLIT.split(text.strip()) if t]
    if len(tokens) > HAND_SIZE:
        raise CommandError(f"At most {HAND_SIZE} cards can be held")

    selected: set[int] = set()
    for token in tokens:
        try:
            position = int(token)
        except ValueError:
            raise CommandError(f"Invalid card selection: {token!r}") from None
        if not 1 <= position <= HAND_SIZE:
            raise CommandError(f"Card selection out of range (1..{HAND_SIZE}): {position}")
        selected.add(position - 1)
    return frozenset(selected)
