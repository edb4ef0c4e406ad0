"""Five-card hand classification and the video poker paytable.

Categories are tested in a fixed precedence order and the first match wins,
which mirrors reading a paytable from the top down.
"""

from collections import Counter
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from poker_core.cards import Card
from poker_core.errors import DuplicateCardError, IncompleteHandError
from poker_core.hand import HAND_SIZE, Hand


class HandCategory(Enum):
    """Paying hand categories, highest precedence first."""

    STRAIGHT_FLUSH = "Straight Flush"
    FOUR_OF_A_KIND = "Four of a Kind"
    FULL_HOUSE = "Full House"
    FLUSH = "Flush"
    STRAIGHT = "Straight"
    THREE_OF_A_KIND = "Three of a Kind"
    TWO_PAIRS = "Two Pairs"
    NO_WIN = "No Win"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Return the display name."""
        return self.value


PAYTABLE: Mapping[HandCategory, int] = MappingProxyType(
    {
        HandCategory.STRAIGHT_FLUSH: 40,
        HandCategory.FOUR_OF_A_KIND: 15,
        HandCategory.FULL_HOUSE: 7,
        HandCategory.FLUSH: 4,
        HandCategory.STRAIGHT: 3,
        HandCategory.THREE_OF_A_KIND: 2,
        HandCategory.TWO_PAIRS: 2,
        HandCategory.NO_WIN: 0,
    }
)


def _rank_counts(cards: Sequence[Card]) -> Counter:
    return Counter(card.value for card in cards)


def is_flush(cards: Sequence[Card]) -> bool:
    """Check if all cards share one suit."""
    return len({card.suit for card in cards}) == 1


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Check if the sorted ranks form a run of consecutive values.

    Ranks lie on a flat 1..13 line: the ace only connects to the two, so
    10-J-Q-K-A is not a straight.
    """
    values = sorted(card.value for card in cards)
    return all(b - a == 1 for a, b in zip(values, values[1:]))


def is_straight_flush(cards: Sequence[Card]) -> bool:
    """Check for a straight in a single suit."""
    return is_flush(cards) and is_straight(cards)


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    """Check if some rank appears at least four times."""
    return max(_rank_counts(cards).values()) >= 4


def is_three_of_a_kind(cards: Sequence[Card]) -> bool:
    """Check if some rank appears at least three times."""
    return max(_rank_counts(cards).values()) >= 3


def is_full_house(cards: Sequence[Card]) -> bool:
    """Check for three of a kind with at most two distinct ranks."""
    return is_three_of_a_kind(cards) and len(_rank_counts(cards)) <= 2


def is_two_pairs(cards: Sequence[Card]) -> bool:
    """Check if at least two different ranks each appear twice or more."""
    return sum(1 for count in _rank_counts(cards).values() if count >= 2) >= 2


# Precedence order; classify() returns the first matching entry.
_CHECKS: list[tuple[HandCategory, Callable[[Sequence[Card]], bool]]] = [
    (HandCategory.STRAIGHT_FLUSH, is_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, is_four_of_a_kind),
    (HandCategory.FULL_HOUSE, is_full_house),
    (HandCategory.FLUSH, is_flush),
    (HandCategory.STRAIGHT, is_straight),
    (HandCategory.THREE_OF_A_KIND, is_three_of_a_kind),
    (HandCategory.TWO_PAIRS, is_two_pairs),
]


def classify(hand: Hand | Sequence[Card]) -> HandCategory:
    """
    Classify a complete five-card hand.

    Args:
        hand: A Hand, or a sequence of exactly five cards

    Returns:
        The highest-precedence category the cards satisfy

    Raises:
        IncompleteHandError: if a slot is empty or there are not five cards
        DuplicateCardError: if the same card appears twice
    """
    if isinstance(hand, Hand):
        cards = hand.cards
    else:
        cards = tuple(hand)
        if len(cards) != HAND_SIZE or any(card is None for card in cards):
            raise IncompleteHandError(f"Expected {HAND_SIZE} cards, got {list(cards)!r}")

    if len(set(cards)) != HAND_SIZE:
        raise DuplicateCardError(f"Duplicate cards in hand: {list(cards)!r}")

    for category, check in _CHECKS:
        if check(cards):
            return category
    return HandCategory.NO_WIN


def payout_for(category: HandCategory, bet: int) -> int:
    """Return the credits paid for a category at the given bet."""
    return PAYTABLE[category] * bet
