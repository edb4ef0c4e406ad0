"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator

from poker_core.errors import DeckExhaustedError, DuplicateCardError


class Suit(Enum):
    """Card suits, in canonical deck order."""

    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks on a flat 1..13 line (the ace is always 1)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]


_RANK_MAP = {str(rank): rank for rank in Rank}
_RANK_MAP.update({"1": Rank.ACE, "T": Rank.TEN, "11": Rank.JACK, "12": Rank.QUEEN, "13": Rank.KING})

_SUIT_MAP = {
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the numeric rank, 1..13."""
        return self.rank.value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '10♠', 'KH', 'as'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_MAP:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_MAP:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_MAP[rank_str], _SUIT_MAP[suit_str])


def full_card_set() -> list[Card]:
    """Return the 52 cards in canonical order (rank-major, suit-minor)."""
    return [Card(rank, suit) for rank in Rank for suit in Suit]


class Deck:
    """
    An ordered pile of the cards not currently in the hand or discard.

    Index 0 is the top of the deck.
    """

    def __init__(self, rng: Random | None = None, shuffle: bool = True) -> None:
        """
        Initialize a new 52-card deck.

        Args:
            rng: Random number generator for shuffling
            shuffle: Shuffle immediately after filling (the normal case)
        """
        self._rng = rng or Random()
        self._cards: list[Card] = full_card_set()
        if shuffle:
            self.shuffle()

    @classmethod
    def new(cls, rng: Random | None = None) -> "Deck":
        """Create a filled and shuffled deck."""
        return cls(rng=rng)

    @classmethod
    def ordered(cls, rng: Random | None = None) -> "Deck":
        """Create a filled deck left in canonical order."""
        return cls(rng=rng, shuffle=False)

    def shuffle(self) -> None:
        """Shuffle whatever cards are currently in the deck."""
        self._rng.shuffle(self._cards)

    def draw_top(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise DeckExhaustedError("Cannot draw from empty deck")
        return self._cards.pop(0)

    def return_cards(self, cards: Iterable[Card]) -> None:
        """Put cards back on the bottom of the deck."""
        incoming = list(cards)
        present = set(self._cards)
        seen: set[Card] = set()
        for card in incoming:
            if card in present or card in seen:
                raise DuplicateCardError(f"{card!r} is already in the deck")
            seen.add(card)
        self._cards.extend(incoming)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
