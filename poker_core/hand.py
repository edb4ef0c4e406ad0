"""Fixed five-slot hand with per-slot hold flags."""

from typing import Iterable, Iterator, Sequence

from poker_core.cards import Card
from poker_core.errors import (
    DuplicateCardError,
    IncompleteHandError,
    SlotEmptyError,
    SlotOccupiedError,
)

HAND_SIZE = 5


class Hand:
    """
    Five card slots, each either holding a card or empty, plus a held flag per slot.

    The slot list never grows or shrinks. Cards enter through ``place`` and
    leave through ``take``; both check occupancy so that a card can never be
    overwritten or taken twice.
    """

    def __init__(self) -> None:
        """Initialize an empty hand with nothing held."""
        self._slots: list[Card | None] = [None] * HAND_SIZE
        self._held: list[bool] = [False] * HAND_SIZE

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "Hand":
        """Build a complete hand from a five-card literal."""
        if len(cards) != HAND_SIZE:
            raise IncompleteHandError(f"A hand needs {HAND_SIZE} cards, got {len(cards)}")
        if len(set(cards)) != len(cards):
            raise DuplicateCardError(f"Duplicate cards in hand: {list(cards)!r}")
        hand = cls()
        for index, card in enumerate(cards):
            hand.place(index, card)
        return hand

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < HAND_SIZE:
            raise IndexError(f"Slot index {index} out of range 0..{HAND_SIZE - 1}")

    def place(self, index: int, card: Card) -> None:
        """Put a card into an empty slot."""
        self._check_index(index)
        if self._slots[index] is not None:
            raise SlotOccupiedError(f"Slot {index} already holds {self._slots[index]!r}")
        if card in self._slots:
            raise DuplicateCardError(f"{card!r} is already in the hand")
        self._slots[index] = card

    def take(self, index: int) -> Card:
        """Remove and return the card in a slot."""
        self._check_index(index)
        card = self._slots[index]
        if card is None:
            raise SlotEmptyError(f"Slot {index} is empty")
        self._slots[index] = None
        return card

    def take_all(self) -> list[Card]:
        """Empty every occupied slot, returning the cards in slot order."""
        return [self.take(i) for i in range(HAND_SIZE) if self._slots[i] is not None]

    def toggle_hold(self, index: int) -> bool:
        """Flip the held flag of a slot and return the new value."""
        self._check_index(index)
        self._held[index] = not self._held[index]
        return self._held[index]

    def set_held(self, indices: Iterable[int]) -> None:
        """Replace all held flags: exactly the given slots become held."""
        selected = set(indices)
        for index in selected:
            self._check_index(index)
        self._held = [i in selected for i in range(HAND_SIZE)]

    def clear_holds(self) -> None:
        """Release every slot."""
        self._held = [False] * HAND_SIZE

    def is_held(self, index: int) -> bool:
        """Check if a slot is held."""
        self._check_index(index)
        return self._held[index]

    @property
    def slots(self) -> tuple[Card | None, ...]:
        """Return the five slots, with None for empty ones."""
        return tuple(self._slots)

    @property
    def held(self) -> tuple[bool, ...]:
        """Return the five held flags."""
        return tuple(self._held)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the five cards of a complete hand."""
        if not self.is_complete:
            raise IncompleteHandError("Hand has empty slots")
        return tuple(self._slots)  # type: ignore[arg-type]

    @property
    def is_complete(self) -> bool:
        """Check that no slot is empty."""
        return all(card is not None for card in self._slots)

    @property
    def is_empty(self) -> bool:
        """Check that every slot is empty."""
        return all(card is None for card in self._slots)

    @property
    def occupied_count(self) -> int:
        """Return the number of occupied slots."""
        return sum(1 for card in self._slots if card is not None)

    def __len__(self) -> int:
        return HAND_SIZE

    def __iter__(self) -> Iterator[Card | None]:
        return iter(self._slots)

    def __str__(self) -> str:
        return " ".join(str(card) if card is not None else "_" for card in self._slots)

    def __repr__(self) -> str:
        return f"Hand({self._slots!r}, held={self._held!r})"
