"""Exception hierarchy for the video poker engine."""


class PokerError(Exception):
    """Base class for all engine errors."""


class CardConservationError(PokerError, RuntimeError):
    """
    A card was lost, duplicated or moved into an invalid place.

    These indicate a defect in the engine itself and are never
    recovered from: the round cannot continue with a corrupted deck.
    """


class DeckExhaustedError(CardConservationError, IndexError):
    """Attempted to draw from an empty deck."""


class DuplicateCardError(CardConservationError):
    """The same card is owned by more than one container."""


class SlotEmptyError(CardConservationError):
    """Tried to take a card from an empty hand slot."""


class SlotOccupiedError(CardConservationError):
    """Tried to place a card into an occupied hand slot."""


class IncompleteHandError(PokerError, ValueError):
    """Classification requested for a hand with empty slots."""


class CommandError(PokerError, ValueError):
    """A typed player command could not be parsed or is out of range."""
