"""Core video poker engine - 100% UI-agnostic."""

from poker_core.cards import Card, Deck, Rank, Suit
from poker_core.hand import HAND_SIZE, Hand
from poker_core.evaluator import PAYTABLE, HandCategory, classify, payout_for

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "HAND_SIZE",
    "Hand",
    "PAYTABLE",
    "HandCategory",
    "classify",
    "payout_for",
]
