"""Pytest fixtures for video poker tests."""

import pytest
from random import Random

from config import GameConfig
from poker_core.cards import Card, Deck
from poker_core.hand import Hand
from poker_core.game import VideoPokerGame


def _cards(*specs: str) -> list[Card]:
    return [Card.from_string(s) for s in specs]


@pytest.fixture
def make_cards():
    """Factory building cards from strings like '2♠', 'KH'."""
    return _cards


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck.new(rng=rng)


@pytest.fixture
def empty_hand():
    """A hand with five empty slots."""
    return Hand()


@pytest.fixture
def straight_flush_hand():
    """2-6 of spades."""
    return Hand.from_cards(_cards("2♠", "3♠", "4♠", "5♠", "6♠"))


@pytest.fixture
def four_twos_hand():
    """Four twos and a six."""
    return Hand.from_cards(_cards("2♠", "2♥", "2♣", "2♦", "6♠"))


@pytest.fixture
def full_house_hand():
    """Twos full of fours."""
    return Hand.from_cards(_cards("2♠", "2♥", "2♣", "4♦", "4♠"))


@pytest.fixture
def flush_hand():
    """Spade flush with no run."""
    return Hand.from_cards(_cards("10♠", "6♠", "4♠", "K♠", "9♠"))


@pytest.fixture
def game_config():
    """Default session rules, unseeded."""
    return GameConfig(starting_wallet=100, seed=None)


@pytest.fixture
def game(rng, game_config):
    """A new game instance."""
    return VideoPokerGame(game_config, rng=rng)


@pytest.fixture
def rig_deck():
    """
    Put chosen cards on top of a game's deck, keeping all 52.

    The deck's shuffle is disabled so the rigged order survives the
    next deal and the next draw.
    """

    def _rig(game: VideoPokerGame, top: list[Card]) -> None:
        rest = [c for c in game.deck if c not in top]
        game.deck._cards = list(top) + rest
        game.deck.shuffle = lambda: None

    return _rig
