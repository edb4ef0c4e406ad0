"""Video poker round engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random

from transitions import Machine

from config import GameConfig
from poker_core.cards import Card, Deck, full_card_set
from poker_core.errors import CardConservationError, CommandError, DuplicateCardError, DeckExhaustedError
from poker_core.evaluator import PAYTABLE, HandCategory, classify, payout_for
from poker_core.hand import HAND_SIZE, Hand
from poker_core.game.commands import parse_bet, parse_hold_selection
from poker_core.game.events import EventEmitter, EventHandler, EventType, GameEvent
from poker_core.game.intents import Intent
from poker_core.game.state import TRANSITIONS, GameState

logger = logging.getLogger(__name__)

_FULL_DECK = frozenset(full_card_set())

# Which engine method answers an intent in each state. QUIT is handled globally.
_INTENT_ACTIONS: dict[GameState, dict[Intent, str]] = {
    GameState.BETTING: {
        Intent.CYCLE_BET: "cycle_bet",
        Intent.CONFIRM: "confirm",
    },
    GameState.HAND_SELECTION: {
        Intent.CURSOR_LEFT: "move_cursor_left",
        Intent.CURSOR_RIGHT: "move_cursor_right",
        Intent.TOGGLE_HOLD: "toggle_hold",
        Intent.CONFIRM: "confirm",
    },
    GameState.PAYOUT: {
        Intent.CONFIRM: "confirm",
    },
    GameState.GAME_OVER: {
        Intent.CONFIRM: "confirm_new_game",
        Intent.NEW_GAME: "confirm_new_game",
        Intent.DECLINE: "decline",
    },
}


@dataclass
class RoundState:
    """Mutable per-session record owned by the engine."""

    wallet: int
    bet: int
    round: int = 1
    cursor: int = 0
    last_prize: HandCategory | None = None
    last_payout: int = 0


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the engine for rendering."""

    state: GameState
    wallet: int
    bet: int
    round: int
    slots: tuple[str | None, ...]
    held: tuple[bool, ...]
    cursor: int
    last_prize: HandCategory | None
    last_payout: int
    paytable: tuple[tuple[HandCategory, int], ...]
    cards_remaining: int
    discard_count: int
    can_confirm: bool


class VideoPokerGame:
    """
    Five-card-draw video poker engine using a state machine.

    The engine owns the deck, the hand, the discard pile and the round
    record. Every card is always in exactly one of those three places;
    this is checked after each operation that moves cards.

    Player input arrives either as an ``Intent`` through ``handle`` or as
    typed text through ``submit``. Rejected input emits an event and leaves
    the engine untouched.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = TRANSITIONS

    def __init__(
        self,
        game_config: GameConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new session.

        Args:
            game_config: Starting wallet and bet ladder (defaults if not provided)
            rng: Random number generator for shuffling; seeded from the
                config when not provided
        """
        self.config = game_config or GameConfig()
        self._rng = rng or Random(self.config.seed)
        self.events = EventEmitter()

        self._new_session()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="betting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    def _new_session(self) -> None:
        """Reset every piece of session data to its starting value."""
        self.deck = Deck.new(rng=self._rng)
        self.hand = Hand()
        self.discard: list[Card] = []
        self.round_state = RoundState(
            wallet=self.config.starting_wallet,
            bet=self.config.min_bet,
        )
        self.events.emit_new(EventType.GAME_STARTED, wallet=self.round_state.wallet)
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self.deck))

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def is_session_over(self) -> bool:
        """Check if the player has quit or declined a new game."""
        return self.state == GameState.SESSION_ENDED

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    @property
    def history(self) -> list[GameEvent]:
        """Return every event emitted this session."""
        return self.events.history

    # ------------------------------------------------------------------
    # Dispatch

    def handle(self, intent: Intent) -> list[GameEvent]:
        """
        Apply one player intent.

        Returns:
            The events produced while handling it
        """
        start = self.events.position
        if intent is Intent.QUIT:
            self.quit()
        else:
            action = _INTENT_ACTIONS.get(self.state, {}).get(intent)
            if action is None:
                self._reject(f"'{intent}' is not available during {self.state}")
            else:
                getattr(self, action)()
        return self.events.since(start)

    def submit(self, text: str) -> list[GameEvent]:
        """
        Apply a typed command: a bet amount while betting, or hold
        positions like "1 3 5" while selecting cards.

        Returns:
            The events produced while handling it
        """
        start = self.events.position
        if self.state == GameState.BETTING:
            self.place_bet(text)
        elif self.state == GameState.HAND_SELECTION:
            self.select_holds(text)
        else:
            self._reject(f"Typed commands are not accepted during {self.state}")
        return self.events.since(start)

    def _reject(self, message: str, **data: object) -> bool:
        logger.debug("Rejected in %s: %s", self.state, message)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
            **data,
        )
        return False

    # ------------------------------------------------------------------
    # Betting

    def cycle_bet(self) -> bool:
        """Raise the bet one step, wrapping to the minimum past the max or the wallet."""
        if self.state != GameState.BETTING:
            return self._reject("Cannot change bet in current state")

        rs = self.round_state
        next_bet = rs.bet + self.config.bet_increment
        if next_bet > self.config.max_bet or next_bet > rs.wallet:
            next_bet = self.config.min_bet
        rs.bet = next_bet

        self.events.emit_new(EventType.BET_CHANGED, bet=rs.bet)
        return True

    def place_bet(self, text: str) -> bool:
        """
        Set the bet from typed text and deal immediately.

        Args:
            text: Bet amount, e.g. "60"

        Returns:
            True if the bet was accepted and the hand dealt
        """
        if self.state != GameState.BETTING:
            return self._reject("Cannot bet in current state")

        try:
            amount = parse_bet(
                text,
                min_bet=self.config.min_bet,
                max_bet=self.config.max_bet,
                increment=self.config.bet_increment,
            )
        except CommandError as exc:
            return self._reject(str(exc), input=text)

        if amount > self.round_state.wallet:
            return self._insufficient_funds(amount)

        self.round_state.bet = amount
        self.events.emit_new(EventType.BET_CHANGED, bet=amount)
        return self._confirm_bet()

    def _insufficient_funds(self, amount: int) -> bool:
        logger.debug("Bet %d exceeds wallet %d", amount, self.round_state.wallet)
        self.events.emit_new(
            EventType.INSUFFICIENT_FUNDS,
            required=amount,
            available=self.round_state.wallet,
        )
        return False

    def _confirm_bet(self) -> bool:
        """Debit the bet and deal a fresh hand."""
        rs = self.round_state
        if rs.wallet < rs.bet:
            return self._insufficient_funds(rs.bet)
        available = len(self.deck) + self.hand.occupied_count
        if available < HAND_SIZE:
            raise DeckExhaustedError(f"Only {available} cards left to deal")

        rs.wallet -= rs.bet
        self.events.emit_new(EventType.BET_PLACED, amount=rs.bet, wallet=rs.wallet)

        # A hand dealt ahead of the bet goes back before the shuffle
        if not self.hand.is_empty:
            returned = self.hand.take_all()
            self.deck.return_cards(returned)
            self.check_conservation()
            self.events.emit_new(EventType.CARDS_RETURNED, count=len(returned))

        self.deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self.deck))

        self.hand.clear_holds()
        rs.cursor = 0
        self._deal_hand()

        self.start_hand()  # Trigger state transition
        self.events.emit_new(EventType.ROUND_STARTED, round=rs.round, bet=rs.bet)
        logger.debug("Round %d dealt: %s", rs.round, self.hand)
        return True

    def deal(self) -> bool:
        """
        Fill the empty hand with five cards from the top of the deck.

        It moves cards only and does not touch the wallet or the state.
        A later betting confirm returns these cards and deals afresh.
        """
        if self.state != GameState.BETTING:
            return self._reject("Cannot deal in current state")
        if not self.hand.is_empty:
            return self._reject("Hand already dealt")

        self._deal_hand()
        return True

    def _deal_hand(self) -> None:
        for index in range(HAND_SIZE):
            self._draw_into(index)
        self.check_conservation()

    # ------------------------------------------------------------------
    # Hand selection

    def move_cursor_left(self) -> bool:
        """Move the hold cursor one slot left, stopping at the first slot."""
        return self._move_cursor(-1)

    def move_cursor_right(self) -> bool:
        """Move the hold cursor one slot right, stopping at the last slot."""
        return self._move_cursor(1)

    def _move_cursor(self, step: int) -> bool:
        if self.state != GameState.HAND_SELECTION:
            return self._reject("Cannot move cursor in current state")

        rs = self.round_state
        rs.cursor = min(max(rs.cursor + step, 0), HAND_SIZE - 1)
        self.events.emit_new(EventType.CURSOR_MOVED, cursor=rs.cursor)
        return True

    def toggle_hold(self) -> bool:
        """Flip the held flag under the cursor."""
        if self.state != GameState.HAND_SELECTION:
            return self._reject("Cannot hold cards in current state")

        cursor = self.round_state.cursor
        held = self.hand.toggle_hold(cursor)
        self.events.emit_new(EventType.HOLD_TOGGLED, slot=cursor, held=held)
        return True

    def select_holds(self, text: str) -> bool:
        """
        Replace the held flags from typed 1-based positions.

        Args:
            text: Positions such as "1 3 5"; empty holds nothing
        """
        if self.state != GameState.HAND_SELECTION:
            return self._reject("Cannot hold cards in current state")

        try:
            selection = parse_hold_selection(text)
        except CommandError as exc:
            return self._reject(str(exc), input=text)

        self.hand.set_held(selection)
        self.events.emit_new(EventType.HOLDS_SELECTED, slots=sorted(selection))
        return True

    def _draw_replacements(self) -> bool:
        """Discard and replace every unheld card, then pay the final hand."""
        rs = self.round_state
        replace = [i for i in range(HAND_SIZE) if not self.hand.is_held(i)]
        if len(self.deck) < len(replace):
            raise DeckExhaustedError(
                f"Need {len(replace)} replacement cards, deck has {len(self.deck)}"
            )

        for index in replace:
            self._move_to_discard(index)
            self._draw_into(index)
        self.check_conservation()

        category = classify(self.hand)
        # Pays on the bet in force now; it cannot change after betting.
        amount = payout_for(category, rs.bet)
        rs.wallet += amount
        rs.last_prize = category
        rs.last_payout = amount

        self.events.emit_new(EventType.HAND_EVALUATED, category=category.name, hand=str(self.hand))
        self.events.emit_new(EventType.PRIZE_AWARDED, category=category.name, amount=amount, wallet=rs.wallet)
        logger.info("Round %d: %s pays %d (wallet %d)", rs.round, category, amount, rs.wallet)

        self.finish_hand()
        return True

    # ------------------------------------------------------------------
    # Payout / game over

    def _finish_round(self) -> bool:
        """Return every card to the deck and go back to betting, or end the game."""
        rs = self.round_state
        if rs.wallet < self.config.min_bet:
            self.go_broke()
            self.events.emit_new(EventType.GAME_OVER, round=rs.round, wallet=rs.wallet)
            logger.info("Game over after round %d", rs.round)
            return True

        returned = self.hand.take_all() + self.discard
        self.discard = []
        self.deck.return_cards(returned)
        self.deck.shuffle()
        self.check_conservation()
        self.events.emit_new(EventType.CARDS_RETURNED, count=len(returned))
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self.deck))

        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=rs.round,
            prize=rs.last_prize.name if rs.last_prize else None,
            wallet=rs.wallet,
        )
        rs.last_prize = None
        rs.last_payout = 0
        rs.round += 1

        self.next_round()
        return True

    def confirm(self) -> bool:
        """Confirm whatever the current state is waiting for."""
        state = self.state
        if state == GameState.BETTING:
            return self._confirm_bet()
        if state == GameState.HAND_SELECTION:
            return self._draw_replacements()
        if state == GameState.PAYOUT:
            return self._finish_round()
        if state == GameState.GAME_OVER:
            return self.confirm_new_game()
        return self._reject("Nothing to confirm")

    def confirm_new_game(self) -> bool:
        """Start over with the starting wallet and a fresh deck."""
        if self.state != GameState.GAME_OVER:
            return self._reject("A new game can only start after game over")

        self._new_session()
        self.restart()
        logger.info("New game started")
        return True

    def decline(self) -> bool:
        """Decline a new game and end the session."""
        if self.state != GameState.GAME_OVER:
            return self._reject("Nothing to decline")
        return self._end("declined")

    def quit(self) -> bool:
        """End the session from any state; wallet and round are left as they are."""
        if self.state == GameState.SESSION_ENDED:
            return self._reject("Session already ended")
        return self._end("quit")

    def _end(self, reason: str) -> bool:
        self.end_session()
        self.events.emit_new(
            EventType.SESSION_ENDED,
            reason=reason,
            round=self.round_state.round,
            wallet=self.round_state.wallet,
        )
        logger.info("Session ended (%s)", reason)
        return True

    # ------------------------------------------------------------------
    # Card movement

    def _move_to_discard(self, index: int) -> None:
        card = self.hand.take(index)
        self.discard.append(card)
        self.events.emit_new(EventType.CARD_DISCARDED, card=str(card), slot=index)

    def _draw_into(self, index: int) -> None:
        card = self.deck.draw_top()
        self.hand.place(index, card)
        self.events.emit_new(EventType.CARD_DEALT, card=str(card), slot=index)

    def check_conservation(self) -> None:
        """
        Verify that deck, hand and discard together hold each of the 52
        cards exactly once.

        Raises:
            CardConservationError: if a card is missing, extra or duplicated
        """
        owned = list(self.deck) + [c for c in self.hand.slots if c is not None] + self.discard
        if len(set(owned)) != len(owned):
            raise DuplicateCardError("A card is owned by more than one place")
        if set(owned) != _FULL_DECK:
            raise CardConservationError(
                f"Expected {len(_FULL_DECK)} cards, found {len(owned)}"
            )

    # ------------------------------------------------------------------
    # Read-only views

    @property
    def can_confirm(self) -> bool:
        """Check if a confirm would be accepted right now."""
        state = self.state
        if state == GameState.BETTING:
            return self.round_state.wallet >= self.round_state.bet
        return state in (GameState.HAND_SELECTION, GameState.PAYOUT, GameState.GAME_OVER)

    def snapshot(self) -> GameSnapshot:
        """Capture everything the presentation layer needs to draw a frame."""
        rs = self.round_state
        return GameSnapshot(
            state=self.state,
            wallet=rs.wallet,
            bet=rs.bet,
            round=rs.round,
            slots=tuple(str(card) if card is not None else None for card in self.hand.slots),
            held=self.hand.held,
            cursor=rs.cursor,
            last_prize=rs.last_prize,
            last_payout=rs.last_payout,
            paytable=tuple(PAYTABLE.items()),
            cards_remaining=len(self.deck),
            discard_count=len(self.discard),
            can_confirm=self.can_confirm,
        )
