"""Build rich renderables from an engine snapshot."""

from typing import Iterable

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker_core.game.engine import GameSnapshot
from poker_core.game.state import GameState
from terminal_ui.config import COLORS, LAYOUT
from terminal_ui.keymap import STATE_HELP

_RED_SUITS = ("♥", "♦")


def card_text(card: str | None) -> Text:
    """Return a card face: rank over suit, coloured by suit."""
    if card is None:
        return Text("\n _ \n", style=COLORS.CARD_EMPTY, justify="center")

    rank, suit = card[:-1], card[-1]
    style = COLORS.CARD_RED if suit in _RED_SUITS else COLORS.CARD_BLACK
    return Text(f"{rank}\n{suit}\n", style=style, justify="center")


def render_header(snapshot: GameSnapshot) -> Table:
    """Wallet, bet, round and state on one row."""
    grid = Table.grid(expand=True, padding=(0, 2))
    for _ in range(4):
        grid.add_column(justify="center")
    grid.add_row(
        Text(f"Wallet {snapshot.wallet}", style=COLORS.GOLD),
        Text(f"Bet {snapshot.bet}"),
        Text(f"Round {snapshot.round}"),
        Text(str(snapshot.state), style=COLORS.TEXT_MUTED),
    )
    return grid


def render_hand(snapshot: GameSnapshot) -> Table:
    """The five card slots with position numbers, hold marks and cursor."""
    show_cursor = snapshot.state == GameState.HAND_SELECTION
    grid = Table.grid(padding=(0, 1))

    positions = [Text(str(i + 1), justify="center", style=COLORS.TEXT_MUTED) for i in range(len(snapshot.slots))]
    grid.add_row(*positions)

    faces = []
    for index, card in enumerate(snapshot.slots):
        border = COLORS.CURSOR_BORDER if show_cursor and index == snapshot.cursor else COLORS.CARD_BORDER
        faces.append(Panel(card_text(card), width=LAYOUT.CARD_WIDTH + 2, padding=(0, 1), border_style=border))
    grid.add_row(*faces)

    marks = [
        Text(LAYOUT.HELD_MARK if held else "", justify="center", style=COLORS.HELD)
        for held in snapshot.held
    ]
    grid.add_row(*marks)
    return grid


def render_paytable(snapshot: GameSnapshot) -> Table:
    """The paytable priced at the current bet, with the last prize highlighted."""
    table = Table(box=box.SIMPLE, show_header=True, header_style=COLORS.TEXT_MUTED)
    table.add_column("Hand")
    table.add_column("x", justify="right")
    table.add_column("Pays", justify="right")

    for category, multiplier in snapshot.paytable:
        style = COLORS.HIGHLIGHT_ROW if category == snapshot.last_prize else None
        table.add_row(category.label, str(multiplier), str(multiplier * snapshot.bet), style=style)
    return table


def render_result(snapshot: GameSnapshot) -> Text:
    """Describe the outcome of the hand just played, if any."""
    if snapshot.state == GameState.GAME_OVER:
        return Text("GAME OVER - the wallet is empty", style=COLORS.ERROR)
    if snapshot.last_prize is None:
        return Text("")
    if snapshot.last_payout:
        return Text(f"{snapshot.last_prize.label}! You win {snapshot.last_payout}", style=COLORS.GOLD)
    return Text(snapshot.last_prize.label, style=COLORS.TEXT_MUTED)


def render_messages(messages: Iterable[str]) -> Text:
    """Recent rejected-input messages."""
    return Text("\n".join(messages), style=COLORS.ERROR)


def render_frame(snapshot: GameSnapshot, messages: Iterable[str] = ()) -> Panel:
    """Compose a full screen for one snapshot."""
    body = Group(
        render_header(snapshot),
        Text(""),
        render_hand(snapshot),
        render_result(snapshot),
        render_paytable(snapshot),
        render_messages(messages),
        Text(STATE_HELP.get(snapshot.state, ""), style=COLORS.TEXT_MUTED),
    )
    return Panel(body, title=LAYOUT.TITLE, border_style=COLORS.CARD_BORDER, expand=False)
