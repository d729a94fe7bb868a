"""Rich renderables for decks and order-key reference grids."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from ..cards import Card, Rank, Suit, rank_symbol
from ..ordering import order_key

PIPS = "♠♦♣♥"
SUIT_STYLES = ("cyan", "magenta", "green", "red")
JOKER_STYLE = "bold yellow"


def card_text(card: Card) -> Text:
    """Short coloured label, e.g. ``A♠``; jokers render as ``JK``."""

    if card.is_joker:
        return Text(card.label(), style=JOKER_STYLE)
    suit = int(card.suit)
    return Text(f"{rank_symbol(card.rank)}{PIPS[suit]}", style=SUIT_STYLES[suit])


def card_strip(cards: Iterable[Card]) -> Text:
    return Text(" ").join(card_text(card) for card in cards)


def deck_table(cards: Sequence[Card], *, title: str = "Deck") -> Table:
    """Return a table listing ``cards`` with their positions and order keys."""

    table = Table(title=f"{title} ({len(cards)} card(s))", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Card", justify="left")
    table.add_column("Label", justify="center")
    table.add_column("Key", justify="right")
    for idx, card in enumerate(cards, start=1):
        table.add_row(str(idx), str(card), card_text(card), str(order_key(card)))
    return table


def reference_table() -> Table:
    """Return a grid of every standard card and its order key."""

    table = Table(title="Order keys", box=box.SIMPLE)
    table.add_column("Rank", justify="left")
    for suit in Suit.standard():
        header = Text(f"{suit.title}s {PIPS[suit]}", style=SUIT_STYLES[suit])
        table.add_column(header, justify="right")
    for rank in Rank.ordered():
        table.add_row(rank.title, *(str(order_key(Card(suit, rank))) for suit in Suit.standard()))
    return table
