from __future__ import annotations

from rich.console import Console, RenderableType

from carddeck.cards import Card, Rank, Suit
from carddeck.cli.render import card_strip, card_text, deck_table


def _plain(renderable: RenderableType) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_card_text_uses_pips_and_suit_style() -> None:
    text = card_text(Card(Suit.HEART, Rank.QUEEN))

    assert text.plain == "Q♥"
    assert str(text.style) == "red"


def test_card_text_for_joker_and_reserved_rank() -> None:
    assert card_text(Card.joker(3)).plain == "JK"
    assert card_text(Card(Suit.CLUB)).plain == "0♣"


def test_card_strip_joins_labels() -> None:
    strip = card_strip([Card(Suit.SPADE, Rank.ACE), Card(Suit.DIAMOND, Rank.TEN), Card.joker()])

    assert strip.plain == "A♠ 10♦ JK"


def test_deck_table_lists_names_and_keys() -> None:
    output = _plain(deck_table([Card(Suit.SPADE, Rank.ACE), Card(Suit.SPADE)], title="Hand"))

    assert "Hand (2 card(s))" in output
    assert "Ace of Spades" in output
    assert "Rank(0) of Spades" in output
