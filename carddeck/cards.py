"""Card abstractions for the standard 52-card deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class Suit(IntEnum):
    """Enumeration of suits in display order, plus the Joker sentinel."""

    SPADE = 0
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    JOKER = 4  # never produced by the base deck

    @classmethod
    def standard(cls) -> tuple["Suit", ...]:
        """Return the four standard suits in display order."""

        return (cls.SPADE, cls.DIAMOND, cls.CLUB, cls.HEART)

    @property
    def title(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return _SUIT_LETTERS[self]


class Rank(IntEnum):
    """Card ranks from Ace (1) to King (13); zero is reserved."""

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

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return ranks from Ace to King."""

        return tuple(cls(value) for value in range(MIN_RANK, MAX_RANK + 1))

    @property
    def title(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return _RANK_LABELS[self]


MIN_RANK: Final[int] = 1
MAX_RANK: Final[int] = 13

_SUIT_LETTERS: Final[dict[Suit, str]] = {
    Suit.SPADE: "S",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
    Suit.HEART: "H",
    Suit.JOKER: "JK",
}
_RANK_LABELS: Final[dict[Rank, str]] = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    **{Rank(value): str(value) for value in range(2, 11)},
}



def rank_title(value: int) -> str:
    """Return ``"Ace"``..``"King"``, or ``"Rank(n)"`` for values outside the enum."""

    if MIN_RANK <= value <= MAX_RANK:
        return Rank(value).title
    return f"Rank({int(value)})"


def rank_symbol(value: int) -> str:
    if MIN_RANK <= value <= MAX_RANK:
        return Rank(value).symbol
    return str(int(value))


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a playing card.

    Joker cards carry a plain integer in ``rank`` that only tells copies
    apart; it has no ordering meaning.
    """

    suit: Suit
    rank: Rank | int = 0

    @classmethod
    def joker(cls, index: int = 0) -> "Card":
        return cls(suit=Suit.JOKER, rank=index)

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card is a Joker."""

        return self.suit == Suit.JOKER

    def label(self) -> str:
        """Create a short label such as ``AS`` or ``10H`` for compact listings."""

        if self.is_joker:
            return Suit.JOKER.symbol
        return f"{rank_symbol(self.rank)}{self.suit.symbol}"

    def __str__(self) -> str:
        return display_name(self)


def display_name(card: Card) -> str:
    """Return the canonical name, e.g. ``"Ace of Spades"`` or ``"Joker"``."""

    if card.suit == Suit.JOKER:
        return Suit.JOKER.title
    return f"{rank_title(card.rank)} of {Suit(card.suit).title}s"


__all__ = ["Card", "MAX_RANK", "MIN_RANK", "Rank", "Suit", "display_name", "rank_symbol", "rank_title"]
