"""Ordering keys and comparator factories for card sequences."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Sequence

import numpy as np

from .cards import MAX_RANK, Card, Suit

Less = Callable[[int, int], bool]
ComparatorFactory = Callable[[Sequence[Card]], Less]

JOKER_KEY_BASE = len(Suit.standard()) * MAX_RANK + 1


def order_key(card: Card) -> int:
    """Return ``suit * 13 + rank``: Spades < Diamonds < Clubs < Hearts, Ace low.

    Jokers are keyed past the King of Hearts by their index so they sort after
    every standard card; their key carries no further meaning.
    """

    if card.is_joker:
        return JOKER_KEY_BASE + int(card.rank)
    return int(card.suit) * MAX_RANK + int(card.rank)


def order_keys(cards: Sequence[Card]) -> np.ndarray:
    """Return the order keys of ``cards`` as an ``int64`` array."""

    return np.fromiter((order_key(card) for card in cards), dtype=np.int64, count=len(cards))


def less(cards: Sequence[Card]) -> Less:
    """Comparator factory ordering positions of ``cards`` by :func:`order_key`."""

    def _less(i: int, j: int) -> bool:
        return order_key(cards[i]) < order_key(cards[j])

    return _less


def _rank_major(card: Card) -> tuple[int, int]:
    if card.is_joker:
        return MAX_RANK + 1, int(card.rank)
    return int(card.rank), int(card.suit)


def by_rank(cards: Sequence[Card]) -> Less:
    """Comparator factory ordering by rank first, then by suit; jokers go last."""

    def _less(i: int, j: int) -> bool:
        return _rank_major(cards[i]) < _rank_major(cards[j])

    return _less


def sort_positions(cards: Sequence[Card], comparator_factory: ComparatorFactory) -> list[int]:
    """Return the positions of ``cards`` in stable order under the factory's predicate."""

    is_less = comparator_factory(cards)

    def _compare(i: int, j: int) -> int:
        if is_less(i, j):
            return -1
        if is_less(j, i):
            return 1
        return 0

    return sorted(range(len(cards)), key=cmp_to_key(_compare))


__all__ = [
    "ComparatorFactory",
    "JOKER_KEY_BASE",
    "Less",
    "by_rank",
    "less",
    "order_key",
    "order_keys",
    "sort_positions",
]
