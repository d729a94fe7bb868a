"""Composable deck transforms.

Every transform maps a sequence of cards to a new list of cards and can be
passed to :func:`carddeck.deck.new`. None of them mutate their input.
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from . import rng
from .cards import Card
from .ordering import ComparatorFactory, order_keys, sort_positions

__all__ = [
    "InvalidCount",
    "Transform",
    "decks",
    "default_sort",
    "filter_cards",
    "jokers",
    "shuffle",
    "shuffler",
    "sort",
]


class InvalidCount(ValueError):
    """Raised when a transform is built with a negative card or deck count."""


class Transform(Protocol):
    """Callable turning one card sequence into another."""

    def __call__(self, cards: Sequence[Card], /) -> list[Card]: ...


def _require_count(n: int, what: str) -> None:
    if n < 0:
        raise InvalidCount(f"{what} must be non-negative, got {n}")


def default_sort(cards: Sequence[Card]) -> list[Card]:
    """Return ``cards`` in ascending order-key order (stable)."""

    if not cards:
        return []
    positions = order_keys(cards).argsort(kind="stable")
    return [cards[int(idx)] for idx in positions]


def sort(comparator_factory: ComparatorFactory) -> Transform:
    """Return a stable sort driven by ``comparator_factory``.

    The factory receives the sequence being sorted and returns a less-than
    predicate over positions, e.g. :func:`carddeck.ordering.less`.
    """

    def _sort(cards: Sequence[Card]) -> list[Card]:
        return [cards[idx] for idx in sort_positions(cards, comparator_factory)]

    return _sort


def shuffle(cards: Sequence[Card]) -> list[Card]:
    """Shuffle using the process-wide source."""

    return rng.shuffle(cards)


def shuffler(source: rng.ShuffleSource) -> Transform:
    """Return a shuffle transform bound to ``source``."""

    def _shuffle(cards: Sequence[Card]) -> list[Card]:
        return rng.shuffle(cards, source)

    return _shuffle


def jokers(n: int) -> Transform:
    """Append ``n`` Jokers, distinguished by rank indexes ``0..n-1``."""

    _require_count(n, "joker count")

    def _jokers(cards: Sequence[Card]) -> list[Card]:
        return [*cards, *(Card.joker(idx) for idx in range(n))]

    return _jokers


def filter_cards(predicate: Callable[[Card], bool]) -> Transform:
    """Return a transform that removes every card for which ``predicate`` is true.

    This is an exclusion filter: matching cards are dropped and the remaining
    cards keep their relative order.
    """

    def _filter(cards: Sequence[Card]) -> list[Card]:
        return [card for card in cards if not predicate(card)]

    return _filter


def decks(n: int) -> Transform:
    """Return a transform that repeats the input ``n`` times back to back."""

    _require_count(n, "deck count")

    def _decks(cards: Sequence[Card]) -> list[Card]:
        return list(cards) * n

    return _decks
