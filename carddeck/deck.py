"""Deck factory: the base deck threaded through a transform pipeline."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .cards import Card, Rank, Suit
from .transforms import Transform

logger = logging.getLogger(__name__)

BASE_DECK_SIZE = 52


def base_deck() -> list[Card]:
    """Return the 52 standard cards, suit-major and rank-ascending."""

    return [Card(suit=suit, rank=rank) for suit in Suit.standard() for rank in Rank.ordered()]


def apply_transforms(cards: Sequence[Card], transforms: Iterable[Transform]) -> list[Card]:
    """Thread ``cards`` through ``transforms`` from left to right.

    Exceptions raised by a transform propagate to the caller untouched.
    """

    result = list(cards)
    for step, transform in enumerate(transforms):
        result = transform(result)
        logger.debug(
            "transform %d (%s) produced %d card(s)",
            step,
            getattr(transform, "__qualname__", type(transform).__name__),
            len(result),
        )
    return result


def new(*transforms: Transform) -> list[Card]:
    """Build a fresh deck, applying ``transforms`` in the order given."""

    return apply_transforms(base_deck(), transforms)


__all__ = ["BASE_DECK_SIZE", "apply_transforms", "base_deck", "new"]
