"""Top-level package for the carddeck library."""

from . import cards, config, deck, ordering, rng, transforms
from .cards import Card, Rank, Suit, display_name
from .deck import new
from .transforms import InvalidCount

__all__ = [
    "Card",
    "InvalidCount",
    "Rank",
    "Suit",
    "cards",
    "config",
    "deck",
    "display_name",
    "new",
    "ordering",
    "rng",
    "transforms",
]
