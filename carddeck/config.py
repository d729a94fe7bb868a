"""Declarative deck configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from . import deck, ordering, transforms
from .cards import Card, Rank, Suit
from .rng import ShuffleSource

SORT_MODES: Final[dict[str, ordering.ComparatorFactory]] = {
    "default": ordering.less,
    "rank": ordering.by_rank,
}


@dataclass(frozen=True, slots=True)
class DeckConfig:
    """Configuration values describing how a deck is assembled.

    Steps run in a fixed order: exclusions, duplication, jokers, sorting and
    finally shuffling. A config carrying a ``seed`` shuffles with its own
    source instead of the process-wide one.
    """

    decks: int = 1
    jokers: int = 0
    exclude_ranks: tuple[Rank, ...] = ()
    exclude_suits: tuple[Suit, ...] = ()
    sort: str | None = None
    shuffle: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.decks < 0:
            raise transforms.InvalidCount("decks must be non-negative")
        if self.jokers < 0:
            raise transforms.InvalidCount("jokers must be non-negative")
        if self.sort is not None and self.sort not in SORT_MODES:
            raise ValueError(f"unknown sort mode '{self.sort}'")
        if Suit.JOKER in self.exclude_suits:
            raise ValueError("exclude jokers by leaving jokers at 0")

    def _excluded(self, card: Card) -> bool:
        if card.is_joker:
            return False
        return card.suit in self.exclude_suits or card.rank in self.exclude_ranks

    def pipeline(self) -> list[transforms.Transform]:
        """Return the transform pipeline described by this config."""

        steps: list[transforms.Transform] = []
        if self.exclude_ranks or self.exclude_suits:
            steps.append(transforms.filter_cards(self._excluded))
        if self.decks != 1:
            steps.append(transforms.decks(self.decks))
        if self.jokers:
            steps.append(transforms.jokers(self.jokers))
        if self.sort == "default":
            steps.append(transforms.default_sort)
        elif self.sort is not None:
            steps.append(transforms.sort(SORT_MODES[self.sort]))
        if self.shuffle:
            if self.seed is None:
                steps.append(transforms.shuffle)
            else:
                steps.append(transforms.shuffler(ShuffleSource(self.seed)))
        return steps

    def build(self) -> list[Card]:
        """Assemble a fresh deck according to this config."""

        return deck.new(*self.pipeline())


__all__ = ["DeckConfig", "SORT_MODES"]
