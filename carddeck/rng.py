"""Random shuffle engine backed by an injectable numpy generator."""

from __future__ import annotations

import logging
import threading
import time
from typing import Sequence

import numpy as np

from .cards import Card

logger = logging.getLogger(__name__)


class ShuffleSource:
    """Thread-safe source of uniformly random permutations.

    Build one from a fixed ``seed`` for reproducible shuffles, wrap an existing
    ``numpy.random.Generator``, or pass neither to seed from the clock.
    """

    def __init__(self, seed: int | None = None, *, generator: np.random.Generator | None = None) -> None:
        if seed is not None and generator is not None:
            raise ValueError("pass either seed or generator, not both")
        self._lock = threading.Lock()
        self.seed: int | None = None
        if generator is not None:
            self._generator = generator
        else:
            self._generator = self._seeded(seed)

    def _seeded(self, seed: int | None) -> np.random.Generator:
        if seed is None:
            seed = int(time.time())
        self.seed = seed
        logger.debug("seeding shuffle source with %d", seed)
        return np.random.default_rng(seed)

    def reseed(self, seed: int) -> None:
        """Restart the source from ``seed``."""

        with self._lock:
            self._generator = self._seeded(seed)

    def permutation(self, n: int) -> list[int]:
        """Return a uniformly random permutation of ``range(n)``."""

        if n < 0:
            raise ValueError("permutation length must be non-negative")
        with self._lock:
            perm = self._generator.permutation(n)
        return [int(idx) for idx in perm]


_default_source: ShuffleSource | None = None
_default_lock = threading.Lock()


def default_source() -> ShuffleSource:
    """Return the process-wide source, creating a clock-seeded one on first use."""

    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = ShuffleSource()
        return _default_source


def set_default_source(source: ShuffleSource) -> ShuffleSource | None:
    """Replace the process-wide source and return the previous one."""

    global _default_source
    with _default_lock:
        previous = _default_source
        _default_source = source
    return previous


def seed_default_source(seed: int) -> None:
    """Replace the process-wide source with one seeded by ``seed``."""

    set_default_source(ShuffleSource(seed))


def shuffle(cards: Sequence[Card], source: ShuffleSource | None = None) -> list[Card]:
    """Return a new list holding ``cards`` in uniformly random order.

    Output position ``i`` receives ``cards[perm[i]]``; ``cards`` is untouched.
    """

    if source is None:
        source = default_source()
    perm = source.permutation(len(cards))
    return [cards[idx] for idx in perm]


__all__ = [
    "ShuffleSource",
    "default_source",
    "seed_default_source",
    "set_default_source",
    "shuffle",
]
