"""Seeded random number generator for reproducible sampling."""
from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """Wrapper around random.Random so every random draw is injectable.

    Passing ``seed=None`` draws a fresh seed from system entropy; the seed
    actually used is still exposed through :attr:`seed` so the run can be
    reproduced later.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.SystemRandom().randint(0, 2**31 - 1)
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def shuffle(self, seq: list) -> None:
        self._rng.shuffle(seq)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def fork(self) -> SeededRNG:
        """Create a child RNG with a derived seed for one independent sample."""
        child_seed = self._rng.randint(0, 2**31 - 1)
        return SeededRNG(child_seed)

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self._seed})"
