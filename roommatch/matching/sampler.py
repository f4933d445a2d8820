"""Run the matcher many times to build a pool of candidate solutions."""
from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from typing import Optional, Sequence

from roommatch.core.rng import SeededRNG
from roommatch.core.types import Constraints, Solution
from roommatch.matching.matcher import GreedyPreferenceMatcher, Matcher


def _solve_one(
    matcher: Matcher,
    population: Sequence[str],
    constraints: Constraints,
    rng: SeededRNG,
) -> Solution:
    return matcher.solve(population, constraints, rng)


def generate_solutions(
    population: Sequence[str],
    constraints: Constraints,
    count: int,
    rng: SeededRNG,
    workers: int = 1,
    matcher: Optional[Matcher] = None,
) -> list[Solution]:
    """Return *count* independent samples, in sample order.

    Each sample gets its own stream forked from *rng* before any work starts,
    so the output does not depend on *workers*. With ``workers > 1`` the
    samples are spread over a process pool; the first failing sample's
    exception propagates.
    """
    if count < 0:
        raise ValueError(f"Sample count must be non-negative, got {count}")
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    matcher = matcher or GreedyPreferenceMatcher()
    population = list(population)
    constraints = dict(constraints)
    streams = [rng.fork() for _ in range(count)]

    if workers == 1 or count <= 1:
        return [
            _solve_one(matcher, population, constraints, stream)
            for stream in streams
        ]

    chunksize = max(1, count // (workers * 4))
    with ProcessPoolExecutor(max_workers=workers) as pool:
        return list(
            pool.map(
                _solve_one,
                [matcher] * count,
                [population] * count,
                [constraints] * count,
                streams,
                chunksize=chunksize,
            )
        )
