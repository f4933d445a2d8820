"""Pick the winning solution out of a batch of samples."""
from __future__ import annotations

from typing import Sequence

from roommatch.core.errors import EmptyInputError
from roommatch.core.rng import SeededRNG
from roommatch.core.types import Solution


def best_solutions(solutions: Sequence[Solution]) -> list[Solution]:
    """Return every solution tied for the best (preferred, accepted) score.

    Preferred count is maximised first; accepted count only breaks ties among
    those. The unpreferred count carries no extra information for a fixed
    population and is never consulted.
    """
    if not solutions:
        raise EmptyInputError("No solutions to select from")

    best_preferred = max(s.preferred for s in solutions)
    tied = [s for s in solutions if s.preferred == best_preferred]

    best_accepted = max(s.accepted for s in tied)
    return [s for s in tied if s.accepted == best_accepted]


def select_best(solutions: Sequence[Solution], rng: SeededRNG) -> Solution:
    """Return one top-ranked solution, breaking remaining ties at random."""
    return rng.choice(best_solutions(solutions))
