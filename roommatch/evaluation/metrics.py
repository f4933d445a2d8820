"""Compute aggregate metrics over a batch of sampled solutions."""
from __future__ import annotations

import statistics
from typing import Any, Sequence

from roommatch.core.types import Solution
from roommatch.matching.selection import best_solutions


def compute_metrics(solutions: Sequence[Solution], winner: Solution) -> dict[str, Any]:
    """Return a flat dict of summary metrics suitable for JSON serialisation."""
    if not solutions:
        return _empty_metrics()

    preferred = [s.preferred for s in solutions]
    accepted = [s.accepted for s in solutions]
    unpreferred = [s.unpreferred for s in solutions]
    optimal = best_solutions(solutions)

    # pair order inside a room and room order are both irrelevant here
    distinct = {
        frozenset(frozenset(pair) for pair in s.pairs) for s in solutions
    }

    return {
        "samples": len(solutions),
        "people": 2 * winner.rooms,
        "rooms": winner.rooms,
        "best_preferred": optimal[0].preferred,
        "best_accepted": optimal[0].accepted,
        "optimal_solutions": len(optimal),
        "distinct_pairings": len(distinct),
        "preferred_mean": round(statistics.mean(preferred), 2),
        "accepted_mean": round(statistics.mean(accepted), 2),
        "unpreferred_mean": round(statistics.mean(unpreferred), 2),
        "preferred_std": (
            round(statistics.stdev(preferred), 2) if len(preferred) > 1 else 0
        ),
        "winner_preferred": winner.preferred,
        "winner_accepted": winner.accepted,
        "winner_unpreferred": winner.unpreferred,
    }


def _empty_metrics() -> dict[str, Any]:
    return {
        "samples": 0,
        "people": 0,
        "rooms": 0,
        "best_preferred": 0,
        "best_accepted": 0,
        "optimal_solutions": 0,
        "distinct_pairings": 0,
        "preferred_mean": 0,
        "accepted_mean": 0,
        "unpreferred_mean": 0,
        "preferred_std": 0,
        "winner_preferred": 0,
        "winner_accepted": 0,
        "winner_unpreferred": 0,
    }
