"""Matching strategies for pairing people into rooms.

Provides a ``Matcher`` interface and the ``GreedyPreferenceMatcher``
implementation. Every room is formed through the best tier still available
for the person being placed: mutual preference, then mutual acceptance,
then a forced pairing with whoever is left.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from roommatch.core.errors import InsufficientPopulationError, MissingConstraintError
from roommatch.core.rng import SeededRNG
from roommatch.core.types import Constraints, MatchTier, Solution

_Lookup = dict[str, tuple[frozenset[str], frozenset[str]]]


class Matcher(ABC):
    """Interface for room matching strategies."""

    @abstractmethod
    def solve(
        self,
        population: Sequence[str],
        constraints: Constraints,
        rng: SeededRNG,
    ) -> Solution:
        """Pair every person in *population* exactly once."""
        ...


class GreedyPreferenceMatcher(Matcher):
    """Randomized greedy pairing over a shuffled population.

    People are placed one at a time from the end of the shuffled list.
    A one-sided preference does not count as preferred; such a pair can
    only be formed through the accepted tier.
    """

    def solve(
        self,
        population: Sequence[str],
        constraints: Constraints,
        rng: SeededRNG,
    ) -> Solution:
        lookup = _build_lookup(population, constraints)

        remaining = list(population)
        rng.shuffle(remaining)

        pairs: list[tuple[str, str]] = []
        tiers: list[MatchTier] = []
        counts = {tier: 0 for tier in MatchTier}

        while remaining:
            person = remaining.pop()
            preferred, unpreferred = lookup[person]

            def mutual_preferred(other: str) -> bool:
                return other in preferred and person in lookup[other][0]

            def mutual_accepted(other: str) -> bool:
                return other not in unpreferred and person not in lookup[other][1]

            for tier, predicate in (
                (MatchTier.PREFERRED, mutual_preferred),
                (MatchTier.ACCEPTED, mutual_accepted),
                (MatchTier.UNPREFERRED, None),
            ):
                partner = take_random(remaining, rng, predicate)
                if partner is not None:
                    break
            else:
                raise InsufficientPopulationError(person)

            pairs.append((person, partner))
            tiers.append(tier)
            counts[tier] += 1

        return Solution(
            pairs=tuple(pairs),
            preferred=counts[MatchTier.PREFERRED],
            accepted=counts[MatchTier.ACCEPTED],
            unpreferred=counts[MatchTier.UNPREFERRED],
            tiers=tuple(tiers),
        )


def take_random(
    items: list[str],
    rng: SeededRNG,
    predicate: Optional[Callable[[str], bool]] = None,
) -> Optional[str]:
    """Remove and return a random element of *items* satisfying *predicate*.

    Returns ``None`` (leaving *items* untouched) when nothing qualifies.
    """
    if predicate is None:
        candidates = list(items)
    else:
        candidates = [item for item in items if predicate(item)]
    if not candidates:
        return None
    choice = rng.choice(candidates)
    items.remove(choice)
    return choice


def _build_lookup(population: Sequence[str], constraints: Constraints) -> _Lookup:
    """Freeze every entry into sets and check all names resolve."""
    members = set(population)
    lookup: _Lookup = {}
    for person in population:
        if person not in constraints:
            raise MissingConstraintError(person)
        preferred, unpreferred = constraints[person]
        for other in (*preferred, *unpreferred):
            if other not in members:
                raise MissingConstraintError(other, referenced_by=person)
        lookup[person] = (frozenset(preferred), frozenset(unpreferred))
    return lookup


_default_matcher = GreedyPreferenceMatcher()


def solve(
    population: Sequence[str],
    constraints: Constraints,
    rng: SeededRNG,
) -> Solution:
    """Produce one randomized pairing of *population*."""
    return _default_matcher.solve(population, constraints, rng)
