"""Core domain types for preference-aware room pairing."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, NamedTuple, Sequence


class MatchTier(str, Enum):
    PREFERRED = "preferred"        # both sides list each other as preferred
    ACCEPTED = "accepted"          # neither side rejects the other
    UNPREFERRED = "unpreferred"    # forced, nothing better was left


class ConstraintEntry(NamedTuple):
    """Preferred and unpreferred partner names for one person.

    A plain ``(preferred, unpreferred)`` tuple is accepted anywhere a
    ConstraintEntry is expected.
    """
    preferred: Sequence[str] = ()
    unpreferred: Sequence[str] = ()


Constraints = Mapping[str, ConstraintEntry]
Pair = tuple[str, str]


@dataclass(frozen=True)
class Solution:
    """One complete pairing plus how many rooms landed in each tier."""
    pairs: tuple[Pair, ...]
    preferred: int
    accepted: int
    unpreferred: int
    tiers: tuple[MatchTier, ...] = field(default=(), compare=False)

    @property
    def rooms(self) -> int:
        return len(self.pairs)

    @property
    def score(self) -> tuple[int, int]:
        """Ranking key: more preferred rooms first, then more accepted."""
        return (self.preferred, self.accepted)

    def people(self) -> list[str]:
        return [name for pair in self.pairs for name in pair]
