"""Caller-side validation of a rooming problem before it reaches the matcher."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence

from roommatch.core.errors import (
    InsufficientPopulationError,
    InvalidProblemError,
    MissingConstraintError,
)
from roommatch.core.types import Constraints


@dataclass
class ValidationResult:
    valid: bool
    reason: str = ""
    violation_type: Optional[str] = None   # "duplicate" | "missing" | "unknown" | "self" | "conflict" | "odd"
    person: Optional[str] = None
    reference: Optional[str] = None        # the offending name inside person's lists
    size: Optional[int] = None             # population size, for "odd"

    def raise_for_violation(self) -> None:
        """Raise the error the matcher would hit on this problem, if any."""
        if self.valid:
            return
        if self.violation_type == "missing":
            raise MissingConstraintError(self.person)
        if self.violation_type == "unknown":
            raise MissingConstraintError(self.reference, referenced_by=self.person)
        if self.violation_type == "odd":
            raise InsufficientPopulationError(size=self.size)
        raise InvalidProblemError(self.reason)


def validate_problem(people: Sequence[str], constraints: Constraints) -> ValidationResult:
    """Check a population and its constraints against the matcher's preconditions.

    Returns a ``ValidationResult`` with *valid=True* when all checks pass,
    otherwise the first violation found.
    """
    # ── population ───────────────────────────────────────────────────────
    dupes = [name for name, n in Counter(people).items() if n > 1]
    if dupes:
        return ValidationResult(
            False, f"{dupes[0]!r} appears more than once", "duplicate", dupes[0],
        )

    members = set(people)
    for person in people:
        if person not in constraints:
            return ValidationResult(
                False, f"{person!r} has no constraint entry", "missing", person,
            )

    # ── per-person lists ─────────────────────────────────────────────────
    for person in people:
        preferred, unpreferred = constraints[person]
        for other in (*preferred, *unpreferred):
            if other == person:
                return ValidationResult(
                    False, f"{person!r} lists themselves", "self", person, other,
                )
            if other not in members:
                return ValidationResult(
                    False,
                    f"{person!r} lists {other!r}, who is not in the population",
                    "unknown",
                    person,
                    other,
                )
        both = sorted(set(preferred) & set(unpreferred))
        if both:
            return ValidationResult(
                False,
                f"{person!r} lists {both[0]!r} as both preferred and unpreferred",
                "conflict",
                person,
                both[0],
            )

    # ── parity ───────────────────────────────────────────────────────────
    if len(people) % 2:
        return ValidationResult(
            False,
            f"Population of {len(people)} cannot be split into pairs",
            "odd",
            size=len(people),
        )

    return ValidationResult(True)
