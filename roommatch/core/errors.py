"""Exception types raised by the matcher, the selector and the config layer."""
from __future__ import annotations

from typing import Optional


class MatchingError(Exception):
    """Base class for failures inside the matching core."""


class MissingConstraintError(MatchingError, KeyError):
    """A person (or a name inside someone's lists) has no constraint entry."""

    def __init__(self, name: str, referenced_by: Optional[str] = None):
        self.name = name
        self.referenced_by = referenced_by
        if referenced_by is None:
            msg = f"Person {name!r} has no constraint entry"
        else:
            msg = (
                f"Person {name!r} (listed by {referenced_by!r}) "
                f"is not part of the population"
            )
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])

    def __reduce__(self):
        return (type(self), (self.name, self.referenced_by))


class InsufficientPopulationError(MatchingError, ValueError):
    """Someone is left without a partner (odd or unmatchable population)."""

    def __init__(self, person: Optional[str] = None, size: Optional[int] = None):
        self.person = person
        self.size = size
        if person is not None:
            msg = f"No partner left for {person!r}"
        else:
            msg = f"Population of {size} cannot be split into pairs"
        super().__init__(msg)

    def __reduce__(self):
        return (type(self), (self.person, self.size))


class InvalidProblemError(MatchingError, ValueError):
    """The population or its constraint lists are inconsistent."""


class EmptyInputError(MatchingError, ValueError):
    """The selector was given no solutions to choose from."""


class ConfigError(ValueError):
    """The configuration file is malformed."""
