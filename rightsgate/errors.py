"""Exceptions raised by rightsgate.

Only two things can go wrong: a pattern string that does not have the
``action:possession/resource`` shape, and (for the raising bulk check) a
pattern whose right is not held. Missing roles and missing rights are never
errors; checks simply answer False.
"""


class RightsError(Exception):
    """Base exception for rightsgate."""


class PatternError(RightsError, ValueError):
    """Raised when a string is not a well-formed ``action:possession/resource`` pattern."""

    def __init__(self, pattern: object) -> None:
        self.pattern = pattern
        super().__init__(f"Malformed right pattern: {pattern!r}")


class UnauthorizedError(RightsError):
    """Raised by require_rights() on the first pattern the queried roles do not hold."""

    def __init__(self, pattern: str, checked: tuple[str, ...] = ()) -> None:
        self.pattern = pattern
        self.checked = checked
        super().__init__(f"Right not held: {pattern}")
