"""
Right: one (action, possession, resource) permission record.

Rights are immutable values. Two rights are equal, and hash equal, when all
three fields are equal, which is what makes them usable as set members in the
access table.
"""

from dataclasses import dataclass
from typing import Self

from rightsgate.pattern import format_pattern, parse_pattern
from rightsgate.vocabulary import (
    Action,
    ActionLike,
    Possession,
    PossessionLike,
    parse_action,
    parse_possession,
)


@dataclass(frozen=True, slots=True)
class Right:
    """A single granted (or requested) permission.

    Raw string fields are resolved through the vocabulary parsers, so
    ``Right("read", "own", "post") == Right.read_own("post")``.
    """

    action: ActionLike
    possession: PossessionLike
    resource: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "action", parse_action(self.action))
        object.__setattr__(self, "possession", parse_possession(self.possession))

    def __str__(self) -> str:
        return self.to_pattern()

    @classmethod
    def new(
        cls,
        action: str | ActionLike,
        possession: str | PossessionLike,
        resource: str,
    ) -> Self:
        """Build a right from tokens. Unknown tokens become custom values; never fails."""
        return cls(parse_action(action), parse_possession(possession), resource)

    @classmethod
    def from_pattern(cls, pattern: str) -> Self:
        """Parse ``action:possession/resource`` into a right.

        Raises:
            PatternError: If the pattern is malformed.
        """
        return cls.new(*parse_pattern(pattern))

    def to_pattern(self) -> str:
        """Render as ``action:possession/resource``.

        Tokens are written verbatim. Only rights whose tokens are all word
        characters render to text that from_pattern() accepts.
        """
        return format_pattern(self.action, self.possession, self.resource)

    # --- Named constructors ---

    @classmethod
    def create_own(cls, resource: str) -> Self:
        return cls(Action.CREATE, Possession.OWN, resource)

    @classmethod
    def create_any(cls, resource: str) -> Self:
        return cls(Action.CREATE, Possession.ANY, resource)

    @classmethod
    def read_own(cls, resource: str) -> Self:
        return cls(Action.READ, Possession.OWN, resource)

    @classmethod
    def read_any(cls, resource: str) -> Self:
        return cls(Action.READ, Possession.ANY, resource)

    @classmethod
    def update_own(cls, resource: str) -> Self:
        return cls(Action.UPDATE, Possession.OWN, resource)

    @classmethod
    def update_any(cls, resource: str) -> Self:
        return cls(Action.UPDATE, Possession.ANY, resource)

    @classmethod
    def delete_own(cls, resource: str) -> Self:
        return cls(Action.DELETE, Possession.OWN, resource)

    @classmethod
    def delete_any(cls, resource: str) -> Self:
        return cls(Action.DELETE, Possession.ANY, resource)
