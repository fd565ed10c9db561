"""
Point-in-time authorization queries.

A Query is bound to one or more role names and a frozen copy of the access
table taken when it was built. Grants made to the originating AccessControl
afterwards are not visible to it, and it never mutates anything, so a Query
can be shared freely between threads.
"""

from collections.abc import Iterable, Mapping

from rightsgate.logging_config import get_logger
from rightsgate.right import Right
from rightsgate.vocabulary import (
    Action,
    ActionLike,
    Possession,
    PossessionLike,
    parse_action,
    parse_possession,
)

logger = get_logger(__name__)


class Query:
    """Answers "may any of these roles do this?" against a snapshot."""

    __slots__ = ("_roles", "_rights")

    def __init__(self, roles: Iterable[str], rights: Mapping[str, Iterable[Right]]) -> None:
        self._roles: tuple[str, ...] = tuple(roles)
        self._rights: dict[str, frozenset[Right]] = {
            role: frozenset(granted) for role, granted in rights.items()
        }

    def __repr__(self) -> str:
        return f"Query(roles={list(self._roles)!r})"

    @property
    def roles(self) -> tuple[str, ...]:
        return self._roles

    def check(self, action: ActionLike, possession: PossessionLike, resource: str) -> bool:
        """Return True if any queried role holds exactly this right.

        Roles missing from the snapshot contribute nothing. Role order only
        affects which role short-circuits, never the answer.
        """
        wanted = Right(action, possession, resource)
        for role in self._roles:
            if wanted in self._rights.get(role, ()):
                logger.debug("Access granted", role=role, right=str(wanted))
                return True

        logger.debug("Access denied", roles=list(self._roles), right=str(wanted))
        return False

    def execute_right(self, right: Right) -> bool:
        return self.check(right.action, right.possession, right.resource)

    def access(
        self,
        action: str | ActionLike,
        possession: str | PossessionLike,
        resource: str,
    ) -> bool:
        """String form of check(); tokens are resolved like Right.new()."""
        return self.check(parse_action(action), parse_possession(possession), resource)

    # --- Named predicates ---
    # The unqualified forms check the "any" possession.

    def create_own(self, resource: str) -> bool:
        return self.check(Action.CREATE, Possession.OWN, resource)

    def create_any(self, resource: str) -> bool:
        return self.check(Action.CREATE, Possession.ANY, resource)

    def create(self, resource: str) -> bool:
        return self.create_any(resource)

    def read_own(self, resource: str) -> bool:
        return self.check(Action.READ, Possession.OWN, resource)

    def read_any(self, resource: str) -> bool:
        return self.check(Action.READ, Possession.ANY, resource)

    def read(self, resource: str) -> bool:
        return self.read_any(resource)

    def update_own(self, resource: str) -> bool:
        return self.check(Action.UPDATE, Possession.OWN, resource)

    def update_any(self, resource: str) -> bool:
        return self.check(Action.UPDATE, Possession.ANY, resource)

    def update(self, resource: str) -> bool:
        return self.update_any(resource)

    def delete_own(self, resource: str) -> bool:
        return self.check(Action.DELETE, Possession.OWN, resource)

    def delete_any(self, resource: str) -> bool:
        return self.check(Action.DELETE, Possession.ANY, resource)

    def delete(self, resource: str) -> bool:
        return self.delete_any(resource)
