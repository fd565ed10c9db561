"""
AccessControl: the owner of the role -> rights table.

grant() is the only mutation. It does a read-modify-write on the role's set,
so callers that grant from several threads must hold their own lock. Queries
built from an AccessControl copy the table and are unaffected by later grants.
"""

from collections.abc import Iterable
from typing import Self

from rightsgate.config import RolesConfig
from rightsgate.logging_config import get_logger
from rightsgate.query import Query
from rightsgate.right import Right

logger = get_logger(__name__)

AccessTable = dict[str, set[Right]]


class AccessControl:
    """Mutable role -> rights table with query factories."""

    def __init__(self, rights: AccessTable | None = None) -> None:
        self._rights: AccessTable = rights if rights is not None else {}

    def __repr__(self) -> str:
        return f"AccessControl(roles={sorted(self._rights)!r})"

    @classmethod
    def new(cls) -> Self:
        return cls()

    @classmethod
    def with_rights(cls, rights: AccessTable) -> Self:
        """Adopt an existing table as-is (not copied)."""
        return cls(rights)

    @classmethod
    def from_config(cls, config: RolesConfig) -> Self:
        """Build a table from role definitions.

        Raises:
            PatternError: If a definition holds a malformed pattern.
        """
        acl = cls()
        for role, patterns in config.roles.items():
            for pattern in patterns:
                acl.grant_pattern(role, pattern)
        logger.debug("Access table loaded from config", roles=len(config.roles))
        return acl

    def get_rights(self) -> AccessTable:
        """The live table. Callers should treat it as read-only."""
        return self._rights

    def grant(self, role: str, right: Right) -> None:
        """Give ``role`` the ``right``. Creates the role if needed; idempotent."""
        self._rights.setdefault(role, set()).add(right)
        logger.debug("Right granted", role=role, right=str(right))

    def grant_pattern(self, role: str, pattern: str) -> None:
        """grant() with the right given as ``action:possession/resource``.

        Raises:
            PatternError: If the pattern is malformed.
        """
        self.grant(role, Right.from_pattern(pattern))

    def can_role(self, role: str) -> Query:
        return Query([role], self._rights)

    def can_roles(self, roles: Iterable[str]) -> Query:
        """Query over several roles. Duplicates and unknown roles are harmless."""
        if isinstance(roles, str):
            roles = [roles]
        return Query(roles, self._rights)
