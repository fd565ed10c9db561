"""
Bulk rights checks over lists of pattern strings.

Patterns are evaluated in order and evaluation stops at the first right the
query does not hold. The result records which patterns were looked at, so a
denial can be reported with its context.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from rightsgate.errors import UnauthorizedError
from rightsgate.logging_config import get_logger
from rightsgate.query import Query
from rightsgate.right import Right

logger = get_logger(__name__)


@dataclass(frozen=True)
class RightsCheck:
    """Outcome of check_rights()."""

    allowed: bool
    checked: tuple[str, ...] = ()
    denied: str | None = None

    def __bool__(self) -> bool:
        return self.allowed


def check_rights(query: Query, patterns: Iterable[str]) -> RightsCheck:
    """Check every pattern against ``query``, stopping at the first denial.

    Args:
        query: The roles being authorized.
        patterns: Rights in ``action:possession/resource`` form.

    Returns:
        RightsCheck with ``allowed`` False and ``denied`` set to the failing
        pattern on denial; ``checked`` includes that pattern.

    Raises:
        PatternError: On the first malformed pattern reached.
    """
    checked: list[str] = []
    for pattern in patterns:
        right = Right.from_pattern(pattern)
        checked.append(pattern)
        if not query.execute_right(right):
            logger.debug("Rights check failed", roles=list(query.roles), denied=pattern)
            return RightsCheck(allowed=False, checked=tuple(checked), denied=pattern)

    return RightsCheck(allowed=True, checked=tuple(checked))


def require_rights(query: Query, patterns: Iterable[str]) -> None:
    """Raising form of check_rights().

    Raises:
        UnauthorizedError: On the first pattern not held.
        PatternError: On the first malformed pattern reached.
    """
    result = check_rights(query, patterns)
    if not result.allowed:
        raise UnauthorizedError(result.denied, result.checked)
