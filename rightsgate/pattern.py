"""
Compact right patterns: ``<action>:<possession>/<resource>``.

Each segment is one or more word characters (letters, digits, underscore).
The whole string must match; surrounding whitespace, extra segments or empty
segments are rejected.
"""

import re

from rightsgate.errors import PatternError

PATTERN_RE = re.compile(r"(\w+):(\w+)/(\w+)")


def parse_pattern(pattern: str) -> tuple[str, str, str]:
    """Split a pattern into its (action, possession, resource) tokens.

    Raises:
        PatternError: If ``pattern`` is not a string of the exact three-segment shape.
    """
    if not isinstance(pattern, str):
        raise PatternError(pattern)
    match = PATTERN_RE.fullmatch(pattern)
    if match is None:
        raise PatternError(pattern)
    action, possession, resource = match.groups()
    return action, possession, resource


def is_pattern(pattern: str) -> bool:
    """Check whether a string is a well-formed pattern."""
    return isinstance(pattern, str) and PATTERN_RE.fullmatch(pattern) is not None


def format_pattern(action: object, possession: object, resource: str) -> str:
    """Render tokens back to pattern form."""
    return f"{action}:{possession}/{resource}"
