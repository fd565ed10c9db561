"""
rightsgate: role-based access control decisions over an in-memory rights table.

Build an AccessControl with grants, then ask a Query built from it whether
one or more roles hold a given (action, possession, resource) right.
"""

from rightsgate.access_control import AccessControl, AccessTable
from rightsgate.errors import PatternError, RightsError, UnauthorizedError
from rightsgate.guard import RightsCheck, check_rights, require_rights
from rightsgate.query import Query
from rightsgate.right import Right
from rightsgate.vocabulary import (
    Action,
    ActionLike,
    CustomAction,
    CustomPossession,
    Possession,
    PossessionLike,
    parse_action,
    parse_possession,
)

__all__ = [
    "AccessControl",
    "AccessTable",
    "Action",
    "ActionLike",
    "CustomAction",
    "CustomPossession",
    "PatternError",
    "Possession",
    "PossessionLike",
    "Query",
    "Right",
    "RightsCheck",
    "RightsError",
    "UnauthorizedError",
    "check_rights",
    "parse_action",
    "parse_possession",
    "require_rights",
]
