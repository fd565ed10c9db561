"""
Action and possession vocabularies.

Both are a closed StrEnum plus an open "custom" arm carrying the raw token,
so callers can use domain-specific verbs and ownership qualifiers without
extending this module. Token mapping is exact and case-sensitive: "read" is
Action.READ, "Read" is CustomAction("Read").
"""

from dataclasses import dataclass
from enum import StrEnum


class Action(StrEnum):
    """The built-in verbs."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class CustomAction:
    """Any verb outside the built-in set."""

    name: str

    def __str__(self) -> str:
        return self.name


class Possession(StrEnum):
    """The built-in ownership qualifiers."""

    OWN = "own"
    ANY = "any"


@dataclass(frozen=True, slots=True)
class CustomPossession:
    """Any ownership qualifier outside the built-in set."""

    name: str

    def __str__(self) -> str:
        return self.name


ActionLike = Action | CustomAction
PossessionLike = Possession | CustomPossession

_ACTIONS: dict[str, Action] = {a.value: a for a in Action}
_POSSESSIONS: dict[str, Possession] = {p.value: p for p in Possession}


def parse_action(value: str | ActionLike) -> ActionLike:
    """Resolve an action token, falling back to CustomAction. Never fails."""
    if isinstance(value, (Action, CustomAction)):
        return value
    action = _ACTIONS.get(value)
    if action is None:
        return CustomAction(str(value))
    return action


def parse_possession(value: str | PossessionLike) -> PossessionLike:
    """Resolve a possession token, falling back to CustomPossession. Never fails."""
    if isinstance(value, (Possession, CustomPossession)):
        return value
    possession = _POSSESSIONS.get(value)
    if possession is None:
        return CustomPossession(str(value))
    return possession
