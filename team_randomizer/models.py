"""Data types shared by the roster, partition and generator modules."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Outcome(Enum):
    """Result code returned by every mutating engine operation.

    Only ``SUCCESS`` is truthy, so callers that just need a yes/no answer
    can write ``if generator.add_player(name):``.
    """

    SUCCESS = "success"
    INVALID_NAME = "invalid_name"
    CAPACITY_REJECTED = "capacity_rejected"
    DUPLICATE_REJECTED = "duplicate_rejected"
    NOT_FOUND = "not_found"
    TRUNCATED = "truncated"
    PRECONDITION_FAILURE = "precondition_failure"

    def __bool__(self) -> bool:
        return self is Outcome.SUCCESS


@dataclass
class Team:
    """A generated team: its display name and its ordered members."""

    name: str
    members: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {'name': self.name, 'members': list(self.members)}
