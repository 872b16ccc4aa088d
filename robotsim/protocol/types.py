"""
Type definitions for the robotsim command protocol.

Defines the value types shared by the interpreter, the commands and callers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, TypedDict


class Direction(Enum):
    """Facing on the table, ordered clockwise."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotate_left(self) -> "Direction":
        return Direction((self.value - 1) % 4)

    def rotate_right(self) -> "Direction":
        return Direction((self.value + 1) % 4)

    @classmethod
    def parse(cls, token: str | None) -> "Direction | None":
        """Case-insensitive lookup by name; None for anything unrecognised."""
        if token is None:
            return None
        name = token.strip().upper()
        if not name:
            return None
        return cls.__members__.get(name)

    def __str__(self) -> str:
        return self.name


class Position(NamedTuple):
    """Immutable table coordinate."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


class OutcomeDict(TypedDict):
    """Response body shape relayed by transports."""
    success: bool
    message: str
    report: str | None


@dataclass(frozen=True)
class CommandOutcome:
    """
    Result of processing one command.

    ``report`` is only set for a successful REPORT.
    """
    success: bool
    message: str
    report: str | None = None

    @classmethod
    def ok(cls, message: str, report: str | None = None) -> "CommandOutcome":
        return cls(True, message, report)

    @classmethod
    def failed(cls, message: str) -> "CommandOutcome":
        return cls(False, message)

    def as_dict(self) -> OutcomeDict:
        return {"success": self.success, "message": self.message, "report": self.report}
