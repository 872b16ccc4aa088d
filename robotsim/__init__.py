"""
robotsim Python Package

A toy robot on a square table, driven by short textual commands.

Key components:
- RobotSimulator: command interpreter owning one robot's state
- CommandOutcome: result returned for every processed command
- Direction, Position: value types used in outcomes and reports
"""

from ._version import __version__
from .protocol.types import CommandOutcome, Direction, Position
from .server.simulator import RobotSimulator
from .server.state import RobotState

__all__ = [
    "__version__",
    "RobotSimulator",
    "RobotState",
    "CommandOutcome",
    "Direction",
    "Position",
]
