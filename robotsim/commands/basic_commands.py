"""
Basic Commands
Contains PLACE, the only way to put the robot on the table
"""

import logging
from typing import List, Optional, Tuple

from robotsim.commands.base import CommandBase, Transition, between_len
from robotsim.protocol import wire
from robotsim.protocol.types import CommandOutcome, Direction, Position
from robotsim.server.command_registry import register_command
from robotsim.server.state import RobotState
from robotsim.utils.errors import CommandParseError

logger = logging.getLogger(__name__)


@register_command("PLACE")
class PlaceCommand(CommandBase):
    """
    Put the robot at X,Y facing DIRECTION.

    The direction may be omitted once the robot has been placed before; the
    current facing is then kept. Checks run in a fixed order: coordinates
    parse, coordinates on the table, direction token valid, direction present
    (or previously placed).
    """
    requires_placement = False
    takes_arguments = True

    __slots__ = ("x", "y", "direction_token")

    def __init__(self):
        super().__init__()
        self.x: int | None = None
        self.y: int | None = None
        self.direction_token: str | None = None

    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Parse PLACE command parameters.

        Format: PLACE|x|y[|direction]
        Example: ['PLACE', '1', '2', 'NORTH']
        """
        if parts[0].upper() != "PLACE":
            return False, None
        between_len(parts, 3, 4, "PLACE")

        self.x = wire.parse_coordinate(parts[1])
        self.y = wire.parse_coordinate(parts[2])
        if self.x is None or self.y is None:
            raise CommandParseError("Invalid PLACE coordinates.")

        self.direction_token = parts[3] if len(parts) == 4 else None
        return True, None

    def do_execute(self, state: RobotState) -> Transition:
        assert self.x is not None and self.y is not None
        position = Position(self.x, self.y)

        if not self.on_table(position):
            return state, CommandOutcome.failed(
                "PLACE would put robot outside the table; command discarded."
            )

        if self.direction_token is not None:
            direction = Direction.parse(self.direction_token)
            if direction is None:
                return state, CommandOutcome.failed("Invalid PLACE direction.")
        elif state.placed:
            direction = state.direction
        else:
            return state, CommandOutcome.failed(
                "PLACE without direction ignored until robot has been placed with direction."
            )

        self.log_debug("placing at %s facing %s", position, direction.name)
        return (
            state.placed_at(position, direction),
            CommandOutcome.ok(f"Placed at {position} facing {direction.name}."),
        )
