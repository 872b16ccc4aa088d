"""
Motion commands: MOVE, LEFT and RIGHT.
"""

from robotsim.commands.base import KeywordCommand, Transition
from robotsim.protocol.types import CommandOutcome
from robotsim.server.command_registry import register_command
from robotsim.server.state import RobotState
from robotsim.utils.grid import step


@register_command("MOVE")
class MoveCommand(KeywordCommand):
    """Step one unit forward; a step off the table is discarded, not clamped."""
    __slots__ = ()

    def do_execute(self, state: RobotState) -> Transition:
        target = step(state.position, state.direction)
        if not self.on_table(target):
            return state, CommandOutcome.failed("Move would fall off table; command ignored.")
        return state.moved_to(target), CommandOutcome.ok(f"Moved to {target}.")


@register_command("LEFT")
class LeftCommand(KeywordCommand):
    """Rotate 90 degrees anticlockwise in place."""
    __slots__ = ()

    def do_execute(self, state: RobotState) -> Transition:
        direction = state.direction.rotate_left()
        return state.facing(direction), CommandOutcome.ok(f"Rotated left to {direction.name}.")


@register_command("RIGHT")
class RightCommand(KeywordCommand):
    """Rotate 90 degrees clockwise in place."""
    __slots__ = ()

    def do_execute(self, state: RobotState) -> Transition:
        direction = state.direction.rotate_right()
        return state.facing(direction), CommandOutcome.ok(f"Rotated right to {direction.name}.")
