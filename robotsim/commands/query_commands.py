"""
Query commands that report robot state without changing it.
"""

from robotsim.commands.base import KeywordCommand, Transition
from robotsim.protocol import wire
from robotsim.protocol.types import CommandOutcome
from robotsim.server.command_registry import register_command
from robotsim.server.state import RobotState


@register_command("REPORT")
class ReportCommand(KeywordCommand):
    """Report position and facing as X,Y,DIRECTION."""
    __slots__ = ()

    def do_execute(self, state: RobotState) -> Transition:
        report = wire.format_report(state.position, state.direction)
        self.log_debug("report %s", report)
        return state, CommandOutcome.ok("REPORT", report=report)
