"""
Commands package for robotsim.

Every non-base module here is imported by command discovery; classes
decorated with @register_command become available to the simulator.
"""

from robotsim.commands.base import CommandBase, CommandContext, KeywordCommand

__all__ = [
    "CommandBase",
    "CommandContext",
    "KeywordCommand",
]
