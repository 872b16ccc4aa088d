"""
Base abstractions and helpers for command implementations.
"""
from dataclasses import dataclass
from typing import Tuple, Optional, Any, List, ClassVar
from abc import ABC, abstractmethod
import logging

from robotsim.config import GRID_SIZE, TRACE
from robotsim.protocol.types import CommandOutcome, Position
from robotsim.server.state import RobotState
from robotsim.utils.errors import CommandParseError
from robotsim.utils.grid import within_table


logger = logging.getLogger(__name__)

# Result of a command: the state to commit (ignored on failure) and the outcome
Transition = Tuple[RobotState, CommandOutcome]


# ----- Shared context and small utilities -----

@dataclass
class CommandContext:
    """Shared execution context for commands."""
    grid_size: int = GRID_SIZE


def expect_len(parts: List[str], n: int, cmd: str) -> None:
    """Ensure parts list has exactly n elements."""
    if len(parts) != n:
        raise CommandParseError(f"{cmd} requires {n-1} parameters, got {len(parts)-1}")


def between_len(parts: List[str], lo: int, hi: int, cmd: str) -> None:
    """Ensure parts list has between lo and hi elements (inclusive)."""
    if not lo <= len(parts) <= hi:
        raise CommandParseError(f"{cmd} requires {lo-1} to {hi-1} parameters, got {len(parts)-1}")


class CommandBase(ABC):
    """
    Reusable base for commands with shared lifecycle and logging helpers.

    A command instance handles exactly one processed command: match() parses
    its arguments, bind() supplies the table context and execute() computes
    the transition from the current state. Commands never mutate the state
    they are given.
    """
    # Set by @register_command decorator
    _registered_name: ClassVar[str] = ""

    # Rejected with "not yet placed" until the robot has been placed
    requires_placement: ClassVar[bool] = True

    # Recognised by argument shape rather than by bare keyword
    takes_arguments: ClassVar[bool] = False

    __slots__ = ("is_valid", "error_message", "grid_size")

    def __init__(self) -> None:
        self.is_valid: bool = True
        self.error_message: str = ""
        self.grid_size: int = GRID_SIZE

    @property
    def name(self) -> str:
        return self._registered_name or type(self).__name__

    # Logging helpers (uniform, include command identity)
    def log_trace(self, msg: str, *args: Any) -> None:
        logger.log(TRACE, "[%s] " + msg, self.name, *args)

    def log_debug(self, msg: str, *args: Any) -> None:
        logger.debug("[%s] " + msg, self.name, *args)

    def log_info(self, msg: str, *args: Any) -> None:
        logger.info("[%s] " + msg, self.name, *args)

    def log_warning(self, msg: str, *args: Any) -> None:
        logger.warning("[%s] " + msg, self.name, *args)

    def log_error(self, msg: str, *args: Any) -> None:
        logger.error("[%s] " + msg, self.name, *args)

    def bind(self, context: CommandContext) -> None:
        """Bind execution context. The simulator calls this before execute()."""
        self.grid_size = context.grid_size

    def on_table(self, position: Position) -> bool:
        return within_table(position, self.grid_size)

    @abstractmethod
    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Check if this command can handle the given message parts.

        Args:
            parts: Pre-split message parts (e.g., ['PLACE', '1', '2', 'NORTH'])

        Returns:
            Tuple of (can_handle, error_message)
            - can_handle: True if this command can process the message
            - error_message: Optional error message if the message is invalid
        """
        raise NotImplementedError

    def match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Wrapper that guards subclass do_match() to avoid propagating exceptions.
        Centralizes try/except so subclasses don't repeat it.
        """
        try:
            return self.do_match(parts)
        except Exception as e:
            # Registry/simulator log the rejection
            self.fail(str(e))
            return False, str(e)

    @abstractmethod
    def do_execute(self, state: RobotState) -> Transition:
        """Compute the transition from ``state``; subclasses return a new state."""
        raise NotImplementedError

    def execute(self, state: RobotState) -> Transition:
        """
        Template-method wrapper around do_execute().

        Invalid commands and failed outcomes always hand back the input state.
        """
        if not self.is_valid:
            return state, CommandOutcome.failed(self.error_message or "Invalid command.")
        self.log_trace("execute start placed=%s", state.placed)
        new_state, outcome = self.do_execute(state)
        if not outcome.success:
            self.log_debug("rejected: %s", outcome.message)
            return state, outcome
        self.log_trace("execute ok: %s", outcome.message)
        return new_state, outcome

    # ----- lifecycle helpers -----

    def fail(self, message: str) -> None:
        """Mark command as invalid with an error message."""
        self.is_valid = False
        self.error_message = message


class KeywordCommand(CommandBase):
    """
    Base class for single-word commands (MOVE, LEFT, RIGHT, REPORT).

    They accept no parameters and are matched on the whole trimmed command.
    """

    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        if parts[0].upper() != self.name:
            return False, None
        expect_len(parts, 1, self.name)
        return True, None
