"""
Robot simulator: the command interpreter and state machine.

A simulator owns exactly one robot on a square table and turns each textual
command into a CommandOutcome. It performs no I/O and holds no locks; callers
sharing an instance across threads must serialise calls to process().
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Union

from robotsim import config as cfg
from robotsim.commands.base import CommandBase, CommandContext
from robotsim.protocol import wire
from robotsim.protocol.types import CommandOutcome
from robotsim.server.command_registry import (
    create_command_from_parts,
    get_command_class,
    list_registered_commands,
)
from robotsim.server.state import INITIAL_STATE, RobotState

logger = logging.getLogger(__name__)

EMPTY_COMMAND = CommandOutcome.failed("Empty command.")
NOT_PLACED = CommandOutcome.failed("Robot not yet placed. Commands ignored until a valid PLACE.")
INVALID_COMMAND = CommandOutcome.failed("Invalid command.")
INTERNAL_ERROR = CommandOutcome.failed("Internal error while processing command.")

# A table entry either runs a command class or rejects with a fixed outcome
TransitionEntry = Union[type[CommandBase], CommandOutcome]
TransitionTable = dict[tuple[bool, str], TransitionEntry]


def build_transition_table() -> TransitionTable:
    """
    Map (placed, KEYWORD) to what happens for every single-word command.

    PLACE is not in the table: it is recognised by argument shape before any
    keyword lookup. Keys missing from the table fall back to
    default_transition().
    """
    table: TransitionTable = {}
    for name in list_registered_commands():
        command_class = get_command_class(name)
        if command_class is None or command_class.takes_arguments:
            continue
        table[(True, name)] = command_class
        table[(False, name)] = NOT_PLACED if command_class.requires_placement else command_class
    return table


def default_transition(placed: bool) -> CommandOutcome:
    return INVALID_COMMAND if placed else NOT_PLACED


class RobotSimulator:
    """
    Command interpreter for one robot on an N x N table.

    process() never raises for bad command text: every rejection is a failed
    CommandOutcome and leaves the robot exactly as it was.
    """

    def __init__(self, grid_size: int | None = None):
        size = cfg.GRID_SIZE if grid_size is None else int(grid_size)
        if size < 1:
            raise ValueError(f"grid_size must be >= 1, got {size}")
        self._context = CommandContext(grid_size=size)
        self._table = build_transition_table()
        self._state: RobotState = INITIAL_STATE
        logger.debug("Simulator ready: grid %dx%d, %d keyword transitions", size, size, len(self._table))

    @property
    def grid_size(self) -> int:
        return self._context.grid_size

    @property
    def state(self) -> RobotState:
        """Current robot snapshot (immutable)."""
        return self._state

    @property
    def placed(self) -> bool:
        return self._state.placed

    def reset(self) -> None:
        """Return the robot to the initial, unplaced state."""
        self._state = INITIAL_STATE
        logger.debug("Simulator reset")

    def transition_for(self, placed: bool, keyword: str) -> TransitionEntry:
        return self._table.get((placed, keyword), default_transition(placed))

    def process(self, raw: str | None) -> CommandOutcome:
        """Process one raw command and return its outcome."""
        if raw is None or not raw.strip():
            logger.debug("Rejected empty command")
            return EMPTY_COMMAND

        cmd = raw.strip()
        try:
            outcome = self._dispatch(cmd)
        except Exception:
            logger.exception("Error while processing command '%s'", cmd)
            return INTERNAL_ERROR

        logger.debug(
            "Processed '%s' => success=%s message='%s'", cmd, outcome.success, outcome.message
        )
        return outcome

    def process_batch(self, commands: Iterable[str | None]) -> list[CommandOutcome]:
        """Process commands in order; later commands see earlier commands' effects."""
        return [self.process(c) for c in commands]

    # ----- internals -----

    def _dispatch(self, cmd: str) -> CommandOutcome:
        request = wire.parse_place(cmd)
        if request is not None:
            parts = [wire.PLACE_KEYWORD, request.x_token, request.y_token]
            if request.direction_token is not None:
                parts.append(request.direction_token)
            command, error = create_command_from_parts(parts)
            if command is None:
                return CommandOutcome.failed(error or "Invalid command.")
            return self._run(command)

        keyword = wire.normalize_keyword(cmd)
        entry = self.transition_for(self._state.placed, keyword)
        if isinstance(entry, CommandOutcome):
            return entry

        command = entry()
        can_handle, error = command.match([keyword])
        if not can_handle:
            return CommandOutcome.failed(error or "Invalid command.")
        return self._run(command)

    def _run(self, command: CommandBase) -> CommandOutcome:
        command.bind(self._context)
        new_state, outcome = command.execute(self._state)
        if outcome.success:
            self._state = new_state
        return outcome
