from __future__ import annotations

from dataclasses import dataclass, field, replace

from robotsim.protocol.types import Direction, Position


@dataclass(frozen=True)
class RobotState:
    """
    Snapshot of the single robot owned by a simulator.

    Transitions build a new snapshot; the simulator swaps it in wholesale,
    so a rejected command can never leave a half-applied update behind.
    ``position`` and ``direction`` are meaningless while ``placed`` is False.
    """
    placed: bool = False
    position: Position = field(default_factory=lambda: Position(0, 0))
    direction: Direction = Direction.NORTH

    def placed_at(self, position: Position, direction: Direction) -> RobotState:
        return replace(self, placed=True, position=position, direction=direction)

    def moved_to(self, position: Position) -> RobotState:
        return replace(self, position=position)

    def facing(self, direction: Direction) -> RobotState:
        return replace(self, direction=direction)


INITIAL_STATE = RobotState()
