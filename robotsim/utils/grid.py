"""
Grid helpers shared by the motion commands.
"""

import numpy as np

from robotsim.protocol.types import Direction, Position

# Unit step per facing, indexed by Direction.value (NORTH, EAST, SOUTH, WEST)
STEP_VECTORS = np.array(
    [
        [0, 1],
        [1, 0],
        [0, -1],
        [-1, 0],
    ],
    dtype=np.int64,
)


def within_table(xy, grid_size: int) -> bool:
    """True when every coordinate lies in [0, grid_size - 1]."""
    arr = np.asarray(xy, dtype=np.int64)
    return bool(np.all((arr >= 0) & (arr < grid_size)))


def step(position: Position, direction: Direction) -> Position:
    """Position one unit ahead of ``position`` when facing ``direction``."""
    nxt = np.asarray(position, dtype=np.int64) + STEP_VECTORS[direction.value]
    return Position(int(nxt[0]), int(nxt[1]))
