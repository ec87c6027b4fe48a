"""Grid math helpers.

Pure coordinate arithmetic used by the move functions. Nothing here looks at
cell contents; passability lives in :mod:`maze_chase.grid`.
"""

from maze_chase.actions import DIRECTION_DELTAS, Direction
from maze_chase.components import Position


def offset_position(pos: Position, direction: Direction) -> Position:
    """Neighbor of ``pos`` one cell towards ``direction`` (may be off-grid)."""
    dx, dy = DIRECTION_DELTAS[direction]
    return Position(pos.x + dx, pos.y + dy)


def clamp_position(pos: Position, width: int, height: int) -> Position:
    """Pin a coordinate to the grid rectangle."""
    return Position(min(max(pos.x, 0), width - 1), min(max(pos.y, 0), height - 1))


def wrap_position(pos: Position, width: int, height: int) -> Position:
    """Toroidal wrap for coordinates (used by tunnel movement)."""
    return Position(pos.x % width, pos.y % height)
