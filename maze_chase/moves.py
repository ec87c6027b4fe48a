"""Built-in movement candidate functions.

Each *move function* maps (state, entity id, direction) -> the ``Position``
the entity would occupy after one step. The movement system then checks the
candidate against the maze. Keeping this indirection lets a session swap in
alternative geometry without touching the systems.

Contract (``MoveFn``):

* Must return an in-bounds ``Position``.
* Should not mutate ``State``.
* Returning the current position means the step is a no-op (not a block).
"""

from typing import Dict

from maze_chase.actions import Direction
from maze_chase.components import Position
from maze_chase.state import State
from maze_chase.types import EntityID, MoveFn
from maze_chase.utils.grid import clamp_position, offset_position, wrap_position


def default_move_fn(state: State, eid: EntityID, direction: Direction) -> Position:
    """Single-cell cardinal step clamped to the grid.

    Stepping past an edge yields the current cell, so the entity stays put
    without being treated as blocked.
    """
    pos = state.position[eid]
    return clamp_position(offset_position(pos, direction), state.width, state.height)


def wrap_around_move_fn(
    state: State, eid: EntityID, direction: Direction
) -> Position:
    """Cardinal step with toroidal wrapping (side tunnels lead across)."""
    pos = state.position[eid]
    return wrap_position(offset_position(pos, direction), state.width, state.height)


# Move function registry for per-config assignment
MOVE_FN_REGISTRY: Dict[str, MoveFn] = {
    "default": default_move_fn,
    "wrap": wrap_around_move_fn,
}
"""Registry of built-in movement function names to callables."""
