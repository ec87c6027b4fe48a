"""Single-step movement system.

Resolves one cardinal step for any entity:

1. The session's ``move_fn`` proposes a candidate cell (clamped to the grid
   by default, so walking off an edge is a no-op).
2. A ``WALL`` candidate blocks the step. The entity stays where it is; the
   player still turns to face the requested direction while adversaries keep
   their previous facing (their policy repicks on the next tick).
3. Any other candidate is entered and the facing follows the direction.
"""

from dataclasses import dataclass, replace

from maze_chase.actions import Direction
from maze_chase.components import Position
from maze_chase.grid import is_passable
from maze_chase.state import State
from maze_chase.types import EntityID


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a step attempt.

    Attributes:
        position: Position after the attempt.
        facing: Facing after the attempt.
        blocked: True if a wall stopped the step.
    """

    position: Position
    facing: Direction
    blocked: bool


def attempt_step(state: State, entity_id: EntityID, direction: Direction) -> MoveResult:
    """Compute the outcome of stepping ``entity_id`` towards ``direction``.

    Args:
        state (State): Current state.
        entity_id (EntityID): Player or adversary id.
        direction (Direction): Requested heading.

    Returns:
        MoveResult: New position / facing; ``state`` is not modified.
    """
    pos = state.position[entity_id]
    candidate = state.move_fn(state, entity_id, direction)
    if not is_passable(state.grid, candidate):
        facing = state.facing[entity_id] if entity_id in state.adversary else direction
        return MoveResult(position=pos, facing=facing, blocked=True)
    return MoveResult(position=candidate, facing=direction, blocked=False)


def movement_system(state: State, entity_id: EntityID, direction: Direction) -> State:
    """Apply :func:`attempt_step` to the state.

    Returns the same ``State`` object if neither position nor facing changed.
    """
    result = attempt_step(state, entity_id, direction)
    if (
        result.position == state.position[entity_id]
        and result.facing == state.facing.get(entity_id)
    ):
        return state
    return replace(
        state,
        position=state.position.set(entity_id, result.position),
        facing=state.facing.set(entity_id, result.facing),
    )
