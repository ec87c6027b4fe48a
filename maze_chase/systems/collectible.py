"""Pickup system.

Eats the pellet or power pellet under the player and adds its value to the
score. A cell can only pay out once per session: the grid remembers it as
eaten until the next reset.
"""

from dataclasses import replace

from maze_chase.grid import consume_pickup
from maze_chase.state import State
from maze_chase.types import EntityID


def collectible_system(state: State, entity_id: EntityID) -> State:
    """Collect the pickup at ``entity_id``'s cell, if any.

    Returns:
        State: Unchanged if the cell held nothing; otherwise with the grid
        updated and ``score`` increased.
    """
    entity_pos = state.position.get(entity_id)
    if entity_pos is None:
        return state

    grid, value = consume_pickup(state.grid, entity_pos)
    if value == 0:
        return state
    return replace(state, grid=grid, score=state.score + value)
