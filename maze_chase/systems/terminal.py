"""Terminal condition system.

The only way a session ends is contact: an adversary standing on exactly the
player's cell once every adversary has moved. Proximity does not count.
"""

from dataclasses import replace

from maze_chase.state import State
from maze_chase.types import EntityID, GameStatus
from maze_chase.utils.terminal import adversaries_at, is_playing


def collision_system(state: State, player_id: EntityID) -> State:
    """Set ``status`` to ``OVER`` if any adversary shares the player's cell."""
    if not is_playing(state):
        return state

    player_pos = state.position.get(player_id)
    if player_pos is None:
        return state

    if adversaries_at(state, player_pos):
        return replace(state, status=GameStatus.OVER)
    return state
