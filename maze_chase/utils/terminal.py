"""Terminal condition helper predicates."""

from typing import List

from maze_chase.components import Position
from maze_chase.state import State
from maze_chase.types import EntityID, GameStatus


def is_playing(state: State) -> bool:
    """Return True if the session accepts moves."""
    return state.status == GameStatus.PLAYING


def is_terminal_state(state: State) -> bool:
    """Return True once an adversary has caught the player."""
    return state.status == GameStatus.OVER


def adversaries_at(state: State, pos: Position) -> List[EntityID]:
    """Adversary ids standing on ``pos``, in roster order."""
    return [eid for eid in state.roster if state.position.get(eid) == pos]
