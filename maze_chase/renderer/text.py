"""Plain-text rendering of a session.

Walls, pickups and floor use their layout characters. The player is drawn as
``P`` and adversaries as ``A``; an adversary on the player's cell shows as
``X``.
"""

from typing import List

from maze_chase.grid import layout_rows
from maze_chase.state import State

PLAYER_CHAR = "P"
ADVERSARY_CHAR = "A"
CAUGHT_CHAR = "X"


def render_rows(state: State) -> List[str]:
    rows = [list(row) for row in layout_rows(state.grid)]
    for eid in state.roster:
        pos = state.position.get(eid)
        if pos is not None:
            rows[pos.y][pos.x] = ADVERSARY_CHAR
    player_pos = state.position.get(state.player_id)
    if player_pos is not None:
        occupied = rows[player_pos.y][player_pos.x] == ADVERSARY_CHAR
        rows[player_pos.y][player_pos.x] = CAUGHT_CHAR if occupied else PLAYER_CHAR
    return ["".join(row) for row in rows]


def render_text(state: State) -> str:
    header = f"score={state.score} turn={state.turn} status={state.status}"
    return "\n".join([header, *render_rows(state)])
