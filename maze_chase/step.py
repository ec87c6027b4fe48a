"""State reducer and tick orchestration.

This module wires the systems together to implement a single *tick* given a
``Direction``. The exported :func:`step` is the only gameplay progression entry
point and is pure: it returns a *new* :class:`maze_chase.state.State`.

Ordering:

1. ``movement_system`` steps the player (a wall only turns it).
2. ``collectible_system`` eats whatever pickup lies under the player.
3. ``adversary_system`` moves every adversary in roster order.
4. ``collision_system`` ends the game on exact cell contact.
5. The turn counter is bumped.
"""

import random
from dataclasses import replace
from typing import Optional

from maze_chase.actions import Direction
from maze_chase.state import State
from maze_chase.systems.adversary import adversary_system
from maze_chase.systems.collectible import collectible_system
from maze_chase.systems.movement import movement_system
from maze_chase.systems.terminal import collision_system
from maze_chase.utils.terminal import is_playing


def tick_rng(state: State) -> random.Random:
    """Deterministic RNG for the current tick, derived from seed and turn.

    String seeds are hashed with SHA-512 by ``random``, so the stream is
    stable across interpreter versions and processes.
    """
    base_seed = state.seed if state.seed is not None else 0
    return random.Random(f"{base_seed}:{state.turn}")


def step(
    state: State, direction: Direction, rng: Optional[random.Random] = None
) -> State:
    """Advance the session by one tick.

    Args:
        state (State): Previous immutable session state.
        direction (Direction): Player input for this tick.
        rng (random.Random | None): Random source for adversary decisions.
            Defaults to :func:`tick_rng` so seeded sessions replay exactly.

    Returns:
        State: Next state snapshot. A state that is not ``PLAYING`` is returned
            unchanged (input before start or after game over is ignored).

    Raises:
        ValueError: If ``direction`` is not a cardinal direction or the state
            has no player.
    """
    if not is_playing(state):
        return state

    direction = Direction(direction)
    player_id = state.player_id
    if rng is None:
        rng = tick_rng(state)

    state = movement_system(state, player_id, direction)
    state = collectible_system(state, player_id)
    state = adversary_system(state, rng)
    state = collision_system(state, player_id)
    return replace(state, turn=state.turn + 1)
