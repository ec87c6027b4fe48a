"""Adversary system.

Every adversary acts once per tick in ``State.roster`` order: the session's
``policy_fn`` picks a :class:`maze_chase.policies.Steer`, then the adversary
either steps through the movement system or just turns in place.
"""

import random
from dataclasses import replace

from maze_chase.state import State
from maze_chase.systems.movement import movement_system


def adversary_system(state: State, rng: random.Random) -> State:
    """Advance all adversaries for the current tick."""
    for adversary_id in state.roster:
        if adversary_id not in state.entity or adversary_id not in state.adversary:
            continue
        steer = state.policy_fn(state, adversary_id, rng)
        if steer.advance:
            state = movement_system(state, adversary_id, steer.direction)
        elif state.facing.get(adversary_id) != steer.direction:
            state = replace(
                state, facing=state.facing.set(adversary_id, steer.direction)
            )
    return state
