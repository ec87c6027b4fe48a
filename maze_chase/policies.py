"""Adversary steering policies.

A *policy* maps (state, adversary id, rng) -> :class:`Steer`, telling the
adversary system which way to face and whether to step this tick. Policies are
pure; the random source is handed in so seeded sessions replay exactly.

Neither built-in policy looks at the player. They are memoryless wanderers:
the only persistent input is the adversary's own facing.
"""

import random
from dataclasses import dataclass
from typing import Dict

from maze_chase.actions import MOVE_DIRECTIONS, OPPOSITE_DIRECTION, Direction
from maze_chase.grid import is_passable
from maze_chase.state import State
from maze_chase.types import EntityID, PolicyFn


@dataclass(frozen=True)
class Steer:
    """Policy decision for one adversary tick.

    Attributes:
        direction: Heading the adversary takes.
        advance: Step towards ``direction`` this tick if True; turn in place
            otherwise.
    """

    direction: Direction
    advance: bool = True


def _facing_is_blocked(state: State, eid: EntityID) -> bool:
    candidate = state.move_fn(state, eid, state.facing[eid])
    return not is_passable(state.grid, candidate)


def wander_policy(state: State, eid: EntityID, rng: random.Random) -> Steer:
    """Keep going straight; bounce off walls at random.

    When the next cell along the current facing is a wall the adversary picks
    a new facing uniformly from all four directions (possibly the blocked one
    again, possibly a reversal) and holds position this tick.
    """
    facing = state.facing[eid]
    if _facing_is_blocked(state, eid):
        return Steer(direction=rng.choice(MOVE_DIRECTIONS), advance=False)
    return Steer(direction=facing)


def no_reverse_wander_policy(
    state: State, eid: EntityID, rng: random.Random
) -> Steer:
    """Like :func:`wander_policy` but never picks the reverse heading."""
    facing = state.facing[eid]
    if _facing_is_blocked(state, eid):
        choices = [d for d in MOVE_DIRECTIONS if d != OPPOSITE_DIRECTION[facing]]
        return Steer(direction=rng.choice(choices), advance=False)
    return Steer(direction=facing)


POLICY_REGISTRY: Dict[str, PolicyFn] = {
    "wander": wander_policy,
    "no_reverse": no_reverse_wander_policy,
}
"""Registry of built-in policy names to callables."""
