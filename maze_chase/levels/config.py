"""Session configuration.

A :class:`GameConfig` is everything needed to (re)build a session: the maze
characters, spawn points for the player and the adversary roster, and the
pluggable movement / policy functions. Configs are frozen so one instance can
seed any number of new games.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from maze_chase.actions import Direction
from maze_chase.components import Position
from maze_chase.moves import MOVE_FN_REGISTRY, default_move_fn
from maze_chase.policies import POLICY_REGISTRY, wander_policy
from maze_chase.types import MoveFn, PolicyFn


@dataclass(frozen=True)
class AdversarySpec:
    """Spawn description of one roster member.

    Attributes:
        position: Spawn cell.
        facing: Initial heading.
        tag: Cosmetic identity label.
    """

    position: Position
    facing: Direction
    tag: str = ""


@dataclass(frozen=True)
class GameConfig:
    layout: Tuple[str, ...]
    player_spawn: Position
    player_facing: Direction = Direction.LEFT
    adversaries: Tuple[AdversarySpec, ...] = ()
    move_fn: MoveFn = field(default=default_move_fn)
    policy_fn: PolicyFn = field(default=wander_policy)
    seed: Optional[int] = None


def make_config(
    layout: Sequence[str],
    player_spawn: Tuple[int, int],
    player_facing: Direction = Direction.LEFT,
    adversaries: Sequence[Tuple[int, int, Direction, str]] = (),
    move_fn_name: str = "default",
    policy_name: str = "wander",
    seed: Optional[int] = None,
) -> GameConfig:
    """Build a :class:`GameConfig` from plain values and registry names.

    Raises:
        ValueError: If a registry name is unknown.
    """
    if move_fn_name not in MOVE_FN_REGISTRY:
        raise ValueError(f"Unknown move function: {move_fn_name}")
    if policy_name not in POLICY_REGISTRY:
        raise ValueError(f"Unknown policy: {policy_name}")
    return GameConfig(
        layout=tuple(layout),
        player_spawn=Position(*player_spawn),
        player_facing=Direction(player_facing),
        adversaries=tuple(
            AdversarySpec(position=Position(x, y), facing=Direction(facing), tag=tag)
            for x, y, facing, tag in adversaries
        ),
        move_fn=MOVE_FN_REGISTRY[move_fn_name],
        policy_fn=POLICY_REGISTRY[policy_name],
        seed=seed,
    )
