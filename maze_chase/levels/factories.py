"""Session factories.

Turns a :class:`maze_chase.levels.config.GameConfig` into a fresh immutable
``State`` ready for play. Every call derives the grid from the config's layout
characters, so a new session can never inherit pickups eaten in an earlier one.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pyrsistent import pmap, pvector

from maze_chase.actions import Direction
from maze_chase.components import (
    Adversary,
    Appearance,
    AppearanceName,
    Player,
    Position,
)
from maze_chase.entity import Entity, EntityIDAllocator
from maze_chase.grid import MazeGrid, is_in_bounds, parse_layout
from maze_chase.levels.config import GameConfig
from maze_chase.state import State
from maze_chase.types import EntityID, GameStatus


def _check_spawn(grid: MazeGrid, pos: Position, what: str) -> None:
    if not is_in_bounds(grid, pos):
        raise ValueError(
            f"{what} spawn {(pos.x, pos.y)} outside grid {grid.width}x{grid.height}"
        )


def new_state(
    config: GameConfig,
    seed: Optional[int] = None,
    status: GameStatus = GameStatus.PLAYING,
) -> State:
    """Build the initial session state for ``config``.

    Args:
        config: Session configuration.
        seed: Overrides ``config.seed`` when given.
        status: Initial lifecycle phase (``PLAYING`` for a started game).

    Raises:
        ValueError: If the layout is malformed or a spawn lies outside the grid.
    """
    grid = parse_layout(config.layout)
    ids = EntityIDAllocator()

    entity: Dict[EntityID, Entity] = {}
    position: Dict[EntityID, Position] = {}
    facing: Dict[EntityID, Direction] = {}
    appearance: Dict[EntityID, Appearance] = {}
    adversary: Dict[EntityID, Adversary] = {}
    roster: List[EntityID] = []

    _check_spawn(grid, config.player_spawn, "Player")
    player_id = ids.new_entity_id()
    entity[player_id] = Entity()
    position[player_id] = config.player_spawn
    facing[player_id] = config.player_facing
    appearance[player_id] = Appearance(name=AppearanceName.PLAYER)

    for spec in config.adversaries:
        _check_spawn(grid, spec.position, "Adversary")
        eid = ids.new_entity_id()
        entity[eid] = Entity()
        position[eid] = spec.position
        facing[eid] = spec.facing
        appearance[eid] = Appearance(name=AppearanceName.ADVERSARY, tag=spec.tag)
        adversary[eid] = Adversary()
        roster.append(eid)

    return State(
        grid=grid,
        move_fn=config.move_fn,
        policy_fn=config.policy_fn,
        entity=pmap(entity),
        player=pmap({player_id: Player()}),
        adversary=pmap(adversary),
        appearance=pmap(appearance),
        position=pmap(position),
        facing=pmap(facing),
        roster=pvector(roster),
        status=status,
        seed=seed if seed is not None else config.seed,
    )
