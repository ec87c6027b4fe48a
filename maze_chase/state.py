"""Core immutable session ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a whole
game session at a single tick. The reducer in :mod:`maze_chase.step` takes a
previous ``State`` plus a ``Direction`` and returns a *new* ``State``; nothing
is mutated in place. Replacing the controller's reference is therefore the
only way session data changes, which makes a new game atomic.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
  ``EntityID``. Absence of a key means the entity lacks that component.
* ``roster`` fixes the order in which adversaries act each tick.
* ``grid`` carries both the original layout and the eaten pickups, see
  :mod:`maze_chase.grid`.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import PMap, PVector, pmap, pvector

from maze_chase.actions import Direction
from maze_chase.components import Adversary, Appearance, Player, Position
from maze_chase.entity import Entity
from maze_chase.grid import MazeGrid, layout_rows
from maze_chase.types import EntityID, GameStatus, MoveFn, PolicyFn


@dataclass(frozen=True)
class State:
    """Immutable session state.

    Attributes:
        grid (MazeGrid): Maze layout and eaten pickups.
        move_fn (MoveFn): Candidate-cell function used for every step.
        policy_fn (PolicyFn): Adversary steering policy.
        entity (PMap[EntityID, Entity]): Registry of live entities.
        player (PMap[EntityID, Player]): Input-controlled entity marker.
        adversary (PMap[EntityID, Adversary]): Wandering adversary markers.
        appearance (PMap[EntityID, Appearance]): Cosmetic metadata.
        position (PMap[EntityID, Position]): Current grid position of entities.
        facing (PMap[EntityID, Direction]): Current heading of entities.
        roster (PVector[EntityID]): Adversary ids in acting order.
        turn (int): Completed ticks (0-based).
        score (int): Accumulated pickup points.
        status (GameStatus): Session lifecycle phase.
        seed (int | None): Base RNG seed for adversary decisions.
    """

    # Level
    grid: MazeGrid
    move_fn: "MoveFn"
    policy_fn: "PolicyFn"

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    player: PMap[EntityID, Player] = pmap()
    adversary: PMap[EntityID, Adversary] = pmap()
    appearance: PMap[EntityID, Appearance] = pmap()
    position: PMap[EntityID, Position] = pmap()
    facing: PMap[EntityID, Direction] = pmap()
    roster: PVector[EntityID] = pvector()

    # Status
    turn: int = 0
    score: int = 0
    status: GameStatus = GameStatus.NOT_STARTED

    # RNG
    seed: Optional[int] = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def player_id(self) -> EntityID:
        """Id of the single player entity.

        Raises:
            ValueError: If the state has no player.
        """
        player_id = next(iter(self.player.keys()), None)
        if player_id is None:
            raise ValueError("State contains no player")
        return player_id

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Component maps that are empty are skipped; the grid is expanded to
        its current character rows. Handy for debugging views.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())) and len(value) == 0:
                continue
            if isinstance(value, MazeGrid):
                value = layout_rows(value)
            elif callable(value):
                value = getattr(value, "__name__", str(value))
            description = description.set(field, value)
        return description
