"""Common type aliases and enumerations.

``MoveFn`` and ``PolicyFn`` are the pluggable extension points carried by the
``State``: the first turns a direction into a candidate cell, the second
decides how an adversary steers on its turn.
"""

import random
from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from maze_chase.state import State
    from maze_chase.actions import Direction
    from maze_chase.components import Position
    from maze_chase.policies import Steer

EntityID = int

MoveFn = Callable[["State", "EntityID", "Direction"], "Position"]
PolicyFn = Callable[["State", "EntityID", random.Random], "Steer"]


class CellKind(StrEnum):
    """Static maze cell categories."""

    WALL = auto()
    EMPTY = auto()
    PELLET = auto()
    POWER_PELLET = auto()
    VOID = auto()


class GameStatus(StrEnum):
    """Lifecycle phase of a game session."""

    NOT_STARTED = auto()
    PLAYING = auto()
    OVER = auto()
