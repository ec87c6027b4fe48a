"""Direction enumerations.

:class:`Direction` is the only player input besides starting a game. The
integer :class:`GymAction` mirrors it for Gymnasium ``Discrete`` spaces.

``MOVE_DIRECTIONS`` is the canonical ordered list; policies that sample a
random heading draw from it so seeded runs stay reproducible.
"""

from enum import IntEnum, StrEnum, auto
from collections import Counter
from typing import Dict, List, Optional, Tuple


class Direction(StrEnum):
    """Cardinal directions. No diagonal motion exists."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

# (dx, dy) with y growing downwards
DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITE_DIRECTION: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


def to_direction(action: int) -> Direction:
    """Translate a ``GymAction`` (or its integer value) into a ``Direction``."""
    try:
        return Direction[GymAction(int(action)).name]
    except ValueError:
        raise ValueError(f"Invalid action: {action}") from None


KEY_DIRECTIONS: Dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def typed_direction(value: str, prev_value: str) -> Optional[Direction]:
    """Direction for the newest key typed into a text field, if any.

    ``value`` and ``prev_value`` are the field contents on two consecutive
    reads. Only characters added since ``prev_value`` count, and the last of
    them wins. Unmapped keys yield ``None``.
    """
    if value == prev_value:
        return None
    new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
    if not new_values:
        return None
    return KEY_DIRECTIONS.get(new_values[-1].lower())
