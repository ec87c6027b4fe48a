"""Maze grid: static wall layout plus pickup play-state.

The layout parsed at startup is never touched again. Eating a pellet only adds
its coordinate to ``MazeGrid.consumed``; :func:`cell_at` overlays that set on
the layout. Resetting therefore just drops the set, and the original pickup
arrangement is always recoverable no matter how much of the maze was eaten.

Layout characters:

* ``#`` wall
* ``.`` pellet (10 points)
* ``o`` power pellet (50 points)
* space: empty floor

Rows shorter than the widest row are padded with :attr:`CellKind.VOID` cells.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Sequence, Tuple

from pyrsistent import PSet, pset

from maze_chase.components import Position
from maze_chase.types import CellKind


LAYOUT_CHARS: Dict[str, CellKind] = {
    "#": CellKind.WALL,
    ".": CellKind.PELLET,
    "o": CellKind.POWER_PELLET,
    " ": CellKind.EMPTY,
}

CELL_CHARS: Dict[CellKind, str] = {
    CellKind.WALL: "#",
    CellKind.PELLET: ".",
    CellKind.POWER_PELLET: "o",
    CellKind.EMPTY: " ",
    CellKind.VOID: " ",
}

PICKUP_VALUES: Dict[CellKind, int] = {
    CellKind.PELLET: 10,
    CellKind.POWER_PELLET: 50,
}


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid rectangle."""


@dataclass(frozen=True)
class MazeGrid:
    """Immutable maze snapshot.

    Attributes:
        layout: Original cell kinds, indexed ``layout[y][x]``.
        consumed: Pickup cells eaten during the current session.
    """

    layout: Tuple[Tuple[CellKind, ...], ...]
    consumed: PSet[Position] = pset()

    @property
    def width(self) -> int:
        return len(self.layout[0])

    @property
    def height(self) -> int:
        return len(self.layout)


def parse_layout(rows: Sequence[str]) -> MazeGrid:
    """Build a grid from a rectangular (or ragged) table of characters.

    Raises:
        ValueError: If the layout is empty or contains an unknown character.
    """
    width = max((len(row) for row in rows), default=0)
    if width == 0:
        raise ValueError("Layout must contain at least one cell")
    layout: List[Tuple[CellKind, ...]] = []
    for y, row in enumerate(rows):
        cells: List[CellKind] = []
        for x, char in enumerate(row):
            kind = LAYOUT_CHARS.get(char)
            if kind is None:
                raise ValueError(f"Unknown layout character {char!r} at {(x, y)}")
            cells.append(kind)
        cells.extend([CellKind.VOID] * (width - len(cells)))
        layout.append(tuple(cells))
    return MazeGrid(layout=tuple(layout))


def is_in_bounds(grid: MazeGrid, pos: Position) -> bool:
    """Return True if ``pos`` lies within the grid rectangle."""
    return 0 <= pos.x < grid.width and 0 <= pos.y < grid.height


def cell_at(grid: MazeGrid, pos: Position) -> CellKind:
    """Return the current kind of the cell at ``pos``.

    Raises:
        OutOfBoundsError: If ``pos`` is outside the grid.
    """
    if not is_in_bounds(grid, pos):
        raise OutOfBoundsError(
            f"Out of bounds: {(pos.x, pos.y)} for grid {grid.width}x{grid.height}"
        )
    if pos in grid.consumed:
        return CellKind.EMPTY
    return grid.layout[pos.y][pos.x]


def is_passable(grid: MazeGrid, pos: Position) -> bool:
    """Every cell kind except ``WALL`` can be entered."""
    return cell_at(grid, pos) != CellKind.WALL


def consume_pickup(grid: MazeGrid, pos: Position) -> Tuple[MazeGrid, int]:
    """Eat the pickup at ``pos``.

    Returns the updated grid and the points earned. Cells holding no pickup
    (including already eaten ones) yield ``0`` and the same grid object.
    """
    value = PICKUP_VALUES.get(cell_at(grid, pos), 0)
    if value == 0:
        return grid, 0
    return replace(grid, consumed=grid.consumed.add(pos)), value


def reset_grid(grid: MazeGrid) -> MazeGrid:
    """Restore every eaten pickup from the original layout."""
    if not grid.consumed:
        return grid
    return replace(grid, consumed=pset())


def pickup_positions(grid: MazeGrid) -> List[Position]:
    """Uneaten pickup cells in row-major order."""
    return [
        Position(x, y)
        for y, row in enumerate(grid.layout)
        for x, kind in enumerate(row)
        if kind in PICKUP_VALUES and Position(x, y) not in grid.consumed
    ]


def remaining_pickups(grid: MazeGrid) -> int:
    return len(pickup_positions(grid))


def layout_rows(grid: MazeGrid) -> List[str]:
    """Current play-state as layout characters (eaten pickups become spaces)."""
    return [
        "".join(
            CELL_CHARS[cell_at(grid, Position(x, y))] for x in range(grid.width)
        )
        for y in range(grid.height)
    ]
