"""Grid model: wall bitmasks, cell coordinates and the passage query."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Iterator, NamedTuple, Tuple

import numpy as np

from .errors import InvalidDimension


class WallState(IntFlag):
    UP = 1
    RIGHT = 2
    DOWN = 4
    LEFT = 8
    VISITED = 16


ALL_WALLS = WallState.UP | WallState.RIGHT | WallState.DOWN | WallState.LEFT

Grid = np.ndarray


class Cell(NamedTuple):
    row: int
    col: int


class Direction(Enum):
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def step(self, cell: Cell) -> Cell:
        dr, dc = self.value
        return Cell(cell.row + dr, cell.col + dc)


def init_grid(rows: int, cols: int) -> Grid:
    """Allocate a ``rows x cols`` grid with every wall standing."""

    if rows <= 0 or cols <= 0:
        raise InvalidDimension(rows, cols)
    return np.full((rows, cols), int(ALL_WALLS), dtype=np.uint8)


def has_state(cell_state: int, flag: WallState) -> bool:
    return (int(cell_state) & flag) != 0


def in_bounds(cell: Cell, rows: int, cols: int) -> bool:
    return 0 <= cell[0] < rows and 0 <= cell[1] < cols


def neighbors(cell: Cell) -> Tuple[Cell, Cell, Cell, Cell]:
    """Return the up, right, down and left neighbours of ``cell`` (unclipped)."""

    r, c = cell
    return Cell(r - 1, c), Cell(r, c + 1), Cell(r + 1, c), Cell(r, c - 1)


def can_move(grid: Grid, rows: int, cols: int, a: Cell, b: Cell) -> bool:
    """Return True if there is a passage from ``a`` to the adjacent cell ``b``.

    Only the DOWN and LEFT flags are read, and always on an in-bounds cell:
    the wall between two vertically adjacent cells is the upper cell's DOWN
    flag, the wall between two horizontally adjacent cells is the right
    cell's LEFT flag. ``a`` and ``b`` must be adjacent.
    """

    row_diff = a[0] - b[0]
    if row_diff == 1:
        return b[0] >= 0 and not has_state(grid[b[0], b[1]], WallState.DOWN)
    if row_diff == -1:
        return b[0] < rows and not has_state(grid[a[0], a[1]], WallState.DOWN)
    col_diff = a[1] - b[1]
    if col_diff == 1:
        return b[1] >= 0 and not has_state(grid[a[0], a[1]], WallState.LEFT)
    return b[1] < cols and not has_state(grid[b[0], b[1]], WallState.LEFT)


def remove_walls(grid: Grid, a: Cell, b: Cell) -> None:
    """Clear the wall shared by adjacent cells ``a`` and ``b`` on both sides."""

    row_diff = a[0] - b[0]
    col_diff = a[1] - b[1]
    if row_diff == 1:
        a_wall, b_wall = WallState.UP, WallState.DOWN
    elif row_diff == -1:
        a_wall, b_wall = WallState.DOWN, WallState.UP
    elif col_diff == 1:
        a_wall, b_wall = WallState.LEFT, WallState.RIGHT
    else:
        a_wall, b_wall = WallState.RIGHT, WallState.LEFT
    grid[a[0], a[1]] &= ~np.uint8(int(a_wall))
    grid[b[0], b[1]] &= ~np.uint8(int(b_wall))


def mark_visited(grid: Grid, cell: Cell) -> None:
    grid[cell[0], cell[1]] |= np.uint8(int(WallState.VISITED))


def is_visited(grid: Grid, cell: Cell) -> bool:
    return has_state(grid[cell[0], cell[1]], WallState.VISITED)


def passages(grid: Grid) -> Iterator[Tuple[Cell, Cell]]:
    """Yield every open edge once, as ``(a, b)`` with ``b`` right of or below ``a``."""

    rows, cols = grid.shape
    for r in range(rows):
        for c in range(cols):
            here = Cell(r, c)
            right = Cell(r, c + 1)
            down = Cell(r + 1, c)
            if can_move(grid, rows, cols, here, right):
                yield here, right
            if can_move(grid, rows, cols, here, down):
                yield here, down


__all__ = [
    "ALL_WALLS",
    "Cell",
    "Direction",
    "Grid",
    "WallState",
    "can_move",
    "has_state",
    "in_bounds",
    "init_grid",
    "is_visited",
    "mark_visited",
    "neighbors",
    "passages",
]
