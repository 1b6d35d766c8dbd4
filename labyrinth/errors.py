"""Exceptions raised by maze generation and search."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for all maze errors."""


class InvalidDimension(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive size."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"rows and cols must be positive, got rows={rows}, cols={cols}")
        self.rows = rows
        self.cols = cols


class CellOutOfBounds(MazeError, IndexError):
    """Raised when a cell lies outside the grid it is used with."""

    def __init__(self, cell, rows: int, cols: int) -> None:
        super().__init__(f"Cell {tuple(cell)} is outside a {rows}x{cols} grid")
        self.cell = cell


class UnreachableGoal(MazeError, LookupError):
    """Raised when a search never discovers the maze goal."""

    def __init__(self, start, goal) -> None:
        super().__init__(f"Goal {tuple(goal)} is not reachable from {tuple(start)}")
        self.start = start
        self.goal = goal


__all__ = ["MazeError", "InvalidDimension", "CellOutOfBounds", "UnreachableGoal"]
