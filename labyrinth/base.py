"""Abstract interfaces for maze generation and maze search strategies."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Generic, Iterable, List, Optional, TypeVar

from .errors import CellOutOfBounds
from .grid import Cell, in_bounds

if TYPE_CHECKING:
    from .generator import Maze
    from .pathfinder import Traversal

MazeT = TypeVar("MazeT")


class AbstractMazeGenerator(ABC, Generic[MazeT]):
    """Base class for generation strategies that emit maze records.

    Every generator owns a private random source. Pass ``seed`` for a
    reproducible run or ``rng`` to share an existing ``random.Random``.
    """

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @abstractmethod
    def create_maze(self, rows: int, cols: int) -> MazeT:
        """Create a single randomized maze of the given size."""

    def generate_batch(self, count: int, rows: int, cols: int) -> List[MazeT]:
        """Generate ``count`` mazes drawing from the same random source."""

        return [self.create_maze(rows, cols) for _ in range(count)]

    def to_records(self, mazes: Iterable[MazeT]) -> List[Dict[str, Any]]:
        return [self.record_to_dict(maze) for maze in mazes]

    def record_to_dict(self, maze: MazeT) -> Dict[str, Any]:
        """Dictionary serialization hook for maze records."""

        if hasattr(maze, "to_dict"):
            return getattr(maze, "to_dict")()
        raise TypeError(
            "Maze record must implement to_dict() or override record_to_dict() in the generator."
        )


class AbstractMazeSolver(ABC):
    """Base class for search strategies that walk a finished maze to its goal."""

    @abstractmethod
    def solve(self, maze: "Maze", rows: int, cols: int, start: Cell) -> "Traversal":
        """Search from ``start`` to ``maze.goal``."""

    @staticmethod
    def check_start(start: Cell, rows: int, cols: int) -> Cell:
        start = Cell(*start)
        if not in_bounds(start, rows, cols):
            raise CellOutOfBounds(start, rows, cols)
        return start


__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeSolver",
]
