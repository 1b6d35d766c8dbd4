"""Level progression for a player walking through successive mazes."""

from __future__ import annotations

import logging
import random
from typing import Optional

from .generator import GENERATORS, GenerationAlgorithm, Maze
from .grid import Cell, Direction, can_move
from .pathfinder import PathfindingAlgorithm, Traversal, solve

logger = logging.getLogger(__name__)


class MazeSession:
    """Track the current level, its maze and the player's cell.

    Each level grows both dimensions by ``growth``; the first level is
    ``start_rows + growth`` by ``start_cols + growth``. After
    ``max_levels`` levels the session is finished.
    """

    def __init__(
        self,
        *,
        start_rows: int = 3,
        start_cols: int = 3,
        growth: int = 2,
        max_levels: int = 10,
        algorithm: GenerationAlgorithm = GenerationAlgorithm.DFS,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if growth < 0:
            raise ValueError("growth must be non-negative")
        if max_levels < 1:
            raise ValueError("max_levels must be at least 1")
        if start_rows + growth < 1 or start_cols + growth < 1:
            raise ValueError("the first level must have at least one row and one column")
        self.rows = start_rows
        self.cols = start_cols
        self.growth = growth
        self.max_levels = max_levels
        self.level = 0
        self._generator = GENERATORS[GenerationAlgorithm(algorithm)](seed=seed, rng=rng)
        self.maze: Optional[Maze] = None
        self.position: Optional[Cell] = None

    @property
    def finished(self) -> bool:
        return self.level > self.max_levels

    @property
    def is_level_complete(self) -> bool:
        return self.maze is not None and self.position == self.maze.goal

    def new_level(self) -> bool:
        """Advance to the next level; return False once every level is done."""

        level = self.level + 1
        if level > self.max_levels:
            self.level = level
            self.maze = None
            self.position = None
            logger.debug("Session finished after %d levels", self.max_levels)
            return False
        rows = self.rows + self.growth
        cols = self.cols + self.growth
        # nothing changes unless the maze was built
        maze = self._generator.create_maze(rows, cols)
        self.level, self.rows, self.cols = level, rows, cols
        self.maze = maze
        self.position = maze.start
        logger.debug("Level %d: %dx%d maze", self.level, self.rows, self.cols)
        return True

    def advance(self) -> bool:
        if not self.is_level_complete:
            return False
        return self.new_level()

    def move(self, direction: Direction) -> bool:
        """Move the player one cell if no wall is in the way."""

        maze = self._require_maze()
        target = Direction(direction).step(self.position)
        if not can_move(maze.grid, self.rows, self.cols, self.position, target):
            return False
        self.position = target
        return True

    def hint(self, algorithm: PathfindingAlgorithm = PathfindingAlgorithm.BFS) -> Traversal:
        maze = self._require_maze()
        return solve(maze, self.rows, self.cols, self.position, algorithm)

    def _require_maze(self) -> Maze:
        if self.maze is None:
            raise RuntimeError("No active level; call new_level() first")
        return self.maze


__all__ = ["MazeSession"]
