"""Checks for candidate paths through a maze and for the maze itself."""

from __future__ import annotations

import argparse
import json
import logging
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .generator import GenerationAlgorithm, Maze, generate
from .grid import Cell, WallState, can_move, has_state, in_bounds, neighbors, passages
from .pathfinder import solve

logger = logging.getLogger(__name__)


@dataclass
class PathEvaluationResult:
    starts_at_start: bool
    connected: bool
    touches_goal: bool
    crosses_walls: bool
    optimal: bool
    steps: int
    message: str

    @property
    def solved(self) -> bool:
        return self.starts_at_start and self.connected and self.touches_goal and not self.crosses_walls

    def to_dict(self) -> dict:
        return {
            "starts_at_start": self.starts_at_start,
            "connected": self.connected,
            "touches_goal": self.touches_goal,
            "crosses_walls": self.crosses_walls,
            "optimal": self.optimal,
            "steps": self.steps,
            "solved": self.solved,
            "message": self.message,
        }


class PathEvaluator:
    """Evaluate candidate paths against a single maze."""

    def __init__(self, maze: Maze) -> None:
        self.maze = maze
        self._shortest_length: Optional[int] = None

    @property
    def shortest_length(self) -> int:
        """Number of cells on the shortest start-to-goal path."""

        if self._shortest_length is None:
            traversal = solve(self.maze, self.maze.rows, self.maze.cols, self.maze.start)
            self._shortest_length = len(traversal.shortest)
        return self._shortest_length

    def evaluate(self, path: Sequence[Sequence[int]]) -> PathEvaluationResult:
        cells = [Cell(int(r), int(c)) for r, c in path]
        if not cells:
            return PathEvaluationResult(
                starts_at_start=False,
                connected=False,
                touches_goal=False,
                crosses_walls=False,
                optimal=False,
                steps=0,
                message="No path given.",
            )

        rows, cols = self.maze.rows, self.maze.cols
        starts_at_start = cells[0] == self.maze.start
        touches_goal = self.maze.goal in cells
        crosses_walls = any(not in_bounds(cell, rows, cols) for cell in cells)
        connected = True
        for a, b in zip(cells, cells[1:]):
            if abs(a.row - b.row) + abs(a.col - b.col) != 1:
                connected = False
            elif not in_bounds(a, rows, cols) or not can_move(self.maze.grid, rows, cols, a, b):
                connected = False
                crosses_walls = True

        result = PathEvaluationResult(
            starts_at_start=starts_at_start,
            connected=connected,
            touches_goal=touches_goal,
            crosses_walls=crosses_walls,
            optimal=False,
            steps=len(cells) - 1,
            message="",
        )
        if not starts_at_start:
            result.message = "Path does not begin at the start cell."
        elif crosses_walls:
            result.message = "Path passes through walls."
        elif not touches_goal:
            result.message = "Path does not reach the goal."
        elif not connected:
            result.message = "Path is not continuous from start to goal."
        else:
            result.optimal = len(cells) == self.shortest_length
            result.message = "Path successfully connects start to goal."
        logger.debug("Evaluated path of %d cells: %s", len(cells), result.message)
        return result


def evaluate_path(maze: Maze, path: Sequence[Sequence[int]]) -> PathEvaluationResult:
    return PathEvaluator(maze).evaluate(path)


def is_perfect(maze: Maze) -> bool:
    """Return True if the maze's passages form a spanning tree with paired walls."""

    grid = maze.grid
    rows, cols = maze.rows, maze.cols
    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols and has_state(grid[r, c], WallState.RIGHT) != has_state(
                grid[r, c + 1], WallState.LEFT
            ):
                return False
            if r + 1 < rows and has_state(grid[r, c], WallState.DOWN) != has_state(
                grid[r + 1, c], WallState.UP
            ):
                return False

    if sum(1 for _ in passages(grid)) != rows * cols - 1:
        return False

    origin = Cell(0, 0)
    seen = {origin}
    queue: deque[Cell] = deque([origin])
    while queue:
        curr = queue.popleft()
        for nxt in neighbors(curr):
            if can_move(grid, rows, cols, curr, nxt) and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return len(seen) == rows * cols


__all__ = ["PathEvaluationResult", "PathEvaluator", "evaluate_path", "is_perfect"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a candidate path through a seeded maze")
    parser.add_argument("path", type=str, help='JSON list of [row, col] pairs, e.g. "[[0, 0], [0, 1]]"')
    parser.add_argument("--rows", type=int, required=True)
    parser.add_argument("--cols", type=int, required=True)
    parser.add_argument("--seed", type=int, required=True)
    parser.add_argument(
        "--algorithm",
        choices=[alg.value for alg in GenerationAlgorithm],
        default=GenerationAlgorithm.DFS.value,
    )
    args = parser.parse_args(argv)
    if args.rows <= 0 or args.cols <= 0:
        parser.error("--rows and --cols must be positive")
    try:
        args.path = [(int(r), int(c)) for r, c in json.loads(args.path)]
    except (TypeError, ValueError):
        parser.error("path must be a JSON list of [row, col] pairs")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    maze = generate(args.rows, args.cols, GenerationAlgorithm(args.algorithm), seed=args.seed)
    result = evaluate_path(maze, args.path)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
