"""Perfect maze generators for rectangular wall-bitmask grids."""

from __future__ import annotations

import argparse
import json
import logging
import random
from abc import abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Type

from .base import AbstractMazeGenerator
from .grid import (
    Cell,
    Grid,
    can_move,
    in_bounds,
    init_grid,
    is_visited,
    mark_visited,
    neighbors,
    remove_walls,
)
from .pathfinder import PathfindingAlgorithm, solve

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 15
DEFAULT_COLS = 15


class GenerationAlgorithm(Enum):
    DFS = "dfs"
    KRUSKAL = "kruskal"
    PRIM = "prim"


@dataclass(frozen=True, eq=False)
class Maze:
    """A finished maze: the wall grid plus its start and goal cells."""

    grid: Grid
    start: Cell
    goal: Cell

    @property
    def rows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def cols(self) -> int:
        return int(self.grid.shape[1])

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "grid": self.grid.tolist(),
            "start": list(self.start),
            "goal": list(self.goal),
        }


def furthest_cell(grid: Grid, rows: int, cols: int, cell: Cell) -> Cell:
    """Return the last cell dequeued by a breadth-first search from ``cell``.

    Neighbours are enqueued up, right, down, left, so among the deepest
    cells the last one discovered wins.
    """

    queue: deque[Cell] = deque([cell])
    seen = {cell}
    curr = cell
    while queue:
        curr = queue.popleft()
        for nxt in neighbors(curr):
            if can_move(grid, rows, cols, curr, nxt) and nxt not in seen:
                queue.append(nxt)
                seen.add(nxt)
    return curr


class GridCarvingGenerator(AbstractMazeGenerator[Maze]):
    """Carve passages into a fully walled grid and pick the hardest goal."""

    algorithm: GenerationAlgorithm

    def create_maze(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> Maze:
        grid = init_grid(rows, cols)
        start = self.carve(grid, rows, cols)
        goal = furthest_cell(grid, rows, cols, start)
        grid.flags.writeable = False
        logger.debug(
            "Generated %dx%d maze with %s: start=%s goal=%s",
            rows,
            cols,
            self.algorithm.value,
            tuple(start),
            tuple(goal),
        )
        return Maze(grid=grid, start=start, goal=goal)

    def random_cell(self, rows: int, cols: int) -> Cell:
        return Cell(self._rng.randrange(rows), self._rng.randrange(cols))

    @abstractmethod
    def carve(self, grid: Grid, rows: int, cols: int) -> Cell:
        """Remove walls in place until the grid is a spanning tree; return the start cell."""


class DepthFirstGenerator(GridCarvingGenerator):
    """Randomized depth-first search with an explicit backtracking stack."""

    algorithm = GenerationAlgorithm.DFS

    def carve(self, grid: Grid, rows: int, cols: int) -> Cell:
        start = self.random_cell(rows, cols)
        mark_visited(grid, start)
        stack: List[Cell] = [start]
        while stack:
            curr = stack.pop()
            nxt = self._random_unvisited_neighbor(grid, rows, cols, curr)
            if nxt is None:
                continue
            stack.append(curr)
            remove_walls(grid, curr, nxt)
            mark_visited(grid, nxt)
            stack.append(nxt)
        return start

    def _random_unvisited_neighbor(
        self, grid: Grid, rows: int, cols: int, cell: Cell
    ) -> Optional[Cell]:
        candidates = [
            nxt
            for nxt in neighbors(cell)
            if in_bounds(nxt, rows, cols) and not is_visited(grid, nxt)
        ]
        if not candidates:
            return None
        return candidates[self._rng.randrange(len(candidates))]


class KruskalGenerator(GridCarvingGenerator):
    """Randomized Kruskal: join disjoint sets across shuffled interior edges."""

    algorithm = GenerationAlgorithm.KRUSKAL

    def carve(self, grid: Grid, rows: int, cols: int) -> Cell:
        start = self.random_cell(rows, cols)
        mark_visited(grid, start)

        edges: List[Tuple[Cell, Cell]] = []
        for r in range(rows):
            for c in range(cols):
                if c + 1 < cols:
                    edges.append((Cell(r, c), Cell(r, c + 1)))
                if r + 1 < rows:
                    edges.append((Cell(r, c), Cell(r + 1, c)))
        self._rng.shuffle(edges)

        parent = list(range(rows * cols))

        def find(index: int) -> int:
            while parent[index] != index:
                parent[index] = parent[parent[index]]
                index = parent[index]
            return index

        remaining = rows * cols - 1
        for a, b in edges:
            if remaining == 0:
                break
            root_a = find(a.row * cols + a.col)
            root_b = find(b.row * cols + b.col)
            if root_a == root_b:
                continue
            parent[root_b] = root_a
            remove_walls(grid, a, b)
            mark_visited(grid, a)
            mark_visited(grid, b)
            remaining -= 1
        return start


class PrimGenerator(GridCarvingGenerator):
    """Randomized Prim: grow the maze from a random frontier edge each step."""

    algorithm = GenerationAlgorithm.PRIM

    def carve(self, grid: Grid, rows: int, cols: int) -> Cell:
        start = self.random_cell(rows, cols)
        mark_visited(grid, start)
        frontier: List[Tuple[Cell, Cell]] = []
        self._extend_frontier(frontier, grid, rows, cols, start)
        while frontier:
            index = self._rng.randrange(len(frontier))
            frontier[index], frontier[-1] = frontier[-1], frontier[index]
            curr, nxt = frontier.pop()
            if is_visited(grid, nxt):
                continue
            remove_walls(grid, curr, nxt)
            mark_visited(grid, nxt)
            self._extend_frontier(frontier, grid, rows, cols, nxt)
        return start

    @staticmethod
    def _extend_frontier(
        frontier: List[Tuple[Cell, Cell]], grid: Grid, rows: int, cols: int, cell: Cell
    ) -> None:
        for nxt in neighbors(cell):
            if in_bounds(nxt, rows, cols) and not is_visited(grid, nxt):
                frontier.append((cell, nxt))


GENERATORS: Dict[GenerationAlgorithm, Type[GridCarvingGenerator]] = {
    GenerationAlgorithm.DFS: DepthFirstGenerator,
    GenerationAlgorithm.KRUSKAL: KruskalGenerator,
    GenerationAlgorithm.PRIM: PrimGenerator,
}


def generate(
    rows: int,
    cols: int,
    algorithm: GenerationAlgorithm = GenerationAlgorithm.DFS,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Maze:
    """Generate a perfect ``rows x cols`` maze with the selected algorithm."""

    generator_cls = GENERATORS[GenerationAlgorithm(algorithm)]
    return generator_cls(seed=seed, rng=rng).create_maze(rows, cols)


__all__ = [
    "DEFAULT_COLS",
    "DEFAULT_ROWS",
    "GENERATORS",
    "DepthFirstGenerator",
    "GenerationAlgorithm",
    "GridCarvingGenerator",
    "KruskalGenerator",
    "Maze",
    "PrimGenerator",
    "furthest_cell",
    "generate",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze and print it as JSON")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS)
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS)
    parser.add_argument(
        "--algorithm",
        choices=[alg.value for alg in GenerationAlgorithm],
        default=GenerationAlgorithm.DFS.value,
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--solve", action="store_true", help="Also solve from the start cell to the goal")
    parser.add_argument(
        "--solver",
        choices=[alg.value for alg in PathfindingAlgorithm],
        default=PathfindingAlgorithm.BFS.value,
    )
    parser.add_argument("--verbose", action="store_true", help="Log generation and search details to stderr")
    args = parser.parse_args(argv)
    if args.rows <= 0 or args.cols <= 0:
        parser.error("--rows and --cols must be positive")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    maze = generate(args.rows, args.cols, GenerationAlgorithm(args.algorithm), seed=args.seed)
    payload = maze.to_dict()
    if args.solve:
        traversal = solve(maze, maze.rows, maze.cols, maze.start, PathfindingAlgorithm(args.solver))
        payload["traversal"] = traversal.to_dict()
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
