"""Shortest-path search over finished mazes."""

from __future__ import annotations

import heapq
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Mapping, Tuple, Type

from .base import AbstractMazeSolver
from .errors import UnreachableGoal
from .grid import Cell, can_move, neighbors

if TYPE_CHECKING:
    from .generator import Maze

logger = logging.getLogger(__name__)


class PathfindingAlgorithm(Enum):
    BFS = "bfs"
    ASTAR = "astar"


@dataclass
class Traversal:
    """Cells seen during a search, and the shortest path ordered start to goal."""

    seen: List[Cell] = field(default_factory=list)
    shortest: List[Cell] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "seen": [list(cell) for cell in self.seen],
            "shortest": [list(cell) for cell in self.shortest],
        }


def shortest_path(goal: Cell, start: Cell, parents: Mapping[Cell, Cell]) -> List[Cell]:
    """Backtrack from ``goal`` through ``parents`` and return the path start to goal."""

    path: List[Cell] = []
    curr = goal
    while curr != start:
        path.append(curr)
        try:
            curr = parents[curr]
        except KeyError as exc:
            raise UnreachableGoal(start, goal) from exc
    path.append(curr)
    path.reverse()
    return path


class BreadthFirstSolver(AbstractMazeSolver):
    """FIFO search; stops expanding once the goal is dequeued."""

    def solve(self, maze: "Maze", rows: int, cols: int, start: Cell) -> Traversal:
        start = self.check_start(start, rows, cols)
        goal = Cell(*maze.goal)
        parents: Dict[Cell, Cell] = {}
        seen = {start}
        queue: deque[Cell] = deque([start])

        while queue:
            curr = queue.popleft()
            if curr == goal:
                break
            for nxt in neighbors(curr):
                if can_move(maze.grid, rows, cols, curr, nxt) and nxt not in seen:
                    queue.append(nxt)
                    seen.add(nxt)
                    parents[nxt] = curr

        path = shortest_path(goal, start, parents)
        # dicts keep insertion order, so the keys are the discovery order
        traversal = Traversal(seen=[start, *parents], shortest=path)
        logger.debug("BFS from %s saw %d cells, path length %d", tuple(start), len(traversal.seen), len(path))
        return traversal


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class AStarSolver(AbstractMazeSolver):
    """Best-first search on ``g + manhattan`` with unit step costs."""

    def solve(self, maze: "Maze", rows: int, cols: int, start: Cell) -> Traversal:
        start = self.check_start(start, rows, cols)
        goal = Cell(*maze.goal)
        parents: Dict[Cell, Cell] = {}
        cost: Dict[Cell, int] = {start: 0}
        counter = 0
        open_heap: List[Tuple[int, int, Cell]] = [(manhattan(start, goal), counter, start)]
        closed = set()

        while open_heap:
            _, _, curr = heapq.heappop(open_heap)
            if curr in closed:
                continue
            if curr == goal:
                break
            closed.add(curr)
            for nxt in neighbors(curr):
                if not can_move(maze.grid, rows, cols, curr, nxt):
                    continue
                tentative = cost[curr] + 1
                if tentative < cost.get(nxt, tentative + 1):
                    cost[nxt] = tentative
                    parents[nxt] = curr
                    counter += 1
                    heapq.heappush(open_heap, (tentative + manhattan(nxt, goal), counter, nxt))

        path = shortest_path(goal, start, parents)
        seen = [start, *(cell for cell in cost if cell != start)]
        logger.debug("A* from %s saw %d cells, path length %d", tuple(start), len(seen), len(path))
        return Traversal(seen=seen, shortest=path)


SOLVERS: Dict[PathfindingAlgorithm, Type[AbstractMazeSolver]] = {
    PathfindingAlgorithm.BFS: BreadthFirstSolver,
    PathfindingAlgorithm.ASTAR: AStarSolver,
}


def solve(
    maze: "Maze",
    rows: int,
    cols: int,
    start: Cell,
    algorithm: PathfindingAlgorithm = PathfindingAlgorithm.BFS,
) -> Traversal:
    """Find the shortest path from ``start`` to ``maze.goal``."""

    solver_cls = SOLVERS[PathfindingAlgorithm(algorithm)]
    return solver_cls().solve(maze, rows, cols, start)


__all__ = [
    "AStarSolver",
    "BreadthFirstSolver",
    "PathfindingAlgorithm",
    "SOLVERS",
    "Traversal",
    "manhattan",
    "shortest_path",
    "solve",
]
