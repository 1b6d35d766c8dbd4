import unittest
from collections import deque

from labyrinth import (
    Cell,
    CellOutOfBounds,
    Maze,
    PathfindingAlgorithm,
    UnreachableGoal,
    can_move,
    furthest_cell,
    generate,
    init_grid,
    solve,
)
from labyrinth.grid import neighbors, remove_walls
from labyrinth.pathfinder import shortest_path


def _open_grid(rows, cols):
    grid = init_grid(rows, cols)
    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols:
                remove_walls(grid, Cell(r, c), Cell(r, c + 1))
            if r + 1 < rows:
                remove_walls(grid, Cell(r, c), Cell(r + 1, c))
    return grid


def _distance(maze, start, goal):
    dist = {start: 0}
    queue = deque([start])
    while queue:
        curr = queue.popleft()
        for nxt in neighbors(curr):
            if can_move(maze.grid, maze.rows, maze.cols, curr, nxt) and nxt not in dist:
                dist[nxt] = dist[curr] + 1
                queue.append(nxt)
    return dist[goal]


class BreadthFirstSearchTests(unittest.TestCase):
    def test_open_two_by_two_grid(self) -> None:
        maze = Maze(grid=_open_grid(2, 2), start=Cell(0, 0), goal=Cell(1, 1))
        traversal = solve(maze, 2, 2, Cell(0, 0))
        self.assertEqual(len(traversal.shortest), 3)
        self.assertEqual(traversal.shortest[0], Cell(0, 0))
        self.assertEqual(traversal.shortest[-1], Cell(1, 1))
        self.assertIn(traversal.shortest[1], {Cell(0, 1), Cell(1, 0)})
        self.assertEqual(traversal.seen[0], Cell(0, 0))

    def test_seen_lists_discovery_order(self) -> None:
        maze = Maze(grid=_open_grid(2, 2), start=Cell(0, 0), goal=Cell(1, 1))
        traversal = solve(maze, 2, 2, Cell(0, 0))
        self.assertEqual(traversal.seen, [Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1)])
        self.assertEqual(traversal.shortest, [Cell(0, 0), Cell(0, 1), Cell(1, 1)])

    def test_search_reaches_every_cell_when_goal_is_furthest(self) -> None:
        generated = generate(6, 5, seed=8)
        start = Cell(2, 3)
        goal = furthest_cell(generated.grid, 6, 5, start)
        maze = Maze(grid=generated.grid, start=start, goal=goal)
        traversal = solve(maze, 6, 5, start)
        self.assertEqual(len(traversal.seen), 30)
        self.assertEqual(len(set(traversal.seen)), 30)

    def test_shortest_path_is_optimal_and_walkable(self) -> None:
        maze = generate(8, 9, seed=13)
        for start in (maze.start, Cell(0, 0), Cell(7, 8), Cell(4, 4)):
            traversal = solve(maze, 8, 9, start)
            path = traversal.shortest
            self.assertEqual(path[0], start)
            self.assertEqual(path[-1], maze.goal)
            self.assertEqual(len(path) - 1, _distance(maze, start, maze.goal))
            for a, b in zip(path, path[1:]):
                self.assertTrue(can_move(maze.grid, 8, 9, a, b))
            self.assertTrue(set(path) <= set(traversal.seen))
            self.assertEqual(len(set(traversal.seen)), len(traversal.seen))

    def test_start_on_goal(self) -> None:
        maze = generate(4, 4, seed=6)
        traversal = solve(maze, 4, 4, maze.goal)
        self.assertEqual(traversal.seen, [maze.goal])
        self.assertEqual(traversal.shortest, [maze.goal])

    def test_disconnected_goal_raises(self) -> None:
        maze = Maze(grid=init_grid(2, 2), start=Cell(0, 0), goal=Cell(1, 1))
        with self.assertRaises(UnreachableGoal):
            solve(maze, 2, 2, Cell(0, 0))
        with self.assertRaises(LookupError):
            solve(maze, 2, 2, Cell(0, 0), PathfindingAlgorithm.ASTAR)

    def test_start_outside_grid_raises(self) -> None:
        maze = generate(3, 3, seed=0)
        with self.assertRaises(CellOutOfBounds):
            solve(maze, 3, 3, Cell(3, 0))
        with self.assertRaises(IndexError):
            solve(maze, 3, 3, Cell(0, -1))

    def test_accepts_plain_tuples(self) -> None:
        maze = generate(3, 3, seed=0)
        traversal = solve(maze, 3, 3, tuple(maze.start))
        self.assertEqual(traversal.shortest[0], maze.start)

    def test_each_call_returns_fresh_lists(self) -> None:
        maze = generate(4, 4, seed=2)
        first = solve(maze, 4, 4, maze.start)
        second = solve(maze, 4, 4, maze.start)
        self.assertEqual(first, second)
        first.seen.clear()
        self.assertNotEqual(first.seen, second.seen)


class AStarTests(unittest.TestCase):
    def test_matches_breadth_first_path_length(self) -> None:
        for seed in range(4):
            maze = generate(7, 6, seed=seed)
            for start in (maze.start, Cell(0, 5), Cell(6, 0)):
                bfs = solve(maze, 7, 6, start)
                astar = solve(maze, 7, 6, start, PathfindingAlgorithm.ASTAR)
                self.assertEqual(astar.shortest, bfs.shortest)
                self.assertEqual(astar.seen[0], start)
                self.assertEqual(len(set(astar.seen)), len(astar.seen))
                self.assertTrue(set(astar.shortest) <= set(astar.seen))

    def test_finds_a_shortest_path_on_an_open_grid(self) -> None:
        maze = Maze(grid=_open_grid(4, 4), start=Cell(0, 0), goal=Cell(3, 3))
        traversal = solve(maze, 4, 4, Cell(0, 0), PathfindingAlgorithm.ASTAR)
        self.assertEqual(len(traversal.shortest), 7)
        for a, b in zip(traversal.shortest, traversal.shortest[1:]):
            self.assertTrue(can_move(maze.grid, 4, 4, a, b))


class ShortestPathTests(unittest.TestCase):
    def test_backtracks_and_orders_start_to_goal(self) -> None:
        parents = {Cell(0, 1): Cell(0, 0), Cell(1, 1): Cell(0, 1)}
        self.assertEqual(
            shortest_path(Cell(1, 1), Cell(0, 0), parents),
            [Cell(0, 0), Cell(0, 1), Cell(1, 1)],
        )

    def test_missing_parent_raises(self) -> None:
        with self.assertRaises(UnreachableGoal) as ctx:
            shortest_path(Cell(2, 2), Cell(0, 0), {})
        self.assertIsInstance(ctx.exception.__cause__, KeyError)


if __name__ == "__main__":
    unittest.main()
