"""Perfect maze generation and shortest-path search."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeSolver",
    "Cell",
    "Direction",
    "WallState",
    "init_grid",
    "has_state",
    "can_move",
    "Maze",
    "GenerationAlgorithm",
    "DepthFirstGenerator",
    "KruskalGenerator",
    "PrimGenerator",
    "furthest_cell",
    "generate",
    "Traversal",
    "PathfindingAlgorithm",
    "BreadthFirstSolver",
    "AStarSolver",
    "solve",
    "PathEvaluator",
    "PathEvaluationResult",
    "evaluate_path",
    "is_perfect",
    "MazeSession",
    "MazeError",
    "InvalidDimension",
    "CellOutOfBounds",
    "UnreachableGoal",
]

from .base import AbstractMazeGenerator, AbstractMazeSolver
from .errors import CellOutOfBounds, InvalidDimension, MazeError, UnreachableGoal
from .grid import Cell, Direction, WallState, can_move, has_state, init_grid
from .pathfinder import AStarSolver, BreadthFirstSolver, PathfindingAlgorithm, Traversal, solve
from .generator import (
    DepthFirstGenerator,
    GenerationAlgorithm,
    KruskalGenerator,
    Maze,
    PrimGenerator,
    furthest_cell,
    generate,
)
from .evaluator import PathEvaluationResult, PathEvaluator, evaluate_path, is_perfect
from .session import MazeSession
