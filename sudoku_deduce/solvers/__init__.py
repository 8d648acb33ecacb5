"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .propagation_solver import PropagationSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "PropagationSolver",
]
