"""Knapsack solvers: branch and bound, genetic algorithm and greedy heuristics."""

__version__ = "0.1.0"
__all__ = ["items", "branch_bound", "genetic", "greedy", "compare"]