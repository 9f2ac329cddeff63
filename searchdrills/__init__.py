"""Functions solving grid search, backtracking, recursion and simulation exercises."""

__version__ = "0.1.0"