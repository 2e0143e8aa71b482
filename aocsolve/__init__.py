"""Solvers for daily programming puzzles, one module per puzzle day."""

__version__ = "0.1.0"