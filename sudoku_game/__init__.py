"""
Sudoku Game - single-player puzzle engine

This package contains modules for:
- Sudoku rule checking
- Randomized solution generation and puzzle masking
- The mutable game session (input, undo, hints, mistakes, clock)
- A small terminal front end
"""

from .session import GameSession

__version__ = "1.0.0"
__author__ = "Sudoku Game Project Team"

__all__ = ["GameSession"]
