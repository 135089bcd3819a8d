"""
Entry point for running the sudoku_game module as a package.

Usage:
    python -m sudoku_game --seed 42
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
