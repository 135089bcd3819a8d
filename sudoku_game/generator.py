"""
Randomized backtracking generator for complete Sudoku solutions.
"""

import numpy as np

from .rules import GRID_SIZE, find_empty, is_valid

DIGITS = np.arange(1, 10)


def fill_grid(board: np.ndarray, rng: np.random.Generator) -> bool:
    """
    In-place backtracking fill. Returns True once no empty cell remains.

    Candidates for each cell are tried in a freshly shuffled order so that
    every run lands on a different solution.
    """
    empty = find_empty(board)
    if empty is None:
        return True

    r, c = empty
    for val in rng.permutation(DIGITS):
        if is_valid(board, r, c, val):
            board[r, c] = val
            if fill_grid(board, rng):
                return True
            board[r, c] = 0

    return False


def generate_solution(rng: np.random.Generator | None = None) -> np.ndarray:
    """
    Build one complete, valid 9x9 grid.

    Args:
        rng: Random source; pass a seeded generator for reproducible games.

    Returns:
        np.ndarray: 9x9 integer grid with every row, column and box a permutation of 1-9
    """
    if rng is None:
        rng = np.random.default_rng()

    board = np.zeros((GRID_SIZE, GRID_SIZE), dtype=int)
    if not fill_grid(board, rng):
        raise RuntimeError("Backtracking failed to fill an empty grid")
    return board
