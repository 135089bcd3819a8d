"""
Sudoku rule checks shared by the generator and the game session.
"""

import numpy as np

GRID_SIZE = 9
BOX_SIZE = 3


def find_empty(board: np.ndarray) -> tuple[int, int] | None:
    """Return the first empty cell in row-major order, or None if the board is full."""
    positions = np.argwhere(board == 0)
    if positions.size == 0:
        return None
    r, c = positions[0]
    return int(r), int(c)


def is_full(board: np.ndarray) -> bool:
    return not np.any(board == 0)


def is_valid(board: np.ndarray, row: int, col: int, num: int) -> bool:
    """
    Check whether placing `num` at (row, col) respects row, column and box constraints.

    The cell itself is left out of the scan, so re-checking a cell against the
    value it already holds does not count as a conflict.
    """
    in_row = board[row, :] == num
    in_row[col] = False
    if in_row.any():
        return False

    in_col = board[:, col] == num
    in_col[row] = False
    if in_col.any():
        return False

    r0 = row - row % BOX_SIZE
    c0 = col - col % BOX_SIZE
    in_box = board[r0:r0 + BOX_SIZE, c0:c0 + BOX_SIZE] == num
    in_box[row - r0, col - c0] = False
    if in_box.any():
        return False

    return True


def validate_grid(board: np.ndarray) -> tuple[bool, str]:
    """Check shape, value range and duplicate digits; fails fast with a readable reason."""
    if board.shape != (GRID_SIZE, GRID_SIZE):
        return False, f"Grid has shape {board.shape}, expected {(GRID_SIZE, GRID_SIZE)}"
    if board.min() < 0 or board.max() > 9:
        return False, "Grid values must be between 0 and 9"

    for i in range(GRID_SIZE):
        row_vals = [v for v in board[i, :] if v != 0]
        if len(row_vals) != len(set(row_vals)):
            return False, f"Row {i+1} has duplicate digit"

        col_vals = [v for v in board[:, i] if v != 0]
        if len(col_vals) != len(set(col_vals)):
            return False, f"Column {i+1} has duplicate digit"

    for br in range(BOX_SIZE):
        for bc in range(BOX_SIZE):
            block = board[br*3:(br+1)*3, bc*3:(bc+1)*3].ravel()
            block_vals = [v for v in block if v != 0]
            if len(block_vals) != len(set(block_vals)):
                return False, f"3x3 block ({br+1},{bc+1}) has duplicate digit"

    return True, ""


def is_complete_solution(board: np.ndarray) -> bool:
    ok, _ = validate_grid(board)
    return ok and is_full(board)


def check_cell(row: int, col: int) -> None:
    """Raise ValueError for coordinates outside the 9x9 board."""
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the {GRID_SIZE}x{GRID_SIZE} grid")
