"""
Turn a complete solution into a playable puzzle by hiding cells.
"""

import numpy as np

DEFAULT_REVEAL_PROBABILITY = 0.35


def mask_solution(solution: np.ndarray,
                  reveal_probability: float = DEFAULT_REVEAL_PROBABILITY,
                  rng: np.random.Generator | None = None) -> tuple[np.ndarray, np.ndarray]:
    """
    Decide independently for each cell whether it stays revealed.

    No bound is placed on how many cells are revealed and the resulting
    puzzle is not checked for a unique solution.

    Args:
        solution: Complete 9x9 grid
        reveal_probability: Chance in [0, 1] that a cell is given
        rng: Random source

    Returns:
        (player_grid, fixed_mask): givens copied from the solution with 0 elsewhere,
        and a boolean mask of the given cells
    """
    if not 0.0 <= reveal_probability <= 1.0:
        raise ValueError(f"reveal_probability must be in [0, 1], got {reveal_probability}")
    if rng is None:
        rng = np.random.default_rng()

    fixed_mask = rng.random(solution.shape) < reveal_probability
    player_grid = np.where(fixed_mask, solution, 0)
    return player_grid, fixed_mask
