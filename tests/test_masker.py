# tests/test_masker.py
import numpy as np
import pytest

from sudoku_game.masker import mask_solution


def test_revealed_cells_copy_solution(solution, rng):
    player_grid, fixed_mask = mask_solution(solution, 0.4, rng)
    assert fixed_mask.dtype == bool
    assert np.array_equal(player_grid[fixed_mask], solution[fixed_mask])
    assert np.all(player_grid[~fixed_mask] == 0)


def test_probability_edges(solution, rng):
    grid, mask = mask_solution(solution, 0.0, rng)
    assert not mask.any()
    assert not grid.any()

    grid, mask = mask_solution(solution, 1.0, rng)
    assert mask.all()
    assert np.array_equal(grid, solution)


def test_reveal_rate_is_roughly_the_probability(solution):
    rng = np.random.default_rng(99)
    revealed = sum(int(mask_solution(solution, 0.35, rng)[1].sum()) for _ in range(200))
    rate = revealed / (200 * 81)
    assert 0.30 < rate < 0.40


def test_solution_is_not_modified(solution, rng):
    original = solution.copy()
    mask_solution(solution, 0.5, rng)
    assert np.array_equal(solution, original)


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_probability_out_of_range(solution, probability):
    with pytest.raises(ValueError):
        mask_solution(solution, probability)
