from __future__ import annotations

import random

import numpy as np
import pytest

from game_of_life import Grid
from game_of_life.reference import array_to_grid, count_neighbors, evolve_array, grid_to_array
from game_of_life.verify import verify


def test_count_neighbors_matches_grid() -> None:
    grid = Grid.random(6, 9, rng=random.Random(3))
    counts = count_neighbors(grid_to_array(grid))

    for r in range(6):
        for c in range(9):
            assert counts[r, c] == grid.neighbor_count(r, c)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_evolve_array_matches_update(seed: int) -> None:
    grid = Grid.random(10, 12, density=0.4, rng=random.Random(seed))
    data = grid_to_array(grid)

    for _ in range(5):
        grid.update()
        data = evolve_array(data)

    assert array_to_grid(data) == grid


def test_array_round_trip_keeps_cells() -> None:
    data = np.array([[0, 1, 0], [1, 1, 0]], dtype=np.uint8)
    grid = array_to_grid(data)

    assert grid.live_cells() == [(0, 1), (1, 0), (1, 1)]
    assert np.array_equal(grid_to_array(grid), data)


def test_array_to_grid_rejects_non_2d() -> None:
    with pytest.raises(ValueError):
        array_to_grid(np.zeros(4, dtype=np.uint8))


def test_verify_matches() -> None:
    result = verify(rows=16, cols=20, generations=15, seed=42)

    assert result.matches
    assert result.grid_fingerprint == result.reference_fingerprint


def test_verify_rejects_tiny_grids() -> None:
    with pytest.raises(ValueError):
        verify(rows=2, cols=8, generations=1)
