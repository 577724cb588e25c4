from __future__ import annotations

import pytest

from game_of_life import Grid
from game_of_life.patterns import (
    PATTERN_LIBRARY,
    centered_origin,
    get_pattern,
    pattern_bounds,
    place_pattern,
)


def test_unknown_pattern_lists_known_names() -> None:
    with pytest.raises(KeyError, match="glider"):
        get_pattern("spaceship-9000")


def test_get_pattern_returns_a_copy() -> None:
    pattern = get_pattern("block")
    pattern.append((5, 5))

    assert (5, 5) not in PATTERN_LIBRARY["block"]


@pytest.mark.parametrize(
    "name, bounds",
    [("block", (2, 2)), ("blinker", (1, 3)), ("glider", (3, 3)), ("beacon", (4, 4))],
)
def test_pattern_bounds(name: str, bounds: tuple[int, int]) -> None:
    assert pattern_bounds(get_pattern(name)) == bounds


def test_pattern_bounds_empty() -> None:
    assert pattern_bounds([]) == (0, 0)


def test_place_pattern_drops_cells_off_the_board() -> None:
    grid = place_pattern(Grid(3, 3), get_pattern("blinker"), 0, 2)

    assert grid.live_cells() == [(0, 2)]


def test_place_pattern_with_wrap() -> None:
    grid = place_pattern(Grid(3, 3), get_pattern("blinker"), 0, 2, wrap=True)

    assert grid.live_cells() == [(0, 0), (0, 1), (0, 2)]


def test_centered_origin() -> None:
    assert centered_origin(Grid(5, 5), get_pattern("blinker")) == (2, 1)
    assert centered_origin(Grid(2, 2), get_pattern("beacon")) == (0, 0)


@pytest.mark.parametrize("name", ["block", "beehive"])
def test_still_lifes_do_not_change(name: str) -> None:
    grid = place_pattern(Grid(8, 8), get_pattern(name), 2, 2)
    before = grid.copy()
    grid.update()

    assert grid == before


@pytest.mark.parametrize("name", ["blinker", "toad", "beacon"])
def test_period_two_oscillators(name: str) -> None:
    grid = place_pattern(Grid(8, 8), get_pattern(name), 2, 2)
    before = grid.copy()

    grid.update()
    assert grid != before
    grid.update()
    assert grid == before


def test_glider_crosses_the_edge() -> None:
    grid = place_pattern(Grid(8, 8), get_pattern("glider"), 6, 6, wrap=True)
    expected = place_pattern(Grid(8, 8), get_pattern("glider"), 7, 7, wrap=True)

    grid.step(4)

    assert grid == expected
    assert grid.population == 5


def test_glider_returns_home_on_the_torus() -> None:
    grid = place_pattern(Grid(8, 8), get_pattern("glider"), 0, 0)
    start = grid.copy()

    grid.step(32)

    assert grid == start
