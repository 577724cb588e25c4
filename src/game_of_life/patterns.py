"""Named seed patterns and helpers for stamping them onto a grid."""

from typing import Dict, List, Tuple

from .grid import Grid

Pattern = List[Tuple[int, int]]

PATTERN_LIBRARY: Dict[str, Pattern] = {
    # still lifes
    "block": [(0, 0), (0, 1), (1, 0), (1, 1)],
    "beehive": [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
    # oscillators
    "blinker": [(0, 0), (0, 1), (0, 2)],
    "toad": [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
    "beacon": [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
    # spaceships
    "glider": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
}


def get_pattern(name: str) -> Pattern:
    try:
        return list(PATTERN_LIBRARY[name])
    except KeyError:
        known = ", ".join(sorted(PATTERN_LIBRARY))
        raise KeyError(f"Unknown pattern {name!r}; known patterns: {known}") from None


def pattern_bounds(pattern: Pattern) -> Tuple[int, int]:
    """Return (height, width) of the pattern's bounding box."""
    if not pattern:
        return 0, 0
    height = max(r for r, _ in pattern) - min(r for r, _ in pattern) + 1
    width = max(c for _, c in pattern) - min(c for _, c in pattern) + 1
    return height, width


def place_pattern(
    grid: Grid, pattern: Pattern, row: int = 0, col: int = 0, wrap: bool = False
) -> Grid:
    """Activate the pattern's cells with its (0, 0) offset at (row, col).

    Cells falling off the board are dropped unless ``wrap`` is set, in which
    case they reappear on the opposite edge.
    """
    for dr, dc in pattern:
        r, c = row + dr, col + dc
        if wrap:
            r %= grid.rows
            c %= grid.cols
        grid.grow_cell_at(r, c)
    return grid


def centered_origin(grid: Grid, pattern: Pattern) -> Tuple[int, int]:
    height, width = pattern_bounds(pattern)
    return max(0, (grid.rows - height) // 2), max(0, (grid.cols - width) // 2)
