"""Conway's Game of Life on a fixed-size toroidal grid."""

from .grid import Grid
from .patterns import PATTERN_LIBRARY, get_pattern, place_pattern

__all__ = ["Grid", "PATTERN_LIBRARY", "get_pattern", "place_pattern"]
