import hashlib
import random
from typing import List, Self, Sequence, Tuple

from loguru import logger

LIVE = "O"
DEAD = "."


class Grid:
    """A fixed-size toroidal board of live/dead cells following B3/S23.

    Cell access is soft-bounded: reading outside the board reports a dead
    cell and writing outside the board does nothing.
    """

    def __init__(self, rows: int, cols: int):
        if any(not isinstance(n, int) or isinstance(n, bool) for n in (rows, cols)):
            raise TypeError(f"Grid dimensions must be integers, got {rows!r}×{cols!r}")
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be at least 1×1, got {rows}×{cols}")
        self.rows = rows
        self.cols = cols
        self.data: List[List[bool]] = [[False] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[bool | int]]) -> Self:
        """Build a grid from nested row data; truthy entries are live."""
        if not data:
            raise ValueError("Cannot build a grid from empty data")
        cols = len(data[0])
        grid = cls(len(data), cols)
        for r, row in enumerate(data):
            if len(row) != cols:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {cols}")
            grid.data[r] = [bool(cell) for cell in row]
        return grid

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Parse the ``O``/``.`` rendering produced by :meth:`to_string`."""
        lines = text.splitlines()
        rows = []
        for r, line in enumerate(lines):
            unknown = set(line) - {LIVE, DEAD}
            if unknown:
                raise ValueError(f"Line {r} contains unknown cell markers: {sorted(unknown)}")
            rows.append([ch == LIVE for ch in line])
        return cls.from_rows(rows)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        density: float = 0.5,
        rng: random.Random | None = None,
    ) -> Self:
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be within [0, 1], got {density}")
        rng = rng or random.Random()
        grid = cls(rows, cols)
        grid.data = [[rng.random() < density for _ in range(cols)] for _ in range(rows)]
        return grid

    def _in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def grow_cell_at(self, row: int, col: int) -> None:
        if self._in_range(row, col):
            self.data[row][col] = True

    def kill_cell_at(self, row: int, col: int) -> None:
        if self._in_range(row, col):
            self.data[row][col] = False

    def cell_at(self, row: int, col: int) -> bool:
        if self._in_range(row, col):
            return self.data[row][col]
        return False

    def neighbor_count(self, row: int, col: int) -> int:
        """Count live cells around (row, col), wrapping at every edge.

        A neighbour one step past an edge is read from the opposite edge.
        Wrapped positions that land on (row, col) itself are skipped, so the
        result is always in the range 0..8.
        """
        max_row = self.rows - 1
        max_col = self.cols - 1
        count = 0
        for dr in (-1, 0, 1):
            x = row + dr
            if x < 0:
                x = max_row
            elif x > max_row:
                x = 0
            for dc in (-1, 0, 1):
                y = col + dc
                if y < 0:
                    y = max_col
                elif y > max_col:
                    y = 0
                if (x, y) != (row, col) and self.cell_at(x, y):
                    count += 1
        return count

    def update(self) -> None:
        """Advance one generation in place.

        Every cell's next state is computed from a frozen copy of the current
        generation, so no cell sees a partially updated neighbourhood.
        """
        before = self.copy()
        next_gen = []
        for r in range(self.rows):
            row = []
            for c in range(self.cols):
                num_neighbors = before.neighbor_count(r, c)
                if before.cell_at(r, c):
                    row.append(num_neighbors in (2, 3))
                else:
                    row.append(num_neighbors == 3)
            next_gen.append(row)
        self.data = next_gen
        logger.debug(f"Advanced {self!r}")

    def step(self, generations: int = 1) -> Self:
        if generations < 0:
            raise ValueError(f"generations must be non-negative, got {generations}")
        for _ in range(generations):
            self.update()
        return self

    def copy(self) -> Self:
        clone = type(self)(self.rows, self.cols)
        clone.data = [list(row) for row in self.data]
        return clone

    def to_lists(self) -> List[List[bool]]:
        return [list(row) for row in self.data]

    def live_cells(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r, row in enumerate(self.data)
            for c, cell in enumerate(row)
            if cell
        ]

    @property
    def population(self) -> int:
        return sum(sum(row) for row in self.data)

    def fingerprint(self) -> str:
        """Hash the cells row by row, live as 1 and dead as 0."""
        flat_str = "".join("1" if cell else "0" for row in self.data for cell in row)
        return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()

    def to_string(self) -> str:
        return "".join(
            "".join(LIVE if cell else DEAD for cell in row) + "\n" for row in self.data
        )

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.cols, self.data) == (other.rows, other.cols, other.data)

    def __repr__(self) -> str:
        return f"Grid({self.rows}×{self.cols}, alive={self.population})"
