"""
Grid correctness verification

Evolves the same seeded soup with the pure-Python :class:`Grid` and the numpy
reference step, then compares their fingerprints after the same number of
generations.
"""

import hashlib
import random
from dataclasses import dataclass

from loguru import logger

from .grid import Grid
from .reference import evolve_array, grid_to_array


@dataclass
class VerificationResult:
    rows: int
    cols: int
    generations: int
    seed: int
    grid_fingerprint: str
    reference_fingerprint: str

    @property
    def matches(self) -> bool:
        return self.grid_fingerprint == self.reference_fingerprint


def array_fingerprint(data) -> str:
    flat_str = "".join("1" if cell else "0" for cell in data.flat)
    return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()


def verify(rows: int = 64, cols: int = 64, generations: int = 100, seed: int = 42) -> VerificationResult:
    # below 3 cells a wrapped neighbour can be the cell itself, which np.roll counts
    if rows < 3 or cols < 3:
        raise ValueError(f"Verification needs at least a 3×3 grid, got {rows}×{cols}")
    grid = Grid.random(rows, cols, rng=random.Random(seed))
    data = grid_to_array(grid)
    logger.debug(f"Verifying {grid!r} over {generations} generations, seed={seed}")

    grid.step(generations)
    for _ in range(generations):
        data = evolve_array(data)

    result = VerificationResult(
        rows=rows,
        cols=cols,
        generations=generations,
        seed=seed,
        grid_fingerprint=grid.fingerprint(),
        reference_fingerprint=array_fingerprint(data),
    )
    if result.matches:
        logger.info(f"Pure Python matches reference: {result.grid_fingerprint[:16]}...")
    else:
        logger.warning(
            f"MISMATCH: grid {result.grid_fingerprint[:16]}... "
            f"vs reference {result.reference_fingerprint[:16]}..."
        )
    return result
