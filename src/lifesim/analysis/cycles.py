"""
Cycle detection and population statistics.

One-way derivation only: these helpers read a universe (or advance a
copy the caller hands them) and never feed anything back into the rules.
"""

from __future__ import annotations
import hashlib
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from lifesim.core.universe import Universe


class CycleDetector:
    """
    Detects when a universe returns to a generation it has been in before.

    Each observed grid is reduced to a digest and remembered together with
    the generation it was seen at. A still life has period 1, a blinker 2.
    """

    def __init__(self):
        self._seen: dict[bytes, int] = {}

    def __len__(self) -> int:
        return len(self._seen)

    @staticmethod
    def digest(universe: "Universe") -> bytes:
        """Stable digest of the universe's current grid and its shape."""
        grid = np.ascontiguousarray(universe.grid)
        h = hashlib.blake2b(digest_size=16)
        h.update(np.asarray(universe.shape, dtype=np.int64).tobytes())
        h.update(grid.tobytes())
        return h.digest()

    def observe(self, universe: "Universe") -> int | None:
        """
        Record the current generation.

        Returns:
            The period if this grid was seen before, otherwise None
        """
        key = self.digest(universe)
        first_seen = self._seen.get(key)
        if first_seen is not None:
            return universe.generation - first_seen

        self._seen[key] = universe.generation
        return None

    def reset(self) -> None:
        """Forget all observed generations."""
        self._seen.clear()


def population_history(universe: "Universe", generations: int) -> np.ndarray:
    """
    Advance a universe and record its population.

    Args:
        universe: Universe to advance (modified in place)
        generations: Number of generations to run

    Returns:
        Array of length generations + 1; index 0 is the starting population
    """
    if generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")

    populations = np.zeros(generations + 1, dtype=np.int64)
    populations[0] = universe.population
    for i in range(1, generations + 1):
        universe.advance()
        populations[i] = universe.population
    return populations
