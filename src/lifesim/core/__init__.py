"""
Core engine primitives.

This layer knows NOTHING about patterns, rendering, or run policy.
It only knows:
- A bounded grid of dead/alive cells
- Point reads (out of bounds = dead) and checked point writes
- The classic Life rule (B3/S23) over the Moore neighbourhood
- Advancing one whole generation at a time
"""

from lifesim.core.errors import UniverseError, InvalidDimensions, InvalidCoordinate
from lifesim.core.rules import (
    CellState,
    MOORE_OFFSETS,
    MOORE_KERNEL,
    count_live_neighbours,
    next_state,
    next_generation,
)
from lifesim.core.universe import Universe, UniverseConfig

__all__ = [
    "Universe",
    "UniverseConfig",
    "CellState",
    "MOORE_OFFSETS",
    "MOORE_KERNEL",
    "count_live_neighbours",
    "next_state",
    "next_generation",
    "UniverseError",
    "InvalidDimensions",
    "InvalidCoordinate",
]
