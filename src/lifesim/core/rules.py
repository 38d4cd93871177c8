"""
Rules define how one generation turns into the next.

The rule set is fixed to classic Life (B3/S23):
- A live cell with fewer than 2 live neighbours dies (underpopulation)
- A live cell with more than 3 live neighbours dies (overpopulation)
- A live cell with 2 or 3 live neighbours survives
- A dead cell with exactly 3 live neighbours becomes alive (reproduction)

Neighbours are the 8 Moore cells. Positions off the grid are dead and
contribute nothing: there is no wraparound.
"""

from __future__ import annotations
from enum import IntEnum

import numpy as np
from scipy.signal import convolve2d


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


# (drow, dcolumn) offsets of the Moore neighbourhood
MOORE_OFFSETS = tuple(
    (drow, dcolumn)
    for drow in (-1, 0, 1)
    for dcolumn in (-1, 0, 1)
    if (drow, dcolumn) != (0, 0)
)

MOORE_KERNEL = np.array(
    [
        [1, 1, 1],
        [1, 0, 1],
        [1, 1, 1],
    ],
    dtype=np.int64,
)

SURVIVE_COUNTS = (2, 3)
BIRTH_COUNT = 3


def count_live_neighbours(grid: np.ndarray) -> np.ndarray:
    """
    Count live Moore neighbours for every cell of a grid.

    The grid is zero-padded, so cells on the edge simply have fewer
    real neighbours.

    Args:
        grid: 2D array of 0/1 cell states

    Returns:
        Integer array of the same shape with neighbour counts in [0, 8]
    """
    return convolve2d(
        grid.astype(np.int64),
        MOORE_KERNEL,
        mode="same",
        boundary="fill",
        fillvalue=0,
    )


def next_state(alive: bool, live_neighbours: int) -> CellState:
    """Apply the rule to a single cell."""
    if alive:
        if live_neighbours in SURVIVE_COUNTS:
            return CellState.ALIVE
        return CellState.DEAD

    if live_neighbours == BIRTH_COUNT:
        return CellState.ALIVE
    return CellState.DEAD


def next_generation(grid: np.ndarray) -> np.ndarray:
    """
    Compute the next generation of a whole grid.

    All neighbour counts are taken from ``grid`` before any cell changes,
    and the result is written to a fresh array. ``grid`` is not modified.

    Args:
        grid: 2D array of 0/1 cell states (generation N)

    Returns:
        New uint8 array holding generation N+1
    """
    neighbours = count_live_neighbours(grid)
    alive = grid == CellState.ALIVE

    survives = alive & np.isin(neighbours, SURVIVE_COUNTS)
    born = ~alive & (neighbours == BIRTH_COUNT)

    return (survives | born).astype(np.uint8)
