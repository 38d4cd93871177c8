"""
Universe: the bounded 2D grid of cells that Life runs on.

The universe stores ONLY the current generation:
- Cell states (0 = dead, 1 = alive) in a rows x columns array
- A generation counter

Cells outside [0, rows) x [0, columns) do not exist. Reading them
answers "dead"; writing them is an error.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Iterator

import numpy as np

from lifesim.core.errors import InvalidCoordinate, InvalidDimensions
from lifesim.core.rules import CellState, MOORE_OFFSETS, next_generation

logger = logging.getLogger(__name__)


@dataclass
class UniverseConfig:
    """Dimensions of a universe."""

    rows: int  # Grid height
    columns: int  # Grid width


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensions(f"{name} must be positive, got {value}")
    return int(value)


def _is_index(value) -> bool:
    """Whether value can address a cell: an integer that is not a bool."""
    return isinstance(value, Integral) and not isinstance(value, (bool, np.bool_))


class Universe:
    """
    A finite Game of Life universe.

    Holds one generation at a time. ``advance()`` computes the next
    generation into a new array and swaps it in, so every neighbour
    count sees the previous generation only.

    The engine does no locking: callers sharing a universe across
    threads must serialize access themselves.
    """

    def __init__(self, rows: int, columns: int):
        self._rows = _check_dimension("rows", rows)
        self._columns = _check_dimension("columns", columns)

        self._grid = np.zeros((self._rows, self._columns), dtype=np.uint8)
        self.generation = 0

        logger.debug("Created %dx%d universe", self._rows, self._columns)

    @classmethod
    def from_config(cls, config: UniverseConfig) -> Universe:
        """Create an all-dead universe from a config."""
        return cls(config.rows, config.columns)

    @classmethod
    def from_array(cls, cells) -> Universe:
        """
        Create a universe seeded from a 2D array of 0/1 values.

        Raises:
            InvalidDimensions: if the array is not 2D, is empty, or holds
                values other than 0 and 1
        """
        cells = np.asarray(cells)
        if cells.ndim != 2 or cells.size == 0:
            raise InvalidDimensions(
                f"Seed array must be a non-empty 2D array, got shape {cells.shape}"
            )
        if not np.isin(cells, (0, 1)).all():
            raise InvalidDimensions("Seed array may only contain 0 and 1")

        universe = cls(*cells.shape)
        universe._grid = cells.astype(np.uint8)
        return universe

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, columns) grid dimensions."""
        return self._rows, self._columns

    @property
    def grid(self) -> np.ndarray:
        """Read-only copy of the current generation."""
        grid = self._grid.copy()
        grid.flags.writeable = False
        return grid

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(self._grid.sum())

    def in_bounds(self, row: int, column: int) -> bool:
        """Whether (row, column) addresses a cell of this universe."""
        if not (_is_index(row) and _is_index(column)):
            return False
        return 0 <= row < self._rows and 0 <= column < self._columns

    def is_alive(self, row: int, column: int) -> bool:
        """
        Whether the cell at (row, column) is alive.

        Out-of-bounds coordinates are permanently dead and return False.
        So are coordinates that are not integers (bools and floats included).
        """
        if not self.in_bounds(row, column):
            return False
        return bool(self._grid[row, column] == CellState.ALIVE)

    def set_alive(self, row: int, column: int) -> None:
        """Make the cell at (row, column) alive."""
        self._set(row, column, CellState.ALIVE)

    def set_dead(self, row: int, column: int) -> None:
        """Make the cell at (row, column) dead."""
        self._set(row, column, CellState.DEAD)

    def _set(self, row: int, column: int, state: CellState) -> None:
        # Non-integer coordinates fail in_bounds too, so a bool never reaches
        # numpy as a mask
        if not self.in_bounds(row, column):
            raise InvalidCoordinate(row, column, self.shape)
        self._grid[row, column] = state

    def live_neighbours(self, row: int, column: int) -> int:
        """Count live cells among the 8 neighbours of (row, column)."""
        return sum(
            self.is_alive(row + drow, column + dcolumn)
            for drow, dcolumn in MOORE_OFFSETS
        )

    def advance(self) -> None:
        """Replace the current generation with the next one."""
        self._grid = next_generation(self._grid)
        self.generation += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Generation %d: population %d", self.generation, self.population
            )

    def is_extinct(self) -> bool:
        """Whether every cell is dead."""
        return not self._grid.any()

    def iter_rows(self) -> Iterator[tuple[CellState, ...]]:
        """Iterate over the rows of the current generation, top to bottom."""
        for row in self._grid:
            yield tuple(CellState(int(cell)) for cell in row)

    def live_cells(self) -> list[tuple[int, int]]:
        """Sorted (row, column) coordinates of all live cells."""
        rows, columns = np.nonzero(self._grid)
        return [(int(r), int(c)) for r, c in zip(rows, columns)]

    def clear(self) -> None:
        """Kill every cell. The generation counter is kept."""
        self._grid = np.zeros_like(self._grid)

    def copy(self) -> Universe:
        """Create an independent copy of this universe."""
        result = Universe(self._rows, self._columns)
        result._grid = self._grid.copy()
        result.generation = self.generation
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Universe):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._grid, other._grid)

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Universe(rows={self._rows}, columns={self._columns}, "
            f"generation={self.generation}, population={self.population})"
        )
