"""
Base type for patterns.

A pattern is a small, named block of cells that can be stamped onto a
universe. Patterns are plain data: they don't know about generations,
and placing one never advances the universe.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from lifesim.core.errors import InvalidCoordinate

if TYPE_CHECKING:
    from lifesim.core.universe import Universe


@dataclass(frozen=True)
class Pattern:
    """A named configuration of live cells."""

    name: str
    category: str
    cells: tuple[tuple[int, ...], ...]  # Rows of 0/1 values

    @classmethod
    def from_rows(cls, name: str, category: str, rows: list[str]) -> Pattern:
        """Build a pattern from strings where 'O' is alive and '.' is dead."""
        cells = tuple(tuple(1 if c == "O" else 0 for c in row) for row in rows)
        return cls(name=name, category=category, cells=cells)

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, columns) bounding box."""
        return len(self.cells), len(self.cells[0])

    @property
    def population(self) -> int:
        return sum(sum(row) for row in self.cells)

    def as_array(self) -> np.ndarray:
        """Pattern cells as a uint8 array."""
        return np.array(self.cells, dtype=np.uint8)


def place_pattern(
    universe: "Universe",
    pattern: Pattern,
    row: int | None = None,
    column: int | None = None,
) -> None:
    """
    Stamp a pattern's live cells onto a universe.

    Dead cells of the pattern leave the universe untouched, so patterns
    can be layered.

    Args:
        universe: Universe to seed
        pattern: Pattern to place
        row, column: Top-left corner; centred on that axis if None

    Raises:
        InvalidCoordinate: if the pattern does not fit. Nothing is written.
    """
    height, width = pattern.shape
    if row is None:
        row = (universe.rows - height) // 2
    if column is None:
        column = (universe.columns - width) // 2

    corners = [(row, column), (row + height - 1, column + width - 1)]
    for r, c in corners:
        if not universe.in_bounds(r, c):
            raise InvalidCoordinate(r, c, universe.shape)

    for dr, dc in zip(*np.nonzero(pattern.as_array())):
        universe.set_alive(row + int(dr), column + int(dc))
