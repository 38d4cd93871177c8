"""
Engine errors.

Reads never fail: querying a cell outside the grid answers "dead".
Writes and construction do fail, with the errors below.
"""

from __future__ import annotations


class UniverseError(Exception):
    """Base class for universe engine errors."""


class InvalidDimensions(UniverseError, ValueError):
    """Rows/columns are not positive integers, or a seed array is malformed."""


class InvalidCoordinate(UniverseError, IndexError):
    """A write was addressed outside the grid."""

    def __init__(self, row: int, column: int, shape: tuple[int, int]):
        self.row = row
        self.column = column
        self.shape = shape
        super().__init__(
            f"Cell ({row}, {column}) is outside a {shape[0]}x{shape[1]} universe"
        )
