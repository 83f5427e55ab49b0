"""Slanted hex-grid coordinates.

The board is addressed with a slanted (axial) integer pair. Moving to any of
the six neighbouring hexes is a plain integer vector addition, which keeps all
motion arithmetic exact.

Unit steps:
    NorthEast (1, 1)    East (1, 0)    SouthEast (0, -1)
    SouthWest (-1, -1)  West (-1, 0)   NorthWest (0, 1)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AxialPoint:
    """A position or a per-turn displacement on the slanted grid."""

    x: int
    y: int

    def __add__(self, other: AxialPoint) -> AxialPoint:
        return AxialPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: AxialPoint) -> AxialPoint:
        return AxialPoint(self.x - other.x, self.y - other.y)

    def __neg__(self) -> AxialPoint:
        return AxialPoint(-self.x, -self.y)

    @property
    def is_zero(self) -> bool:
        """True for the null vector (a stationary ship's velocity)."""
        return self.x == 0 and self.y == 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = AxialPoint(0, 0)


def add(a: AxialPoint, b: AxialPoint) -> AxialPoint:
    """Component-wise sum of two points."""
    return a + b


def to_tile(point: AxialPoint) -> tuple[int, int]:
    """Convert a slanted point to its (column, row) board tile.

    Odd rows sit half a hex to the right of even rows, so the column drifts
    left by one every two rows as y grows.

    Args:
        point: Slanted grid position

    Returns:
        Tuple of (column, row)
    """
    return point.x - (point.y + 1) // 2, point.y


def from_tile(column: int, row: int) -> AxialPoint:
    """Inverse of to_tile()."""
    return AxialPoint(column + (row + 1) // 2, row)
