"""Hex directions with their geometric data.

Seven variants: the six hex neighbours plus NO_ACCELERATION. Each variant's
unit vector and heading angle live in one table; invert() and clockwise() are
offsets around the six-step compass cycle.
"""

from __future__ import annotations

import math
from enum import Enum

from .coordinates import AxialPoint


class Direction(Enum):
    """Acceleration/heading direction on the hex grid.

    The raw values order the compass clockwise starting from WEST, which is
    what clockwise() indexes into.
    """

    NO_ACCELERATION = 0
    WEST = 1
    NORTH_WEST = 2
    NORTH_EAST = 3
    EAST = 4
    SOUTH_EAST = 5
    SOUTH_WEST = 6

    @classmethod
    def all(cls) -> list[Direction]:
        """Return all seven directions in declaration order."""
        return list(cls)

    @classmethod
    def compass(cls) -> list[Direction]:
        """Return the six directions that accelerate a ship."""
        return [d for d in cls if d is not cls.NO_ACCELERATION]

    @classmethod
    def from_raw(cls, value: int) -> Direction:
        """Look up a direction by raw index.

        Raises:
            ValueError: If value is not in 0-6
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid direction index: {value} (must be 0-6)") from None

    @classmethod
    def from_vector(cls, vector: AxialPoint) -> Direction:
        """Find the direction whose unit vector equals vector.

        Raises:
            ValueError: If vector is not a unit hex step or the null vector
        """
        for direction, (unit, _) in _GEOMETRY.items():
            if unit == vector:
                return direction
        raise ValueError(f"Not a hex direction vector: {vector}")

    @property
    def is_acceleration(self) -> bool:
        return self is not Direction.NO_ACCELERATION

    def invert(self) -> Direction:
        """Return the geometric opposite (NO_ACCELERATION stays put)."""
        return self.clockwise(3)

    def clockwise(self, turns: int) -> Direction:
        """Rotate by turns 60-degree steps; negative turns go anticlockwise."""
        if self is Direction.NO_ACCELERATION:
            return self
        return Direction((self.value - 1 + turns) % 6 + 1)

    def rotate_angle(self) -> float:
        """Heading angle in radians, anticlockwise from NORTH_EAST."""
        return _GEOMETRY[self][1]

    def to_vector(self) -> AxialPoint:
        """Unit displacement for this direction."""
        return _GEOMETRY[self][0]

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'North East'."""
        return self.name.replace("_", " ").title()


_GEOMETRY: dict[Direction, tuple[AxialPoint, float]] = {
    Direction.NO_ACCELERATION: (AxialPoint(0, 0), 0.0),
    Direction.NORTH_EAST: (AxialPoint(1, 1), 0.0),
    Direction.NORTH_WEST: (AxialPoint(0, 1), math.pi / 3),
    Direction.WEST: (AxialPoint(-1, 0), 2 * math.pi / 3),
    Direction.SOUTH_WEST: (AxialPoint(-1, -1), math.pi),
    Direction.SOUTH_EAST: (AxialPoint(0, -1), 4 * math.pi / 3),
    Direction.EAST: (AxialPoint(1, 0), 5 * math.pi / 3),
}
