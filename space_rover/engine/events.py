"""Events emitted by the motion engine.

Engine functions return the events they produced instead of calling back into
a UI. Callers (the CLI display, tests) decide what to do with them.
"""

from dataclasses import dataclass

from ..models.coordinates import AxialPoint
from ..models.direction import Direction


@dataclass(frozen=True)
class ShipEvent:
    """Base class for everything the engine reports about a ship."""

    ship_name: str


@dataclass(frozen=True)
class GuidanceUpdated(ShipEvent):
    """Where the ship will be next turn if it does not accelerate.

    Attributes:
        projected: Slanted grid position one turn ahead
        tile: (column, row) board tile of that position
    """

    projected: AxialPoint
    tile: tuple[int, int]


@dataclass(frozen=True)
class HeadingRotated(ShipEvent):
    """Ship turned to a new heading through the shorter arc.

    Attributes:
        delta: Signed rotation in radians, within (-pi, pi]
        heading: New heading
    """

    delta: float
    heading: Direction


@dataclass(frozen=True)
class ShipMoved(ShipEvent):
    origin: AxialPoint
    destination: AxialPoint


@dataclass(frozen=True)
class FuelChanged(ShipEvent):
    fuel: int


@dataclass(frozen=True)
class OutOfFuel(ShipEvent):
    """Fuel just reached zero; direction controls should be disabled."""


@dataclass(frozen=True)
class Refuelled(ShipEvent):
    """Fuel restored after running dry; direction controls come back."""


@dataclass(frozen=True)
class StatusChanged(ShipEvent):
    """Multi-line status text for a watcher (name, fuel, orbit)."""

    text: str


@dataclass(frozen=True)
class AccelerationRejected(ShipEvent):
    """A burn was commanded with an empty tank; the ship only coasts."""

    direction: Direction
