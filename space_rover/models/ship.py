"""Ship state data model."""

from dataclasses import dataclass, field
from typing import Optional

from ..utils.constants import FUEL_CAPACITY
from .coordinates import AxialPoint
from .direction import Direction
from .player import PlayerInfo


@dataclass
class Ship:
    """A spaceship drifting on the hex grid.

    Velocity persists from turn to turn and only changes through acceleration
    (player burns or gravity pulls). The heading is purely visual and never
    NO_ACCELERATION. State is mutated only by the motion engine functions.
    """

    name: str
    position: AxialPoint
    velocity: AxialPoint = field(default_factory=lambda: AxialPoint(0, 0))
    heading: Direction = Direction.NORTH_EAST
    fuel_capacity: int = FUEL_CAPACITY
    fuel: Optional[int] = None  # Defaults to a full tank
    owner: Optional[PlayerInfo] = None

    def __post_init__(self):
        """Fill the tank and validate ship data after initialization."""
        if self.fuel is None:
            self.fuel = self.fuel_capacity
        if not self.name:
            raise ValueError("Ship name cannot be empty")
        if self.fuel_capacity <= 0:
            raise ValueError(f"Invalid fuel_capacity: {self.fuel_capacity} (must be > 0)")
        if not (0 <= self.fuel <= self.fuel_capacity):
            raise ValueError(
                f"Invalid fuel: {self.fuel} (must be 0-{self.fuel_capacity})"
            )
        if self.heading is Direction.NO_ACCELERATION:
            raise ValueError("Ship heading cannot be NO_ACCELERATION")

    @property
    def is_stationary(self) -> bool:
        return self.velocity.is_zero

    @property
    def out_of_fuel(self) -> bool:
        return self.fuel == 0
