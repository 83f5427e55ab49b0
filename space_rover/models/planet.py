"""Planets and the gravity wedges around them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .coordinates import AxialPoint
from .direction import Direction


@dataclass(frozen=True)
class GravityField:
    """One of the six gravity wedges surrounding a planet.

    The wedge labelled with direction d pulls toward d, so it sits on the
    opposite side of the planet: a ship parked there is dragged inward.
    """

    direction: Direction
    planet: Planet = field(compare=False, repr=False)
    position: AxialPoint

    @property
    def name(self) -> str:
        return f"Gravity {self.direction.name} toward {self.planet.name}"


@dataclass
class Planet:
    """A planet with its gravity wedges.

    The six wedges are created once with the planet and never change.
    """

    name: str
    position: AxialPoint
    gravity_fields: list[GravityField] = field(init=False, repr=False)

    def __post_init__(self):
        """Validate the planet and build its gravity wedges."""
        if not self.name:
            raise ValueError("Planet name cannot be empty")
        self.gravity_fields = [
            GravityField(
                direction=direction,
                planet=self,
                position=self.position + direction.invert().to_vector(),
            )
            for direction in Direction.compass()
        ]

    def field_toward(self, direction: Direction) -> GravityField:
        """Return the wedge that pulls in the given direction.

        Raises:
            ValueError: For NO_ACCELERATION, which has no wedge
        """
        for gravity in self.gravity_fields:
            if gravity.direction is direction:
                return gravity
        raise ValueError(f"Planet {self.name} has no gravity field toward {direction.name}")

    @property
    def occupied(self) -> set[AxialPoint]:
        """The planet hex plus its six gravity hexes."""
        return {self.position} | {g.position for g in self.gravity_fields}
