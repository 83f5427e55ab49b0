"""Orbital motion: the per-command ship state transitions.

This module handles:
1. Acceleration (velocity accumulates unit direction vectors)
2. Heading rotation through the shorter arc
3. Fuel consumption and the one-time out-of-fuel signal
4. Motion integration (drift, or gravity pull when stationary)
5. Orbit detection from overlapping gravity wedges

Every function mutates the ship in place and returns the events it produced.
"""

import logging
import math
from typing import Iterable, Optional

from ..models.coordinates import AxialPoint, to_tile
from ..models.direction import Direction
from ..models.planet import GravityField, Planet
from ..models.ship import Ship
from .events import (
    FuelChanged,
    GuidanceUpdated,
    HeadingRotated,
    OutOfFuel,
    Refuelled,
    ShipEvent,
    ShipMoved,
)

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


def projected_position(ship: Ship) -> AxialPoint:
    """Where the ship ends up next turn if it does not accelerate."""
    return ship.position + ship.velocity


def guidance(ship: Ship) -> GuidanceUpdated:
    projected = projected_position(ship)
    return GuidanceUpdated(ship.name, projected, to_tile(projected))


def accelerate(ship: Ship, direction: Direction) -> list[ShipEvent]:
    """Add the direction's unit vector to the ship's velocity.

    Velocity is unbounded; drift accumulates for as long as the pilot keeps
    burning the same way.
    """
    ship.velocity = ship.velocity + direction.to_vector()
    return [guidance(ship)]


def normalize_rotation(delta: float) -> float:
    """Fold a rotation into (-pi, pi] so the turn takes the shorter arc."""
    while delta > math.pi:
        delta -= TWO_PI
    while delta <= -math.pi:
        delta += TWO_PI
    return delta


def rotate_heading(ship: Ship, direction: Direction) -> list[ShipEvent]:
    """Turn the ship to face direction.

    No-op for the current heading and for NO_ACCELERATION.
    """
    if direction is ship.heading or not direction.is_acceleration:
        return []

    delta = normalize_rotation(direction.rotate_angle() - ship.heading.rotate_angle())
    ship.heading = direction
    return [HeadingRotated(ship.name, delta, direction)]


def consume_fuel(ship: Ship, units: int) -> list[ShipEvent]:
    """Burn fuel, never going below zero.

    OutOfFuel fires only on the transition to zero, so burning an already
    empty tank reports nothing.

    Raises:
        ValueError: If units is negative
    """
    if units < 0:
        raise ValueError(f"Invalid fuel units: {units} (must be >= 0)")
    if ship.fuel == 0:
        return []

    ship.fuel = max(0, ship.fuel - units)
    events: list[ShipEvent] = [FuelChanged(ship.name, ship.fuel)]
    if ship.fuel == 0:
        logger.info(f"{ship.name} is out of fuel")
        events.append(OutOfFuel(ship.name))
    return events


def refuel(ship: Ship) -> list[ShipEvent]:
    """Fill the tank, re-enabling controls if it had run dry."""
    was_empty = ship.fuel == 0
    ship.fuel = ship.fuel_capacity
    events: list[ShipEvent] = [FuelChanged(ship.name, ship.fuel)]
    if was_empty:
        events.append(Refuelled(ship.name))
    return events


def integrate_motion(ship: Ship, fields: Iterable[GravityField]) -> list[ShipEvent]:
    """Advance the ship by one turn.

    A stationary ship is pulled once by every gravity wedge it sits in and
    does not move this turn. A drifting ship translates by its velocity and
    ignores gravity: passing through a wedge is not parking in it.

    Args:
        ship: Ship to advance
        fields: Gravity wedges overlapping the ship's current position

    Returns:
        Events produced; always ends with a GuidanceUpdated
    """
    events: list[ShipEvent] = []

    if ship.is_stationary:
        for gravity in fields:
            logger.debug(f"{ship.name} pulled by {gravity.name}")
            ship.velocity = ship.velocity + gravity.direction.to_vector()
    else:
        logger.debug(f"moving {ship.name} by {ship.velocity}")
        origin = ship.position
        ship.position = ship.position + ship.velocity
        events.append(ShipMoved(ship.name, origin, ship.position))

    events.append(guidance(ship))
    return events


def detect_orbit(ship: Ship, fields: Iterable[GravityField]) -> Optional[Planet]:
    """Return the planet the ship is orbiting, if any.

    A ship orbits when its velocity is exactly 60 degrees off the pull of a
    wedge it overlaps. With several qualifying wedges the first one wins.
    """
    for gravity in fields:
        tangents = (
            gravity.direction.clockwise(1).to_vector(),
            gravity.direction.clockwise(-1).to_vector(),
        )
        if ship.velocity in tangents:
            return gravity.planet
    return None


def status_text(ship: Ship, orbiting: Optional[Planet] = None) -> str:
    """Multi-line status for a watcher: name, fuel and orbit."""
    text = f"{ship.name}\nFuel: {ship.fuel}"
    if orbiting is not None:
        text += f"\n{orbiting.name} orbit"
    return text
