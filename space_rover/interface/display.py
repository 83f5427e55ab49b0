"""Turn information display for human pilots.

Prints engine events, ship status text and the contacts under a ship.
"""

import math
from typing import Iterable

from ..engine.events import (
    AccelerationRejected,
    GuidanceUpdated,
    HeadingRotated,
    OutOfFuel,
    Refuelled,
    ShipEvent,
    ShipMoved,
    StatusChanged,
)
from ..engine.gravity import Contact
from ..engine.turn_executor import CommandResult
from ..models.game import Game
from ..models.ship import Ship


class DisplayManager:
    """Manages turn information display."""

    def format_event(self, event: ShipEvent) -> str | None:
        """One-line description of an event, or None if it isn't shown."""
        if isinstance(event, ShipMoved):
            return f"{event.ship_name} moved {event.origin} -> {event.destination}"
        if isinstance(event, HeadingRotated):
            degrees = round(math.degrees(event.delta))
            return f"{event.ship_name} turned {degrees:+d}° to face {event.heading.label}"
        if isinstance(event, GuidanceUpdated):
            column, row = event.tile
            return f"{event.ship_name} next turn: {event.projected} (tile {column},{row})"
        if isinstance(event, OutOfFuel):
            return f"{event.ship_name}: We're out of fuel! Direction controls disabled."
        if isinstance(event, Refuelled):
            return f"{event.ship_name}: Refuelled, direction controls restored."
        if isinstance(event, AccelerationRejected):
            return f"{event.ship_name} has no fuel, cannot burn {event.direction.label}; coasting"
        # FuelChanged is covered by the status text
        return None

    def show_events(self, events: Iterable[ShipEvent]) -> None:
        for event in events:
            if isinstance(event, StatusChanged):
                self.show_status(event.text)
                continue
            line = self.format_event(event)
            if line:
                print(f"  {line}")

    def show_result(self, result: CommandResult) -> None:
        """Print everything that happened during a command."""
        print(f"\n{result.ship_name}: {result.direction.label}")
        self.show_events(result.events)
        if result.orbiting is not None:
            print(f"  {result.ship_name} is in orbit around {result.orbiting.name}")

    def show_status(self, text: str) -> None:
        """Print a watcher status block with a rule above and below."""
        print("  " + "-" * 24)
        for line in text.split("\n"):
            print(f"  {line}")
        print("  " + "-" * 24)

    def show_turn_header(self, game: Game) -> None:
        ship = game.active_ship
        pilot = ship.owner.player_name if ship.owner else "?"
        print(f"\n{'=' * 60}")
        print(f"Turn {game.turn} - {pilot} flying {ship.name}")
        print(f"{'=' * 60}")

    def show_ship(self, ship: Ship, contacts: list[Contact]) -> None:
        """Detailed readout: position, velocity, heading and contacts."""
        print(f"  Position: {ship.position}  Velocity: {ship.velocity}")
        print(f"  Heading: {ship.heading.label}  Fuel: {ship.fuel}/{ship.fuel_capacity}")
        others = [c for c in contacts if c.body is not ship]
        if others:
            print("  Touching: " + ", ".join(c.name for c in others))
