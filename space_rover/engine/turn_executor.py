"""Command execution for the active ship.

A command is one direction picked by the pilot. For a burn the phases run in
this order:
1. Acceleration (velocity += direction vector)
2. Fuel consumption (one unit) and status refresh
3. Heading rotation
4. Motion integration (always, burn or not)
5. Orbit check at the new position

NO_ACCELERATION skips phases 1-3 and just coasts. A burn with an empty tank is
rejected and also just coasts.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..models.direction import Direction
from ..models.game import Game, GameState
from ..models.planet import Planet
from ..models.ship import Ship
from ..utils.constants import FUEL_PER_BURN
from .events import AccelerationRejected, ShipEvent, StatusChanged
from .gravity import BoardContacts, SpatialQuery
from .motion import (
    accelerate,
    consume_fuel,
    detect_orbit,
    integrate_motion,
    rotate_heading,
    status_text,
)

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Everything that happened while executing one command.

    Attributes:
        ship_name: Ship that was commanded
        direction: Direction that was commanded
        events: Events in the order they were produced
        orbiting: Planet orbited after the move, if any
    """

    ship_name: str
    direction: Direction
    events: list[ShipEvent] = field(default_factory=list)
    orbiting: Optional[Planet] = None

    def of_type(self, event_type: type) -> list[ShipEvent]:
        """Return the events that are instances of event_type."""
        return [e for e in self.events if isinstance(e, event_type)]


class CommandExecutor:
    """Applies pilot commands to ships.

    Each phase is a small method so it can be tested on its own; the
    orchestration methods compose them in order.
    """

    def contacts_for(self, game: Game) -> SpatialQuery:
        """Build the spatial query for the game's current board."""
        return BoardContacts(game.planets, game.ships)

    # =========================================================================
    # PHASE METHODS
    # =========================================================================

    def execute_phase_burn(
        self, ship: Ship, direction: Direction, contacts: SpatialQuery
    ) -> list[ShipEvent]:
        """Accelerate, burn fuel, refresh status and turn the ship.

        Returns an AccelerationRejected event instead when the tank is empty.
        """
        if ship.out_of_fuel:
            logger.warning(f"{ship.name} has no fuel, {direction.name} burn rejected")
            return [AccelerationRejected(ship.name, direction)]

        events = accelerate(ship, direction)
        fuel_events = consume_fuel(ship, FUEL_PER_BURN)
        events.extend(fuel_events)
        if fuel_events:
            events.append(self.status(ship, contacts))
        events.extend(rotate_heading(ship, direction))
        return events

    def execute_phase_motion(self, ship: Ship, contacts: SpatialQuery) -> list[ShipEvent]:
        """Drift, or get pulled by gravity if stationary."""
        return integrate_motion(ship, contacts.fields_overlapping(ship.position))

    def status(self, ship: Ship, contacts: SpatialQuery) -> StatusChanged:
        """Current status text for ship, including its orbit."""
        orbiting = detect_orbit(ship, contacts.fields_overlapping(ship.position))
        return StatusChanged(ship.name, status_text(ship, orbiting))

    # =========================================================================
    # ORCHESTRATION METHODS
    # =========================================================================

    def execute_command(
        self,
        ship: Ship,
        direction: Direction,
        contacts: SpatialQuery,
    ) -> CommandResult:
        """Run one pilot command on a ship.

        Args:
            ship: Ship to command
            direction: Picked direction (NO_ACCELERATION to coast)
            contacts: Spatial query for gravity wedges

        Returns:
            CommandResult with all events and the orbit after moving
        """
        result = CommandResult(ship.name, direction)

        if direction.is_acceleration:
            result.events.extend(self.execute_phase_burn(ship, direction, contacts))

        result.events.extend(self.execute_phase_motion(ship, contacts))
        result.orbiting = detect_orbit(ship, contacts.fields_overlapping(ship.position))
        return result

    def execute_turn(self, game: Game, direction: Direction) -> CommandResult:
        """Command the active ship and pass the turn to the next one.

        Raises:
            ValueError: If the game is already finished
        """
        if game.state is GameState.FINISHED:
            raise ValueError("Game already finished")

        ship = game.active_ship
        result = self.execute_command(ship, direction, self.contacts_for(game))
        game.advance()
        return result

    def watch(self, game: Game, ship_name: str) -> StatusChanged:
        """Status for a newly (re-)registered watcher of ship_name.

        Raises:
            KeyError: If no ship has that name
        """
        ship = game.get_ship(ship_name)
        return self.status(ship, self.contacts_for(game))
