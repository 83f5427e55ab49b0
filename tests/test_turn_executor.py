"""Tests for command execution."""

import pytest

from space_rover.engine.events import (
    AccelerationRejected,
    FuelChanged,
    GuidanceUpdated,
    HeadingRotated,
    OutOfFuel,
    ShipMoved,
    StatusChanged,
)
from space_rover.engine.gravity import BoardContacts, StaticContacts
from space_rover.engine.turn_executor import CommandExecutor
from space_rover.models import AxialPoint, Direction, Game, GameState, Planet, Ship


@pytest.fixture
def executor():
    return CommandExecutor()


def create_simple_game():
    """Two ships in open space and one planet far away."""
    ships = [
        Ship(name="Hyperion", position=AxialPoint(2, 2)),
        Ship(name="Vanguard II", position=AxialPoint(6, 2)),
    ]
    return Game(seed=42, ships=ships, planets=[Planet("Terra", AxialPoint(10, 10))])


class TestExecuteCommand:
    """Test the burn / fuel / rotate / move sequence."""

    def test_burn_sequence(self, executor):
        ship = Ship(name="Hyperion", position=AxialPoint(2, 2))
        result = executor.execute_command(ship, Direction.NORTH_WEST, StaticContacts())

        assert ship.velocity == AxialPoint(0, 1)
        assert ship.position == AxialPoint(2, 3)
        assert ship.fuel == 19
        assert ship.heading is Direction.NORTH_WEST
        assert [type(e) for e in result.events] == [
            GuidanceUpdated,
            FuelChanged,
            StatusChanged,
            HeadingRotated,
            ShipMoved,
            GuidanceUpdated,
        ]
        assert result.of_type(StatusChanged)[0].text == "Hyperion\nFuel: 19"

    def test_burn_north_east_scenario(self, executor):
        """Ship at (2,2) burning NE ends at (3,3) with velocity (1,1)."""
        ship = Ship(name="Hyperion", position=AxialPoint(2, 2))
        executor.execute_command(ship, Direction.NORTH_EAST, StaticContacts())
        assert ship.velocity == AxialPoint(1, 1)
        assert ship.position == AxialPoint(3, 3)
        # Already facing NE: no rotation
        assert ship.heading is Direction.NORTH_EAST

    def test_coast_uses_no_fuel(self, executor):
        ship = Ship(name="Hyperion", position=AxialPoint(2, 2), velocity=AxialPoint(1, 0))
        result = executor.execute_command(ship, Direction.NO_ACCELERATION, StaticContacts())
        assert ship.fuel == 20
        assert ship.position == AxialPoint(3, 2)
        assert result.of_type(FuelChanged) == []

    def test_empty_tank_rejects_burn_but_still_drifts(self, executor):
        ship = Ship(name="Hyperion", position=AxialPoint(2, 2), velocity=AxialPoint(1, 0), fuel=0)
        result = executor.execute_command(ship, Direction.WEST, StaticContacts())

        assert result.events[0] == AccelerationRejected("Hyperion", Direction.WEST)
        assert ship.velocity == AxialPoint(1, 0)
        assert ship.position == AxialPoint(3, 2)
        assert ship.heading is Direction.NORTH_EAST
        assert ship.fuel == 0

    def test_last_unit_of_fuel(self, executor):
        ship = Ship(name="Hyperion", position=AxialPoint(2, 2), fuel=1)
        result = executor.execute_command(ship, Direction.EAST, StaticContacts())
        assert ship.fuel == 0
        assert result.of_type(OutOfFuel) == [OutOfFuel("Hyperion")]

        result = executor.execute_command(ship, Direction.EAST, StaticContacts())
        assert result.of_type(OutOfFuel) == []
        assert ship.fuel == 0

    def test_parked_ship_pulled_in_gravity_wedge(self, executor):
        """A stationary ship on the East wedge gets velocity (1,0) but doesn't move."""
        terra = Planet("Terra", AxialPoint(5, 5))
        ship = Ship(name="Hyperion", position=AxialPoint(4, 5))
        result = executor.execute_command(ship, Direction.NO_ACCELERATION, BoardContacts([terra]))

        assert ship.velocity == AxialPoint(1, 0)
        assert ship.position == AxialPoint(4, 5)
        assert result.of_type(ShipMoved) == []

    def test_orbit_reported_after_move(self, executor):
        """Drifting SE onto the East wedge of a planet is an orbit."""
        terra = Planet("Terra", AxialPoint(5, 5))
        ship = Ship(name="Hyperion", position=AxialPoint(4, 6), velocity=AxialPoint(0, -1))
        result = executor.execute_command(ship, Direction.NO_ACCELERATION, BoardContacts([terra]))

        assert ship.position == AxialPoint(4, 5)
        assert result.orbiting is terra

    def test_status_mentions_orbit(self, executor):
        terra = Planet("Terra", AxialPoint(5, 5))
        ship = Ship(name="Hyperion", position=AxialPoint(4, 5), velocity=AxialPoint(1, 1))
        result = executor.execute_command(ship, Direction.SOUTH_EAST, BoardContacts([terra]))

        # Status is taken after the burn, before the move: velocity (1,0) is not tangential
        assert result.of_type(StatusChanged)[0].text == "Hyperion\nFuel: 19"

        ship = Ship(name="Vanguard", position=AxialPoint(4, 5), velocity=AxialPoint(0, -2))
        result = executor.execute_command(ship, Direction.NORTH_WEST, BoardContacts([terra]))
        assert result.of_type(StatusChanged)[0].text == "Vanguard\nFuel: 19\nTerra orbit"


class TestExecuteTurn:
    """Test turn order across ships."""

    def test_turns_rotate_between_ships(self, executor):
        game = create_simple_game()

        first = executor.execute_turn(game, Direction.EAST)
        assert first.ship_name == "Hyperion"
        assert game.state is GameState.IN_PROGRESS
        assert game.active_ship.name == "Vanguard II"

        second = executor.execute_turn(game, Direction.WEST)
        assert second.ship_name == "Vanguard II"
        assert game.turn == 2
        assert game.active_ship.name == "Hyperion"

    def test_finished_game_rejects_commands(self, executor):
        game = create_simple_game()
        game.finish()
        with pytest.raises(ValueError, match="already finished"):
            executor.execute_turn(game, Direction.EAST)

    def test_watch_returns_status(self, executor):
        game = create_simple_game()
        event = executor.watch(game, "Vanguard II")
        assert event == StatusChanged("Vanguard II", "Vanguard II\nFuel: 20")

    def test_watch_unknown_ship(self, executor):
        with pytest.raises(KeyError):
            executor.watch(create_simple_game(), "Nostromo")
