#!/usr/bin/env python3
"""Space Rover - Main entry point.

A turn-based hex-grid space race: pick a direction to burn, then drift with
the velocity you have built up. Planets pull parked ships in and can capture
ships that pass by at the right angle into orbit.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from space_rover.engine.map_generator import generate_map
from space_rover.engine.turn_executor import CommandExecutor, CommandResult
from space_rover.interface.display import DisplayManager
from space_rover.interface.human_player import HumanPlayer
from space_rover.interface.renderer import MapRenderer
from space_rover.models.direction import Direction
from space_rover.models.game import Game, GameState
from space_rover.schemas.scenario import PlayerEntry, ScenarioRequest

logger = logging.getLogger(__name__)


class GameOrchestrator:
    """Manages the turn loop for all pilots."""

    def __init__(self, game: Game, controller, max_turns: int | None = None):
        """Initialize game orchestrator.

        Args:
            game: Initial game state
            controller: Object with get_command(game) -> Direction
            max_turns: Stop after this many full turns (None to play until quit)
        """
        self.game = game
        self.controller = controller
        self.executor = CommandExecutor()
        self.display = DisplayManager()
        self.renderer = MapRenderer()
        self.max_turns = max_turns

    def register_watchers(self) -> None:
        """Show each ship's status, as a freshly registered watcher would."""
        for ship in self.game.ships:
            self.display.show_status(self.executor.watch(self.game, ship.name).text)

    def run(self) -> Game:
        """Main game loop."""
        print("\n" + "=" * 60)
        print("Space Rover")
        print("=" * 60)
        print("\nBurn toward a direction each turn; momentum carries you on.")
        print("Press Ctrl+C at any time to quit.\n")
        self.register_watchers()

        try:
            while not self._is_over():
                self.display.show_turn_header(self.game)
                print(self.renderer.render_with_coords(self.game))
                direction = self.controller.get_command(self.game)
                self.play_command(direction)
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user. Exiting...")

        self.game.finish()
        return self.game

    def play_command(self, direction: Direction) -> CommandResult:
        """Execute one command for the active ship and show the outcome."""
        result = self.executor.execute_turn(self.game, direction)
        self.display.show_result(result)
        return result

    def _is_over(self) -> bool:
        if self.game.state is GameState.FINISHED:
            return True
        return self.max_turns is not None and self.game.turn > self.max_turns


def parse_player(value: str) -> PlayerEntry:
    """Parse a NAME[:SHIP[:COLOR]] player argument.

    Raises:
        ValidationError: If the fields are invalid
    """
    parts = [part.strip() for part in value.split(":")]
    fields = dict(zip(("player_name", "ship_name", "color"), parts))
    if "color" in fields:
        fields["color"] = fields["color"].lower()
    return PlayerEntry(**fields)


def main(argv: list[str] | None = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Space Rover - Turn-based hex-grid space navigation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                        # Two default pilots, standard map
  %(prog)s --player Owen:Hyperion:blue --player Hazen:Vanguard:red
  %(prog)s --random-map --seed 7                  # Random planets
        """,
    )
    parser.add_argument(
        "--player",
        action="append",
        metavar="NAME[:SHIP[:COLOR]]",
        help="Add a pilot (repeat for 1-6 pilots; default: Owen and Hazen)",
    )
    parser.add_argument(
        "--random-map",
        action="store_true",
        help="Scatter planets randomly instead of using the standard system",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for map generation (default: 42)",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="End the game after this many turns",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (ship movement and gravity pulls)",
    )

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        scenario_args = {"random_map": args.random_map, "seed": args.seed}
        if args.player:
            scenario_args["players"] = [parse_player(p) for p in args.player]
        scenario = ScenarioRequest(**scenario_args)
    except ValidationError as e:
        print(f"Invalid scenario: {e}")
        sys.exit(1)

    try:
        game = generate_map(scenario)
    except ValueError as e:
        print(f"Error generating map: {e}")
        sys.exit(1)

    orchestrator = GameOrchestrator(game, HumanPlayer(), max_turns=args.max_turns)
    orchestrator.run()


if __name__ == "__main__":
    main()
