"""Human pilot controller for CLI interaction."""

from ..engine.turn_executor import CommandExecutor
from ..models.direction import Direction
from ..models.game import Game
from .command_parser import CommandParseError, CommandParser, ErrorType, SpecialCommand
from .display import DisplayManager
from .renderer import MapRenderer

HELP_TEXT = """Commands:
  ne, nw, e, w, se, sw   Burn one unit of fuel toward that direction
  coast (or wait)        Keep drifting without burning
  status                 Show your ship's readout
  map                    Redraw the board
  help                   Show this help
  quit                   Leave the game"""


class HumanPlayer:
    """Reads commands for the active ship from the terminal."""

    def __init__(self, executor: CommandExecutor | None = None):
        self.executor = executor or CommandExecutor()
        self.parser = CommandParser()
        self.display = DisplayManager()
        self.renderer = MapRenderer()

    def _format_error_message(self, error_type: ErrorType, message: str) -> str:
        formatted = f"❌ {message}"
        if error_type == ErrorType.UNKNOWN_COMMAND:
            formatted += "\nType 'help' for commands. Example: ne"
        return formatted

    def get_command(self, game: Game) -> Direction:
        """Prompt until the pilot picks a direction.

        Special commands are handled here and re-prompt.

        Raises:
            SystemExit: If the pilot quits
        """
        ship = game.active_ship

        while True:
            command = input(f"[Turn {game.turn}] [{ship.name}] > ").strip()
            if not command:
                continue

            try:
                parsed = self.parser.parse(command)
            except CommandParseError as e:
                print(self._format_error_message(e.error_type, e.message))
                continue

            if isinstance(parsed, Direction):
                if parsed.is_acceleration and ship.out_of_fuel:
                    print("⚠️  Out of fuel: your ship will only coast.")
                return parsed

            if parsed is SpecialCommand.HELP:
                print(HELP_TEXT)
            elif parsed is SpecialCommand.STATUS:
                contacts = self.executor.contacts_for(game)
                self.display.show_status(self.executor.status(ship, contacts).text)
                self.display.show_ship(ship, contacts.contacts_at(ship.position))
            elif parsed is SpecialCommand.MAP:
                print(self.renderer.render_with_coords(game))
            elif parsed is SpecialCommand.QUIT:
                print("\nExiting game. Thanks for playing!")
                raise SystemExit(0)
