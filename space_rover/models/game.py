"""Game state container."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..utils import GameRNG
from .planet import Planet
from .player import PlayerInfo
from .ship import Ship


class GameState(Enum):
    """Lifecycle of a game session."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass
class Game:
    """Main game state container.

    Holds the planets, the ships in player order and whose turn it is. Ships
    take turns round-robin; the turn counter advances once every ship has
    been commanded.
    """

    seed: int  # RNG seed used to build the map
    turn: int = 1  # Current turn number (1-based)
    planets: list[Planet] = field(default_factory=list)
    ships: list[Ship] = field(default_factory=list)  # In player order
    players: list[PlayerInfo] = field(default_factory=list)
    random_map: bool = False
    state: GameState = GameState.NOT_STARTED
    active_index: int = 0  # Index into ships of the ship to command next
    rng: Optional[GameRNG] = None

    def __post_init__(self):
        """Initialize RNG if not provided."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if self.turn < 1:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 1)")
        names = [ship.name for ship in self.ships]
        if len(names) != len(set(names)):
            raise ValueError(f"Ship names must be unique: {names}")

    @property
    def active_ship(self) -> Ship:
        """The ship whose turn it is.

        Raises:
            ValueError: If the game has no ships
        """
        if not self.ships:
            raise ValueError("Game has no ships")
        return self.ships[self.active_index]

    def get_ship(self, name: str) -> Ship:
        """Find a ship by name.

        Raises:
            KeyError: If no ship has that name
        """
        for ship in self.ships:
            if ship.name == name:
                return ship
        raise KeyError(f"Ship {name} not found")

    def advance(self) -> None:
        """Hand the turn to the next ship, bumping the turn counter on wrap."""
        if self.state is GameState.NOT_STARTED:
            self.state = GameState.IN_PROGRESS
        self.active_index += 1
        if self.active_index >= len(self.ships):
            self.active_index = 0
            self.turn += 1

    def finish(self) -> None:
        self.state = GameState.FINISHED
