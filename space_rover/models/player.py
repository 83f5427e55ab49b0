"""Player entry data: who flies which ship in which colour."""

from dataclasses import dataclass
from enum import Enum


class SpaceshipColor(Enum):
    """Hull colours a player can pick for their ship."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"

    @classmethod
    def count(cls) -> int:
        return len(cls)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass
class PlayerInfo:
    """A player taking part in a scenario."""

    player_name: str
    ship_name: str
    color: SpaceshipColor = SpaceshipColor.BLUE

    def __post_init__(self):
        """Validate player data after initialization."""
        if not self.player_name:
            raise ValueError("player_name cannot be empty")
        if not self.ship_name:
            raise ValueError("ship_name cannot be empty")
