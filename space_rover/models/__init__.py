"""Data models for Space Rover."""

from .coordinates import AxialPoint, from_tile, to_tile
from .direction import Direction
from .game import Game, GameState
from .planet import GravityField, Planet
from .player import PlayerInfo, SpaceshipColor
from .ship import Ship

__all__ = [
    "AxialPoint",
    "Direction",
    "Game",
    "GameState",
    "GravityField",
    "Planet",
    "PlayerInfo",
    "Ship",
    "SpaceshipColor",
    "from_tile",
    "to_tile",
]
