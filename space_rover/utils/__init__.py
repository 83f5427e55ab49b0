"""Utility functions and constants for Space Rover."""

from .constants import (
    FUEL_CAPACITY,
    FUEL_PER_BURN,
    GRID_COLUMNS,
    GRID_ROWS,
    MAX_PLAYERS,
    MIN_PLANET_SPACING,
    MIN_PLAYERS,
    NUM_RANDOM_PLANETS,
    RNG_SEED_DEFAULT,
    START_ROWS,
)
from .distance import hex_distance
from .rng import GameRNG

__all__ = [
    "FUEL_CAPACITY",
    "FUEL_PER_BURN",
    "GRID_COLUMNS",
    "GRID_ROWS",
    "MAX_PLAYERS",
    "MIN_PLANET_SPACING",
    "MIN_PLAYERS",
    "NUM_RANDOM_PLANETS",
    "RNG_SEED_DEFAULT",
    "START_ROWS",
    "hex_distance",
    "GameRNG",
]
