"""Board setup: planets and ship start positions."""

import logging
from typing import Optional

from ..models import AxialPoint, Game, Planet, Ship, from_tile, to_tile
from ..schemas.scenario import ScenarioRequest
from ..utils import (
    GRID_COLUMNS,
    GRID_ROWS,
    MIN_PLANET_SPACING,
    NUM_RANDOM_PLANETS,
    RNG_SEED_DEFAULT,
    START_ROWS,
    GameRNG,
    hex_distance,
)
from ..utils.naming import PLANET_NAMES, STANDARD_PLANETS, unique_ship_name

logger = logging.getLogger(__name__)

# Standard system layout as (column, row) tiles
STANDARD_PLANET_TILES = {
    "Mercury": (4, 5),
    "Venus": (9, 4),
    "Terra": (6, 9),
    "Mars": (12, 8),
}

MAX_PLACEMENT_ATTEMPTS = 1000


def generate_map(scenario: Optional[ScenarioRequest] = None) -> Game:
    """Build a new game from a scenario.

    Algorithm:
    1. Place planets: the standard system, or NUM_RANDOM_PLANETS random
       planets at least MIN_PLANET_SPACING hexes apart with all gravity
       wedges on the board
    2. Place one ship per player on the start rows, left to right, skipping
       hexes covered by a planet or wedge
    3. Ship names are made unique by suffixing duplicates

    Args:
        scenario: Scenario settings (defaults to the two-player standard map)

    Returns:
        Game in NOT_STARTED state

    Raises:
        ValueError: If the board has no room for the planets or ships
    """
    if scenario is None:
        scenario = ScenarioRequest()
    seed = scenario.seed if scenario.seed is not None else RNG_SEED_DEFAULT
    rng = GameRNG(seed)

    if scenario.random_map:
        planets = _random_planets(rng)
    else:
        planets = [
            Planet(name, from_tile(*STANDARD_PLANET_TILES[name])) for name in STANDARD_PLANETS
        ]

    players = [entry.to_player_info() for entry in scenario.players]
    blocked = set().union(*(p.occupied for p in planets))
    starts = iter(_start_positions(blocked))

    ships = []
    taken: set[str] = set()
    for player in players:
        name = unique_ship_name(player.ship_name, taken)
        taken.add(name)
        try:
            position = next(starts)
        except StopIteration:
            raise ValueError("Not enough free start positions for all ships") from None
        ships.append(Ship(name=name, position=position, owner=player))

    logger.info(
        f"Generated {'random' if scenario.random_map else 'standard'} map "
        f"with {len(planets)} planets and {len(ships)} ships (seed {seed})"
    )
    return Game(
        seed=seed,
        planets=planets,
        ships=ships,
        players=players,
        random_map=scenario.random_map,
        rng=rng,
    )


def on_board(point: AxialPoint) -> bool:
    """True if point falls on a board tile."""
    column, row = to_tile(point)
    return 0 <= column < GRID_COLUMNS and 0 <= row < GRID_ROWS


def _random_planets(rng: GameRNG) -> list[Planet]:
    """Scatter planets with spacing, keeping every wedge on the board."""
    names = rng.sample(PLANET_NAMES, NUM_RANDOM_PLANETS)
    planets: list[Planet] = []
    # Keep start rows clear of gravity
    first_row = max(START_ROWS) + 2

    for name in names:
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            column, row = rng.tile(GRID_COLUMNS, GRID_ROWS)
            if row < first_row:
                continue
            candidate = Planet(name, from_tile(column, row))
            if not all(on_board(p) for p in candidate.occupied):
                continue
            if any(
                hex_distance(p.position.x, p.position.y, candidate.position.x, candidate.position.y)
                < MIN_PLANET_SPACING
                for p in planets
            ):
                continue
            planets.append(candidate)
            break
        else:
            raise ValueError(f"Could not place planet {name} after {MAX_PLACEMENT_ATTEMPTS} attempts")

    return planets


def _start_positions(blocked: set[AxialPoint]) -> list[AxialPoint]:
    """Free start hexes, every other column along the start rows."""
    positions = []
    for row in START_ROWS:
        for column in range(1, GRID_COLUMNS - 1, 2):
            point = from_tile(column, row)
            if point not in blocked:
                positions.append(point)
    return positions
