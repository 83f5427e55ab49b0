"""ASCII hex map rendering.

Rows are drawn top (north) to bottom, two characters per tile, with odd rows
shifted half a tile to the right so neighbouring hexes line up:

     .. .. Ma .. ..
    .. +1 .. .. ..
     .. 1/ .. .. ..

Legend:
- '..' = empty space
- first two letters of a planet name = planet
- '<digit><arrow>' = ship (player number) and its heading
- '~~' = gravity wedge
- '+N' = guidance: where ship N drifts to next turn
"""

from typing import Optional

from ..models.coordinates import AxialPoint, to_tile
from ..models.direction import Direction
from ..models.game import Game
from ..utils.constants import GRID_COLUMNS, GRID_ROWS

HEADING_GLYPHS = {
    Direction.NORTH_EAST: "/",
    Direction.NORTH_WEST: "\\",
    Direction.WEST: "<",
    Direction.EAST: ">",
    Direction.SOUTH_WEST: ",",
    Direction.SOUTH_EAST: ".",
}


class MapRenderer:
    """Renders the board as ASCII art."""

    def __init__(self, columns: int = GRID_COLUMNS, rows: int = GRID_ROWS):
        self.columns = columns
        self.rows = rows

    def render(self, game: Game, guidance: bool = True) -> str:
        """Render the board.

        Args:
            game: Game to draw
            guidance: If True, mark each ship's projected next position

        Returns:
            Multi-line string, first line is the northernmost row
        """
        grid = [[".."] * self.columns for _ in range(self.rows)]

        # Paint back to front so ships end up on top
        for planet in game.planets:
            for gravity in planet.gravity_fields:
                self._paint(grid, gravity.position, "~~")
            self._paint(grid, planet.position, planet.name[:2])

        for number, ship in enumerate(game.ships, start=1):
            if guidance and not ship.is_stationary:
                self._paint(grid, ship.position + ship.velocity, f"+{number}")
        for number, ship in enumerate(game.ships, start=1):
            self._paint(grid, ship.position, f"{number}{HEADING_GLYPHS[ship.heading]}")

        lines = []
        for row in range(self.rows - 1, -1, -1):
            indent = " " if row % 2 else ""
            lines.append(indent + " ".join(grid[row]))
        return "\n".join(lines)

    def render_with_coords(self, game: Game) -> str:
        """Render the board with row numbers down the left side."""
        lines = self.render(game).split("\n")
        numbered = []
        for offset, line in enumerate(lines):
            row = self.rows - 1 - offset
            numbered.append(f"{row:2d} {line}")
        return "\n".join(numbered)

    def tile_of(self, point: AxialPoint) -> Optional[tuple[int, int]]:
        """Board tile for point, or None if it is off the board."""
        column, row = to_tile(point)
        if 0 <= column < self.columns and 0 <= row < self.rows:
            return column, row
        return None

    def _paint(self, grid: list[list[str]], point: AxialPoint, cell: str) -> None:
        tile = self.tile_of(point)
        if tile is None:
            return
        column, row = tile
        grid[row][column] = cell
