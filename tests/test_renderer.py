"""Tests for ASCII map renderer."""

from space_rover.interface.renderer import MapRenderer
from space_rover.models import AxialPoint, Direction, Game, Planet, Ship, from_tile


def cells(lines, row, rows=3):
    """Cells of board row `row` (lines are printed top row first)."""
    return lines[rows - 1 - row].split()


def test_render_empty_grid():
    renderer = MapRenderer(columns=4, rows=3)
    lines = renderer.render(Game(seed=1)).split("\n")

    assert lines == [
        ".. .. .. ..",
        " .. .. .. ..",
        ".. .. .. ..",
    ]


def test_render_planet_with_wedges():
    """A planet on an odd row is ringed by its six wedges."""
    renderer = MapRenderer(columns=4, rows=3)
    game = Game(seed=1, planets=[Planet("Terra", from_tile(1, 1))])
    lines = renderer.render(game).split("\n")

    assert cells(lines, 2) == ["..", "~~", "~~", ".."]
    assert cells(lines, 1) == ["~~", "Te", "~~", ".."]
    assert cells(lines, 0) == ["..", "~~", "~~", ".."]


def test_render_ship_and_guidance():
    renderer = MapRenderer(columns=4, rows=3)
    ship = Ship(name="Hyperion", position=AxialPoint(1, 0), velocity=AxialPoint(1, 1))
    lines = renderer.render(Game(seed=1, ships=[ship])).split("\n")

    assert cells(lines, 0)[1] == "1/"
    assert cells(lines, 1)[1] == "+1"


def test_guidance_can_be_hidden():
    renderer = MapRenderer(columns=4, rows=3)
    ship = Ship(name="Hyperion", position=AxialPoint(1, 0), velocity=AxialPoint(1, 1))
    output = renderer.render(Game(seed=1, ships=[ship]), guidance=False)
    assert "+1" not in output


def test_heading_glyph():
    renderer = MapRenderer(columns=4, rows=3)
    ship = Ship(name="Hyperion", position=AxialPoint(0, 0), heading=Direction.WEST)
    lines = renderer.render(Game(seed=1, ships=[ship])).split("\n")
    assert cells(lines, 0)[0] == "1<"


def test_off_board_bodies_are_skipped():
    renderer = MapRenderer(columns=4, rows=3)
    ship = Ship(name="Hyperion", position=AxialPoint(-5, 0))
    assert renderer.tile_of(ship.position) is None
    assert "1" not in renderer.render(Game(seed=1, ships=[ship]))


def test_render_with_coords():
    renderer = MapRenderer(columns=4, rows=3)
    lines = renderer.render_with_coords(Game(seed=1)).split("\n")
    assert lines[0].startswith(" 2 ")
    assert lines[-1].startswith(" 0 ")
