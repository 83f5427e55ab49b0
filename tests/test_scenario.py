"""Tests for scenario request validation."""

import pytest
from pydantic import ValidationError

from space_rover.models import SpaceshipColor
from space_rover.schemas.scenario import PlayerEntry, ScenarioRequest


def test_defaults():
    scenario = ScenarioRequest()

    assert scenario.random_map is False
    assert scenario.seed is None
    assert [p.player_name for p in scenario.players] == ["Owen", "Hazen"]
    assert scenario.players[1].color is SpaceshipColor.RED


def test_player_entry_defaults():
    entry = PlayerEntry(player_name="Ann")
    assert entry.ship_name == "Foobar"
    assert entry.color is SpaceshipColor.BLUE


def test_color_from_string():
    entry = PlayerEntry(player_name="Ann", color="green")
    assert entry.color is SpaceshipColor.GREEN


def test_unknown_color_rejected():
    with pytest.raises(ValidationError):
        PlayerEntry(player_name="Ann", color="pink")


def test_empty_names_rejected():
    with pytest.raises(ValidationError):
        PlayerEntry(player_name="")
    with pytest.raises(ValidationError):
        PlayerEntry(player_name="Ann", ship_name="")


@pytest.mark.parametrize("count", [0, 7])
def test_player_count_out_of_range(count):
    players = [PlayerEntry(player_name=f"P{i}") for i in range(count)]
    with pytest.raises(ValidationError, match="Please enter between 1 and 6 players"):
        ScenarioRequest(players=players)


@pytest.mark.parametrize("count", [1, 6])
def test_player_count_bounds_accepted(count):
    players = [PlayerEntry(player_name=f"P{i}") for i in range(count)]
    assert len(ScenarioRequest(players=players).players) == count


def test_to_player_info():
    info = PlayerEntry(player_name="Ann", ship_name="Nostromo", color="yellow").to_player_info()
    assert info.player_name == "Ann"
    assert info.ship_name == "Nostromo"
    assert info.color is SpaceshipColor.YELLOW
