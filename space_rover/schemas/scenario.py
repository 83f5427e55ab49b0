"""Pydantic schemas for scenario setup."""

from pydantic import BaseModel, Field, field_validator

from ..models.player import PlayerInfo, SpaceshipColor
from ..utils.constants import MAX_PLAYERS, MIN_PLAYERS
from ..utils.naming import DEFAULT_SHIP_NAME


class PlayerEntry(BaseModel):
    """One player row on the scenario screen."""

    player_name: str = Field(min_length=1, description="Player's display name")
    ship_name: str = Field(default=DEFAULT_SHIP_NAME, min_length=1, description="Name painted on the hull")
    color: SpaceshipColor = Field(default=SpaceshipColor.BLUE, description="Hull colour")

    def to_player_info(self) -> PlayerInfo:
        return PlayerInfo(player_name=self.player_name, ship_name=self.ship_name, color=self.color)


def _default_players() -> list[PlayerEntry]:
    return [
        PlayerEntry(player_name="Owen", ship_name="Hyperion", color=SpaceshipColor.BLUE),
        PlayerEntry(player_name="Hazen", ship_name="Vanguard II", color=SpaceshipColor.RED),
    ]


class ScenarioRequest(BaseModel):
    """Request to start a new game."""

    players: list[PlayerEntry] = Field(default_factory=_default_players)
    random_map: bool = Field(default=False, description="Scatter planets randomly instead of the standard system")
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")

    @field_validator("players")
    @classmethod
    def check_player_count(cls, players: list[PlayerEntry]) -> list[PlayerEntry]:
        if not (MIN_PLAYERS <= len(players) <= MAX_PLAYERS):
            raise ValueError(f"Please enter between {MIN_PLAYERS} and {MAX_PLAYERS} players")
        return players
