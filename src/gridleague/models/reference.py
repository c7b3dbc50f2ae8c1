"""Static reference models: drivers on the grid and races on the calendar."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict


class Driver(BaseModel):
    """A driver on the grid, with their base team."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    number: int
    team: str
    team_color: str
    country: str


class Race(BaseModel):
    """A round of the championship calendar."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    country: str
    circuit: str
    date: date
