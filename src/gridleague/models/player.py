"""League player model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class LeaguePlayer(BaseModel):
    """A league member's claim on one driver."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    driver_id: str

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        # Serial primary keys arrive as integers.
        return str(value) if isinstance(value, int) else value
