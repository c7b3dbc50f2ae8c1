"""Team override model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TeamOverride(BaseModel):
    """Admin reassignment of a driver to another team for scoring.

    Columns are ``driver_id``, ``new_team`` and ``new_color`` in the
    ``driver_team_overrides`` table; dump with ``by_alias=True`` to write.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    driver_id: str
    team: str = Field(alias="new_team")
    team_color: str = Field(alias="new_color")
