"""Abstract base repository for the league's three stores."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models.override import TeamOverride
from ..models.player import LeaguePlayer
from ..models.result import RaceResult


class LeagueRepository(ABC):
    """Store interface for team overrides, race results and league players.

    Overrides are keyed by driver id and results by race id; writes to an
    existing key replace the stored record.
    """

    # Team overrides

    @abstractmethod
    def list_overrides(self) -> list[TeamOverride]: ...

    @abstractmethod
    def upsert_override(self, driver_id: str, team: str, team_color: str) -> None: ...

    @abstractmethod
    def delete_override(self, driver_id: str) -> None: ...

    # Race results

    @abstractmethod
    def list_results(self) -> list[RaceResult]: ...

    @abstractmethod
    def upsert_result(self, result: RaceResult) -> None: ...

    @abstractmethod
    def delete_result(self, race_id: int) -> None: ...

    # League players

    @abstractmethod
    def list_players(self) -> list[LeaguePlayer]: ...

    @abstractmethod
    def insert_player(self, name: str, driver_id: str) -> str: ...

    @abstractmethod
    def update_player(self, player_id: str, driver_id: str) -> None: ...

    @abstractmethod
    def delete_player(self, player_id: str) -> None: ...
