"""Hosted backend repository implementation."""

from __future__ import annotations

from ..api_logging import log_api_call
from ..client import LeagueClient
from ..exceptions import BackendError
from ..models.override import TeamOverride
from ..models.player import LeaguePlayer
from ..models.result import RaceResult
from .base import LeagueRepository
from .errors import LeagueDataError


class HostedLeagueRepository(LeagueRepository):
    """Stores backed by the hosted tables, through a shared LeagueClient."""

    def __init__(self, client: LeagueClient) -> None:
        self._client = client

    @property
    def client(self) -> LeagueClient:
        """The underlying client, for signing in and out."""
        return self._client

    @log_api_call
    def list_overrides(self) -> list[TeamOverride]:
        try:
            return self._client.team_overrides()
        except BackendError as exc:
            raise LeagueDataError(f"Failed to fetch team overrides: {exc}") from exc

    @log_api_call
    def upsert_override(self, driver_id: str, team: str, team_color: str) -> None:
        override = TeamOverride(driver_id=driver_id, team=team, team_color=team_color)
        try:
            self._client.upsert_team_override(override)
        except BackendError as exc:
            raise LeagueDataError(f"Failed to save team override for {driver_id}: {exc}") from exc

    @log_api_call
    def delete_override(self, driver_id: str) -> None:
        try:
            self._client.delete_team_override(driver_id)
        except BackendError as exc:
            raise LeagueDataError(f"Failed to delete team override for {driver_id}: {exc}") from exc

    @log_api_call
    def list_results(self) -> list[RaceResult]:
        try:
            return self._client.race_results(order="race_id.asc")
        except BackendError as exc:
            raise LeagueDataError(f"Failed to fetch race results: {exc}") from exc

    @log_api_call
    def upsert_result(self, result: RaceResult) -> None:
        try:
            self._client.upsert_race_result(result)
        except BackendError as exc:
            raise LeagueDataError(f"Failed to save result for race {result.race_id}: {exc}") from exc

    @log_api_call
    def delete_result(self, race_id: int) -> None:
        try:
            self._client.delete_race_result(race_id)
        except BackendError as exc:
            raise LeagueDataError(f"Failed to delete result for race {race_id}: {exc}") from exc

    @log_api_call
    def list_players(self) -> list[LeaguePlayer]:
        try:
            return self._client.league_players()
        except BackendError as exc:
            raise LeagueDataError(f"Failed to fetch league players: {exc}") from exc

    @log_api_call
    def insert_player(self, name: str, driver_id: str) -> str:
        try:
            return self._client.insert_league_player(name, driver_id).id
        except BackendError as exc:
            raise LeagueDataError(f"Failed to add league player {name!r}: {exc}") from exc

    @log_api_call
    def update_player(self, player_id: str, driver_id: str) -> None:
        try:
            self._client.update_league_player(player_id, driver_id)
        except BackendError as exc:
            raise LeagueDataError(f"Failed to update league player {player_id}: {exc}") from exc

    @log_api_call
    def delete_player(self, player_id: str) -> None:
        try:
            self._client.delete_league_player(player_id)
        except BackendError as exc:
            raise LeagueDataError(f"Failed to delete league player {player_id}: {exc}") from exc
