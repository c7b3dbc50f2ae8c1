"""In-process repository for offline use and tests."""

from __future__ import annotations

import itertools
import threading

from ..models.override import TeamOverride
from ..models.player import LeaguePlayer
from ..models.result import RaceResult
from .base import LeagueRepository


class InMemoryLeagueRepository(LeagueRepository):
    """Dict-backed stores. Last write wins; deleting a missing key is a no-op."""

    def __init__(
        self,
        overrides: list[TeamOverride] | None = None,
        results: list[RaceResult] | None = None,
        players: list[LeaguePlayer] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._overrides = {o.driver_id: o for o in overrides or []}
        self._results = {r.race_id: r for r in results or []}
        self._players = {p.id: p for p in players or []}
        self._ids = itertools.count(1)

    def list_overrides(self) -> list[TeamOverride]:
        with self._lock:
            return list(self._overrides.values())

    def upsert_override(self, driver_id: str, team: str, team_color: str) -> None:
        with self._lock:
            self._overrides[driver_id] = TeamOverride(
                driver_id=driver_id, team=team, team_color=team_color,
            )

    def delete_override(self, driver_id: str) -> None:
        with self._lock:
            self._overrides.pop(driver_id, None)

    def list_results(self) -> list[RaceResult]:
        with self._lock:
            return [self._results[k] for k in sorted(self._results)]

    def upsert_result(self, result: RaceResult) -> None:
        with self._lock:
            self._results[result.race_id] = result

    def delete_result(self, race_id: int) -> None:
        with self._lock:
            self._results.pop(race_id, None)

    def list_players(self) -> list[LeaguePlayer]:
        with self._lock:
            return list(self._players.values())

    def insert_player(self, name: str, driver_id: str) -> str:
        with self._lock:
            player_id = str(next(self._ids))
            while player_id in self._players:
                player_id = str(next(self._ids))
            self._players[player_id] = LeaguePlayer(id=player_id, name=name, driver_id=driver_id)
            return player_id

    def update_player(self, player_id: str, driver_id: str) -> None:
        with self._lock:
            player = self._players.get(player_id)
            if player is not None:
                self._players[player_id] = player.model_copy(update={"driver_id": driver_id})

    def delete_player(self, player_id: str) -> None:
        with self._lock:
            self._players.pop(player_id, None)
