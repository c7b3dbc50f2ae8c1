"""League service: admin gating, save-path validation and roster policy.

Reads go through one snapshot of the three stores so a page renders
consistent standings; the standings engine itself never sees the actor.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from ..api_logging import log_service_call
from ..constants import POINTS_TABLE, ROSTER_SIZE
from ..data.base import LeagueRepository
from ..models.auth import AuthSession
from ..models.override import TeamOverride
from ..models.player import LeaguePlayer
from ..models.reference import Driver, Race
from ..models.result import RESULT_SLOTS, Award, RaceResult
from ..reference import DRIVERS, RACES, TEAM_COLORS
from .errors import (
    LeagueServiceError,
    NotAuthorizedError,
    ResultValidationError,
    RosterError,
    UnknownEntityError,
)
from .standings import (
    AwardLeader,
    ConstructorStanding,
    DriverStanding,
    aggregate_constructors,
    build_override_map,
    compute_driver_standings,
    top_award_holder,
)
from .stats import (
    PlacementStats,
    PointsProgression,
    completed_race_ids,
    placement_breakdown,
    points_progression,
)


@dataclass(frozen=True)
class Actor:
    """Who is acting, and whether they may change league data."""

    user_id: str | None = None
    email: str | None = None
    is_admin: bool = False

    @classmethod
    def anonymous(cls) -> Actor:
        return cls()

    @classmethod
    def from_session(cls, session: AuthSession | None, admin_emails: Iterable[str]) -> Actor:
        """Admin only when the signed-in email is on the configured admin list."""
        if session is None:
            return cls.anonymous()
        email = session.user.email
        admins = {e.strip().lower() for e in admin_emails}
        return cls(
            user_id=session.user.id,
            email=email,
            is_admin=bool(email) and email.lower() in admins,
        )


@dataclass(frozen=True)
class LeagueSnapshot:
    overrides: tuple[TeamOverride, ...]
    results: tuple[RaceResult, ...]
    players: tuple[LeaguePlayer, ...]

    @property
    def override_map(self) -> dict[str, TeamOverride]:
        return build_override_map(self.overrides)


class LeagueService:
    """Everything the league pages do besides drawing."""

    def __init__(
        self,
        repo: LeagueRepository,
        actor: Actor | None = None,
        drivers: Sequence[Driver] = DRIVERS,
        races: Sequence[Race] = RACES,
        points_table: tuple[int, ...] = POINTS_TABLE,
        roster_size: int = ROSTER_SIZE,
    ) -> None:
        self._repo = repo
        self.actor = actor or Actor.anonymous()
        self._drivers = tuple(drivers)
        self._races = tuple(races)
        self._driver_ids = {d.id for d in self._drivers}
        self._race_ids = {r.id for r in self._races}
        self._points_table = points_table
        self._roster_size = roster_size

    def _require_admin(self, action: str) -> None:
        if not self.actor.is_admin:
            raise NotAuthorizedError(f"Only the league admin can {action}.")

    def _driver(self, driver_id: str) -> Driver:
        for driver in self._drivers:
            if driver.id == driver_id:
                return driver
        raise UnknownEntityError(f"Unknown driver {driver_id!r}")

    def _snapshot(self, snapshot: LeagueSnapshot | None) -> LeagueSnapshot:
        return snapshot if snapshot is not None else self.load_snapshot()

    # ── Reads ──────────────────────────────────────────────────

    @log_service_call
    def load_snapshot(self) -> LeagueSnapshot:
        """Read all three stores once."""
        return LeagueSnapshot(
            overrides=tuple(self._repo.list_overrides()),
            results=tuple(self._repo.list_results()),
            players=tuple(self._repo.list_players()),
        )

    @log_service_call
    def driver_standings(self, snapshot: LeagueSnapshot | None = None) -> list[DriverStanding]:
        snap = self._snapshot(snapshot)
        return compute_driver_standings(
            self._drivers, snap.results, snap.override_map, snap.players, self._points_table,
        )

    @log_service_call
    def constructor_standings(
        self, snapshot: LeagueSnapshot | None = None,
    ) -> list[ConstructorStanding]:
        return aggregate_constructors(self.driver_standings(snapshot))

    @log_service_call
    def award_leaders(
        self, snapshot: LeagueSnapshot | None = None,
    ) -> dict[Award, AwardLeader | None]:
        standings = self.driver_standings(snapshot)
        return {award: top_award_holder(standings, award) for award in Award}

    @log_service_call
    def placement_stats(self, snapshot: LeagueSnapshot | None = None) -> list[PlacementStats]:
        snap = self._snapshot(snapshot)
        return placement_breakdown(
            self._drivers, snap.results, snap.override_map, self._points_table,
        )

    @log_service_call
    def points_progression(
        self, snapshot: LeagueSnapshot | None = None,
    ) -> list[PointsProgression]:
        snap = self._snapshot(snapshot)
        return points_progression(
            self._drivers, self._races, snap.results, snap.override_map, self._points_table,
        )

    def completed_race_ids(self, snapshot: LeagueSnapshot | None = None) -> set[int]:
        return completed_race_ids(self._snapshot(snapshot).results)

    def available_drivers(self, snapshot: LeagueSnapshot | None = None) -> list[Driver]:
        """Drivers not yet claimed by a league player, in grid order."""
        claimed = {p.driver_id for p in self._snapshot(snapshot).players}
        return [d for d in self._drivers if d.id not in claimed]

    # ── Race results ───────────────────────────────────────────

    def _validate_result(self, result: RaceResult) -> None:
        if result.race_id not in self._race_ids:
            raise UnknownEntityError(f"Unknown race {result.race_id}")
        if len(result.top_ten) != RESULT_SLOTS or len(result.filled_positions()) != RESULT_SLOTS:
            raise ResultValidationError(f"Please fill all top {RESULT_SLOTS} positions.")
        if result.has_duplicates():
            raise ResultValidationError(
                f"Each driver can only appear once in the top {RESULT_SLOTS}.",
            )
        unknown = [d for d in result.top_ten if d not in self._driver_ids]
        if unknown:
            raise ResultValidationError(f"Unknown drivers in classification: {', '.join(unknown)}")
        missing = [a.value for a in Award if not result.award_winner(a)]
        if missing:
            raise ResultValidationError(f"Please select all award winners (missing: {', '.join(missing)}).")
        unknown = [result.award_winner(a) for a in Award if result.award_winner(a) not in self._driver_ids]
        if unknown:
            raise ResultValidationError(f"Unknown award winners: {', '.join(unknown)}")

    @log_service_call
    def save_race_result(
        self,
        race_id: int,
        top_ten: Sequence[str],
        awards: Mapping[Award, str],
    ) -> RaceResult:
        """Validate and store a full result, replacing any earlier one for the race."""
        self._require_admin("save race results")
        result = RaceResult(
            race_id=race_id,
            top_ten=tuple(top_ten),
            **{award.value: awards.get(award, "") for award in Award},
        )
        self._validate_result(result)
        self._repo.upsert_result(result)
        return result

    @log_service_call
    def reset_race_result(self, race_id: int) -> RaceResult:
        """Overwrite a race's result with an empty one."""
        self._require_admin("reset race results")
        if race_id not in self._race_ids:
            raise UnknownEntityError(f"Unknown race {race_id}")
        blank = RaceResult.blank(race_id, RESULT_SLOTS)
        self._repo.upsert_result(blank)
        return blank

    @log_service_call
    def delete_race_result(self, race_id: int) -> None:
        self._require_admin("delete race results")
        self._repo.delete_result(race_id)

    # ── Team overrides ─────────────────────────────────────────

    @log_service_call
    def set_team_override(self, driver_id: str, team: str) -> TeamOverride:
        """Credit a driver to *team*, using the team's standard color when it has one."""
        self._require_admin("change the grid")
        driver = self._driver(driver_id)
        team = team.strip()
        if not team:
            raise LeagueServiceError("Team name is required.")
        color = TEAM_COLORS.get(team, driver.team_color)
        self._repo.upsert_override(driver_id, team, color)
        return TeamOverride(driver_id=driver_id, team=team, team_color=color)

    @log_service_call
    def clear_team_override(self, driver_id: str) -> None:
        """Revert a driver to their base team."""
        self._require_admin("reset the grid")
        self._repo.delete_override(driver_id)

    # ── League players ─────────────────────────────────────────

    @log_service_call
    def add_league_player(self, name: str, driver_id: str) -> str:
        """Assign a new league player to an unclaimed driver and return the player id."""
        self._require_admin("add league players")
        name = name.strip()
        if not name:
            raise RosterError("Player name is required.")
        self._driver(driver_id)
        players = self._repo.list_players()
        if len(players) >= self._roster_size:
            raise RosterError(f"You can only have {self._roster_size} league players.")
        if any(p.driver_id == driver_id for p in players):
            raise RosterError(f"Driver {driver_id} is already assigned.")
        return self._repo.insert_player(name, driver_id)

    @log_service_call
    def reassign_league_player(self, player_id: str, driver_id: str) -> None:
        self._require_admin("edit league players")
        self._driver(driver_id)
        players = self._repo.list_players()
        if not any(p.id == player_id for p in players):
            raise UnknownEntityError(f"Unknown league player {player_id!r}")
        if any(p.driver_id == driver_id and p.id != player_id for p in players):
            raise RosterError(f"Driver {driver_id} is already assigned.")
        self._repo.update_player(player_id, driver_id)

    @log_service_call
    def remove_league_player(self, player_id: str) -> None:
        self._require_admin("remove league players")
        self._repo.delete_player(player_id)

    @log_service_call
    def reset_league(self) -> None:
        """Clear every league player and race result. Team overrides are kept."""
        self._require_admin("reset the league")
        for player in self._repo.list_players():
            self._repo.delete_player(player.id)
        for result in self._repo.list_results():
            self._repo.delete_result(result.race_id)
