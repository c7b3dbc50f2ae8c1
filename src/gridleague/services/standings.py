"""Standings engine — pure functions, no I/O.

Turns the grid, a set of race results, team overrides and league players
into ranked driver and constructor standings. Bad records (unknown driver
ids, empty slots, slots past the points table) are skipped, never raised.

Ordering is points descending with a stable sort, so ties keep grid order
for drivers and first-seen order for teams.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from ..constants import POINTS_TABLE
from ..models.override import TeamOverride
from ..models.player import LeaguePlayer
from ..models.reference import Driver
from ..models.result import Award, RaceResult

Results = Mapping[int, RaceResult | None] | Iterable[RaceResult | None]
Overrides = Mapping[str, TeamOverride] | Iterable[TeamOverride] | None


@dataclass(frozen=True)
class AwardCounts:
    driver_of_the_day: int = 0
    fastest_lap: int = 0
    most_overtakes: int = 0
    cleanest_driver: int = 0

    def get(self, award: Award | str) -> int:
        """Count for *award*; plain column names are accepted. Raises ValueError if unknown."""
        return getattr(self, Award(award).value)


@dataclass(frozen=True)
class DriverStanding:
    driver_id: str
    driver_name: str
    team: str
    team_color: str
    league_player_name: str | None
    points: int
    awards: AwardCounts


@dataclass(frozen=True)
class ConstructorStanding:
    team: str
    team_color: str
    points: int


@dataclass(frozen=True)
class AwardLeader:
    standing: DriverStanding
    count: int


def build_override_map(overrides: Overrides) -> dict[str, TeamOverride]:
    """Index overrides by driver id. A later override for the same driver wins."""
    if overrides is None:
        return {}
    if isinstance(overrides, Mapping):
        return dict(overrides)
    return {o.driver_id: o for o in overrides}


def iter_results(results: Results) -> Iterator[RaceResult]:
    """Yield the recorded results, accepting a race_id mapping or a plain iterable."""
    values = results.values() if isinstance(results, Mapping) else results
    return (r for r in values if r is not None)


def effective_team(driver: Driver, override_map: Mapping[str, TeamOverride]) -> tuple[str, str]:
    """Return (team, team_color) the driver is credited to right now."""
    override = override_map.get(driver.id)
    if override is None:
        return driver.team, driver.team_color
    return override.team, override.team_color or driver.team_color


def classified(top_ten: Iterable[str], limit: int) -> Iterator[tuple[int, str]]:
    """Yield (index, driver_id) for filled slots below *limit*.

    A driver repeated within one classification only counts at their first slot.
    """
    seen: set[str] = set()
    for index, driver_id in enumerate(top_ten):
        if index >= limit:
            break
        if not driver_id or driver_id in seen:
            continue
        seen.add(driver_id)
        yield index, driver_id


def score_result(
    result: RaceResult,
    points_table: tuple[int, ...] = POINTS_TABLE,
) -> Iterator[tuple[str, int]]:
    """Yield (driver_id, points) for every scoring slot of one result."""
    for index, driver_id in classified(result.top_ten, len(points_table)):
        yield driver_id, points_table[index]


def compute_driver_standings(
    drivers: Iterable[Driver],
    results: Results = (),
    overrides: Overrides = None,
    league_players: Iterable[LeaguePlayer] = (),
    points_table: tuple[int, ...] = POINTS_TABLE,
) -> list[DriverStanding]:
    """Rank every driver on the grid by points scored across *results*.

    Every driver gets a standing, even with no results. Results are additive,
    so their order does not matter.
    """
    drivers = list(drivers)
    override_map = build_override_map(overrides)

    player_by_driver: dict[str, LeaguePlayer] = {}
    for player in league_players:
        if player.driver_id:
            player_by_driver.setdefault(player.driver_id, player)

    points = {d.id: 0 for d in drivers}
    awards: dict[str, dict[Award, int]] = {d.id: dict.fromkeys(Award, 0) for d in drivers}

    for result in iter_results(results):
        for driver_id, scored in score_result(result, points_table):
            if driver_id in points:
                points[driver_id] += scored
        for award in Award:
            winner = result.award_winner(award)
            if winner in awards:
                awards[winner][award] += 1

    standings: list[DriverStanding] = []
    for driver in drivers:
        team, team_color = effective_team(driver, override_map)
        player = player_by_driver.get(driver.id)
        standings.append(
            DriverStanding(
                driver_id=driver.id,
                driver_name=driver.name,
                team=team,
                team_color=team_color,
                league_player_name=player.name if player else None,
                points=points[driver.id],
                awards=AwardCounts(**{a.value: n for a, n in awards[driver.id].items()}),
            )
        )

    return sorted(standings, key=lambda s: -s.points)


def aggregate_constructors(standings: Iterable[DriverStanding]) -> list[ConstructorStanding]:
    """Sum driver points per team, ranked by points."""
    totals: dict[str, int] = {}
    colors: dict[str, str] = {}
    for standing in standings:
        totals[standing.team] = totals.get(standing.team, 0) + standing.points
        colors.setdefault(standing.team, standing.team_color)

    ranked = [
        ConstructorStanding(team=team, team_color=colors[team], points=total)
        for team, total in totals.items()
    ]
    return sorted(ranked, key=lambda c: -c.points)


def compute_constructor_standings(
    drivers: Iterable[Driver],
    results: Results = (),
    overrides: Overrides = None,
    league_players: Iterable[LeaguePlayer] = (),
    points_table: tuple[int, ...] = POINTS_TABLE,
) -> list[ConstructorStanding]:
    """Rank teams by the combined points of the drivers credited to them."""
    return aggregate_constructors(
        compute_driver_standings(drivers, results, overrides, league_players, points_table)
    )


def top_award_holder(
    standings: Iterable[DriverStanding], award: Award | str,
) -> AwardLeader | None:
    """Return the driver with the most wins of *award*, or None if nobody has won it.

    Among tied drivers the one listed first in *standings* wins. An unknown
    award key also gives None.
    """
    try:
        award = Award(award)
    except ValueError:
        return None
    leader: DriverStanding | None = None
    best = 0
    for standing in standings:
        count = standing.awards.get(award)
        if count > best:
            leader, best = standing, count
    if leader is None:
        return None
    return AwardLeader(standing=leader, count=best)
