"""Placement statistics and points progression over the calendar."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from ..constants import POINTS_TABLE
from ..models.reference import Driver, Race
from ..models.result import RESULT_SLOTS
from .standings import (
    Overrides,
    Results,
    build_override_map,
    classified,
    compute_driver_standings,
    effective_team,
    iter_results,
    score_result,
)


@dataclass(frozen=True)
class PlacementStats:
    driver_id: str
    driver_name: str
    team: str
    positions: tuple[int, ...]  # positions[0] is the number of wins
    top_ten_finishes: int
    average_position: float | None  # over top-ten finishes only
    points: int

    def finishes_at(self, position: int) -> int:
        """Number of finishes in *position* (1-based)."""
        return self.positions[position - 1]


@dataclass(frozen=True)
class PointsProgression:
    driver_id: str
    driver_name: str
    team: str
    race_ids: tuple[int, ...]
    cumulative: tuple[int, ...]  # running total after each race in race_ids


def _placement_key(stats: PlacementStats) -> tuple:
    average = stats.average_position if stats.average_position is not None else math.inf
    return (
        tuple(-count for count in stats.positions),
        average,
        -stats.top_ten_finishes,
        -stats.points,
    )


def placement_breakdown(
    drivers: Iterable[Driver],
    results: Results = (),
    overrides: Overrides = None,
    points_table: tuple[int, ...] = POINTS_TABLE,
) -> list[PlacementStats]:
    """Histogram of top-ten finishes for every driver, countback-ranked.

    Ranking compares win counts, then P2 counts and so on down to P10, then
    lower average position, then more top-ten finishes, then more points.
    Drivers equal on all of those keep grid order.
    """
    drivers = list(drivers)
    results = list(iter_results(results))
    override_map = build_override_map(overrides)
    points = {
        s.driver_id: s.points
        for s in compute_driver_standings(drivers, results, override_map, points_table=points_table)
    }

    histogram = {d.id: [0] * RESULT_SLOTS for d in drivers}
    position_sum = dict.fromkeys(histogram, 0)
    for result in results:
        for index, driver_id in classified(result.top_ten, RESULT_SLOTS):
            if driver_id not in histogram:
                continue
            histogram[driver_id][index] += 1
            position_sum[driver_id] += index + 1

    breakdown: list[PlacementStats] = []
    for driver in drivers:
        counts = histogram[driver.id]
        finishes = sum(counts)
        breakdown.append(
            PlacementStats(
                driver_id=driver.id,
                driver_name=driver.name,
                team=effective_team(driver, override_map)[0],
                positions=tuple(counts),
                top_ten_finishes=finishes,
                average_position=position_sum[driver.id] / finishes if finishes else None,
                points=points[driver.id],
            )
        )

    return sorted(breakdown, key=_placement_key)


def points_progression(
    drivers: Iterable[Driver],
    races: Iterable[Race],
    results: Results = (),
    overrides: Overrides = None,
    points_table: tuple[int, ...] = POINTS_TABLE,
) -> list[PointsProgression]:
    """Running points total for every driver after each race, in calendar order.

    Races without a result repeat the previous total. Rows come back in
    championship order.
    """
    drivers = list(drivers)
    calendar = sorted(races, key=lambda r: r.id)
    by_race = {r.race_id: r for r in iter_results(results)}
    override_map = build_override_map(overrides)

    running = {d.id: 0 for d in drivers}
    series: dict[str, list[int]] = {d.id: [] for d in drivers}
    for race in calendar:
        result = by_race.get(race.id)
        if result is not None:
            for driver_id, scored in score_result(result, points_table):
                if driver_id in running:
                    running[driver_id] += scored
        for driver_id, total in running.items():
            series[driver_id].append(total)

    race_ids = tuple(r.id for r in calendar)
    order = compute_driver_standings(
        drivers, [by_race[i] for i in race_ids if i in by_race], override_map,
        points_table=points_table,
    )
    return [
        PointsProgression(
            driver_id=s.driver_id,
            driver_name=s.driver_name,
            team=s.team,
            race_ids=race_ids,
            cumulative=tuple(series[s.driver_id]),
        )
        for s in order
    ]


def completed_race_ids(results: Results) -> set[int]:
    """Ids of races whose result has every top-ten slot filled by a distinct driver."""
    return {r.race_id for r in iter_results(results) if r.is_complete()}
