"""Service layer — standings engine, statistics and league policies."""

from .errors import (
    LeagueServiceError,
    NotAuthorizedError,
    ResultValidationError,
    RosterError,
    UnknownEntityError,
)
from .league import Actor, LeagueService, LeagueSnapshot
from .standings import (
    AwardCounts,
    AwardLeader,
    ConstructorStanding,
    DriverStanding,
    aggregate_constructors,
    build_override_map,
    compute_constructor_standings,
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

__all__ = [
    "Actor",
    "AwardCounts",
    "AwardLeader",
    "ConstructorStanding",
    "DriverStanding",
    "LeagueService",
    "LeagueServiceError",
    "LeagueSnapshot",
    "NotAuthorizedError",
    "PlacementStats",
    "PointsProgression",
    "ResultValidationError",
    "RosterError",
    "UnknownEntityError",
    "aggregate_constructors",
    "build_override_map",
    "completed_race_ids",
    "compute_constructor_standings",
    "compute_driver_standings",
    "placement_breakdown",
    "points_progression",
    "top_award_holder",
]
