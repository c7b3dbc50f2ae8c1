"""Shared constants for the league tracker."""

from __future__ import annotations

# Points for P1..P10; any lower finish scores nothing.
POINTS_TABLE: tuple[int, ...] = (25, 18, 15, 12, 10, 8, 6, 4, 2, 1)

ROSTER_SIZE = 5

OVERRIDES_TABLE = "driver_team_overrides"
RESULTS_TABLE = "race_results"
PLAYERS_TABLE = "league_players"

REST_PREFIX = "/rest/v1"
AUTH_PREFIX = "/auth/v1"
