"""League data models."""

from gridleague.models.auth import AuthSession, AuthUser
from gridleague.models.override import TeamOverride
from gridleague.models.player import LeaguePlayer
from gridleague.models.reference import Driver, Race
from gridleague.models.result import RESULT_SLOTS, Award, RaceResult

__all__ = [
    "RESULT_SLOTS",
    "AuthSession",
    "AuthUser",
    "Award",
    "Driver",
    "LeaguePlayer",
    "Race",
    "RaceResult",
    "TeamOverride",
]
