"""gridleague: fantasy F1 league tracker, hosted-backend client and standings engine."""

from gridleague._filters import Filter
from gridleague.client import AsyncLeagueClient, LeagueClient
from gridleague.exceptions import (
    AuthenticationError,
    BackendAPIError,
    BackendConnectionError,
    BackendError,
    BackendTimeoutError,
    BackendValidationError,
)

__all__ = [
    "AsyncLeagueClient",
    "AuthenticationError",
    "BackendAPIError",
    "BackendConnectionError",
    "BackendError",
    "BackendTimeoutError",
    "BackendValidationError",
    "Filter",
    "LeagueClient",
]

__version__ = "0.1.0"
