"""League service errors."""

from __future__ import annotations


class LeagueServiceError(Exception):
    """Base class for rejected league operations."""


class NotAuthorizedError(LeagueServiceError):
    """Raised when a non-admin attempts a change."""


class UnknownEntityError(LeagueServiceError):
    """Raised when a race, driver or league player id does not exist."""


class ResultValidationError(LeagueServiceError):
    """Raised when a race result is not fit to save."""


class RosterError(LeagueServiceError):
    """Raised when a league player change breaks roster rules."""
