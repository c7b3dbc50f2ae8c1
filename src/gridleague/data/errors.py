"""Data layer error."""

from __future__ import annotations


class LeagueDataError(Exception):
    """Store read/write failure, whatever the backend. Callers catch only this."""
