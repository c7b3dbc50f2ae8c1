"""Data layer — repository factory and re-exports."""

from __future__ import annotations

from ..config import Settings, get_settings
from .base import LeagueRepository
from .errors import LeagueDataError
from .memory_repo import InMemoryLeagueRepository


def get_repository(settings: Settings | None = None) -> LeagueRepository:
    """Return the hosted repository when a backend is configured, else an in-memory one."""
    settings = settings or get_settings()
    if settings.backend_configured:
        from ..client import LeagueClient
        from .hosted_repo import HostedLeagueRepository

        client = LeagueClient(
            settings.backend_url,  # type: ignore[arg-type]
            api_key=settings.anon_key,  # type: ignore[arg-type]
            timeout=settings.timeout,
        )
        return HostedLeagueRepository(client)
    return InMemoryLeagueRepository()


__all__ = [
    "InMemoryLeagueRepository",
    "LeagueDataError",
    "LeagueRepository",
    "get_repository",
]
