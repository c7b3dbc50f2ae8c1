"""Public client classes for the league's hosted backend."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter

from gridleague._filters import build_query_params
from gridleague._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from gridleague.constants import (
    AUTH_PREFIX,
    OVERRIDES_TABLE,
    PLAYERS_TABLE,
    REST_PREFIX,
    RESULTS_TABLE,
)
from gridleague.exceptions import (
    AuthenticationError,
    BackendAPIError,
    BackendValidationError,
)
from gridleague.models.auth import AuthSession
from gridleague.models.override import TeamOverride
from gridleague.models.player import LeaguePlayer
from gridleague.models.result import RaceResult

_UPSERT = "resolution=merge-duplicates,return=minimal"
_RETURN_ROWS = "return=representation"
_RETURN_NONE = "return=minimal"

T = TypeVar("T")


def _validate_list(model_type: type[T], data: Any) -> list[T]:
    """Validate a list of row dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise BackendValidationError(
            f"Failed to validate {model_type.__name__} rows: {exc}"
        ) from exc


def _validate_session(data: Any) -> AuthSession:
    try:
        return AuthSession.model_validate(data)
    except Exception as exc:
        raise BackendValidationError(f"Failed to validate auth session: {exc}") from exc


def _table(name: str) -> str:
    return f"{REST_PREFIX}/{name}"


def _first_row(rows: list[T], what: str) -> T:
    if not rows:
        raise BackendValidationError(f"Backend returned no row for {what}")
    return rows[0]


class LeagueClient:
    """Synchronous client for the league's hosted tables and auth.

    Usage:
        client = LeagueClient("https://xyz.supabase.co", api_key="anon-key")
        results = client.race_results()
        client.close()

        # Or as a context manager:
        with LeagueClient(url, api_key=key) as client:
            client.sign_in("admin@example.com", "secret")
            client.delete_race_result(3)
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, api_key=api_key, timeout=timeout)
        self._session: AuthSession | None = None

    def __enter__(self) -> LeagueClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @property
    def session(self) -> AuthSession | None:
        return self._session

    def _select(self, table: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(select="*", **kwargs)
        data = self._transport.get(_table(table), params)
        return _validate_list(model, data)

    # ── Auth ───────────────────────────────────────────────────

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange email and password for a session and use its token from now on."""
        try:
            data = self._transport.post(
                f"{AUTH_PREFIX}/token",
                [("grant_type", "password")],
                {"email": email, "password": password},
            )
        except BackendAPIError as exc:
            if exc.status_code in (400, 401):
                raise AuthenticationError(exc.message) from exc
            raise
        session = _validate_session(data)
        self._transport.set_access_token(session.access_token)
        self._session = session
        return session

    def sign_out(self) -> None:
        """Revoke the current session and fall back to the anon key."""
        if self._session is None:
            return
        try:
            self._transport.post(f"{AUTH_PREFIX}/logout", [], None)
        finally:
            self._transport.set_access_token(None)
            self._session = None

    # ── Team overrides ─────────────────────────────────────────

    def team_overrides(self, **kwargs: Any) -> list[TeamOverride]:
        """Get every driver→team override."""
        return self._select(OVERRIDES_TABLE, TeamOverride, **kwargs)

    def upsert_team_override(self, override: TeamOverride) -> None:
        """Create or replace the override for ``override.driver_id``."""
        self._transport.post(
            _table(OVERRIDES_TABLE),
            build_query_params(on_conflict="driver_id"),
            override.model_dump(by_alias=True, mode="json"),
            prefer=_UPSERT,
        )

    def delete_team_override(self, driver_id: str) -> None:
        """Remove a driver's override, reverting them to their base team."""
        self._transport.delete(_table(OVERRIDES_TABLE), build_query_params(driver_id=driver_id))

    # ── Race results ───────────────────────────────────────────

    def race_results(self, **kwargs: Any) -> list[RaceResult]:
        """Get recorded race results."""
        return self._select(RESULTS_TABLE, RaceResult, **kwargs)

    def race_result(self, race_id: int) -> RaceResult | None:
        """Get the result for one race, or None when nothing is recorded."""
        rows = self.race_results(race_id=race_id)
        return rows[0] if rows else None

    def upsert_race_result(self, result: RaceResult) -> None:
        """Save a result, replacing any earlier result for the same race."""
        self._transport.post(
            _table(RESULTS_TABLE),
            build_query_params(on_conflict="race_id"),
            result.model_dump(mode="json"),
            prefer=_UPSERT,
        )

    def delete_race_result(self, race_id: int) -> None:
        self._transport.delete(_table(RESULTS_TABLE), build_query_params(race_id=race_id))

    # ── League players ─────────────────────────────────────────

    def league_players(self, **kwargs: Any) -> list[LeaguePlayer]:
        """Get the league roster."""
        return self._select(PLAYERS_TABLE, LeaguePlayer, **kwargs)

    def insert_league_player(self, name: str, driver_id: str) -> LeaguePlayer:
        """Add a player; the backend assigns the id."""
        data = self._transport.post(
            _table(PLAYERS_TABLE),
            [],
            {"name": name, "driver_id": driver_id},
            prefer=_RETURN_ROWS,
        )
        return _first_row(_validate_list(LeaguePlayer, data), f"player {name!r}")

    def update_league_player(self, player_id: str, driver_id: str) -> None:
        """Point an existing player at a different driver."""
        self._transport.patch(
            _table(PLAYERS_TABLE),
            build_query_params(id=player_id),
            {"driver_id": driver_id},
            prefer=_RETURN_NONE,
        )

    def delete_league_player(self, player_id: str) -> None:
        self._transport.delete(_table(PLAYERS_TABLE), build_query_params(id=player_id))


class AsyncLeagueClient:
    """Asynchronous client for the league's hosted tables and auth.

    Usage:
        async with AsyncLeagueClient(url, api_key=key) as client:
            results = await client.race_results()
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, api_key=api_key, timeout=timeout)
        self._session: AuthSession | None = None

    async def __aenter__(self) -> AsyncLeagueClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @property
    def session(self) -> AuthSession | None:
        return self._session

    async def _select(self, table: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(select="*", **kwargs)
        data = await self._transport.get(_table(table), params)
        return _validate_list(model, data)

    # ── Auth ───────────────────────────────────────────────────

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange email and password for a session and use its token from now on."""
        try:
            data = await self._transport.post(
                f"{AUTH_PREFIX}/token",
                [("grant_type", "password")],
                {"email": email, "password": password},
            )
        except BackendAPIError as exc:
            if exc.status_code in (400, 401):
                raise AuthenticationError(exc.message) from exc
            raise
        session = _validate_session(data)
        self._transport.set_access_token(session.access_token)
        self._session = session
        return session

    async def sign_out(self) -> None:
        """Revoke the current session and fall back to the anon key."""
        if self._session is None:
            return
        try:
            await self._transport.post(f"{AUTH_PREFIX}/logout", [], None)
        finally:
            self._transport.set_access_token(None)
            self._session = None

    # ── Team overrides ─────────────────────────────────────────

    async def team_overrides(self, **kwargs: Any) -> list[TeamOverride]:
        """Get every driver→team override."""
        return await self._select(OVERRIDES_TABLE, TeamOverride, **kwargs)

    async def upsert_team_override(self, override: TeamOverride) -> None:
        """Create or replace the override for ``override.driver_id``."""
        await self._transport.post(
            _table(OVERRIDES_TABLE),
            build_query_params(on_conflict="driver_id"),
            override.model_dump(by_alias=True, mode="json"),
            prefer=_UPSERT,
        )

    async def delete_team_override(self, driver_id: str) -> None:
        """Remove a driver's override, reverting them to their base team."""
        await self._transport.delete(
            _table(OVERRIDES_TABLE), build_query_params(driver_id=driver_id),
        )

    # ── Race results ───────────────────────────────────────────

    async def race_results(self, **kwargs: Any) -> list[RaceResult]:
        """Get recorded race results."""
        return await self._select(RESULTS_TABLE, RaceResult, **kwargs)

    async def race_result(self, race_id: int) -> RaceResult | None:
        """Get the result for one race, or None when nothing is recorded."""
        rows = await self.race_results(race_id=race_id)
        return rows[0] if rows else None

    async def upsert_race_result(self, result: RaceResult) -> None:
        """Save a result, replacing any earlier result for the same race."""
        await self._transport.post(
            _table(RESULTS_TABLE),
            build_query_params(on_conflict="race_id"),
            result.model_dump(mode="json"),
            prefer=_UPSERT,
        )

    async def delete_race_result(self, race_id: int) -> None:
        await self._transport.delete(
            _table(RESULTS_TABLE), build_query_params(race_id=race_id),
        )

    # ── League players ─────────────────────────────────────────

    async def league_players(self, **kwargs: Any) -> list[LeaguePlayer]:
        """Get the league roster."""
        return await self._select(PLAYERS_TABLE, LeaguePlayer, **kwargs)

    async def insert_league_player(self, name: str, driver_id: str) -> LeaguePlayer:
        """Add a player; the backend assigns the id."""
        data = await self._transport.post(
            _table(PLAYERS_TABLE),
            [],
            {"name": name, "driver_id": driver_id},
            prefer=_RETURN_ROWS,
        )
        return _first_row(_validate_list(LeaguePlayer, data), f"player {name!r}")

    async def update_league_player(self, player_id: str, driver_id: str) -> None:
        """Point an existing player at a different driver."""
        await self._transport.patch(
            _table(PLAYERS_TABLE),
            build_query_params(id=player_id),
            {"driver_id": driver_id},
            prefer=_RETURN_NONE,
        )

    async def delete_league_player(self, player_id: str) -> None:
        await self._transport.delete(
            _table(PLAYERS_TABLE), build_query_params(id=player_id),
        )
