"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from gridleague.exceptions import (
    BackendAPIError,
    BackendConnectionError,
    BackendTimeoutError,
)

DEFAULT_TIMEOUT = 30.0

Params = list[tuple[str, str]]


def _default_headers(api_key: str) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "apikey": api_key,
        "Authorization": f"Bearer {api_key}",
    }


def _prefer(prefer: str | None) -> dict[str, str] | None:
    return {"Prefer": prefer} if prefer else None


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of an error body, if it has one."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        for key in ("message", "error_description", "msg", "error"):
            if body.get(key):
                return str(body[key])
    return response.text


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON ([] for an empty body)."""
    if response.status_code >= 400:
        raise BackendAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    if response.status_code == 204 or not response.content:
        return []
    return response.json()


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers=_default_headers(api_key),
        )

    def set_access_token(self, token: str | None) -> None:
        """Authorize later requests as a signed-in user, or as anon when None."""
        self._client.headers["Authorization"] = f"Bearer {token or self._api_key}"

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Params | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        try:
            response = self._client.request(
                method, endpoint, params=params, json=json, headers=headers,
            )
        except httpx.ConnectError as exc:
            raise BackendConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def get(self, endpoint: str, params: Params) -> Any:
        """Perform a GET request and return parsed JSON."""
        return self._request("GET", endpoint, params=params)

    def post(
        self, endpoint: str, params: Params, json: Any, prefer: str | None = None,
    ) -> Any:
        """Perform a POST request and return parsed JSON."""
        return self._request("POST", endpoint, params=params, json=json, headers=_prefer(prefer))

    def patch(
        self, endpoint: str, params: Params, json: Any, prefer: str | None = None,
    ) -> Any:
        """Perform a PATCH request and return parsed JSON."""
        return self._request("PATCH", endpoint, params=params, json=json, headers=_prefer(prefer))

    def delete(self, endpoint: str, params: Params) -> Any:
        """Perform a DELETE request and return parsed JSON."""
        return self._request("DELETE", endpoint, params=params)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=_default_headers(api_key),
        )

    def set_access_token(self, token: str | None) -> None:
        """Authorize later requests as a signed-in user, or as anon when None."""
        self._client.headers["Authorization"] = f"Bearer {token or self._api_key}"

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Params | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        try:
            response = await self._client.request(
                method, endpoint, params=params, json=json, headers=headers,
            )
        except httpx.ConnectError as exc:
            raise BackendConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def get(self, endpoint: str, params: Params) -> Any:
        """Perform an async GET request and return parsed JSON."""
        return await self._request("GET", endpoint, params=params)

    async def post(
        self, endpoint: str, params: Params, json: Any, prefer: str | None = None,
    ) -> Any:
        """Perform an async POST request and return parsed JSON."""
        return await self._request(
            "POST", endpoint, params=params, json=json, headers=_prefer(prefer),
        )

    async def patch(
        self, endpoint: str, params: Params, json: Any, prefer: str | None = None,
    ) -> Any:
        """Perform an async PATCH request and return parsed JSON."""
        return await self._request(
            "PATCH", endpoint, params=params, json=json, headers=_prefer(prefer),
        )

    async def delete(self, endpoint: str, params: Params) -> Any:
        """Perform an async DELETE request and return parsed JSON."""
        return await self._request("DELETE", endpoint, params=params)

    async def close(self) -> None:
        await self._client.aclose()
