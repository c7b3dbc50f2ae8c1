"""Auth session models returned by the backend's token endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """The signed-in user."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str | None = None


class AuthSession(BaseModel):
    """Access token plus the user it belongs to."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    token_type: str = "bearer"
    expires_in: int | None = None
    refresh_token: str | None = None
    user: AuthUser
