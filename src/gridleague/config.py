"""Environment-driven settings for the league tracker."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GRIDLEAGUE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    backend_url: str | None = None
    anon_key: str | None = None
    timeout: float = 30.0
    admin_emails: list[str] = []
    log_dir: str = "logs"

    @property
    def backend_configured(self) -> bool:
        return bool(self.backend_url and self.anon_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
