"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the journal API."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    DAYSCORE_DB_URL: str = Field("sqlite:///./days.db")
    DAYSCORE_TIMEZONE: Optional[str] = Field(None, description="IANA zone used for 'today'; server local when unset")

    DAYSCORE_AUTH_MODE: Literal["none", "required"] = Field("none")
    DAYSCORE_IDENTITY_URL: Optional[str] = Field(None)
    DAYSCORE_IDENTITY_API_KEY: Optional[str] = Field(None)
    DAYSCORE_IDENTITY_TIMEOUT: int = Field(10)

    DAYSCORE_CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])
    DAYSCORE_HOST: str = Field("0.0.0.0")
    DAYSCORE_PORT: int = Field(3001)

    LOG_LEVEL: str = Field("INFO")

    @property
    def auth_required(self) -> bool:
        return self.DAYSCORE_AUTH_MODE == "required"

    def is_sqlite(self) -> bool:
        return self.DAYSCORE_DB_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()
