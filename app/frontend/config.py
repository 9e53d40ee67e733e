from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FrontendSettings(BaseSettings):
    """Build/runtime configuration injected into the frontend."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    api_base_url: str = Field(default="http://localhost:3000", validation_alias="VITE_API_BASE_URL")

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_frontend_settings() -> FrontendSettings:
    """Return a cached FrontendSettings instance."""
    return FrontendSettings()
