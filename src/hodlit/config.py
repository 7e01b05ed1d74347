"""Application configuration helpers."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "http://localhost:8080"


class AppSettings(BaseSettings):
    """Project-wide settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL, alias="API_BASE_URL")
    request_timeout: float = Field(
        default=30.0, gt=0, alias="API_TIMEOUT_SECONDS")
    session_dir: Path = Field(
        default=Path(".hodlit"), alias="HODLIT_SESSION_DIR")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        return value.strip().upper()
