from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


def _default_term_start() -> date:
    return date(2024, 4, 1)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True, env_prefix=""
    )

    school_name: str = Field("Hatfield Junior Swimming School", alias="SCHOOL_NAME")
    random_seed: Optional[int] = Field(None, alias="RANDOM_SEED")
    term_start: date = Field(default_factory=_default_term_start, alias="TERM_START")
    school_timezone: str = Field("Europe/London", alias="SCHOOL_TIMEZONE")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("school_name")
    def validate_school_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("SCHOOL_NAME must not be empty")
        return cleaned

    @field_validator("term_start")
    def validate_term_start(cls, value: date) -> date:
        if value.weekday() != 0:
            raise ValueError("TERM_START must be a Monday")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
