"""Package configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level")
    json_logs: bool = Field(default=True, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Central settings loaded from ``PIXCODE_`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PIXCODE_",
        env_nested_delimiter="__",
        env_file=(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    point_of_initiation: Literal["11", "12"] | None = Field(
        default=None,
        description="Emit tag 01 with this value; unset keeps the payload starting with 00020126",
    )
    qr_box_size: int = Field(default=10, ge=1, le=50)
    qr_border: int = Field(default=4, ge=0, le=20)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized settings."""

    return Settings()


settings = get_settings()
