"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized configuration loaded from environment or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    output_dir: Path = Field(default=Path("data/ebeye"), alias="PXINDEX_OUTPUT_DIR")
    database_name: str = Field(default="PRIDE Archive", alias="PXINDEX_DATABASE_NAME")
    database_release: str = Field(default="3", alias="PXINDEX_DATABASE_RELEASE")
    pretty_print: bool = Field(default=True, alias="PXINDEX_PRETTY_PRINT")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
