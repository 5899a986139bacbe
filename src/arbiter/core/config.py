"""
Arbiter Configuration

Loads configuration from environment variables and an optional .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from arbiter.constants import SEED_VALUE_MAX, SEED_VALUE_MIN, SIZE_DEFAULT


class Settings(BaseSettings):
    """Arbiter settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARBITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Replay a run by exporting ARBITER_SEED=<seed>
    seed: Optional[int] = Field(default=None, ge=SEED_VALUE_MIN, le=SEED_VALUE_MAX)

    # Default size handed to generators when none is given
    size: int = Field(default=SIZE_DEFAULT, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
