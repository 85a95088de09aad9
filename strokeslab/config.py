"""Configuration helpers for engine constants."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Strokes gained attribution
    expected_putts_fallback: float = Field(default=1.8, gt=0)
    tee_shot_differential: float = Field(default=0.1, ge=0)

    # Player trend
    trend_window: int = Field(default=3, ge=1)
    trend_threshold: float = Field(default=0.3, ge=0)

    # Handicap index
    handicap_min_rounds: int = Field(default=3, ge=1)
    handicap_window: int = Field(default=20, ge=1)
    handicap_best_fraction: float = Field(default=0.4, gt=0, le=1)
    handicap_multiplier: float = Field(default=0.96, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="STROKESLAB_", env_file=".env", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached engine settings."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
