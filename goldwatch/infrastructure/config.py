"""Environment configuration using pydantic-settings."""

from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    store_path: Path = Field(
        default=Path(".goldwatch/store.json"),
        alias="GOLDWATCH_STORE_PATH",
        description="JSON file holding price history, opening prices and alerts",
    )

    # Price history
    history_max_entries: int = Field(default=100, ge=1, alias="HISTORY_MAX_ENTRIES")
    candle_buffer_size: int = Field(default=500, ge=1, alias="CANDLE_BUFFER_SIZE")

    # Indicators
    min_indicator_samples: int = Field(default=5, ge=1, alias="MIN_INDICATOR_SAMPLES")

    # Alerts
    alert_cooldown_seconds: int = Field(default=300, ge=0, alias="ALERT_COOLDOWN_SECONDS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def alert_cooldown(self) -> timedelta:
        """Alert cooldown as a timedelta."""
        return timedelta(seconds=self.alert_cooldown_seconds)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
