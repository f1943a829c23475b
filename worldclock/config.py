"""Configuration management for the project."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORLDCLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Dataset
    dataset_url: str = Field(
        default=(
            "https://raw.githubusercontent.com/dr5hn/countries-states-cities-database"
            "/master/json/countries%2Bstates%2Bcities.json.gz"
        )
    )

    # Clock
    refresh_interval_seconds: float = Field(default=30.0)
    small_shift_seconds: int = Field(default=15 * 60)
    large_shift_seconds: int = Field(default=60 * 60)
    offset_rounding: str = Field(default="15min")

    # Display
    fallback_flag: str = Field(default="🏳")
    display_timezone: Optional[str] = Field(default=None)

    # Persistence
    cities_file: str = Field(default="~/.config/worldclock/cities.json")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")


settings = Settings()
