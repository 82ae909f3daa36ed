"""
Configuration module using pydantic-settings.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Club Leaderboard API"
    api_version: str = "0.1.0"
    api_description: str = "Ride counts and participation rates for the club leaderboard"
    debug: bool = False

    # Firebase Realtime Database
    firebase_database_url: str = "http://localhost:9000"
    firebase_auth: str | None = None
    firebase_timeout: float = 30.0

    # Store paths
    calendar_path: str = "calendar-events"
    attendance_path: str = "attendance"
    leaderboard_path: str = "leaderboard"

    # Leaderboard year when none is requested (None = current UTC year)
    default_year: int | None = None

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
