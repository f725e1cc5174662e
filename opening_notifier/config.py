from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class VenueConfig:
    """Immutable per-venue scheduling configuration."""

    venue_id: int
    venue_name: str
    zone_id: str
    fallback_hour: int
    fallback_timeout_ms: int
    opening_epoch: datetime


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Environment
    environment: str = "development"  # "development" or "production"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/opening_notifier.db"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False

    # Hours source
    storepoint_url_prefix: str = "https://api.storepoint.co/v1/16026f2c5ac3c7/location/"
    http_timeout: int = 10  # seconds

    # Venue
    venue_id: int = 39156327
    venue_name: str = "Round1 Plaza Bonita"
    zone_id: str = "America/Los_Angeles"
    fallback_hour: int = 10
    fallback_timeout_ms: int = 3 * 60 * 1000
    opening_epoch: datetime = datetime.fromisoformat("2024-06-22T10:00:00-07:00")

    # Notifications
    discord_webhook_id: str = ""
    discord_webhook_token: str = ""
    notification_enabled: bool = True

    # Trigger (16:57 UTC, a few minutes before the usual 10 AM PT opening)
    schedule_hour: int = 16
    schedule_minute: int = 57
    schedule_timezone: str = "UTC"

    # Admin
    admin_api_key: str = ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def sync_database_url(self) -> str:
        return self.database_url.replace("+aiosqlite", "")

    @property
    def venue_config(self) -> VenueConfig:
        return VenueConfig(
            venue_id=self.venue_id,
            venue_name=self.venue_name,
            zone_id=self.zone_id,
            fallback_hour=self.fallback_hour,
            fallback_timeout_ms=self.fallback_timeout_ms,
            opening_epoch=self.opening_epoch,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
