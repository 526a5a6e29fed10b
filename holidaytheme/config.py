"""
Application configuration using pydantic-settings.
All config is validated at startup - fail fast on malformed values.
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache

from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig


class Settings(BaseSettings):
    # Application
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_base_url: str = "http://localhost:8000"
    log_level: str = "INFO"
    allowed_origins: str = ""  # Comma-separated CORS origins (auto-includes localhost in dev)

    # Holiday themes
    default_timezone: str = "America/New_York"
    holiday_timezone: str = ""  # Display timezone; empty means default_timezone
    enable_holiday_themes: bool = True
    disabled_holidays: str = ""  # Comma-separated holiday ids
    preview_holiday: str = ""
    preview_day: int = Field(default=1, ge=1)

    # Midnight refresh
    midnight_buffer_ms: int = Field(default=1000, ge=0)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def disabled_holiday_ids(self) -> list[str]:
        return [h.strip() for h in self.disabled_holidays.split(",") if h.strip()]

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        if self.app_env == "development":
            origins.append("http://localhost:5173")
        return origins

    def holiday_config(self) -> HolidayResolutionConfig:
        """Initial display settings for the session resolver."""
        return HolidayResolutionConfig(
            timezone=self.holiday_timezone or self.default_timezone,
            enable_holiday_themes=self.enable_holiday_themes,
            disabled_holidays=self.disabled_holiday_ids,
            preview_holiday=self.preview_holiday or None,
            preview_day=self.preview_day,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
