from __future__ import annotations

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CREDENTIAL_ENV_NAME = "OPENWEATHER_API_KEY"

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)

    cors_origins: list[str] = Field(default_factory=list)

    openweather_api_key: str = Field(default="")
    openweather_base_url: AnyHttpUrl = Field(default=OPENWEATHER_CURRENT_URL)

    # Empty disables persistence and the recent-locations history.
    mongo_uri: str = Field(default="")
    mongo_db_name: str = Field(default="weather", min_length=1, max_length=64)
    mongo_collection: str = Field(default="weatherlocations", min_length=1, max_length=64)
    # Bounds startup index creation and every store call when MongoDB is down.
    mongo_server_selection_timeout_ms: int = Field(default=3000, ge=100, le=60_000)

    recent_locations_limit: int = Field(default=5, ge=1, le=50)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def persistence_enabled(self) -> bool:
        return bool(self.mongo_uri.strip())


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["*"]
    return settings
