"""Engine configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from bodycomp.domain.enums import ActivityLevel


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_prefix="BODYCOMP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Body Composition Engine"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"

    # Pipeline
    default_activity_level: ActivityLevel = ActivityLevel.MODERATE
    include_energy_expenditure: bool = True


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
