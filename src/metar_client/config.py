"""Configuration settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class MetarConfig(BaseSettings):
    """aviationweather.gov data server configuration."""

    base_url: str = "https://aviationweather.gov/api/data/dataserver"
    timeout_seconds: float = 30.0
    user_agent: str = "metar-client/0.1.0"

    model_config = {"env_prefix": "METAR_"}


class Settings(BaseSettings):
    """Application settings combining all configs."""

    log_level: str = "INFO"
    metar: MetarConfig = MetarConfig()


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
