"""Application configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the weather API service."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    app_title: str = "Weather API"
    service_name: str = "weather_api"
    environment: str = "development"  # options: development, production
    https_redirect: bool = False
    random_seed: int | None = None
    log_level: str = "INFO"

    @field_validator("environment", mode="after")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        """Compare environments case-insensitively."""
        return v.strip().lower()

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        return v.strip().upper()

    @property
    def is_development(self) -> bool:
        """True when interactive API docs should be served."""
        return self.environment == "development"


settings = Settings()
