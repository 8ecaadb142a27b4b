"""Package configuration module."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings sourced from ``STATICRULES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STATICRULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    trace_evaluation: bool = False


settings = Settings()
