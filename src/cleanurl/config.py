"""Library configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, loaded from ``CLEANURL_*`` environment / .env file.

    Only logging is configurable here; what gets removed from a URL is always
    chosen per call.
    """

    log_level: str = "INFO"
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_prefix="CLEANURL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Module-level singleton; imported everywhere.
settings = Settings()
