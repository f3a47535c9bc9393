from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LoggingSettings


__all__ = ["Settings", "ConfigurationError", "get_settings"]


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class Settings(BaseSettings):
    """
    Configuration settings for ccauth itself.

    Settings are loaded from ``CCAUTH_``-prefixed environment variables and an
    optional .env file. Nested values use ``__`` as delimiter, for example
    ``CCAUTH_LOGGING__LEVEL=DEBUG``.

    The authentication variables managed by ccauth (ANTHROPIC_API_KEY and
    friends) are not settings; they are read and written through an
    environment store.
    """

    model_config = SettingsConfigDict(
        env_prefix="CCAUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        return Settings()
    except ValueError as e:
        raise ConfigurationError(f"Invalid ccauth configuration: {e}") from e
