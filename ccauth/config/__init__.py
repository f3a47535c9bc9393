"""Configuration for ccauth."""

from .logging import LoggingSettings
from .settings import ConfigurationError, Settings, get_settings


__all__ = [
    "ConfigurationError",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
