"""Configuration package."""

from fundwarrior.config.settings import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_HOME,
    ConfigurationError,
    FundSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_HOME",
    "ConfigurationError",
    "FundSettings",
    "get_settings",
]
