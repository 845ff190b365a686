"""
Configuration Management for FundWarrior

Uses pydantic-settings for type-safe configuration from environment
variables (prefix FUND_) and an optional dotenv-style config file.

Resolution order, highest first:
1. FUND_* environment variables
2. The config file (~/.fund/config.env, or the one given with --config)
3. Defaults below
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_HOME = Path.home() / ".fund"
DEFAULT_CONFIG_FILE = DEFAULT_HOME / "config.env"


class ConfigurationError(Exception):
    """Settings could not be loaded."""
    pass


class FundSettings(BaseSettings):
    """
    Application settings.

    Example config file:
        FUND_DATA_DIR=~/Dropbox/fund
        FUND_ALLOW_NEGATIVE_BALANCE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="FUND_",
        env_file=DEFAULT_CONFIG_FILE,
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Storage
    data_dir: Path = Field(
        default=DEFAULT_HOME,
        description="Directory holding the fund file"
    )
    fund_file_name: str = Field(
        default="funds.json",
        min_length=1,
        description="File name of the ledger inside data_dir"
    )

    # Ledger policy
    allow_negative_balance: bool = Field(
        default=False,
        description="Allow spending past zero (logged as a warning) instead of rejecting"
    )

    # Locking
    lock_timeout_seconds: float = Field(
        default=0.5,
        gt=0,
        le=60,
        description="How long each lock attempt waits"
    )
    lock_attempts: int = Field(
        default=5,
        ge=1,
        le=50,
        description="How many times to try taking the lock"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level written to stderr"
    )
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="Structured log rendering"
    )

    @field_validator("data_dir")
    @classmethod
    def expand_data_dir(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept stdlib level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def fund_file(self) -> Path:
        return self.data_dir / self.fund_file_name


@lru_cache()
def get_settings(config_file: Optional[str] = None) -> FundSettings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.

    Raises:
        ConfigurationError: If the config file is missing or a value is invalid
    """
    try:
        if config_file is None:
            return FundSettings()

        path = Path(config_file).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"config file not found: {path}")
        return FundSettings(_env_file=path)
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e
