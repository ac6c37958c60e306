"""
Configuration module for the application.

Provides type-safe settings using Pydantic.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fintrack.domain.value_objects.money import DEFAULT_CURRENCY


class LoggingConfig(BaseSettings):
    """Configuration for the logging system."""

    app_name: str = "fintrack"
    debug: bool = True  # if True then color console render, else json render
    log_level: str = "INFO"
    enable_file_logging: bool = False
    logs_dir: Path = Path("logs")
    logs_file_name: str = "fintrack.log"
    max_file_size_mb: int = 10
    backup_count: int = 5

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


class DatabaseConfig(BaseSettings):
    """Configuration for the ledger database."""

    database_file: Path = Field(
        default=Path("finance.db"),
        description="Path to SQLite database",
    )
    echo: bool = Field(default=False, description="Log emitted SQL")


class LedgerConfig(BaseSettings):
    """Defaults applied when callers enter amounts."""

    default_currency: str = Field(
        default=DEFAULT_CURRENCY,
        description="Currency for amounts entered without one",
    )

    @field_validator("default_currency", mode="after")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Currency must be a 3-letter code: {v}")
        return code


class AppConfig(BaseSettings):
    """Main application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    logger: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


@lru_cache
def get_config() -> AppConfig:
    config = AppConfig()
    return config
