from .config import AppConfig, DatabaseConfig, LedgerConfig, LoggingConfig, get_config

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "LedgerConfig",
    "LoggingConfig",
    "get_config",
]
