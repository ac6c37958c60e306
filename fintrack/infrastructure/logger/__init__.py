from .interfaces import ILoggingConfig
from .manager import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    "get_logger",
    "bind_context",
    "clear_context",
    "setup_logging",
    "ILoggingConfig",
]
