import sys
from logging import Handler, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fintrack.utils.metaclasses import Singleton

from .enums import HandlerNames
from .interfaces import BaseRegistry, ILoggingConfig, register_in


class HandlerRegistry(BaseRegistry[Handler], metaclass=Singleton):
    pass


class HandlerChainBuilder:
    def __init__(self, registry: HandlerRegistry) -> None:
        self.registry = registry

    def build_handler_chain(self, logging_config: ILoggingConfig) -> list[Handler]:
        handlers = [self.registry.create(HandlerNames.CONSOLE)]
        if logging_config.enable_file_logging:
            Path(logging_config.logs_dir).mkdir(parents=True, exist_ok=True)
            handlers.append(
                self.registry.create(
                    HandlerNames.FILE, logging_config=logging_config
                )
            )
        return handlers


@register_in(HandlerRegistry, HandlerNames.CONSOLE)
def _console_handler() -> Handler:
    return StreamHandler(sys.stdout)


@register_in(HandlerRegistry, HandlerNames.FILE)
def _file_handler(logging_config: ILoggingConfig) -> Handler:
    return RotatingFileHandler(
        filename=str(
            Path(logging_config.logs_dir) / logging_config.logs_file_name
        ),
        maxBytes=logging_config.max_file_size_mb * 1024 * 1024,
        backupCount=logging_config.backup_count,
        encoding="utf-8",
    )
