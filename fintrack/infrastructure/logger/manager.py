import logging
from typing import Any

import structlog

from fintrack.utils.metaclasses import Singleton

from .enums import QuietLoggers
from .handlers import HandlerChainBuilder, HandlerRegistry
from .interfaces import ILoggingConfig
from .processors import ProcessorChainBuilder, ProcessorRegistry
from .renderers import RendererRegistry, build_renderer


class LoggerManager(metaclass=Singleton):
    """Configures structlog and the stdlib root logger exactly once."""

    def __init__(self) -> None:
        self.config: ILoggingConfig | None = None
        self.is_configured = False

    def configure(
        self,
        config: ILoggingConfig,
        processor_builder: ProcessorChainBuilder,
        handler_builder: HandlerChainBuilder,
        renderer_registry: RendererRegistry,
    ) -> None:
        if self.is_configured:
            return

        self.config = config
        shared_processors = processor_builder.build_shared_chain(config)

        structlog.configure(
            processors=shared_processors
            + [processor_builder.build_formatter_wrapper()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        formatter = structlog.stdlib.ProcessorFormatter(
            processor=build_renderer(renderer_registry, config.debug),
            foreign_pre_chain=shared_processors,
        )

        handlers = handler_builder.build_handler_chain(config)
        for handler in handlers:
            handler.setFormatter(formatter)
            handler.setLevel(config.log_level)

        root_logger = logging.getLogger()
        root_logger.handlers = handlers
        root_logger.setLevel(config.log_level)

        for quiet in QuietLoggers:
            quiet.apply()

        self.is_configured = True

    def get_logger(self, name: str) -> structlog.stdlib.BoundLogger:
        if not self.is_configured:
            raise RuntimeError(
                "LoggerManager is not configured. "
                "Call 'setup_logging()' first."
            )
        return structlog.get_logger(name)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return LoggerManager().get_logger(name)


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context(*keys: str) -> None:
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()


def setup_logging(config: ILoggingConfig) -> None:
    """Configure logging once; later calls are ignored."""
    manager = LoggerManager()
    if manager.is_configured:
        return

    manager.configure(
        config=config,
        processor_builder=ProcessorChainBuilder(registry=ProcessorRegistry()),
        handler_builder=HandlerChainBuilder(registry=HandlerRegistry()),
        renderer_registry=RendererRegistry(),
    )
