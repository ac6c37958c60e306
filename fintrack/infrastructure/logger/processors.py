from typing import Any

import structlog
from structlog.types import EventDict, Processor

from fintrack.utils.metaclasses import Singleton

from .enums import ProcessorNames
from .interfaces import BaseRegistry, ILoggingConfig, register_in


class ProcessorRegistry(BaseRegistry[Processor], metaclass=Singleton):
    pass


class ProcessorChainBuilder:
    def __init__(
        self,
        registry: ProcessorRegistry,
        extra_processors: list[Processor] | None = None,
    ) -> None:
        self.registry = registry
        self.extra_processors = extra_processors or []

    def build_base_chain(self) -> list[Processor]:
        return [
            self.registry.create(ProcessorNames.MERGE_CONTEXTVARS),
            self.registry.create(ProcessorNames.ADD_LOGGER_NAME),
            self.registry.create(ProcessorNames.ADD_LOG_LEVEL),
            self.registry.create(ProcessorNames.POSITIONAL_ARGS),
            self.registry.create(ProcessorNames.TIMESTAMP),
            self.registry.create(ProcessorNames.STACK_INFO),
            self.registry.create(ProcessorNames.EXC_INFO),
        ]

    def build_shared_chain(self, logging_config: ILoggingConfig) -> list[Processor]:
        chain = self.build_base_chain()
        chain.append(
            self.registry.create(
                ProcessorNames.APP_CONTEXT, logging_config=logging_config
            )
        )
        chain.append(self.registry.create(ProcessorNames.MESSAGE_CLEANER))
        chain.extend(self.extra_processors)
        return chain

    def build_formatter_wrapper(self) -> Processor:
        return self.registry.create(ProcessorNames.FORMATTER_WRAPPER)


class LogMessageCleaner:
    """Strip surrounding whitespace from string events."""

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event = event_dict.get("event")
        if isinstance(event, str):
            event_dict["event"] = event.strip()
        return event_dict


class AppContextAdder:
    """Stamp every entry with the application name."""

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", self.app_name)
        return event_dict


@register_in(ProcessorRegistry, ProcessorNames.MERGE_CONTEXTVARS)
def _merge_contextvars() -> Processor:
    return structlog.contextvars.merge_contextvars


@register_in(ProcessorRegistry, ProcessorNames.ADD_LOGGER_NAME)
def _add_logger_name() -> Processor:
    return structlog.stdlib.add_logger_name


@register_in(ProcessorRegistry, ProcessorNames.ADD_LOG_LEVEL)
def _add_log_level() -> Processor:
    return structlog.stdlib.add_log_level


@register_in(ProcessorRegistry, ProcessorNames.POSITIONAL_ARGS)
def _positional_args() -> Processor:
    return structlog.stdlib.PositionalArgumentsFormatter()


@register_in(ProcessorRegistry, ProcessorNames.TIMESTAMP)
def _timestamp(fmt: str = "iso") -> Processor:
    return structlog.processors.TimeStamper(fmt=fmt, utc=True)


@register_in(ProcessorRegistry, ProcessorNames.STACK_INFO)
def _stack_info() -> Processor:
    return structlog.processors.StackInfoRenderer()


@register_in(ProcessorRegistry, ProcessorNames.EXC_INFO)
def _exc_info() -> Processor:
    return structlog.processors.format_exc_info


@register_in(ProcessorRegistry, ProcessorNames.APP_CONTEXT)
def _app_context(logging_config: ILoggingConfig) -> Processor:
    return AppContextAdder(app_name=logging_config.app_name)


@register_in(ProcessorRegistry, ProcessorNames.MESSAGE_CLEANER)
def _message_cleaner() -> Processor:
    return LogMessageCleaner()


@register_in(ProcessorRegistry, ProcessorNames.FORMATTER_WRAPPER)
def _formatter_wrapper() -> Processor:
    return structlog.stdlib.ProcessorFormatter.wrap_for_formatter
