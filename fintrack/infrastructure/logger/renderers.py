from typing import Any, Callable

import orjson
import structlog
from structlog.types import Processor

from fintrack.utils.metaclasses import Singleton

from .enums import RendererNames
from .interfaces import BaseRegistry, register_in


class RendererRegistry(BaseRegistry[Processor], metaclass=Singleton):
    pass


def build_renderer(registry: RendererRegistry, debug: bool) -> Processor:
    """Colored console output in debug mode, JSON lines otherwise."""
    if debug:
        return registry.create(RendererNames.CONSOLE, colors=True)
    return registry.create(RendererNames.JSON)


def orjson_serializer(
    data: Any,
    default: Callable[[Any], Any] | None = None,
    **kwargs: Any,
) -> str:
    return orjson.dumps(data, default=default).decode("utf-8")


@register_in(RendererRegistry, RendererNames.JSON)
def _json_renderer() -> Processor:
    return structlog.processors.JSONRenderer(serializer=orjson_serializer)


@register_in(RendererRegistry, RendererNames.CONSOLE)
def _console_renderer(colors: bool = True) -> Processor:
    return structlog.dev.ConsoleRenderer(colors=colors)
