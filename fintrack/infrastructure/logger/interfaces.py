from abc import ABC
from pathlib import Path
from typing import Any, Callable, Generic, Protocol, TypeVar

T = TypeVar("T")


class ILoggingConfig(Protocol):
    debug: bool
    app_name: str
    log_level: str
    enable_file_logging: bool
    logs_dir: Path
    logs_file_name: str
    max_file_size_mb: int
    backup_count: int


class BaseRegistry(ABC, Generic[T]):
    """
    Named blueprints that build logging components.

    Subclasses are singletons, so registration at import time is visible
    to every builder.
    """

    def __init__(self) -> None:
        self._blueprints: dict[str, Callable[..., T]] = {}

    def register(self, name: str, blueprint: Callable[..., T]) -> None:
        if name in self._blueprints:
            raise ValueError(f"Blueprint '{name}' is already registered")
        self._blueprints[name] = blueprint

    def create(self, name: str, **kwargs: Any) -> T:
        if name not in self._blueprints:
            raise ValueError(f"Blueprint '{name}' not registered")
        return self._blueprints[name](**kwargs)

    def available(self) -> list[str]:
        return list(self._blueprints)


def register_in(
    registry: type[BaseRegistry[Any]], name: str
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(blueprint: Callable[..., Any]) -> Callable[..., Any]:
        registry().register(name, blueprint)
        return blueprint

    return decorator
