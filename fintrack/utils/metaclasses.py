from abc import ABCMeta
from threading import Lock
from typing import Any


class Singleton(ABCMeta):
    """Metaclass returning one shared instance per class."""

    _instances: dict[type, object] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any):
        if cls not in Singleton._instances:
            with Singleton._lock:
                if cls not in Singleton._instances:
                    Singleton._instances[cls] = super().__call__(
                        *args, **kwargs
                    )
        return Singleton._instances[cls]

    def reset_instance(cls) -> None:
        Singleton._instances.pop(cls, None)
