"""
Result container for use-case outcomes.

A closed two-variant type: ``Success`` carries a value, ``Failure``
carries an error. Use cases return it instead of raising, so callers
branch with ``match`` or ``is_success`` rather than try/except.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T, E]):
    """Successful outcome holding ``value``."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return fn(self.value)

    def get_or_else(self, default: T) -> T:
        return self.value

    def get_or_raise(self) -> T:
        return self.value

    def match(
        self,
        on_success: Callable[[T], U],
        on_failure: Callable[[E], U],
    ) -> U:
        return on_success(self.value)


@dataclass(frozen=True)
class Failure(Generic[T, E]):
    """Failed outcome holding ``error``."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        return Failure(self.error)

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return Failure(self.error)

    def get_or_else(self, default: T) -> T:
        return default

    def get_or_raise(self) -> T:
        """
        Raise the wrapped error.

        Raises:
            The wrapped exception, or RuntimeError when the error is not
            an exception instance.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(str(self.error))

    def match(
        self,
        on_success: Callable[[T], U],
        on_failure: Callable[[E], U],
    ) -> U:
        return on_failure(self.error)


Result = Union[Success[T, E], Failure[T, E]]


def success(value: T) -> Success[T, Any]:
    return Success(value)


def failure(error: E) -> Failure[Any, E]:
    return Failure(error)


def is_success(result: Result[Any, Any]) -> bool:
    return result.is_success()


def is_failure(result: Result[Any, Any]) -> bool:
    return result.is_failure()
