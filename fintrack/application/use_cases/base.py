"""
Common pieces shared by every use case.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import ValidationError
from structlog import get_logger

from fintrack.utils.result import Failure, Result

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")

logger = get_logger(__name__)


class UseCaseError(Exception):
    """Expected, user-facing use-case failure carried inside a Failure."""


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """Single-purpose orchestrator with one ``execute`` entry point."""

    @abstractmethod
    def execute(self, request: RequestT) -> Result[ResponseT, UseCaseError]:
        pass


def describe_error(error: BaseException) -> str:
    """Readable cause, flattening Pydantic field errors."""
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            if err["loc"]
            else err["msg"]
            for err in error.errors()
        )
    return str(error) or type(error).__name__


def reject(message: str) -> Failure[Any, UseCaseError]:
    """Business-rule rejection."""
    logger.warning(f"Use case rejected request: {message}")
    return Failure(UseCaseError(message))


def fail(action: str, error: Exception) -> Failure[Any, UseCaseError]:
    """
    Wrap an unexpected error as ``Failed to <action>: <cause>``.

    Args:
        action: Verb and noun, e.g. ``"create operation"``.
        error: Exception raised by validation, an entity or storage.
    """
    wrapped = UseCaseError(f"Failed to {action}: {describe_error(error)}")
    wrapped.__cause__ = error
    logger.warning(f"Use case failed: {wrapped}")
    return Failure(wrapped)
