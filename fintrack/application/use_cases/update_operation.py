"""
Update operation use case: merge partial changes over a stored operation.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from structlog import get_logger

from fintrack.domain.entities.operation import (
    Operation,
    OperationNature,
    OperationState,
    PaymentMethod,
)
from fintrack.domain.repositories import IOperationRepository
from fintrack.domain.validators import is_blank
from fintrack.domain.value_objects.money import Money
from fintrack.utils.result import Result, Success

from .base import UseCase, UseCaseError, fail, reject

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateOperationRequest:
    """
    Changes to apply to operation ``id``.

    Fields left as None keep their stored value.
    """

    id: str
    nature: OperationNature | str | None = None
    state: OperationState | str | None = None
    payment_method: PaymentMethod | str | None = None
    source_account: str | None = None
    destination_account: str | None = None
    date: datetime | None = None
    value: Money | None = None
    category: str | None = None
    details: str | None = None
    project: str | None = None
    receipt: bytes | None = None

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "id" and getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class UpdateOperationResponse:
    operation: Operation


class UpdateOperationUseCase(
    UseCase[UpdateOperationRequest, UpdateOperationResponse]
):
    """
    Replace a stored operation with a re-validated merged copy.

    The id and the original creation timestamp are always preserved.
    The read-then-write sequence is not transactional.
    """

    def __init__(self, operation_repository: IOperationRepository):
        self.operation_repository = operation_repository

    def execute(
        self, request: UpdateOperationRequest
    ) -> Result[UpdateOperationResponse, UseCaseError]:
        if is_blank(request.id):
            return reject("Operation ID cannot be empty")

        try:
            existing = self.operation_repository.find_by_id(request.id)
            if existing is None:
                return reject("Operation not found")

            updated = Operation(
                **{
                    **dict(existing),
                    **request.changes(),
                    "id": existing.id,
                    "created_at": existing.created_at,
                }
            )

            saved = self.operation_repository.save(updated)

        except Exception as e:
            return fail("update operation", e)

        logger.info(f"Operation updated: {saved.id}")
        return Success(UpdateOperationResponse(operation=saved))
