"""
Create operation use case: build a new Operation and persist it.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from structlog import get_logger

from fintrack.domain.entities.operation import (
    Operation,
    OperationNature,
    OperationState,
    PaymentMethod,
)
from fintrack.domain.repositories import IOperationRepository
from fintrack.domain.value_objects.money import Money
from fintrack.utils.datetime_helpers import utc_now
from fintrack.utils.result import Result, Success

from .base import UseCase, UseCaseError, fail

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateOperationRequest:
    nature: OperationNature | str
    state: OperationState | str
    payment_method: PaymentMethod | str
    source_account: str
    destination_account: str
    date: datetime
    value: Money
    category: str
    details: str | None = None
    project: str | None = None
    receipt: bytes | None = None


@dataclass(frozen=True)
class CreateOperationResponse:
    operation: Operation


class CreateOperationUseCase(
    UseCase[CreateOperationRequest, CreateOperationResponse]
):
    """
    Create a financial operation.

    The Operation constructor enforces every business rule; any violation
    or storage error comes back as a Failure.
    """

    def __init__(self, operation_repository: IOperationRepository):
        self.operation_repository = operation_repository

    def execute(
        self, request: CreateOperationRequest
    ) -> Result[CreateOperationResponse, UseCaseError]:
        try:
            operation = Operation(
                id=self._generate_id(),
                nature=request.nature,
                state=request.state,
                payment_method=request.payment_method,
                source_account=request.source_account,
                destination_account=request.destination_account,
                date=request.date,
                value=request.value,
                category=request.category,
                details=request.details,
                project=request.project,
                receipt=request.receipt,
                created_at=utc_now(),
            )

            saved = self.operation_repository.save(operation)

        except Exception as e:
            return fail("create operation", e)

        logger.info(f"Operation created: {saved.id}")
        return Success(CreateOperationResponse(operation=saved))

    @staticmethod
    def _generate_id() -> str:
        return str(uuid4())
