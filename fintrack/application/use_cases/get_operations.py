"""
List operations with optional filters.
"""

from dataclasses import dataclass, field
from datetime import datetime

from structlog import get_logger

from fintrack.domain.entities.operation import Operation
from fintrack.domain.repositories import IOperationRepository
from fintrack.utils.result import Result, Success

from .base import UseCase, UseCaseError, fail

logger = get_logger(__name__)


@dataclass(frozen=True)
class GetOperationsRequest:
    """
    Optional filters.

    The date range applies only when both bounds are given.
    """

    start_date: datetime | None = None
    end_date: datetime | None = None
    account_id: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class GetOperationsResponse:
    operations: list[Operation] = field(default_factory=list)


class GetOperationsUseCase(UseCase[GetOperationsRequest, GetOperationsResponse]):
    """
    Fetch operations, applying each filter as its own storage query.

    With several filters, the first filtered list (date, account, then
    category) is kept where each id also appears in every other list.
    """

    def __init__(self, operation_repository: IOperationRepository):
        self.operation_repository = operation_repository

    def execute(
        self, request: GetOperationsRequest
    ) -> Result[GetOperationsResponse, UseCaseError]:
        try:
            filtered = self._run_filters(request)
        except Exception as e:
            return fail("get operations", e)

        if not filtered:
            return self._all()

        base, *others = filtered
        operations = [
            op
            for op in base
            if all(any(o.id == op.id for o in other) for other in others)
        ]

        logger.debug(
            f"Operations matched {len(filtered)} filter(s): {len(operations)}"
        )
        return Success(GetOperationsResponse(operations=operations))

    def _run_filters(
        self, request: GetOperationsRequest
    ) -> list[list[Operation]]:
        repo = self.operation_repository
        filtered: list[list[Operation]] = []

        if request.start_date and request.end_date:
            filtered.append(
                repo.find_by_date_range(request.start_date, request.end_date)
            )
        if request.account_id:
            filtered.append(repo.find_by_account(request.account_id))
        if request.category:
            filtered.append(repo.find_by_category(request.category))

        return filtered

    def _all(self) -> Result[GetOperationsResponse, UseCaseError]:
        try:
            operations = self.operation_repository.find_all()
        except Exception as e:
            return fail("get operations", e)
        return Success(GetOperationsResponse(operations=operations))
