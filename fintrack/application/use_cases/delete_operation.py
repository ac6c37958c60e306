from dataclasses import dataclass

from structlog import get_logger

from fintrack.domain.repositories import IOperationRepository
from fintrack.domain.validators import is_blank
from fintrack.utils.result import Result, Success

from .base import UseCase, UseCaseError, fail, reject

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeleteOperationRequest:
    id: str | None


@dataclass(frozen=True)
class DeleteOperationResponse:
    deleted: bool


class DeleteOperationUseCase(
    UseCase[DeleteOperationRequest, DeleteOperationResponse]
):
    """Remove an existing operation by id."""

    def __init__(self, operation_repository: IOperationRepository):
        self.operation_repository = operation_repository

    def execute(
        self, request: DeleteOperationRequest
    ) -> Result[DeleteOperationResponse, UseCaseError]:
        if is_blank(request.id):
            return reject("Operation ID cannot be empty")

        try:
            if self.operation_repository.find_by_id(request.id) is None:
                return reject("Operation not found")

            if not self.operation_repository.delete(request.id):
                return reject("Operation not found")

        except Exception as e:
            return fail("delete operation", e)

        logger.info(f"Operation deleted: {request.id}")
        return Success(DeleteOperationResponse(deleted=True))
