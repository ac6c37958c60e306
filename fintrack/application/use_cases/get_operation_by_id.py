from dataclasses import dataclass

from fintrack.domain.entities.operation import Operation
from fintrack.domain.repositories import IOperationRepository
from fintrack.domain.validators import is_blank
from fintrack.utils.result import Result, Success

from .base import UseCase, UseCaseError, fail, reject


@dataclass(frozen=True)
class GetOperationByIdRequest:
    id: str | None


@dataclass(frozen=True)
class GetOperationByIdResponse:
    operation: Operation | None


class GetOperationByIdUseCase(
    UseCase[GetOperationByIdRequest, GetOperationByIdResponse]
):
    """
    Look up one operation.

    A missing operation is a Success with ``operation=None``; only a
    blank id or a storage error is a Failure.
    """

    def __init__(self, operation_repository: IOperationRepository):
        self.operation_repository = operation_repository

    def execute(
        self, request: GetOperationByIdRequest
    ) -> Result[GetOperationByIdResponse, UseCaseError]:
        if is_blank(request.id):
            return reject("Operation ID cannot be empty")

        try:
            operation = self.operation_repository.find_by_id(request.id)
        except Exception as e:
            return fail("get operation", e)

        return Success(GetOperationByIdResponse(operation=operation))
