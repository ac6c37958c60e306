from .base import UseCase, UseCaseError
from .create_operation import (
    CreateOperationRequest,
    CreateOperationResponse,
    CreateOperationUseCase,
)
from .delete_operation import (
    DeleteOperationRequest,
    DeleteOperationResponse,
    DeleteOperationUseCase,
)
from .get_monthly_finance_summary import (
    GetMonthlyFinanceSummaryRequest,
    GetMonthlyFinanceSummaryResponse,
    GetMonthlyFinanceSummaryUseCase,
)
from .get_operation_by_id import (
    GetOperationByIdRequest,
    GetOperationByIdResponse,
    GetOperationByIdUseCase,
)
from .get_operations import (
    GetOperationsRequest,
    GetOperationsResponse,
    GetOperationsUseCase,
)
from .update_operation import (
    UpdateOperationRequest,
    UpdateOperationResponse,
    UpdateOperationUseCase,
)

__all__ = [
    "UseCase",
    "UseCaseError",
    "CreateOperationUseCase",
    "CreateOperationRequest",
    "CreateOperationResponse",
    "UpdateOperationUseCase",
    "UpdateOperationRequest",
    "UpdateOperationResponse",
    "DeleteOperationUseCase",
    "DeleteOperationRequest",
    "DeleteOperationResponse",
    "GetOperationByIdUseCase",
    "GetOperationByIdRequest",
    "GetOperationByIdResponse",
    "GetOperationsUseCase",
    "GetOperationsRequest",
    "GetOperationsResponse",
    "GetMonthlyFinanceSummaryUseCase",
    "GetMonthlyFinanceSummaryRequest",
    "GetMonthlyFinanceSummaryResponse",
]
