from .monthly_finance_summary import MonthlyFinanceSummary
from .operation import Operation, OperationNature, OperationState, PaymentMethod

__all__ = [
    "Operation",
    "MonthlyFinanceSummary",
    "OperationNature",
    "OperationState",
    "PaymentMethod",
]
