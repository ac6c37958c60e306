"""
Domain layer containing business entities, value objects and storage
contracts.

This layer is framework-agnostic apart from Pydantic model typing.
"""

from .entities.monthly_finance_summary import MonthlyFinanceSummary
from .entities.operation import (
    Operation,
    OperationNature,
    OperationState,
    PaymentMethod,
)
from .exceptions import DomainValidationError
from .repositories import IMonthlyFinanceSummaryRepository, IOperationRepository
from .validators import MonthAndYear, validate_month
from .value_objects.money import DEFAULT_CURRENCY, Money

__all__ = [
    # Entities
    "Operation",
    "MonthlyFinanceSummary",
    # Enums
    "OperationNature",
    "OperationState",
    "PaymentMethod",
    # Value Objects
    "Money",
    "DEFAULT_CURRENCY",
    "MonthAndYear",
    # Contracts
    "IOperationRepository",
    "IMonthlyFinanceSummaryRepository",
    # Errors and rules
    "DomainValidationError",
    "validate_month",
]
