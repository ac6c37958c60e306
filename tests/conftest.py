"""Shared pytest fixtures for fintrack tests."""

from collections.abc import Callable, Iterator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import pytest
from structlog.testing import capture_logs

from fintrack.domain.entities.monthly_finance_summary import MonthlyFinanceSummary
from fintrack.domain.entities.operation import Operation
from fintrack.domain.value_objects.money import Money
from fintrack.infrastructure.database import (
    Database,
    MonthlyFinanceSummaryRepository,
    OperationRepository,
)


@pytest.fixture(autouse=True)
def captured_logs() -> Iterator[list[dict[str, Any]]]:
    """Keep structlog output off stdout and expose emitted events."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def database() -> Iterator[Database]:
    """In-memory ledger database with all tables created."""
    db = Database()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def operation_repository(database: Database) -> OperationRepository:
    return OperationRepository(database)


@pytest.fixture
def summary_repository(database: Database) -> MonthlyFinanceSummaryRepository:
    return MonthlyFinanceSummaryRepository(database)


@pytest.fixture
def march_15() -> datetime:
    return datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_operation(march_15: datetime) -> Callable[..., Operation]:
    """Factory for a valid pending expense; keyword args override fields."""

    def factory(**overrides: Any) -> Operation:
        fields: dict[str, Any] = {
            "id": "op-1",
            "nature": "despesa",
            "state": "pagar",
            "payment_method": "Pix",
            "source_account": "A",
            "destination_account": "B",
            "date": march_15,
            "value": Money(500),
            "category": "Food",
        }
        fields.update(overrides)
        return Operation(**fields)

    return factory


@pytest.fixture
def make_summary() -> Callable[..., MonthlyFinanceSummary]:
    """Factory for a consistent summary; amounts given as plain numbers."""

    def factory(
        income: str | int = 5000,
        expense: str | int = 3000,
        planned: str | int = 3500,
        actual: str | int = 3000,
        **overrides: Any,
    ) -> MonthlyFinanceSummary:
        balance = max(Decimal(0), Decimal(str(income)) - Decimal(str(expense)))
        fields: dict[str, Any] = {
            "id": "sum-1",
            "user_id": "user-1",
            "month": "2024-03",
            "total_income": Money(income),
            "total_expense": Money(expense),
            "balance": Money(balance),
            "total_planned_budget": Money(planned),
            "total_actual_budget": Money(actual),
        }
        fields.update(overrides)
        return MonthlyFinanceSummary(**fields)

    return factory
