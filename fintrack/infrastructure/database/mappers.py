"""
Mappers between ORM rows and domain entities.
"""

from datetime import datetime, timezone
from decimal import Decimal

from fintrack.domain.entities.monthly_finance_summary import MonthlyFinanceSummary
from fintrack.domain.entities.operation import Operation
from fintrack.domain.value_objects.money import Money

from .models import MonthlyFinanceSummaryTable, OperationTable


def to_storage_datetime(value: datetime) -> datetime:
    """Aware datetime to naive UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage_datetime(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc)


def to_cents(money: Money) -> int:
    return int(money.amount * 100)


def from_cents(cents: int, currency: str) -> Money:
    return Money(Decimal(cents) / 100, currency)


class OperationMapper:
    """Converts between OperationTable rows and Operation entities."""

    def to_domain(self, row: OperationTable) -> Operation:
        return Operation(
            id=row.id,
            nature=row.nature,
            state=row.state,
            payment_method=row.payment_method,
            source_account=row.source_account,
            destination_account=row.destination_account,
            date=from_storage_datetime(row.date),
            value=from_cents(row.value_cents, row.currency),
            category=row.category,
            details=row.details,
            project=row.project,
            receipt=row.receipt,
            created_at=from_storage_datetime(row.created_at),
        )

    def to_row(self, operation: Operation) -> OperationTable:
        return OperationTable(
            id=operation.id,
            nature=operation.nature.value,
            state=operation.state.value,
            payment_method=operation.payment_method.value,
            source_account=operation.source_account,
            destination_account=operation.destination_account,
            date=to_storage_datetime(operation.date),
            value_cents=to_cents(operation.value),
            currency=operation.value.currency,
            category=operation.category,
            details=operation.details,
            project=operation.project,
            receipt=operation.receipt,
            created_at=to_storage_datetime(operation.created_at),
        )

    def to_domain_list(self, rows: list[OperationTable]) -> list[Operation]:
        return [self.to_domain(row) for row in rows]


class MonthlyFinanceSummaryMapper:
    """
    Converts between MonthlyFinanceSummaryTable rows and entities.

    All five amounts share the row's single currency column.
    """

    def to_domain(self, row: MonthlyFinanceSummaryTable) -> MonthlyFinanceSummary:
        return MonthlyFinanceSummary(
            id=row.id,
            user_id=row.user_id,
            month=row.month,
            total_income=from_cents(row.total_income_cents, row.currency),
            total_expense=from_cents(row.total_expense_cents, row.currency),
            balance=from_cents(row.balance_cents, row.currency),
            total_planned_budget=from_cents(
                row.total_planned_budget_cents, row.currency
            ),
            total_actual_budget=from_cents(
                row.total_actual_budget_cents, row.currency
            ),
            created_at=from_storage_datetime(row.created_at),
        )

    def to_row(self, summary: MonthlyFinanceSummary) -> MonthlyFinanceSummaryTable:
        amounts = (
            summary.total_income,
            summary.total_expense,
            summary.balance,
            summary.total_planned_budget,
            summary.total_actual_budget,
        )
        currencies = {money.currency for money in amounts}
        if len(currencies) > 1:
            raise ValueError(
                f"Summary amounts must share one currency, got {sorted(currencies)}"
            )

        return MonthlyFinanceSummaryTable(
            id=summary.id,
            user_id=summary.user_id,
            month=summary.month,
            currency=summary.total_income.currency,
            total_income_cents=to_cents(summary.total_income),
            total_expense_cents=to_cents(summary.total_expense),
            balance_cents=to_cents(summary.balance),
            total_planned_budget_cents=to_cents(summary.total_planned_budget),
            total_actual_budget_cents=to_cents(summary.total_actual_budget),
            created_at=to_storage_datetime(summary.created_at),
        )

    def to_domain_list(
        self, rows: list[MonthlyFinanceSummaryTable]
    ) -> list[MonthlyFinanceSummary]:
        return [self.to_domain(row) for row in rows]
