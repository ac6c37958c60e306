"""
MonthlyFinanceSummary entity: one user-month aggregate.
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from fintrack.domain.exceptions import DomainValidationError
from fintrack.domain.validators import MonthAndYear, validate_month
from fintrack.domain.value_objects.money import Money
from fintrack.utils.datetime_helpers import ensure_utc, utc_now

BALANCE_TOLERANCE = Decimal("0.01")


def clamped_balance(income: Money, expense: Money) -> Money:
    """
    Income minus expense in their shared currency, never below zero.

    Raises:
        DomainValidationError: If the currencies differ.
    """
    if income.is_less_than(expense):
        return Money.zero(income.currency)
    return income.subtract(expense)


def _percentage(part: Money, whole: Money) -> float:
    if whole.is_zero():
        return 0.0
    ratio = part.amount / whole.amount * 100
    return float(ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class MonthlyFinanceSummary(BaseModel):
    """
    Monthly finance summary domain entity.

    Attributes:
        id: Summary identifier.
        user_id: Owner of the summary.
        month: ``YYYY-MM`` key.
        total_income: Income for the month.
        total_expense: Expense for the month.
        balance: ``max(0, total_income - total_expense)``.
        total_planned_budget: Budgeted amount.
        total_actual_budget: Amount actually spent against the budget.
        created_at: Creation timestamp (UTC).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    month: str
    total_income: InstanceOf[Money]
    total_expense: InstanceOf[Money]
    balance: InstanceOf[Money]
    total_planned_budget: InstanceOf[Money]
    total_actual_budget: InstanceOf[Money]
    created_at: datetime = Field(default_factory=utc_now)

    def __init__(self, **data: Any) -> None:
        validate_month(data.get("month"))
        self._check_balance(data)
        super().__init__(**data)

    @staticmethod
    def _check_balance(data: dict[str, Any]) -> None:
        income = data.get("total_income")
        expense = data.get("total_expense")
        balance = data.get("balance")
        if not all(isinstance(m, Money) for m in (income, expense, balance)):
            # Left to field validation
            return

        expected = clamped_balance(income, expense)
        if balance.currency != expected.currency:
            raise DomainValidationError(
                f"Currency mismatch: {balance.currency} vs {expected.currency}"
            )
        if abs(balance.amount - expected.amount) > BALANCE_TOLERANCE:
            raise DomainValidationError(
                "Balance must equal total income minus total expense "
                "(minimum 0)"
            )

    @field_validator("created_at", mode="after")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    def calculate_savings_rate(self) -> float:
        """Balance as a percentage of income, 0 when there is no income."""
        return _percentage(self.balance, self.total_income)

    def calculate_budget_adherence(self) -> float:
        """Actual over planned budget as a percentage, 0 without a plan."""
        return _percentage(self.total_actual_budget, self.total_planned_budget)

    def is_profitable(self) -> bool:
        return self.total_income.amount > self.total_expense.amount

    def is_balanced(self) -> bool:
        return self.balance.is_zero()

    def get_month_and_year(self) -> MonthAndYear:
        return validate_month(self.month)

    def update_total_income(self, new_income: Money) -> "MonthlyFinanceSummary":
        return self._evolve(
            total_income=new_income,
            balance=clamped_balance(new_income, self.total_expense),
        )

    def update_total_expense(
        self, new_expense: Money
    ) -> "MonthlyFinanceSummary":
        return self._evolve(
            total_expense=new_expense,
            balance=clamped_balance(self.total_income, new_expense),
        )

    def update_budget_values(
        self, new_planned_budget: Money, new_actual_budget: Money
    ) -> "MonthlyFinanceSummary":
        return self._evolve(
            total_planned_budget=new_planned_budget,
            total_actual_budget=new_actual_budget,
        )

    def _evolve(self, **changes: Any) -> "MonthlyFinanceSummary":
        return type(self)(**{**dict(self), **changes})

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "month": self.month,
            "total_income": self.total_income.to_json(),
            "total_expense": self.total_expense.to_json(),
            "balance": self.balance.to_json(),
            "total_planned_budget": self.total_planned_budget.to_json(),
            "total_actual_budget": self.total_actual_budget.to_json(),
            "savings_rate": self.calculate_savings_rate(),
            "budget_adherence": self.calculate_budget_adherence(),
            "created_at": self.created_at.isoformat(),
        }
