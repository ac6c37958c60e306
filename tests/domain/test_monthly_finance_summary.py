"""Tests for the MonthlyFinanceSummary entity and month validation."""

from collections.abc import Callable

import pytest

from fintrack.domain.entities.monthly_finance_summary import MonthlyFinanceSummary
from fintrack.domain.exceptions import DomainValidationError
from fintrack.domain.validators import MonthAndYear, validate_month
from fintrack.domain.value_objects.money import Money

MakeSummary = Callable[..., MonthlyFinanceSummary]


class TestValidateMonth:
    """Tests for validate_month."""

    def test_parses_month_and_year(self) -> None:
        assert validate_month("2024-03") == MonthAndYear(month=3, year=2024)

    @pytest.mark.parametrize(
        ("month", "message"),
        [
            ("", "Month cannot be empty"),
            ("2024-3", "Month must be in YYYY-MM format"),
            ("2024/03", "Month must be in YYYY-MM format"),
            ("2024-03\n", "Month must be in YYYY-MM format"),
            ("2024-13", "Month must be between 01 and 12"),
            ("2024-00", "Month must be between 01 and 12"),
            ("1899-01", "Year must be between 1900 and 2100"),
            ("2101-12", "Year must be between 1900 and 2100"),
        ],
    )
    def test_rejects(self, month: str, message: str) -> None:
        """Should report the first violated rule."""
        with pytest.raises(DomainValidationError, match=message):
            validate_month(month)

    @pytest.mark.parametrize("month", ["1900-01", "2100-12"])
    def test_accepts_year_bounds(self, month: str) -> None:
        validate_month(month)


class TestSummaryConstruction:
    """Tests for the balance invariant."""

    def test_consistent_summary(self, make_summary: MakeSummary) -> None:
        summary = make_summary()
        assert summary.balance == Money(2000)

    def test_balance_clamped_at_zero(self, make_summary: MakeSummary) -> None:
        """Should store a zero balance when expenses exceed income."""
        summary = make_summary(income=1000, expense=1500)

        assert summary.balance == Money(0)
        assert summary.is_balanced()
        assert not summary.is_profitable()

    def test_wrong_balance_rejected(self, make_summary: MakeSummary) -> None:
        with pytest.raises(DomainValidationError, match="Balance must equal"):
            make_summary(balance=Money(10))

    def test_balance_within_tolerance(self, make_summary: MakeSummary) -> None:
        """Should accept a one-cent rounding difference."""
        summary = make_summary(balance=Money("2000.01"))
        assert summary.balance == Money("2000.01")

    def test_mixed_income_and_expense_currencies_rejected(
        self, make_summary: MakeSummary
    ) -> None:
        """Should not derive a balance across currencies."""
        with pytest.raises(DomainValidationError, match="Currency mismatch: BRL vs USD"):
            make_summary(total_expense=Money(3000, "USD"))

    def test_balance_in_other_currency_rejected(
        self, make_summary: MakeSummary
    ) -> None:
        with pytest.raises(DomainValidationError, match="Currency mismatch: USD vs BRL"):
            make_summary(balance=Money(2000, "USD"))

    def test_invalid_month_rejected(self, make_summary: MakeSummary) -> None:
        with pytest.raises(DomainValidationError, match="between 01 and 12"):
            make_summary(month="2024-13")

    def test_get_month_and_year(self, make_summary: MakeSummary) -> None:
        assert make_summary(month="2023-11").get_month_and_year() == (11, 2023)


class TestSummaryMetrics:
    """Tests for derived percentages."""

    def test_savings_rate(self, make_summary: MakeSummary) -> None:
        assert make_summary().calculate_savings_rate() == 40.0

    def test_savings_rate_without_income(self, make_summary: MakeSummary) -> None:
        assert make_summary(income=0, expense=100).calculate_savings_rate() == 0.0

    def test_budget_adherence(self, make_summary: MakeSummary) -> None:
        """Should round to two decimals."""
        summary = make_summary(planned=3000, actual=1000)
        assert summary.calculate_budget_adherence() == 33.33

    def test_budget_adherence_without_plan(self, make_summary: MakeSummary) -> None:
        assert make_summary(planned=0).calculate_budget_adherence() == 0.0

    def test_is_profitable(self, make_summary: MakeSummary) -> None:
        assert make_summary().is_profitable()
        assert not make_summary(income=100, expense=100).is_profitable()


class TestSummaryUpdates:
    """Tests for copy-on-write updates."""

    def test_update_total_income_recomputes_balance(
        self, make_summary: MakeSummary
    ) -> None:
        original = make_summary()
        updated = original.update_total_income(Money(4000))

        assert updated.total_income == Money(4000)
        assert updated.balance == Money(1000)
        assert original.total_income == Money(5000)

    def test_update_total_expense_clamps(self, make_summary: MakeSummary) -> None:
        updated = make_summary().update_total_expense(Money(9000))
        assert updated.balance == Money(0)

    def test_update_with_other_currency_rejected(
        self, make_summary: MakeSummary
    ) -> None:
        """Should keep income, expense and balance in one currency."""
        summary = make_summary()

        with pytest.raises(DomainValidationError, match="Currency mismatch: USD vs BRL"):
            summary.update_total_income(Money(1000, "USD"))
        with pytest.raises(DomainValidationError, match="Currency mismatch: BRL vs USD"):
            summary.update_total_expense(Money(50, "USD"))

    def test_update_budget_values(self, make_summary: MakeSummary) -> None:
        updated = make_summary().update_budget_values(Money(100), Money(50))

        assert updated.total_planned_budget == Money(100)
        assert updated.calculate_budget_adherence() == 50.0
        assert updated.balance == Money(2000)

    def test_to_json_includes_metrics(self, make_summary: MakeSummary) -> None:
        data = make_summary().to_json()

        assert data["savings_rate"] == 40.0
        assert data["budget_adherence"] == pytest.approx(85.71)
        assert data["balance"] == {"amount": "2000.00", "currency": "BRL"}
