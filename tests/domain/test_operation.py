"""Tests for the Operation entity."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from fintrack.domain.entities.operation import (
    Operation,
    OperationNature,
    OperationState,
    PaymentMethod,
)
from fintrack.domain.exceptions import DomainValidationError
from fintrack.domain.value_objects.money import Money

MakeOperation = Callable[..., Operation]


class TestOperationRules:
    """Tests for constructor validation."""

    def test_valid_operation(self, make_operation: MakeOperation) -> None:
        """Should coerce wire values to enums."""
        op = make_operation()

        assert op.nature is OperationNature.EXPENSE
        assert op.state is OperationState.TO_PAY
        assert op.payment_method is PaymentMethod.PIX
        assert op.details is None

    @pytest.mark.parametrize(
        ("nature", "state"),
        [
            ("receita", "receber"),
            ("receita", "recebido"),
            ("despesa", "pagar"),
            ("despesa", "pago"),
        ],
    )
    def test_compatible_pairs(
        self, make_operation: MakeOperation, nature: str, state: str
    ) -> None:
        """Should accept every pairing of the compatibility matrix."""
        op = make_operation(nature=nature, state=state)
        assert op.state == state

    @pytest.mark.parametrize(
        ("nature", "state"),
        [
            ("receita", "pagar"),
            ("receita", "pago"),
            ("despesa", "receber"),
            ("despesa", "recebido"),
        ],
    )
    def test_incompatible_pairs(
        self, make_operation: MakeOperation, nature: str, state: str
    ) -> None:
        """Should name both the state and the nature."""
        with pytest.raises(DomainValidationError) as exc_info:
            make_operation(nature=nature, state=state)

        assert str(exc_info.value) == (
            f'State "{state}" is not compatible with nature "{nature}"'
        )

    def test_invalid_nature(self, make_operation: MakeOperation) -> None:
        with pytest.raises(DomainValidationError, match="Invalid nature: transfer"):
            make_operation(nature="transfer")

    def test_invalid_state(self, make_operation: MakeOperation) -> None:
        with pytest.raises(DomainValidationError, match="Invalid state: done"):
            make_operation(state="done")

    def test_invalid_payment_method(self, make_operation: MakeOperation) -> None:
        with pytest.raises(DomainValidationError, match="Invalid payment method: Cash"):
            make_operation(payment_method="Cash")

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("source_account", "Source account cannot be empty"),
            ("destination_account", "Destination account cannot be empty"),
            ("category", "Category cannot be empty"),
        ],
    )
    def test_blank_text_fields(
        self, make_operation: MakeOperation, field: str, message: str
    ) -> None:
        """Should reject empty and whitespace-only text."""
        with pytest.raises(DomainValidationError, match=message):
            make_operation(**{field: "   "})

    def test_first_violated_rule_wins(self, make_operation: MakeOperation) -> None:
        """Should check nature before state, payment method and the rest."""
        with pytest.raises(DomainValidationError, match="Invalid nature"):
            make_operation(
                nature="x", state="y", payment_method="z", category=""
            )

        with pytest.raises(DomainValidationError, match="Invalid payment method"):
            make_operation(payment_method="z", source_account="", category="")

        with pytest.raises(DomainValidationError, match="Category cannot be empty"):
            make_operation(state="recebido", category="")

    def test_value_must_be_money(self, make_operation: MakeOperation) -> None:
        """Should refuse raw numbers as the value."""
        with pytest.raises(ValueError):
            make_operation(value=500)

    def test_naive_dates_are_utc(self, make_operation: MakeOperation) -> None:
        """Should treat naive datetimes as UTC."""
        op = make_operation(date=datetime(2024, 3, 15, 9, 30))
        assert op.date == datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)

    def test_aware_dates_are_converted_to_utc(
        self, make_operation: MakeOperation
    ) -> None:
        sao_paulo = timezone(timedelta(hours=-3))
        op = make_operation(date=datetime(2024, 3, 15, 9, 0, tzinfo=sao_paulo))

        assert op.date.tzinfo == timezone.utc
        assert op.date.hour == 12

    def test_is_immutable(self, make_operation: MakeOperation) -> None:
        op = make_operation()
        with pytest.raises(ValueError):
            op.category = "Other"  # type: ignore[misc]


class TestOperationTransitions:
    """Tests for state transitions."""

    def test_complete_pending_expense(self, make_operation: MakeOperation) -> None:
        """Should move pagar to pago and leave the original untouched."""
        op = make_operation()
        done = op.mark_as_completed()

        assert done.state is OperationState.PAID
        assert done.is_completed()
        assert op.state is OperationState.TO_PAY
        assert done.id == op.id
        assert done.created_at == op.created_at

    def test_complete_pending_income(self, make_operation: MakeOperation) -> None:
        op = make_operation(nature="receita", state="receber")
        assert op.mark_as_completed().state is OperationState.RECEIVED

    def test_completion_is_idempotent(self, make_operation: MakeOperation) -> None:
        """Should keep an already completed state."""
        done = make_operation(state="pago").mark_as_completed()
        assert done.state is OperationState.PAID
        assert done.mark_as_completed().state is OperationState.PAID

    def test_mark_as_pending(self, make_operation: MakeOperation) -> None:
        """Should reopen within the same nature."""
        assert (
            make_operation(nature="receita", state="recebido")
            .mark_as_pending()
            .state
            is OperationState.TO_RECEIVE
        )
        assert make_operation(state="pago").mark_as_pending().state is (
            OperationState.TO_PAY
        )
        assert make_operation(state="pagar").mark_as_pending().state is (
            OperationState.TO_PAY
        )

    def test_pending_and_completed_are_exclusive(
        self, make_operation: MakeOperation
    ) -> None:
        for state in ("pagar", "pago"):
            op = make_operation(state=state)
            assert op.is_pending() != op.is_completed()

    def test_nature_helpers(self, make_operation: MakeOperation) -> None:
        expense = make_operation()
        income = make_operation(nature="receita", state="receber")

        assert expense.is_expense() and not expense.is_income()
        assert income.is_income() and not income.is_expense()


class TestOperationIdentity:
    """Tests for equality, hashing and serialization."""

    def test_equality_by_id(self, make_operation: MakeOperation) -> None:
        """Should compare by id only."""
        first = make_operation(category="Food")
        second = make_operation(category="Rent", value=Money(1))

        assert first == second
        assert len({first, second}) == 1
        assert first != make_operation(id="op-2")

    def test_to_json_omits_receipt(self, make_operation: MakeOperation) -> None:
        """Should render enum values, ISO dates and no receipt."""
        data = make_operation(receipt=b"\x89PNG").to_json()

        assert "receipt" not in data
        assert data["nature"] == "despesa"
        assert data["payment_method"] == "Pix"
        assert data["value"] == {"amount": "500.00", "currency": "BRL"}
        assert data["date"] == "2024-03-15T12:00:00+00:00"
