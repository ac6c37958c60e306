"""
Operation entity representing one financial transaction.

Uses Pydantic for field typing; business rules are checked in the
constructor in a fixed order so the first violated rule is reported.
"""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from fintrack.domain.exceptions import DomainValidationError
from fintrack.domain.validators import is_blank
from fintrack.domain.value_objects.money import Money
from fintrack.utils.datetime_helpers import ensure_utc, utc_now


class OperationNature(StrEnum):
    """Whether the operation is income or expense."""

    INCOME = "receita"
    EXPENSE = "despesa"


class OperationState(StrEnum):
    """Settlement status of an operation."""

    TO_RECEIVE = "receber"
    RECEIVED = "recebido"
    TO_PAY = "pagar"
    PAID = "pago"


class PaymentMethod(StrEnum):
    DEBIT_CARD = "Cartão de débito"
    CREDIT_CARD = "Cartão de crédito"
    PIX = "Pix"
    TED = "TED"
    REVERSAL = "Estorno"
    BANK_TRANSFER = "Transferência bancária"


COMPATIBLE_STATES: dict[OperationNature, frozenset[OperationState]] = {
    OperationNature.INCOME: frozenset(
        {OperationState.TO_RECEIVE, OperationState.RECEIVED}
    ),
    OperationNature.EXPENSE: frozenset(
        {OperationState.TO_PAY, OperationState.PAID}
    ),
}

COMPLETED_STATES = frozenset({OperationState.RECEIVED, OperationState.PAID})
PENDING_STATES = frozenset({OperationState.TO_RECEIVE, OperationState.TO_PAY})

_TO_COMPLETED = {
    OperationState.TO_RECEIVE: OperationState.RECEIVED,
    OperationState.RECEIVED: OperationState.RECEIVED,
    OperationState.TO_PAY: OperationState.PAID,
    OperationState.PAID: OperationState.PAID,
}

_TO_PENDING = {
    OperationState.TO_RECEIVE: OperationState.TO_RECEIVE,
    OperationState.RECEIVED: OperationState.TO_RECEIVE,
    OperationState.TO_PAY: OperationState.TO_PAY,
    OperationState.PAID: OperationState.TO_PAY,
}


def _is_member(enum_cls: type[StrEnum], value: Any) -> bool:
    return isinstance(value, str) and value in enum_cls._value2member_map_


def check_operation_rules(data: dict[str, Any]) -> None:
    """
    Check operation business rules in order.

    Args:
        data: Raw constructor arguments.

    Raises:
        DomainValidationError: Naming the first violated rule.
    """
    nature = data.get("nature")
    state = data.get("state")
    payment_method = data.get("payment_method")

    if not _is_member(OperationNature, nature):
        raise DomainValidationError(f"Invalid nature: {nature}")

    if not _is_member(OperationState, state):
        raise DomainValidationError(f"Invalid state: {state}")

    if not _is_member(PaymentMethod, payment_method):
        raise DomainValidationError(
            f"Invalid payment method: {payment_method}"
        )

    if is_blank(data.get("source_account")):
        raise DomainValidationError("Source account cannot be empty")

    if is_blank(data.get("destination_account")):
        raise DomainValidationError("Destination account cannot be empty")

    if is_blank(data.get("category")):
        raise DomainValidationError("Category cannot be empty")

    if OperationState(state) not in COMPATIBLE_STATES[OperationNature(nature)]:
        raise DomainValidationError(
            f'State "{state}" is not compatible with nature "{nature}"'
        )


class Operation(BaseModel):
    """
    Operation domain entity.

    Attributes:
        id: Opaque identifier; equality and hashing use it alone.
        nature: Income or expense.
        state: Settlement status, restricted by nature.
        payment_method: Instrument used.
        source_account: Account the money leaves.
        destination_account: Account the money reaches.
        date: When the operation happened (UTC).
        value: Non-negative amount.
        category: Free-form label.
        details: Optional free text.
        project: Optional project label.
        receipt: Optional binary receipt.
        created_at: Creation timestamp (UTC).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    nature: OperationNature
    state: OperationState
    payment_method: PaymentMethod
    source_account: str
    destination_account: str
    date: datetime
    value: InstanceOf[Money]
    category: str
    details: str | None = None
    project: str | None = None
    receipt: bytes | None = None
    created_at: datetime = Field(default_factory=utc_now)

    def __init__(self, **data: Any) -> None:
        check_operation_rules(data)
        super().__init__(**data)

    @field_validator("date", "created_at", mode="after")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    def is_completed(self) -> bool:
        return self.state in COMPLETED_STATES

    def is_pending(self) -> bool:
        return self.state in PENDING_STATES

    def is_income(self) -> bool:
        return self.nature == OperationNature.INCOME

    def is_expense(self) -> bool:
        return self.nature == OperationNature.EXPENSE

    def mark_as_completed(self) -> "Operation":
        """Return a copy in the settled state of its nature."""
        return self._evolve(state=_TO_COMPLETED[self.state])

    def mark_as_pending(self) -> "Operation":
        """Return a copy in the open state of its nature."""
        return self._evolve(state=_TO_PENDING[self.state])

    def _evolve(self, **changes: Any) -> "Operation":
        return type(self)(**{**dict(self), **changes})

    def to_json(self) -> dict[str, Any]:
        """Serialize for presentation; the receipt is left out."""
        return {
            "id": self.id,
            "nature": self.nature.value,
            "state": self.state.value,
            "payment_method": self.payment_method.value,
            "source_account": self.source_account,
            "destination_account": self.destination_account,
            "date": self.date.isoformat(),
            "value": self.value.to_json(),
            "category": self.category,
            "details": self.details,
            "project": self.project,
            "created_at": self.created_at.isoformat(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
