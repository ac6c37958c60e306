"""
Money value object for financial amounts.

Provides currency-aware monetary values with validation and arithmetic.
Every operation returns a new instance.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from fintrack.domain.exceptions import DomainValidationError

DEFAULT_CURRENCY = "BRL"

CURRENCY_SYMBOLS = {
    "BRL": "R$",
    "USD": "US$",
    "EUR": "€",
}

_CENTS = Decimal("0.01")
_NON_NUMERIC = re.compile(r"[^0-9.,-]")


@dataclass(frozen=True)
class Money:
    """
    Money value object with amount and currency validation.

    Attributes:
        amount: Decimal amount with 2 decimal places precision.
        currency: Upper-case three-letter currency code.

    Raises:
        DomainValidationError: If amount is negative or invalid, or the
            currency is not a three-letter code.
    """

    amount: Decimal
    currency: str

    def __init__(
        self,
        amount: Union[Decimal, float, int, str],
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """
        Initialize money with validation.

        Args:
            amount: Monetary value to validate and store.
            currency: Three-letter currency code, any case.

        Raises:
            DomainValidationError: Amount is negative, not a finite number
                or the currency code is malformed.
        """
        try:
            decimal_amount = Decimal(str(amount))
        except (InvalidOperation, ValueError) as e:
            raise DomainValidationError(
                f"Invalid amount format: {amount}"
            ) from e

        if not decimal_amount.is_finite():
            raise DomainValidationError("Amount must be a valid number")

        decimal_amount = decimal_amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        if decimal_amount < 0:
            raise DomainValidationError("Amount cannot be negative")

        if not isinstance(currency, str) or not currency.strip():
            raise DomainValidationError("Currency must be a valid string")
        code = currency.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise DomainValidationError(
                "Currency must be a 3-letter code (e.g., BRL, USD)"
            )

        # Use __setattr__ because of frozen=True
        object.__setattr__(self, "amount", decimal_amount)
        object.__setattr__(self, "currency", code)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(0, currency)

    @classmethod
    def from_string(
        cls, value: str, currency: str = DEFAULT_CURRENCY
    ) -> "Money":
        """
        Parse a user-typed amount such as ``"R$ 1.234,56"`` or ``"12.5"``.

        A lone comma is read as the decimal separator. When both
        separators appear, the last one is the decimal separator and the
        other groups thousands, so ``"1,234.56"`` and ``"1.234,56"`` agree.
        """
        cleaned = _NON_NUMERIC.sub("", value)
        if "," in cleaned and "." in cleaned:
            decimal_sep = "," if cleaned.rfind(",") > cleaned.rfind(".") else "."
            thousands_sep = "." if decimal_sep == "," else ","
            cleaned = cleaned.replace(thousands_sep, "").replace(decimal_sep, ".")
        elif "," in cleaned:
            cleaned = cleaned.replace(",", ".")
        if not cleaned or cleaned in {"-", "."}:
            raise DomainValidationError("Invalid money string format")
        return cls(cleaned, currency)

    def add(self, other: "Money") -> "Money":
        """Add two amounts of the same currency."""
        self._ensure_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """
        Subtract an amount of the same currency.

        Raises:
            DomainValidationError: If the result would be negative.
        """
        self._ensure_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise DomainValidationError(
                "Cannot subtract more than available amount"
            )
        return Money(result, self.currency)

    def multiply(self, factor: Union[int, float, Decimal]) -> "Money":
        """Multiply money by a non-negative factor."""
        decimal_factor = Decimal(str(factor))
        if decimal_factor < 0:
            raise DomainValidationError(
                "Multiplication factor cannot be negative"
            )
        return Money(self.amount * decimal_factor, self.currency)

    def is_greater_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def is_less_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def format(self) -> str:
        """Render the amount in pt-BR notation, e.g. ``R$ 1.234,56``."""
        symbol = CURRENCY_SYMBOLS.get(self.currency, self.currency)
        grouped = f"{self.amount:,.2f}"
        localized = (
            grouped.replace(",", "_").replace(".", ",").replace("_", ".")
        )
        return f"{symbol} {localized}"

    def to_json(self) -> dict[str, str]:
        return {"amount": str(self.amount), "currency": self.currency}

    def _ensure_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise DomainValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, factor: Union[int, float, Decimal]) -> "Money":
        return self.multiply(factor)

    def __str__(self) -> str:
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self) -> str:
        return f"Money('{self.amount}', '{self.currency}')"
