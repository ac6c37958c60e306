"""
SQLAlchemy ORM models for the ledger database.

Datetimes are stored as naive UTC; amounts as integer cents plus
currency code.
"""

from datetime import datetime

import inflection
from sqlalchemy import DateTime, Index, Integer, LargeBinary, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    @declared_attr.directive
    def __tablename__(cls) -> str:
        """Table name from class name without ``Table`` (snake, plural)."""
        name = cls.__name__.removesuffix("Table")
        return inflection.pluralize(inflection.underscore(name))


class OperationTable(Base):
    """ORM model for operations."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    nature: Mapped[str] = mapped_column(String(10), nullable=False)
    state: Mapped[str] = mapped_column(String(10), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(40), nullable=False)
    source_account: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True
    )
    destination_account: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True
    )
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    value_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True
    )
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    project: Mapped[str | None] = mapped_column(String(100), nullable=True)
    receipt: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    __table_args__ = (Index("ix_operations_date", "date"),)

    def __repr__(self) -> str:
        return f"<OperationTable(id={self.id}, value_cents={self.value_cents})>"


class MonthlyFinanceSummaryTable(Base):
    """ORM model for monthly finance summaries."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    month: Mapped[str] = mapped_column(String(7), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    total_income_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    total_expense_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    balance_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    total_planned_budget_cents: Mapped[int] = mapped_column(
        Integer, nullable=False
    )
    total_actual_budget_cents: Mapped[int] = mapped_column(
        Integer, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_monthly_finance_summaries_user_month", "user_id", "month"),
        Index("ix_monthly_finance_summaries_month", "month"),
    )

    def __repr__(self) -> str:
        return (
            f"<MonthlyFinanceSummaryTable(user_id={self.user_id}, "
            f"month={self.month})>"
        )
