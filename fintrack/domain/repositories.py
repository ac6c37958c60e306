"""
Storage contracts the use cases depend on.

Any implementation (SQL, in-memory, remote) can be injected into the use
cases without changing them.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from .entities.monthly_finance_summary import MonthlyFinanceSummary
from .entities.operation import Operation


class IOperationRepository(ABC):
    """Persistence contract for operations."""

    @abstractmethod
    def save(self, operation: Operation) -> Operation:
        """
        Insert or replace an operation.

        Args:
            operation: Operation to persist.

        Returns:
            The persisted operation.
        """
        pass

    @abstractmethod
    def find_by_id(self, operation_id: str) -> Operation | None:
        """Return the operation with this id, or None."""
        pass

    @abstractmethod
    def find_all(self) -> list[Operation]:
        pass

    @abstractmethod
    def find_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[Operation]:
        """
        Find operations dated within the range.

        Args:
            start_date: Inclusive lower bound.
            end_date: Inclusive upper bound.
        """
        pass

    @abstractmethod
    def find_by_account(self, account_id: str) -> list[Operation]:
        """Find operations where the account is source or destination."""
        pass

    @abstractmethod
    def find_by_category(self, category: str) -> list[Operation]:
        pass

    @abstractmethod
    def delete(self, operation_id: str) -> bool:
        """
        Remove an operation.

        Returns:
            True if a row was removed, False if none matched.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        pass


class IMonthlyFinanceSummaryRepository(ABC):
    """Persistence contract for monthly finance summaries."""

    @abstractmethod
    def save(self, summary: MonthlyFinanceSummary) -> MonthlyFinanceSummary:
        pass

    @abstractmethod
    def find_by_id(self, summary_id: str) -> MonthlyFinanceSummary | None:
        pass

    @abstractmethod
    def find_all(self) -> list[MonthlyFinanceSummary]:
        pass

    @abstractmethod
    def find_by_user(self, user_id: str) -> list[MonthlyFinanceSummary]:
        pass

    @abstractmethod
    def find_by_month(self, month: str) -> list[MonthlyFinanceSummary]:
        pass

    @abstractmethod
    def find_by_user_and_month(
        self, user_id: str, month: str
    ) -> list[MonthlyFinanceSummary]:
        pass

    @abstractmethod
    def delete(self, summary_id: str) -> bool:
        pass

    @abstractmethod
    def delete_all(self) -> None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
