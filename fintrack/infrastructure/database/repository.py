"""
SQL implementations of the domain storage contracts.

Each call runs in its own session scope.
"""

from datetime import datetime

from sqlalchemy import delete, desc, func, or_, select
from structlog import get_logger

from fintrack.domain.entities.monthly_finance_summary import MonthlyFinanceSummary
from fintrack.domain.entities.operation import Operation
from fintrack.domain.repositories import (
    IMonthlyFinanceSummaryRepository,
    IOperationRepository,
)

from .database import Database
from .mappers import MonthlyFinanceSummaryMapper, OperationMapper, to_storage_datetime
from .models import MonthlyFinanceSummaryTable, OperationTable

logger = get_logger(__name__)


class OperationRepository(IOperationRepository):
    """Repository for operations."""

    def __init__(self, database: Database, mapper: OperationMapper | None = None):
        self.database = database
        self.mapper = mapper or OperationMapper()

    def save(self, operation: Operation) -> Operation:
        """
        Insert or replace an operation by id.

        Args:
            operation: Domain operation entity
        """
        with self.database.session_scope() as session:
            session.merge(self.mapper.to_row(operation))
        logger.debug(f"Saved operation {operation.id}")
        return operation

    def find_by_id(self, operation_id: str) -> Operation | None:
        with self.database.session_scope() as session:
            row = session.get(OperationTable, operation_id)
            return self.mapper.to_domain(row) if row else None

    def find_all(self) -> list[Operation]:
        return self._find(select(OperationTable))

    def find_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[Operation]:
        stmt = select(OperationTable).where(
            OperationTable.date.between(
                to_storage_datetime(start_date), to_storage_datetime(end_date)
            )
        )
        return self._find(stmt)

    def find_by_account(self, account_id: str) -> list[Operation]:
        stmt = select(OperationTable).where(
            or_(
                OperationTable.source_account == account_id,
                OperationTable.destination_account == account_id,
            )
        )
        return self._find(stmt)

    def find_by_category(self, category: str) -> list[Operation]:
        stmt = select(OperationTable).where(OperationTable.category == category)
        return self._find(stmt)

    def delete(self, operation_id: str) -> bool:
        with self.database.session_scope() as session:
            result = session.execute(
                delete(OperationTable).where(OperationTable.id == operation_id)
            )
            deleted = result.rowcount > 0
        logger.debug(f"Delete operation {operation_id}: {deleted}")
        return deleted

    def count(self) -> int:
        with self.database.session_scope() as session:
            return session.scalar(
                select(func.count()).select_from(OperationTable)
            ) or 0

    def _find(self, stmt) -> list[Operation]:
        """Run a select, newest operations first."""
        with self.database.session_scope() as session:
            rows = session.scalars(stmt.order_by(desc(OperationTable.date))).all()
            return self.mapper.to_domain_list(list(rows))


class MonthlyFinanceSummaryRepository(IMonthlyFinanceSummaryRepository):
    """Repository for monthly finance summaries."""

    def __init__(
        self,
        database: Database,
        mapper: MonthlyFinanceSummaryMapper | None = None,
    ):
        self.database = database
        self.mapper = mapper or MonthlyFinanceSummaryMapper()

    def save(self, summary: MonthlyFinanceSummary) -> MonthlyFinanceSummary:
        with self.database.session_scope() as session:
            session.merge(self.mapper.to_row(summary))
        logger.debug(f"Saved summary {summary.id} for {summary.month}")
        return summary

    def find_by_id(self, summary_id: str) -> MonthlyFinanceSummary | None:
        with self.database.session_scope() as session:
            row = session.get(MonthlyFinanceSummaryTable, summary_id)
            return self.mapper.to_domain(row) if row else None

    def find_all(self) -> list[MonthlyFinanceSummary]:
        return self._find(
            select(MonthlyFinanceSummaryTable).order_by(
                desc(MonthlyFinanceSummaryTable.month)
            )
        )

    def find_by_user(self, user_id: str) -> list[MonthlyFinanceSummary]:
        return self._find(
            select(MonthlyFinanceSummaryTable)
            .where(MonthlyFinanceSummaryTable.user_id == user_id)
            .order_by(desc(MonthlyFinanceSummaryTable.month))
        )

    def find_by_month(self, month: str) -> list[MonthlyFinanceSummary]:
        return self._find(
            select(MonthlyFinanceSummaryTable)
            .where(MonthlyFinanceSummaryTable.month == month)
            .order_by(desc(MonthlyFinanceSummaryTable.created_at))
        )

    def find_by_user_and_month(
        self, user_id: str, month: str
    ) -> list[MonthlyFinanceSummary]:
        return self._find(
            select(MonthlyFinanceSummaryTable)
            .where(
                MonthlyFinanceSummaryTable.user_id == user_id,
                MonthlyFinanceSummaryTable.month == month,
            )
            .order_by(desc(MonthlyFinanceSummaryTable.created_at))
        )

    def delete(self, summary_id: str) -> bool:
        with self.database.session_scope() as session:
            result = session.execute(
                delete(MonthlyFinanceSummaryTable).where(
                    MonthlyFinanceSummaryTable.id == summary_id
                )
            )
            return result.rowcount > 0

    def delete_all(self) -> None:
        with self.database.session_scope() as session:
            session.execute(delete(MonthlyFinanceSummaryTable))
        logger.warning("All monthly finance summaries deleted")

    def count(self) -> int:
        with self.database.session_scope() as session:
            return session.scalar(
                select(func.count()).select_from(MonthlyFinanceSummaryTable)
            ) or 0

    def _find(self, stmt) -> list[MonthlyFinanceSummary]:
        with self.database.session_scope() as session:
            rows = session.scalars(stmt).all()
            return self.mapper.to_domain_list(list(rows))
