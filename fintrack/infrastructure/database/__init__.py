from fintrack.infrastructure.database.database import Database, create_database
from fintrack.infrastructure.database.mappers import (
    MonthlyFinanceSummaryMapper,
    OperationMapper,
)
from fintrack.infrastructure.database.models import (
    Base,
    MonthlyFinanceSummaryTable,
    OperationTable,
)
from fintrack.infrastructure.database.repository import (
    MonthlyFinanceSummaryRepository,
    OperationRepository,
)

__all__ = [
    "Base",
    "OperationTable",
    "MonthlyFinanceSummaryTable",
    "OperationMapper",
    "MonthlyFinanceSummaryMapper",
    "OperationRepository",
    "MonthlyFinanceSummaryRepository",
    "Database",
    "create_database",
]
