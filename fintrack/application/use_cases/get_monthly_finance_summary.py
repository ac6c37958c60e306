"""
Read monthly finance summaries filtered by user and/or month.
"""

from dataclasses import dataclass, field

from fintrack.domain.entities.monthly_finance_summary import MonthlyFinanceSummary
from fintrack.domain.exceptions import DomainValidationError
from fintrack.domain.repositories import IMonthlyFinanceSummaryRepository
from fintrack.domain.validators import is_blank, validate_month
from fintrack.utils.result import Result, Success

from .base import UseCase, UseCaseError, fail, reject


@dataclass(frozen=True)
class GetMonthlyFinanceSummaryRequest:
    user_id: str | None = None
    month: str | None = None


@dataclass(frozen=True)
class GetMonthlyFinanceSummaryResponse:
    monthly_finance_summaries: list[MonthlyFinanceSummary] = field(
        default_factory=list
    )


class GetMonthlyFinanceSummaryUseCase(
    UseCase[GetMonthlyFinanceSummaryRequest, GetMonthlyFinanceSummaryResponse]
):
    """Pick the most specific storage query for the given filters."""

    def __init__(self, summary_repository: IMonthlyFinanceSummaryRepository):
        self.summary_repository = summary_repository

    def execute(
        self, request: GetMonthlyFinanceSummaryRequest
    ) -> Result[GetMonthlyFinanceSummaryResponse, UseCaseError]:
        if request.user_id is not None and is_blank(request.user_id):
            return reject("User ID cannot be empty")

        if request.month is not None:
            try:
                validate_month(request.month)
            except DomainValidationError as e:
                return reject(str(e))

        repo = self.summary_repository
        try:
            if request.user_id and request.month:
                summaries = repo.find_by_user_and_month(
                    request.user_id, request.month
                )
            elif request.user_id:
                summaries = repo.find_by_user(request.user_id)
            elif request.month:
                summaries = repo.find_by_month(request.month)
            else:
                summaries = repo.find_all()
        except Exception as e:
            return fail("get monthly finance summaries", e)

        return Success(
            GetMonthlyFinanceSummaryResponse(monthly_finance_summaries=summaries)
        )
