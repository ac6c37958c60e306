"""
Command line entry point.

Usage:
    fintrack [--db PATH] add --nature despesa --state pagar ...
    fintrack list [--start ISO --end ISO] [--account A] [--category C]
    fintrack show|complete|pending|delete ID
    fintrack update ID [--state S] [--value V] ...
    fintrack summary [--user U] [--month YYYY-MM]
"""

import argparse
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import orjson
from structlog import get_logger

from fintrack.application.use_cases import (
    CreateOperationRequest,
    CreateOperationUseCase,
    DeleteOperationRequest,
    DeleteOperationUseCase,
    GetMonthlyFinanceSummaryRequest,
    GetMonthlyFinanceSummaryUseCase,
    GetOperationByIdRequest,
    GetOperationByIdUseCase,
    GetOperationsRequest,
    GetOperationsUseCase,
    UpdateOperationRequest,
    UpdateOperationUseCase,
)
from fintrack.config import AppConfig, get_config
from fintrack.domain.entities.operation import (
    OperationNature,
    OperationState,
    PaymentMethod,
)
from fintrack.domain.exceptions import DomainValidationError
from fintrack.domain.value_objects.money import Money
from fintrack.infrastructure.database import (
    Database,
    MonthlyFinanceSummaryRepository,
    OperationRepository,
    create_database,
)
from fintrack.infrastructure.logger import bind_context, clear_context, setup_logging
from fintrack.utils.datetime_helpers import utc_now
from fintrack.utils.result import Result

logger = get_logger(__name__)


@dataclass
class UseCases:
    """Use cases wired to one database."""

    create: CreateOperationUseCase
    update: UpdateOperationUseCase
    delete: DeleteOperationUseCase
    get_by_id: GetOperationByIdUseCase
    get_all: GetOperationsUseCase
    summaries: GetMonthlyFinanceSummaryUseCase


def build_use_cases(database: Database) -> UseCases:
    operations = OperationRepository(database)
    summaries = MonthlyFinanceSummaryRepository(database)
    return UseCases(
        create=CreateOperationUseCase(operations),
        update=UpdateOperationUseCase(operations),
        delete=DeleteOperationUseCase(operations),
        get_by_id=GetOperationByIdUseCase(operations),
        get_all=GetOperationsUseCase(operations),
        summaries=GetMonthlyFinanceSummaryUseCase(summaries),
    )


def _add_operation_fields(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument(
        "--nature",
        choices=[n.value for n in OperationNature],
        required=required,
    )
    parser.add_argument(
        "--state",
        choices=[s.value for s in OperationState],
        required=required,
    )
    parser.add_argument(
        "--payment-method",
        choices=[p.value for p in PaymentMethod],
        required=required,
    )
    parser.add_argument("--source", dest="source_account", required=required)
    parser.add_argument(
        "--destination", dest="destination_account", required=required
    )
    parser.add_argument("--value", required=required, help="e.g. 1234,56")
    parser.add_argument("--category", required=required)
    parser.add_argument("--date", type=datetime.fromisoformat)
    parser.add_argument("--details")
    parser.add_argument("--project")
    parser.add_argument("--currency", help="Defaults to the configured one")


def setup_arg_parser(config: AppConfig) -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="fintrack", description="Track financial operations"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=Path(config.database.database_file),
        help="Path to SQLite database",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    _add_operation_fields(commands.add_parser("add", help="Record an operation"), True)

    listing = commands.add_parser("list", help="List operations")
    listing.add_argument("--start", type=datetime.fromisoformat)
    listing.add_argument("--end", type=datetime.fromisoformat)
    listing.add_argument("--account")
    listing.add_argument("--category")

    for name, help_text in (
        ("show", "Show one operation"),
        ("complete", "Mark an operation as received/paid"),
        ("pending", "Mark an operation as to receive/to pay"),
        ("delete", "Delete an operation"),
    ):
        commands.add_parser(name, help=help_text).add_argument("id")

    update = commands.add_parser("update", help="Change an operation")
    update.add_argument("id")
    _add_operation_fields(update, False)

    summary = commands.add_parser("summary", help="Show monthly summaries")
    summary.add_argument("--user")
    summary.add_argument("--month", help="YYYY-MM")

    return parser


def _money(args: argparse.Namespace, config: AppConfig) -> Money | None:
    if args.value is None:
        return None
    return Money.from_string(
        args.value, args.currency or config.ledger.default_currency
    )


def _print_json(payload: Any) -> None:
    print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))


def _report(result: Result[Any, Exception], render) -> int:
    """Print a result; exit code 0 on success, 1 on failure."""

    def on_success(response: Any) -> int:
        _print_json(render(response))
        return 0

    def on_failure(error: Exception) -> int:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    return result.match(on_success, on_failure)


def _change_state(use_cases: UseCases, operation_id: str, completed: bool) -> int:
    found = use_cases.get_by_id.execute(GetOperationByIdRequest(id=operation_id))
    if found.is_failure():
        return _report(found, lambda r: None)

    operation = found.get_or_raise().operation
    if operation is None:
        print("Error: Operation not found", file=sys.stderr)
        return 1

    moved = operation.mark_as_completed() if completed else operation.mark_as_pending()
    result = use_cases.update.execute(
        UpdateOperationRequest(id=operation.id, state=moved.state)
    )
    return _report(result, lambda r: r.operation.to_json())


def run_command(
    args: argparse.Namespace, use_cases: UseCases, config: AppConfig
) -> int:
    command = args.command

    try:
        value = _money(args, config) if command in ("add", "update") else None
    except DomainValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if command == "add":
        request = CreateOperationRequest(
            nature=args.nature,
            state=args.state,
            payment_method=args.payment_method,
            source_account=args.source_account,
            destination_account=args.destination_account,
            date=args.date or utc_now(),
            value=value,
            category=args.category,
            details=args.details,
            project=args.project,
        )
        return _report(
            use_cases.create.execute(request), lambda r: r.operation.to_json()
        )

    if command == "list":
        request = GetOperationsRequest(
            start_date=args.start,
            end_date=args.end,
            account_id=args.account,
            category=args.category,
        )
        return _report(
            use_cases.get_all.execute(request),
            lambda r: [op.to_json() for op in r.operations],
        )

    if command == "show":
        return _report(
            use_cases.get_by_id.execute(GetOperationByIdRequest(id=args.id)),
            lambda r: r.operation.to_json() if r.operation else None,
        )

    if command in ("complete", "pending"):
        return _change_state(use_cases, args.id, completed=command == "complete")

    if command == "update":
        request = UpdateOperationRequest(
            id=args.id,
            nature=args.nature,
            state=args.state,
            payment_method=args.payment_method,
            source_account=args.source_account,
            destination_account=args.destination_account,
            date=args.date,
            value=value,
            category=args.category,
            details=args.details,
            project=args.project,
        )
        return _report(
            use_cases.update.execute(request), lambda r: r.operation.to_json()
        )

    if command == "delete":
        return _report(
            use_cases.delete.execute(DeleteOperationRequest(id=args.id)),
            lambda r: {"deleted": r.deleted},
        )

    if command == "summary":
        request = GetMonthlyFinanceSummaryRequest(
            user_id=args.user, month=args.month
        )
        return _report(
            use_cases.summaries.execute(request),
            lambda r: [s.to_json() for s in r.monthly_finance_summaries],
        )

    raise ValueError(f"Unknown command: {command}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI execution."""
    config = get_config()
    setup_logging(config.logger)

    parser = setup_arg_parser(config)
    args = parser.parse_args(argv)
    bind_context(command=args.command)
    logger.info(f"Running command: {args.command}")

    try:
        database = create_database(args.db, echo=config.database.echo)
    except Exception:
        logger.exception("Could not open database")
        clear_context()
        return 1

    try:
        return run_command(args, build_use_cases(database), config)
    except Exception as e:
        logger.exception("Command failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        database.close()
        clear_context()


if __name__ == "__main__":
    sys.exit(main())
