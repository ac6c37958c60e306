"""Tests for the fintrack command line."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import orjson
import pytest

from fintrack import cli
from fintrack.config import get_config

ADD_ARGS = [
    "add",
    "--nature", "despesa",
    "--state", "pagar",
    "--payment-method", "Pix",
    "--source", "Checking",
    "--destination", "Market",
    "--value", "150,00",
    "--category", "Food",
    "--date", "2024-03-15T10:00:00",
]


@pytest.fixture
def run(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> Callable[..., tuple[int, Any, str]]:
    """Run the CLI against a temporary database; returns code, JSON, stderr."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "setup_logging", lambda config: None)
    get_config.cache_clear()
    db = str(tmp_path / "ledger.db")

    def invoke(*argv: str) -> tuple[int, Any, str]:
        code = cli.main(["--db", db, *argv])
        captured = capsys.readouterr()
        payload = orjson.loads(captured.out) if captured.out.strip() else None
        return code, payload, captured.err

    yield invoke
    get_config.cache_clear()


class TestCli:
    """End-to-end tests through main()."""

    def test_add_and_show(self, run: Callable[..., tuple[int, Any, str]]) -> None:
        code, created, _ = run(*ADD_ARGS)

        assert code == 0
        assert created["value"] == {"amount": "150.00", "currency": "BRL"}
        assert created["date"] == "2024-03-15T10:00:00+00:00"

        code, shown, _ = run("show", created["id"])
        assert code == 0
        assert shown["id"] == created["id"]

    def test_add_invalid_pair_fails(
        self, run: Callable[..., tuple[int, Any, str]]
    ) -> None:
        args = ADD_ARGS.copy()
        args[args.index("pagar")] = "recebido"

        code, payload, err = run(*args)

        assert code == 1
        assert payload is None
        assert "is not compatible with nature" in err

    def test_complete_then_pending(
        self, run: Callable[..., tuple[int, Any, str]]
    ) -> None:
        _, created, _ = run(*ADD_ARGS)

        _, completed, _ = run("complete", created["id"])
        assert completed["state"] == "pago"

        _, reopened, _ = run("pending", created["id"])
        assert reopened["state"] == "pagar"

    def test_update_and_list(self, run: Callable[..., tuple[int, Any, str]]) -> None:
        _, created, _ = run(*ADD_ARGS)
        run(*ADD_ARGS[:-4], "--category", "Rent", "--date", "2024-04-01T00:00:00")

        code, updated, _ = run("update", created["id"], "--value", "99,90")
        assert code == 0
        assert updated["value"]["amount"] == "99.90"

        _, listed, _ = run("list", "--category", "Food")
        assert [op["id"] for op in listed] == [created["id"]]

        _, listed, _ = run(
            "list", "--start", "2024-03-01T00:00:00", "--end", "2024-03-31T23:59:59"
        )
        assert len(listed) == 1

    def test_delete(self, run: Callable[..., tuple[int, Any, str]]) -> None:
        _, created, _ = run(*ADD_ARGS)

        code, payload, _ = run("delete", created["id"])
        assert (code, payload) == (0, {"deleted": True})

        code, _, err = run("delete", created["id"])
        assert code == 1
        assert "Operation not found" in err

    def test_complete_unknown_operation(
        self, run: Callable[..., tuple[int, Any, str]]
    ) -> None:
        code, _, err = run("complete", "ghost")
        assert code == 1
        assert "Operation not found" in err

    def test_summary_rejects_bad_month(
        self, run: Callable[..., tuple[int, Any, str]]
    ) -> None:
        code, _, err = run("summary", "--month", "2024-13")
        assert code == 1
        assert "Month must be between 01 and 12" in err

    def test_summary_empty(self, run: Callable[..., tuple[int, Any, str]]) -> None:
        assert run("summary", "--user", "u1")[:2] == (0, [])

    def test_bad_value_reports_without_traceback(
        self,
        run: Callable[..., tuple[int, Any, str]],
        captured_logs: list[dict[str, Any]],
    ) -> None:
        """Should treat a mistyped amount as user error, not a crash."""
        args = ADD_ARGS.copy()
        args[args.index("150,00")] = "R$"

        code, payload, err = run(*args)

        assert (code, payload) == (1, None)
        assert "Error: Invalid money string format" in err
        assert not any(
            entry["event"] == "Command failed" for entry in captured_logs
        )

    def test_add_reads_thousands_separators(
        self, run: Callable[..., tuple[int, Any, str]]
    ) -> None:
        args = ADD_ARGS.copy()
        args[args.index("150,00")] = "1,234.56"

        _, created, _ = run(*args)

        assert created["value"]["amount"] == "1234.56"
