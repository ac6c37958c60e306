"""Tests for settings loading."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import ValidationError

from fintrack.config import AppConfig, LedgerConfig, LoggingConfig, get_config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run without a local .env and with a clean config cache."""
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self) -> None:
        config = AppConfig()

        assert config.database.database_file == Path("finance.db")
        assert config.ledger.default_currency == "BRL"
        assert config.logger.app_name == "fintrack"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read nested fields with a double underscore."""
        monkeypatch.setenv("DATABASE__DATABASE_FILE", "/tmp/other.db")
        monkeypatch.setenv("LEDGER__DEFAULT_CURRENCY", "usd")

        config = AppConfig()

        assert config.database.database_file == Path("/tmp/other.db")
        assert config.ledger.default_currency == "USD"

    def test_env_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("LOGGER__LOG_LEVEL=warning\n")
        assert AppConfig().logger.log_level == "WARNING"

    def test_get_config_is_cached(self) -> None:
        assert get_config() is get_config()


class TestSectionValidation:
    """Tests for per-section validators."""

    def test_log_level_upper_cased(self) -> None:
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_bad_currency(self) -> None:
        with pytest.raises(ValidationError, match="3-letter code"):
            LedgerConfig(default_currency="reais")
