"""Tests for the composition root."""

from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domain.models import ConversionRequest, ConversionResult, PriceEntry, PriceTable
from src.infrastructure import container
from src.infrastructure import db as db_module
from src.infrastructure.balance_sources import (
    JsonFileBalanceSource,
    SqlAlchemyBalanceSource,
)
from src.infrastructure.fiat_prices import PriceTableFiatSource
from src.infrastructure.http_price_source import HttpPriceSource
from src.infrastructure.settings import WalletSettings
from src.infrastructure.swap_executor import SimulatedSwapExecutor


def test_build_price_source_uses_settings() -> None:
    """The HTTP source is configured from settings."""
    settings = WalletSettings(prices_url="https://prices.example/feed.json")

    source = container.build_price_source(settings)

    assert isinstance(source, HttpPriceSource)


def test_build_balance_source_selects_backend(tmp_path: Path) -> None:
    """The backend setting picks the balance source."""
    json_settings = WalletSettings(balances_file=tmp_path / "balances.json")
    sql_settings = WalletSettings(balance_backend="sqlalchemy")

    assert isinstance(
        container.build_balance_source(json_settings),
        JsonFileBalanceSource,
    )
    assert isinstance(
        container.build_balance_source(sql_settings, db_port=MagicMock()),
        SqlAlchemyBalanceSource,
    )


def test_build_balance_source_requires_file_for_json() -> None:
    """The JSON backend needs a file path."""
    with pytest.raises(RuntimeError):
        container.build_balance_source(WalletSettings())


def test_build_balance_source_rejects_unknown_backend(tmp_path: Path) -> None:
    """Unknown backends are a configuration error."""
    settings = WalletSettings(
        balance_backend="postgres",
        balances_file=tmp_path / "balances.json",
    )

    with pytest.raises(RuntimeError, match="Unsupported balance backend: postgres"):
        container.build_balance_source(settings)


def test_build_balance_source_requires_db_url_for_sqlalchemy() -> None:
    """The SQLAlchemy backend needs WALLET_DB_URL."""
    with pytest.raises(RuntimeError, match="WALLET_DB_URL"):
        container.build_balance_source(WalletSettings(balance_backend="sqlalchemy"))


def test_build_database_adapter_binds_settings_url(monkeypatch) -> None:
    """The adapter reads engines for the URL held in settings."""
    seen = []
    monkeypatch.setattr(
        db_module,
        "get_wallet_engine",
        lambda db_url, logger=None: seen.append(db_url) or "engine",
    )

    source = container.build_balance_source(
        WalletSettings(
            balance_backend="sqlalchemy",
            wallet_db_url="sqlite:///wallet.db",
        )
    )

    assert isinstance(source, SqlAlchemyBalanceSource)
    adapter = container.build_database_adapter(
        WalletSettings(wallet_db_url="sqlite:///wallet.db")
    )
    assert adapter.get_wallet_engine() == "engine"
    assert seen == ["sqlite:///wallet.db"]


def test_build_fiat_price_source_wraps_table() -> None:
    """Fiat prices are read from the price table."""
    table = PriceTable({"ETH": PriceEntry("ETH", Decimal("1600"))})

    fiat = container.build_fiat_price_source(table)

    assert isinstance(fiat, PriceTableFiatSource)
    assert fiat.price_of("ETH") == Decimal("1600")
    assert fiat.price_of("BTC") is None


def test_build_swap_executor_uses_configured_delay() -> None:
    """The simulated executor waits the configured delay and logs."""
    executor = container.build_swap_executor(
        WalletSettings(swap_delay_seconds=0.25)
    )
    assert isinstance(executor, SimulatedSwapExecutor)

    sleeps: list[float] = []
    logger = MagicMock()
    executor = SimulatedSwapExecutor(
        delay_seconds=0.25,
        logger=logger,
        sleep=sleeps.append,
    )
    executor.execute(
        ConversionRequest("A", "B", Decimal("10")),
        ConversionResult(output_quantity=Decimal("5")),
    )

    assert sleeps == [0.25]
    assert "5.000000 B" in logger.info.call_args.args[0]
