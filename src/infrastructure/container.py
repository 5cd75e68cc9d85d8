"""Composition root for wiring infrastructure adapters."""

from src.application.ports.balance_source import BalanceSourcePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.price_source import FiatPricePort, PriceSourcePort
from src.application.ports.swap_executor import SwapExecutorPort
from src.domain.models import PriceTable
from src.infrastructure.balance_sources import (
    JsonFileBalanceSource,
    SqlAlchemyBalanceSource,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.fiat_prices import PriceTableFiatSource
from src.infrastructure.http_price_source import HttpPriceSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BALANCE_BACKENDS, WalletSettings
from src.infrastructure.swap_executor import SimulatedSwapExecutor


def build_database_adapter(
    settings: WalletSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured wallet database."""
    resolved = settings or WalletSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(
        resolved.wallet_db_url,
        logger=get_app_logger(),
    )


def build_price_source(
    settings: WalletSettings | None = None,
) -> PriceSourcePort:
    """Return the HTTP price source."""
    resolved = settings or WalletSettings.from_env()
    return HttpPriceSource(
        resolved.prices_url,
        timeout=resolved.prices_timeout,
        logger=get_app_logger(),
    )


def build_balance_source(
    settings: WalletSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> BalanceSourcePort:
    """Return the configured balance source."""
    resolved = settings or WalletSettings.from_env()
    backend = resolved.balance_backend
    if backend == "sqlalchemy":
        return SqlAlchemyBalanceSource(db_port or build_database_adapter(resolved))
    if backend == "json":
        if resolved.balances_file is None:
            raise RuntimeError(
                "JSON balance backend requires a WALLET_BALANCES_FILE value."
            )
        return JsonFileBalanceSource(
            resolved.balances_file,
            logger=get_app_logger(),
        )
    raise RuntimeError(
        f"Unsupported balance backend: {backend}. "
        f"Expected one of: {', '.join(BALANCE_BACKENDS)}."
    )


def build_fiat_price_source(table: PriceTable) -> FiatPricePort:
    """Return fiat prices backed by the USD price table."""
    return PriceTableFiatSource(table)


def build_swap_executor(
    settings: WalletSettings | None = None,
) -> SwapExecutorPort:
    """Return the simulated swap executor."""
    resolved = settings or WalletSettings.from_env()
    return SimulatedSwapExecutor(delay_seconds=resolved.swap_delay_seconds)


__all__ = [
    "build_database_adapter",
    "build_price_source",
    "build_balance_source",
    "build_fiat_price_source",
    "build_swap_executor",
]
