"""Tests for the GetRankedBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_ranked_balances import (
    GetRankedBalancesUseCase,
)
from src.domain.models import Balance
from src.infrastructure.fiat_prices import StaticFiatPriceSource


def _balance_source(balances: list[Balance]) -> MagicMock:
    source = MagicMock()
    source.fetch_balances.return_value = balances
    return source


def test_execute_ranks_and_values_balances() -> None:
    """Balances are filtered, ordered, formatted, and valued."""
    balances = [
        Balance("GAS", Decimal("10"), "Neo"),
        Balance("ETH", Decimal("5"), "Ethereum"),
        Balance("OSMO", Decimal("0"), "Osmosis"),
    ]
    fiat = StaticFiatPriceSource({"ETH": "1600", "GAS": "2.5"})
    logger = MagicMock()

    rows = GetRankedBalancesUseCase(
        _balance_source(balances),
        fiat,
        logger=logger,
    ).execute()

    assert [(row.blockchain, row.currency) for row in rows] == [
        ("Ethereum", "ETH"),
        ("Neo", "GAS"),
    ]
    assert [row.formatted_amount for row in rows] == ["5.00", "10.00"]
    assert [row.fiat_value for row in rows] == [Decimal("8000"), Decimal("25.0")]
    logger.warning.assert_not_called()
    assert "1 empty balances dropped" in logger.info.call_args.args[0]


def test_execute_warns_about_unpriced_currencies() -> None:
    """Unpriced currencies are valued at zero and logged once."""
    balances = [
        Balance("FOO", Decimal("1"), "Osmosis"),
        Balance("FOO", Decimal("2"), "Neo"),
    ]
    logger = MagicMock()

    rows = GetRankedBalancesUseCase(
        _balance_source(balances),
        StaticFiatPriceSource({}),
        logger=logger,
    ).execute()

    assert [row.fiat_value for row in rows] == [Decimal("0"), Decimal("0")]
    logger.warning.assert_called_once()
    assert "FOO" in logger.warning.call_args.args[0]


def test_execute_merges_duplicates_when_enabled() -> None:
    """Duplicate keys are summed only when merging is enabled."""
    balances = [
        Balance("ATOM", Decimal("1"), "Osmosis"),
        Balance("ATOM", Decimal("2"), "Osmosis"),
    ]
    fiat = StaticFiatPriceSource({"ATOM": "7"})

    kept = GetRankedBalancesUseCase(
        _balance_source(balances),
        fiat,
        logger=MagicMock(),
    ).execute()
    merged = GetRankedBalancesUseCase(
        _balance_source(balances),
        fiat,
        logger=MagicMock(),
        merge_duplicates=True,
    ).execute()

    assert len(kept) == 2
    assert len(merged) == 1
    assert merged[0].amount == Decimal("3")
    assert merged[0].fiat_value == Decimal("21")
