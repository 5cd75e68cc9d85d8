"""Fiat price lookups used to value wallet balances."""

from collections.abc import Mapping
from decimal import Decimal

from src.application.ports.price_source import FiatPricePort
from src.domain.models import PriceTable
from src.utils.decimal_utils import coerce_decimal


class PriceTableFiatSource(FiatPricePort):
    """Fiat prices read from a USD-denominated price table."""

    def __init__(self, table: PriceTable) -> None:
        self._table = table

    def price_of(self, currency: str) -> Decimal | None:
        return self._table.price_of(currency)


class StaticFiatPriceSource(FiatPricePort):
    """Fiat prices from a fixed mapping."""

    def __init__(self, prices: Mapping[str, object]) -> None:
        self._prices = {
            currency: coerce_decimal(price)
            for currency, price in prices.items()
        }

    def price_of(self, currency: str) -> Decimal | None:
        return self._prices.get(currency)


__all__ = ["PriceTableFiatSource", "StaticFiatPriceSource"]
