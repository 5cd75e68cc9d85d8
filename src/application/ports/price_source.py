"""Application ports for token price data."""

from decimal import Decimal
from typing import Protocol

from src.domain.models import PriceEntry


class PriceSourcePort(Protocol):
    """Port returning the current token price feed."""

    def fetch_prices(self) -> list[PriceEntry]:
        """Return raw price entries, unfiltered and unsorted."""


class FiatPricePort(Protocol):
    """Port returning the fiat unit price of a currency."""

    def price_of(self, currency: str) -> Decimal | None:
        """Return the price per unit, or None when unknown."""


__all__ = ["PriceSourcePort", "FiatPricePort"]
