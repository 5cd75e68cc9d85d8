"""Use case to load the current token price table."""

from src.application.ports.price_source import PriceSourcePort
from src.domain.models import PriceTable
from src.domain.services import build_price_table
from src.infrastructure.logging.logger import get_app_logger


class GetPriceTableUseCase:
    """Fetch prices and build a sorted, positive-only price table."""

    def __init__(self, price_source: PriceSourcePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            price_source: Port providing the raw price feed.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._price_source = price_source
        self._logger = logger or get_app_logger()

    def execute(self) -> PriceTable:
        """Return a freshly built price table.

        Returns:
            PriceTable: Prices keyed by symbol, sorted by symbol.
        """
        entries = self._price_source.fetch_prices()
        table = build_price_table(entries, self._logger)
        self._logger.info(
            f"Price table built: {len(table)} symbols "
            f"from {len(entries)} feed entries"
        )
        return table


__all__ = ["GetPriceTableUseCase"]
