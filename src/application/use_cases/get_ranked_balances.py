"""Use case to rank wallet balances for display."""

from src.application.ports.balance_source import BalanceSourcePort
from src.application.ports.price_source import FiatPricePort
from src.domain.models import RankedBalance
from src.domain.services import (
    get_priority,
    merge_duplicate_balances,
    rank_balances,
)
from src.infrastructure.logging.logger import get_app_logger


class GetRankedBalancesUseCase:
    """Filter, order, format, and value wallet balances."""

    def __init__(
        self,
        balance_source: BalanceSourcePort,
        fiat_prices: FiatPricePort,
        logger=None,
        merge_duplicates: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_source: Port providing raw wallet balances.
            fiat_prices: Port providing fiat unit prices.
            logger: Optional logger compatible with logging.Logger-like API.
            merge_duplicates: Sum balances sharing blockchain and currency.
        """
        self._balance_source = balance_source
        self._fiat_prices = fiat_prices
        self._logger = logger or get_app_logger()
        self._merge_duplicates = merge_duplicates

    def execute(self) -> list[RankedBalance]:
        """Return ranked balances, highest priority first."""
        balances = self._balance_source.fetch_balances()
        if self._merge_duplicates:
            balances = merge_duplicate_balances(balances)
        ranked = rank_balances(
            balances,
            priority_of=get_priority,
            price_of=self._fiat_prices.price_of,
        )

        unpriced = [
            row.currency
            for row in ranked
            if self._fiat_prices.price_of(row.currency) is None
        ]
        if unpriced:
            self._logger.warning(
                f"Missing fiat price for {', '.join(sorted(set(unpriced)))}; "
                "valued at 0"
            )
        self._logger.info(
            f"Ranked {len(ranked)} balances "
            f"({len(balances) - len(ranked)} empty balances dropped)"
        )
        return ranked


__all__ = ["GetRankedBalancesUseCase"]
