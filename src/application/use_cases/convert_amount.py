"""Use case to convert a token amount at current prices."""

from decimal import Decimal

from src.application.use_cases.get_price_table import GetPriceTableUseCase
from src.domain.models import ConversionOutcome, ConversionRequest
from src.domain.services import convert


class ConvertAmountUseCase:
    """Load the price table and convert one token amount into another."""

    def __init__(self, price_table_use_case: GetPriceTableUseCase) -> None:
        self._price_table_use_case = price_table_use_case

    def execute(
        self,
        source_symbol: str,
        dest_symbol: str,
        quantity: Decimal | str,
    ) -> ConversionOutcome:
        """Return the conversion outcome for the given amount."""
        table = self._price_table_use_case.execute()
        request = ConversionRequest(
            source_symbol=source_symbol,
            dest_symbol=dest_symbol,
            input_quantity=quantity,
        )
        return convert(table, request)


__all__ = ["ConvertAmountUseCase"]
