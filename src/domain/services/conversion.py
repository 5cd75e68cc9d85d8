"""Rate conversion between tokens using linear price ratios."""

from src.domain.models import (
    ConversionOutcome,
    ConversionRequest,
    ConversionResult,
    InvalidQuantityError,
    PriceTable,
    PriceUnavailableError,
    SameAssetError,
)
from src.utils.decimal_utils import non_trapping_context, parse_decimal


def convert(table: PriceTable, request: ConversionRequest) -> ConversionOutcome:
    """Convert a token quantity into the equivalent destination quantity.

    Checks run in a fixed order: identical tokens, then the quantity, then
    price availability. Failures are returned, never raised. The output is
    not rounded; use ConversionResult.display_value at the display boundary.

    Args:
        table: Current price table.
        request: Source token, destination token, and input quantity.

    Returns:
        ConversionOutcome: A ConversionResult or a ConversionFailure.
    """
    if request.source_symbol == request.dest_symbol:
        return SameAssetError()

    quantity = parse_decimal(request.input_quantity)
    if quantity is None or not quantity.is_finite() or quantity <= 0:
        return InvalidQuantityError()

    source_price = table.price_of(request.source_symbol)
    if not _is_usable(source_price):
        return _unavailable(request.source_symbol)
    dest_price = table.price_of(request.dest_symbol)
    if not _is_usable(dest_price):
        return _unavailable(request.dest_symbol)

    with non_trapping_context():
        output = quantity * source_price / dest_price
    # Out-of-range results are rejected like any unusable quantity.
    if not output.is_finite() or output <= 0:
        return InvalidQuantityError()
    return ConversionResult(output_quantity=output)


def _is_usable(price) -> bool:
    return price is not None and price.is_finite() and price > 0


def _unavailable(symbol: str) -> PriceUnavailableError:
    return PriceUnavailableError(
        message=f"No price available for {symbol}",
        symbol=symbol,
    )


__all__ = ["convert"]
