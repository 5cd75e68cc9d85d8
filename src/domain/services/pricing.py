"""Domain services for building price lookup tables."""

from collections.abc import Iterable

from src.domain.models import PriceEntry, PriceTable


def build_price_table(
    entries: Iterable[PriceEntry],
    logger,
) -> PriceTable:
    """Build a price table from raw feed entries.

    Entries without a symbol or with a non-positive price are skipped. When a
    symbol appears more than once the most recent quote wins; quotes without
    timestamps fall back to input order, so the later entry wins.

    Args:
        entries: Price entries from a price source.
        logger: Logger compatible with logging.Logger-like API.

    Returns:
        PriceTable: Prices keyed by symbol, sorted by symbol.
    """
    prices: dict[str, PriceEntry] = {}
    for entry in entries:
        symbol = (entry.symbol or "").strip()
        if not symbol:
            logger.warning("Skipping price entry with missing symbol")
            continue
        if not entry.price.is_finite() or entry.price <= 0:
            logger.warning(
                f"Skipping non-positive price for {symbol}: {entry.price}"
            )
            continue
        current = prices.get(symbol)
        if current is not None and _is_older(entry, current):
            continue
        if current is not None:
            logger.debug(f"Replacing duplicate price for {symbol}")
        prices[symbol] = (
            entry
            if entry.symbol == symbol
            else PriceEntry(symbol, entry.price, entry.updated_at)
        )
    return PriceTable(prices)


def _is_older(candidate: PriceEntry, current: PriceEntry) -> bool:
    if candidate.updated_at is None or current.updated_at is None:
        return False
    return candidate.updated_at < current.updated_at


__all__ = ["build_price_table"]
