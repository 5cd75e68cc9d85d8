"""Domain models package."""

from .balances import Balance, Blockchain, RankedBalance
from .pricing import (
    ConversionFailure,
    ConversionOutcome,
    ConversionRequest,
    ConversionResult,
    InvalidQuantityError,
    PriceEntry,
    PriceTable,
    PriceUnavailableError,
    SameAssetError,
)

__all__ = [
    "Balance",
    "Blockchain",
    "RankedBalance",
    "ConversionFailure",
    "ConversionOutcome",
    "ConversionRequest",
    "ConversionResult",
    "InvalidQuantityError",
    "PriceEntry",
    "PriceTable",
    "PriceUnavailableError",
    "SameAssetError",
]
