"""Domain package for business rules and core models."""

from .constants import BLOCKCHAIN_PRIORITIES, UNKNOWN_BLOCKCHAIN_PRIORITY
from .models import (
    Balance,
    Blockchain,
    ConversionFailure,
    ConversionRequest,
    ConversionResult,
    InvalidQuantityError,
    PriceEntry,
    PriceTable,
    PriceUnavailableError,
    RankedBalance,
    SameAssetError,
)
from .services import (
    build_price_table,
    convert,
    get_priority,
    merge_duplicate_balances,
    rank_balances,
)

__all__ = [
    "Balance",
    "Blockchain",
    "ConversionFailure",
    "ConversionRequest",
    "ConversionResult",
    "InvalidQuantityError",
    "PriceEntry",
    "PriceTable",
    "PriceUnavailableError",
    "RankedBalance",
    "SameAssetError",
    "BLOCKCHAIN_PRIORITIES",
    "UNKNOWN_BLOCKCHAIN_PRIORITY",
    "build_price_table",
    "convert",
    "get_priority",
    "merge_duplicate_balances",
    "rank_balances",
]
