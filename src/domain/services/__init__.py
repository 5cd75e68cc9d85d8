"""Domain services package."""

from .conversion import convert
from .pricing import build_price_table
from .ranking import get_priority, merge_duplicate_balances, rank_balances

__all__ = [
    "build_price_table",
    "convert",
    "get_priority",
    "merge_duplicate_balances",
    "rank_balances",
]
