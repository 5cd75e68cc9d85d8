"""Application ports package."""

from .balance_source import BalanceSourcePort
from .database import DatabaseEnginePort
from .price_source import FiatPricePort, PriceSourcePort
from .swap_executor import SwapExecutorPort

__all__ = [
    "BalanceSourcePort",
    "DatabaseEnginePort",
    "FiatPricePort",
    "PriceSourcePort",
    "SwapExecutorPort",
]
