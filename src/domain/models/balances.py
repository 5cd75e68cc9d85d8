"""Domain models for wallet balances."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Blockchain(str, Enum):
    """Blockchains with a known display priority."""

    OSMOSIS = "Osmosis"
    ETHEREUM = "Ethereum"
    ARBITRUM = "Arbitrum"
    ZILLIQA = "Zilliqa"
    NEO = "Neo"

    @classmethod
    def from_tag(cls, tag: str) -> "Blockchain | None":
        """Return the enum member for a raw tag, or None when unknown."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class Balance:
    """Raw wallet balance as returned by a balance source.

    Attributes:
        currency: Token symbol held.
        amount: Quantity held.
        blockchain: Blockchain tag; unknown tags are kept verbatim.
    """

    currency: str
    amount: Decimal
    blockchain: str


@dataclass(frozen=True)
class RankedBalance:
    """Balance projected for display."""

    currency: str
    amount: Decimal
    blockchain: str
    priority: int
    formatted_amount: str
    fiat_value: Decimal

    @property
    def key(self) -> tuple[str, str]:
        """Return the (blockchain, currency) display key."""
        return (self.blockchain, self.currency)


__all__ = ["Blockchain", "Balance", "RankedBalance"]
