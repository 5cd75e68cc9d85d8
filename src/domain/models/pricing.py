"""Domain models for token prices and swap conversions."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.utils.decimal_utils import format_output_quantity


@dataclass(frozen=True)
class PriceEntry:
    """Unit price of a token as reported by the price feed.

    Attributes:
        symbol: Token symbol (e.g., ETH).
        price: Unit price in the feed's quote currency.
        updated_at: Optional timestamp of the quote.
    """

    symbol: str
    price: Decimal
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PriceTable:
    """Immutable symbol-keyed price lookup.

    Entries are stored in ascending symbol order. Tables are rebuilt
    wholesale on every fetch; use build_price_table to create one.
    """

    entries: Mapping[str, PriceEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ordered = {
            symbol: self.entries[symbol] for symbol in sorted(self.entries)
        }
        object.__setattr__(self, "entries", ordered)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.entries

    def __iter__(self) -> Iterator[PriceEntry]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def symbols(self) -> list[str]:
        """Return the available symbols in display order."""
        return list(self.entries)

    def get(self, symbol: str) -> PriceEntry | None:
        """Return the entry for a symbol, if present."""
        return self.entries.get(symbol)

    def price_of(self, symbol: str) -> Decimal | None:
        """Return the unit price for a symbol, if present."""
        entry = self.entries.get(symbol)
        return entry.price if entry is not None else None


@dataclass(frozen=True)
class ConversionRequest:
    """Request to convert a quantity of one token into another.

    The quantity may be raw user text; the converter parses it.
    """

    source_symbol: str
    dest_symbol: str
    input_quantity: Decimal | str


@dataclass(frozen=True)
class ConversionResult:
    """Successful conversion output, unrounded."""

    output_quantity: Decimal

    @property
    def display_value(self) -> str:
        """Return the output truncated to six decimals for display."""
        return format_output_quantity(self.output_quantity)


@dataclass(frozen=True)
class ConversionFailure:
    """Base class for recoverable conversion failures."""

    message: str


@dataclass(frozen=True)
class SameAssetError(ConversionFailure):
    """Source and destination tokens are identical."""

    message: str = "Cannot swap same tokens"


@dataclass(frozen=True)
class InvalidQuantityError(ConversionFailure):
    """Input quantity is not a finite positive number."""

    message: str = "Amount must be a positive number"


@dataclass(frozen=True)
class PriceUnavailableError(ConversionFailure):
    """A token has no usable price in the table."""

    message: str = "Price unavailable"
    symbol: str | None = None


ConversionOutcome = ConversionResult | ConversionFailure


__all__ = [
    "PriceEntry",
    "PriceTable",
    "ConversionRequest",
    "ConversionResult",
    "ConversionFailure",
    "SameAssetError",
    "InvalidQuantityError",
    "PriceUnavailableError",
    "ConversionOutcome",
]
