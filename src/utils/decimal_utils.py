"""Helpers for Decimal normalization and fixed-precision display."""

from decimal import (
    ROUND_DOWN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DefaultContext,
    InvalidOperation,
    Overflow,
    getcontext,
    localcontext,
)

AMOUNT_DISPLAY_PLACES = 2
OUTPUT_DISPLAY_PLACES = 6


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from feeds, files, or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        InvalidOperation: If the value cannot be parsed as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return Decimal(value.strip())
    return Decimal(str(value))


def parse_decimal(value) -> Decimal | None:
    """Parse a value into a Decimal, returning None when it is not numeric.

    Args:
        value: Raw value, typically text typed by a user.

    Returns:
        Decimal | None: Parsed value or None for blank or invalid input.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        return coerce_decimal(value)
    except (InvalidOperation, ValueError):
        return None


def non_trapping_context():
    """Return a local context where overflow and invalid operations do not raise.

    Arithmetic that leaves the exponent range yields Infinity and invalid
    operations yield NaN, so callers check ``is_finite()`` on the result.
    """
    context = getcontext().copy()
    context.traps[Overflow] = False
    context.traps[InvalidOperation] = False
    return localcontext(context)


def quantize_places(value: Decimal, places: int, rounding: str) -> Decimal:
    """Quantize a finite Decimal to a fixed number of decimal places.

    Working precision and exponent range grow with the magnitude of the
    value so large balances never overflow the default context.
    """
    exponent = Decimal(1).scaleb(-places)
    magnitude = value.adjusted()
    context = Context(
        prec=max(DefaultContext.prec, magnitude + places + 2),
        Emax=max(DefaultContext.Emax, magnitude),
    )
    return value.quantize(exponent, rounding=rounding, context=context)


def format_amount(value: Decimal) -> str:
    """Render an amount with two decimals, rounding half away from zero."""
    return str(quantize_places(value, AMOUNT_DISPLAY_PLACES, ROUND_HALF_UP))


def format_output_quantity(value: Decimal) -> str:
    """Render a converted quantity truncated to six decimals."""
    return str(quantize_places(value, OUTPUT_DISPLAY_PLACES, ROUND_DOWN))


__all__ = [
    "AMOUNT_DISPLAY_PLACES",
    "OUTPUT_DISPLAY_PLACES",
    "coerce_decimal",
    "parse_decimal",
    "non_trapping_context",
    "quantize_places",
    "format_amount",
    "format_output_quantity",
]
