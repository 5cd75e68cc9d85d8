"""Domain services for ranking wallet balances for display."""

from collections.abc import Callable, Iterable
from decimal import Decimal

from src.domain.constants import (
    BLOCKCHAIN_PRIORITIES,
    UNKNOWN_BLOCKCHAIN_PRIORITY,
)
from src.domain.models import Balance, Blockchain, RankedBalance
from src.utils.decimal_utils import (
    coerce_decimal,
    format_amount,
    non_trapping_context,
)


def get_priority(blockchain: str) -> int:
    """Return the display priority of a blockchain tag.

    Args:
        blockchain: Raw blockchain tag from a balance.

    Returns:
        int: Known priority, or -99 for unknown tags.
    """
    chain = Blockchain.from_tag(blockchain)
    if chain is None:
        return UNKNOWN_BLOCKCHAIN_PRIORITY
    return BLOCKCHAIN_PRIORITIES[chain]


def rank_balances(
    balances: Iterable[Balance],
    priority_of: Callable[[str], int],
    price_of: Callable[[str], Decimal | None],
) -> list[RankedBalance]:
    """Filter, order, and value balances for display.

    Only finite positive amounts are kept. Balances are ordered by
    descending priority; equal priorities keep their input order. Missing
    fiat prices, and fiat values beyond the Decimal range, value a balance
    at zero.

    Args:
        balances: Raw wallet balances.
        priority_of: Maps a blockchain tag to its priority.
        price_of: Maps a currency to its fiat unit price, or None.

    Returns:
        list[RankedBalance]: Display-ready balances.
    """
    held = [balance for balance in balances if _is_held(balance.amount)]
    prioritized = [(priority_of(balance.blockchain), balance) for balance in held]
    ordered = sorted(prioritized, key=lambda item: item[0], reverse=True)
    return [
        RankedBalance(
            currency=balance.currency,
            amount=balance.amount,
            blockchain=balance.blockchain,
            priority=priority,
            formatted_amount=format_amount(balance.amount),
            fiat_value=_fiat_value(balance, price_of),
        )
        for priority, balance in ordered
    ]


def merge_duplicate_balances(balances: Iterable[Balance]) -> list[Balance]:
    """Sum balances sharing a (blockchain, currency) key.

    The merged row takes the position of the first occurrence.

    Args:
        balances: Raw wallet balances.

    Returns:
        list[Balance]: One balance per (blockchain, currency) key.
    """
    totals: dict[tuple[str, str], Decimal] = {}
    for balance in balances:
        key = (balance.blockchain, balance.currency)
        with non_trapping_context():
            totals[key] = totals.get(key, Decimal("0")) + balance.amount
    return [
        Balance(currency=currency, amount=amount, blockchain=blockchain)
        for (blockchain, currency), amount in totals.items()
    ]


def _is_held(amount: Decimal) -> bool:
    return amount.is_finite() and amount > 0


def _fiat_value(
    balance: Balance,
    price_of: Callable[[str], Decimal | None],
) -> Decimal:
    raw_price = price_of(balance.currency)
    if raw_price is None:
        return Decimal("0")
    price = coerce_decimal(raw_price)
    if not price.is_finite():
        return Decimal("0")
    with non_trapping_context():
        value = balance.amount * price
    if not value.is_finite():
        return Decimal("0")
    return value


__all__ = ["get_priority", "rank_balances", "merge_duplicate_balances"]
