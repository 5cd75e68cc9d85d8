"""Application port for wallet balances."""

from typing import Protocol

from src.domain.models import Balance


class BalanceSourcePort(Protocol):
    """Port exposing raw wallet balances."""

    def fetch_balances(self) -> list[Balance]:
        """Return every wallet balance, including empty ones."""


__all__ = ["BalanceSourcePort"]
