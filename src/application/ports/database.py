"""Port for reaching the wallet balances database."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Provides the engine that balance sources query for wallet_balances."""

    def get_wallet_engine(self) -> Engine:
        """Return the engine connected to the wallet database."""


__all__ = ["DatabaseEnginePort"]
