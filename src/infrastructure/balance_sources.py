"""Balance source adapters backed by a database or a JSON file."""

import json
from decimal import InvalidOperation
from logging import Logger
from pathlib import Path

from sqlalchemy import text

from src.application.ports.balance_source import BalanceSourcePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import Balance
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyBalanceSource(BalanceSourcePort):
    """Balance source reading the wallet_balances table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the source.

        Args:
            db_port: Port providing access to the wallet engine.
        """
        self._db_port = db_port

    def fetch_balances(self) -> list[Balance]:
        """Return wallet balances in storage order."""
        query = text(
            """
            SELECT currency, amount, blockchain
            FROM wallet_balances
            ORDER BY id
            """
        )
        engine = self._db_port.get_wallet_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            Balance(
                currency=row.currency,
                amount=coerce_decimal(row.amount),
                blockchain=row.blockchain,
            )
            for row in rows
        ]


class JsonFileBalanceSource(BalanceSourcePort):
    """Balance source reading a JSON list of balances.

    Each item is an object with ``currency``, ``amount`` and ``blockchain``.
    Items missing a field or holding a non-numeric amount are skipped.
    """

    def __init__(self, path: Path, logger: Logger | None = None) -> None:
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def fetch_balances(self) -> list[Balance]:
        """Return balances in file order.

        Raises:
            RuntimeError: If the file is missing or not a JSON list.
        """
        if not self._path.exists():
            raise RuntimeError(f"Balances file not found: {self._path}")
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Invalid JSON in balances file {self._path}: {exc}"
            ) from exc
        if not isinstance(payload, list):
            raise RuntimeError(
                f"Balances file must contain a list: {self._path}"
            )

        balances: list[Balance] = []
        for item in payload:
            balance = self._parse_item(item)
            if balance is not None:
                balances.append(balance)
        return balances

    def _parse_item(self, item) -> Balance | None:
        if not isinstance(item, dict):
            self._logger.warning(f"Skipping malformed balance: {item!r}")
            return None
        currency = item.get("currency")
        blockchain = item.get("blockchain")
        if not currency or blockchain is None:
            self._logger.warning(f"Skipping incomplete balance: {item!r}")
            return None
        try:
            amount = coerce_decimal(item.get("amount"))
        except (InvalidOperation, ValueError):
            self._logger.warning(
                f"Skipping balance with invalid amount for {currency}"
            )
            return None
        return Balance(
            currency=str(currency),
            amount=amount,
            blockchain=str(blockchain),
        )


__all__ = ["SqlAlchemyBalanceSource", "JsonFileBalanceSource"]
