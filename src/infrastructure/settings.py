"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_PRICES_URL = "https://interview.switcheo.com/prices.json"
BALANCE_BACKENDS = ("json", "sqlalchemy")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class WalletSettings:
    """Settings for the price feed, balance source, and swap executor.

    Attributes:
        prices_url: URL of the JSON price feed.
        prices_timeout: HTTP timeout in seconds for the price feed.
        balance_backend: Balance source identifier (json or sqlalchemy).
        balances_file: Optional path to a JSON balances file.
        wallet_db_url: Optional SQLAlchemy URL of the wallet database.
        merge_duplicate_balances: Sum balances sharing blockchain and currency.
        swap_delay_seconds: Simulated swap latency.
    """

    prices_url: str = DEFAULT_PRICES_URL
    prices_timeout: float = 10.0
    balance_backend: str = "json"
    balances_file: Optional[Path] = None
    wallet_db_url: Optional[str] = None
    merge_duplicate_balances: bool = False
    swap_delay_seconds: float = 1.5

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from environment variables.

        Returns:
            WalletSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("WALLET_BALANCE_BACKEND", "json").strip().lower()
        raw_file = os.getenv("WALLET_BALANCES_FILE")
        if raw_file:
            balances_file = cls._normalize_path(raw_file, logger=logger)
        else:
            balances_file = cls._default_balances_file()
        return cls(
            prices_url=os.getenv("PRICES_URL", DEFAULT_PRICES_URL).strip(),
            prices_timeout=cls._read_seconds(
                "PRICES_TIMEOUT",
                10.0,
                logger=logger,
            ),
            balance_backend=backend,
            balances_file=balances_file,
            wallet_db_url=os.getenv("WALLET_DB_URL") or None,
            merge_duplicate_balances=(
                os.getenv("MERGE_DUPLICATE_BALANCES", "").strip().lower()
                in _TRUTHY
            ),
            swap_delay_seconds=cls._read_seconds(
                "SWAP_DELAY_SECONDS",
                1.5,
                logger=logger,
            ),
        )

    @staticmethod
    def _read_seconds(name: str, default: float, logger) -> float:
        """Read a non-negative number of seconds from the environment.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid {name} '{raw}', using {default}")
            return default
        if not value.is_finite() or value < 0:
            logger.warning(f"Invalid {name} '{raw}', using {default}")
            return default
        return float(value)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize a balances file path or file:// URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Balances file does not exist at {path}")
        return path

    @staticmethod
    def _default_balances_file() -> Path | None:
        """Return data/balances.json under the project root when present."""
        candidate = get_project_root() / "data" / "balances.json"
        if candidate.exists():
            return candidate.resolve()
        return None


__all__ = ["WalletSettings", "DEFAULT_PRICES_URL", "BALANCE_BACKENDS"]
