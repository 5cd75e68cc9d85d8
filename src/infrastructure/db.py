"""SQLAlchemy engines for the wallet balances database.

Engines are shared per database URL so every balance source pointed at the
same database reuses one connection pool.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.logging.logger import get_app_logger


def _create_engine(db_url: str) -> Engine:
    """Create a pooled SQLAlchemy engine for a wallet database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: Engine with a small QueuePool and pre-ping health checks.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engines: dict[str, Engine] = {}


def get_wallet_engine(db_url: str, logger=None) -> Engine:
    """Return the shared engine for a wallet database URL.

    Args:
        db_url: Wallet database URL, usually WalletSettings.wallet_db_url.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        Engine: Lazily created engine, reused on later calls.
    """
    engine = _engines.get(db_url)
    if engine is None:
        engine = _create_engine(db_url)
        _engines[db_url] = engine
        safe_url = make_url(db_url).render_as_string(hide_password=True)
        (logger or get_app_logger()).info(f"Created wallet engine for {safe_url}")
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort bound to one wallet database URL."""

    def __init__(self, db_url: str, logger=None) -> None:
        """Initialize the adapter.

        Args:
            db_url: Wallet database URL.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            RuntimeError: If the URL is missing or empty.
        """
        if not db_url:
            raise RuntimeError(
                "SQLAlchemy balance backend requires a WALLET_DB_URL value."
            )
        self._db_url = db_url
        self._logger = logger

    def get_wallet_engine(self) -> Engine:
        """Return the engine for the configured wallet database."""
        return get_wallet_engine(self._db_url, logger=self._logger)


__all__ = ["get_wallet_engine", "SqlAlchemyDatabaseEngineAdapter"]
