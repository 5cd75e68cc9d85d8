"""Tests for the wallet database engine helpers."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import db as db_module


@pytest.fixture(autouse=True)
def _reset_engines(monkeypatch):
    monkeypatch.setattr(db_module, "_engines", {})


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://wallet")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://wallet"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True


def test_get_wallet_engine_shares_engines_per_url(monkeypatch):
    """Each URL gets one engine; different URLs get different engines."""
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    logger = MagicMock()

    first = db_module.get_wallet_engine("sqlite:///a.db", logger=logger)
    again = db_module.get_wallet_engine("sqlite:///a.db", logger=logger)
    other = db_module.get_wallet_engine("sqlite:///b.db", logger=logger)

    assert first is again
    assert other == "engine:sqlite:///b.db"
    assert created == ["sqlite:///a.db", "sqlite:///b.db"]
    assert logger.info.call_count == 2


def test_get_wallet_engine_hides_password_in_logs(monkeypatch):
    """Credentials never reach the log."""
    monkeypatch.setattr(db_module, "_create_engine", lambda url: "engine")
    logger = MagicMock()

    db_module.get_wallet_engine("postgresql://user:s3cret@db/wallet", logger=logger)

    message = logger.info.call_args.args[0]
    assert "s3cret" not in message
    assert "user:***@db/wallet" in message


def test_adapter_requires_url():
    """A missing URL is a configuration error."""
    with pytest.raises(RuntimeError, match="WALLET_DB_URL"):
        db_module.SqlAlchemyDatabaseEngineAdapter(None)


def test_adapter_delegates_to_shared_engine(monkeypatch):
    """The adapter asks for the engine of its own URL."""
    monkeypatch.setattr(
        db_module,
        "get_wallet_engine",
        lambda db_url, logger=None: f"engine:{db_url}",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite:///wallet.db")

    assert adapter.get_wallet_engine() == "engine:sqlite:///wallet.db"
