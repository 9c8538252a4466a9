"""
tests.test_settings_and_bootstrap

Env-driven settings, logging setup and the `python -m shop_orders.db` entrypoint.
"""

from __future__ import annotations

import sqlite3

import pytest
import structlog

from shop_orders.db.__main__ import main
from shop_orders.db.init_db import init_db
from shop_orders.observability.logging import _add_static_fields, configure_logging
from shop_orders.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _reset_global_state():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


def test_settings_read_prefixed_env(monkeypatch) -> None:
    monkeypatch.setenv("SHOP_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("SHOP_ENV", "test")

    settings = get_settings()

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.env == "test"
    assert get_settings() is settings


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.service_name == "shop-orders"
    assert settings.sql_echo is False


def test_database_url_is_hidden_from_repr() -> None:
    settings = Settings(database_url="postgresql+asyncpg://shop:s3cret@db/shop")

    assert "s3cret" not in repr(settings)
    assert settings.database_url.endswith("@db/shop")


def test_static_fields_do_not_override_event_fields() -> None:
    processor = _add_static_fields(service="shop-orders", env="test")

    assert processor(None, "info", {}) == {"service": "shop-orders", "env": "test"}
    assert processor(None, "info", {"env": "other"})["env"] == "other"


def test_configure_logging_renders_json_outside_dev() -> None:
    configure_logging(Settings(env="test", log_level="debug"))

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_configure_logging_renders_console_in_dev() -> None:
    configure_logging(Settings(env="dev"))

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_init_db_entrypoint_creates_tables(monkeypatch, tmp_path) -> None:
    db_file = tmp_path / "shop.db"
    monkeypatch.setenv("SHOP_DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")

    main()

    with sqlite3.connect(db_file) as conn:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"customers", "products", "orders", "order_items"} <= tables


def test_init_db_entrypoint_refuses_prod(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SHOP_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    monkeypatch.setenv("SHOP_ENV", "prod")

    with pytest.raises(SystemExit):
        main()



@pytest.mark.asyncio
async def test_init_db_is_idempotent_and_lists_tables_parents_first(engine) -> None:
    tables = await init_db(engine)

    assert set(tables) == {"customers", "products", "orders", "order_items"}
    assert tables.index("customers") < tables.index("orders") < tables.index("order_items")


# --- Module Notes -----------------------------------------------------------
# `_reset_global_state` undoes `configure_logging` so later tests can still use
# `structlog.testing.capture_logs` on uncached loggers.
