"""
shop_orders.db.__main__

Entrypoint for creating the schema via `python -m shop_orders.db`.

Responsibilities:
- Load settings and configure logging.
- Create all tables on the configured database, then dispose the engine.
"""

from __future__ import annotations

import asyncio

from shop_orders.db.init_db import init_db
from shop_orders.db.session import create_engine
from shop_orders.observability.logging import configure_logging, get_logger
from shop_orders.settings import Settings, get_settings

log = get_logger(__name__)


async def _run(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        tables = await init_db(engine)
    finally:
        await engine.dispose()
    log.info("schema_created", tables=tables)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    if settings.env == "prod":
        # Prod schema changes go through Alembic only.
        log.error("schema_create_refused", env=settings.env, hint="run `alembic upgrade head`")
        raise SystemExit(1)
    asyncio.run(_run(settings))


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Installed as the `shop-orders-init-db` console script (see pyproject.toml).
