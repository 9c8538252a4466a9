"""
shop_orders.db.init_db

Schema bootstrap for local development and tests.

Responsibilities:
- Create the four order-management tables when they are missing.
- Report which tables the metadata covers so callers can log them.

Production schema changes go through `alembic upgrade head` instead.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from shop_orders.db import models  # noqa: F401  # registers tables on Base.metadata
from shop_orders.db.base import Base


async def init_db(engine: AsyncEngine) -> list[str]:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return [table.name for table in Base.metadata.sorted_tables]


# --- Module Notes -----------------------------------------------------------
# `sorted_tables` is dependency order: parents (customers, products) come first.
