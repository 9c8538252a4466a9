"""
tests.conftest

Shared fixtures: an in-memory SQLite engine with the schema created, a session
factory bound to it, and seed data for order tests.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from shop_orders.db.init_db import init_db
from shop_orders.db.repositories import CustomerRepository, ProductRepository
from shop_orders.db.session import create_engine, create_sessionmaker, session_scope
from shop_orders.domain.entities import Address, Customer, Product
from shop_orders.settings import Settings


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_engine(Settings(env="test", database_url="sqlite+aiosqlite:///:memory:"))
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(session_factory: async_sessionmaker[AsyncSession]) -> dict:
    """Committed customers 123/124 and product 123, the parents every order row needs."""

    customer = Customer("123", "Carlos Henrique")
    customer.change_address(Address("Rua 1", 108, "19260000", "Mirante"))
    other = Customer("124", "Amarildo Carlos", address=Address("Rua 1", 108, "19260000", "Mirante"))
    product = Product("123", "Produto 1", 10)

    async with session_scope(session_factory) as session:
        customers = CustomerRepository(session)
        await customers.create(customer)
        await customers.create(other)
        await ProductRepository(session).create(product)

    return {"customer": customer, "other_customer": other, "product": product}


# --- Module Notes -----------------------------------------------------------
# The in-memory engine uses StaticPool, so sessions opened one after another see the same data.
