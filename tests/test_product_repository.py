"""
tests.test_product_repository

Product persistence: create, update of name/price, lookup and listing.
"""

from __future__ import annotations

import pytest

from shop_orders.db.repositories import ProductRepository
from shop_orders.db.session import session_scope
from shop_orders.domain.entities import Product
from shop_orders.domain.exceptions import ProductNotFoundError


@pytest.mark.asyncio
async def test_create_and_find(session_factory) -> None:
    product = Product("1", "Product 1", 100)
    async with session_scope(session_factory) as session:
        await ProductRepository(session).create(product)

    async with session_factory() as session:
        assert await ProductRepository(session).find("1") == product


@pytest.mark.asyncio
async def test_update(session_factory) -> None:
    product = Product("1", "Product 1", 100)
    async with session_scope(session_factory) as session:
        await ProductRepository(session).create(product)

    product.change_name("Product 2")
    product.change_price(200)
    async with session_scope(session_factory) as session:
        await ProductRepository(session).update(product)

    async with session_factory() as session:
        found = await ProductRepository(session).find("1")

    assert (found.name, found.price) == ("Product 2", 200)


@pytest.mark.asyncio
async def test_find_unknown_id_raises_not_found(session) -> None:
    with pytest.raises(ProductNotFoundError, match="Product not found"):
        await ProductRepository(session).find("missing")


@pytest.mark.asyncio
async def test_find_all(session) -> None:
    repo = ProductRepository(session)
    assert await repo.find_all() == []

    products = [Product("1", "Product 1", 100), Product("2", "Product 2", 200)]
    for product in products:
        await repo.create(product)

    found = await repo.find_all()
    assert sorted(found, key=lambda p: p.id) == products


# --- Module Notes -----------------------------------------------------------
# Products have no foreign keys; these tests need no seed data.
