"""
shop_orders.db.repositories.products

Repository for `Product` entities.

Responsibilities:
- Map catalog products to/from `products` rows.
- Translate an empty lookup into `ProductNotFoundError`.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from shop_orders.db.models import ProductModel
from shop_orders.domain.entities import Product
from shop_orders.domain.exceptions import ProductNotFoundError
from shop_orders.domain.repositories import ProductRepositoryInterface
from shop_orders.observability.logging import get_logger

log = get_logger(__name__)


class ProductRepository(ProductRepositoryInterface):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, entity: Product) -> None:
        self._session.add(ProductModel(id=entity.id, name=entity.name, price=entity.price))
        await self._session.flush()
        log.info("product_created", product_id=entity.id)

    async def update(self, entity: Product) -> None:
        stmt = (
            update(ProductModel)
            .where(ProductModel.id == entity.id)
            .values(name=entity.name, price=entity.price)
        )
        await self._session.execute(stmt)
        log.info("product_updated", product_id=entity.id)

    async def find(self, id: str) -> Product:
        try:
            model = (
                await self._session.execute(select(ProductModel).where(ProductModel.id == id))
            ).scalar_one()
        except NoResultFound as exc:
            log.info("product_not_found", product_id=id)
            raise ProductNotFoundError() from exc
        return Product(id=model.id, name=model.name, price=model.price)

    async def find_all(self) -> list[Product]:
        models = (await self._session.execute(select(ProductModel))).scalars().all()
        return [Product(id=m.id, name=m.name, price=m.price) for m in models]


# --- Module Notes -----------------------------------------------------------
# Price changes never propagate to `order_items`; items keep the price they were
# ordered at.
