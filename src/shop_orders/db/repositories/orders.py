"""
shop_orders.db.repositories.orders

Repository for the `Order` aggregate.

Responsibilities:
- Write an order and its items as one composite insert.
- Update scalar order columns by id.
- Rebuild `Order`/`OrderItem` entities from rows on read.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from shop_orders.db.models import OrderItemModel, OrderModel
from shop_orders.domain.entities import Order, OrderItem
from shop_orders.domain.exceptions import OrderNotFoundError
from shop_orders.domain.repositories import OrderRepositoryInterface
from shop_orders.observability.logging import get_logger

log = get_logger(__name__)


class OrderRepository(OrderRepositoryInterface):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, entity: Order) -> None:
        model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
            items=[_item_to_model(item, n) for n, item in enumerate(entity.items)],
        )
        self._session.add(model)
        # Items cascade from the order; one flush writes the whole aggregate.
        await self._session.flush()
        log.info("order_created", order_id=entity.id, items=len(entity.items))

    async def update(self, entity: Order) -> None:
        # Item rows are left as stored: nothing is inserted, replaced or deleted.
        stmt = (
            update(OrderModel)
            .where(OrderModel.id == entity.id)
            .values(customer_id=entity.customer_id, total=entity.total())
        )
        await self._session.execute(stmt)
        log.info("order_updated", order_id=entity.id)

    async def find(self, id: str) -> Order:
        stmt = (
            select(OrderModel)
            .where(OrderModel.id == id)
            .options(selectinload(OrderModel.items))
        )
        try:
            model = (await self._session.execute(stmt)).scalar_one()
        except NoResultFound as exc:
            log.info("order_not_found", order_id=id)
            raise OrderNotFoundError() from exc
        return _to_entity(model)

    async def find_all(self) -> list[Order]:
        stmt = select(OrderModel).options(selectinload(OrderModel.items))
        models = (await self._session.execute(stmt)).scalars().all()
        return [_to_entity(model) for model in models]


def _item_to_model(item: OrderItem, position: int) -> OrderItemModel:
    return OrderItemModel(
        id=item.id,
        name=item.name,
        price=item.price,
        product_id=item.product_id,
        quantity=item.quantity,
        position=position,
    )


def _to_entity(model: OrderModel) -> Order:
    items = [
        OrderItem(
            id=row.id,
            name=row.name,
            price=row.price,
            product_id=row.product_id,
            quantity=row.quantity,
        )
        for row in model.items
    ]
    return Order(id=model.id, customer_id=model.customer_id, items=items)


# --- Module Notes -----------------------------------------------------------
# `OrderItemModel.position` is written from list order on create and drives the
# relationship ORDER BY, so a reloaded aggregate compares equal to the original.
# `_to_entity` goes through the `Order` constructor: a stored order without item
# rows fails validation on read instead of producing an empty aggregate.
