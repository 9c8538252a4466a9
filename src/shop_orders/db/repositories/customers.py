"""
shop_orders.db.repositories.customers

Repository for `Customer` entities (address stored inline on the row).
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from shop_orders.db.models import CustomerModel
from shop_orders.domain.entities import Address, Customer
from shop_orders.domain.exceptions import CustomerNotFoundError
from shop_orders.domain.repositories import CustomerRepositoryInterface
from shop_orders.observability.logging import get_logger

log = get_logger(__name__)


class CustomerRepository(CustomerRepositoryInterface):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, entity: Customer) -> None:
        self._session.add(CustomerModel(id=entity.id, **_columns(entity)))
        await self._session.flush()
        log.info("customer_created", customer_id=entity.id)

    async def update(self, entity: Customer) -> None:
        stmt = (
            update(CustomerModel)
            .where(CustomerModel.id == entity.id)
            .values(**_columns(entity))
        )
        await self._session.execute(stmt)
        log.info("customer_updated", customer_id=entity.id)

    async def find(self, id: str) -> Customer:
        stmt = select(CustomerModel).where(CustomerModel.id == id)
        try:
            model = (await self._session.execute(stmt)).scalar_one()
        except NoResultFound as exc:
            log.info("customer_not_found", customer_id=id)
            raise CustomerNotFoundError() from exc
        return _to_entity(model)

    async def find_all(self) -> list[Customer]:
        models = (await self._session.execute(select(CustomerModel))).scalars().all()
        return [_to_entity(model) for model in models]


def _columns(entity: Customer) -> dict:
    address = entity.address
    return {
        "name": entity.name,
        "street": address.street if address else None,
        "number": address.number if address else None,
        "zip": address.zip if address else None,
        "city": address.city if address else None,
        "active": entity.active,
    }


def _to_entity(model: CustomerModel) -> Customer:
    address = None
    if model.street is not None:
        address = Address(
            street=model.street, number=model.number, zip=model.zip, city=model.city
        )
    return Customer(id=model.id, name=model.name, address=address, active=model.active)


# --- Module Notes -----------------------------------------------------------
# An address is rebuilt only when `street` is set; all four columns move together.
