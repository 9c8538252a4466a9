"""
shop_orders.domain.services

Stateless domain services operating on several entities at once.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence

from shop_orders.domain.entities import Customer, Order, OrderItem, Product
from shop_orders.domain.exceptions import ValidationError


def total_of(orders: Iterable[Order]) -> float:
    return sum(order.total() for order in orders)


def increase_prices(products: Iterable[Product], percentage: float) -> list[Product]:
    """
    Raise every product price by `percentage` percent (in place) and return the products.
    """

    updated = []
    for product in products:
        product.change_price(product.price * (1 + percentage / 100))
        updated.append(product)
    return updated


def place_order(customer: Customer, items: Sequence[OrderItem]) -> Order:
    """
    Build a new order for an active customer with a generated id.
    """

    if not items:
        raise ValidationError("Order must have at least one item")
    if not customer.is_active:
        raise ValidationError("Customer must be active to place an order")
    return Order(id=str(uuid.uuid4()), customer_id=customer.id, items=list(items))


# --- Module Notes -----------------------------------------------------------
# `place_order` does not persist; hand the result to `OrderRepository.create`.
