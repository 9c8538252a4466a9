"""
shop_orders.domain.repositories.order

Persistence contract for the `Order` aggregate.
"""

from __future__ import annotations

from shop_orders.domain.entities import Order
from shop_orders.domain.repositories.base import RepositoryInterface


class OrderRepositoryInterface(RepositoryInterface[Order]):
    """
    Orders are stored with their items. `update` only rewrites order-level columns
    (customer, total); item rows written by `create` stay as they are.
    """


# --- Module Notes -----------------------------------------------------------
# Implemented by `shop_orders.db.repositories.orders.OrderRepository`.
