"""
shop_orders.domain.entities

Domain entities and value objects.
"""

from shop_orders.domain.entities.address import Address
from shop_orders.domain.entities.customer import Customer
from shop_orders.domain.entities.order import Order, OrderItem
from shop_orders.domain.entities.product import Product

__all__ = ["Address", "Customer", "Order", "OrderItem", "Product"]


# --- Module Notes -----------------------------------------------------------
# Re-exports only; each entity lives in its own submodule.
