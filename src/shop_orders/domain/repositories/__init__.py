"""
shop_orders.domain.repositories

Abstract repository contracts, one per aggregate.
"""

from shop_orders.domain.repositories.base import RepositoryInterface
from shop_orders.domain.repositories.customer import CustomerRepositoryInterface
from shop_orders.domain.repositories.order import OrderRepositoryInterface
from shop_orders.domain.repositories.product import ProductRepositoryInterface

__all__ = [
    "CustomerRepositoryInterface",
    "OrderRepositoryInterface",
    "ProductRepositoryInterface",
    "RepositoryInterface",
]


# --- Module Notes -----------------------------------------------------------
# Re-exports only; contracts live in their per-aggregate submodules.
