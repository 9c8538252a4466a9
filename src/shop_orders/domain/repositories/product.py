"""
shop_orders.domain.repositories.product

Persistence contract for `Product`.
"""

from __future__ import annotations

from shop_orders.domain.entities import Product
from shop_orders.domain.repositories.base import RepositoryInterface


class ProductRepositoryInterface(RepositoryInterface[Product]):
    pass


# --- Module Notes -----------------------------------------------------------
# Implemented by `shop_orders.db.repositories.products.ProductRepository`.
