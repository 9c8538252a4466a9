"""
shop_orders.domain.repositories.customer

Persistence contract for `Customer`.
"""

from __future__ import annotations

from shop_orders.domain.entities import Customer
from shop_orders.domain.repositories.base import RepositoryInterface


class CustomerRepositoryInterface(RepositoryInterface[Customer]):
    pass


# --- Module Notes -----------------------------------------------------------
# Implemented by `shop_orders.db.repositories.customers.CustomerRepository`.
