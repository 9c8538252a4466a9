"""
shop_orders.db.repositories

SQLAlchemy implementations of the domain repository contracts.
"""

from shop_orders.db.repositories.customers import CustomerRepository
from shop_orders.db.repositories.orders import OrderRepository
from shop_orders.db.repositories.products import ProductRepository

__all__ = ["CustomerRepository", "OrderRepository", "ProductRepository"]


# --- Module Notes -----------------------------------------------------------
# Repositories only flush. Commit/rollback belongs to whoever opened the session
# (see `shop_orders.db.session.session_scope`).
