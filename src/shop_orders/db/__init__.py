"""
shop_orders.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and repository implementations.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing outside this package imports SQLAlchemy models; the domain layer only
# sees entities and the repository contracts in `shop_orders.domain.repositories`.
