"""
shop_orders.domain

Domain layer: entities, domain services, errors and repository contracts.

Responsibilities:
- Hold business invariants independent of any persistence technology.
"""

# Package marker; import from submodules.


# --- Module Notes -----------------------------------------------------------
# Nothing under `domain` imports SQLAlchemy.
