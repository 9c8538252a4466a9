"""
shop_orders

Customers, products and orders persisted through async SQLAlchemy repositories.

Responsibilities:
- Expose package version metadata.

Layout: `domain` holds entities and repository contracts, `db` implements them.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep imports out of this file so `import shop_orders` stays side-effect free.
