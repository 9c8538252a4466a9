"""
shop_orders.domain.entities.product

Product entity.

Responsibilities:
- Enforce id/name invariants and a non-negative price.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop_orders.domain.exceptions import ValidationError


@dataclass
class Product:
    """A catalog product. Price changes never touch existing orders; items keep a snapshot."""

    id: str
    name: str
    price: float

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Id is required")
        if not self.name:
            raise ValidationError("Name is required")
        if self.price < 0:
            raise ValidationError("Price must be greater than or equal to zero")

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Name is required")
        self.name = name

    def change_price(self, price: float) -> None:
        if price < 0:
            raise ValidationError("Price must be greater than or equal to zero")
        self.price = price


# --- Module Notes -----------------------------------------------------------
# `OrderItem.price` is a snapshot of `Product.price` taken when the order is built.
