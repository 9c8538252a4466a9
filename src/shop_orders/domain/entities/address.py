"""
shop_orders.domain.entities.address

Address value object, embedded in `Customer`.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop_orders.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer; compared by value."""

    street: str
    number: int
    zip: str
    city: str

    def __post_init__(self) -> None:
        if not self.street:
            raise ValidationError("Street is required")
        if self.number <= 0:
            raise ValidationError("Number must be greater than zero")
        if not self.zip:
            raise ValidationError("Zip is required")
        if not self.city:
            raise ValidationError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"


# --- Module Notes -----------------------------------------------------------
# Frozen: a customer moves by receiving a new `Address`, never by mutating one.
