"""
shop_orders.domain.entities.customer

Customer entity.

Responsibilities:
- Enforce identity/name invariants.
- Guard activation: a customer can only be active with an address on file.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop_orders.domain.entities.address import Address
from shop_orders.domain.exceptions import ValidationError


@dataclass
class Customer:
    id: str
    name: str
    address: Address | None = None
    active: bool = False

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not self.id:
            raise ValidationError("Id is required")
        if not self.name:
            raise ValidationError("Name is required")
        if self.active and self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")

    @property
    def is_active(self) -> bool:
        return self.active

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        if address is None:
            raise ValidationError("Address is required")
        self.address = address

    def activate(self) -> None:
        if self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False


# --- Module Notes -----------------------------------------------------------
# `active` and `address` are re-checked together: an active customer always has one.
