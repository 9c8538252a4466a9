"""
shop_orders.domain.entities.order

Order aggregate (Order + OrderItem).

Responsibilities:
- Own the ordered list of items; an order is never empty.
- Derive the order total from item subtotals.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop_orders.domain.exceptions import ValidationError


@dataclass
class OrderItem:
    id: str
    name: str
    # Unit price captured when the item was added to the order.
    price: float
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Id is required")
        if not self.product_id:
            raise ValidationError("ProductId is required")
        if self.price < 0:
            raise ValidationError("Price must be greater than or equal to zero")
        if self.quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")

    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class Order:
    id: str
    customer_id: str
    items: list[OrderItem]

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Id is required")
        if not self.customer_id:
            raise ValidationError("CustomerId is required")
        if not self.items:
            raise ValidationError("Items are required")
        ids = [item.id for item in self.items]
        if len(set(ids)) != len(ids):
            raise ValidationError("Item ids must be unique within an order")
        # Copy so callers cannot mutate the aggregate through their own list.
        self.items = list(self.items)

    def total(self) -> float:
        return sum(item.subtotal() for item in self.items)

    def change_customer(self, customer_id: str) -> None:
        if not customer_id:
            raise ValidationError("CustomerId is required")
        self.customer_id = customer_id

    def add_item(self, item: OrderItem) -> None:
        if any(existing.id == item.id for existing in self.items):
            raise ValidationError(f"Item {item.id} already belongs to this order")
        self.items.append(item)


# --- Module Notes -----------------------------------------------------------
# Items are an ordered list: persistence must hand them back in insertion order
# for a reloaded aggregate to compare equal to the original.
