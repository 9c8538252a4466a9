"""
shop_orders.domain.exceptions

Domain error hierarchy.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors raised by the domain layer."""


class ValidationError(DomainError, ValueError):
    """An entity invariant was violated."""


class NotFoundError(DomainError):
    """A lookup by id matched no stored aggregate."""


class CustomerNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("Customer not found")


class ProductNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("Product not found")


class OrderNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("Order not found")


# --- Module Notes -----------------------------------------------------------
# Not-found messages are fixed strings; callers match on them.
