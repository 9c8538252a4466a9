"""
shop_orders.db.models

Relational schema for the order-management domain.

Responsibilities:
- Define ORM models for the four tables:
  - customers: customer with its address embedded as columns
  - products: catalog entries
  - orders: order header with denormalized total
  - order_items: line items owned by an order
"""

from __future__ import annotations

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shop_orders.db.base import Base


class CustomerModel(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)

    # Address columns are all NULL for a customer without an address.
    street: Mapped[str | None] = mapped_column(String(256), nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    zip: Mapped[str | None] = mapped_column(String(32), nullable=True)
    city: Mapped[str | None] = mapped_column(String(128), nullable=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    orders: Mapped[list[OrderModel]] = relationship(back_populates="customer")


class ProductModel(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)


class OrderModel(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    customer_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("customers.id"), nullable=False, index=True
    )
    total: Mapped[float] = mapped_column(Float, nullable=False)

    customer: Mapped[CustomerModel] = relationship(back_populates="orders")
    items: Mapped[list[OrderItemModel]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    product_id: Mapped[str] = mapped_column(String(64), ForeignKey("products.id"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    # Index of the item within its order; reloads follow it.
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    order_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("orders.id"), nullable=False, index=True
    )

    order: Mapped[OrderModel] = relationship(back_populates="items")


# --- Module Notes -----------------------------------------------------------
# `orders.total` is written from `Order.total()` on create/update and never read
# back; the aggregate always recomputes it from its items.
