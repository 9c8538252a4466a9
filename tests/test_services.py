"""
tests.test_services

Domain services: order totals, price increases, order placement.
"""

from __future__ import annotations

import pytest

from shop_orders.domain.entities import Address, Customer, Order, OrderItem, Product
from shop_orders.domain.exceptions import ValidationError
from shop_orders.domain.services import increase_prices, place_order, total_of


def test_total_of_orders() -> None:
    orders = [
        Order("o1", "c1", [OrderItem("1", "Item 1", 100, "p1", 1)]),
        Order("o2", "c1", [OrderItem("2", "Item 2", 200, "p1", 2)]),
    ]
    assert total_of(orders) == 500
    assert total_of([]) == 0


def test_increase_prices_by_percentage() -> None:
    products = [Product("p1", "Product 1", 10), Product("p2", "Product 2", 20)]

    increase_prices(products, 100)

    assert [p.price for p in products] == [20, 40]
    assert increase_prices([Product("p3", "Product 3", 10)], 10)[0].price == pytest.approx(11)


def test_place_order_for_active_customer() -> None:
    customer = Customer("c1", "Customer 1", address=Address("Street", 1, "zip", "City"))
    customer.activate()
    item = OrderItem("1", "Item 1", 10, "p1", 1)

    order = place_order(customer, [item])

    assert order.customer_id == "c1"
    assert order.items == [item]
    assert order.id


def test_place_order_rejects_inactive_customer_and_empty_items() -> None:
    customer = Customer("c1", "Customer 1")
    with pytest.raises(ValidationError, match="at least one item"):
        place_order(customer, [])
    with pytest.raises(ValidationError, match="active"):
        place_order(customer, [OrderItem("1", "Item 1", 10, "p1", 1)])


# --- Module Notes -----------------------------------------------------------
# Services are pure functions over entities; nothing here touches the database.
