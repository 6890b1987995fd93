"""Application service: Create Order use case.

Orchestrates the flow between the inventory and the order book.  The
operator adds items one at a time; a rejected item does not abandon the
order, and ``finalize()`` records whatever was added.
"""

from __future__ import annotations

from ishop.application.field_rules import check_text
from ishop.domain.exceptions import EntityNotFoundError, ValidationError
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order import Order, OrderItem
from ishop.domain.model.order_book import OrderBook


class OrderBuilder:
    """An order under construction.

    Stock is reserved as each item is added, not at ``finalize()``.
    """

    def __init__(self, order: Order, inventory: Inventory, order_book: OrderBook) -> None:
        self._order = order
        self._inventory = inventory
        self._order_book = order_book
        self._finalized = False

    @property
    def order(self) -> Order:
        return self._order

    def add_item(self, product_id: str, quantity: int) -> OrderItem:
        """Resolve *product_id* and add it to the order.

        Raises EntityNotFoundError for an unknown product, and lets
        InvalidArgumentError / InsufficientStockError from the order
        propagate unchanged.
        """
        if self._finalized:
            raise ValidationError(f"Order #{self._order.id} is already finalized")

        product = self._inventory.find(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        return self._order.add_item(product, quantity)

    def finalize(self) -> Order:
        """Append the order to the order book and return it."""
        if self._finalized:
            raise ValidationError(f"Order #{self._order.id} is already finalized")
        self._order_book.append(self._order)
        self._finalized = True
        return self._order


class CreateOrderHandler:

    def __init__(self, order_book: OrderBook, inventory: Inventory) -> None:
        self._order_book = order_book
        self._inventory = inventory

    def handle(self, customer_name: str = "") -> OrderBuilder:
        """Start a new order for *customer_name* (may be empty)."""
        check_text("Customer name", customer_name)
        order = self._order_book.create_order(customer_name.strip())
        return OrderBuilder(order, self._inventory, self._order_book)
