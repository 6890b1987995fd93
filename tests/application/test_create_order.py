"""Integration tests for the CreateOrder use case.

Uses in-memory state only — no file I/O.
"""

import pytest

from ishop.application.create_order import CreateOrderHandler
from ishop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    InvalidArgumentError,
    ValidationError,
)
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order_book import OrderBook
from ishop.domain.model.product import Clothing, Stationery
from ishop.domain.model.value_objects import Money


def _setup() -> tuple[CreateOrderHandler, OrderBook, Inventory]:
    inventory = Inventory(products=[
        Clothing(id="C1", name="Shirt", price=Money.of("20"), stock=5),
        Stationery(id="S1", name="Pen", price=Money.of("2.50"), stock=100),
    ])
    book = OrderBook()
    return CreateOrderHandler(book, inventory), book, inventory


class TestCreateOrderHappyPath:

    def test_builds_and_records_order(self):
        handler, book, inventory = _setup()
        builder = handler.handle("Alice")
        builder.add_item("C1", 3)
        builder.add_item("S1", 4)
        order = builder.finalize()

        assert order.total_amount == Money.of("70")
        assert inventory.find("C1").stock == 2
        assert inventory.find("S1").stock == 96
        assert book.find(order.id) is order

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        first = handler.handle("Alice").finalize()
        second = handler.handle("Bob").finalize()
        assert second.id == first.id + 1

    def test_empty_order_is_still_recorded(self):
        handler, book, _ = _setup()
        order = handler.handle("").finalize()
        assert order.items == []
        assert len(book) == 1

    def test_order_not_in_book_until_finalized(self):
        handler, book, _ = _setup()
        builder = handler.handle("Alice")
        builder.add_item("C1", 1)
        assert len(book) == 0


class TestCreateOrderFailures:

    def test_unknown_product(self):
        handler, _, _ = _setup()
        builder = handler.handle("Alice")
        with pytest.raises(EntityNotFoundError, match="'X9' not found"):
            builder.add_item("X9", 1)

    def test_insufficient_stock_leaves_order_unchanged(self):
        handler, _, inventory = _setup()
        builder = handler.handle("Alice")
        builder.add_item("C1", 3)
        with pytest.raises(InsufficientStockError) as exc_info:
            builder.add_item("C1", 5)
        assert exc_info.value.available == 2
        assert builder.order.total_amount == Money.of("60")
        assert len(builder.order.items) == 1
        assert inventory.find("C1").stock == 2

    def test_failed_item_does_not_abandon_order(self):
        handler, _, _ = _setup()
        builder = handler.handle("Alice")
        with pytest.raises(InvalidArgumentError):
            builder.add_item("S1", 0)
        builder.add_item("S1", 2)
        assert builder.finalize().total_amount == Money.of("5.00")

    def test_cannot_finalize_twice(self):
        handler, book, _ = _setup()
        builder = handler.handle("Alice")
        builder.finalize()
        with pytest.raises(ValidationError, match="already finalized"):
            builder.finalize()
        assert len(book) == 1

    def test_cannot_add_after_finalize(self):
        handler, _, _ = _setup()
        builder = handler.handle("Alice")
        builder.finalize()
        with pytest.raises(ValidationError, match="already finalized"):
            builder.add_item("C1", 1)

    def test_customer_name_with_comma_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="must not contain commas"):
            handler.handle("Smith, John")

    @pytest.mark.parametrize("name", ["Ann\rLee", "Ann\nLee", "Ann\r\nLee"])
    def test_customer_name_with_line_break_rejected(self, name):
        handler, book, _ = _setup()
        with pytest.raises(ValidationError, match="must not contain commas or line breaks"):
            handler.handle(name)
        assert book.orders == []
