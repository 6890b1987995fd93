"""Unit tests for the OrderBook and its order id sequence."""

from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order import Order
from ishop.domain.model.order_book import FIRST_ORDER_ID, OrderBook, OrderIdSequence
from tests.fakes import FakeOrderRepository


class TestOrderIdSequence:

    def test_first_id(self):
        assert OrderIdSequence().next_id() == FIRST_ORDER_ID == 1001

    def test_ids_strictly_increase(self):
        seq = OrderIdSequence()
        first, second = seq.next_id(), seq.next_id()
        assert second > first

    def test_advance_moves_forward_only(self):
        seq = OrderIdSequence()
        seq.advance_to(1500)
        seq.advance_to(1200)
        assert seq.next_id() == 1501


class TestOrderBook:

    def test_create_does_not_append(self):
        book = OrderBook()
        book.create_order("Alice")
        assert len(book) == 0

    def test_two_orders_get_distinct_increasing_ids(self):
        book = OrderBook()
        a = book.create_order("Alice")
        b = book.create_order("Bob")
        assert b.id > a.id

    def test_append_and_find(self):
        book = OrderBook()
        order = book.create_order("Alice")
        book.append(order)
        assert book.find(order.id) is order
        assert book.find(9999) is None

    def test_append_external_order_advances_sequence(self):
        book = OrderBook()
        book.append(Order.create(2000, "Imported"))
        assert book.create_order().id == 2001


class TestOrderBookPersistence:

    def test_save_writes_all_orders(self):
        book = OrderBook()
        book.append(book.create_order("Alice"))
        book.append(book.create_order("Bob"))
        repo = FakeOrderRepository()
        book.save_to(repo)
        assert [o.customer_name for o in repo.load_all(Inventory())] == ["Alice", "Bob"]

    def test_load_replaces_orders_and_advances_ids(self):
        repo = FakeOrderRepository([Order.create(1500, "Old"), Order.create(1200, "Older")])
        book = OrderBook()
        book.append(book.create_order("Current"))

        assert book.load_from(repo, Inventory()) is True

        assert [o.id for o in book] == [1500, 1200]
        assert book.create_order().id >= 1501

    def test_load_passes_inventory_to_repository(self):
        inventory = Inventory()
        repo = FakeOrderRepository([])
        OrderBook().load_from(repo, inventory)
        assert repo.last_inventory is inventory

    def test_load_with_nothing_stored_leaves_book_untouched(self):
        book = OrderBook()
        book.append(book.create_order("Current"))
        assert book.load_from(FakeOrderRepository(), Inventory()) is False
        assert [o.customer_name for o in book] == ["Current"]
