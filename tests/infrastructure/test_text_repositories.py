"""File-level tests for the text product and order repositories."""

import logging
from datetime import datetime, timezone

import pytest

from ishop.domain.exceptions import FileIOError
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order_book import OrderBook
from ishop.domain.model.product import Accessory, Clothing, Stationery
from ishop.domain.model.value_objects import Money
from ishop.infrastructure.persistence.text_order_repository import TextOrderRepository
from ishop.infrastructure.persistence.text_product_repository import TextProductRepository


def _catalog() -> Inventory:
    return Inventory(products=[
        Clothing(id="C1", name="Hoodie", price=Money.of("2500"), stock=5,
                 size="L", color="Navy", material="Fleece"),
        Stationery(id="S1", name="Notebook", price=Money.of("150.75"), stock=40,
                   brand="Moleskine", item_type="Ruled"),
        Accessory(id="A1", name="Power Bank", price=Money.of("3000"), stock=2,
                  is_electronic=True, accessory_type="Charger"),
        Accessory(id="A2", name="Lanyard", price=Money.of("99.99"), stock=100,
                  is_electronic=False, accessory_type="Badge"),
    ])


class TestTextProductRepository:

    def test_save_then_load_into_fresh_inventory(self, tmp_path):
        repo = TextProductRepository(tmp_path / "products.txt")
        original = _catalog()
        original.save_to(repo)

        fresh = Inventory()
        assert fresh.load_from(repo) is True
        assert fresh.products == original.products
        assert fresh.product_count == 4

    def test_file_has_one_line_per_product(self, tmp_path):
        path = tmp_path / "products.txt"
        _catalog().save_to(TextProductRepository(path))
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "Clothing,C1,Hoodie,2500,5,L,Navy,Fleece"
        assert lines[3] == "Accessory,A2,Lanyard,99.99,100,0,Badge"
        assert len(lines) == 4

    def test_save_load_save_is_byte_identical(self, tmp_path):
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        _catalog().save_to(TextProductRepository(first))

        reloaded = Inventory()
        reloaded.load_from(TextProductRepository(first))
        reloaded.save_to(TextProductRepository(second))

        assert first.read_bytes() == second.read_bytes()

    @pytest.mark.parametrize(
        "separator",
        ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028", "\u2029"],
        ids=["vt", "ff", "fs", "rs", "nel", "ls", "ps"],
    )
    def test_unicode_line_separators_survive_reload(self, tmp_path, separator):
        original = Inventory(products=[
            Stationery(id="S1", name=f"Pen{separator}Blue", price=Money.of("10"), stock=3,
                       brand=f"Bic{separator}Co", item_type="Ballpoint"),
            Stationery(id="S2", name="Ruler", price=Money.of("5"), stock=8),
        ])
        repo = TextProductRepository(tmp_path / "products.txt")
        original.save_to(repo)

        fresh = Inventory()
        assert fresh.load_from(repo) is True
        assert fresh.products == original.products

    def test_save_overwrites(self, tmp_path):
        path = tmp_path / "products.txt"
        path.write_text("stale\nstale\nstale\n", encoding="utf-8")
        Inventory(products=[Stationery(id="S1", name="Pen", price="1")]).save_to(
            TextProductRepository(path)
        )
        assert path.read_text(encoding="utf-8") == "Stationery,S1,Pen,1,0,,\n"

    def test_missing_file_loads_nothing(self, tmp_path):
        inv = _catalog()
        assert inv.load_from(TextProductRepository(tmp_path / "absent.txt")) is False
        assert len(inv) == 4

    def test_empty_file_clears_inventory(self, tmp_path):
        path = tmp_path / "products.txt"
        path.write_text("", encoding="utf-8")
        inv = _catalog()
        assert inv.load_from(TextProductRepository(path)) is True
        assert len(inv) == 0

    def test_malformed_and_blank_lines_skipped(self, tmp_path, caplog):
        path = tmp_path / "products.txt"
        path.write_text(
            "Stationery,S1,Pen,10,3,Bic,Ballpoint\n"
            "\n"
            "Clothing,C1,Shirt\n"
            "Gadget,G1,Phone,1,1,x,y\n"
            "Stationery,S2,Ruler,abc,1,Acme,Steel\n"
            "Accessory,A1,Mug,7,1,0,Kitchen\n",
            encoding="utf-8",
        )
        with caplog.at_level(logging.DEBUG):
            products = TextProductRepository(path).load_all()
        assert [p.id for p in products] == ["S1", "A1"]
        assert "Skipping malformed product line 3" in caplog.text

    def test_save_to_unwritable_location_raises(self, tmp_path):
        repo = TextProductRepository(tmp_path / "no-such-dir" / "products.txt")
        with pytest.raises(FileIOError, match="File operation failed: save on") as exc_info:
            repo.save_all(_catalog().products)
        assert exc_info.value.operation == "save"


class TestTextOrderRepository:

    def _book(self, inventory: Inventory) -> OrderBook:
        book = OrderBook()
        first = book.create_order("Alice")
        first.created_at = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
        first.add_item(inventory.find("C1"), 2)
        first.add_item(inventory.find("A2"), 10)
        book.append(first)

        second = book.create_order("")
        second.created_at = datetime(2024, 3, 2, tzinfo=timezone.utc)
        book.append(second)
        return book

    def test_save_then_load_relinks_items(self, tmp_path):
        inventory = _catalog()
        book = self._book(inventory)
        repo = TextOrderRepository(tmp_path / "orders.txt")
        book.save_to(repo)

        fresh = OrderBook()
        assert fresh.load_from(repo, inventory) is True
        loaded = fresh.orders
        assert [o.id for o in loaded] == [1001, 1002]
        assert loaded[0].customer_name == "Alice"
        assert [i.product_name for i in loaded[0].items] == ["Hoodie", "Lanyard"]
        assert loaded[0].total_amount == Money.of("5999.90")
        assert loaded[0].created_at == datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
        assert loaded[1].items == []

    def test_save_load_save_is_byte_identical(self, tmp_path):
        inventory = _catalog()
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        self._book(inventory).save_to(TextOrderRepository(first))

        reloaded = OrderBook()
        reloaded.load_from(TextOrderRepository(first), inventory)
        reloaded.save_to(TextOrderRepository(second))

        assert first.read_bytes() == second.read_bytes()

    @pytest.mark.parametrize("separator", ["\x0c", "\x1c", "\x85", "\u2028"])
    def test_customer_name_with_unicode_separator_survives_reload(self, tmp_path, separator):
        inventory = _catalog()
        book = OrderBook()
        order = book.create_order(f"Ann{separator}Lee")
        order.add_item(inventory.find("S1"), 1)
        book.append(order)
        repo = TextOrderRepository(tmp_path / "orders.txt")
        book.save_to(repo)

        loaded = repo.load_all(inventory)
        assert len(loaded) == 1
        assert loaded[0].customer_name == f"Ann{separator}Lee"
        assert [i.product_id for i in loaded[0].items] == ["S1"]

    def test_load_advances_order_ids(self, tmp_path):
        path = tmp_path / "orders.txt"
        path.write_text("1500,Zed,0,1704067200,0\n1020,Amy,0,1704067200,0\n", encoding="utf-8")
        book = OrderBook()
        book.load_from(TextOrderRepository(path), Inventory())
        assert book.create_order().id >= 1501

    def test_item_for_removed_product_dropped(self, tmp_path):
        inventory = _catalog()
        repo = TextOrderRepository(tmp_path / "orders.txt")
        self._book(inventory).save_to(repo)
        inventory.remove("C1")

        loaded = repo.load_all(inventory)
        assert [i.product_id for i in loaded[0].items] == ["A2"]
        assert loaded[0].total_amount == Money.of("5999.90")
        assert loaded[0].items_total == Money.of("999.90")

    def test_missing_file_leaves_book_untouched(self, tmp_path):
        book = OrderBook()
        book.append(book.create_order("Kept"))
        assert book.load_from(TextOrderRepository(tmp_path / "absent.txt"), Inventory()) is False
        assert len(book) == 1

    def test_empty_file_clears_book(self, tmp_path):
        path = tmp_path / "orders.txt"
        path.write_text("", encoding="utf-8")
        book = OrderBook()
        book.append(book.create_order("Dropped"))
        assert book.load_from(TextOrderRepository(path), Inventory()) is True
        assert len(book) == 0

    def test_malformed_lines_skipped(self, tmp_path):
        path = tmp_path / "orders.txt"
        path.write_text("garbage\n1001,Alice,0,1704067200,0\n\n1,2,3\n", encoding="utf-8")
        loaded = TextOrderRepository(path).load_all(Inventory())
        assert [o.id for o in loaded] == [1001]

    def test_save_to_unwritable_location_raises(self, tmp_path):
        repo = TextOrderRepository(tmp_path / "no-such-dir" / "orders.txt")
        with pytest.raises(FileIOError, match="save on"):
            repo.save_all([])
