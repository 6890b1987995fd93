"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ishop.application.persist_data import LoadDataHandler, SaveDataHandler
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order_book import OrderBook
from ishop.infrastructure.persistence.text_order_repository import TextOrderRepository
from ishop.infrastructure.persistence.text_product_repository import TextProductRepository

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

PRODUCTS_FILE = "products.txt"
ORDERS_FILE = "orders.txt"
INVENTORY_NAME = "iShop - IBA Karachi"


def default_data_dir() -> Path:
    return _DATA_DIR


def product_repository(data_dir: Path | None = None) -> TextProductRepository:
    return TextProductRepository((data_dir or _DATA_DIR) / PRODUCTS_FILE)


def order_repository(data_dir: Path | None = None) -> TextOrderRepository:
    return TextOrderRepository((data_dir or _DATA_DIR) / ORDERS_FILE)


@dataclass
class ShopSession:
    """In-memory state of one run plus the files it persists to."""

    inventory: Inventory
    order_book: OrderBook
    product_repo: TextProductRepository
    order_repo: TextOrderRepository

    def load(self) -> None:
        LoadDataHandler(
            self.inventory, self.order_book, self.product_repo, self.order_repo
        ).handle()

    def save(self) -> None:
        SaveDataHandler(
            self.inventory, self.order_book, self.product_repo, self.order_repo
        ).handle()


def open_session(data_dir: Path | None = None) -> ShopSession:
    """Build a session on *data_dir* and load whatever is stored there."""
    data_dir = data_dir or _DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)

    session = ShopSession(
        inventory=Inventory(INVENTORY_NAME),
        order_book=OrderBook(),
        product_repo=product_repository(data_dir),
        order_repo=order_repository(data_dir),
    )
    session.load()
    return session
