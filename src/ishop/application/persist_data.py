"""Application services: Save Data and Load Data use cases.

Products are always handled before orders: loading orders needs the
freshly loaded inventory to re-link their line items.
"""

from __future__ import annotations

import logging

from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order_book import OrderBook
from ishop.domain.repository.order_repository import OrderRepository
from ishop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SaveDataHandler:

    def __init__(
        self,
        inventory: Inventory,
        order_book: OrderBook,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._inventory = inventory
        self._order_book = order_book
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self) -> None:
        """Overwrite both data files.  FileIOError propagates."""
        self._inventory.save_to(self._product_repo)
        self._order_book.save_to(self._order_repo)


class LoadDataHandler:

    def __init__(
        self,
        inventory: Inventory,
        order_book: OrderBook,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._inventory = inventory
        self._order_book = order_book
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self) -> None:
        """Replace in-memory state with what is stored.

        A missing data file leaves the matching in-memory state alone.
        """
        if not self._inventory.load_from(self._product_repo):
            logger.debug("Product data not found; keeping current inventory")
        if not self._order_book.load_from(self._order_repo, self._inventory):
            logger.debug("Order data not found; keeping current order book")
