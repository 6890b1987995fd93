"""Flat-text implementation of OrderRepository (one order per line)."""

from __future__ import annotations

import logging
from pathlib import Path

from ishop.domain.exceptions import FileIOError
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order import Order
from ishop.domain.repository.order_repository import OrderRepository
from ishop.infrastructure.persistence.codec import decode_order, encode_order

logger = logging.getLogger(__name__)


class TextOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- OrderRepository interface --------------------------------------------

    def save_all(self, orders: list[Order]) -> None:
        try:
            with self._file_path.open("w", encoding="utf-8", newline="\n") as fh:
                for order in orders:
                    fh.write(encode_order(order) + "\n")
        except OSError as exc:
            raise FileIOError(str(self._file_path), "save") from exc
        logger.info("Saved %d orders to %s", len(orders), self._file_path)

    def load_all(self, inventory: Inventory) -> list[Order] | None:
        try:
            with self._file_path.open("r", encoding="utf-8", newline="\n") as fh:
                lines = fh.read().split("\n")
        except OSError:
            logger.debug("No order file at %s, nothing to load", self._file_path)
            return None

        orders: list[Order] = []
        for lineno, line in enumerate(lines, start=1):
            if not line:
                continue
            order = decode_order(line, inventory)
            if order is None:
                logger.debug("Skipping malformed order line %d in %s", lineno, self._file_path)
                continue
            orders.append(order)

        logger.info("Loaded %d orders from %s", len(orders), self._file_path)
        return orders
