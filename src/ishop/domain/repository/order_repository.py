"""Abstract repository for the order history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ishop.domain.model.order import Order

if TYPE_CHECKING:
    from ishop.domain.model.inventory import Inventory


class OrderRepository(ABC):

    @abstractmethod
    def save_all(self, orders: list[Order]) -> None:
        """Overwrite the stored order history with *orders*, in order."""

    @abstractmethod
    def load_all(self, inventory: Inventory) -> list[Order] | None:
        """Return the stored orders, or None if there is nothing to load.

        Line items are re-linked against *inventory*; items whose
        product is not in it are dropped.
        """
