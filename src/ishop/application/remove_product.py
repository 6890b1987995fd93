"""Application service: Remove Product use case."""

from __future__ import annotations

from ishop.domain.model.inventory import Inventory


class RemoveProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, product_id: str) -> bool:
        """Remove the product; False if no product had that ID.

        Orders that already reference the product keep their line items
        (they hold the product id and name, not the product itself).
        """
        return self._inventory.remove(product_id)
