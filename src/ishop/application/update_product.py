"""Application service: Update Product use case (price change, restock)."""

from __future__ import annotations

from ishop.domain.exceptions import EntityNotFoundError
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.product import Product
from ishop.domain.model.value_objects import Money


class UpdateProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        stock_delta: int | None = None,
    ) -> Product:
        """Change a product's price and/or adjust its stock.

        A price change does NOT affect existing orders; they captured a
        price snapshot when their items were added.  Either both changes
        apply or neither does.
        """
        product = self._inventory.find(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # Both checks run before anything is committed.
        price = Money.of(new_price) if new_price is not None else None
        if stock_delta is not None:
            product.update_stock(stock_delta)
        if price is not None:
            product.set_price(price)
        return product
