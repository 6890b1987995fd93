"""Application service: Apply Discount use case (price quote only)."""

from __future__ import annotations

from ishop.application.dto import DiscountQuoteDTO
from ishop.domain.exceptions import EntityNotFoundError
from ishop.domain.model.inventory import Inventory


class ApplyDiscountHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, product_id: str, discount_percent: str) -> DiscountQuoteDTO:
        """Quote the discounted price.  The stored price is not changed."""
        product = self._inventory.find(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        discounted = product.calculate_discounted_price(discount_percent)
        return DiscountQuoteDTO(
            product_id=product.id,
            product_name=product.name,
            discount_percent=str(discount_percent),
            original_price=str(product.price),
            discounted_price=str(discounted),
        )
