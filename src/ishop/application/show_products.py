"""Application service: Show Products use case (query).

Also provides the filter presets offered to the operator: by category,
by price range and low stock.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from ishop.application.dto import ProductDTO
from ishop.domain.exceptions import EntityNotFoundError, ValidationError
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.product import Product
from ishop.domain.model.value_objects import to_decimal

ProductFilter = Callable[[Product], bool]

LOW_STOCK_THRESHOLD = 10


def by_category(category: str) -> ProductFilter:
    wanted = category.strip().lower()
    return lambda p: p.category.value.lower() == wanted


def by_price_range(
    min_price: str | float | int | Decimal,
    max_price: str | float | int | Decimal,
) -> ProductFilter:
    """Products priced within [min_price, max_price], inclusive."""
    low, high = to_decimal(min_price), to_decimal(max_price)
    if low > high:
        raise ValidationError(f"Minimum price {low} is above maximum price {high}")
    return lambda p: low <= p.price.amount <= high


def low_stock(threshold: int = LOW_STOCK_THRESHOLD) -> ProductFilter:
    return lambda p: p.stock < threshold


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category.value,
        price=str(product.price),
        stock=product.stock,
        details=product.details(),
    )


class ShowProductsHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, product_filter: ProductFilter | None = None) -> list[ProductDTO]:
        """All products in catalog order, optionally filtered."""
        if product_filter is None:
            products = self._inventory.products
        else:
            products = self._inventory.filter(product_filter)
        return [to_product_dto(p) for p in products]

    def find(self, product_id: str) -> ProductDTO:
        product = self._inventory.find(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return to_product_dto(product)
