"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NewProductSpec:
    """Input: everything needed to add one product to the catalog.

    ``attributes`` holds the variant fields: size/color/material for
    clothing, brand/item_type for stationery, is_electronic and
    accessory_type for accessories.
    """

    category: str
    product_id: str
    name: str
    price: str
    stock: int = 0
    attributes: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "Rs.20.00"
    stock: int
    details: dict[str, str]


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class DiscountQuoteDTO:
    product_id: str
    product_name: str
    discount_percent: str
    original_price: str
    discounted_price: str


@dataclass(frozen=True)
class ReportDTO:
    category_counts: list[tuple[str, int]]
    most_expensive_name: str | None
    most_expensive_price: str | None
    total_products: int
    total_value: str
    total_stock: int
