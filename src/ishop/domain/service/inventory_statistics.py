"""Domain service: Inventory Statistics.

Read-only aggregation over an Inventory.  Every function here is a pure
function of the inventory's current state and never mutates it.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from ishop.domain.model.inventory import Inventory
from ishop.domain.model.product import Product
from ishop.domain.model.value_objects import Money


@dataclass(frozen=True)
class StatisticsSnapshot:
    category_counts: dict[str, int]  # ordered by category name
    most_expensive: Product | None
    total_products: int
    total_value: Money
    total_stock: int


def count_by_category(inventory: Inventory) -> dict[str, int]:
    """Number of products per category, keys in ascending name order."""
    counts = Counter(p.category.value for p in inventory)
    return {category: counts[category] for category in sorted(counts)}


def most_expensive(inventory: Inventory) -> Product | None:
    """Highest-priced product; ties go to the first one in container order."""
    products = inventory.products
    if not products:
        return None
    return max(products, key=lambda p: p.price.amount)


def build_snapshot(inventory: Inventory) -> StatisticsSnapshot:
    return StatisticsSnapshot(
        category_counts=count_by_category(inventory),
        most_expensive=most_expensive(inventory),
        total_products=inventory.product_count,
        total_value=inventory.total_value(),
        total_stock=inventory.total_stock(),
    )
