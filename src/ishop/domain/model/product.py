"""Product aggregate and its catalog variants.

Products are owned by the Inventory that holds them.  The set of
variants is closed: every product is Clothing, Stationery or Accessory,
and the ``category`` discriminant tells the persistence codec which
layout to use.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from ishop.domain.exceptions import (
    InsufficientStockError,
    InvalidDiscountError,
    ValidationError,
)
from ishop.domain.model.value_objects import Money, to_decimal


class ProductCategory(Enum):
    CLOTHING = "Clothing"
    STATIONERY = "Stationery"
    ACCESSORY = "Accessory"


NON_ELECTRONIC_BONUS = Decimal("5")


@dataclass(eq=True)
class Product(ABC):
    """A sellable catalog entry.

    Invariants:
    - ``price`` is never negative (enforced by ``Money``)
    - ``stock`` is never negative
    """

    category: ClassVar[ProductCategory]

    id: str
    name: str
    price: Money
    stock: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.price, Money):
            self.price = Money.of(self.price)
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative: {self.stock}")

    @abstractmethod
    def details(self) -> dict[str, str]:
        """Variant-specific attributes, in display order."""

    def calculate_discounted_price(self, discount_percent: str | float | int | Decimal) -> Money:
        """Price after taking *discount_percent* off.

        Raises InvalidDiscountError unless the percentage is within 0-100.
        """
        percent = to_decimal(discount_percent)
        if percent < 0 or percent > 100:
            raise InvalidDiscountError(discount_percent)
        return self.price.discounted(percent)

    def update_stock(self, delta: int) -> None:
        """Add *delta* (possibly negative) to the stock level.

        Raises InsufficientStockError and leaves stock untouched if the
        result would drop below zero.
        """
        new_stock = self.stock + delta
        if new_stock < 0:
            raise InsufficientStockError(self.name, -delta, self.stock)
        self.stock = new_stock

    def set_price(self, new_price: Money | str | float | int | Decimal) -> None:
        """Change the product price.

        Existing orders are unaffected; their line items captured the
        price at the time they were added.
        """
        if not isinstance(new_price, Money):
            new_price = Money.of(new_price)
        self.price = new_price


@dataclass(eq=True)
class Clothing(Product):
    category: ClassVar[ProductCategory] = ProductCategory.CLOTHING

    size: str = ""
    color: str = ""
    material: str = ""

    def details(self) -> dict[str, str]:
        return {"Size": self.size, "Color": self.color, "Material": self.material}


@dataclass(eq=True)
class Stationery(Product):
    category: ClassVar[ProductCategory] = ProductCategory.STATIONERY

    brand: str = ""
    item_type: str = ""

    def details(self) -> dict[str, str]:
        return {"Brand": self.brand, "Type": self.item_type}


@dataclass(eq=True)
class Accessory(Product):
    category: ClassVar[ProductCategory] = ProductCategory.ACCESSORY

    is_electronic: bool = False
    accessory_type: str = ""

    def details(self) -> dict[str, str]:
        return {
            "Type": self.accessory_type,
            "Electronic": "Yes" if self.is_electronic else "No",
        }

    def calculate_discounted_price(self, discount_percent: str | float | int | Decimal) -> Money:
        """Non-electronic accessories get an extra 5 points off.

        The range check applies to the combined percentage, so a
        request of 96 on a non-electronic accessory is rejected.
        """
        percent = to_decimal(discount_percent)
        if not self.is_electronic:
            percent += NON_ELECTRONIC_BONUS
        return super().calculate_discounted_price(percent)
