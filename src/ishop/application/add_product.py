"""Application service: Add Product use case."""

from __future__ import annotations

from ishop.application.dto import NewProductSpec
from ishop.application.field_rules import check_text
from ishop.domain.exceptions import ValidationError
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.product import Accessory, Clothing, Product, ProductCategory, Stationery
from ishop.domain.model.value_objects import Money


class AddProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, spec: NewProductSpec) -> Product:
        """Build the requested variant and add it to the inventory."""
        if not spec.name or not spec.name.strip():
            raise ValidationError("Product name is required")
        if not spec.product_id or not spec.product_id.strip():
            raise ValidationError("Product ID is required")

        product_id = check_text("Product ID", spec.product_id.strip())
        name = check_text("Product name", spec.name.strip())

        if self._inventory.find(product_id) is not None:
            raise ValidationError(f"Product '{product_id}' already exists")

        try:
            category = ProductCategory(spec.category.strip().capitalize())
        except ValueError:
            raise ValidationError(f"Unknown product category '{spec.category}'")

        attrs = {
            key: check_text(key, value) if isinstance(value, str) else value
            for key, value in spec.attributes.items()
        }
        price = Money.of(spec.price)

        product: Product
        if category is ProductCategory.CLOTHING:
            product = Clothing(
                id=product_id,
                name=name,
                price=price,
                stock=spec.stock,
                size=attrs.get("size", ""),
                color=attrs.get("color", ""),
                material=attrs.get("material", ""),
            )
        elif category is ProductCategory.STATIONERY:
            product = Stationery(
                id=product_id,
                name=name,
                price=price,
                stock=spec.stock,
                brand=attrs.get("brand", ""),
                item_type=attrs.get("item_type", ""),
            )
        else:
            product = Accessory(
                id=product_id,
                name=name,
                price=price,
                stock=spec.stock,
                is_electronic=bool(attrs.get("is_electronic", False)),
                accessory_type=attrs.get("accessory_type", ""),
            )

        self._inventory.add(product)
        return product
