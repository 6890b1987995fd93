"""Order aggregate — a customer transaction against the inventory.

The Order owns its line items.  Line items refer to products by id
only; the Inventory stays the single owner of Product objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ishop.domain.exceptions import InsufficientStockError
from ishop.domain.model.product import Product
from ishop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderItem:
    """Captures the price snapshot of a product at the time it was added.

    Later price changes on the product never alter past orders.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked when the item was added

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders.  The ``__init__`` is kept
    simple so the repository can reconstitute persisted orders with
    their stored total.
    """

    id: int
    customer_name: str
    items: list[OrderItem] = field(default_factory=list)
    total_amount: Money = field(default_factory=Money.zero)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(order_id: int, customer_name: str = "") -> Order:
        return Order(id=order_id, customer_name=customer_name)

    def add_item(self, product: Product, quantity: int) -> OrderItem:
        """Add *quantity* of *product* and reserve the stock.

        The product's current price is captured on the line item and the
        product's stock is decremented.  On failure neither the order nor
        the product is changed.
        """
        qty = Quantity(quantity)
        if product.stock < qty.value:
            raise InsufficientStockError(product.name, qty.value, product.stock)

        item = OrderItem(
            product_id=product.id,
            product_name=product.name,
            quantity=qty,
            unit_price=product.price,  # <-- price snapshot
        )
        product.update_stock(-qty.value)
        self.items.append(item)
        self.total_amount = self.total_amount + item.line_total
        return item

    @property
    def items_total(self) -> Money:
        """Sum of the current line items.

        Equals ``total_amount`` unless items were dropped while loading.
        """
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
