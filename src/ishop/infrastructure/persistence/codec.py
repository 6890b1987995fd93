"""Line codec for the flat data files.

Each product or order is one comma-separated line.  Fields are not
escaped, so values must not contain commas or newlines.

Product layouts (first field is the category tag)::

    Clothing,id,name,price,stock,size,color,material
    Stationery,id,name,price,stock,brand,itemType
    Accessory,id,name,price,stock,isElectronic(0|1),accessoryType

Order layout::

    orderId,customerName,totalAmount,orderDateEpoch,itemCount[,productId,quantity,unitPrice]...

Decoding is permissive: a line that is too short, has an unknown tag or
holds an unparseable number decodes to None and the caller skips it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from ishop.domain.exceptions import InvalidArgumentError, ValidationError
from ishop.domain.model.inventory import Inventory
from ishop.domain.model.order import Order, OrderItem
from ishop.domain.model.product import Accessory, Clothing, Product, ProductCategory, Stationery
from ishop.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)

DELIMITER = ","

ORDER_HEADER_FIELDS = 5
ORDER_ITEM_FIELDS = 3


def _format_amount(money: Money) -> str:
    return format(money.amount, "f")


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


def _clothing_fields(product: Clothing) -> list[str]:
    return [product.size, product.color, product.material]


def _stationery_fields(product: Stationery) -> list[str]:
    return [product.brand, product.item_type]


def _accessory_fields(product: Accessory) -> list[str]:
    return ["1" if product.is_electronic else "0", product.accessory_type]


def _clothing_from(tokens: list[str]) -> Clothing:
    return Clothing(
        id=tokens[1],
        name=tokens[2],
        price=Money.of(tokens[3]),
        stock=int(tokens[4]),
        size=tokens[5],
        color=tokens[6],
        material=tokens[7],
    )


def _stationery_from(tokens: list[str]) -> Stationery:
    return Stationery(
        id=tokens[1],
        name=tokens[2],
        price=Money.of(tokens[3]),
        stock=int(tokens[4]),
        brand=tokens[5],
        item_type=tokens[6],
    )


def _accessory_from(tokens: list[str]) -> Accessory:
    return Accessory(
        id=tokens[1],
        name=tokens[2],
        price=Money.of(tokens[3]),
        stock=int(tokens[4]),
        is_electronic=tokens[5] == "1",
        accessory_type=tokens[6],
    )


_ENCODERS: dict[ProductCategory, Callable[..., list[str]]] = {
    ProductCategory.CLOTHING: _clothing_fields,
    ProductCategory.STATIONERY: _stationery_fields,
    ProductCategory.ACCESSORY: _accessory_fields,
}

# tag -> (minimum token count, decoder)
_DECODERS: dict[str, tuple[int, Callable[[list[str]], Product]]] = {
    ProductCategory.CLOTHING.value: (8, _clothing_from),
    ProductCategory.STATIONERY.value: (7, _stationery_from),
    ProductCategory.ACCESSORY.value: (7, _accessory_from),
}


def encode_product(product: Product) -> str:
    fields = [
        product.category.value,
        product.id,
        product.name,
        _format_amount(product.price),
        str(product.stock),
    ]
    fields.extend(_ENCODERS[product.category](product))
    return DELIMITER.join(fields)


def decode_product(line: str) -> Product | None:
    """Rebuild a product from one line, or None if the line is unusable."""
    tokens = line.split(DELIMITER)
    entry = _DECODERS.get(tokens[0])
    if entry is None:
        return None

    min_tokens, decoder = entry
    if len(tokens) < min_tokens:
        return None

    try:
        return decoder(tokens)
    except (ValueError, ValidationError):
        return None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


def _encode_item(item: OrderItem) -> str:
    return DELIMITER.join(
        [item.product_id, str(item.quantity.value), _format_amount(item.unit_price)]
    )


def encode_order(order: Order) -> str:
    header = DELIMITER.join(
        [
            str(order.id),
            order.customer_name,
            _format_amount(order.total_amount),
            str(int(order.created_at.timestamp())),
            str(len(order.items)),
        ]
    )
    return "".join([header] + [DELIMITER + _encode_item(item) for item in order.items])


def _decode_item(group: list[str], inventory: Inventory) -> OrderItem | None:
    product_id, quantity_raw, unit_price_raw = group
    product = inventory.find(product_id)
    if product is None:
        logger.debug("Dropping order item for unknown product %r", product_id)
        return None
    try:
        quantity = Quantity(int(quantity_raw))
    except InvalidArgumentError:
        logger.debug("Dropping order item with quantity %r", quantity_raw)
        return None
    return OrderItem(
        product_id=product.id,
        product_name=product.name,
        quantity=quantity,
        unit_price=Money.of(unit_price_raw),
    )


def decode_order(line: str, inventory: Inventory) -> Order | None:
    """Rebuild an order from one line, re-linking items via *inventory*.

    Items whose product is missing from the inventory are dropped.  The
    stored total is kept as-is, so it can differ from the sum of the
    remaining items.
    """
    tokens = line.split(DELIMITER)
    if len(tokens) < ORDER_HEADER_FIELDS:
        return None

    try:
        order = Order(
            id=int(tokens[0]),
            customer_name=tokens[1],
            total_amount=Money.of(tokens[2]),
            created_at=datetime.fromtimestamp(int(tokens[3]), tz=timezone.utc),
        )
        item_count = int(tokens[4])

        index = ORDER_HEADER_FIELDS
        for _ in range(item_count):
            if index + ORDER_ITEM_FIELDS > len(tokens):
                break
            item = _decode_item(tokens[index:index + ORDER_ITEM_FIELDS], inventory)
            if item is not None:
                order.items.append(item)
            index += ORDER_ITEM_FIELDS
    except (ValueError, OverflowError, OSError, ValidationError):
        return None

    return order
