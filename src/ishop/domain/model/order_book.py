"""Order book — the session's order history and its id sequence."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from ishop.domain.model.order import Order

if TYPE_CHECKING:
    from ishop.domain.model.inventory import Inventory
    from ishop.domain.repository.order_repository import OrderRepository

FIRST_ORDER_ID = 1001


class OrderIdSequence:
    """Hands out strictly increasing order ids.

    ``advance_to`` moves the sequence past ids that were loaded from
    storage so new orders never collide with them.
    """

    def __init__(self, last_issued: int = FIRST_ORDER_ID - 1) -> None:
        self._last_issued = last_issued

    @property
    def last_issued(self) -> int:
        return self._last_issued

    def next_id(self) -> int:
        self._last_issued += 1
        return self._last_issued

    def advance_to(self, order_id: int) -> None:
        if order_id > self._last_issued:
            self._last_issued = order_id


class OrderBook:
    """Append-only list of orders, replaced wholesale on load."""

    def __init__(self, sequence: OrderIdSequence | None = None) -> None:
        self._orders: list[Order] = []
        self._sequence = sequence or OrderIdSequence()

    def create_order(self, customer_name: str = "") -> Order:
        """Start a new order with the next id.  Not yet in the book."""
        return Order.create(self._sequence.next_id(), customer_name)

    def append(self, order: Order) -> None:
        self._orders.append(order)
        self._sequence.advance_to(order.id)

    def find(self, order_id: int) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    @property
    def sequence(self) -> OrderIdSequence:
        return self._sequence

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders))

    # --- Persistence ----------------------------------------------------------

    def save_to(self, repository: OrderRepository) -> None:
        repository.save_all(self._orders)

    def load_from(self, repository: OrderRepository, inventory: Inventory) -> bool:
        """Replace the book with the stored orders.

        Returns False and leaves the book untouched when there is
        nothing to load.  The id sequence is advanced past the highest
        loaded id.
        """
        orders = repository.load_all(inventory)
        if orders is None:
            return False
        self._orders = list(orders)
        for order in self._orders:
            self._sequence.advance_to(order.id)
        return True
