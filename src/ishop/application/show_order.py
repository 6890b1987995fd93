"""Application service: Show Order use case (query)."""

from __future__ import annotations

from ishop.application.dto import OrderDTO, OrderLineItemDTO
from ishop.domain.exceptions import EntityNotFoundError
from ishop.domain.model.order import Order
from ishop.domain.model.order_book import OrderBook


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


class ShowOrderHandler:

    def __init__(self, order_book: OrderBook) -> None:
        self._order_book = order_book

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_book.find(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)

    def list_all(self) -> list[OrderDTO]:
        return [to_order_dto(order) for order in self._order_book]
