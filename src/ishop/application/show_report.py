"""Application service: Inventory Report use case (query)."""

from __future__ import annotations

from ishop.application.dto import ReportDTO
from ishop.domain.model.inventory import Inventory
from ishop.domain.service.inventory_statistics import build_snapshot


class ShowReportHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> ReportDTO:
        snapshot = build_snapshot(self._inventory)
        top = snapshot.most_expensive
        return ReportDTO(
            category_counts=list(snapshot.category_counts.items()),
            most_expensive_name=top.name if top else None,
            most_expensive_price=str(top.price) if top else None,
            total_products=snapshot.total_products,
            total_value=str(snapshot.total_value),
            total_stock=snapshot.total_stock,
        )
