"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (flat text, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ishop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Overwrite the stored catalog with *products*, in order."""

    @abstractmethod
    def load_all(self) -> list[Product] | None:
        """Return the stored catalog, or None if there is nothing to load."""
