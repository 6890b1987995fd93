"""Inventory aggregate — the ordered catalog of products.

The Inventory owns its products.  Insertion order is preserved and is
the order used for display, filtering and persistence.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from ishop.domain.model.product import Product
from ishop.domain.model.value_objects import Money

if TYPE_CHECKING:
    from ishop.domain.repository.product_repository import ProductRepository

P = TypeVar("P", bound=Product)


class Inventory(Generic[P]):
    """Typed, ordered collection of products.

    Product ids are expected to be unique but the container does not
    enforce it; with duplicates ``find`` returns the first match.
    ``product_count`` is maintained explicitly on every add, remove
    and replace.
    """

    def __init__(self, name: str = "iShop", products: list[P] | None = None) -> None:
        self.name = name
        self._products: list[P] = []
        self._product_count = 0
        for product in products or []:
            self.add(product)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: P) -> None:
        self._products.append(product)
        self._product_count += 1

    def remove(self, product_id: str) -> bool:
        """Remove every product with *product_id*.  True if any were removed."""
        kept = [p for p in self._products if p.id != product_id]
        removed = len(self._products) - len(kept)
        self._products = kept
        self._product_count -= removed
        return removed > 0

    def replace_all(self, products: list[P]) -> None:
        """Drop the current contents and take *products* in the given order."""
        self._products = list(products)
        self._product_count = len(self._products)

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: str) -> P | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def filter(self, predicate: Callable[[P], bool]) -> list[P]:
        return [p for p in self._products if predicate(p)]

    def total_stock(self) -> int:
        return sum(p.stock for p in self._products)

    def total_value(self) -> Money:
        result = Money.zero()
        for product in self._products:
            result = result + product.price * product.stock
        return result

    @property
    def products(self) -> list[P]:
        """A copy of the products in container order."""
        return list(self._products)

    @property
    def product_count(self) -> int:
        return self._product_count

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[P]:
        return iter(list(self._products))

    # --- Persistence ----------------------------------------------------------

    def save_to(self, repository: ProductRepository) -> None:
        """Write every product, in order, through *repository*."""
        repository.save_all(self._products)

    def load_from(self, repository: ProductRepository) -> bool:
        """Replace the contents with what *repository* holds.

        Returns False and leaves the inventory untouched when the
        repository has nothing to load (e.g. its file is missing).  An
        existing but empty source clears the inventory.
        """
        products = repository.load_all()
        if products is None:
            return False
        self.replace_all(products)  # type: ignore[arg-type]
        return True
