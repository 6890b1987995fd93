"""Flat-text implementation of ProductRepository (one product per line)."""

from __future__ import annotations

import logging
from pathlib import Path

from ishop.domain.exceptions import FileIOError
from ishop.domain.model.product import Product
from ishop.domain.repository.product_repository import ProductRepository
from ishop.infrastructure.persistence.codec import decode_product, encode_product

logger = logging.getLogger(__name__)


class TextProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def save_all(self, products: list[Product]) -> None:
        try:
            with self._file_path.open("w", encoding="utf-8", newline="\n") as fh:
                for product in products:
                    fh.write(encode_product(product) + "\n")
        except OSError as exc:
            raise FileIOError(str(self._file_path), "save") from exc
        logger.info("Saved %d products to %s", len(products), self._file_path)

    def load_all(self) -> list[Product] | None:
        try:
            with self._file_path.open("r", encoding="utf-8", newline="\n") as fh:
                lines = fh.read().split("\n")
        except OSError:
            logger.debug("No product file at %s, nothing to load", self._file_path)
            return None

        products: list[Product] = []
        for lineno, line in enumerate(lines, start=1):
            if not line:
                continue
            product = decode_product(line)
            if product is None:
                logger.debug("Skipping malformed product line %d in %s", lineno, self._file_path)
                continue
            products.append(product)

        logger.info("Loaded %d products from %s", len(products), self._file_path)
        return products
