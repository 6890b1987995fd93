"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the
CLI layer can catch them uniformly and show a readable message.  The
domain raises these at the point of violation and never handles them.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidPriceError(ValidationError):
    """A price was negative."""

    def __init__(self, price: object) -> None:
        super().__init__(f"Price cannot be negative: {price}")
        self.price = price


class InvalidDiscountError(ValidationError):
    """A discount percentage fell outside 0-100."""

    def __init__(self, discount: object) -> None:
        super().__init__(f"Discount must be between 0-100: {discount}")
        self.discount = discount


class InvalidArgumentError(ValidationError):
    """An argument was out of its allowed range (e.g. order quantity)."""


class InsufficientStockError(ValidationError):
    """A stock decrement would leave a product below zero."""

    def __init__(self, item_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {item_name}: "
            f"Requested {requested}, Available {available}"
        )
        self.item_name = item_name
        self.requested = requested
        self.available = available


class FileIOError(DomainException):
    """A data file could not be opened or written."""

    def __init__(self, filename: str, operation: str) -> None:
        super().__init__(f"File operation failed: {operation} on {filename}")
        self.filename = filename
        self.operation = operation
