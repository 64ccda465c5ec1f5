"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Checkout failures get their own types so callers can tell them apart.
"""

from __future__ import annotations

from decimal import Decimal


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidQuantityError(ValidationError):
    """A requested quantity is zero, negative or not an integer."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart with no lines."""

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class ExpiredProductError(ValidationError):
    """A line's product is past its expiry date."""

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(f"{product_name} is expired")


class InsufficientStockError(ValidationError):
    """A line asks for more units than the product has on hand."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough stock for {product_name} "
            f"(need {requested}, have {available})"
        )


class InsufficientBalanceError(ValidationError):
    """The customer cannot pay the computed total."""

    def __init__(self, required: Decimal, balance: Decimal) -> None:
        self.required = required
        self.balance = balance
        super().__init__(
            f"Insufficient balance (need {required:.2f}, have {balance:.2f})"
        )
