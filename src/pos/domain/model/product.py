"""Product entities.

Products live in the catalog and are shared by reference with every cart
that holds them: a successful checkout reduces stock on the very same
instance the catalog owns.

Variants differ along two capabilities:

- expiry, answered by ``is_expired()``
- shippability, exposed as the optional ``shipping_info`` field

Callers never inspect the concrete class to find out whether a product
has to be shipped; they look at ``shipping_info``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone

from pos.domain.exceptions import InvalidQuantityError, ValidationError
from pos.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class ShippingInfo:
    """What the shipment side needs to know about one physical unit."""

    name: str
    weight: Weight

    @property
    def display_name(self) -> str:
        return f"{self.name} {self.weight.grams}g"


@dataclass
class Product(ABC):
    """Base catalog entry: name, unit price and stock on hand.

    ``quantity`` only goes down through ``reduce_quantity()``.
    """

    name: str
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.quantity}"
            )

    @abstractmethod
    def is_expired(self, now: datetime | None = None) -> bool:
        """True if the product can no longer be sold at *now*."""

    @property
    def shipping_info(self) -> ShippingInfo | None:
        return None

    @property
    def expires_at(self) -> datetime | None:
        return None

    @property
    def display_name(self) -> str:
        info = self.shipping_info
        return info.display_name if info is not None else self.name

    def is_available(self, requested: int) -> bool:
        if requested <= 0:
            raise InvalidQuantityError("Requested quantity must be positive")
        return requested <= self.quantity

    def reduce_quantity(self, amount: int) -> None:
        """Take *amount* units out of stock.

        No bounds check: availability must have been validated by the
        caller before any stock is touched.
        """
        self.quantity -= amount


@dataclass
class RegularProduct(Product):
    """Never expires, never shipped (e.g. a scratch card)."""

    def is_expired(self, now: datetime | None = None) -> bool:
        return False


@dataclass
class ShippableProduct(Product):
    """Never expires but has to be shipped."""

    weight: Weight

    def is_expired(self, now: datetime | None = None) -> bool:
        return False

    @property
    def shipping_info(self) -> ShippingInfo:
        return ShippingInfo(self.name, self.weight)


@dataclass
class ExpirableProduct(Product):
    """Perishable goods: expire at ``expiry_date`` and are always shipped."""

    expiry_date: datetime
    weight: Weight

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.expiry_date.tzinfo is None:
            raise ValidationError(
                f"Expiry date for {self.name} must be timezone-aware"
            )

    def is_expired(self, now: datetime | None = None) -> bool:
        if now is None:
            now = datetime.now(timezone.utc)
        return self.expiry_date < now

    @property
    def expires_at(self) -> datetime:
        return self.expiry_date

    @property
    def shipping_info(self) -> ShippingInfo:
        return ShippingInfo(self.name, self.weight)
