"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single receipt line as displayed to the user."""

    quantity: int
    display_name: str
    unit_price: str  # formatted, e.g. "150"
    line_total: str


@dataclass(frozen=True)
class ShipmentLineDTO:
    count: int
    display_name: str


@dataclass(frozen=True)
class ShipmentDTO:
    lines: list[ShipmentLineDTO]
    total_weight: str  # kilograms, one decimal, e.g. "8.4"


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a completed checkout as displayed to the user."""

    customer_name: str
    lines: list[ReceiptLineDTO]
    subtotal: str
    shipping: str
    total: str
    balance_after: str
    shipment: ShipmentDTO | None = None


@dataclass(frozen=True)
class CatalogLineDTO:
    display_name: str
    price: str
    in_stock: int
    shippable: bool
    expires: str | None  # "YYYY-MM-DD" for perishables
