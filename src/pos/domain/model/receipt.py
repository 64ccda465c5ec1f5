"""Receipt produced by a successful checkout.

A plain value: printing it is somebody else's job.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.shipment import ShipmentManifest
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    display_name: str
    unit_price: Money  # snapshot at checkout time
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    customer_name: str
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping_fee: Money
    total: Money
    balance_after: Money
    shipment: ShipmentManifest | None = None

    @property
    def requires_shipping(self) -> bool:
        return self.shipment is not None
