"""In-memory fakes for testing.

These implement the same abstract interfaces as the real collaborators
but record everything instead of producing output. No side effects.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pos.domain.model.product import Product, ShippingInfo
from pos.domain.model.shipment import ShipmentManifest
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.shipping_service import ShippingService

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.name] = p

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.name] = product


class RecordingShippingService(ShippingService):

    def __init__(self) -> None:
        self.calls: list[list[ShippingInfo]] = []

    def send(self, units: list[ShippingInfo]) -> ShipmentManifest:
        self.calls.append(list(units))
        return ShipmentManifest.from_units(units)


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta
