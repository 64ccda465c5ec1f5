"""Shipment manifest: shippable units grouped for dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pos.domain.model.product import ShippingInfo
from pos.domain.model.value_objects import Weight


@dataclass(frozen=True)
class ManifestLine:
    count: int
    display_name: str


@dataclass(frozen=True)
class ShipmentManifest:
    """Units grouped by display name, in the order each name first appears.

    Grouping is by *display name*, not product identity, so two products
    that render identically share a line.  ``total_weight`` counts every
    unit, not every distinct name.
    """

    lines: tuple[ManifestLine, ...]
    total_weight: Weight

    @property
    def unit_count(self) -> int:
        return sum(line.count for line in self.lines)

    @staticmethod
    def from_units(units: Iterable[ShippingInfo]) -> ShipmentManifest:
        counts: dict[str, int] = {}
        total = Weight.zero()
        for unit in units:
            name = unit.display_name
            counts[name] = counts.get(name, 0) + 1
            total = total + unit.weight
        return ShipmentManifest(
            lines=tuple(ManifestLine(count, name) for name, count in counts.items()),
            total_weight=total,
        )
