"""Domain service: Shipping.

Receives the flattened list of shippable units from a checkout, groups
them into a manifest and reports it.  Defined as an abstract collaborator
so the cart never depends on a concrete output sink.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pos.domain.model.product import ShippingInfo
from pos.domain.model.shipment import ShipmentManifest

logger = logging.getLogger(__name__)


class ShippingService(ABC):

    @abstractmethod
    def send(self, units: list[ShippingInfo]) -> ShipmentManifest:
        """Dispatch *units* (one entry per physical item) and return the manifest."""


class ManifestShippingService(ShippingService):
    """Builds the manifest and reports it through the module logger."""

    def send(self, units: list[ShippingInfo]) -> ShipmentManifest:
        manifest = ShipmentManifest.from_units(units)
        logger.info(
            "Shipment notice: %d unit(s), total package weight %s",
            manifest.unit_count,
            manifest.total_weight,
        )
        for line in manifest.lines:
            logger.info("  %dx %s", line.count, line.display_name)
        return manifest
