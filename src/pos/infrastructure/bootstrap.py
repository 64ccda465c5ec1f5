"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from datetime import datetime

from pos.domain.model.cart import utc_now
from pos.domain.service.shipping_service import ManifestShippingService
from pos.infrastructure.persistence.demo_catalog import demo_products
from pos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def clock() -> datetime:
    return utc_now()


def product_repository() -> InMemoryProductRepository:
    """A freshly seeded catalog. Nothing is persisted between runs."""
    return InMemoryProductRepository(demo_products(clock()))


def shipping_service() -> ManifestShippingService:
    return ManifestShippingService()
