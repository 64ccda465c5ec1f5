"""Seed data for the demo catalog."""

from __future__ import annotations

from datetime import datetime, timedelta

from pos.domain.model.product import (
    ExpirableProduct,
    Product,
    RegularProduct,
    ShippableProduct,
)
from pos.domain.model.value_objects import Money, Weight

# Perishables expire this long after the catalog is seeded.
SHELF_LIFE = timedelta(days=90)


def demo_products(seeded_at: datetime) -> list[Product]:
    """Build a fresh set of demo products. *seeded_at* must be timezone-aware."""
    expiry = seeded_at + SHELF_LIFE
    return [
        ExpirableProduct(
            name="Cheese",
            price=Money.of(150),
            quantity=5,
            expiry_date=expiry,
            weight=Weight.of("0.2"),
        ),
        ExpirableProduct(
            name="Biscuits",
            price=Money.of(250),
            quantity=3,
            expiry_date=expiry,
            weight=Weight.of("0.7"),
        ),
        RegularProduct(name="Scratch Card", price=Money.of(50), quantity=10),
        ShippableProduct(
            name="TV",
            price=Money.of(8000),
            quantity=2,
            weight=Weight.of("8.0"),
        ),
    ]
