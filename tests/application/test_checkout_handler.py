"""Integration tests for the Checkout use case.

Uses in-memory fakes — no console output.
"""

from datetime import timedelta

import pytest

from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec
from pos.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    ExpiredProductError,
    InsufficientBalanceError,
    InsufficientStockError,
    InvalidQuantityError,
)
from pos.domain.model.product import ExpirableProduct, Product
from pos.domain.model.value_objects import Money, Weight
from pos.infrastructure.persistence.demo_catalog import demo_products
from tests.fakes import FakeProductRepository, FixedClock, NOW, RecordingShippingService


def _setup(
    products: list[Product] | None = None,
) -> tuple[CheckoutHandler, FakeProductRepository, RecordingShippingService]:
    """Build handler with fakes, pre-loaded with the demo catalog by default."""
    if products is None:
        products = demo_products(NOW)
    product_repo = FakeProductRepository(products)
    shipping = RecordingShippingService()
    handler = CheckoutHandler(product_repo, shipping, clock=FixedClock())
    return handler, product_repo, shipping


DEMO_CART = [
    CartItemSpec("Cheese", 2),
    CartItemSpec("Biscuits", 1),
    CartItemSpec("Scratch Card", 1),
]


class TestCheckoutHappyPath:

    def test_receipt_dto(self):
        handler, _, _ = _setup()
        dto = handler.handle("Ahmed", "5000", DEMO_CART)

        assert dto.customer_name == "Ahmed"
        assert [(l.quantity, l.display_name, l.unit_price, l.line_total) for l in dto.lines] == [
            (2, "Cheese 200g", "150", "300"),
            (1, "Biscuits 700g", "250", "250"),
            (1, "Scratch Card", "50", "50"),
        ]
        assert dto.subtotal == "600"
        assert dto.shipping == "30"
        assert dto.total == "630"
        assert dto.balance_after == "4370"

    def test_shipment_dto(self):
        handler, _, _ = _setup()
        dto = handler.handle("Ahmed", "5000", DEMO_CART)

        assert [(s.count, s.display_name) for s in dto.shipment.lines] == [
            (2, "Cheese 200g"),
            (1, "Biscuits 700g"),
        ]
        assert dto.shipment.total_weight == "1.1"

    def test_catalog_stock_reduced(self):
        handler, product_repo, _ = _setup()
        handler.handle("Ahmed", "5000", DEMO_CART)

        assert product_repo.get_by_name("Cheese").quantity == 3
        assert product_repo.get_by_name("Biscuits").quantity == 2
        assert product_repo.get_by_name("Scratch Card").quantity == 9
        assert product_repo.get_by_name("TV").quantity == 2

    def test_product_names_are_case_insensitive(self):
        handler, _, _ = _setup()
        dto = handler.handle("Ahmed", "100", [CartItemSpec("scratch card", 1)])
        assert dto.total == "50"

    def test_no_shippables_means_no_shipment(self):
        handler, _, shipping = _setup()
        dto = handler.handle("Ahmed", "100", [CartItemSpec("Scratch Card", 2)])

        assert dto.shipping == "0"
        assert dto.shipment is None
        assert shipping.calls == []

    def test_stock_persists_across_checkouts(self):
        handler, product_repo, _ = _setup()
        handler.handle("Ahmed", "50000", [CartItemSpec("TV", 2)])

        with pytest.raises(InsufficientStockError, match="TV 8000g"):
            handler.handle("Sara", "50000", [CartItemSpec("TV", 1)])
        assert product_repo.get_by_name("TV").quantity == 0


class TestCheckoutValidation:

    def test_unknown_product_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle("Ahmed", "5000", [CartItemSpec("Caviar", 1)])

    def test_insufficient_balance(self):
        handler, product_repo, shipping = _setup()
        with pytest.raises(InsufficientBalanceError):
            handler.handle("Ahmed", "100", DEMO_CART)

        assert product_repo.get_by_name("Cheese").quantity == 5
        assert shipping.calls == []

    def test_excess_quantity_rejected_at_add(self):
        handler, product_repo, _ = _setup()
        with pytest.raises(InsufficientStockError, match="Not enough stock for Biscuits 700g"):
            handler.handle("Ahmed", "5000", [CartItemSpec("Biscuits", 5)])
        assert product_repo.get_by_name("Biscuits").quantity == 3

    def test_expired_product_rejected(self):
        stale = ExpirableProduct(
            "Yoghurt", Money.of(30), 10, NOW - timedelta(days=1), Weight.of("0.5")
        )
        handler, _, _ = _setup([stale])
        with pytest.raises(ExpiredProductError, match="Yoghurt 500g is expired"):
            handler.handle("Ahmed", "5000", [CartItemSpec("Yoghurt", 1)])
        assert stale.quantity == 10

    def test_zero_quantity_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            handler.handle("Ahmed", "5000", [CartItemSpec("Cheese", 0)])

    def test_empty_item_list_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EmptyCartError):
            handler.handle("Ahmed", "5000", [])
