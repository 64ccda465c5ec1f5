"""Application service: Checkout use case.

Resolves product names against the catalog, fills a cart and checks it
out for a customer.  The only place that coordinates the catalog, the
cart, the customer and the shipping service together.
"""

from __future__ import annotations

import logging

from pos.application.dto import (
    CartItemSpec,
    ReceiptDTO,
    ReceiptLineDTO,
    ShipmentDTO,
    ShipmentLineDTO,
)
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.cart import Cart, Clock, utc_now
from pos.domain.model.customer import Customer
from pos.domain.model.receipt import Receipt
from pos.domain.model.shipment import ShipmentManifest
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.shipping_service import ShippingService

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        shipping_service: ShippingService,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._shipping_service = shipping_service
        self._clock = clock

    def handle(
        self,
        customer_name: str,
        balance: str,
        item_specs: list[CartItemSpec],
    ) -> ReceiptDTO:
        """Check out *item_specs* for a customer holding *balance*.

        Steps:
        1. Resolve each product name to a catalog Product (fail if not found).
        2. Add each line to a fresh Cart (optimistic expiry/stock check).
        3. Let the Cart validate, price and commit the purchase.
        4. Return a DTO of the receipt.
        """
        customer = Customer(name=customer_name, balance=Money.of(balance))
        cart = Cart(shipping_service=self._shipping_service, clock=self._clock)

        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )
            cart.add(product, spec.quantity)
            logger.debug("Added %dx %s to cart", spec.quantity, product.display_name)

        receipt = cart.checkout(customer)
        logger.info(
            "Checkout for %s completed: total %s, balance after %s",
            receipt.customer_name,
            receipt.total,
            receipt.balance_after,
        )
        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> ReceiptDTO:
        return ReceiptDTO(
            customer_name=receipt.customer_name,
            lines=[
                ReceiptLineDTO(
                    quantity=line.quantity,
                    display_name=line.display_name,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in receipt.lines
            ],
            subtotal=str(receipt.subtotal),
            shipping=str(receipt.shipping_fee),
            total=str(receipt.total),
            balance_after=str(receipt.balance_after),
            shipment=_shipment_dto(receipt.shipment),
        )


def _shipment_dto(manifest: ShipmentManifest | None) -> ShipmentDTO | None:
    if manifest is None:
        return None
    return ShipmentDTO(
        lines=[
            ShipmentLineDTO(count=line.count, display_name=line.display_name)
            for line in manifest.lines
        ],
        total_weight=f"{manifest.total_weight.kilograms:.1f}",
    )
