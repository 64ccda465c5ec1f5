"""Cart aggregate — validates and prices a purchase.

The cart references products owned by the catalog; it never copies them.
Checkout mutates those shared instances in place, so all validation runs
before anything is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from pos.domain.exceptions import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    InsufficientStockError,
)
from pos.domain.model.customer import Customer
from pos.domain.model.product import Product, ShippingInfo
from pos.domain.model.receipt import Receipt, ReceiptLine
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.service.shipping_service import ManifestShippingService, ShippingService

Clock = Callable[[], datetime]


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_FEE = Money.of(30)  # flat, regardless of weight or destination


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartItem:
    """One (product, requested quantity) line. Owned by its cart."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Ordered lines awaiting checkout.

    Line order is kept as added and drives the order of receipt and
    manifest lines.
    """

    def __init__(
        self,
        shipping_service: ShippingService | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._items: list[CartItem] = []
        self._shipping_service = shipping_service or ManifestShippingService()
        self._clock = clock

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def add(self, product: Product, quantity: int) -> CartItem:
        """Append a line after an optimistic expiry and stock check.

        Checkout validates again: time and stock may move on in between.
        """
        qty = Quantity(quantity)
        self._validate_line(product, qty, self._clock())
        item = CartItem(product=product, quantity=qty)
        self._items.append(item)
        return item

    def checkout(self, customer: Customer) -> Receipt:
        """Validate, price, pay and ship the cart.

        Phases:
          1. Validate — every line must be unexpired and in stock.
          2. Price — subtotal, shippable units, flat shipping fee, total;
             then the customer must be able to pay the total.
          3. Commit — reduce stock line by line, debit the customer,
             hand shippable units to the shipping service.

        Nothing is mutated unless phases 1 and 2 pass for every line.

        Lines are checked independently against the *current* stock, so
        two lines for the same product can each pass and together
        overdraw it.
        """
        if not self._items:
            raise EmptyCartError()

        # Phase 1: validate
        now = self._clock()
        for item in self._items:
            self._validate_line(item.product, item.quantity, now)

        # Phase 2: price
        subtotal = Money.zero()
        shippables: list[ShippingInfo] = []
        receipt_lines: list[ReceiptLine] = []
        for item in self._items:
            line_total = item.line_total
            subtotal = subtotal + line_total
            receipt_lines.append(
                ReceiptLine(
                    quantity=item.quantity.value,
                    display_name=item.product.display_name,
                    unit_price=item.product.price,
                    line_total=line_total,
                )
            )
            info = item.product.shipping_info
            if info is not None:
                shippables.extend([info] * item.quantity.value)

        shipping_fee = SHIPPING_FEE if shippables else Money.zero()
        total = subtotal + shipping_fee

        if not customer.can_afford(total):
            raise InsufficientBalanceError(total.amount, customer.balance.amount)

        # Phase 3: commit
        for item in self._items:
            item.product.reduce_quantity(item.quantity.value)
        customer.deduct(total)

        shipment = self._shipping_service.send(shippables) if shippables else None

        self._items.clear()

        return Receipt(
            customer_name=customer.name,
            lines=tuple(receipt_lines),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=total,
            balance_after=customer.balance,
            shipment=shipment,
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_line(product: Product, quantity: Quantity, now: datetime) -> None:
        if product.is_expired(now):
            raise ExpiredProductError(product.display_name)
        if not product.is_available(quantity.value):
            raise InsufficientStockError(
                product.display_name, quantity.value, product.quantity
            )
