"""CLI commands for checking out a cart."""

from __future__ import annotations

import click

from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec, ReceiptDTO
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import clock, product_repository, shipping_service

DEMO_CUSTOMER = "Ahmed"
DEMO_BALANCE = "5000"
DEMO_ITEMS = [
    CartItemSpec("Cheese", 2),
    CartItemSpec("Biscuits", 1),
    CartItemSpec("Scratch Card", 1),
]


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,TV:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _run_checkout(customer: str, balance: str, specs: list[CartItemSpec]) -> None:
    handler = CheckoutHandler(
        product_repo=product_repository(),
        shipping_service=shipping_service(),
        clock=clock,
    )

    try:
        dto = handler.handle(customer_name=customer, balance=balance, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)


def _display_receipt(dto: ReceiptDTO) -> None:
    """Shipment notice first (if anything ships), then the receipt."""
    if dto.shipment is not None:
        click.echo("** Shipment notice **")
        for line in dto.shipment.lines:
            click.echo(f"{line.count}x {line.display_name}")
        click.echo(f"Total package weight {dto.shipment.total_weight}kg")
        click.echo()

    click.echo("** Checkout receipt **")
    for item in dto.lines:
        click.echo(
            f"{item.quantity}x {item.display_name} @ {item.unit_price} = {item.line_total}"
        )
    click.echo("----------------------")
    click.echo(f"Subtotal {dto.subtotal}")
    click.echo(f"Shipping {dto.shipping}")
    click.echo(f"Amount {dto.total}")
    click.echo(f"Balance after payment: {dto.balance_after}")


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Customer balance (e.g. 5000).")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
def checkout(customer: str, balance: str, items: str) -> None:
    """Check out a cart against the demo catalog."""
    _run_checkout(customer, balance, _parse_items(items))


@click.command("demo")
def demo() -> None:
    """Run the sample purchase: cheese, biscuits and a scratch card."""
    _run_checkout(DEMO_CUSTOMER, DEMO_BALANCE, DEMO_ITEMS)
