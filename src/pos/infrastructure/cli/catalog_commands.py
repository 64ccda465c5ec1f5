"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.show_catalog import ShowCatalogHandler
from pos.infrastructure.bootstrap import product_repository


@click.command("list")
def catalog_list() -> None:
    """List all products in the catalog."""
    lines = ShowCatalogHandler(product_repo=product_repository()).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Product':<20} {'Price':>8} {'Stock':>6} {'Ships':>6}  {'Expires':<10}")
    click.echo("-" * 56)
    for line in lines:
        ships = "yes" if line.shippable else "no"
        click.echo(
            f"{line.display_name:<20} {line.price:>8} {line.in_stock:>6} "
            f"{ships:>6}  {line.expires or '-':<10}"
        )
