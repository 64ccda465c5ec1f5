import click

from pos.infrastructure.bootstrap import DEFAULT_LOG_LEVEL, configure_logging
from pos.infrastructure.cli.catalog_commands import catalog_list
from pos.infrastructure.cli.checkout_commands import checkout, demo


@click.group()
@click.option(
    "--log-level",
    envvar="POS_LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """POS — point-of-sale checkout"""
    configure_logging(log_level)


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(checkout)
cli.add_command(demo)
