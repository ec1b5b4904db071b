import click

from pos.infrastructure.bootstrap import build_app
from pos.infrastructure.cli.catalog_commands import catalog_categories, catalog_list
from pos.infrastructure.cli.customer_commands import customer_list
from pos.infrastructure.cli.pin_commands import pin_toggle
from pos.infrastructure.cli.sale_commands import sale_checkout, sale_today
from pos.infrastructure.config import Settings
from pos.infrastructure.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """POS — point-of-sale cart and checkout"""
    settings = Settings()
    configure_logging(settings.log_level, json=settings.log_json)
    ctx.obj = build_app(settings)


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


@cli.group()
def pin() -> None:
    """Pin products to the top of the catalog."""


@cli.group()
def customer() -> None:
    """Look up customers."""


@cli.group()
def sale() -> None:
    """Ring up sales."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_categories)
pin.add_command(pin_toggle)
customer.add_command(customer_list)
sale.add_command(sale_checkout)
sale.add_command(sale_today)
