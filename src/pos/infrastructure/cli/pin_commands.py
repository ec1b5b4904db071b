"""CLI commands for pinned products."""

from __future__ import annotations

import click

from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import PosApp


@click.command("toggle")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def pin_toggle(app: PosApp, product_id: int) -> None:
    """Pin a product, or unpin it if it is already pinned."""
    try:
        app.toggle_pin.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
