"""CLI commands for customers."""

from __future__ import annotations

import click

from pos.infrastructure.bootstrap import PosApp


@click.command("list")
@click.pass_obj
def customer_list(app: PosApp) -> None:
    """List customers available for selection."""
    session = app.open_session.handle()

    if not session.customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Phone':<16}")
    click.echo("-" * 48)
    for c in session.customers:
        click.echo(f"{c.id:<6} {c.name:<24} {c.phone or '':<16}")
