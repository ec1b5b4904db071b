"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from pos.infrastructure.bootstrap import PosApp


@click.command("list")
@click.option("--search", default="", help="Match against product name or SKU.")
@click.option("--category", default=None, help="Only show this category.")
@click.pass_obj
def catalog_list(app: PosApp, search: str, category: str | None) -> None:
    """List products, pinned ones first."""
    session = app.open_session.handle()
    products = app.browse_catalog.handle(session, search_term=search, category=category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"  {'ID':<6} {'Name':<24} {'SKU':<10} {'Price':>14} {'Stock':>10}")
    click.echo(f"  {'-'*68}")
    for p in products:
        marker = "*" if p.pinned else " "
        stock = f"{p.stock} {p.unit}"
        click.echo(f"{marker} {p.id:<6} {p.name:<24} {p.sku:<10} {p.price:>14} {stock:>10}")


@click.command("categories")
@click.pass_obj
def catalog_categories(app: PosApp) -> None:
    """List the product categories with how many products each holds."""
    session = app.open_session.handle()
    counts = app.browse_catalog.category_counts(session)

    if not counts:
        click.echo("No categories found.")
        return

    click.echo(f"All Products ({len(session.catalog)})")
    for category, count in counts.items():
        click.echo(f"{category} ({count})")
