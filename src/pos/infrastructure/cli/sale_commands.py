"""CLI commands for ringing up sales."""

from __future__ import annotations

import click

from pos.application.dto import CartDTO
from pos.application.session import PosSession
from pos.domain.exceptions import DomainException
from pos.domain.model.sale import PaymentMethod, SaleStatus
from pos.infrastructure.bootstrap import PosApp


def _parse_items(raw_items: tuple[str, ...]) -> list[tuple[int, str]]:
    """Parse ('1:3', '7:2.5') into [(product_id, quantity_text), ...]."""
    items: list[tuple[int, str]] = []
    for pair in raw_items:
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(id_str)
        except ValueError:
            raise click.BadParameter(f"Invalid product ID '{id_str}'.")
        items.append((product_id, qty_str.strip()))
    return items


def _fill_cart(app: PosApp, session: PosSession, items: list[tuple[int, str]]) -> None:
    for product_id, qty_str in items:
        if not app.enter_quantity.handle(session, product_id, qty_str):
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product #{product_id}."
            )
        app.add_to_cart.handle_custom(session, product_id)


def _display_cart(cart: CartDTO) -> None:
    click.echo(f"  {'Product':<24} {'Qty':>10} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*65}")
    for line in cart.lines:
        qty = f"{line.quantity} {line.unit}"
        click.echo(
            f"  {line.name:<24} {qty:>10} {line.unit_price:>14} {line.line_total:>14}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Total (' + cart.item_count + ' items)':<35} {cart.total:>30}")


@click.command("checkout")
@click.option(
    "--item", "raw_items", multiple=True,
    help="Cart line as 'ProductID:Quantity'; repeat for more lines.",
)
@click.option("--customer", "customer_id", type=int, default=None, help="Customer ID (omit for walk-in).")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=None,
    help="Payment method.",
)
@click.option(
    "--status",
    type=click.Choice([s.value for s in SaleStatus]),
    default=None,
    help="Order status to record.",
)
@click.pass_context
def sale_checkout(
    ctx: click.Context,
    raw_items: tuple[str, ...],
    customer_id: int | None,
    payment: str | None,
    status: str | None,
) -> None:
    """Build a cart and complete the sale."""
    app: PosApp = ctx.obj
    items = _parse_items(raw_items)
    session = app.open_session.handle()

    try:
        _fill_cart(app, session, items)
        app.select_customer.handle(session, customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if payment is not None:
        session.payment_method = PaymentMethod(payment)
    if status is not None:
        session.sale_status = SaleStatus(status)

    if not session.cart.is_empty:
        _display_cart(app.update_cart.show(session))

    result = app.checkout.handle(session)
    if not result.success:
        ctx.exit(1)


@click.command("today")
@click.pass_obj
def sale_today(app: PosApp) -> None:
    """Show today's orders."""
    session = app.open_session.handle()
    orders = app.todays_orders.handle(session)

    if not orders:
        click.echo("No orders today.")
        return

    click.echo(f"{'ID':<6} {'Time':<6} {'Customer':<24} {'Items':>5} {'Payment':<14} {'Status':<11} {'Total':>14}")
    click.echo("-" * 86)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.time:<6} {o.customer_name:<24} {o.item_count:>5} "
            f"{o.payment_method:<14} {o.status:<11} {o.total_amount:>14}"
        )
