"""CLI commands for checkout and recorded orders."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import OrderDTO, OrderViewModel
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.context import CliContext, pass_cli


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  ({dto.date})")
    click.echo(f"Ship to: {dto.name}, {dto.address}, {dto.zip_code} {dto.city}, {dto.country}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*56}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<24} {line.quantity:>5} {line.unit_price:>12} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Order Total':<30} {dto.total:>26}")


@click.command("checkout")
@click.option("--name", default="", help="Customer name.")
@click.option("--address", default="", help="Street address.")
@click.option("--city", default="", help="City.")
@click.option("--zip", "zip_code", default="", help="Zip code.")
@click.option("--country", default="", help="Country.")
@pass_cli
def order_checkout(
    obj: CliContext, name: str, address: str, city: str, zip_code: str, country: str
) -> None:
    """Turn the session cart into an order."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    cart = store.load()
    handler = CheckoutHandler(
        order_repo=bootstrap.order_repository(obj.settings),
        product_repo=bootstrap.product_repository(obj.settings),
        cart=cart,
    )
    view = OrderViewModel(
        name=name, address=address, city=city, zip_code=zip_code, country=country
    )

    try:
        dto = handler.handle(view)
    except DomainException as exc:
        raise obj.fail(exc)

    store.save(cart)
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@pass_cli
def order_show(obj: CliContext, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=bootstrap.order_repository(obj.settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise obj.fail(exc)

    _display_order(dto)


@click.command("list")
@pass_cli
def order_list(obj: CliContext) -> None:
    """List every recorded order."""
    orders = ListOrdersHandler(order_repo=bootstrap.order_repository(obj.settings)).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<24} {'Date':<22} {'Total':>14}")
    click.echo("-" * 69)
    for dto in orders:
        click.echo(f"{dto.id:<6} {dto.name:<24} {dto.date:<22} {dto.total:>14}")
