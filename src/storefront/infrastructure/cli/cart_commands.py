"""CLI commands for the session cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.context import CliContext, pass_cli


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@pass_cli
def cart_add(obj: CliContext, product_id: int, quantity: int) -> None:
    """Put a product in the cart."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    cart = store.load()
    handler = AddToCartHandler(product_repo=bootstrap.product_repository(obj.settings), cart=cart)

    try:
        handler.handle(product_id, quantity)
    except DomainException as exc:
        raise obj.fail(exc)

    store.save(cart)
    line = cart.find_line(product_id)
    click.echo(f"'{line.product.name}' x{line.quantity} in cart.")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli
def cart_remove(obj: CliContext, product_id: int) -> None:
    """Remove a product's line from the cart."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    cart = store.load()

    try:
        RemoveFromCartHandler(cart).handle(product_id)
    except DomainException as exc:
        raise obj.fail(exc)

    store.save(cart)
    click.echo(f"Product #{product_id} removed from cart.")


@click.command("clear")
@pass_cli
def cart_clear(obj: CliContext) -> None:
    """Empty the cart."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    cart = store.load()
    cart.clear()
    store.save(cart)
    click.echo("Cart cleared.")


@click.command("show")
@pass_cli
def cart_show(obj: CliContext) -> None:
    """Show the cart's lines and totals."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    dto = ShowCartHandler(store.load()).handle()

    if not dto.lines:
        click.echo(obj.localizer.get("CartEmpty"))
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*56}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<24} {line.quantity:>5} {line.unit_price:>12} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Cart Total':<30} {dto.total:>26}")
    click.echo(f"  {'Average Unit Price':<30} {dto.average:>26}")
