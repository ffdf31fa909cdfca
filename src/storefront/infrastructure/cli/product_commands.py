"""CLI commands for catalog administration."""

from __future__ import annotations

import click

from storefront.application.dto import ProductViewModel
from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.context import CliContext, pass_cli


def _product_form(func):
    """Shared options of the add and update commands."""
    func = click.option("--details", default="", help="Longer product details.")(func)
    func = click.option("--description", default="", help="Short description.")(func)
    func = click.option("--stock", default="", help="Quantity in stock (e.g. 10).")(func)
    func = click.option("--price", default="", help="Price (e.g. 10.99).")(func)
    func = click.option("--name", default="", help="Product name.")(func)
    return func


def _save(obj: CliContext, view: ProductViewModel) -> None:
    store = bootstrap.cart_store(obj.settings, obj.session)
    service = bootstrap.product_service(obj.settings, store.load())

    try:
        product = service.save(view)
    except DomainException as exc:
        raise obj.fail(exc)

    click.echo(
        f"Product #{product.id} '{product.name}' saved at {product.price} "
        f"({product.quantity} in stock)"
    )


@click.command("add")
@_product_form
@pass_cli
def product_add(
    obj: CliContext, name: str, price: str, stock: str, description: str, details: str
) -> None:
    """Add a new product to the catalog."""
    _save(obj, ProductViewModel(
        name=name, price=price, stock=stock, description=description, details=details,
    ))


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@_product_form
@pass_cli
def product_update(
    obj: CliContext,
    product_id: int,
    name: str,
    price: str,
    stock: str,
    description: str,
    details: str,
) -> None:
    """Overwrite every field of an existing product."""
    _save(obj, ProductViewModel(
        id=product_id, name=name, price=price, stock=stock,
        description=description, details=details,
    ))


@click.command("list")
@pass_cli
def product_list(obj: CliContext) -> None:
    """List all products in the catalog."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    products = bootstrap.product_service(obj.settings, store.load()).list_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.price:>10} {p.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli
def product_show(obj: CliContext, product_id: int) -> None:
    """Show every field of one product."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    service = bootstrap.product_service(obj.settings, store.load())

    try:
        view = service.get_product_view_model(product_id)
    except DomainException as exc:
        raise obj.fail(exc)

    click.echo(f"Product #{view.id}")
    click.echo(f"Name:        {view.name}")
    click.echo(f"Price:       {view.price} {obj.settings.currency}")
    click.echo(f"Stock:       {view.stock}")
    click.echo(f"Description: {view.description}")
    click.echo(f"Details:     {view.details}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli
def product_delete(obj: CliContext, product_id: int) -> None:
    """Remove a product from the catalog (and from the session cart)."""
    store = bootstrap.cart_store(obj.settings, obj.session)
    cart = store.load()
    service = bootstrap.product_service(obj.settings, cart)

    try:
        service.delete_product(product_id)
    except DomainException as exc:
        raise obj.fail(exc)

    store.save(cart)
    click.echo(f"Product #{product_id} deleted.")
