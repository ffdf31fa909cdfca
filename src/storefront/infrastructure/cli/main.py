import click
import structlog
from pydantic import ValidationError as SettingsError

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.cart_commands import cart_add, cart_clear, cart_remove, cart_show
from storefront.infrastructure.cli.context import CliContext
from storefront.infrastructure.cli.order_commands import order_checkout, order_list, order_show
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.config.settings import StorefrontSettings
from storefront.infrastructure.observability.logger_factory import configure_logging

logger = structlog.get_logger(__name__)


@click.group()
@click.option("--lang", type=click.Choice(["en", "fr"]), default=None, help="Message language.")
@click.option("--session", default="default", show_default=True, help="Shopper session name.")
@click.pass_context
def cli(ctx: click.Context, lang: str | None, session: str) -> None:
    """Storefront catalog administration and shopping cart"""
    try:
        settings = StorefrontSettings()
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(settings.log_level, settings.log_format)
    try:
        bootstrap.cart_store(settings, session)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--session")

    ctx.obj = CliContext(
        settings=settings,
        localizer=bootstrap.localizer(settings, lang),
        session=session,
    )
    logger.debug(
        "cli_invoked",
        command=ctx.invoked_subcommand,
        session=session,
        language=lang or settings.language,
    )


@cli.group()
def product() -> None:
    """Administer the product catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopper's cart."""


@cli.group()
def order() -> None:
    """Check out and browse orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_checkout)
order.add_command(order_list)
order.add_command(order_show)
