import logging
from pathlib import Path

import click

from ishop.infrastructure.bootstrap import default_data_dir
from ishop.infrastructure.cli.order_commands import order_create, order_list, order_show
from ishop.infrastructure.cli.product_commands import (
    product_add,
    product_discount,
    product_list,
    product_remove,
    product_show,
    product_update,
)
from ishop.infrastructure.cli.report_commands import report


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding products.txt and orders.txt.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """iShop — merchandise inventory and orders"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"data_dir": data_dir or default_data_dir()}


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_discount)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
cli.add_command(report)
