"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from ishop.application.add_product import AddProductHandler
from ishop.application.apply_discount import ApplyDiscountHandler
from ishop.application.dto import NewProductSpec, ProductDTO
from ishop.application.remove_product import RemoveProductHandler
from ishop.application.show_products import (
    LOW_STOCK_THRESHOLD,
    ShowProductsHandler,
    by_category,
    by_price_range,
    low_stock,
)
from ishop.application.update_product import UpdateProductHandler
from ishop.domain.exceptions import DomainException
from ishop.infrastructure.bootstrap import open_session


def _echo_product(dto: ProductDTO) -> None:
    extra = " | ".join(f"{key}: {value}" for key, value in dto.details.items())
    click.echo(
        f"{dto.id:<8} {dto.name:<24} {dto.category:<11} {dto.price:>12} {dto.stock:>6}  {extra}"
    )


def _echo_table(products: list[ProductDTO]) -> None:
    click.echo(f"{'ID':<8} {'Name':<24} {'Category':<11} {'Price':>12} {'Stock':>6}  Details")
    click.echo("-" * 80)
    for dto in products:
        _echo_product(dto)


@click.command("add")
@click.option(
    "--category",
    required=True,
    type=click.Choice(["clothing", "stationery", "accessory"], case_sensitive=False),
    help="Product variant.",
)
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 1500.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Initial stock.")
@click.option("--size", default="", help="Clothing size.")
@click.option("--color", default="", help="Clothing color.")
@click.option("--material", default="", help="Clothing material.")
@click.option("--brand", default="", help="Stationery brand.")
@click.option("--item-type", default="", help="Stationery item type.")
@click.option("--electronic/--not-electronic", default=False, help="Accessory is electronic.")
@click.option("--accessory-type", default="", help="Accessory type.")
@click.pass_obj
def product_add(
    obj: dict,
    category: str,
    product_id: str,
    name: str,
    price: str,
    stock: int,
    size: str,
    color: str,
    material: str,
    brand: str,
    item_type: str,
    electronic: bool,
    accessory_type: str,
) -> None:
    """Add a new product to the catalog."""
    session = open_session(obj["data_dir"])
    spec = NewProductSpec(
        category=category,
        product_id=product_id,
        name=name,
        price=price,
        stock=stock,
        attributes={
            "size": size,
            "color": color,
            "material": material,
            "brand": brand,
            "item_type": item_type,
            "is_electronic": electronic,
            "accessory_type": accessory_type,
        },
    )

    try:
        added = AddProductHandler(session.inventory).handle(spec)
        session.save()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {added.id} '{added.name}' added at {added.price}")


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@click.option("--min-price", default=None, help="Lower price bound (inclusive).")
@click.option("--max-price", default=None, help="Upper price bound (inclusive).")
@click.option(
    "--low-stock", "low_stock_only", is_flag=True, default=False,
    help=f"Only products with stock below {LOW_STOCK_THRESHOLD}.",
)
@click.pass_obj
def product_list(
    obj: dict,
    category: str | None,
    min_price: str | None,
    max_price: str | None,
    low_stock_only: bool,
) -> None:
    """List products, optionally filtered."""
    session = open_session(obj["data_dir"])
    handler = ShowProductsHandler(session.inventory)

    try:
        if category is not None:
            products = handler.handle(by_category(category))
        elif min_price is not None or max_price is not None:
            if min_price is None or max_price is None:
                raise click.UsageError("--min-price and --max-price go together")
            products = handler.handle(by_price_range(min_price, max_price))
        elif low_stock_only:
            products = handler.handle(low_stock())
        else:
            products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"=== {session.inventory.name} Inventory ===")
    _echo_table(products)
    click.echo(f"Total: {len(products)} products")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(obj: dict, product_id: str) -> None:
    """Show one product in detail."""
    session = open_session(obj["data_dir"])

    try:
        dto = ShowProductsHandler(session.inventory).find(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product ID: {dto.id}")
    click.echo(f"Name:       {dto.name}")
    click.echo(f"Category:   {dto.category}")
    click.echo(f"Price:      {dto.price}")
    click.echo(f"Stock:      {dto.stock}")
    for key, value in dto.details.items():
        click.echo(f"{key + ':':<11} {value}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--restock", default=None, type=int, help="Units to add (negative to remove).")
@click.pass_obj
def product_update(obj: dict, product_id: str, price: str | None, restock: int | None) -> None:
    """Update a product's price or stock level."""
    if price is None and restock is None:
        raise click.UsageError("Nothing to update: pass --price and/or --restock")

    session = open_session(obj["data_dir"])

    try:
        updated = UpdateProductHandler(session.inventory).handle(
            product_id, new_price=price, stock_delta=restock
        )
        session.save()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {updated.id} now {updated.price}, stock {updated.stock}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_remove(obj: dict, product_id: str) -> None:
    """Remove a product from the catalog."""
    session = open_session(obj["data_dir"])

    if not RemoveProductHandler(session.inventory).handle(product_id):
        raise click.ClickException(f"Product '{product_id}' not found")

    try:
        session.save()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} removed successfully.")


@click.command("discount")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--percent", required=True, help="Discount percentage (0-100).")
@click.pass_obj
def product_discount(obj: dict, product_id: str, percent: str) -> None:
    """Quote a discounted price for a product."""
    session = open_session(obj["data_dir"])

    try:
        quote = ApplyDiscountHandler(session.inventory).handle(product_id, percent)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Original Price: {quote.original_price}")
    click.echo(f"Discounted Price ({quote.discount_percent}% off): {quote.discounted_price}")
