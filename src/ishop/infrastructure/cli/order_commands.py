"""CLI commands for orders."""

from __future__ import annotations

import click

from ishop.application.create_order import CreateOrderHandler
from ishop.application.dto import OrderDTO
from ishop.application.show_order import ShowOrderHandler, to_order_dto
from ishop.domain.exceptions import DomainException
from ishop.infrastructure.bootstrap import open_session


def _order_lines(ctx: click.Context, param: click.Parameter, value: str) -> list[tuple[str, int]]:
    """Split 'C1:3,S1:2' into (product_id, quantity) pairs.

    Quantities are only checked for being whole numbers here; the order
    itself rejects zero, negative or over-stock amounts per item.
    """
    lines: list[tuple[str, int]] = []
    for entry in (chunk.strip() for chunk in value.split(",")):
        product_id, sep, qty_text = entry.rpartition(":")
        if not sep or not product_id.strip():
            raise click.BadParameter(f"'{entry}' is not ProductID:Qty (e.g. 'C1:3')")
        try:
            lines.append((product_id.strip(), int(qty_text)))
        except ValueError:
            raise click.BadParameter(
                f"quantity for {product_id.strip()} must be a whole number, got '{qty_text}'"
            )
    return lines


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Date:     {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*56}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Total Amount':<30} {dto.total:>25}")


@click.command("create")
@click.option("--customer", default="", help="Customer name.")
@click.option("--items", required=True, callback=_order_lines,
              help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def order_create(obj: dict, customer: str, items: list[tuple[str, int]]) -> None:
    """Create an order; stock is reserved as each item is added."""
    session = open_session(obj["data_dir"])

    try:
        builder = CreateOrderHandler(session.order_book, session.inventory).handle(customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for product_id, qty in items:
        try:
            builder.add_item(product_id, qty)
        except DomainException as exc:
            click.echo(f"Error adding item {product_id}: {exc}", err=True)

    placed = builder.finalize()

    try:
        session.save()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(to_order_dto(placed))


@click.command("list")
@click.pass_obj
def order_list(obj: dict) -> None:
    """Show every order placed so far."""
    session = open_session(obj["data_dir"])
    orders = ShowOrderHandler(session.order_book).list_all()

    if not orders:
        click.echo("No orders placed yet.")
        return

    for dto in orders:
        _display_order(dto)
        click.echo()


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(obj: dict, order_id: int) -> None:
    """Show details of an existing order."""
    session = open_session(obj["data_dir"])

    try:
        dto = ShowOrderHandler(session.order_book).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
