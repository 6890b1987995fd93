"""CLI command for the inventory statistics report."""

from __future__ import annotations

import click

from ishop.application.show_report import ShowReportHandler
from ishop.infrastructure.bootstrap import open_session


@click.command("report")
@click.pass_obj
def report(obj: dict) -> None:
    """Show inventory statistics."""
    session = open_session(obj["data_dir"])
    dto = ShowReportHandler(session.inventory).handle()

    click.echo("=== Inventory Statistics ===")
    if not dto.category_counts:
        click.echo("No products in inventory.")
        return

    click.echo("Products by Category:")
    for category, count in dto.category_counts:
        click.echo(f"  {category}: {count} products")
    click.echo(f"Most Expensive Product: {dto.most_expensive_name} ({dto.most_expensive_price})")
    click.echo(f"Total Products: {dto.total_products}")
    click.echo(f"Total Stock Value: {dto.total_value}")
    click.echo(f"Total Stock Quantity: {dto.total_stock}")
