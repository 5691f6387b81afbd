"""CLI commands for the local order store."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from wcrpc.domain.model.order import CUSTOM_ORDER_NUMBER_KEY, Order
from wcrpc.infrastructure.bootstrap import order_store, status_vocabulary
from wcrpc.infrastructure.config import Settings


@click.command("add")
@click.option("--id", "order_id", default=None, type=int, help="Order ID (defaults to the next free ID).")
@click.option("--number", "custom_number", default=None, help="Custom order number.")
@click.option("--status", default="pending", show_default=True, help="Initial status.")
@click.option("--unpublished", is_flag=True, default=False, help="Store the order as unpublished.")
@click.pass_obj
def order_add(
    settings: Settings,
    order_id: int | None,
    custom_number: str | None,
    status: str,
    unpublished: bool,
) -> None:
    """Add an order to the local store."""
    store = order_store(settings)

    if status not in status_vocabulary(settings).list_valid_statuses():
        raise click.ClickException(f'"{status}" is not a valid order status.')
    if order_id is not None and store.get_by_id(order_id) is not None:
        raise click.ClickException(f"Order #{order_id} already exists")

    order = Order(
        id=order_id if order_id is not None else store.next_id(),
        status=status,
        published=not unpublished,
    )
    if custom_number:
        order.update_metadata({CUSTOM_ORDER_NUMBER_KEY: custom_number})
    store.save(order)

    click.echo(f"Order #{order.id} added  (status={order.status})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    order = order_store(settings).get_by_id(order_id)
    if order is None:
        raise click.ClickException(f"Order #{order_id} not found")

    click.echo(f"Order #{order.id}  (status={order.status})")
    click.echo(f"Number:   {order.custom_order_number or '-'}")
    click.echo(f"Created:  {order.created_at.strftime('%Y-%m-%d %H:%M UTC')}")

    if order.metadata:
        click.echo()
        click.echo(f"  {'Meta key':<28} {'Value':<30}")
        click.echo(f"  {'-'*58}")
        for key, value in sorted(order.metadata.items()):
            click.echo(f"  {key:<28} {_format_meta(key, value):<30}")

    if order.notes:
        click.echo()
        click.echo("Notes:")
        for note in order.notes:
            click.echo(f"  [{note.created_at.strftime('%Y-%m-%d %H:%M')}] {note.text}")


def _format_meta(key: str, value: str | int) -> str:
    if key == "_date_shipped" and isinstance(value, int):
        return datetime.fromtimestamp(value, timezone.utc).strftime("%Y-%m-%d")
    return str(value)
