"""CLI commands that call a running server over XML-RPC."""

from __future__ import annotations

import xmlrpc.client
from collections.abc import Callable
from typing import Any

import click

from wcrpc.infrastructure.config import Settings


def _call(settings: Settings, url: str | None, method: str, params: dict[str, Any]) -> None:
    target = url or f"http://{settings.host}:{settings.port}{settings.rpc_path}"
    proxy = xmlrpc.client.ServerProxy(target, allow_none=True)

    # Leave unset options out of the struct entirely
    payload = {key: value for key, value in params.items() if value is not None}

    try:
        result = getattr(proxy, f"{settings.namespace}.{method}")(payload)
    except xmlrpc.client.Fault as fault:
        raise click.ClickException(f"[{fault.faultCode}] {fault.faultString}")
    except (OSError, xmlrpc.client.ProtocolError) as exc:
        raise click.ClickException(f"Cannot reach {target}: {exc}")

    click.echo(result)


def _common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option("--url", default=None, help="Server URL (defaults to the configured host/port/path).")(func)
    func = click.option("--test-mode", is_flag=True, default=False, help="Validate only, change nothing.")(func)
    func = click.option("--password", prompt=True, hide_input=True)(func)
    func = click.option("--username", required=True)(func)
    func = click.option("--order", "order_number", required=True, help="Order ID or custom order number.")(func)
    return func


@click.command("tracking")
@_common_options
@click.option("--provider", "tracking_provider", default="", help="Tracking provider ID, e.g. ups.")
@click.option("--number", "tracking_number", required=True, help="Tracking number.")
@click.option("--date-shipped", default=None, help="Ship date as YYYY-MM-DD.")
@click.option("--custom-provider", default=None, help="Custom provider name.")
@click.option("--custom-link", default=None, help="Custom tracking link.")
@click.option("--status", "order_status", default=None, help="Also move the order to this status.")
@click.pass_obj
def call_tracking(
    settings: Settings,
    order_number: str,
    username: str,
    password: str,
    test_mode: bool,
    url: str | None,
    tracking_provider: str,
    tracking_number: str,
    date_shipped: str | None,
    custom_provider: str | None,
    custom_link: str | None,
    order_status: str | None,
) -> None:
    """Update tracking information for an order."""
    _call(
        settings,
        url,
        "updateOrderTracking",
        {
            "username": username,
            "password": password,
            "order_number": order_number,
            "tracking_provider": tracking_provider,
            "tracking_number": tracking_number,
            "date_shipped": date_shipped,
            "custom_tracking_provider": custom_provider,
            "custom_tracking_link": custom_link,
            "order_status": order_status,
            "test_mode": test_mode,
        },
    )


@click.command("status")
@_common_options
@click.option("--status", "order_status", required=True, help="New order status.")
@click.option("--message", default=None, help="Note attached to the status change.")
@click.pass_obj
def call_status(
    settings: Settings,
    order_number: str,
    username: str,
    password: str,
    test_mode: bool,
    url: str | None,
    order_status: str,
    message: str | None,
) -> None:
    """Update the status of an order."""
    _call(
        settings,
        url,
        "updateOrderStatus",
        {
            "username": username,
            "password": password,
            "order_number": order_number,
            "order_status": order_status,
            "message": message,
            "test_mode": test_mode,
        },
    )
