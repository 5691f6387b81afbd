from dataclasses import replace

import click

from wcrpc.infrastructure import bootstrap
from wcrpc.infrastructure.cli.call_commands import call_status, call_tracking
from wcrpc.infrastructure.cli.order_commands import order_add, order_show
from wcrpc.infrastructure.cli.user_commands import user_add
from wcrpc.infrastructure.config import Settings
from wcrpc.infrastructure.logging_config import setup_logging
from wcrpc.infrastructure.transport.server import serve as run_server


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """wcrpc: XML-RPC order tracking and status API"""
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    ctx.obj = settings


@cli.command("serve")
@click.option("--host", default=None, help="Interface to bind (overrides WCRPC_HOST).")
@click.option("--port", default=None, type=int, help="Port to bind (overrides WCRPC_PORT).")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None) -> None:
    """Run the XML-RPC server."""
    if host is not None or port is not None:
        settings = replace(
            settings, host=host or settings.host, port=port or settings.port
        )
    run_server(bootstrap.endpoint(settings), settings)


@cli.group()
def order() -> None:
    """Manage local orders."""


@cli.group()
def user() -> None:
    """Manage API users."""


@cli.group()
def call() -> None:
    """Call a running XML-RPC server."""


# Register subcommands
order.add_command(order_add)
order.add_command(order_show)
user.add_command(user_add)
call.add_command(call_status)
call.add_command(call_tracking)
