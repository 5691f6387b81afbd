"""CLI commands for API users."""

from __future__ import annotations

import click

from wcrpc.domain.exceptions import RpcError
from wcrpc.infrastructure.bootstrap import identity_provider
from wcrpc.infrastructure.config import Settings
from wcrpc.infrastructure.persistence.json_identity_provider import ROLE_CAPABILITIES


@click.command("add")
@click.option("--username", required=True, help="Login name.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option(
    "--role",
    default="contributor",
    show_default=True,
    type=click.Choice(sorted(ROLE_CAPABILITIES)),
    help="Role, which decides the user's capabilities.",
)
@click.pass_obj
def user_add(settings: Settings, username: str, password: str, role: str) -> None:
    """Create or replace an API user."""
    try:
        identity_provider(settings).add_user(username, password, role)
    except RpcError as exc:
        raise click.ClickException(exc.message)

    click.echo(f"User '{username}' saved  (role={role})")
