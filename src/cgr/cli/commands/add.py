"""Add command implementation - stores a custom registry."""

import click

from cgr.cli.error_boundary import cli_error_boundary
from cgr.cli.output import output_block
from cgr.core.context import CgrContext
from cgr.core.custom_store import add_custom_registry
from cgr.core.errors import RegistryConflictError


@click.command("add")
@click.argument("registry")
@click.argument("url")
@click.argument("home", required=False)
@click.pass_obj
@cli_error_boundary
def add_cmd(ctx: CgrContext, registry: str, url: str, home: str | None) -> None:
    """Add one custom registry."""
    try:
        add_custom_registry(ctx.custom_store, ctx.effective_catalog(), registry, url, home)
    except RegistryConflictError as e:
        output_block([f"   {e}"])
        return

    output_block([f"    add registry {registry} success"])
