"""List command implementation - shows all registries and which are in use."""

import click

from cgr.cli.core import registry_lines, resolve_current
from cgr.cli.error_boundary import cli_error_boundary
from cgr.cli.output import output_block
from cgr.core.context import CgrContext
from cgr.core.display import format_registry_line


@click.command("ls")
@click.pass_obj
@cli_error_boundary
def ls_cmd(ctx: CgrContext) -> None:
    """List all the registries."""
    current = resolve_current(ctx)
    lines = [
        format_registry_line(marker, entry.name, entry.url)
        for marker, entry in registry_lines(ctx.effective_catalog(), current)
    ]
    output_block(lines, machine=True)
