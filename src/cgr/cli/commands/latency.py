"""Test command implementation - measures registry response time."""

import click

from cgr.cli.core import resolve_current
from cgr.cli.error_boundary import cli_error_boundary
from cgr.cli.output import output_block
from cgr.core.context import CgrContext
from cgr.core.display import format_probe_value, format_registry_line
from cgr.core.errors import RegistryNotFoundError
from cgr.core.registries import lookup_registry
from cgr.core.resolver import match_marker


@click.command("test")
@click.argument("registry", required=False)
@click.pass_obj
@cli_error_boundary
def latency_cmd(ctx: CgrContext, registry: str | None) -> None:
    """Show response time for specific or all registries."""
    catalog = ctx.effective_catalog()
    if registry is None:
        to_test = list(catalog.values())
    else:
        try:
            to_test = [lookup_registry(catalog, registry)]
        except RegistryNotFoundError as e:
            output_block([f"   {e}"])
            return

    results = ctx.prober.probe(to_test)

    current = resolve_current(ctx)
    lines = [
        format_registry_line(
            match_marker(result.url, current), result.name, format_probe_value(result)
        )
        for result in results
    ]
    output_block(lines, machine=True)
