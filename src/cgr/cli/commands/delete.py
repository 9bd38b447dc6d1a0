"""Del command implementation - removes a custom registry."""

import logging

import click

from cgr.cli.core import report_switch, resolve_current
from cgr.cli.error_boundary import cli_error_boundary
from cgr.cli.output import output_block
from cgr.core.context import CgrContext
from cgr.core.custom_store import remove_custom_registry
from cgr.core.registries import FALLBACK_REGISTRY
from cgr.core.switching import switch_registry

logger = logging.getLogger(__name__)


@click.command("del")
@click.argument("registry")
@click.pass_obj
@cli_error_boundary
def del_cmd(ctx: CgrContext, registry: str) -> None:
    """Delete one custom registry.

    If a package manager is using it, every enabled manager is switched back
    to the npm registry first.
    """
    entry = ctx.custom_store.load().get(registry)
    if entry is None:
        output_block([f"   '{registry}' is not a custom registry"])
        return

    current = resolve_current(ctx)
    if current.uses(entry.url):
        fallback = ctx.catalog[FALLBACK_REGISTRY]
        logger.debug("Registry %s is in use, falling back to %s", registry, fallback.url)
        report_switch(switch_registry(ctx.enabled_managers(), fallback.url))

    remove_custom_registry(ctx.custom_store, registry)

    output_block([f"    delete registry {registry} success"])
