"""On/off command implementations - enable or disable optional managers."""

import click

from cgr.cli.error_boundary import cli_error_boundary
from cgr.cli.output import output_block
from cgr.core.context import CgrContext
from cgr.core.managers import OPTIONAL_MANAGERS, parse_manager_selector


def _parse_optional_manager(manager_type: str) -> str | None:
    """Canonical name of an optional manager, or None after printing why not."""
    name = parse_manager_selector(manager_type)
    if name is None:
        output_block(
            [
                f"   Unknown type: {manager_type}",
                f"   type must be oneOf {' | '.join(OPTIONAL_MANAGERS)}",
            ]
        )
        return None
    if name not in OPTIONAL_MANAGERS:
        output_block([f"   {name} is always enabled"])
        return None
    return name


@click.command("on")
@click.argument("manager_type", metavar="[TYPE]", default="pnpm")
@click.pass_obj
@cli_error_boundary
def on_cmd(ctx: CgrContext, manager_type: str) -> None:
    """Enable pnpm or other type."""
    name = _parse_optional_manager(manager_type)
    if name is None:
        return

    settings = ctx.settings_store.load()
    if settings.get(name):
        output_block([f"    cgr {name} already enabled"])
        return

    settings[name] = True
    ctx.settings_store.save(settings)
    output_block([f"    cgr enable {name} success"])


@click.command("off")
@click.argument("manager_type", metavar="[TYPE]", default="pnpm")
@click.pass_obj
@cli_error_boundary
def off_cmd(ctx: CgrContext, manager_type: str) -> None:
    """Disable pnpm or other type."""
    name = _parse_optional_manager(manager_type)
    if name is None:
        return

    settings = ctx.settings_store.load()
    if not settings.get(name):
        output_block([f"    cgr {name} already disabled"])
        return

    del settings[name]
    ctx.settings_store.save(settings)
    output_block([f"    cgr disable {name} success"])
