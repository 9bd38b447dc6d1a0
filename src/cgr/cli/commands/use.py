"""Use command implementation - switches package managers to a registry."""

import click

from cgr.cli.core import report_switch
from cgr.cli.error_boundary import cli_error_boundary
from cgr.cli.output import output_block
from cgr.core.context import CgrContext
from cgr.core.errors import AllManagersFailedError, ManagerQueryError, RegistryNotFoundError
from cgr.core.managers import PackageManager, parse_manager_selector
from cgr.core.managers.types import SELECTOR_HELP
from cgr.core.registries import lookup_registry
from cgr.core.switching import switch_registry


def _select_managers(ctx: CgrContext, manager_type: str | None) -> list[PackageManager] | None:
    """Managers targeted by `use`, or None after printing why there are none."""
    if manager_type is None:
        return ctx.enabled_managers()

    name = parse_manager_selector(manager_type)
    if name is None:
        output_block(["   cgr use <registry> [type]", f"   type must be oneOf {SELECTOR_HELP}"])
        return None

    if not ctx.is_manager_enabled(name):
        output_block([f"   cgr {name} disabled, enable {name}:", f"   cgr on {name}"])
        return None

    return [ctx.managers[name]]


@click.command("use")
@click.argument("registry")
@click.argument("manager_type", metavar="[TYPE]", required=False)
@click.pass_obj
@cli_error_boundary
def use_cmd(ctx: CgrContext, registry: str, manager_type: str | None) -> None:
    """Change registry to REGISTRY.

    TYPE limits the change to one manager: npm (n), yarn (y) or pnpm (p).
    Without it every enabled manager is switched.
    """
    try:
        entry = lookup_registry(ctx.effective_catalog(), registry)
    except RegistryNotFoundError as e:
        output_block([f"   {e}"])
        return

    managers = _select_managers(ctx, manager_type)
    if managers is None:
        return

    outcomes = switch_registry(managers, entry.url)

    # Only fatal when no targeted manager could be updated
    if outcomes and not any(outcome.succeeded for outcome in outcomes):
        raise AllManagersFailedError(
            [ManagerQueryError(outcome.manager, outcome.error or "") for outcome in outcomes]
        )

    report_switch(outcomes)
