"""Helpers shared by the cgr commands."""

from collections.abc import Mapping

from cgr.cli.output import user_output, warn
from cgr.core.context import CgrContext
from cgr.core.registries import RegistryEntry
from cgr.core.resolver import CurrentRegistries, match_marker, resolve_current_registries
from cgr.core.switching import SwitchOutcome

REGISTRY_SET = "registry has been set to:"


def resolve_current(ctx: CgrContext) -> CurrentRegistries:
    """Resolve current registries and warn about managers that failed.

    Raises:
        AllManagersFailedError: If no enabled manager could be queried
    """
    current = resolve_current_registries(ctx.enabled_managers())
    for failure in current.failures:
        warn(failure.message)
    return current


def registry_lines(
    entries: Mapping[str, RegistryEntry],
    current: CurrentRegistries,
    *,
    matched_only: bool = False,
) -> list[tuple[str | None, RegistryEntry]]:
    """Pair each entry with its marker, optionally keeping only matched ones."""
    lines: list[tuple[str | None, RegistryEntry]] = []
    for entry in entries.values():
        marker = match_marker(entry.url, current)
        if matched_only and marker is None:
            continue
        lines.append((marker, entry))
    return lines


def report_switch(outcomes: list[SwitchOutcome]) -> None:
    """Print one line per manager: the new registry, or the error."""
    lines = []
    for outcome in outcomes:
        if outcome.succeeded:
            lines.append(f"   {outcome.manager} {REGISTRY_SET} {outcome.url}")
        else:
            lines.append(f"   {outcome.error}")
    user_output()
    for line in lines:
        user_output(line)
    user_output()
