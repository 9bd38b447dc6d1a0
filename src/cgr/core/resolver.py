"""Determine which registry each enabled package manager is using."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from cgr.core.errors import AllManagersFailedError, ManagerQueryError
from cgr.core.managers import MANAGER_MARKERS, PackageManager
from cgr.core.registries import normalize_registry_url

logger = logging.getLogger(__name__)

COMBINED_MARKER = "*"


@dataclass(frozen=True)
class CurrentRegistry:
    """Registry reported by one manager, normalized to end with "/"."""

    manager: str
    url: str


@dataclass(frozen=True)
class CurrentRegistries:
    """Result of querying the enabled managers.

    entries keeps one item per manager that answered, in query order, duplicates
    included. failures holds the managers that could not be queried.
    """

    entries: list[CurrentRegistry]
    failures: list[ManagerQueryError] = field(default_factory=list)

    def uses(self, url: str) -> bool:
        return any(entry.url == url for entry in self.entries)


def resolve_current_registries(managers: Sequence[PackageManager]) -> CurrentRegistries:
    """Query each manager in order for its configured registry.

    A manager whose query fails is left out of the result and recorded as a
    failure, so callers can still show the remaining managers.

    Args:
        managers: Managers to query, in display order (npm, yarn, pnpm)

    Returns:
        CurrentRegistries with successful answers and recorded failures

    Raises:
        AllManagersFailedError: If every manager failed
    """
    entries: list[CurrentRegistry] = []
    failures: list[ManagerQueryError] = []

    for manager in managers:
        try:
            url = manager.get_registry()
        except ManagerQueryError as e:
            logger.debug("Query failed for %s: %s", manager.name, e.message)
            failures.append(e)
            continue
        entries.append(CurrentRegistry(manager=manager.name, url=normalize_registry_url(url)))

    if failures and not entries:
        raise AllManagersFailedError(failures)

    logger.debug("Current registries: %s", [(e.manager, e.url) for e in entries])
    return CurrentRegistries(entries=entries, failures=failures)


def match_marker(url: str, current: CurrentRegistries) -> str | None:
    """Return the marker for a registry URL.

    Returns:
        None if no manager uses url, "*" if more than one does, otherwise the
        letter of the single manager ("N", "Y" or "P")
    """
    matches = [entry for entry in current.entries if entry.url == url]
    if not matches:
        return None
    if len(matches) > 1:
        return COMBINED_MARKER
    return MANAGER_MARKERS[matches[0].manager]
