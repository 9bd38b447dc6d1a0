"""Point package managers at a registry."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cgr.core.errors import ManagerQueryError
from cgr.core.managers import PackageManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwitchOutcome:
    """Result of one set-registry call; error is None on success."""

    manager: str
    url: str
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def switch_registry(managers: Sequence[PackageManager], url: str) -> list[SwitchOutcome]:
    """Set url on each manager in order.

    A failing manager does not stop the others; its error is kept in its outcome.
    """
    outcomes: list[SwitchOutcome] = []
    for manager in managers:
        try:
            manager.set_registry(url)
        except ManagerQueryError as e:
            logger.debug("Failed to set %s registry: %s", manager.name, e.message)
            outcomes.append(SwitchOutcome(manager=manager.name, url=url, error=e.message))
            continue
        outcomes.append(SwitchOutcome(manager=manager.name, url=url))
    return outcomes
