"""Registry latency probing abstraction."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from cgr.core.registries import RegistryEntry


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of probing one registry.

    elapsed_ms is always measured, even for failed requests; error marks a
    request that got no HTTP response.
    """

    name: str
    url: str
    elapsed_ms: int
    error: bool


class LatencyProber(ABC):
    """Measure round-trip time to a set of registries."""

    @abstractmethod
    def probe(self, entries: Sequence[RegistryEntry]) -> list[ProbeResult]:
        """Probe every entry and return results in the same order.

        A network failure is reported in the result, never raised.
        """
        ...
