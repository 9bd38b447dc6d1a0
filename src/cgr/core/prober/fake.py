"""Fake latency prober for testing."""

from collections.abc import Sequence

from cgr.core.prober.abc import LatencyProber, ProbeResult
from cgr.core.registries import RegistryEntry


class FakeLatencyProber(LatencyProber):
    """Returns configured timings without touching the network.

    Registries listed in failing report error=True; others report the time
    from timings, or default_ms when absent.
    """

    def __init__(
        self,
        *,
        timings: dict[str, int] | None = None,
        failing: set[str] | None = None,
        default_ms: int = 100,
    ) -> None:
        self._timings = timings or {}
        self._failing = failing or set()
        self._default_ms = default_ms
        self._probe_calls: list[list[str]] = []

    def probe(self, entries: Sequence[RegistryEntry]) -> list[ProbeResult]:
        self._probe_calls.append([entry.name for entry in entries])
        return [
            ProbeResult(
                name=entry.name,
                url=entry.url,
                elapsed_ms=self._timings.get(entry.name, self._default_ms),
                error=entry.name in self._failing,
            )
            for entry in entries
        ]

    @property
    def probe_calls(self) -> list[list[str]]:
        """Registry names passed to each probe() call.

        This property is for test assertions only.
        """
        return [list(call) for call in self._probe_calls]
