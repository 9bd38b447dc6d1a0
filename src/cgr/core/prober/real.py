"""Production latency prober using concurrent httpx requests."""

import asyncio
import logging
import time
from collections.abc import Sequence

import httpx

from cgr.core.prober.abc import LatencyProber, ProbeResult
from cgr.core.registries import RegistryEntry

logger = logging.getLogger(__name__)

# Requested under each registry URL; not expected to exist, any response will do.
PROBE_PATH = "pedding"


class RealLatencyProber(LatencyProber):
    """Fires one GET per registry concurrently and waits for all of them.

    No timeout is set beyond the httpx default.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Create prober.

        Args:
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._transport = transport

    def probe(self, entries: Sequence[RegistryEntry]) -> list[ProbeResult]:
        if not entries:
            return []
        return asyncio.run(self._probe_all(entries))

    async def _probe_all(self, entries: Sequence[RegistryEntry]) -> list[ProbeResult]:
        async with httpx.AsyncClient(transport=self._transport) as client:
            results = await asyncio.gather(*(self._probe_one(client, entry) for entry in entries))
        return list(results)

    async def _probe_one(self, client: httpx.AsyncClient, entry: RegistryEntry) -> ProbeResult:
        start = time.perf_counter()
        error = False
        try:
            response = await client.get(entry.url + PROBE_PATH)
            logger.debug("Probe %s -> HTTP %d", entry.name, response.status_code)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Probe %s failed: %s: %s", entry.name, type(e).__name__, e)
            error = True
        elapsed_ms = max(0, round((time.perf_counter() - start) * 1000))
        return ProbeResult(name=entry.name, url=entry.url, elapsed_ms=elapsed_ms, error=error)
