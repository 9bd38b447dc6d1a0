"""Display formatting for registry listings.

All functions are pure (no I/O) and can be tested without managers or network.

A line looks like::

    * npm ---- https://registry.npmjs.org/
      yarn --- https://registry.yarnpkg.com/

The first two characters are the match marker and a space, the name is padded
with dashes to a fixed column, then the value (URL, latency or "Fetch Error").
"""

from cgr.core.prober import ProbeResult

FILLER_WIDTH = 8
FETCH_ERROR = "Fetch Error"


def filler(name: str, width: int = FILLER_WIDTH) -> str:
    """Dashes between name and value, at least one, framed by spaces."""
    return " " + "-" * max(1, width - len(name) - 1) + " "


def format_prefix(marker: str | None) -> str:
    if marker is None:
        return "  "
    return f"{marker} "


def format_registry_line(marker: str | None, name: str, value: str) -> str:
    return f"{format_prefix(marker)}{name}{filler(name)}{value}"


def format_probe_value(result: ProbeResult) -> str:
    if result.error:
        return FETCH_ERROR
    return f"{result.elapsed_ms}ms"
