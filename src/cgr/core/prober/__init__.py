from cgr.core.prober.abc import LatencyProber, ProbeResult
from cgr.core.prober.real import PROBE_PATH, RealLatencyProber

__all__ = ["PROBE_PATH", "LatencyProber", "ProbeResult", "RealLatencyProber"]
