"""
Shared compute infrastructure for pygauss.

This module provides hardware detection, timing utilities, the row-parallel
execution pool and the verification tolerance bands shared by all backends.

IMPORTANT: This is NOT where solver backends live. Those go in
linsolve/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    device: Hardware detection (CPU name, usable core count)
    timing: Execution timing utilities
    parallel: Fork-join pool over contiguous row ranges
    tolerances: Ratio bands for solution verification
"""

from pygauss.core.compute.device import DeviceInfo, get_cpu_info
from pygauss.core.compute.parallel import RowPool, DEFAULT_GRAIN
from pygauss.core.compute.timing import Timer, timed
from pygauss.core.compute.tolerances import (
    RatioBand,
    DEFAULT_BAND,
    RELAXED_BAND,
    SYMMETRIC_BAND,
    select_band,
    resolve_band,
    BANDS,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "get_cpu_info",
    # Parallel execution
    "RowPool",
    "DEFAULT_GRAIN",
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "RatioBand",
    "DEFAULT_BAND",
    "RELAXED_BAND",
    "SYMMETRIC_BAND",
    "select_band",
    "resolve_band",
    "BANDS",
]
