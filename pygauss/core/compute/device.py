"""
Hardware detection.

Provides the CPU description and core count used to size the row pool.
"""

from dataclasses import dataclass
import os
import platform


@dataclass(frozen=True)
class DeviceInfo:
    """
    Information about the compute device.

    Attributes:
        name: Human-readable processor name
        n_cores: Number of logical CPUs usable by this process
    """
    name: str
    n_cores: int

    def __str__(self) -> str:
        return f"CPU ({self.name}, {self.n_cores} cores)"


def _usable_cpu_count() -> int:
    """Logical CPUs available to this process (affinity-aware where supported)."""
    if hasattr(os, 'sched_getaffinity'):
        try:
            return max(1, len(os.sched_getaffinity(0)))
        except OSError:
            pass
    return max(1, os.cpu_count() or 1)


def get_cpu_info() -> DeviceInfo:
    """
    Get CPU device info.

    Returns:
        DeviceInfo for the CPU
    """
    processor = platform.processor()
    if not processor:
        processor = platform.machine() or "Unknown CPU"

    return DeviceInfo(name=processor, n_cores=_usable_cpu_count())
