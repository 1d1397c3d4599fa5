"""Solver backends for dense linear systems."""

from pygauss.linsolve.backends.cpu import CPUGaussBackend, CPUParallelGaussBackend

__all__ = [
    "CPUGaussBackend",
    "CPUParallelGaussBackend",
]
