"""
Core protocols for pygauss.

These define structural interfaces that solver implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Capability-driven: use supports() for optional features
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Design(Protocol):
    """
    Minimal protocol for a problem description handed to a backend.

    The supports() method enables capability-driven extension: a design
    that can be regenerated from a seed advertises 'repeatable', so the
    original system can be rebuilt after elimination consumed it.
    """

    @property
    def n(self) -> int:
        """Dimension of the system."""
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this design supports a given capability.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a design and produces a parameter payload wrapped in
    a Result. Backends are stateless apart from construction-time
    configuration (worker count), which makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}[_{variant}]'
        Examples: 'cpu_gauss', 'cpu_gauss_parallel'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent solution (singularity)
            ValidationError: If design is invalid for this backend
        """
        ...
