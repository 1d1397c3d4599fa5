"""
Capability string constants for pygauss.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pygauss.core.capabilities import CAPABILITY_REPEATABLE

    if design.supports(CAPABILITY_REPEATABLE):
        original = design.regenerate()
"""

# System is held in memory as numpy arrays
CAPABILITY_MATERIALIZED = 'materialized'

# System can be regenerated bit-identically (seeded construction)
CAPABILITY_REPEATABLE = 'repeatable'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
})

__all__ = [
    'CAPABILITY_MATERIALIZED',
    'CAPABILITY_REPEATABLE',
    'ALL_CAPABILITIES',
]
