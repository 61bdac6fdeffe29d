"""Central constants for the exact predicates.

Keeps the float-handling modes in one place
so they are referenced by name rather than scattered as literals.
"""
from __future__ import annotations

# Float handling
FLOAT_MODE_EXACT: str = 'exact'     # floats/Decimals converted losslessly to Fraction
FLOAT_MODE_NATIVE: str = 'native'   # floats used as-is (fast, not robust)
FLOAT_MODES = (FLOAT_MODE_EXACT, FLOAT_MODE_NATIVE)
DEFAULT_FLOAT_MODE: str = FLOAT_MODE_EXACT

__all__ = [
    'FLOAT_MODE_EXACT',
    'FLOAT_MODE_NATIVE',
    'FLOAT_MODES',
    'DEFAULT_FLOAT_MODE',
]
