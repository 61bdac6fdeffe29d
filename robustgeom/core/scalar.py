"""Scalar capability contract.

Every coordinate handed to robustgeom must behave like an element of an
ordered ring: ``+``, ``-``, ``*``, unary ``-``, ``<`` and ``==``. The
predicates never divide and never take roots, so integers, rationals, exact
decimals and arbitrary user types with those operations all qualify.

Two families of scalars are distinguished at runtime:

* fixed-width integers (numpy integer scalars): arithmetic wraps silently on
  overflow, so predicates over them go through
  :class:`robustgeom.core.arithmetic.FixedWidthArithmetic`;
* everything else, evaluated exactly by
  :class:`robustgeom.core.arithmetic.ExactArithmetic`.
"""
from __future__ import annotations

import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

import numpy as np

from .constants import FLOAT_MODE_EXACT


@runtime_checkable
class Scalar(Protocol):
    """Ordered ring element usable as a coordinate."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


def is_scalar(value) -> bool:
    """Return True when ``value`` satisfies the capability contract."""
    if value is None or isinstance(value, (str, bytes, np.ndarray)):
        return False
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return False  # no total order
    if isinstance(value, np.generic) and not isinstance(value, (np.integer, np.floating)):
        return False
    if isinstance(value, (numbers.Real, Decimal)):
        return True
    return isinstance(value, Scalar)


def check_scalar(value):
    if not is_scalar(value):
        raise TypeError(f"{type(value).__name__} value {value!r} is not an ordered ring scalar")
    return value


def fixed_width_dtype(values: Iterable) -> Optional[np.dtype]:
    """Return the shared numpy integer dtype of ``values``, or None.

    None means at least one value is not a numpy integer, or two different
    integer dtypes are mixed; either way the exact backend must be used.
    """
    dtype = None
    for v in values:
        if not isinstance(v, np.integer):
            return None
        if dtype is None:
            dtype = v.dtype
        elif v.dtype != dtype:
            return None
    return dtype


def zero_like(value):
    """Additive identity of the same scalar kind as ``value``."""
    if isinstance(value, np.generic):
        return value.dtype.type(0)
    if isinstance(value, (Fraction, Decimal, float)):
        return type(value)(0)
    return 0


def one_like(value):
    """Multiplicative identity of the same scalar kind as ``value``."""
    if isinstance(value, np.generic):
        return value.dtype.type(1)
    if isinstance(value, (Fraction, Decimal, float)):
        return type(value)(1)
    return 1


def to_exact(value, float_mode: str = FLOAT_MODE_EXACT):
    """Convert ``value`` to a type whose ring operations never round or wrap.

    numpy integers become Python ints. Binary floats (Python or numpy) and
    Decimals become Fractions in exact mode; in native mode floats are kept.
    Ints, Fractions and user scalars are returned unchanged.
    """
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, (float, np.floating, Decimal)):
        if float_mode != FLOAT_MODE_EXACT:
            return float(value)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise ValueError(f"coordinate {value!r} is not finite")
            return Fraction(value)
        if not np.isfinite(value):
            raise ValueError(f"coordinate {value!r} is not finite")
        if isinstance(value, np.floating) and value.dtype.itemsize <= 8:
            value = float(value)  # widening half/single/double to a Python float is exact
        num, den = value.as_integer_ratio()
        return Fraction(num, den)
    return value


__all__ = [
    'Scalar',
    'is_scalar',
    'check_scalar',
    'fixed_width_dtype',
    'zero_like',
    'one_like',
    'to_exact',
]
