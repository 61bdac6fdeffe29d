"""Overflow-free arithmetic backends behind the orientation predicates.

Every predicate in robustgeom reduces to one of two questions:

* the sign of ``a*b - c*d`` where each factor is a coordinate or the
  difference of two coordinates (slope comparison), or
* the sign of ``a*a + b*b - (c*c + d*d)`` (distance comparison).

A backend answers them for one scalar kind. Factors are first turned into
*terms* (``term`` / ``diff`` / ``neg``) and then compared with
``cmp_products`` / ``cmp_sum_of_squares``. Both comparisons return -1, 0 or 1.

Fixed-width bound argument (n = bit width of the dtype, h = n/2)
-----------------------------------------------------------------
1. Coordinates are mapped to n-bit unsigned words by an order preserving
   offset (flip the sign bit). The difference of two n-bit signed values lies
   in ``[-(2^n - 1), 2^n - 1]``, so it is stored as a sign plus an n-bit
   unsigned magnitude computed as ``max - min`` of the offsets: no wrap.
2. Magnitudes are split into h-bit halves. Each half product is at most
   ``(2^h - 1)^2 < 2^n``. The middle column sums three values below ``2^h``
   and stays below ``2^(h+2) <= 2^n``. The high word is the exact high half
   of a product below ``2^(2n)``, and each of its partial sums is smaller than
   the final value, so it never wraps either.
3. A sum of two squares is below ``2^(2n+1)``: it is kept as a
   (carry, high, low) triple, and every addition checks headroom first.
No step needs an integer type wider than the input dtype.
"""
from __future__ import annotations

from functools import lru_cache

import numpy as np

from .constants import DEFAULT_FLOAT_MODE, FLOAT_MODES
from .logging_utils import get_logger
from .scalar import fixed_width_dtype, to_exact

logger = get_logger('robustgeom.arithmetic')


def _sign_of(left, right) -> int:
    if left > right:
        return 1
    if left < right:
        return -1
    return 0


class FixedWidthArithmetic:
    """Exact predicates for one numpy integer dtype, computed within that width.

    Terms are ``(sign, magnitude)`` pairs with ``sign`` in {-1, 0, 1} and the
    magnitude an unsigned word of the same width as the dtype.
    """

    def __init__(self, dtype):
        dtype = np.dtype(dtype)
        if dtype.kind not in 'iu':
            raise TypeError(f"fixed-width arithmetic needs an integer dtype, got {dtype}")
        self.dtype = dtype
        self.bits = dtype.itemsize * 8
        self.utype = np.dtype(f'u{dtype.itemsize}').type
        u = self.utype
        self._zero = u(0)
        self._one = u(1)
        self._max = u(np.iinfo(u).max)
        self._half = u(self.bits // 2)
        self._low_mask = u((1 << (self.bits // 2)) - 1)
        self._bias = u(1 << (self.bits - 1)) if dtype.kind == 'i' else u(0)

    def __repr__(self):
        return f'FixedWidthArithmetic({self.dtype})'

    # -- terms -----------------------------------------------------------
    def _offset(self, x):
        """Order-preserving map of a dtype value onto its unsigned word."""
        raw = np.asarray(x, dtype=self.dtype).view(self.utype)[()]
        return raw ^ self._bias

    def term(self, x):
        u = self._offset(x)
        if u > self._bias:
            return (1, u - self._bias)
        if u < self._bias:
            return (-1, self._bias - u)
        return (0, self._zero)

    def diff(self, a, b):
        """Term holding ``a - b``."""
        ua = self._offset(a)
        ub = self._offset(b)
        if ua > ub:
            return (1, ua - ub)
        if ua < ub:
            return (-1, ub - ua)
        return (0, self._zero)

    def neg(self, t):
        return (-t[0], t[1])

    # -- double-word helpers ----------------------------------------------
    def _mul_words(self, a, b):
        """Full product of two unsigned words as (high, low)."""
        h, m = self._half, self._low_mask
        a1, a0 = a >> h, a & m
        b1, b0 = b >> h, b & m
        p00 = a0 * b0
        p01 = a0 * b1
        p10 = a1 * b0
        p11 = a1 * b1
        mid = (p00 >> h) + (p01 & m) + (p10 & m)
        lo = (p00 & m) | ((mid & m) << h)
        hi = p11 + (p01 >> h) + (p10 >> h) + (mid >> h)
        return hi, lo

    def _add_words(self, x, y):
        """``x + y`` as (carry, sum) without letting the word wrap."""
        room = self._max - y
        if x > room:
            return self._one, x - room - self._one
        return self._zero, x + y

    def _add_wide(self, x, y):
        c0, lo = self._add_words(x[1], y[1])
        c1, hi = self._add_words(x[0], y[0])
        c2, hi = self._add_words(hi, c0)
        return (c1 + c2, hi, lo)

    @staticmethod
    def _cmp_words(xs, ys) -> int:
        for x, y in zip(xs, ys):
            if x != y:
                return 1 if x > y else -1
        return 0

    def _product(self, s, t):
        sign = s[0] * t[0]
        if sign == 0:
            return (0, self._zero, self._zero)
        hi, lo = self._mul_words(s[1], t[1])
        return (sign, hi, lo)

    # -- comparisons ---------------------------------------------------------
    def cmp_products(self, a, b, c, d) -> int:
        """Sign of ``a*b - c*d`` for terms a, b, c, d."""
        left = self._product(a, b)
        right = self._product(c, d)
        if left[0] != right[0]:
            return 1 if left[0] > right[0] else -1
        mag = self._cmp_words(left[1:], right[1:])
        return mag if left[0] >= 0 else -mag

    def cmp_sum_of_squares(self, a, b, c, d) -> int:
        """Sign of ``a*a + b*b - (c*c + d*d)`` for terms a, b, c, d."""
        left = self._add_wide(self._mul_words(a[1], a[1]), self._mul_words(b[1], b[1]))
        right = self._add_wide(self._mul_words(c[1], c[1]), self._mul_words(d[1], d[1]))
        return self._cmp_words(left, right)


class ExactArithmetic:
    """Predicates over unbounded scalars (int, Fraction, user ring types).

    Terms are plain exact values; nothing here can overflow.
    """

    def __init__(self, float_mode: str = DEFAULT_FLOAT_MODE):
        if float_mode not in FLOAT_MODES:
            raise ValueError(f"unknown float_mode '{float_mode}' (expected one of {FLOAT_MODES})")
        self.float_mode = float_mode

    def __repr__(self):
        return f'ExactArithmetic({self.float_mode!r})'

    def term(self, x):
        return to_exact(x, self.float_mode)

    def diff(self, a, b):
        return self.term(a) - self.term(b)

    def neg(self, t):
        return -t

    def cmp_products(self, a, b, c, d) -> int:
        return _sign_of(a * b, c * d)

    def cmp_sum_of_squares(self, a, b, c, d) -> int:
        return _sign_of(a * a + b * b, c * c + d * d)


_EXACT = {mode: ExactArithmetic(mode) for mode in FLOAT_MODES}


@lru_cache(maxsize=None)
def fixed_width_arithmetic(dtype) -> FixedWidthArithmetic:
    backend = FixedWidthArithmetic(dtype)
    logger.debug('created %r (%d-bit words, %d-bit halves)', backend, backend.bits, backend.bits // 2)
    return backend


def resolve_arithmetic(values, float_mode=None):
    """Pick the backend able to evaluate predicates over ``values`` exactly.

    numpy integers sharing one dtype stay in that width; any other mix is
    promoted to the exact backend.
    """
    mode = float_mode or DEFAULT_FLOAT_MODE
    if mode not in _EXACT:
        raise ValueError(f"unknown float_mode '{mode}' (expected one of {FLOAT_MODES})")
    dtype = fixed_width_dtype(values)
    if dtype is not None:
        return fixed_width_arithmetic(dtype)
    return _EXACT[mode]


__all__ = [
    'FixedWidthArithmetic',
    'ExactArithmetic',
    'fixed_width_arithmetic',
    'resolve_arithmetic',
]
