"""Exact orientation predicates, angular ordering and Simulation of Simplicity.

All functions take point-likes: anything indexable with ``[0]`` and ``[1]``
(``Point``, ``Vector``, tuples, lists, numpy rows). Coordinates may be any
scalar admitted by :mod:`robustgeom.core.scalar`; the arithmetic backend is
chosen from the actual coordinate values, so numpy fixed-width integers are
evaluated without overflow and everything else is evaluated exactly.

Comparators return -1, 0 or 1 and can be passed to ``functools.cmp_to_key``.
"""
from __future__ import annotations

from enum import Enum
from functools import cmp_to_key

from .arithmetic import resolve_arithmetic
from .errors import ContractViolation
from .scalar import one_like, zero_like

__all__ = [
    'Orientation', 'SoS', 'orient', 'along_vector', 'along_perp_vector',
    'ccw_cmp_around', 'ccw_cmp_around_with', 'cmp_distance_to', 'sort_around',
    'sos', 'reference_direction',
]


def _xy(p):
    return p[0], p[1]


# ---------------------------------------------------------------------------
# Slope comparisons. Each returns the sign of a 2x2 determinant without ever
# forming a coordinate sum, difference or product in the input's own type.
# ---------------------------------------------------------------------------

def _cmp_slope(p, q, r, float_mode=None) -> int:
    """Sign of (q - p) x (r - p)."""
    px, py = _xy(p)
    qx, qy = _xy(q)
    rx, ry = _xy(r)
    ar = resolve_arithmetic((px, py, qx, qy, rx, ry), float_mode)
    return ar.cmp_products(ar.diff(qx, px), ar.diff(ry, py),
                           ar.diff(qy, py), ar.diff(rx, px))


def _cmp_vector_slope(v, p, r, float_mode=None) -> int:
    """Sign of v x (r - p)."""
    vx, vy = _xy(v)
    px, py = _xy(p)
    rx, ry = _xy(r)
    ar = resolve_arithmetic((vx, vy, px, py, rx, ry), float_mode)
    return ar.cmp_products(ar.term(vx), ar.diff(ry, py),
                           ar.term(vy), ar.diff(rx, px))


def _cmp_perp_vector_slope(v, p, r, float_mode=None) -> int:
    """Sign of perp(v) x (r - p) with perp(v) = (-vy, vx)."""
    vx, vy = _xy(v)
    px, py = _xy(p)
    rx, ry = _xy(r)
    ar = resolve_arithmetic((vx, vy, px, py, rx, ry), float_mode)
    return ar.cmp_products(ar.neg(ar.term(vy)), ar.diff(ry, py),
                           ar.term(vx), ar.diff(rx, px))


class Orientation(Enum):
    """Turn direction of an ordered point triple."""
    COUNTER_CLOCKWISE = 'ccw'
    CLOCKWISE = 'cw'
    COLINEAR = 'colinear'

    @classmethod
    def from_sign(cls, sign: int) -> 'Orientation':
        if sign > 0:
            return cls.COUNTER_CLOCKWISE
        if sign < 0:
            return cls.CLOCKWISE
        return cls.COLINEAR

    @classmethod
    def new(cls, p1, p2, p3, *, float_mode=None) -> 'Orientation':
        """Direction you turn walking from ``p1`` to ``p2`` to ``p3``.

        Never overflows for numpy fixed-width integers, whatever the inputs.

        >>> Orientation.new((0, 0), (0, 1), (0, 2))
        <Orientation.COLINEAR: 'colinear'>
        >>> Orientation.new((0, 0), (0, 1), (-1, 2))
        <Orientation.COUNTER_CLOCKWISE: 'ccw'>
        >>> Orientation.new((0, 0), (0, 1), (1, 2))
        <Orientation.CLOCKWISE: 'cw'>
        """
        return cls.from_sign(_cmp_slope(p1, p2, p3, float_mode))

    @classmethod
    def along_vector(cls, p1, vector, p2, *, float_mode=None) -> 'Orientation':
        """Locate ``p2`` relative to the line through ``p1`` along ``vector``.

        Same as ``Orientation.new(p1, p1 + vector, p2)`` but ``p1 + vector``
        is never computed, so it works even when that sum would overflow.

        >>> Orientation.along_vector((5, 5), (1, 1), (7, 8))
        <Orientation.COUNTER_CLOCKWISE: 'ccw'>
        """
        return cls.from_sign(_cmp_vector_slope(vector, p1, p2, float_mode))

    @classmethod
    def along_perp_vector(cls, p1, vector, p2, *, float_mode=None) -> 'Orientation':
        """Like :meth:`along_vector` with ``vector`` rotated 90 degrees counterclockwise."""
        return cls.from_sign(_cmp_perp_vector_slope(vector, p1, p2, float_mode))

    def is_colinear(self) -> bool:
        return self is Orientation.COLINEAR

    def is_ccw(self) -> bool:
        return self is Orientation.COUNTER_CLOCKWISE

    def is_cw(self) -> bool:
        return self is Orientation.CLOCKWISE

    def then(self, other: 'Orientation') -> 'Orientation':
        """``self`` unless it is colinear, in which case ``other``."""
        return other if self is Orientation.COLINEAR else self

    def reverse(self) -> 'Orientation':
        if self is Orientation.COUNTER_CLOCKWISE:
            return Orientation.CLOCKWISE
        if self is Orientation.CLOCKWISE:
            return Orientation.COUNTER_CLOCKWISE
        return Orientation.COLINEAR

    def break_ties(self, a, b, c) -> 'SoS':
        """Strict orientation: ``self`` if not colinear, else ``SoS.new(a, b, c)``."""
        if self is Orientation.COLINEAR:
            return SoS.new(a, b, c)
        return SoS.COUNTER_CLOCKWISE if self is Orientation.COUNTER_CLOCKWISE else SoS.CLOCKWISE

    def sos(self, other: 'SoS') -> 'SoS':
        """Strict orientation: ``self`` if not colinear, else the precomputed ``other``."""
        if self is Orientation.COLINEAR:
            return other
        return SoS.COUNTER_CLOCKWISE if self is Orientation.COUNTER_CLOCKWISE else SoS.CLOCKWISE

    @staticmethod
    def ccw_cmp_around_with(p1, vector, p2, p3, *, float_mode=None) -> int:
        """Order ``p2`` and ``p3`` by the counterclockwise angle they make
        around ``p1``, measured from ``vector``. Same argument order as the
        module-level :func:`ccw_cmp_around_with`.

        Returns -1 when ``p2`` comes first, 1 when ``p3`` comes first and 0
        when both lie on the same ray (at any distance). Only orientation tests
        are used: no trigonometry, no division.
        """
        ccw, cw, col = Orientation.COUNTER_CLOCKWISE, Orientation.CLOCKWISE, Orientation.COLINEAR
        aq = Orientation.along_vector(p1, vector, p2, float_mode=float_mode)
        ar = Orientation.along_vector(p1, vector, p3, float_mode=float_mode)

        def on_zero(d):
            # colinear points sit at 0 degrees (in front of p1) or 180 degrees (behind)
            return not Orientation.along_perp_vector(p1, vector, d, float_mode=float_mode).is_ccw()

        def direct():
            o = Orientation.new(p1, p2, p3, float_mode=float_mode)
            if o is ccw:
                return -1
            if o is cw:
                return 1
            return 0

        # Opposite open half-planes
        if aq is ccw and ar is cw:
            return -1
        if aq is cw and ar is ccw:
            return 1
        # A clockwise point is past 180 degrees, so beyond any colinear point
        if aq is col and ar is cw:
            return -1
        if aq is cw and ar is col:
            return 1
        # Same side: the more clockwise point has the smaller angle
        if aq is ar and aq is not col:
            return direct()
        if aq is ccw and ar is col:
            # angle(p3) is 0 or 180, angle(p2) strictly between
            return 1 if on_zero(p3) else -1
        if aq is col and ar is ccw:
            return -1 if on_zero(p2) else 1
        # Both colinear
        z2, z3 = on_zero(p2), on_zero(p3)
        if z2 == z3:
            return 0
        return -1 if z2 else 1


class SoS(Enum):
    """Simulation of Simplicity: a strict orientation with no colinear case.

    ``SoS.new(a, b, c)`` is the orientation of the points ``(i, 2**i)`` for
    ``i`` in ``a, b, c`` on the moment curve. It depends only on how the
    identifiers compare, so the powers are never evaluated.
    See Edelsbrunner & Muecke, https://arxiv.org/abs/math/9410209.
    """
    COUNTER_CLOCKWISE = 'ccw'
    CLOCKWISE = 'cw'

    @classmethod
    def new(cls, a, b, c) -> 'SoS':
        if a == b or b == c or c == a:
            raise ContractViolation(f"SoS identifiers must be distinct, got ({a}, {b}, {c})")
        #               a<b a<c c<b
        # b a c => CW    _   X   _
        # c b a => CW    _   _   X
        # a c b => CW    X   X   X
        # b c a => CCW   _   _   _
        # c a b => CCW   X   _   X
        # a b c => CCW   X   X   _
        if (a < b) ^ (a < c) ^ (c < b):
            return cls.CLOCKWISE
        return cls.COUNTER_CLOCKWISE

    def orient(self) -> Orientation:
        if self is SoS.COUNTER_CLOCKWISE:
            return Orientation.COUNTER_CLOCKWISE
        return Orientation.CLOCKWISE

    def reverse(self) -> 'SoS':
        return SoS.CLOCKWISE if self is SoS.COUNTER_CLOCKWISE else SoS.COUNTER_CLOCKWISE


# ---------------------------------------------------------------------------
# Functional surface
# ---------------------------------------------------------------------------

def orient(p1, p2, p3, *, float_mode=None) -> Orientation:
    return Orientation.new(p1, p2, p3, float_mode=float_mode)


def along_vector(pivot, direction, point, *, float_mode=None) -> Orientation:
    return Orientation.along_vector(pivot, direction, point, float_mode=float_mode)


def along_perp_vector(pivot, direction, point, *, float_mode=None) -> Orientation:
    return Orientation.along_perp_vector(pivot, direction, point, float_mode=float_mode)


def sos(a, b, c) -> SoS:
    return SoS.new(a, b, c)


def reference_direction(pivot):
    """The positive x axis expressed in the scalar kind of ``pivot``."""
    x = pivot[0]
    return (one_like(x), zero_like(x))


def ccw_cmp_around_with(pivot, direction, a, b, *, float_mode=None) -> int:
    return Orientation.ccw_cmp_around_with(pivot, direction, a, b, float_mode=float_mode)


def ccw_cmp_around(pivot, a, b, *, float_mode=None) -> int:
    """Angular comparison around ``pivot`` starting from the positive x axis."""
    return Orientation.ccw_cmp_around_with(pivot, reference_direction(pivot), a, b,
                                           float_mode=float_mode)


def cmp_distance_to(pivot, a, b, *, float_mode=None) -> int:
    """Compare the distances from ``pivot`` to ``a`` and to ``b``."""
    px, py = _xy(pivot)
    ax, ay = _xy(a)
    bx, by = _xy(b)
    ar = resolve_arithmetic((px, py, ax, ay, bx, by), float_mode)
    return ar.cmp_sum_of_squares(ar.diff(ax, px), ar.diff(ay, py),
                                 ar.diff(bx, px), ar.diff(by, py))


def sort_around(pivot, points, direction=None, *, float_mode=None):
    """Sort the list ``points`` in place counterclockwise around ``pivot``.

    Points on the same ray are ordered nearest first. Returns ``points``.
    """
    if direction is None:
        direction = reference_direction(pivot)

    def cmp(a, b):
        c = Orientation.ccw_cmp_around_with(pivot, direction, a, b, float_mode=float_mode)
        return c if c else cmp_distance_to(pivot, a, b, float_mode=float_mode)

    points.sort(key=cmp_to_key(cmp))
    return points
