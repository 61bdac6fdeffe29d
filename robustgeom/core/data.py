"""Point, Vector and ConvexPolygon value types."""
from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Tuple

from .orientation import (
    Orientation,
    ccw_cmp_around,
    ccw_cmp_around_with,
    cmp_distance_to,
)
from .scalar import check_scalar, is_scalar


class _Coords:
    """Immutable coordinate tuple shared by Point and Vector."""
    __slots__ = ('_coords',)

    def __init__(self, *coords):
        if len(coords) == 1 and (isinstance(coords[0], _Coords) or not is_scalar(coords[0])):
            coords = tuple(coords[0])  # sequence, numpy row, other Point/Vector
        if not coords:
            raise ValueError(f"{type(self).__name__} needs at least one coordinate")
        object.__setattr__(self, '_coords', tuple(check_scalar(c) for c in coords))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def coords(self) -> Tuple:
        return self._coords

    @property
    def x(self):
        return self._coords[0]

    @property
    def y(self):
        return self._coords[1]

    @property
    def dim(self) -> int:
        return len(self._coords)

    def __len__(self):
        return len(self._coords)

    def __iter__(self):
        return iter(self._coords)

    def __getitem__(self, i):
        return self._coords[i]

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self):
        return hash((type(self).__name__, self._coords))

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._coords)})"

    def _check_dim(self, other):
        if len(other) != len(self):
            raise ValueError(f"dimension mismatch: {len(self)} vs {len(other)}")


class Vector(_Coords):
    """A displacement. Same layout as Point, different meaning."""
    __slots__ = ()

    def to_point(self) -> 'Point':
        return Point(self._coords)

    def __neg__(self):
        return Vector(tuple(-c for c in self._coords))

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dim(other)
        return Vector(tuple(a + b for a, b in zip(self._coords, other._coords)))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dim(other)
        return Vector(tuple(a - b for a, b in zip(self._coords, other._coords)))


class Point(_Coords):
    """A location. ``Point(1, 2)``, ``Point([1, 2])`` and ``Point(row)`` are equivalent.

    Arithmetic operators use the coordinates' own arithmetic and can wrap for
    numpy fixed-width integers; the predicate methods never do.
    """
    __slots__ = ()

    def to_vector(self) -> Vector:
        return Vector(self._coords)

    def __sub__(self, other):
        if isinstance(other, Point):
            self._check_dim(other)
            return Vector(tuple(a - b for a, b in zip(self._coords, other._coords)))
        if isinstance(other, Vector):
            self._check_dim(other)
            return Point(tuple(a - b for a, b in zip(self._coords, other._coords)))
        return NotImplemented

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dim(other)
        return Point(tuple(a + b for a, b in zip(self._coords, other._coords)))

    def orient(self, q, r, *, float_mode=None) -> Orientation:
        return Orientation.new(self, q, r, float_mode=float_mode)

    def ccw_cmp_around(self, a, b, *, float_mode=None) -> int:
        return ccw_cmp_around(self, a, b, float_mode=float_mode)

    def ccw_cmp_around_with(self, direction, a, b, *, float_mode=None) -> int:
        return ccw_cmp_around_with(self, direction, a, b, float_mode=float_mode)

    def cmp_distance_to(self, a, b, *, float_mode=None) -> int:
        return cmp_distance_to(self, a, b, float_mode=float_mode)


def as_point(obj) -> Point:
    if isinstance(obj, Point):
        return obj
    return Point(obj)


class PointLocation(Enum):
    INSIDE = 'inside'
    ON_BOUNDARY = 'on_boundary'
    OUTSIDE = 'outside'


def _between(a, b, c) -> bool:
    """True when c lies in the closed interval spanned by a and b."""
    lo, hi = (a, b) if a <= b else (b, a)
    return lo <= c <= hi


class ConvexPolygon:
    """Vertices of a convex polygon in counterclockwise order.

    Produced by :func:`robustgeom.convex_hull`, which guarantees every cyclic
    vertex triple turns counterclockwise. Inputs that collapse (one point, or
    all points on a line) yield one- or two-vertex polygons.
    """
    __slots__ = ('points',)

    def __init__(self, points: List[Point]):
        self.points = points

    def __len__(self):
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, i) -> Point:
        return self.points[i]

    def __repr__(self):
        return f"ConvexPolygon({self.points!r})"

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        n = len(self.points)
        if n < 2:
            return
        for i in range(n if n > 2 else 1):
            yield self.points[i], self.points[(i + 1) % n]

    def locate(self, point, *, float_mode=None) -> PointLocation:
        """Classify ``point`` against the polygon using only orientation tests."""
        pts = self.points
        n = len(pts)
        if n == 0:
            return PointLocation.OUTSIDE
        if n == 1:
            return PointLocation.ON_BOUNDARY if tuple(point) == tuple(pts[0]) else PointLocation.OUTSIDE
        if n == 2:
            a, b = pts
            if (Orientation.new(a, b, point, float_mode=float_mode).is_colinear()
                    and _between(a[0], b[0], point[0]) and _between(a[1], b[1], point[1])):
                return PointLocation.ON_BOUNDARY
            return PointLocation.OUTSIDE
        on_edge = False
        for a, b in self.edges():
            o = Orientation.new(a, b, point, float_mode=float_mode)
            if o.is_cw():
                return PointLocation.OUTSIDE
            if o.is_colinear():
                on_edge = True
        return PointLocation.ON_BOUNDARY if on_edge else PointLocation.INSIDE

    def contains(self, point, *, float_mode=None) -> bool:
        """True when ``point`` is inside or on the boundary."""
        return self.locate(point, float_mode=float_mode) is not PointLocation.OUTSIDE


__all__ = ['Point', 'Vector', 'ConvexPolygon', 'PointLocation', 'as_point']
