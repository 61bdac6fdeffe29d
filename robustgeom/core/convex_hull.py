"""Graham scan convex hull.

https://en.wikipedia.org/wiki/Graham_scan

O(n log n). The input list is sorted and compacted in place: the scan keeps
a write cursor (``known_good``, end of the hull prefix) and a read cursor
(``at``, next candidate) and only ever swaps elements, then truncates.

Properties:
  - every result is a valid strictly convex polygon in counterclockwise order
    (collapsed inputs give one or two vertices);
  - no input point lies outside the result;
  - duplicates, colinear runs and fixed-width extremes never raise.
"""
from __future__ import annotations

from functools import cmp_to_key
from typing import Optional

from .config import HullConfig
from .constants import FLOAT_MODE_EXACT
from .data import ConvexPolygon, Point, as_point
from .errors import InsufficientInputError
from .logging_utils import get_logger
from .orientation import Orientation, ccw_cmp_around_with, cmp_distance_to, reference_direction
from .scalar import to_exact

logger = get_logger('robustgeom.hull')


def smallest_point(pts) -> Point:
    """Lowest point, leftmost among ties. It is always a hull vertex. O(n)"""
    if not pts:
        raise InsufficientInputError("convex hull needs at least one point")
    best = pts[0]
    for p in pts:
        if p.y < best.y or (p.y == best.y and p.x < best.x):
            best = p
    return best


def _prepare(points, config: HullConfig):
    """Convert ``points`` to 2D Points, validating all of them before any write."""
    mode = config.predicates.float_mode
    converted = []
    for p in points:
        p = as_point(p)
        if len(p) != 2:
            raise ValueError(f"convex hull works on 2D points, got {p!r}")
        if mode == FLOAT_MODE_EXACT:
            for c in p:
                to_exact(c)  # raises on NaN / infinity
        converted.append(p)
    if isinstance(points, list) and not config.copy_input:
        points[:] = converted
        return points
    return converted


def convex_hull(points, config: Optional[HullConfig] = None) -> ConvexPolygon:
    """Convex hull of ``points`` as a counterclockwise :class:`ConvexPolygon`.

    Parameters
    ----------
    points : list of point-likes
        ``Point`` objects, 2-sequences or rows of an (N, 2) numpy array.
        A list is reordered and truncated in place (unless
        ``config.copy_input``) and becomes the polygon's vertex list.
    config : HullConfig, optional

    Raises
    ------
    InsufficientInputError
        When ``points`` is empty.
    ValueError
        When a point is not 2D, or (in exact float mode) has a NaN or
        infinite coordinate. The caller's list is left untouched.
    """
    cfg = config or HullConfig()
    mode = cfg.predicates.float_mode
    pts = _prepare(points, cfg)
    pivot = smallest_point(pts)
    direction = reference_direction(pivot)
    n = len(pts)

    def by_angle_then_distance(a, b):
        c = ccw_cmp_around_with(pivot, direction, a, b, float_mode=mode)
        return c if c else cmp_distance_to(pivot, a, b, float_mode=mode)

    pts.sort(key=cmp_to_key(by_angle_then_distance))

    # pts[:known_good] is the hull so far, pts[known_good:at] the rejects.
    known_good = min(2, n)
    at = 2
    while at < n:
        if at != known_good:
            pts[at], pts[known_good] = pts[known_good], pts[at]
        # pts[known_good] is the candidate; pop hull points it does not turn left from
        while known_good >= 2 and not Orientation.new(
                pts[known_good - 2], pts[known_good - 1], pts[known_good], float_mode=mode).is_ccw():
            pts[known_good - 1], pts[known_good] = pts[known_good], pts[known_good - 1]
            known_good -= 1
        known_good += 1
        at += 1
    if known_good == 2 and pts[0] == pts[1]:
        known_good = 1  # every point equals the pivot
    del pts[known_good:]
    logger.debug('convex_hull: %d input points, pivot %r, %d hull vertices', n, pivot, known_good)
    return ConvexPolygon(pts)


__all__ = ['convex_hull', 'smallest_point']
