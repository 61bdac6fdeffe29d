"""Public package API for robustgeom.

Exact 2D orientation predicates, angular ordering around a pivot,
Simulation of Simplicity tie-breaking and an in-place Graham scan convex
hull, generic over the coordinate scalar type. numpy fixed-width integers are
handled without overflow; ints, Fractions, Decimals and floats are evaluated
exactly.

Example
-------
    from robustgeom import convex_hull, orient, Point

    orient((0, 0), (0, 1), (-1, 2))            # Orientation.COUNTER_CLOCKWISE
    hull = convex_hull([(0, 0), (1, 0), (1, 1), (0, 1)])

The deeper modules (``robustgeom.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("robustgeom")
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.arithmetic import ExactArithmetic, FixedWidthArithmetic, resolve_arithmetic
from .core.config import HullConfig, PredicateConfig
from .core.convex_hull import convex_hull, smallest_point
from .core.data import ConvexPolygon, Point, PointLocation, Vector, as_point
from .core.errors import ContractViolation, GeometryError, InsufficientInputError
from .core.logging_utils import configure_logging, get_logger
from .core.orientation import (
    Orientation,
    SoS,
    along_perp_vector,
    along_vector,
    ccw_cmp_around,
    ccw_cmp_around_with,
    cmp_distance_to,
    orient,
    sort_around,
    sos,
)
from .core.scalar import Scalar, is_scalar

__all__ = [
    # predicates
    'Orientation', 'SoS', 'orient', 'along_vector', 'along_perp_vector',
    'ccw_cmp_around', 'ccw_cmp_around_with', 'cmp_distance_to', 'sort_around', 'sos',
    # data
    'Point', 'Vector', 'ConvexPolygon', 'PointLocation', 'as_point',
    # algorithms
    'convex_hull', 'smallest_point',
    # scalars / arithmetic
    'Scalar', 'is_scalar', 'ExactArithmetic', 'FixedWidthArithmetic', 'resolve_arithmetic',
    # config / errors / logging
    'HullConfig', 'PredicateConfig',
    'GeometryError', 'InsufficientInputError', 'ContractViolation',
    'get_logger', 'configure_logging',
    '__version__',
]
