"""Tests for the exact orientation predicates."""
import itertools
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from robustgeom import Orientation, Point, SoS, Vector, along_perp_vector, along_vector, orient

CCW = Orientation.COUNTER_CLOCKWISE
CW = Orientation.CLOCKWISE
COL = Orientation.COLINEAR


def exact_orientation(p, q, r):
    """Reference orientation using Python ints / Fractions."""
    px, py, qx, qy, rx, ry = (Fraction(int(v)) if isinstance(v, np.integer) else Fraction(v)
                              for v in (*p, *q, *r))
    d = (qx - px) * (ry - py) - (qy - py) * (rx - px)
    return Orientation.from_sign((d > 0) - (d < 0))


class TestConcreteScenarios:

    def test_vertical_line(self):
        assert orient([0, 0], [0, 1], [0, 2]) is COL
        assert orient([0, 0], [0, 1], [-1, 2]) is CCW
        assert orient([0, 0], [0, 1], [1, 2]) is CW

    def test_point_objects(self):
        p1, p2 = Point(0, 0), Point(0, 1)
        assert p1.orient(p2, Point(0, 2)).is_colinear()
        assert p1.orient(p2, Point(-1, 2)).is_ccw()
        assert p1.orient(p2, Point(1, 2)).is_cw()

    def test_slope_equal_and_clockwise(self):
        i8 = np.int8
        assert orient((i8(0), i8(0)), (i8(1), i8(1)), (i8(2), i8(2))) is COL
        assert orient((i8(0), i8(0)), (i8(0), i8(1)), (i8(2), i8(2))) is CW

    @pytest.mark.parametrize('p, q', [((0, 0), (3, 4)), ((-7, 2), (-7, 2)), ((5, -1), (0, 0))])
    def test_duplicate_points_are_colinear(self, p, q):
        assert orient(p, p, q) is COL
        assert orient(p, q, p) is COL
        assert orient(q, p, p) is COL

    def test_fraction_and_decimal_coordinates(self):
        third = Fraction(1, 3)
        assert orient((0, 0), (third, third), (1, 1)) is COL
        assert orient((0, 0), (third, third), (1, Fraction(100001, 100000))) is CCW
        assert orient((Decimal('0.1'), Decimal('0.1')), (Decimal('0.2'), Decimal('0.2')),
                      (Decimal('0.3'), Decimal('0.3'))) is COL


class TestFixedWidthExtremes:

    @pytest.mark.filterwarnings('error::RuntimeWarning')
    def test_int8_limit_single(self):
        i8 = np.iinfo(np.int8)
        p = (np.int8(i8.max), np.int8(i8.max))
        q = (np.int8(i8.min), np.int8(i8.min))
        with np.errstate(over='raise'):
            assert orient(p, q, q) is COL

    @pytest.mark.filterwarnings('error::RuntimeWarning')
    def test_int8_extreme_grid_matches_exact(self):
        options = [np.int8(v) for v in (-128, 127, 0, -10, 10)]
        with np.errstate(over='raise'):
            for a, b, c, d, e, f in itertools.product(options, repeat=6):
                p, q, r = (a, b), (c, d), (e, f)
                assert orient(p, q, r) is exact_orientation(p, q, r), (p, q, r)

    @pytest.mark.filterwarnings('error::RuntimeWarning')
    @pytest.mark.parametrize('dtype', [np.int16, np.int32, np.int64, np.uint8, np.uint64])
    def test_extreme_grid_other_dtypes(self, dtype):
        info = np.iinfo(dtype)
        raw = sorted({info.min, info.max, 0, 1, info.max - 1})
        options = [dtype(v) for v in raw]
        with np.errstate(over='raise'):
            for a, b, c, d, e, f in itertools.product(options, repeat=6):
                p, q, r = (a, b), (c, d), (e, f)
                assert orient(p, q, r) is exact_orientation(p, q, r), (p, q, r)

    @pytest.mark.parametrize('dtype', [np.int16, np.int32, np.int64])
    def test_random_triples_match_exact(self, dtype):
        rng = np.random.default_rng(1234)
        info = np.iinfo(dtype)
        coords = rng.integers(info.min, info.max, size=(500, 6), dtype=dtype, endpoint=True)
        for row in coords:
            p, q, r = (row[0], row[1]), (row[2], row[3]), (row[4], row[5])
            assert orient(p, q, r) is exact_orientation(p, q, r)

    def test_mixed_dtypes_fall_back_to_exact(self):
        p = (np.int8(-128), np.int8(127))
        q = (np.int16(32767), np.int16(-32768))
        r = (0, 0)
        assert orient(p, q, r) is exact_orientation(p, q, r)


class TestFloats:

    def test_exact_mode_uses_binary_values(self):
        # 0.1, 0.2 and 0.3 are not exactly colinear once rounded to binary
        p, q, r = (0.1, 0.1), (0.2, 0.2), (0.3, 0.3)
        assert orient(p, q, r) is exact_orientation(p, q, r)

    def test_near_degenerate_float_triple(self):
        p = (0.5, 0.5)
        q = (12.0, 12.0)
        r = (24.0, 24.0)
        for k in range(1, 64):
            shifted = (0.5 + k * 2.0 ** -53, 0.5)
            assert orient(shifted, q, r) is exact_orientation(shifted, q, r)
        assert orient(p, q, r) is COL

    def test_numpy_float32(self):
        p = (np.float32(0.1), np.float32(0.7))
        q = (np.float32(1.3), np.float32(-2.5))
        r = (np.float32(3.25), np.float32(0.125))
        expected = exact_orientation(*(tuple(float(c) for c in pt) for pt in (p, q, r)))
        assert orient(p, q, r) is expected

    def test_native_mode_on_well_conditioned_input(self):
        assert orient((0.0, 0.0), (1.0, 0.0), (0.5, 2.0), float_mode='native') is CCW

    @pytest.mark.parametrize('bad', [float('nan'), float('inf'), Decimal('NaN')])
    def test_non_finite_rejected_in_exact_mode(self, bad):
        with pytest.raises(ValueError):
            orient((0, 0), (1, 1), (bad, 0))

    def test_unknown_float_mode(self):
        with pytest.raises(ValueError):
            orient((0, 0), (1, 1), (2, 2), float_mode='approximate')


class TestAlongVector:

    def test_examples(self):
        v = Vector(1, 1)
        p1 = Point(5, 5)
        assert along_vector(p1, v, Point(6, 6)) is COL
        assert along_vector(p1, v, Point(7, 8)) is CCW
        assert along_vector(p1, v, Point(8, 7)) is CW

    def test_matches_orient_with_translated_point(self):
        pts = [(-3, 2), (4, 4), (0, 0), (7, -5), (1, 2)]
        for p, v, r in itertools.product(pts, repeat=3):
            q = (p[0] + v[0], p[1] + v[1])
            assert along_vector(p, v, r) is orient(p, q, r)

    @pytest.mark.filterwarnings('error::RuntimeWarning')
    def test_sum_would_overflow(self):
        i8 = np.int8
        p = (i8(127), i8(127))
        v = (i8(127), i8(127))
        with np.errstate(over='raise'):
            assert along_vector(p, v, (i8(-128), i8(-128))) is COL
            assert along_vector(p, v, (i8(-128), i8(127))) is CCW
            assert along_vector(p, v, (i8(127), i8(-128))) is CW

    def test_perp_vector_splits_forward_and_backward(self):
        pivot, direction = (0, 0), (1, 0)
        assert along_perp_vector(pivot, direction, (5, 0)) is CW
        assert along_perp_vector(pivot, direction, (-5, 0)) is CCW
        assert along_perp_vector(pivot, direction, (0, 0)) is COL
        assert along_perp_vector(pivot, direction, (0, 3)) is COL

    @pytest.mark.filterwarnings('error::RuntimeWarning')
    def test_perp_vector_with_most_negative_component(self):
        i8 = np.int8
        pivot = (i8(0), i8(0))
        direction = (i8(0), i8(-128))   # pointing down; perp points right
        with np.errstate(over='raise'):
            assert along_perp_vector(pivot, direction, (i8(0), i8(-5))) is CW
            assert along_perp_vector(pivot, direction, (i8(0), i8(5))) is CCW


class TestOrientationHelpers:

    def test_reverse(self):
        assert CCW.reverse() is CW
        assert CW.reverse() is CCW
        assert COL.reverse() is COL

    def test_then(self):
        assert COL.then(CW) is CW
        assert CCW.then(CW) is CCW
        assert CW.then(COL) is CW

    def test_predicates(self):
        assert CCW.is_ccw() and not CCW.is_cw() and not CCW.is_colinear()
        assert CW.is_cw()
        assert COL.is_colinear()

    def test_break_ties(self):
        assert COL.break_ties(0, 1, 2) is SoS.COUNTER_CLOCKWISE
        assert COL.break_ties(1, 0, 2) is SoS.CLOCKWISE
        assert CW.break_ties(0, 1, 2) is SoS.CLOCKWISE
        assert CCW.break_ties(1, 0, 2) is SoS.COUNTER_CLOCKWISE

    def test_sos_fallback(self):
        assert COL.sos(SoS.CLOCKWISE) is SoS.CLOCKWISE
        assert CCW.sos(SoS.CLOCKWISE) is SoS.COUNTER_CLOCKWISE
        assert CW.sos(SoS.COUNTER_CLOCKWISE) is SoS.CLOCKWISE
