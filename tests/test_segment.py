"""Тести LineSegment."""

import math
from decimal import Decimal

import numpy as np
import pytest

from rg3d import ORIGIN, DegenerateInputError, Line, LineSegment, Point, Vector


def seg(a, b):
    return LineSegment(Point(*a), Point(*b))


@pytest.fixture
def s10():
    """Відрізок (0,0,0)-(10,0,0)."""
    return seg((0, 0, 0), (10, 0, 0))


class TestSegmentBasic:
    def test_equality_ignores_direction(self, s10):
        assert s10 == seg((10, 0, 0), (0, 0, 0))
        assert s10.reversed() == s10
        assert s10 != seg((0, 0, 0), (9, 0, 0))

    def test_length(self):
        s = seg((0, 0, 0), (3, 4, 0))
        assert s.length_squared == 25
        assert s.length() == 5
        assert seg((0, 0, 0), (1, 1, 0)).length(-2) == Decimal("1.41")

    def test_midpoint(self, s10):
        assert s10.midpoint() == Point(5, 0, 0)

    def test_zero_length(self):
        s = seg((1, 0, 0), (1, 0, 0))
        assert s.is_point()
        with pytest.raises(DegenerateInputError):
            s.line

    def test_as_array(self, s10):
        np.testing.assert_allclose(s10.as_array(), [[0, 0, 0], [10, 0, 0]])


class TestSegmentContainsPoint:
    @pytest.mark.parametrize("coords", [(5, 0, 0), (0, 0, 0), (10, 0, 0), (0.001, 0, 0)])
    def test_inside(self, s10, coords):
        assert s10.is_intersected_by_point(Point(*coords))

    @pytest.mark.parametrize("coords", [(11, 0, 0), (-1, 0, 0), (5, 1, 0)])
    def test_outside(self, s10, coords):
        assert not s10.is_intersected_by_point(Point(*coords))

    def test_diagonal(self):
        s = seg((0, 0, 0), (3, 3, 3))
        assert s.is_intersected_by_point(Point(1, 1, 1))
        assert not s.is_intersected_by_point(Point(1, 1, 2))


class TestSegmentIntersectSegment:
    def test_collinear_overlap(self, s10):
        other = seg((5, 0, 0), (15, 0, 0))
        expected = seg((5, 0, 0), (10, 0, 0))
        assert s10.intersect_segment(other) == expected
        assert other.intersect_segment(s10) == expected

    def test_self_intersection(self, s10):
        assert s10.intersect_segment(s10) == s10

    def test_shared_endpoint_is_point(self, s10):
        assert s10.intersect_segment(seg((10, 0, 0), (20, 0, 0))) == Point(10, 0, 0)

    def test_contained(self, s10):
        inner = seg((2, 0, 0), (3, 0, 0))
        assert s10.intersect_segment(inner) == inner
        assert inner.intersect_segment(s10) == inner

    def test_collinear_disjoint(self, s10):
        assert s10.intersect_segment(seg((11, 0, 0), (12, 0, 0))) is None

    def test_crossing(self):
        a = seg((0, 0, 0), (2, 2, 0))
        b = seg((0, 2, 0), (2, 0, 0))
        assert a.intersect_segment(b) == Point(1, 1, 0)
        assert a.is_intersected_by_segment(b)

    def test_lines_cross_outside(self):
        a = seg((0, 0, 0), (4, 4, 0))
        b = seg((4, 0, 0), (3, 2, 0))
        assert a.intersect_segment(b) is None
        assert not a.is_intersected_by_segment(b)

    def test_zero_length_member(self, s10):
        assert s10.intersect_segment(seg((1, 0, 0), (1, 0, 0))) == Point(1, 0, 0)
        assert seg((1, 0, 0), (1, 0, 0)).intersect_segment(s10) == Point(1, 0, 0)


class TestSegmentIntersectLine:
    def test_crossing_line(self, s10):
        assert s10.intersect_line(Line(Point(5, -1, 0), Point(5, 1, 0))) == Point(5, 0, 0)

    def test_supporting_line(self, s10, x_axis):
        assert s10.intersect_line(x_axis) is s10
        assert s10.is_intersected_by_line(x_axis)

    def test_line_misses(self, s10):
        assert s10.intersect_line(Line(Point(20, -1, 0), Point(20, 1, 0))) is None

    def test_plane(self, xy_plane):
        s = seg((1, 1, -1), (1, 1, 1))
        assert s.intersect_plane(xy_plane) == Point(1, 1, 0)
        assert s.is_intersected_by_plane(xy_plane)


class TestSegmentDistance:
    def test_to_point_perpendicular(self, s10):
        assert s10.distance_to_point(Point(5, 3, 0)) == 3

    def test_to_point_beyond_end(self, s10):
        assert s10.distance_to_point(Point(13, 4, 0)) == 5
        assert s10.distance_to_point(Point(-3, 0, 4)) == 5

    def test_to_parallel_segment(self, s10):
        assert s10.distance_to_segment(seg((2, 3, 0), (4, 3, 0))) == 3

    def test_to_skew_segment(self, s10):
        assert s10.distance_to_segment(seg((5, -5, 2), (5, 5, 2))) == 2

    def test_to_collinear_segment(self):
        assert seg((0, 0, 0), (1, 0, 0)).distance_to_segment(seg((3, 0, 0), (5, 0, 0))) == 2

    def test_to_crossing_segment(self):
        a = seg((0, 0, 0), (2, 2, 0))
        b = seg((0, 2, 0), (2, 0, 0))
        assert a.distance_squared_to_segment(b) == 0

    def test_zero_length_segments(self, s10):
        p = seg((0, 0, 0), (0, 0, 0))
        assert p.distance_to_segment(seg((3, 4, 0), (3, 4, 0))) == 5
        assert seg((5, 3, 0), (5, 3, 0)).distance_to_segment(s10) == 3
        assert s10.distance_to_segment(seg((5, 3, 0), (5, 3, 0))) == 3

    def test_to_line(self, x_axis):
        assert seg((0, 0, 3), (0, 1, 3)).distance_to_line(x_axis) == 3
        assert seg((0, 2, 1), (0, 5, 1)).distance_to_line(x_axis) == Decimal("2.236")
        assert seg((4, 1, 0), (9, 1, 0)).distance_to_line(x_axis) == 1

    def test_to_plane(self, xy_plane):
        assert seg((0, 0, 2), (1, 1, 7)).distance_to_plane(xy_plane) == 2
        assert seg((0, 0, -1), (0, 0, 1)).distance_to_plane(xy_plane) == 0


class TestSegmentTransform:
    def test_equals_directed(self, s10):
        assert s10.equals_directed(seg((0, 0, 0), (10, 0, 0)))
        assert not s10.equals_directed(s10.reversed())
        assert s10 == s10.reversed()

    def test_apply(self):
        s = seg((0, 0, 0), (1, 2, 3))
        moved = s.apply(Vector(1, 1, 1))
        assert moved.equals_directed(seg((1, 1, 1), (2, 3, 4)))
        assert s.equals_directed(seg((0, 0, 0), (1, 2, 3)))

    def test_rotate_quarter_turn_about_z(self):
        z_axis = Line(ORIGIN, Point(0, 0, 1))
        s = seg((1, 0, 0), (2, 0, 0))
        assert s.rotate(z_axis, math.pi / 2).equals_directed(seg((0, 1, 0), (0, 2, 0)))
