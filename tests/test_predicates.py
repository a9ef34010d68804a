"""Тести точних детермінантів і предикатів орієнтації."""

from fractions import Fraction

import pytest

from rg3d import Point
from rg3d.predicates import det, is_collinear, is_coplanar, orient3d


class TestDet:
    def test_2x2(self):
        assert det([[1, 2], [3, 4]]) == -2

    def test_pivot_swap(self):
        assert det([[0, 1], [1, 0]]) == -1

    def test_identity_3x3(self):
        assert det([[1, 0, 0], [0, 1, 0], [0, 0, 1]]) == 1

    def test_singular_5x5(self):
        row = [1, 2, 3, 4, 5]
        m = [row, [2, 0, 1, 0, 3], row, [0, 0, 1, 1, 1], [7, 1, 0, 2, 2]]
        assert det(m) == 0

    def test_rational_entries_stay_exact(self):
        assert det([["0.1", "0.2"], ["0.3", "0.4"]]) == Fraction(-1, 50)

    def test_non_square_raises(self):
        with pytest.raises(ValueError):
            det([[1, 2, 3], [4, 5, 6]])


class TestOrientation:
    def test_orient3d_sign(self):
        o = Point(0, 0, 0)
        assert orient3d(o, Point(1, 0, 0), Point(0, 1, 0), Point(0, 0, 1)) == 1
        assert orient3d(o, Point(0, 1, 0), Point(1, 0, 0), Point(0, 0, 1)) == -1
        assert orient3d(o, Point(1, 0, 0), Point(0, 1, 0), Point(5, 5, 0)) == 0

    def test_is_collinear(self):
        assert is_collinear(Point(0, 0, 0), Point(1, 1, 1), Point(3, 3, 3))
        assert not is_collinear(Point(0, 0, 0), Point(1, 1, 1), Point(1, 0, 0))
        assert is_collinear(Point(2, 2, 2), Point(2, 2, 2), Point(2, 2, 2))

    def test_is_coplanar(self):
        flat = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), Point(3, 7, 0)]
        assert is_coplanar(*flat)
        assert not is_coplanar(*flat, Point(0, 0, 1))
        assert is_coplanar(Point(0, 0, 0), Point(1, 1, 1), Point(2, 2, 2), Point(3, 3, 3))
