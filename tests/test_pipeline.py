"""Тести пайплайну злиття відрізків."""

import logging

import numpy as np
import pytest

from rg3d import DegenerateInputError, LineSegment, LineSegmentsCollinear, Point
from rg3d.pipeline import merge_collinear_segments


def seg(a, b):
    return LineSegment(Point(*a), Point(*b))


class TestMergeCollinearSegments:
    def test_numpy_input(self):
        arr = np.array(
            [
                [[0, 0, 0], [5, 0, 0]],
                [[3, 0, 0], [10, 0, 0]],
                [[0, 1, 0], [0, 2, 0]],
            ],
            dtype=float,
        )
        result = merge_collinear_segments(arr)
        assert result == [seg((0, 0, 0), (10, 0, 0)), seg((0, 1, 0), (0, 2, 0))]

    def test_disjoint_pieces_stay_grouped(self):
        result = merge_collinear_segments([
            ((0, 0, 0), (1, 0, 0)),
            ((3, 0, 0), (4, 0, 0)),
        ])
        assert len(result) == 1
        assert result[0] == LineSegmentsCollinear([seg((0, 0, 0), (1, 0, 0)), seg((3, 0, 0), (4, 0, 0))])

    def test_degenerate_segments(self):
        result = merge_collinear_segments([
            ((0, 0, 0), (2, 0, 0)),
            ((1, 0, 0), (1, 0, 0)),
            ((5, 5, 5), (5, 5, 5)),
            ((5, 5, 5), (5, 5, 5)),
        ])
        assert result == [seg((0, 0, 0), (2, 0, 0)), Point(5, 5, 5)]

    def test_accepts_segment_objects(self):
        s = seg((0, 0, 0), (1, 1, 1))
        assert merge_collinear_segments([s]) == [s]

    def test_bad_shape(self):
        with pytest.raises(DegenerateInputError):
            merge_collinear_segments(np.zeros((2, 3)))

    def test_grouping_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="rg3d")
        merge_collinear_segments([((0, 0, 0), (1, 0, 0))])
        assert "1 line groups" in caplog.text
