from __future__ import annotations
import logging
from typing import Iterable, List, Tuple, Union

import numpy as np

from .collinear import LineSegmentsCollinear
from .exceptions import DegenerateInputError
from .line import Line
from .point import Point, unique_points
from .segment import LineSegment

logger = logging.getLogger(__name__)

Merged = Union[LineSegment, LineSegmentsCollinear, Point]


def _as_segments(segments) -> List[LineSegment]:
    """LineSegment-и як є; пари трійок координат або масив (N, 2, 3) -> LineSegment."""
    if isinstance(segments, np.ndarray):
        if segments.ndim != 3 or segments.shape[1:] != (2, 3):
            raise DegenerateInputError(f"Expected an (N, 2, 3) array, got shape {segments.shape}")
        segments = segments.tolist()
    out: List[LineSegment] = []
    for s in segments:
        if isinstance(s, LineSegment):
            out.append(s)
            continue
        a, b = s
        out.append(LineSegment(Point(*a), Point(*b)))
    return out


def merge_collinear_segments(segments: Iterable) -> List[Merged]:
    """
    Повний пайплайн:
      - вхід: LineSegment-и, пари (x, y, z) або numpy-масив (N, 2, 3);
      - групує відрізки за несною прямою (порядок: за першою появою);
      - вироджені (нульової довжини) приєднує до першої групи, чия пряма їх містить,
        решта стає окремими точками;
      - кожну групу спрощує через LineSegmentsCollinear.simplify().

    Повертає список LineSegment / LineSegmentsCollinear / Point.
    """
    segs = _as_segments(segments)
    groups: List[Tuple[Line, List[LineSegment]]] = []
    loose: List[Point] = []

    for s in segs:
        if s.is_point():
            continue
        line = s.line
        for g_line, members in groups:
            if g_line == line:
                members.append(s)
                break
        else:
            groups.append((line, [s]))

    for s in segs:
        if not s.is_point():
            continue
        for g_line, members in groups:
            if g_line.is_intersected_by_point(s.p):
                members.append(s)
                break
        else:
            loose.append(s.p)

    logger.debug("merge_collinear_segments: %d segments -> %d line groups, %d loose points",
                 len(segs), len(groups), len(loose))

    result: List[Merged] = []
    for _, members in groups:
        merged = LineSegmentsCollinear(members).simplify()
        result.append(merged)
    result.extend(unique_points(loose))
    return result
