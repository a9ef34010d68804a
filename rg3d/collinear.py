# rg3d/collinear.py
from __future__ import annotations
import logging
from collections import deque
from decimal import Decimal
from fractions import Fraction
from functools import cached_property, reduce
from itertools import combinations
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple, Union

from .envelope import Envelope
from .exceptions import DegenerateInputError
from .geom import DEFAULT_OOM, Vector, sqrt_decimal
from .line import Line
from .point import Point, unique_points
from .predicates import is_collinear
from .segment import LineSegment

if TYPE_CHECKING:
    from .plane import Plane

logger = logging.getLogger(__name__)


class LineSegmentsCollinear:
    """
    Непорожній набір відрізків на одній прямій (можуть перекриватися або мати розриви).
    Рівність: як множин: кожен відрізок одного набору є в іншому і навпаки.
    """

    def __init__(self, segments: Iterable[LineSegment], check: bool = False):
        self._segments: Tuple[LineSegment, ...] = tuple(segments)
        if not self._segments:
            raise DegenerateInputError("LineSegmentsCollinear needs at least 1 segment")
        if check and not is_collinear(*self.points()):
            raise DegenerateInputError("Segments are not collinear")

    @property
    def segments(self) -> Tuple[LineSegment, ...]:
        return self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    def __repr__(self) -> str:
        return f"LineSegmentsCollinear({list(self._segments)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineSegmentsCollinear):
            return NotImplemented
        return (all(any(s == t for t in other.segments) for s in self._segments) and
                all(any(t == s for s in self._segments) for t in other.segments))

    @cached_property
    def envelope(self) -> Envelope:
        return reduce(Envelope.union, (s.envelope for s in self._segments))

    def points(self) -> List[Point]:
        """Кінці всіх відрізків без дублікатів."""
        return unique_points(e for s in self._segments for e in (s.p, s.q))

    def apply(self, v: Vector) -> LineSegmentsCollinear:
        return LineSegmentsCollinear(s.apply(v) for s in self._segments)

    def rotate(self, axis: Line, theta, oom: int = DEFAULT_OOM) -> LineSegmentsCollinear:
        """
        Поворот кожного відрізка навколо axis.
        Кінці округлюються до 10**oom, тож колінеарність результату не перевіряється.
        """
        return LineSegmentsCollinear(s.rotate(axis, theta, oom) for s in self._segments)

    # ---------------- предикати ----------------
    def is_intersected_by_point(self, pt: Point) -> bool:
        if not self.envelope.contains_point(pt):
            return False
        return any(s.is_intersected_by_point(pt) for s in self._segments)

    def is_intersected_by_line(self, line: Line) -> bool:
        return any(s.is_intersected_by_line(line) for s in self._segments)

    def is_intersected_by_segment(self, seg: LineSegment) -> bool:
        if not self.envelope.intersects(seg.envelope):
            return False
        return any(s.is_intersected_by_segment(seg) for s in self._segments)

    def is_intersected_by_plane(self, plane: Plane) -> bool:
        return any(plane.is_intersected_by_segment(s) for s in self._segments)

    # ---------------- перетини ----------------
    def intersect_line(self, line: Line) -> Optional[Union[Point, LineSegmentsCollinear]]:
        """self: якщо всі відрізки на прямій; інакше спільна точка або None."""
        if all(line.is_intersected_by_point(p) for p in self.points()):
            return self
        for s in self._segments:
            x = s.intersect_line(line)
            if x is not None:
                # пряма перетинає носія в одній точці
                return x if isinstance(x, Point) else None
        return None

    def intersect_segment(self, seg: LineSegment) -> Optional[Union[Point, LineSegment, LineSegmentsCollinear]]:
        """
        Перетини seg з кожним відрізком, склеєні через simplify.
        Точкові перетини представлені відрізками нульової довжини.
        """
        pieces: List[LineSegment] = []
        for s in self._segments:
            x = s.intersect_segment(seg)
            if x is None:
                continue
            pieces.append(LineSegment(x, x) if isinstance(x, Point) else x)
        if not pieces:
            return None
        merged = LineSegmentsCollinear(pieces).simplify()
        if isinstance(merged, LineSegment) and merged.is_point():
            return merged.p
        return merged

    def intersect_plane(self, plane: Plane):
        """self: якщо лежить у площині; інакше точка або None."""
        if all(plane.is_intersected_by_point(p) for p in self.points()):
            return self
        for s in self._segments:
            x = plane.intersect_segment(s)
            if isinstance(x, Point):
                return x
        return None

    # ---------------- спрощення ----------------
    def simplify(self) -> Union[LineSegment, LineSegmentsCollinear]:
        """
        Зливає відрізки, що перекриваються або торкаються.
        Черга роботи: кожен відрізок із черги порівнюється з уже прийнятими;
          (a) вміщений у прийнятий: відкидаємо;
          (b) вміщує прийнятий: прийнятий прибираємо, відрізок повертаємо в чергу;
          (c) часткове перекриття: обидва замінюємо відрізком між крайніми кінцями
              і повертаємо його в чергу.
        Результат попарно не перетинається, тож повторний simplify нічого не змінює.
        """
        pending = deque(self._segments)
        result: List[LineSegment] = []
        while pending:
            s = pending.popleft()
            for i, r in enumerate(result):
                if not r.is_intersected_by_segment(s):
                    continue
                if r.is_intersected_by_point(s.p) and r.is_intersected_by_point(s.q):
                    logger.debug("simplify: %r is contained in %r", s, r)
                elif s.is_intersected_by_point(r.p) and s.is_intersected_by_point(r.q):
                    logger.debug("simplify: %r contains %r", s, r)
                    del result[i]
                    pending.append(s)
                else:
                    span = _span(s, r)
                    logger.debug("simplify: %r and %r merged into %r", s, r, span)
                    del result[i]
                    pending.append(span)
                break
            else:
                result.append(s)
        if len(result) == 1:
            return result[0]
        return LineSegmentsCollinear(result)

    # ---------------- відстані ----------------
    def distance_squared_to_point(self, pt: Point) -> Fraction:
        if self.is_intersected_by_point(pt):
            return Fraction(0)
        return min(s.distance_squared_to_point(pt) for s in self._segments)

    def distance_to_point(self, pt: Point, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_point(pt), oom)

    def distance_squared_to_line(self, line: Line) -> Fraction:
        if self.is_intersected_by_line(line):
            return Fraction(0)
        return min(s.distance_squared_to_line(line) for s in self._segments)

    def distance_to_line(self, line: Line, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_line(line), oom)

    def distance_squared_to_segment(self, seg: LineSegment) -> Fraction:
        if self.is_intersected_by_segment(seg):
            return Fraction(0)
        return min(s.distance_squared_to_segment(seg) for s in self._segments)

    def distance_to_segment(self, seg: LineSegment, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_segment(seg), oom)

    def distance_squared_to_plane(self, plane: Plane) -> Fraction:
        return min(plane.distance_squared_to_segment(s) for s in self._segments)

    def distance_to_plane(self, plane: Plane, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_plane(plane), oom)


def _span(a: LineSegment, b: LineSegment) -> LineSegment:
    """Відрізок між крайніми кінцями двох колінеарних відрізків."""
    ends = [a.p, a.q, b.p, b.q]
    u, w = max(combinations(ends, 2), key=lambda pair: pair[0].distance_squared(pair[1]))
    return LineSegment(u, w)
