# rg3d/segment.py
from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from functools import cached_property
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from .envelope import Envelope
from .exceptions import DegenerateInputError
from .geom import DEFAULT_OOM, Vector, add, cross, dot, is_zero, norm2, scale, sqrt_decimal, sub
from .line import Line
from .point import Point

if TYPE_CHECKING:
    from .plane import Plane


def _clamp01(t: Fraction) -> Fraction:
    if t < 0:
        return Fraction(0)
    if t > 1:
        return Fraction(1)
    return t


def _segment_or_point(a: Point, b: Point) -> Union[Point, LineSegment]:
    """Відрізок a-b, або точка, якщо він нульової довжини."""
    return a if a == b else LineSegment(a, b)


class LineSegment:
    """
    Відрізок між p і q. (p, q) == (q, p).
    Нульова довжина дозволена: тоді поводиться як точка, але .line кидає DegenerateInputError.
    """

    def __init__(self, p: Point, q: Point):
        self._p = p
        self._q = q

    @property
    def p(self) -> Point:
        return self._p

    @property
    def q(self) -> Point:
        return self._q

    @property
    def v(self) -> Vector:
        return Vector.between(self._p, self._q)

    @cached_property
    def length_squared(self) -> Fraction:
        return norm2(self.v)

    def length(self, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.length_squared, oom)

    @cached_property
    def envelope(self) -> Envelope:
        return Envelope.from_points(self._p, self._q)

    @property
    def line(self) -> Line:
        if self.is_point():
            raise DegenerateInputError("Zero-length segment has no supporting line")
        return Line(self._p, self._q)

    def is_point(self) -> bool:
        return self.length_squared == 0

    def midpoint(self) -> Point:
        return Point(*scale(add(self._p.vector, self._q.vector), Fraction(1, 2)))

    def reversed(self) -> LineSegment:
        return LineSegment(self._q, self._p)

    def apply(self, v: Vector) -> LineSegment:
        """Зсунута на v копія."""
        return LineSegment(self._p.apply(v), self._q.apply(v))

    def rotate(self, axis: Line, theta, oom: int = DEFAULT_OOM) -> LineSegment:
        """Поворот обох кінців навколо axis (див. Point.rotate)."""
        return LineSegment(self._p.rotate(axis, theta, oom), self._q.rotate(axis, theta, oom))

    def as_array(self) -> np.ndarray:
        return np.stack([self._p.as_array(), self._q.as_array()])

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return ((self._p == other.p and self._q == other.q) or
                (self._p == other.q and self._q == other.p))

    def equals_directed(self, other: LineSegment) -> bool:
        """Рівність з урахуванням напряму: p до p, q до q."""
        return self._p == other.p and self._q == other.q

    def __repr__(self) -> str:
        return f"LineSegment({self._p!r}, {self._q!r})"

    # ---------------- предикати ----------------
    def is_intersected_by_point(self, pt: Point) -> bool:
        """
        Бокс -> колінеарність -> проєкція в межах: 0 <= w.v <= |v|^2.
        (Точний еквівалент умови |p-pt| + |pt-q| == |p-q|.)
        """
        if not self.envelope.contains_point(pt):
            return False
        v = self.v
        w = Vector.between(self._p, pt)
        if not is_zero(cross(v, w)):
            return False
        return 0 <= dot(w, v) <= self.length_squared

    def is_intersected_by_line(self, line: Line) -> bool:
        return self.intersect_line(line) is not None

    def is_intersected_by_segment(self, seg: LineSegment) -> bool:
        return self.intersect_segment(seg) is not None

    def is_intersected_by_plane(self, plane: Plane) -> bool:
        return plane.is_intersected_by_segment(self)

    # ---------------- перетини ----------------
    def intersect_line(self, line: Line) -> Optional[Union[Point, LineSegment]]:
        """self: якщо відрізок лежить на прямій; точка; або None."""
        if not self.envelope.intersects_line(line):
            return None
        if self.is_point():
            return self._p if line.is_intersected_by_point(self._p) else None
        x = self.line.intersect_line(line)
        if x is None:
            return None
        if isinstance(x, Line):
            return self
        return x if self.is_intersected_by_point(x) else None

    def intersect_segment(self, seg: LineSegment) -> Optional[Union[Point, LineSegment]]:
        """
        Перетин двох відрізків:
          * точка: якщо перетинаються в одній точці (у т.ч. спільний кінець);
          * seg: якщо seg повністю всередині self; self: якщо навпаки;
          * підвідрізок між внутрішніми кінцями: якщо колінеарні й частково перекриваються;
          * None: якщо не перетинаються.
        """
        if not self.envelope.intersects(seg.envelope):
            return None
        if self.is_point():
            return self._p if seg.is_intersected_by_point(self._p) else None
        if seg.is_point():
            return seg.p if self.is_intersected_by_point(seg.p) else None

        x = self.line.intersect_line(seg.line)
        if x is None:
            return None
        if isinstance(x, Point):
            if self.is_intersected_by_point(x) and seg.is_intersected_by_point(x):
                return x
            return None

        # колінеарні
        p_in = self.is_intersected_by_point(seg.p)
        q_in = self.is_intersected_by_point(seg.q)
        if p_in and q_in:
            return seg
        if p_in:
            return _segment_or_point(seg.p, self._farthest_end_in(seg, seg.p))
        if q_in:
            return _segment_or_point(seg.q, self._farthest_end_in(seg, seg.q))
        # кінці seg поза self: або self всередині seg, або перетину немає
        if seg.is_intersected_by_point(self._p):
            return self
        return None

    def _farthest_end_in(self, seg: LineSegment, anchor: Point) -> Point:
        """Кінець self, що лежить у seg і найдальший від anchor."""
        ends = [e for e in (self._p, self._q) if seg.is_intersected_by_point(e)]
        return max(ends, key=anchor.distance_squared)

    def intersect_plane(self, plane: Plane):
        return plane.intersect_segment(self)

    # ---------------- відстані ----------------
    def closest_point(self, pt: Point) -> Point:
        """Найближча до pt точка відрізка: основа перпендикуляра або ближчий кінець."""
        if self.is_point():
            return self._p
        w = Vector.between(self._p, pt)
        t = _clamp01(dot(w, self.v) / self.length_squared)
        return Point(*add(self._p.vector, scale(self.v, t)))

    def distance_squared_to_point(self, pt: Point) -> Fraction:
        return self.closest_point(pt).distance_squared(pt)

    def distance_to_point(self, pt: Point, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_point(pt), oom)

    def distance_squared_to_line(self, line: Line) -> Fraction:
        if self.is_point() or line.is_parallel(self.line):
            return line.distance_squared_to_point(self._p)
        # параметр на self найближчої точки між прямими, затиснутий у [0, 1]
        d1, d2 = self.v, line.v
        r = Vector.between(line.p, self._p)
        a, b, e = dot(d1, d1), dot(d1, d2), dot(d2, d2)
        c, f = dot(d1, r), dot(d2, r)
        s = _clamp01((b*f - c*e) / (a*e - b*b))
        return line.distance_squared_to_point(Point(*add(self._p.vector, scale(d1, s))))

    def distance_to_line(self, line: Line, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_line(line), oom)

    def distance_squared_to_segment(self, seg: LineSegment) -> Fraction:
        """
        Найближчі точки двох відрізків (затиснута параметрична схема):
        s на self, t на seg; обидва в [0, 1]. Працює і для паралельних,
        колінеарних та вироджених відрізків.
        """
        d1, d2 = self.v, seg.v
        r = Vector.between(seg.p, self._p)
        a, e, f = dot(d1, d1), dot(d2, d2), dot(d2, r)
        if a == 0 and e == 0:
            return norm2(r)
        if a == 0:
            s = Fraction(0)
            t = _clamp01(f / e)
        else:
            c = dot(d1, r)
            if e == 0:
                t = Fraction(0)
                s = _clamp01(-c / a)
            else:
                b = dot(d1, d2)
                denom = a*e - b*b
                # паралельні: будь-яке s, беремо 0
                s = _clamp01((b*f - c*e) / denom) if denom != 0 else Fraction(0)
                t = (b*s + f) / e
                if t < 0:
                    t = Fraction(0)
                    s = _clamp01(-c / a)
                elif t > 1:
                    t = Fraction(1)
                    s = _clamp01((b - c) / a)
        c1 = add(self._p.vector, scale(d1, s))
        c2 = add(seg.p.vector, scale(d2, t))
        return norm2(sub(c1, c2))

    def distance_to_segment(self, seg: LineSegment, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_segment(seg), oom)

    def distance_squared_to_plane(self, plane: Plane) -> Fraction:
        return plane.distance_squared_to_segment(self)

    def distance_to_plane(self, plane: Plane, oom: int = DEFAULT_OOM) -> Decimal:
        return plane.distance_to_segment(self, oom)
