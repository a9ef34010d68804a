# rg3d/plane.py
from __future__ import annotations
import logging
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Tuple, Union

from .exceptions import DegenerateInputError
from .geom import DEFAULT_OOM, Vector, cross, dot, is_scalar_multiple, is_zero, norm2, sqrt_decimal
from .line import Line
from .point import Point
from .predicates import det
from .segment import LineSegment

logger = logging.getLogger(__name__)


class Plane:
    """
    Площина через p, q, r; нормаль n = pq x qr (qr x rp, якщо q у початку координат;
    для трикутника це той самий вектор).
    Рівність: копланарність (будь-яка трійка точок тієї ж площини дає рівну площину).
    check=True кидає DegenerateInputError на колінеарних точках.
    """

    def __init__(self, p: Point, q: Point, r: Point, check: bool = False):
        self._p, self._q, self._r = p, q, r
        self._pq = Vector.between(p, q)
        self._qr = Vector.between(q, r)
        self._rp = Vector.between(r, p)
        if q.is_origin():
            self._n = cross(self._qr, self._rp)
        else:
            self._n = cross(self._pq, self._qr)
        if is_zero(self._n):
            if check:
                raise DegenerateInputError(f"Plane points are collinear: {p!r}, {q!r}, {r!r}")
            logger.debug("Plane built from collinear points without check: %r, %r, %r", p, q, r)

    @classmethod
    def from_point_normal(cls, p: Point, n: Vector) -> Plane:
        """
        Площина через p з нормаллю n.
        Другу точку беремо вздовж найдовшого з трьох канонічних перпендикулярів до n,
        третю: вздовж його векторного добутку з n. Нормаль зберігається як задана.
        """
        if is_zero(n):
            raise DegenerateInputError("Plane normal must be non-zero")
        v1 = Vector(0, n.dz, -n.dy)
        v2 = Vector(-n.dz, 0, n.dx)
        v3 = Vector(-n.dy, n.dx, 0)
        m1, m2, m3 = norm2(v1), norm2(v2), norm2(v3)
        if m1 > m2:
            pv = v1 if m1 > m3 else v3
        else:
            pv = v2 if m2 > m3 else v3
        logger.debug("from_point_normal: n=%s, in-plane direction %s", tuple(n), tuple(pv))
        plane = cls(p, p.apply(pv), p.apply(cross(pv, n)))
        plane._n = n
        return plane

    # ---------------- атрибути ----------------
    @property
    def p(self) -> Point:
        return self._p

    @property
    def q(self) -> Point:
        return self._q

    @property
    def r(self) -> Point:
        return self._r

    @property
    def pq(self) -> Vector:
        return self._pq

    @property
    def qr(self) -> Vector:
        return self._qr

    @property
    def rp(self) -> Vector:
        return self._rp

    @property
    def n(self) -> Vector:
        return self._n

    def equation(self) -> Tuple[Fraction, Fraction, Fraction, Fraction]:
        """(a, b, c, d) для a*x + b*y + c*z + d = 0."""
        n = self._n
        return n.dx, n.dy, n.dz, -dot(n, self._p.vector)

    def side_of(self, pt: Point) -> int:
        """+1 / -1: по різні боки (за напрямом n), 0: на площині."""
        s = dot(self._n, Vector.between(self._p, pt))
        return (s > 0) - (s < 0)

    def __repr__(self) -> str:
        return f"Plane({self._p!r}, {self._q!r}, {self._r!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return (self.is_intersected_by_point(other.p) and
                self.is_intersected_by_point(other.q) and
                self.is_intersected_by_point(other.r))

    def is_coincident(self, other: Plane) -> bool:
        """Та сама площина і нормалі в один бік (== орієнтацію не враховує)."""
        return self == other and dot(self._n, other.n) > 0

    def apply(self, v: Vector) -> Plane:
        """Зсунута на v копія; нормаль не змінюється."""
        plane = Plane(self._p.apply(v), self._q.apply(v), self._r.apply(v))
        plane._n = self._n
        return plane

    # ---------------- предикати ----------------
    def is_intersected_by_point(self, pt: Point) -> bool:
        """Однорідний 4x4 детермінант (x, y, z, 1) чотирьох точок дорівнює 0."""
        pts = (self._p, self._q, self._r, pt)
        m = [[a.x for a in pts], [a.y for a in pts], [a.z for a in pts], [1, 1, 1, 1]]
        return det(m) == 0

    def is_parallel_to_line(self, line: Line) -> bool:
        return dot(self._n, line.v) == 0

    def is_on_plane(self, line: Line) -> bool:
        return self.is_parallel_to_line(line) and self.is_intersected_by_point(line.p)

    def is_parallel_to_plane(self, plane: Plane) -> bool:
        return is_scalar_multiple(self._n, plane.n)

    def is_intersected_by_line(self, line: Line) -> bool:
        return not self.is_parallel_to_line(line) or self.is_intersected_by_point(line.p)

    def is_intersected_by_segment(self, seg: LineSegment) -> bool:
        return self.side_of(seg.p) * self.side_of(seg.q) <= 0

    def is_intersected_by_plane(self, plane: Plane) -> bool:
        return not self.is_parallel_to_plane(plane) or self == plane

    # ---------------- перетини ----------------
    def intersect_line(self, line: Line) -> Optional[Union[Point, Line]]:
        """
        line: якщо пряма лежить у площині; None: паралельна; інакше точка.
        Точка: кінець прямої, якщо він уже на площині, інакше t = -det(A)/det(B),
        де A: (p, q, r, line.p) в однорідних координатах, B: з line.v замість line.p.
        """
        if self.is_parallel_to_line(line):
            return line if self.is_intersected_by_point(line.p) else None
        if self.is_intersected_by_point(line.p):
            return line.p
        lq = line.q
        if self.is_intersected_by_point(lq):
            return lq
        p, q, r, lp, v = self._p, self._q, self._r, line.p, line.v
        num = [[1, 1, 1, 1],
               [p.x, q.x, r.x, lp.x],
               [p.y, q.y, r.y, lp.y],
               [p.z, q.z, r.z, lp.z]]
        den = [[1, 1, 1, 0],
               [p.x, q.x, r.x, v.dx],
               [p.y, q.y, r.y, v.dy],
               [p.z, q.z, r.z, v.dz]]
        t = -det(num) / det(den)
        return line.point_at(t)

    def intersect_segment(self, seg: LineSegment) -> Optional[Union[Point, LineSegment]]:
        """seg: якщо лежить у площині; точка; None."""
        if not self.is_intersected_by_segment(seg):
            return None
        if seg.is_point():
            return seg.p
        x = self.intersect_line(seg.line)
        if isinstance(x, Line):
            return seg
        return x

    def intersect_plane(self, plane: Plane) -> Optional[Union[Plane, Line]]:
        """
        self: якщо площини рівні; None: паралельні; інакше пряма перетину.
        Опорна точка: перетин з plane того ребра (pq або qr), що не паралельне
        напряму перетину.
        """
        v = cross(self._n, plane.n)
        if is_zero(v):
            return self if self == plane else None
        if not is_scalar_multiple(self._pq, v):
            edge = Line(self._p, self._q)
        else:
            logger.debug("intersect_plane: edge pq is parallel to %s, using qr", tuple(v))
            edge = Line(self._q, self._r)
        anchor = plane.intersect_line(edge)
        return Line.from_point_vector(anchor, v)

    # ---------------- відстані ----------------
    def distance_squared_to_point(self, pt: Point) -> Fraction:
        w = Vector.between(self._p, pt)
        return dot(self._n, w) ** 2 / norm2(self._n)

    def distance_to_point(self, pt: Point, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_point(pt), oom)

    def distance_squared_to_plane(self, plane: Plane) -> Fraction:
        if not self.is_parallel_to_plane(plane):
            return Fraction(0)
        return plane.distance_squared_to_point(self._p)

    def distance_to_plane(self, plane: Plane, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_plane(plane), oom)

    def distance_squared_to_line(self, line: Line) -> Fraction:
        if not self.is_parallel_to_line(line):
            return Fraction(0)
        return self.distance_squared_to_point(line.p)

    def distance_to_line(self, line: Line, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_line(line), oom)

    def distance_squared_to_segment(self, seg: LineSegment) -> Fraction:
        if self.is_intersected_by_segment(seg):
            return Fraction(0)
        return min(self.distance_squared_to_point(seg.p), self.distance_squared_to_point(seg.q))

    def distance_to_segment(self, seg: LineSegment, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_segment(seg), oom)
