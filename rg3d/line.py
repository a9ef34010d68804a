# rg3d/line.py
from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Optional, Union

from .exceptions import DegenerateInputError
from .geom import (DEFAULT_OOM, Vector, add, cross, dot, is_scalar_multiple, is_zero,
                   norm2, scale, sqrt_decimal)
from .point import Point
from .protocols import SupportsDistance, SupportsIntersection

if TYPE_CHECKING:
    from .plane import Plane


class Line:
    """
    Нескінченна пряма p + t*v, v != 0.
    Рівність: збіг прямих (паралельні й мають спільну точку).
    """

    def __init__(self, p: Point, q: Point):
        v = Vector.between(p, q)
        if is_zero(v):
            raise DegenerateInputError("Line needs two distinct points")
        self._p = p
        self._v = v

    @classmethod
    def from_point_vector(cls, p: Point, v: Vector) -> Line:
        if is_zero(v):
            raise DegenerateInputError("Line direction must be non-zero")
        line = cls.__new__(cls)
        line._p = p
        line._v = v
        return line

    @property
    def p(self) -> Point:
        return self._p

    @property
    def q(self) -> Point:
        return self._p.apply(self._v)

    @property
    def v(self) -> Vector:
        return self._v

    def point_at(self, t: Fraction) -> Point:
        return Point(*add(self._p.vector, scale(self._v, t)))

    def __repr__(self) -> str:
        return f"Line({self._p!r}, v=({self._v.dx}, {self._v.dy}, {self._v.dz}))"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.is_parallel(other) and self.is_intersected_by_point(other.p)

    # ---------------- предикати ----------------
    def is_intersected_by_point(self, pt: Point) -> bool:
        return is_zero(cross(self._v, Vector.between(self._p, pt)))

    def is_parallel(self, line: Line) -> bool:
        return is_scalar_multiple(self._v, line.v)

    def is_parallel_to_plane(self, plane: Plane) -> bool:
        return dot(self._v, plane.n) == 0

    def is_on_plane(self, plane: Plane) -> bool:
        return self.is_parallel_to_plane(plane) and plane.is_intersected_by_point(self._p)

    def is_intersected_by_line(self, line: Line) -> bool:
        return self.intersect_line(line) is not None

    def is_intersected_by_segment(self, seg: SupportsIntersection) -> bool:
        return seg.is_intersected_by_line(self)

    def is_intersected_by_plane(self, plane: SupportsIntersection) -> bool:
        return plane.is_intersected_by_line(self)

    # ---------------- перетини ----------------
    def intersect_line(self, line: Line) -> Optional[Union[Point, Line]]:
        """
        self: якщо прямі збігаються; None: паралельні або мимобіжні;
        інакше точка перетину.
        """
        if self.is_parallel(line):
            return self if self.is_intersected_by_point(line.p) else None
        u = line.v
        w = Vector.between(self._p, line.p)
        c = cross(self._v, u)
        if dot(w, c) != 0:
            return None  # мимобіжні
        t = dot(cross(w, u), c) / norm2(c)
        return self.point_at(t)

    def intersect_segment(self, seg: SupportsIntersection):
        return seg.intersect_line(self)

    def intersect_plane(self, plane: SupportsIntersection):
        return plane.intersect_line(self)

    # ---------------- відстані ----------------
    def closest_point(self, pt: Point) -> Point:
        """Основа перпендикуляра з pt на пряму."""
        w = Vector.between(self._p, pt)
        return self.point_at(dot(w, self._v) / norm2(self._v))

    def distance_squared_to_point(self, pt: Point) -> Fraction:
        w = Vector.between(self._p, pt)
        return norm2(cross(self._v, w)) / norm2(self._v)

    def distance_to_point(self, pt: Point, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_point(pt), oom)

    def distance_squared_to_line(self, line: Line) -> Fraction:
        if self.is_parallel(line):
            return self.distance_squared_to_point(line.p)
        c = cross(self._v, line.v)
        w = Vector.between(self._p, line.p)
        return dot(w, c) ** 2 / norm2(c)

    def distance_to_line(self, line: Line, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared_to_line(line), oom)

    def distance_squared_to_segment(self, seg: SupportsDistance) -> Fraction:
        return seg.distance_squared_to_line(self)

    def distance_to_segment(self, seg: SupportsDistance, oom: int = DEFAULT_OOM) -> Decimal:
        return seg.distance_to_line(self, oom)

    def distance_squared_to_plane(self, plane: SupportsDistance) -> Fraction:
        return plane.distance_squared_to_line(self)

    def distance_to_plane(self, plane: SupportsDistance, oom: int = DEFAULT_OOM) -> Decimal:
        return plane.distance_to_line(self, oom)
