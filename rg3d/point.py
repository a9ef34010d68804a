# rg3d/point.py
from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from functools import cached_property
from typing import Iterable, List

import numpy as np

from .envelope import Envelope
from .geom import (DEFAULT_OOM, GUARD_DIGITS, ZERO, Number, Vector, add, cross, dot,
                   is_zero, norm2, round_to_oom, scale, sin_cos, sqrt_decimal, sqrt_exact, sub)
from .protocols import SupportsDistance, SupportsIntersection


class Point:
    """
    Точка як offset + rel; абсолютна координата = offset + rel.

    Єдині мутатори в пакеті (set_offset / set_rel) перераховують інше поле,
    тож абсолютна позиція ніколи не змінюється (і envelope можна кешувати).
    """

    def __init__(self, x: Number = 0, y: Number = 0, z: Number = 0):
        self._offset = ZERO
        self._rel = Vector(x, y, z)

    @classmethod
    def from_vectors(cls, offset: Vector, rel: Vector) -> Point:
        p = cls.__new__(cls)
        p._offset = offset
        p._rel = rel
        return p

    # ---------------- координати ----------------
    @property
    def x(self) -> Fraction:
        return self._offset.dx + self._rel.dx

    @property
    def y(self) -> Fraction:
        return self._offset.dy + self._rel.dy

    @property
    def z(self) -> Fraction:
        return self._offset.dz + self._rel.dz

    @property
    def vector(self) -> Vector:
        return add(self._offset, self._rel)

    @property
    def offset(self) -> Vector:
        return self._offset

    @property
    def rel(self) -> Vector:
        return self._rel

    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def set_offset(self, offset: Vector) -> None:
        absolute = self.vector
        self._offset = offset
        self._rel = sub(absolute, offset)

    def set_rel(self, rel: Vector) -> None:
        absolute = self.vector
        self._rel = rel
        self._offset = sub(absolute, rel)

    @cached_property
    def envelope(self) -> Envelope:
        return Envelope(self.x, self.x, self.y, self.y, self.z, self.z)

    # ---------------- порівняння ----------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"

    def is_origin(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def location(self) -> int:
        """Код октанта 1..8 (нуль вважається додатним), 0: початок координат."""
        if self.is_origin():
            return 0
        return 1 + 4*(self.x < 0) + 2*(self.y < 0) + (self.z < 0)

    def is_between(self, a: Point, b: Point) -> bool:
        """
        Чи лежить точка між площинами через a і b з нормаллю ab (колінеарність не потрібна).
        Збіг з a або b: так; a == b (і точка інша): ні.
        """
        if self == a or self == b:
            return True
        ab = Vector.between(a, b)
        if is_zero(ab):
            return False
        from .plane import Plane
        if Plane.from_point_normal(a, ab).side_of(self) == -1:
            return False
        return Plane.from_point_normal(b, ab).side_of(self) != 1

    # ---------------- перетини ----------------
    def is_intersected_by_point(self, pt: Point) -> bool:
        return self == pt

    def is_intersected_by_line(self, line: SupportsIntersection) -> bool:
        return line.is_intersected_by_point(self)

    def intersect_line(self, line: SupportsIntersection):
        return self if line.is_intersected_by_point(self) else None

    # ---------------- відстані ----------------
    def distance_squared(self, pt: Point) -> Fraction:
        return norm2(Vector.between(self, pt))

    def distance(self, pt: Point, oom: int = DEFAULT_OOM) -> Decimal:
        return sqrt_decimal(self.distance_squared(pt), oom)

    distance_squared_to_point = distance_squared
    distance_to_point = distance

    def distance_squared_to_line(self, line: SupportsDistance) -> Fraction:
        return line.distance_squared_to_point(self)

    def distance_to_line(self, line: SupportsDistance, oom: int = DEFAULT_OOM) -> Decimal:
        return line.distance_to_point(self, oom)

    def distance_squared_to_segment(self, seg: SupportsDistance) -> Fraction:
        return seg.distance_squared_to_point(self)

    def distance_to_segment(self, seg: SupportsDistance, oom: int = DEFAULT_OOM) -> Decimal:
        return seg.distance_to_point(self, oom)

    def distance_squared_to_plane(self, plane: SupportsDistance) -> Fraction:
        return plane.distance_squared_to_point(self)

    def distance_to_plane(self, plane: SupportsDistance, oom: int = DEFAULT_OOM) -> Decimal:
        return plane.distance_to_point(self, oom)

    # ---------------- перетворення ----------------
    def copy(self) -> Point:
        return Point.from_vectors(self._offset, self._rel)

    def apply(self, v: Vector) -> Point:
        """Зсунута копія (offset зберігається)."""
        return Point.from_vectors(self._offset, add(self._rel, v))

    def rotate(self, axis, theta: Number, oom: int = DEFAULT_OOM) -> Point:
        """
        Поворот на кут theta (радіани) навколо прямої axis; повертає нову точку.

        1) основа перпендикуляра f на осі;
        2) r = self - f, тоді r ⟂ v і формула Родрігеса спрощується до
           r*cos + (k x r)*sin, де k = v/|v|;
        3) назад у світові координати, округлення до 10**oom.
        sin, cos і |v| беруться з запасом GUARD_DIGITS.
        """
        v = axis.v
        vv = norm2(v)
        w = Vector.between(axis.p, self)
        foot = add(axis.p.vector, scale(v, dot(w, v) / vv))
        r = sub(self.vector, foot)
        if r == ZERO:
            return self.copy()

        inner = oom - GUARD_DIGITS
        s, c = sin_cos(theta, oom)
        length = sqrt_exact(vv)
        if length is None:
            length = Fraction(sqrt_decimal(vv, inner))
        turned = add(scale(r, c), scale(cross(v, r), s / length))
        rotated = add(foot, turned)
        rounded = Vector(*(round_to_oom(comp, oom) for comp in rotated))
        return Point.from_vectors(self._offset, sub(rounded, self._offset))

    def as_array(self) -> np.ndarray:
        return np.array([float(self.x), float(self.y), float(self.z)], dtype=float)


ORIGIN = Point(0, 0, 0)


def unique_points(points: Iterable) -> List[Point]:
    """Прибирає точні дублікати, зберігаючи порядок. Приймає Point або (x, y, z)."""
    seen = set()
    out: List[Point] = []
    for p in points:
        q = p if isinstance(p, Point) else Point(*p)
        key = (q.x, q.y, q.z)
        if key in seen:
            continue
        seen.add(key)
        out.append(q)
    return out
