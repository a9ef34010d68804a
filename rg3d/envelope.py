# rg3d/envelope.py
from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

from .geom import Vector, to_rational


@dataclass(frozen=True)
class Envelope:
    """
    Вісно-орієнтований бокс (AABB) у точних координатах.
    Межі включні: дотик теж вважається перетином.
    """
    xmin: Fraction
    xmax: Fraction
    ymin: Fraction
    ymax: Fraction
    zmin: Fraction
    zmax: Fraction

    def __post_init__(self):
        for name in ("xmin", "xmax", "ymin", "ymax", "zmin", "zmax"):
            object.__setattr__(self, name, to_rational(getattr(self, name)))
        if self.xmin > self.xmax or self.ymin > self.ymax or self.zmin > self.zmax:
            raise ValueError(f"Inverted envelope bounds: {self}")

    @classmethod
    def from_points(cls, *pts) -> Envelope:
        if not pts:
            raise ValueError("Need at least 1 point")
        xs = [p.x for p in pts]; ys = [p.y for p in pts]; zs = [p.z for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys), min(zs), max(zs))

    def union(self, other: Envelope) -> Envelope:
        return Envelope(min(self.xmin, other.xmin), max(self.xmax, other.xmax),
                        min(self.ymin, other.ymin), max(self.ymax, other.ymax),
                        min(self.zmin, other.zmin), max(self.zmax, other.zmax))

    def intersects(self, other: Envelope) -> bool:
        return (self.xmin <= other.xmax and other.xmin <= self.xmax and
                self.ymin <= other.ymax and other.ymin <= self.ymax and
                self.zmin <= other.zmax and other.zmin <= self.zmax)

    def intersection(self, other: Envelope) -> Optional[Envelope]:
        if not self.intersects(other):
            return None
        return Envelope(max(self.xmin, other.xmin), min(self.xmax, other.xmax),
                        max(self.ymin, other.ymin), min(self.ymax, other.ymax),
                        max(self.zmin, other.zmin), min(self.zmax, other.zmax))

    def contains_point(self, p) -> bool:
        return (self.xmin <= p.x <= self.xmax and
                self.ymin <= p.y <= self.ymax and
                self.zmin <= p.z <= self.zmax)

    def is_contained_by(self, other: Envelope) -> bool:
        return (other.xmin <= self.xmin and self.xmax <= other.xmax and
                other.ymin <= self.ymin and self.ymax <= other.ymax and
                other.zmin <= self.zmin and self.zmax <= other.zmax)

    def _slabs(self) -> Tuple[Tuple[Fraction, Fraction], ...]:
        return ((self.xmin, self.xmax), (self.ymin, self.ymax), (self.zmin, self.zmax))

    def _clip(self, origin, v: Vector, t0: Optional[Fraction], t1: Optional[Fraction]) -> bool:
        """
        Slab-тест для origin + t*v, t у [t0, t1] (None: без обмеження).
        Точна арифметика, тож межі інтервалу порівнюються без допусків.
        """
        for (lo, hi), o, d in zip(self._slabs(), (origin.x, origin.y, origin.z), v):
            if d == 0:
                if o < lo or o > hi:
                    return False
                continue
            a = (lo - o) / d
            b = (hi - o) / d
            if a > b:
                a, b = b, a
            t0 = a if t0 is None else max(t0, a)
            t1 = b if t1 is None else min(t1, b)
            if t0 > t1:
                return False
        return True

    def intersects_line(self, line) -> bool:
        return self._clip(line.p, line.v, None, None)

    def intersects_segment(self, seg) -> bool:
        return self._clip(seg.p, Vector.between(seg.p, seg.q), Fraction(0), Fraction(1))

    def distance_squared_to_point(self, p) -> Fraction:
        """Квадрат відстані від точки до боксу (0 всередині)."""
        total = Fraction(0)
        for (lo, hi), c in zip(self._slabs(), (p.x, p.y, p.z)):
            if c < lo:
                total += (lo - c) ** 2
            elif c > hi:
                total += (c - hi) ** 2
        return total
