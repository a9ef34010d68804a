from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from math import floor, isqrt
from numbers import Integral, Real
from typing import Iterable, Optional, Tuple, Union

import mpmath
import numpy as np

DEFAULT_OOM = -3   # точність за замовчуванням: 10**-3
GUARD_DIGITS = 6   # запас цифр для проміжних наближень (sin, cos, sqrt у rotate)

Number = Union[int, float, str, Decimal, Fraction]


def to_rational(value: Number) -> Fraction:
    """
    Точне раціональне значення.
    float береться через repr (0.1 -> 1/10), а не через двійкове представлення.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a coordinate")
    if isinstance(value, Integral):
        return Fraction(int(value))
    if isinstance(value, float) or isinstance(value, Real) and not isinstance(value, Decimal):
        return Fraction(repr(float(value)))
    if isinstance(value, (Decimal, str)):
        return Fraction(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a rational")


@dataclass(frozen=True)
class Vector:
    dx: Fraction
    dy: Fraction
    dz: Fraction

    def __post_init__(self):
        object.__setattr__(self, "dx", to_rational(self.dx))
        object.__setattr__(self, "dy", to_rational(self.dy))
        object.__setattr__(self, "dz", to_rational(self.dz))

    def __iter__(self):
        yield self.dx; yield self.dy; yield self.dz

    def __add__(self, other: Vector) -> Vector:
        return add(self, other)

    def __sub__(self, other: Vector) -> Vector:
        return sub(self, other)

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy, -self.dz)

    def __mul__(self, s: Number) -> Vector:
        return scale(self, s)

    __rmul__ = __mul__

    @classmethod
    def between(cls, a, b) -> Vector:
        """Вектор від точки a до точки b (абсолютні координати)."""
        return cls(b.x - a.x, b.y - a.y, b.z - a.z)


ZERO = Vector(0, 0, 0)
I = Vector(1, 0, 0)
J = Vector(0, 1, 0)
K = Vector(0, 0, 1)


def add(a: Vector, b: Vector) -> Vector:
    return Vector(a.dx + b.dx, a.dy + b.dy, a.dz + b.dz)

def sub(a: Vector, b: Vector) -> Vector:
    return Vector(a.dx - b.dx, a.dy - b.dy, a.dz - b.dz)

def scale(a: Vector, s: Number) -> Vector:
    s = to_rational(s)
    return Vector(a.dx*s, a.dy*s, a.dz*s)

def dot(a: Vector, b: Vector) -> Fraction:
    return a.dx*b.dx + a.dy*b.dy + a.dz*b.dz

def cross(a: Vector, b: Vector) -> Vector:
    return Vector(a.dy*b.dz - a.dz*b.dy,
                  a.dz*b.dx - a.dx*b.dz,
                  a.dx*b.dy - a.dy*b.dx)

def norm2(a: Vector) -> Fraction:
    return dot(a, a)

def is_zero(a: Vector) -> bool:
    return a.dx == 0 and a.dy == 0 and a.dz == 0

def is_scalar_multiple(a: Vector, b: Vector) -> bool:
    """Паралельність через нульовий векторний добуток (нуль-вектор паралельний усьому)."""
    return is_zero(cross(a, b))


# ---------- точність (oom) ----------
def _pow10(oom: int) -> Fraction:
    return Fraction(10) ** oom

def sqrt_exact(x: Number) -> Optional[Fraction]:
    """Точний раціональний корінь, або None якщо його немає."""
    x = to_rational(x)
    if x < 0:
        raise ValueError(f"Square root of a negative number: {x}")
    n, d = x.numerator, x.denominator
    rn, rd = isqrt(n), isqrt(d)
    if rn*rn == n and rd*rd == d:
        return Fraction(rn, rd)
    return None

def sqrt_decimal(x: Number, oom: int = DEFAULT_OOM) -> Decimal:
    """
    sqrt(x), округлений half-up до кратного 10**oom.
    Рахується цілочисельно: floor(sqrt(x)*10**-oom + 1/2) = (isqrt(floor(4*x*10**(-2*oom))) + 1) // 2.
    """
    x = to_rational(x)
    if x < 0:
        raise ValueError(f"Square root of a negative number: {x}")
    m4 = 4 * x * _pow10(-2*oom)
    t = isqrt(m4.numerator // m4.denominator)
    return Decimal(f"{(t + 1) // 2}E{oom}")

def round_to_oom(x: Number, oom: int = DEFAULT_OOM) -> Fraction:
    """Округлення half-up (від нуля) до кратного 10**oom."""
    x = to_rational(x)
    s = _pow10(-oom)
    r = floor(abs(x)*s + Fraction(1, 2))
    return (r if x >= 0 else -r) / s


def _mpf_to_fraction(x) -> Fraction:
    """Точне значення mpf: man * 2**exp."""
    a = abs(x)
    f = Fraction(int(a.man)) * Fraction(2) ** int(a.exp)
    return -f if x < 0 else f

def sin_cos(theta: Number, oom: int = DEFAULT_OOM) -> Tuple[Fraction, Fraction]:
    """
    Раціональні наближення (sin theta, cos theta) з похибкою не більше 10**(oom - GUARD_DIGITS).
    Рахуються через mpmath; робоча точність покриває і цілу частину кута.
    """
    theta = to_rational(theta)
    if theta == 0:
        return Fraction(0), Fraction(1)
    target = oom - GUARD_DIGITS
    whole = len(str(abs(theta.numerator) // theta.denominator))
    with mpmath.workdps(max(-target, 0) + whole + 10):
        t = mpmath.mpf(theta.numerator) / theta.denominator
        s, c = mpmath.sin(t), mpmath.cos(t)
        s, c = _mpf_to_fraction(s), _mpf_to_fraction(c)
    return round_to_oom(s, target), round_to_oom(c, target)


# ---------- numpy-обмін ----------
def vectors_from_array(arr) -> list[Vector]:
    """(N, 3) масив -> список Vector (float-и через repr, тобто 0.1 -> 1/10)."""
    a = np.asarray(arr)
    if a.ndim != 2 or a.shape[1] != 3:
        raise ValueError(f"Expected an (N, 3) array, got shape {a.shape}")
    return [Vector(*(to_rational(c.item() if hasattr(c, "item") else c) for c in row)) for row in a]

def as_array(vectors: Iterable[Vector]) -> np.ndarray:
    """Список Vector -> float64 масив (N, 3). Лише для візуалізації/обміну, не для обчислень."""
    rows = [[float(v.dx), float(v.dy), float(v.dz)] for v in vectors]
    return np.array(rows, dtype=float).reshape(-1, 3)
