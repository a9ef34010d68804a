# rg3d/predicates.py
from __future__ import annotations
from fractions import Fraction
from typing import List, Sequence
from .geom import Vector, cross, dot, is_zero, to_rational

# ---------- інструмент для детермінанта ----------
def det(m: Sequence[Sequence]) -> Fraction:
    """
    Точний детермінант квадратної матриці через Гауса над Fraction.
    Опорний елемент: перший ненульовий у стовпці (точна арифметика, масштаб не важливий).
    """
    n = len(m)
    if any(len(row) != n for row in m):
        raise ValueError("Matrix must be square")
    a: List[List[Fraction]] = [[to_rational(v) for v in row] for row in m]
    result = Fraction(1)
    for i in range(n):
        piv = next((r for r in range(i, n) if a[r][i] != 0), None)
        if piv is None:
            return Fraction(0)
        if piv != i:
            a[i], a[piv] = a[piv], a[i]
            result = -result
        result *= a[i][i]
        inv = 1 / a[i][i]
        # елімінація
        for r in range(i+1, n):
            factor = a[r][i] * inv
            if factor != 0:
                for c in range(i, n):
                    a[r][c] -= factor * a[i][c]
    return result

def orient3d(a, b, c, d) -> Fraction:
    """Знаковий мішаний добуток (b-a)x(c-a).(d-a); 0: точки копланарні."""
    ab = Vector.between(a, b)
    ac = Vector.between(a, c)
    ad = Vector.between(a, d)
    return dot(cross(ab, ac), ad)

def is_collinear(*points) -> bool:
    """Чи лежать усі точки на одній прямій (дві та менше: завжди так)."""
    if len(points) < 3:
        return True
    a = points[0]
    # перша точка, відмінна від a, задає напрям
    d = next((Vector.between(a, p) for p in points[1:] if not is_zero(Vector.between(a, p))), None)
    if d is None:
        return True
    return all(is_zero(cross(d, Vector.between(a, p))) for p in points[1:])

def is_coplanar(*points) -> bool:
    """Чи лежать усі точки в одній площині (колінеарний набір теж копланарний)."""
    if len(points) < 4:
        return True
    a = points[0]
    n = None
    for i, b in enumerate(points[1:], start=1):
        for c in points[i+1:]:
            cand = cross(Vector.between(a, b), Vector.between(a, c))
            if not is_zero(cand):
                n = cand
                break
        if n is not None:
            break
    if n is None:
        return True
    return all(dot(n, Vector.between(a, p)) == 0 for p in points[1:])
