"""
rg3d: точне (раціональне) 3D геометричне ядро (Py 3.10+).
Точки, прямі, відрізки, набори колінеарних відрізків і площини:
перетини, належність, рівність, відстані. Ірраціональні величини
(корені, синуси) рахуються з явно заданою точністю oom (кратне 10**oom).
"""

__version__ = "0.1.0"

from rg3d.geom import (Vector, ZERO, DEFAULT_OOM, GUARD_DIGITS, to_rational,
                       sqrt_decimal, round_to_oom, sin_cos)
from rg3d.envelope import Envelope
from rg3d.exceptions import GeometryError, DegenerateInputError
from rg3d.point import Point, ORIGIN, unique_points
from rg3d.line import Line
from rg3d.segment import LineSegment
from rg3d.collinear import LineSegmentsCollinear
from rg3d.plane import Plane
from rg3d.pipeline import merge_collinear_segments
from rg3d.logging_config import setup_logging

__all__ = [
    "Vector", "ZERO", "DEFAULT_OOM", "GUARD_DIGITS", "to_rational",
    "sqrt_decimal", "round_to_oom", "sin_cos",
    "Envelope", "GeometryError", "DegenerateInputError",
    "Point", "ORIGIN", "unique_points",
    "Line", "LineSegment", "LineSegmentsCollinear", "Plane",
    "merge_collinear_segments", "setup_logging", "__version__",
]
