"""
Інтерфейси можливостей (замість спільного базового класу).

Кожен конкретний тип (Point, Line, LineSegment, LineSegmentsCollinear, Plane)
реалізує те, що вміє; перевірка: через isinstance з runtime_checkable.
Делегувальні методи (point.distance_to_plane(plane) -> plane.distance_to_point(point) тощо)
анотують аргумент саме цими протоколами.
"""
from __future__ import annotations
from decimal import Decimal
from typing import Protocol, runtime_checkable

from .envelope import Envelope
from .geom import DEFAULT_OOM


@runtime_checkable
class HasEnvelope(Protocol):
    @property
    def envelope(self) -> Envelope: ...


@runtime_checkable
class SupportsIntersection(Protocol):
    def is_intersected_by_point(self, pt) -> bool: ...

    def is_intersected_by_line(self, line) -> bool: ...

    def intersect_line(self, line): ...


@runtime_checkable
class SupportsDistance(Protocol):
    def distance_to_point(self, pt, oom: int = DEFAULT_OOM) -> Decimal: ...

    def distance_squared_to_point(self, pt): ...

    def distance_to_line(self, line, oom: int = DEFAULT_OOM) -> Decimal: ...

    def distance_squared_to_line(self, line): ...
