"""Винятки rg3d.

Відсутність перетину повертається як None, а не виняток; винятки лише для виродженого входу.
"""


class GeometryError(Exception):
    """Базовий клас для геометричних помилок rg3d."""

    pass


class DegenerateInputError(GeometryError, ValueError):
    """Вироджений вхід: нульовий напрям, колінеарні точки площини, нульова нормаль тощо."""

    pass
