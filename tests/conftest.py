"""Спільні фікстури для тестів rg3d."""

import logging

import pytest

from rg3d import Line, Plane, Point


@pytest.fixture
def x_axis():
    return Line(Point(0, 0, 0), Point(1, 0, 0))


@pytest.fixture
def xy_plane():
    """Площина z = 0 через (0,0,0), (1,0,0), (0,1,0)."""
    return Plane(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0))


@pytest.fixture
def rg3d_logger():
    """Логер пакета; після тесту хендлери й рівень скидаються."""
    logger = logging.getLogger("rg3d")
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
