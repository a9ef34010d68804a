# examples/demo_intersections.py
import logging
import math

from rg3d import Line, LineSegment, Plane, Point, Vector, setup_logging

if __name__ == "__main__":
    setup_logging(logging.DEBUG)

    # два колінеарні відрізки, що перекриваються
    a = LineSegment(Point(0, 0, 0), Point(10, 0, 0))
    b = LineSegment(Point(5, 0, 0), Point(15, 0, 0))
    print("segment ∩ segment:", a.intersect_segment(b))

    # площина z = 0 і вертикальна пряма
    xy = Plane(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), check=True)
    down = Line.from_point_vector(Point(0, 0, 5), Vector(0, 0, -1))
    print("plane ∩ line:", xy.intersect_line(down))

    # відстані з різною точністю
    p = Point(1, 1, 1)
    for oom in (-1, -3, -10):
        print(f"|p| at 10**{oom}:", p.distance(Point(0, 0, 0), oom))

    # паралельні площини
    top = Plane.from_point_normal(Point(0, 0, 5), Vector(0, 0, 1))
    print("plane ∩ parallel plane:", xy.intersect_plane(top))
    print("plane-plane distance:", xy.distance_to_plane(top))

    # поворот навколо осі z
    z_axis = Line(Point(0, 0, 0), Point(0, 0, 1))
    print("rotated (1,0,0) by pi/3:", Point(1, 0, 0).rotate(z_axis, math.pi / 3, oom=-6))
