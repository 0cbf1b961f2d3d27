import math
from collections import namedtuple

import numpy as np
import pytest

from geometria.math2d import (
    Rotation,
    Vector,
    circle_contains_polygon,
    circle_intersects_rectangle,
    cross,
    dot,
    length,
    length_sq,
    line_distance,
    line_intersects_circle,
    line_intersects_line,
    line_project,
    line_project_basic,
    line_sign,
    merge_points,
    mix,
    remainder,
    segment_intersects_circle,
    segment_intersects_line,
    segment_intersects_ray,
    segment_intersects_segment,
    vector,
)

TOL = 0.001
Point = namedtuple("Point", "x y")


def test_vector_from_object_with_coordinates():
    source = Point(13.0, 37.0)
    v = vector(source)
    assert v.x == source.x
    assert v.y == source.y


def test_vector_from_two_numbers():
    v = vector(9.25, 11.5)
    assert v.x == 9.25
    assert v.y == 11.5


def test_merge_points_simple():
    assert len(merge_points([Vector(1.0, 1.0), Vector(2.0, 2.0)])) == 2


def test_merge_points_empty():
    assert merge_points([]) == []


def test_merge_points_exact():
    assert len(merge_points([Vector(1.0, 1.0), Vector(1.0, 1.0)])) == 1


def test_merge_points_not_exact():
    points = [Vector(1.0, 1.0), Vector(1.05, 1.0), Vector(1.05, 1.0001)]
    merged = merge_points(points, 0.01)
    assert len(merged) == 2
    assert merged[0] == Vector(1.0, 1.0)
    assert merged[1] == Vector(1.05, 1.0)


def test_circle_rectangle_no_intersection():
    result = circle_intersects_rectangle(0.5, Vector(1.0, -1.0), Vector(0.01, 0.01))
    assert not result
    assert result.points == []


def test_circle_rectangle_simple():
    result = circle_intersects_rectangle(1.0, Vector(2.0, 0.0), Vector(1.5, 10.0))
    assert result.hit is True
    assert len(result.points) == 2
    assert result.points[0].x == pytest.approx(result.points[1].x, abs=TOL)


def test_circle_rectangle_simple2():
    result = circle_intersects_rectangle(1.0, Vector(2.0, 2.0), Vector(2.0, 2.0))
    assert result.hit is True
    assert len(result.points) == 2
    assert tuple(result.points[0]) == pytest.approx((1.0, 0.0), abs=TOL)
    assert tuple(result.points[1]) == pytest.approx((0.0, 1.0), abs=TOL)


def test_circle_rectangle_corner_intersection():
    result = circle_intersects_rectangle(1.0, Vector(0.5, 0.5), Vector(0.5, 0.5))
    assert result.hit is True
    assert len(result.points) == 2
    assert tuple(result.points[0]) == pytest.approx((1.0, 0.0), abs=TOL)
    assert tuple(result.points[1]) == pytest.approx((0.0, 1.0), abs=TOL)


def test_circle_rectangle_single_corner():
    result = circle_intersects_rectangle(1.0, Vector(2.0, -1.0), Vector(1.0, 1.0))
    assert result.hit is True
    assert len(result.points) == 1
    assert tuple(result.points[0]) == pytest.approx((1.0, 0.0), abs=TOL)


def test_circle_contains_rectangle():
    result = circle_intersects_rectangle(1.0, Vector(0.0, 0.0), Vector(0.1, 0.1))
    assert result.hit is True
    assert result.points == []


def test_circle_rectangle_oriented():
    result = circle_intersects_rectangle(
        1.0, Vector(0.0, -1.0), Vector(0.5, 10.0), -math.pi / 2
    )
    assert result.hit is True
    x = result.points
    assert len(x) == 2
    assert x[0].y == pytest.approx(x[1].y, abs=TOL)
    assert -x[0].x == pytest.approx(x[1].x, abs=TOL)


@pytest.mark.parametrize("make", [Vector, lambda a, b: np.array([a, b])])
def test_circle_rectangle_oriented2(make):
    t = math.sqrt(2.0) / 2.0
    result = circle_intersects_rectangle(1.0, make(t, -t), make(1.0, 10.0), -math.pi / 4)
    assert result.hit is True
    x = result.points
    assert len(x) == 2
    assert x[0].x == pytest.approx(x[0].y, abs=TOL)
    assert x[1].x == pytest.approx(x[1].y, abs=TOL)
    assert x[0].x == pytest.approx(-x[1].y, abs=TOL)
    assert x[0].x == pytest.approx(t, abs=TOL)


def test_rotation_quarter_turn_of_unit_x():
    rotated = Vector(1.0, 0.0).rotate(Rotation.from_angle(math.pi * 0.25))
    assert int(rotated.x * 1000.0) == 707


def test_rotation_identity_and_angle():
    v = Vector(3.0, -2.0)
    assert Rotation.identity().apply(v) == v
    assert tuple(v.rotate(math.pi / 2)) == pytest.approx((2.0, 3.0))


def test_vector_arithmetic():
    a, b = Vector(1.0, 2.0), Vector(3.0, 4.0)
    assert a + b == Vector(4.0, 6.0)
    assert b - a == Vector(2.0, 2.0)
    assert a * b == Vector(3.0, 8.0)
    assert a * 2 == Vector(2.0, 4.0)
    assert 2 * a == Vector(2.0, 4.0)
    assert b / 2 == Vector(1.5, 2.0)
    assert -a == Vector(-1.0, -2.0)
    assert Vector.zero() == Vector(0.0, 0.0)


def test_vector_metrics():
    a, b = Vector(3.0, 4.0), Vector(0.0, 0.0)
    assert a.length() == 5.0
    assert a.length_sq() == 25.0
    assert a.distance(b) == 5.0
    assert a.distance_sq(b) == 25.0
    assert a.dot(Vector(1.0, 1.0)) == 7.0
    assert a.cross(Vector(1.0, 0.0)) == -4.0
    assert a.normalize().length() == pytest.approx(1.0)
    assert Vector(0.0, 1.0).angle() == pytest.approx(math.pi / 2)


def test_free_functions():
    assert cross((1.0, 0.0), (0.0, 1.0)) == 1.0
    assert dot(Point(1.0, 2.0), Point(3.0, 4.0)) == 11.0
    assert length((3.0, 4.0)) == 5.0
    assert length_sq((3.0, 4.0)) == 25.0
    assert mix(Vector(0.0, 0.0), Vector(2.0, 4.0), 0.5) == Vector(1.0, 2.0)
    assert remainder(Vector(5.0, 7.0), Vector(3.0, 4.0)) == Vector(-1.0, -1.0)


def test_line_helpers():
    a, ab = Vector(0.0, 0.0), Vector(1.0, 0.0)
    assert line_sign(a, ab, Vector(0.0, 1.0)) == -1.0
    assert line_sign(a, ab, Vector(0.0, -1.0)) == 1.0
    assert line_sign(a, ab, Vector(5.0, 0.0)) == 0.0
    assert line_distance(a, ab, Vector(0.0, 1.0)) == -1.0
    assert line_project_basic(a, Vector(2.0, 0.0), Vector(3.0, 5.0)) == 1.5
    assert line_project(a, ab, Vector(3.0, 5.0)) == Vector(3.0, 0.0)


def test_line_intersects_line():
    hit = line_intersects_line(Vector(0, 0), Vector(2, 0), Vector(1, -1), Vector(0, 2))
    assert hit.point == Vector(1.0, 0.0)
    assert hit.t == 0.5
    assert line_intersects_line(Vector(0, 0), Vector(1, 0), Vector(0, 1), Vector(2, 0)) is None


def test_segment_intersections():
    p, r = Vector(0, 0), Vector(2, 0)
    assert segment_intersects_segment(p, r, Vector(1, -1), Vector(0, 2)) == Vector(1.0, 0.0)
    assert segment_intersects_segment(p, r, Vector(1, 1), Vector(0, 0.5)) is None
    assert segment_intersects_ray(p, r, Vector(1, -1), Vector(0, 0.5)) == Vector(1.0, 0.0)
    assert segment_intersects_ray(p, r, Vector(1, -1), Vector(0, -1)) is None
    hit = segment_intersects_line(p, r, Vector(1, 5), Vector(0, 1))
    assert hit.point == Vector(1.0, 0.0)
    assert segment_intersects_line(p, r, Vector(3, 5), Vector(0, 1)) is None


def test_circle_line_and_segment():
    points = line_intersects_circle(1.0, Vector(0, 0), Vector(4, 0))
    assert points == [Vector(1.0, 0.0), Vector(-1.0, 0.0)]
    assert line_intersects_circle(1.0, Vector(0, 2), Vector(4, 2)) == []
    assert segment_intersects_circle(1.0, Vector(0, 0), Vector(4, 0)) == [Vector(1.0, 0.0)]
    assert circle_contains_polygon(1.0, [Vector(0.5, 0.5), Vector(-0.5, 0.5)]) is True
    assert circle_contains_polygon(1.0, [Vector(1.0, 1.0)]) is False