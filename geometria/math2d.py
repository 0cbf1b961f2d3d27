"""Two-dimensional vectors, lines, segments and circles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other) -> Vector:
        other = _as_vector(other)
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other) -> Vector:
        other = _as_vector(other)
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other) -> Vector:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other)
        other = _as_vector(other)
        return Vector(self.x * other.x, self.y * other.y)

    def __rmul__(self, other) -> Vector:
        return self.__mul__(other)

    def __truediv__(self, value: float) -> Vector:
        return Vector(self.x / value, self.y / value)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def dot(self, other) -> float:
        other = _as_vector(other)
        return self.x * other.x + self.y * other.y

    def cross(self, other) -> float:
        other = _as_vector(other)
        return self.x * other.y - self.y * other.x

    def distance_sq(self, other) -> float:
        other = _as_vector(other)
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other) -> float:
        return math.sqrt(self.distance_sq(other))

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def angle(self) -> float:
        """Angle of the vector from the x axis, as given by ``atan2``."""
        return math.atan2(self.y, self.x)

    def rotate(self, rotation: Rotation | float) -> Vector:
        """Rotate by a :class:`Rotation` or by an angle in radians."""
        if not isinstance(rotation, Rotation):
            rotation = Rotation.from_angle(rotation)
        return rotation.apply(self)

    def normalize(self) -> Vector:
        length = self.length()
        return Vector(self.x / length, self.y / length)


def _as_vector(value) -> Vector:
    if isinstance(value, Vector):
        return value
    if hasattr(value, "x") and hasattr(value, "y"):
        return Vector(float(value.x), float(value.y))
    x, y = value
    return Vector(float(x), float(y))


@dataclass(frozen=True, slots=True)
class Rotation:
    """A rotation stored as its cosine and sine."""

    c: float
    s: float

    @classmethod
    def identity(cls) -> Rotation:
        return cls(1.0, 0.0)

    @classmethod
    def from_angle(cls, angle: float) -> Rotation:
        return cls(math.cos(angle), math.sin(angle))

    def apply(self, v) -> Vector:
        v = _as_vector(v)
        return Vector(v.x * self.c - v.y * self.s, v.x * self.s + v.y * self.c)


class LineIntersection(NamedTuple):
    """Intersection point and its parameter along the first line."""

    point: Vector
    t: float


@dataclass(frozen=True)
class RectangleIntersection:
    """Outcome of a circle and rectangle test; true when they overlap.

    ``points`` holds the crossings of the outline, empty when the rectangle
    lies wholly inside the circle.
    """

    hit: bool
    points: list[Vector] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.hit


def mix(x, y, a: float) -> Vector:
    """Linear interpolation between ``x`` and ``y``."""
    return _as_vector(x) * (1.0 - a) + _as_vector(y) * a


def vector(x, y=None) -> Vector:
    """Build a vector from two numbers, or from one object with x and y."""
    if y is None:
        return _as_vector(x)
    return Vector(x, y)


def remainder(a, b) -> Vector:
    """Component-wise IEEE remainder."""
    a, b = _as_vector(a), _as_vector(b)
    return Vector(math.remainder(a.x, b.x), math.remainder(a.y, b.y))


def cross(left, right) -> float:
    return _as_vector(left).cross(right)


def dot(left, right) -> float:
    return _as_vector(left).dot(right)


def length(p) -> float:
    return _as_vector(p).length()


def length_sq(p) -> float:
    return _as_vector(p).length_sq()


def merge_points(points: Iterable, margin: float = 0.001) -> list[Vector]:
    """Drop points lying within ``margin`` of the last point that was kept."""
    merged: list[Vector] = []
    for point in map(_as_vector, points):
        if not merged or (merged[-1] - point).length() > margin:
            merged.append(point)
    return merged


def line_sign(a, ab, p) -> float:
    """Side of the line through ``a`` along ``ab`` that ``p`` lies on: -1, 0 or 1."""
    value = (_as_vector(p) - a).cross(ab)
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def line_distance(a, ab, p) -> float:
    """Signed distance from ``p`` to the line through ``a`` along ``ab``."""
    return (_as_vector(p) - a).cross(ab) / _as_vector(ab).length()


def line_project_basic(a, ab, p) -> float:
    """Parameter along ``ab`` of the projection of ``p``."""
    ab = _as_vector(ab)
    return (_as_vector(p) - a).dot(ab) / ab.dot(ab)


def line_project(a, ab, p) -> Vector:
    """Projection of ``p`` onto the line through ``a`` along ``ab``."""
    return _as_vector(a) + _as_vector(ab) * line_project_basic(a, ab, p)


def line_intersects_line(p, r, q, s) -> LineIntersection | None:
    """Intersection of the lines ``p + t*r`` and ``q + u*s``; None if parallel."""
    p, r = _as_vector(p), _as_vector(r)
    v = r.cross(s)
    if v == 0:
        return None
    t = (_as_vector(q) - p).cross(s) / v
    return LineIntersection(p + r * t, t)


def line_intersects_circle(r: float, s, t) -> list[Vector]:
    """Points where the line through ``s`` and ``t`` meets the circle of radius ``r`` at the origin."""
    s, t = _as_vector(s), _as_vector(t)
    dx = t.x - s.x
    dy = t.y - s.y
    dr2 = dx * dx + dy * dy
    d = s.x * t.y - s.y * t.x

    discriminant = r * r * dr2 - d * d
    if discriminant > 0:
        root = math.sqrt(discriminant)
        sign_dy = -1.0 if dy < 0 else 1.0
        return [
            Vector(
                (d * dy + sign_dy * dx * root) / dr2,
                (-d * dx + abs(dy) * root) / dr2,
            ),
            Vector(
                (d * dy - sign_dy * dx * root) / dr2,
                (-d * dx - abs(dy) * root) / dr2,
            ),
        ]
    if discriminant == 0:
        return [Vector((d * dy) / dr2, (-d * dx) / dr2)]
    return []


def segment_intersects_segment(p, r, q, s) -> Vector | None:
    """Intersection of the segments ``p..p+r`` and ``q..q+s``."""
    p, r = _as_vector(p), _as_vector(r)
    pq = _as_vector(q) - p
    v = r.cross(s)
    if v == 0:
        return None
    u = pq.cross(r) / v
    if u < 0 or u > 1:
        return None
    t = pq.cross(s) / v
    if t < 0 or t > 1:
        return None
    return p + r * t


def segment_intersects_ray(p, r, q, s) -> Vector | None:
    """Intersection of the segment ``p..p+r`` with the ray from ``q`` along ``s``."""
    p, r = _as_vector(p), _as_vector(r)
    pq = _as_vector(q) - p
    v = r.cross(s)
    if v == 0:
        return None
    u = pq.cross(r) / v
    if u < 0:
        return None
    t = pq.cross(s) / v
    if t < 0 or t > 1:
        return None
    return p + r * t


def segment_intersects_line(p, r, q, s) -> LineIntersection | None:
    """Intersection of the segment ``p..p+r`` with the line through ``q`` along ``s``."""
    p, r = _as_vector(p), _as_vector(r)
    v = r.cross(s)
    if v == 0:
        return None
    t = (_as_vector(q) - p).cross(s) / v
    if t < 0 or t > 1:
        return None
    return LineIntersection(p + r * t, t)


def segment_intersects_circle(r: float, s, t) -> list[Vector]:
    """Points where the segment ``s..t`` meets the circle of radius ``r`` at the origin."""
    s, t = _as_vector(s), _as_vector(t)
    st = t - s
    return [
        v
        for v in line_intersects_circle(r, s, t)
        if (v - s).dot(st) >= 0 and (v - t).dot(st) <= 0
    ]


def circle_contains_polygon(r: float, points: Iterable) -> bool:
    """Whether every point lies within the circle of radius ``r`` at the origin."""
    radius_sq = r * r
    return all(length_sq(point) <= radius_sq for point in points)


def _intersects_axis_rectangle(r: float, center: Vector, extents: Vector) -> RectangleIntersection:
    a = center - extents
    b = center + Vector(extents.x, -extents.y)
    c = center + extents
    d = center + Vector(-extents.x, extents.y)

    crossings = [
        point
        for start, end in ((a, b), (b, c), (c, d), (d, a))
        for point in segment_intersects_circle(r, start, end)
    ]
    points = merge_points(crossings)
    if not points and circle_contains_polygon(r, (a, b, c, d)):
        return RectangleIntersection(True, [])
    return RectangleIntersection(bool(points), points)


def circle_intersects_rectangle(r: float, center, extents, angle: float = 0.0) -> RectangleIntersection:
    """Test the circle of radius ``r`` at the origin against a rectangle.

    The rectangle has the given center and half extents and is rotated by
    ``angle`` radians about the origin.
    """
    local_center = Rotation.from_angle(-angle).apply(center)
    result = _intersects_axis_rectangle(r, local_center, _as_vector(extents))
    rotation = Rotation.from_angle(angle)
    return RectangleIntersection(result.hit, [rotation.apply(p) for p in result.points])