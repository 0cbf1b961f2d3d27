"""Planes in three-dimensional space."""

from __future__ import annotations

import numpy as np


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


class Plane:
    """A plane spanned by three points; false when the points are collinear."""

    def __init__(self, p0, p1, p2) -> None:
        p0, p1, p2 = _vec3(p0), _vec3(p1), _vec3(p2)
        self._u = p1 - p0
        self._v = p2 - p0
        self._origin = p0
        normal = np.cross(self._u, self._v)
        length_sq = float(np.dot(normal, normal))
        self._valid = length_sq > 1.0e-06
        if self._valid:
            normal = normal / np.sqrt(length_sq)
        self._normal = normal

    def __bool__(self) -> bool:
        return self._valid

    @property
    def origin(self) -> np.ndarray:
        return self._origin.copy()

    @property
    def normal(self) -> np.ndarray:
        return self._normal.copy()

    @property
    def u(self) -> np.ndarray:
        return self._u.copy()

    @property
    def v(self) -> np.ndarray:
        return self._v.copy()

    def signed_distance(self, p) -> float:
        """Distance from ``p`` to the plane, positive on the normal's side."""
        return float(np.dot(_vec3(p) - self._origin, self._normal))

    def project(self, p) -> np.ndarray:
        """Orthogonal projection of ``p`` onto the plane."""
        p = _vec3(p)
        return p - self._normal * self.signed_distance(p)

    def intersect(self, s, t) -> np.ndarray:
        """Point where the line through ``s`` and ``t`` meets the plane."""
        s, t = _vec3(s), _vec3(t)
        ss = self.project(s) - s
        st = t - s
        return s + st * float(np.dot(ss, ss)) / float(np.dot(ss, st))

    def __repr__(self) -> str:
        return f"Plane(origin={self._origin.tolist()}, normal={self._normal.tolist()})"