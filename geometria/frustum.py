"""Camera frustum with lazily computed derived matrices."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from .observable import Observable
from .plane import Plane

_CUBE = np.array(
    [
        [-1.0, -1.0, -1.0, 1.0],
        [1.0, -1.0, -1.0, 1.0],
        [1.0, 1.0, -1.0, 1.0],
        [-1.0, 1.0, -1.0, 1.0],
        [-1.0, -1.0, 1.0, 1.0],
        [1.0, -1.0, 1.0, 1.0],
        [1.0, 1.0, 1.0, 1.0],
        [-1.0, 1.0, 1.0, 1.0],
    ]
)

_LOWEST_COMPONENT = 1.0 / math.sqrt(3.0) * 0.75

_PLANE_ROWS = (
    (0, 1.0),
    (0, -1.0),
    (1, 1.0),
    (1, -1.0),
    (2, 1.0),
    (2, -1.0),
)


class FrustumListener(ABC):
    """Observer told when the view-projection matrix has been recomputed."""

    @abstractmethod
    def on_view_proj_changed(self) -> None:
        ...


def _normalized_plane(equation: np.ndarray) -> Plane:
    length = float(np.linalg.norm(equation[:3]))
    if length <= 1.0e-06:
        raise ValueError("degenerate plane equation")
    a, b, c = (float(x) for x in equation[:3] / length)
    d = float(equation[3])

    if a > _LOWEST_COMPONENT:
        u = np.array([-b / a, 1.0, 0.0])
        v = np.array([-c / a, 0.0, 1.0])
        origin = np.array([-d / a, 0.0, 0.0])
    elif b > _LOWEST_COMPONENT:
        u = np.array([1.0, -a / b, 0.0])
        v = np.array([0.0, -c / b, 1.0])
        origin = np.array([0.0, -d / b, 0.0])
    elif c > _LOWEST_COMPONENT:
        u = np.array([1.0, 0.0, -a / c])
        v = np.array([0.0, 1.0, -b / c])
        origin = np.array([0.0, 0.0, -d / c])
    else:
        raise ValueError("plane equation has no dominant positive component")

    return Plane(origin, origin + u, origin + v)


def _perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def _ortho(left: float, right: float, bottom: float, top: float,
           near: float, far: float) -> np.ndarray:
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _rotation(angle: float, axis) -> np.ndarray:
    a = np.asarray(axis, dtype=float).reshape(3)
    a = a / np.linalg.norm(a)
    c = math.cos(angle)
    s = math.sin(angle)
    skew = np.array([
        [0.0, -a[2], a[1]],
        [a[2], 0.0, -a[0]],
        [-a[1], a[0], 0.0],
    ])
    m = np.identity(4)
    m[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * skew
    return m


def _translation(offset) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = np.asarray(offset, dtype=float).reshape(3)
    return m


class Frustum(Observable[FrustumListener]):
    """View and projection matrices plus the values derived from them.

    Derived values are recomputed on first access after a change. Listeners
    are notified when the view-projection matrix is recomputed.
    """

    def __init__(self) -> None:
        super().__init__()
        self._view = np.identity(4)
        self._proj = np.identity(4)
        self._near = 1.0
        self._far = 10.0
        self._view_proj = np.identity(4)
        self._inv_view_proj = np.identity(4)
        self._normal = np.identity(3)
        self._corners = _CUBE.copy()
        self._planes: dict[int, Plane] = {}
        self._changed()

    def _changed(self) -> None:
        self._planes.clear()
        self._view_proj_dirty = True
        self._inv_view_proj_dirty = True
        self._corners_dirty = True
        self._normal_dirty = True

    def proj_set_perspective(self, fovy: float, aspect: float,
                             z_near: float, z_far: float) -> None:
        """Use a perspective projection; ``fovy`` is in radians."""
        self._near = z_near
        self._far = z_far
        self._proj = _perspective(fovy, aspect, z_near, z_far)
        self._changed()

    def proj_set_ortho(self, left: float, right: float, bottom: float, top: float,
                       near: float, far: float) -> None:
        self._near = near
        self._far = far
        self._proj = _ortho(left, right, bottom, top, near, far)
        self._changed()

    def view_set_identity(self) -> None:
        self._view = np.identity(4)
        self._changed()

    def view_rotate(self, angle: float, axis) -> None:
        """Rotate the view by ``angle`` radians about ``axis``."""
        self._view = self._view @ _rotation(angle, axis)
        self._changed()

    def view_translate(self, x, y=None, z=None) -> None:
        """Translate the view by ``(x, y, z)`` or by a single 3-vector ``x``."""
        offset = x if y is None and z is None else (x, y, z)
        self._view = self._view @ _translation(offset)
        self._changed()

    def _view_row(self, index: int) -> np.ndarray:
        return self._view[index, :3].copy()

    @property
    def x_axis(self) -> np.ndarray:
        return self._view_row(0)

    @property
    def y_axis(self) -> np.ndarray:
        return self._view_row(1)

    @property
    def z_axis(self) -> np.ndarray:
        return self._view_row(2)

    @property
    def view(self) -> np.ndarray:
        return self._view.copy()

    @property
    def proj(self) -> np.ndarray:
        return self._proj.copy()

    def _compute_view_proj(self) -> np.ndarray:
        if self._view_proj_dirty:
            self._view_proj = self._proj @ self._view
            self._view_proj_dirty = False
            self._notify(lambda listener: listener.on_view_proj_changed())
        return self._view_proj

    @property
    def view_proj(self) -> np.ndarray:
        return self._compute_view_proj().copy()

    def _compute_inv_view_proj(self) -> np.ndarray:
        if self._inv_view_proj_dirty:
            self._inv_view_proj = np.linalg.inv(self._compute_view_proj())
            self._inv_view_proj_dirty = False
        return self._inv_view_proj

    @property
    def inv_view_proj(self) -> np.ndarray:
        return self._compute_inv_view_proj().copy()

    @property
    def normal(self) -> np.ndarray:
        """Inverse transpose of the view's upper 3x3 block."""
        if self._normal_dirty:
            self._normal = np.linalg.inv(self._view[:3, :3]).T
            self._normal_dirty = False
        return self._normal.copy()

    @property
    def near(self) -> float:
        return self._near

    @property
    def far(self) -> float:
        return self._far

    def corner(self, index: int) -> np.ndarray:
        """World-space corner of the frustum; an index outside 0..7 gives corner 0.

        Corners follow the unit cube order: (-1,-1,-1), (1,-1,-1), (1,1,-1),
        (-1,1,-1), then the same four with z = 1.
        """
        if self._corners_dirty:
            corners = _CUBE @ self._compute_inv_view_proj().T
            self._corners = corners / corners[:, 3:4]
            self._corners_dirty = False
        if not 0 <= index < 8:
            index = 0
        return self._corners[index].copy()

    def plane(self, index: int) -> Plane:
        """Clipping plane ``index`` (0..5): left, right, bottom, top, near, far."""
        if not 0 <= index < len(_PLANE_ROWS):
            raise IndexError(f"plane index out of range: {index}")
        plane = self._planes.get(index)
        if plane is None:
            view_proj = self._compute_view_proj()
            row, sign = _PLANE_ROWS[index]
            plane = _normalized_plane(view_proj[3] + sign * view_proj[row])
            self._planes[index] = plane
        return plane

    def update(self) -> None:
        """Bring every derived matrix and the corners up to date."""
        self._compute_view_proj()
        self._compute_inv_view_proj()
        _ = self.normal
        self.corner(0)