"""Geometry, easing, event, observer and camera-frustum utilities for graphics applications."""

__version__ = "0.1.0"

__all__ = [
    "context",
    "debug",
    "easings",
    "event",
    "frustum",
    "math2d",
    "observable",
    "path",
    "plane",
    "texture_data",
    "weak",
]