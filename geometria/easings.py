"""Robert Penner style easing functions.

Every function takes the elapsed time ``t``, the start value ``b``, the
total change ``c`` and the duration ``d``.
"""

from __future__ import annotations

import math
from enum import Enum


class Easing(Enum):
    """Easing curves understood by :func:`compute`."""

    LINEAR = 0
    ELASTIC_OUT = 1
    QUAD_IN = 2
    QUAD_OUT = 3
    QUAD_INOUT = 4
    QUART_IN = 5
    CUBIC_OUT = 6
    CUBIC_INOUT = 7
    QUART_OUT = 8
    QUART_INOUT = 9
    CIRC_IN = 10
    CIRC_OUT = 11
    CIRC_INOUT = 12
    BOUNCE_OUT = 13


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    return math.sqrt(value) if value >= 0 else math.nan


def cubic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    t2 = t - 2
    if t < 1:
        return c / 2 * t * t * t + b
    return c / 2 * (t2 * t2 * t2 + 2) + b


def cubic_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t + 1) + b


def circ_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return -c / 2 * (_sqrt(1 - t * t) - 1) + b
    return c / 2 * (_sqrt(1 - (t - 2) * (t - 2)) + 1) + b


def circ_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * _sqrt(1 - t * t) + b


def circ_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * (_sqrt(1 - t * t) - 1) + b


def elastic_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    p = d * 0.3
    s = p / 4
    return c * 2.0 ** (-10 * t) * math.sin((t * d - s) * (2 * math.pi) / p) + c + b


def quart_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t * t + b


def quart_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return -c * (t * t * t * t - 1) + b


def quart_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t * t + b
    t -= 2
    return -c / 2 * (t * t * t * t - 2) + b


def bounce_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t < 1 / 2.75:
        return c * (7.5625 * t * t) + b
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return c * (7.5625 * t * t + 0.75) + b
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return c * (7.5625 * t * t + 0.9375) + b
    t -= 2.625 / 2.75
    return c * (7.5625 * t * t + 0.984375) + b


def quad_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def quad_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2.0) + b


def quad_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t * t + b
    return -c / 2.0 * (((t - 3.0) * (t - 1.0)) - 1.0) + b


_CURVES = {
    Easing.ELASTIC_OUT: elastic_out,
    Easing.QUAD_IN: quad_in,
    Easing.QUAD_OUT: quad_out,
    Easing.QUAD_INOUT: quad_in_out,
    Easing.CUBIC_OUT: cubic_out,
    Easing.CUBIC_INOUT: cubic_in_out,
    Easing.CIRC_IN: circ_in,
    Easing.CIRC_OUT: circ_out,
    Easing.CIRC_INOUT: circ_in_out,
    Easing.QUART_IN: quart_in,
    Easing.QUART_OUT: quart_out,
    Easing.QUART_INOUT: quart_in_out,
    Easing.BOUNCE_OUT: bounce_out,
}


def compute(easing: Easing, t: float, d: float) -> float:
    """Evaluate ``easing`` normalised to the range 0..1 at time ``t`` of ``d``."""
    curve = _CURVES.get(easing)
    if curve is None:
        return t / d
    return curve(t, 0, 1, d)