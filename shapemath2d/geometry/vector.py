"""Scalar and vector helpers: rotation, angles, epsilon comparisons."""

import math
from typing import Union

from ..config import EPSILON
from .types import Vector2, ZERO
from .line import point_is_on_left_side


def rotated_by_radians(v: Vector2, radians: float, center: Vector2 = ZERO) -> Vector2:
    """Rotate ``v`` about ``center`` by ``radians`` (counter-clockwise, y-up)."""
    cos_theta = math.cos(radians)
    sin_theta = math.sin(radians)
    dx = v.x - center.x
    dy = v.y - center.y
    return Vector2(
        cos_theta * dx - sin_theta * dy + center.x,
        sin_theta * dx + cos_theta * dy + center.y,
    )


def rotated_by_degrees(v: Vector2, degrees: float, center: Vector2 = ZERO) -> Vector2:
    return rotated_by_radians(v, math.radians(degrees), center)


def angle_between(a: Vector2, b: Vector2) -> float:
    """Unsigned angle in radians between two vectors, in [0, pi].

    Returns 0.0 when either vector has zero length.
    """
    denominator = a.length() * b.length()
    if denominator == 0.0:
        return 0.0
    cosine = max(-1.0, min(1.0, a.dot(b) / denominator))
    return math.acos(cosine)


def angle_between_signed(a: Vector2, b: Vector2) -> float:
    """Angle from ``a`` to ``b``; positive when ``b`` lies counter-clockwise of ``a``."""
    angle = angle_between(a, b)
    if point_is_on_left_side(ZERO, a, b):
        return angle
    return -angle


def approximately_equal(
    a: Union[float, Vector2],
    b: Union[float, Vector2],
    epsilon: float = EPSILON,
) -> bool:
    """Compare two scalars, or two vectors per component, within ``epsilon``."""
    if isinstance(a, Vector2) and isinstance(b, Vector2):
        return abs(a.x - b.x) <= epsilon and abs(a.y - b.y) <= epsilon
    return abs(a - b) <= epsilon
