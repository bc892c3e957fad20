"""Point and line utilities.

Lines are given as two points ``a`` and ``b``; segments use the same
pair as endpoints.
"""

import math
from typing import Optional

from ..config import DEFAULT_TOLERANCE
from .types import Vector2


def point_is_on_left_side(a: Vector2, b: Vector2, point: Vector2) -> bool:
    """True if ``point`` is strictly left of the directed line a->b.

    Points exactly on the line are not on the left side.
    """
    return (b.x - a.x) * (point.y - a.y) - (b.y - a.y) * (point.x - a.x) > 0


def _projection(a: Vector2, b: Vector2, point: Vector2) -> Optional[float]:
    ab = b - a
    length_squared = ab.length_squared()
    if length_squared == 0.0:
        return None
    return (point - a).dot(ab) / length_squared


def closest_point_on_line(a: Vector2, b: Vector2, point: Vector2) -> Vector2:
    """Project ``point`` onto the infinite line through ``a`` and ``b``.

    A degenerate line (a == b) yields ``a``.
    """
    t = _projection(a, b, point)
    if t is None:
        return a
    return a + (b - a) * t


def closest_point_on_line_segment(a: Vector2, b: Vector2, point: Vector2) -> Vector2:
    """Like closest_point_on_line, but clamped to the segment endpoints."""
    t = _projection(a, b, point)
    if t is None:
        return a
    if t < 0:
        return a
    if t > 1:
        return b
    return a + (b - a) * t


def line_intersects_line(
    a1: Vector2,
    b1: Vector2,
    a2: Vector2,
    b2: Vector2,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Optional[Vector2]:
    """Intersect the infinite lines a1-b1 and a2-b2.

    Works through vertical/horizontal cases in slope-intercept form rather
    than a single determinant. Returns None for parallel, coincident, or
    numerically unusable lines; otherwise the intersection point.
    """
    x1, y1 = a1.x, a1.y
    x2, y2 = b1.x, b1.y
    x3, y3 = a2.x, a2.y
    x4, y4 = b2.x, b2.y

    first_vertical = abs(x1 - x2) < tolerance
    second_vertical = abs(x3 - x4) < tolerance

    # Two vertical lines (coincident or parallel)
    if first_vertical and second_vertical:
        return None

    # Two horizontal lines (coincident or parallel)
    if abs(y1 - y2) < tolerance and abs(y3 - y4) < tolerance:
        return None

    if first_vertical:
        m2 = (y4 - y3) / (x4 - x3)
        c2 = -m2 * x3 + y3
        x = x1
        y = c2 + m2 * x1
    elif second_vertical:
        m1 = (y2 - y1) / (x2 - x1)
        c1 = -m1 * x1 + y1
        x = x3
        y = c1 + m1 * x3
    else:
        m1 = (y2 - y1) / (x2 - x1)
        c1 = -m1 * x1 + y1
        m2 = (y4 - y3) / (x4 - x3)
        c2 = -m2 * x3 + y3

        if m1 == m2:
            return None

        x = (c1 - c2) / (m2 - m1)
        y = c2 + m2 * x

        # Plug the point back into both equations; rejects ill-conditioned
        # near-parallel solutions.
        if not (abs(-m1 * x + y - c1) < tolerance and abs(-m2 * x + y - c2) < tolerance):
            return None

    if not (math.isfinite(x) and math.isfinite(y)):
        return None

    return Vector2(x, y)


def _is_inside_segment_bounds(a: Vector2, b: Vector2, point: Vector2) -> bool:
    # Bounding-box test, not a parametric range check: nearly collinear or
    # very short segments can be misclassified.
    return (
        (a.x <= point.x <= b.x or b.x <= point.x <= a.x)
        and (a.y <= point.y <= b.y or b.y <= point.y <= a.y)
    )


def line_intersects_line_segment(
    a1: Vector2,
    b1: Vector2,
    a2: Vector2,
    b2: Vector2,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Optional[Vector2]:
    """Intersect the infinite line a1-b1 with the segment a2-b2."""
    intersection = line_intersects_line(a1, b1, a2, b2, tolerance)
    if intersection is None or not _is_inside_segment_bounds(a2, b2, intersection):
        return None
    return intersection


def segment_intersects_segment(
    a1: Vector2,
    b1: Vector2,
    a2: Vector2,
    b2: Vector2,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Optional[Vector2]:
    """Intersect segments a1-b1 and a2-b2."""
    intersection = line_intersects_line_segment(a1, b1, a2, b2, tolerance)
    if intersection is None or not _is_inside_segment_bounds(a1, b1, intersection):
        return None
    return intersection
