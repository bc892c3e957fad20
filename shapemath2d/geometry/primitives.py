"""AABB and circle predicates."""

from typing import Iterable, List

from ..errors import BufferTooSmallError
from .types import AABB, Vector2, ZERO
from .line import closest_point_on_line_segment


def aabb_contains_point(aabb_min: Vector2, aabb_max: Vector2, point: Vector2) -> bool:
    """Inclusive on every bound."""
    return aabb_min.x <= point.x <= aabb_max.x and aabb_min.y <= point.y <= aabb_max.y


def aabb_intersects_aabb(
    min_a: Vector2, max_a: Vector2, min_b: Vector2, max_b: Vector2
) -> bool:
    """Strict overlap: boxes that only share an edge do not intersect."""
    return (
        (max_a.x - min_a.x) + (max_b.x - min_b.x) > max(max_a.x, max_b.x) - min(min_a.x, min_b.x)
        and (max_a.y - min_a.y) + (max_b.y - min_b.y) > max(max_a.y, max_b.y) - min(min_a.y, min_b.y)
    )


def vertices_of_aabb(aabb_min: Vector2, aabb_max: Vector2) -> List[Vector2]:
    """Corners in the order max, (max.x, min.y), min, (min.x, max.y).

    Polygon code that walks AABB edges relies on this (clockwise) order.
    """
    return [
        aabb_max,
        Vector2(aabb_max.x, aabb_min.y),
        aabb_min,
        Vector2(aabb_min.x, aabb_max.y),
    ]


def vertices_of_aabb_into(aabb_min: Vector2, aabb_max: Vector2, buffer: list) -> int:
    """Write the four corners into ``buffer`` and return 4."""
    if len(buffer) < 4:
        raise BufferTooSmallError(4, len(buffer))
    buffer[:4] = vertices_of_aabb(aabb_min, aabb_max)
    return 4


def bounding_aabb_of(points: Iterable[Vector2]) -> AABB:
    """Smallest AABB holding every point; a zero box for no points."""
    points = list(points)
    if not points:
        return AABB(ZERO, ZERO)
    return AABB(
        Vector2(min(p.x for p in points), min(p.y for p in points)),
        Vector2(max(p.x for p in points), max(p.y for p in points)),
    )


def circle_contains_point(center: Vector2, radius: float, point: Vector2) -> bool:
    return (point - center).length_squared() <= radius * radius


def circle_intersects_circle(
    center_a: Vector2, radius_a: float, center_b: Vector2, radius_b: float
) -> bool:
    """Inclusive: touching circles intersect."""
    radius_sum = radius_a + radius_b
    return (center_b - center_a).length_squared() <= radius_sum * radius_sum


def circle_intersects_aabb(
    center: Vector2, radius: float, aabb_min: Vector2, aabb_max: Vector2
) -> bool:
    if aabb_contains_point(aabb_min, aabb_max, center):
        return True

    corners = vertices_of_aabb(aabb_min, aabb_max)
    for i in range(4):
        closest = closest_point_on_line_segment(corners[i], corners[(i + 1) % 4], center)
        if circle_contains_point(center, radius, closest):
            return True

    return False
