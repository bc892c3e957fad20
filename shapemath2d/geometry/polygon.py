"""Convex polygon operations.

Polygons are sequences of Vector2 vertices, convex and wound clockwise.
Neither property is checked; violating them gives meaningless results.
"""

import math
from typing import Sequence

from .types import Circle, Vector2, ZERO
from .line import (
    closest_point_on_line_segment,
    line_intersects_line,
    point_is_on_left_side,
    segment_intersects_segment,
)
from .primitives import aabb_contains_point, circle_contains_point, vertices_of_aabb
from .vector import rotated_by_radians


def polygon_signed_area(polygon: Sequence[Vector2]) -> float:
    """Calculate the signed area of a polygon.

    Positive = counter-clockwise, negative = clockwise.
    """
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y

    return area / 2.0


def is_clockwise(polygon: Sequence[Vector2]) -> bool:
    return polygon_signed_area(polygon) < 0


def polygon_contains_point(vertices: Sequence[Vector2], point: Vector2) -> bool:
    """Check if a point is inside a convex polygon.

    The point is inside when it lies on the same side of every edge as it
    does of the first one. Points exactly on an edge are not reliably
    classified either way.
    """
    n = len(vertices)
    if n < 3:
        return False

    first_side = point_is_on_left_side(vertices[0], vertices[1], point)
    for i in range(1, n):
        if point_is_on_left_side(vertices[i], vertices[(i + 1) % n], point) != first_side:
            return False

    return True


def _edges_cross(vertices_a: Sequence[Vector2], vertices_b: Sequence[Vector2]) -> bool:
    n = len(vertices_a)
    m = len(vertices_b)
    for i in range(n):
        a1 = vertices_a[i]
        b1 = vertices_a[(i + 1) % n]
        for j in range(m):
            if segment_intersects_segment(a1, b1, vertices_b[j], vertices_b[(j + 1) % m]) is not None:
                return True
    return False


def polygon_intersects_aabb(
    vertices: Sequence[Vector2], aabb_min: Vector2, aabb_max: Vector2
) -> bool:
    if any(aabb_contains_point(aabb_min, aabb_max, v) for v in vertices):
        return True

    corners = vertices_of_aabb(aabb_min, aabb_max)
    if any(polygon_contains_point(vertices, corner) for corner in corners):
        return True

    return _edges_cross(vertices, corners)


def polygon_intersects_circle(
    vertices: Sequence[Vector2], center: Vector2, radius: float
) -> bool:
    if polygon_contains_point(vertices, center):
        return True

    n = len(vertices)
    for i in range(n):
        closest = closest_point_on_line_segment(vertices[i], vertices[(i + 1) % n], center)
        if circle_contains_point(center, radius, closest):
            return True

    return False


def polygon_intersects_polygon(
    vertices_a: Sequence[Vector2], vertices_b: Sequence[Vector2]
) -> bool:
    # Containment first: a polygon nested in the other has no crossing edges.
    if any(polygon_contains_point(vertices_b, v) for v in vertices_a):
        return True
    if any(polygon_contains_point(vertices_a, v) for v in vertices_b):
        return True

    return _edges_cross(vertices_a, vertices_b)


def center_of_polygon(vertices: Sequence[Vector2]) -> Vector2:
    """Arithmetic mean of the vertices (not the area centroid)."""
    if not vertices:
        return ZERO
    return Vector2(
        sum(v.x for v in vertices) / len(vertices),
        sum(v.y for v in vertices) / len(vertices),
    )


def longest_edge_of_polygon(vertices: Sequence[Vector2]) -> int:
    """Index ``i`` of the longest edge ``i -> (i + 1) % n``; ties keep the first."""
    n = len(vertices)
    if n < 2:
        return 0

    longest_edge = 0
    longest_length_squared = (vertices[1] - vertices[0]).length_squared()
    for i in range(1, n):
        length_squared = (vertices[(i + 1) % n] - vertices[i]).length_squared()
        if length_squared > longest_length_squared:
            longest_edge = i
            longest_length_squared = length_squared

    return longest_edge


def circumscribed_circle_of_triangle(triangle: Sequence[Vector2]) -> Circle:
    """Circle through all three vertices of a triangle.

    Intersects the perpendicular bisectors of the two shorter edges. A
    collinear triangle has no such circle and yields the zero circle.
    """
    longest_edge = longest_edge_of_polygon(triangle)
    a = (longest_edge + 1) % 3
    b = (longest_edge + 2) % 3

    a_to_b_middle = (triangle[a] + triangle[b]) / 2.0
    b_to_c_middle = (triangle[b] + triangle[longest_edge]) / 2.0
    perpendicular_a = rotated_by_radians(a_to_b_middle - triangle[a], math.pi / 2.0) + a_to_b_middle
    perpendicular_b = rotated_by_radians(b_to_c_middle - triangle[b], math.pi / 2.0) + b_to_c_middle

    center = line_intersects_line(a_to_b_middle, perpendicular_a, b_to_c_middle, perpendicular_b)
    if center is None:
        return Circle.zero()

    return Circle(center, (triangle[0] - center).length())

