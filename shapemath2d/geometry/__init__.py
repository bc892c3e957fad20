"""Geometry utilities for shapemath2d."""

from .types import AABB, Circle, ConvexPolygon, Vector2, ZERO
from .vector import (
    angle_between,
    angle_between_signed,
    approximately_equal,
    rotated_by_degrees,
    rotated_by_radians,
)
from .line import (
    closest_point_on_line,
    closest_point_on_line_segment,
    line_intersects_line,
    line_intersects_line_segment,
    point_is_on_left_side,
    segment_intersects_segment,
)
from .primitives import (
    aabb_contains_point,
    aabb_intersects_aabb,
    bounding_aabb_of,
    circle_contains_point,
    circle_intersects_aabb,
    circle_intersects_circle,
    vertices_of_aabb,
    vertices_of_aabb_into,
)
from .polygon import (
    center_of_polygon,
    circumscribed_circle_of_triangle,
    is_clockwise,
    longest_edge_of_polygon,
    polygon_contains_point,
    polygon_intersects_aabb,
    polygon_intersects_circle,
    polygon_intersects_polygon,
    polygon_signed_area,
)

__all__ = [
    "AABB",
    "Circle",
    "ConvexPolygon",
    "Vector2",
    "ZERO",
    "angle_between",
    "angle_between_signed",
    "approximately_equal",
    "rotated_by_degrees",
    "rotated_by_radians",
    "closest_point_on_line",
    "closest_point_on_line_segment",
    "line_intersects_line",
    "line_intersects_line_segment",
    "point_is_on_left_side",
    "segment_intersects_segment",
    "aabb_contains_point",
    "aabb_intersects_aabb",
    "bounding_aabb_of",
    "circle_contains_point",
    "circle_intersects_aabb",
    "circle_intersects_circle",
    "vertices_of_aabb",
    "vertices_of_aabb_into",
    "center_of_polygon",
    "circumscribed_circle_of_triangle",
    "is_clockwise",
    "longest_edge_of_polygon",
    "polygon_contains_point",
    "polygon_intersects_aabb",
    "polygon_intersects_circle",
    "polygon_intersects_polygon",
    "polygon_signed_area",
]
