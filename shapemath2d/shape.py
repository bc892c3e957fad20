"""Shape entity: a tagged union over AABB, Circle and ConvexPolygon."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .errors import BufferTooSmallError, UnrecognizedShapeKindError
from .geometry import (
    AABB,
    Circle,
    ConvexPolygon,
    Vector2,
    aabb_contains_point,
    aabb_intersects_aabb,
    center_of_polygon,
    circle_contains_point,
    circle_intersects_aabb,
    circle_intersects_circle,
    polygon_contains_point,
    polygon_intersects_aabb,
    polygon_intersects_circle,
    polygon_intersects_polygon,
    rotated_by_radians,
    vertices_of_aabb,
)


class ShapeKind(Enum):
    AABB = "aabb"
    CIRCLE = "circle"
    POLYGON = "polygon"


_KIND_OF_PAYLOAD = {
    AABB: ShapeKind.AABB,
    Circle: ShapeKind.CIRCLE,
    ConvexPolygon: ShapeKind.POLYGON,
}

Payload = Union[AABB, Circle, ConvexPolygon]


@dataclass
class Shape:
    """One of three shape kinds, mutated in place by translate/rotate.

    Build one with ``Shape.aabb``, ``Shape.circle`` or ``Shape.polygon``.
    """
    payload: Payload

    @classmethod
    def aabb(cls, aabb_min: Vector2, aabb_max: Vector2) -> Shape:
        return cls(AABB(aabb_min, aabb_max))

    @classmethod
    def circle(cls, center: Vector2, radius: float) -> Shape:
        return cls(Circle(center, radius))

    @classmethod
    def polygon(cls, vertices: Sequence[Vector2], center: Optional[Vector2] = None) -> Shape:
        return cls(ConvexPolygon(list(vertices), center))

    @property
    def kind(self) -> ShapeKind:
        try:
            return _KIND_OF_PAYLOAD[type(self.payload)]
        except KeyError:
            raise UnrecognizedShapeKindError(
                f"Unrecognized shape payload {type(self.payload).__name__}"
            ) from None

    def copy(self) -> Shape:
        return copy.deepcopy(self)

    def translate(self, delta: Vector2):
        """Move every positional field by ``delta``."""
        kind = self.kind
        if kind is ShapeKind.AABB:
            self.payload.min += delta
            self.payload.max += delta
        elif kind is ShapeKind.CIRCLE:
            self.payload.center += delta
        else:
            self.payload.center += delta
            self.payload.vertices = [v + delta for v in self.payload.vertices]

    def rotate(self, radians: float):
        """Rotate a polygon about its stored center; a no-op for AABB and Circle.

        The stored center is then replaced by the mean of the rotated
        vertices, so a polygon whose center was not already that mean
        drifts with every rotation.
        """
        if self.kind is not ShapeKind.POLYGON:
            return

        polygon = self.payload
        polygon.vertices = [rotated_by_radians(v, radians, polygon.center) for v in polygon.vertices]
        polygon.center = center_of_polygon(polygon.vertices)

    def contains_point(self, point: Vector2) -> bool:
        kind = self.kind
        if kind is ShapeKind.AABB:
            return aabb_contains_point(self.payload.min, self.payload.max, point)
        if kind is ShapeKind.CIRCLE:
            return circle_contains_point(self.payload.center, self.payload.radius, point)
        return polygon_contains_point(self.payload.vertices, point)

    def intersects(self, other: Shape) -> bool:
        try:
            test = _INTERSECTION_TESTS[(self.kind, other.kind)]
        except KeyError:
            raise UnrecognizedShapeKindError(
                f"No intersection test for {self.kind} and {other.kind}"
            ) from None
        return test(self.payload, other.payload)

    def vertices(self) -> List[Vector2]:
        """Outline vertices for drawing. Circles have none; draw them natively."""
        kind = self.kind
        if kind is ShapeKind.AABB:
            return vertices_of_aabb(self.payload.min, self.payload.max)
        if kind is ShapeKind.CIRCLE:
            return []
        return list(self.payload.vertices)

    def vertices_into(self, buffer: list) -> int:
        """Write the outline vertices into ``buffer`` and return how many were written."""
        vertices = self.vertices()
        if len(vertices) > len(buffer):
            raise BufferTooSmallError(len(vertices), len(buffer))
        buffer[:len(vertices)] = vertices
        return len(vertices)


_INTERSECTION_TESTS: Dict[Tuple[ShapeKind, ShapeKind], Callable[[Payload, Payload], bool]] = {
    (ShapeKind.AABB, ShapeKind.AABB):
        lambda a, b: aabb_intersects_aabb(a.min, a.max, b.min, b.max),
    (ShapeKind.AABB, ShapeKind.CIRCLE):
        lambda a, b: circle_intersects_aabb(b.center, b.radius, a.min, a.max),
    (ShapeKind.AABB, ShapeKind.POLYGON):
        lambda a, b: polygon_intersects_aabb(b.vertices, a.min, a.max),
    (ShapeKind.CIRCLE, ShapeKind.AABB):
        lambda a, b: circle_intersects_aabb(a.center, a.radius, b.min, b.max),
    (ShapeKind.CIRCLE, ShapeKind.CIRCLE):
        lambda a, b: circle_intersects_circle(a.center, a.radius, b.center, b.radius),
    (ShapeKind.CIRCLE, ShapeKind.POLYGON):
        lambda a, b: polygon_intersects_circle(b.vertices, a.center, a.radius),
    (ShapeKind.POLYGON, ShapeKind.AABB):
        lambda a, b: polygon_intersects_aabb(a.vertices, b.min, b.max),
    (ShapeKind.POLYGON, ShapeKind.CIRCLE):
        lambda a, b: polygon_intersects_circle(a.vertices, b.center, b.radius),
    (ShapeKind.POLYGON, ShapeKind.POLYGON):
        lambda a, b: polygon_intersects_polygon(a.vertices, b.vertices),
}
