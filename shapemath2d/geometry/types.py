"""Type definitions for shapemath2d geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Vector2:
    """2D vector / point with value semantics."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)


ZERO = Vector2(0.0, 0.0)


@dataclass
class AABB:
    """Axis-aligned bounding box. Callers keep min <= max on both axes."""
    min: Vector2
    max: Vector2


@dataclass
class Circle:
    """Circle; a zero radius denotes a point."""
    center: Vector2
    radius: float

    @classmethod
    def zero(cls) -> Circle:
        return cls(ZERO, 0.0)


@dataclass
class ConvexPolygon:
    """Convex, clockwise-wound polygon.

    ``center`` is the arithmetic mean of the vertices unless given
    explicitly. Convexity and winding are not validated.
    """
    vertices: List[Vector2]
    center: Optional[Vector2] = field(default=None)

    def __post_init__(self):
        self.vertices = list(self.vertices)
        if self.center is None:
            from .polygon import center_of_polygon
            self.center = center_of_polygon(self.vertices)
