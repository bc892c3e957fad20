"""shapemath2d: 2D intersection tests, bounding circles and convex hulls."""

__version__ = "0.1.0"

from .geometry import AABB, Circle, ConvexPolygon, Vector2
from .shape import Shape, ShapeKind
from .wrap import bounding_circle_of, convex_hull, convex_hull_into
from .errors import BufferTooSmallError, ShapeMathError, UnrecognizedShapeKindError

__all__ = [
    "AABB",
    "Circle",
    "ConvexPolygon",
    "Vector2",
    "Shape",
    "ShapeKind",
    "bounding_circle_of",
    "convex_hull",
    "convex_hull_into",
    "BufferTooSmallError",
    "ShapeMathError",
    "UnrecognizedShapeKindError",
]
