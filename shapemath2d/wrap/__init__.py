"""Shapes that wrap a point set: minimum enclosing circle and convex hull."""

from .bounding_circle import bounding_circle_of, iteration_limit_for
from .convex_hull import convex_hull, convex_hull_into

__all__ = [
    "bounding_circle_of",
    "convex_hull",
    "convex_hull_into",
    "iteration_limit_for",
]
