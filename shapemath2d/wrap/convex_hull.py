"""Convex hull by gift wrapping (Jarvis march)."""

from typing import List, Sequence

from ..errors import BufferTooSmallError
from ..geometry import Vector2, point_is_on_left_side


def convex_hull(points: Sequence[Vector2]) -> List[Vector2]:
    """Hull vertices of ``points`` in clockwise order (y-up), O(n * h).

    Starts at the leftmost point (lowest y on ties). Points lying on a hull
    edge between two corners are left out, as are duplicates.
    """
    n = len(points)
    if n == 0:
        return []

    start = min(range(n), key=lambda i: (points[i].x, points[i].y))
    hull: List[Vector2] = []
    current = start

    while True:
        origin = points[current]
        hull.append(origin)

        # Keep the candidate that leaves no point to its left; among
        # collinear candidates keep the farthest.
        candidate = current
        for i in range(n):
            point = points[i]
            if point == origin:
                continue
            best = points[candidate]
            if point_is_on_left_side(origin, best, point):
                candidate = i
            elif not point_is_on_left_side(origin, point, best) and \
                    (point - origin).length_squared() > (best - origin).length_squared():
                candidate = i

        current = candidate
        if points[current] == points[start] or len(hull) >= n:
            break

    return hull


def convex_hull_into(points: Sequence[Vector2], buffer: list) -> int:
    """Write the hull into ``buffer`` from index 0 and return the vertex count.

    Entries past the returned count are left untouched.
    """
    hull = convex_hull(points)
    if len(hull) > len(buffer):
        raise BufferTooSmallError(len(hull), len(buffer))
    buffer[:len(hull)] = hull
    return len(hull)
