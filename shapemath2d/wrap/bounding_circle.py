"""Minimum enclosing circle (Welzl's algorithm).

Based on the walkthrough at http://www.sunshine2k.de/coding/java/Welzl/Welzl.html
"""

import logging
import random
from typing import List, Sequence, Tuple

from ..config import MAX_WELZL_ITERATIONS, WELZL_ITERATIONS_PER_POINT, WELZL_SHUFFLE_SEED
from ..geometry import Circle, Vector2, circle_contains_point, circumscribed_circle_of_triangle

logger = logging.getLogger(__name__)

_ENTER = 0
_CHECK = 1


def _circle_from_support(support: Tuple[Vector2, ...]) -> Circle:
    if len(support) == 1:
        return Circle(support[0], 0.0)
    if len(support) == 2:
        a, b = support
        return Circle((a + b) / 2.0, (b - a).length() / 2.0)
    if len(support) == 3:
        return circumscribed_circle_of_triangle(support)
    return Circle.zero()


def iteration_limit_for(num_points: int) -> int:
    """Step limit that grows with the input, never below MAX_WELZL_ITERATIONS."""
    return max(MAX_WELZL_ITERATIONS, WELZL_ITERATIONS_PER_POINT * num_points)


def bounding_circle_of(
    points: Sequence[Vector2],
    max_iterations: int = MAX_WELZL_ITERATIONS,
    shuffle: bool = True,
) -> Circle:
    """Smallest circle containing every point.

    Points are consumed from the end of the sequence backwards; the input
    is never modified. With ``shuffle`` a private copy is put in a fixed
    pseudo-random order first, which keeps the expected step count linear
    even for ordered input such as the vertices of a polygon.

    Each step either keeps the circle found for the remaining points, or, when
    the dropped point falls outside it, repeats the search with that point pinned to the boundary (at most three).

    The search runs on an explicit stack. Once more than ``max_iterations``
    steps have been taken the zero circle is returned instead.
    """
    if shuffle:
        points = list(points)
        random.Random(WELZL_SHUFFLE_SEED).shuffle(points)

    result = Circle.zero()
    iterations = 0

    # Frames are (stage, num_unchecked, support).
    stack: List[Tuple[int, int, Tuple[Vector2, ...]]] = [(_ENTER, len(points), ())]

    while stack:
        stage, num_unchecked, support = stack.pop()

        if stage == _ENTER:
            iterations += 1
            if iterations > max_iterations:
                logger.warning(
                    "Bounding circle search exceeded %d iterations for %d points; "
                    "returning zero circle", max_iterations, len(points)
                )
                return Circle.zero()

            if num_unchecked <= 0 or len(support) == 3:
                result = _circle_from_support(support)
                continue

            stack.append((_CHECK, num_unchecked, support))
            stack.append((_ENTER, num_unchecked - 1, support))

        else:
            point = points[num_unchecked - 1]
            if not circle_contains_point(result.center, result.radius, point):
                stack.append((_ENTER, num_unchecked - 1, support + (point,)))

    return result
