#!/usr/bin/env python3
"""
Shapely comparison benchmark.
Runs convex hull, minimum enclosing circle and polygon intersection on
random point sets with both shapemath2d and Shapely, checks that the
answers agree, and reports timings.

Usage:
    python benchmark_shapely.py [num_points] [num_trials]
    python benchmark_shapely.py 200 50
"""

import math
import random
import sys
import time

try:
    import shapely
    from shapely.geometry import MultiPoint, Polygon
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install shapely")
    sys.exit(1)

from shapemath2d import Vector2, bounding_circle_of, convex_hull
from shapemath2d.wrap import iteration_limit_for
from shapemath2d.geometry import polygon_intersects_polygon


def random_points(count: int, radius: float = 100.0) -> list[Vector2]:
    """Uniform points inside a disc of the given radius."""
    points = []
    for _ in range(count):
        r = radius * math.sqrt(random.random())
        theta = random.random() * 2 * math.pi
        points.append(Vector2(r * math.cos(theta), r * math.sin(theta)))
    return points


def benchmark_shapely(num_points: int = 200, num_trials: int = 50):
    """Run the full benchmark."""
    print(f"Comparing on {num_trials} trials of {num_points} points")

    kernel_time = 0.0
    shapely_time = 0.0
    hull_mismatches = 0
    circle_mismatches = 0
    intersect_mismatches = 0
    circle_fallbacks = 0

    for _ in range(num_trials):
        points = random_points(num_points)
        offset = random.uniform(-150.0, 150.0)
        others = [Vector2(p.x + offset, p.y) for p in random_points(num_points)]

        start = time.perf_counter()
        hull = convex_hull(points)
        other_hull = convex_hull(others)
        circle = bounding_circle_of(points, max_iterations=iteration_limit_for(num_points))
        intersects = polygon_intersects_polygon(hull, other_hull)
        kernel_time += time.perf_counter() - start

        start = time.perf_counter()
        shapely_hull = MultiPoint([tuple(p) for p in points]).convex_hull
        shapely_other = MultiPoint([tuple(p) for p in others]).convex_hull
        shapely_radius = shapely.minimum_bounding_radius(shapely_hull)
        shapely_intersects = shapely_hull.intersects(shapely_other)
        shapely_time += time.perf_counter() - start

        if not math.isclose(Polygon([tuple(p) for p in hull]).area, shapely_hull.area, rel_tol=1e-9):
            hull_mismatches += 1
        if circle.radius == 0.0:
            circle_fallbacks += 1
        elif not math.isclose(circle.radius, shapely_radius, rel_tol=1e-6):
            circle_mismatches += 1
        if intersects != shapely_intersects:
            intersect_mismatches += 1

    print()
    print("=" * 50)
    print("RESULTS (shapemath2d vs Shapely)")
    print("=" * 50)
    print(f"Hull area mismatches:     {hull_mismatches}")
    print(f"Circle radius mismatches: {circle_mismatches}")
    print(f"Circle step-limit hits:   {circle_fallbacks}")
    print(f"Intersection mismatches:  {intersect_mismatches}")
    print(f"shapemath2d time:         {kernel_time*1000:.1f}ms")
    print(f"Shapely time:             {shapely_time*1000:.1f}ms")
    print("=" * 50)

    return kernel_time, shapely_time


if __name__ == "__main__":
    num_points = int(sys.argv[1]) if len(sys.argv) > 1 else 200
    num_trials = int(sys.argv[2]) if len(sys.argv) > 2 else 50
    benchmark_shapely(num_points, num_trials)
