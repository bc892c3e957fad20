"""Tests for the minimum enclosing circle."""

import logging
import math
import random

import pytest
from shapemath2d import Vector2, bounding_circle_of
from shapemath2d.config import MAX_WELZL_ITERATIONS, WELZL_ITERATIONS_PER_POINT
from shapemath2d.wrap import iteration_limit_for
from shapemath2d.geometry import circle_contains_point


def assert_encloses(circle, points, slack=1e-9):
    for point in points:
        assert circle_contains_point(circle.center, circle.radius + slack, point)


def test_right_triangle():
    """Three points on the boundary give the circumscribed circle."""
    circle = bounding_circle_of([Vector2(0, 0), Vector2(4, 0), Vector2(0, 3)])
    assert circle.center.x == pytest.approx(2.0)
    assert circle.center.y == pytest.approx(1.5)
    assert circle.radius == pytest.approx(2.5)


def test_no_points():
    circle = bounding_circle_of([])
    assert circle.center == Vector2(0, 0)
    assert circle.radius == 0.0


def test_single_point():
    circle = bounding_circle_of([Vector2(3, -2)])
    assert circle.center == Vector2(3, -2)
    assert circle.radius == 0.0


def test_two_points():
    circle = bounding_circle_of([Vector2(1, 1), Vector2(5, 1)])
    assert circle.center == Vector2(3, 1)
    assert circle.radius == pytest.approx(2.0)


def test_square_with_interior_point():
    points = [Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4), Vector2(2, 2)]
    circle = bounding_circle_of(points)
    assert circle.center.x == pytest.approx(2.0)
    assert circle.center.y == pytest.approx(2.0)
    assert circle.radius == pytest.approx(math.sqrt(8))
    assert_encloses(circle, points)


def test_obtuse_triangle_uses_longest_side():
    """The third point sits inside the circle on the longest side."""
    circle = bounding_circle_of([Vector2(0, 0), Vector2(10, 0), Vector2(5, 1)])
    assert circle.center.x == pytest.approx(5.0)
    assert circle.center.y == pytest.approx(0.0)
    assert circle.radius == pytest.approx(5.0)


def test_input_is_not_modified():
    points = [Vector2(0, 0), Vector2(4, 0), Vector2(0, 3), Vector2(1, 1)]
    original = list(points)
    bounding_circle_of(points)
    assert points == original


def test_random_points_match_shapely():
    shapely = pytest.importorskip("shapely")
    from shapely.geometry import MultiPoint

    rng = random.Random(7)
    points = [Vector2(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(30)]
    circle = bounding_circle_of(points, max_iterations=100000)

    assert circle.radius > 0
    assert_encloses(circle, points, slack=1e-6)
    expected = shapely.minimum_bounding_radius(MultiPoint([tuple(p) for p in points]))
    assert circle.radius == pytest.approx(expected, rel=1e-6)


def test_iteration_cap_returns_zero_circle(caplog):
    points = [Vector2(0, 0), Vector2(4, 0), Vector2(0, 3)]
    with caplog.at_level(logging.WARNING, logger="shapemath2d.wrap.bounding_circle"):
        circle = bounding_circle_of(points, max_iterations=1)
    assert circle.center == Vector2(0, 0)
    assert circle.radius == 0.0
    assert "exceeded" in caplog.text


def test_iteration_limit_grows_with_point_count():
    assert iteration_limit_for(0) == MAX_WELZL_ITERATIONS
    assert iteration_limit_for(3) == MAX_WELZL_ITERATIONS
    assert iteration_limit_for(300) == 300 * WELZL_ITERATIONS_PER_POINT


def test_ordered_circle_vertices_within_scaled_limit():
    """Vertices listed in order around a circle are resolved without hitting the limit."""
    points = [
        Vector2(10 * math.cos(2 * math.pi * i / 300), 10 * math.sin(2 * math.pi * i / 300))
        for i in range(300)
    ]
    original = list(points)
    circle = bounding_circle_of(points, max_iterations=iteration_limit_for(len(points)))

    assert circle.radius == pytest.approx(10.0, rel=1e-6)
    assert circle.center.x == pytest.approx(0.0, abs=1e-6)
    assert circle.center.y == pytest.approx(0.0, abs=1e-6)
    assert_encloses(circle, points, slack=1e-6)
    assert points == original


def test_unshuffled_search_still_encloses():
    points = [Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4), Vector2(2, 2)]
    circle = bounding_circle_of(points, shuffle=False)
    assert circle.radius == pytest.approx(math.sqrt(8))
    assert_encloses(circle, points)
