"""Tests for gift-wrapping convex hull."""

import random

import pytest
from shapemath2d import BufferTooSmallError, Vector2, convex_hull, convex_hull_into
from shapemath2d.geometry import is_clockwise, polygon_contains_point

SQUARE_WITH_CENTER = [Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4), Vector2(2, 2)]


def test_square_hull_drops_interior_point():
    hull = convex_hull(SQUARE_WITH_CENTER)
    assert hull == [Vector2(0, 0), Vector2(0, 4), Vector2(4, 4), Vector2(4, 0)]
    assert is_clockwise(hull)


def test_hull_supports_containment():
    """The clockwise hull works with polygon_contains_point."""
    hull = convex_hull(SQUARE_WITH_CENTER)
    assert polygon_contains_point(hull, Vector2(1, 3))
    assert not polygon_contains_point(hull, Vector2(5, 3))


def test_collinear_edge_points_are_skipped():
    points = SQUARE_WITH_CENTER + [Vector2(2, 0), Vector2(0, 1)]
    assert len(convex_hull(points)) == 4


def test_duplicates():
    hull = convex_hull([Vector2(0, 0), Vector2(0, 0), Vector2(1, 0), Vector2(0, 1)])
    assert hull == [Vector2(0, 0), Vector2(0, 1), Vector2(1, 0)]


def test_degenerate_inputs():
    assert convex_hull([]) == []
    assert convex_hull([Vector2(1, 1)]) == [Vector2(1, 1)]
    assert convex_hull([Vector2(1, 1)] * 3) == [Vector2(1, 1)]
    assert convex_hull([Vector2(0, 0), Vector2(1, 0)]) == [Vector2(0, 0), Vector2(1, 0)]


def test_hull_into_buffer():
    buffer = [None] * len(SQUARE_WITH_CENTER)
    count = convex_hull_into(SQUARE_WITH_CENTER, buffer)
    assert count == 4
    assert buffer[:count] == convex_hull(SQUARE_WITH_CENTER)
    assert buffer[4] is None


def test_hull_into_small_buffer():
    with pytest.raises(BufferTooSmallError) as excinfo:
        convex_hull_into(SQUARE_WITH_CENTER, [None] * 3)
    assert excinfo.value.required == 4
    assert excinfo.value.capacity == 3


def test_random_hull_matches_shapely():
    shapely_geometry = pytest.importorskip("shapely.geometry")

    rng = random.Random(3)
    points = [Vector2(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(60)]
    hull = convex_hull(points)

    expected = shapely_geometry.MultiPoint([tuple(p) for p in points]).convex_hull
    assert {tuple(v) for v in hull} == set(expected.exterior.coords)
    assert is_clockwise(hull)
    assert shapely_geometry.Polygon([tuple(v) for v in hull]).area == pytest.approx(expected.area)
