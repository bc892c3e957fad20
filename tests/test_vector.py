"""Tests for vector helpers."""

import math

import pytest
from shapemath2d.geometry import (
    Vector2,
    angle_between,
    angle_between_signed,
    approximately_equal,
    rotated_by_degrees,
    rotated_by_radians,
)


def test_vector_arithmetic():
    """Test operators and products."""
    a = Vector2(3.0, -4.0)
    b = Vector2(1.5, 2.0)
    assert a + b == Vector2(4.5, -2.0)
    assert a - b == Vector2(1.5, -6.0)
    assert a * 2.0 == Vector2(6.0, -8.0)
    assert 2.0 * a == Vector2(6.0, -8.0)
    assert a / 2.0 == Vector2(1.5, -2.0)
    assert -a == Vector2(-3.0, 4.0)
    assert a.dot(b) == pytest.approx(-3.5)
    assert a.cross(b) == pytest.approx(12.0)
    assert a.length() == pytest.approx(5.0)
    assert a.length_squared() == 25.0
    assert tuple(a) == (3.0, -4.0)


def test_vector_is_value_type():
    """Equal vectors compare and hash equal."""
    assert Vector2(1, 2) == Vector2(1.0, 2.0)
    assert len({Vector2(1, 2), Vector2(1.0, 2.0)}) == 1


def test_rotate_about_origin():
    """Quarter turn counter-clockwise."""
    rotated = rotated_by_radians(Vector2(1, 0), math.pi / 2)
    assert rotated.x == pytest.approx(0.0, abs=1e-12)
    assert rotated.y == pytest.approx(1.0)


def test_rotate_about_center():
    """Half turn about (1, 1)."""
    rotated = rotated_by_radians(Vector2(2, 1), math.pi, Vector2(1, 1))
    assert rotated.x == pytest.approx(0.0)
    assert rotated.y == pytest.approx(1.0)


def test_rotate_by_degrees():
    rotated = rotated_by_degrees(Vector2(0, 2), -90)
    assert rotated.x == pytest.approx(2.0)
    assert rotated.y == pytest.approx(0.0, abs=1e-12)


def test_angle_between():
    assert angle_between(Vector2(1, 0), Vector2(0, 3)) == pytest.approx(math.pi / 2)
    assert angle_between(Vector2(1, 0), Vector2(-2, 0)) == pytest.approx(math.pi)


def test_angle_between_parallel_vectors():
    """Rounding must not push the cosine outside acos' domain."""
    assert angle_between(Vector2(1, 1), Vector2(3, 3)) == pytest.approx(0.0, abs=1e-6)


def test_angle_between_signed():
    """Counter-clockwise is positive."""
    assert angle_between_signed(Vector2(1, 0), Vector2(0, 1)) == pytest.approx(math.pi / 2)
    assert angle_between_signed(Vector2(1, 0), Vector2(0, -1)) == pytest.approx(-math.pi / 2)


def test_angle_with_zero_vector():
    """Zero vectors give a zero angle instead of NaN."""
    assert angle_between(Vector2(0, 0), Vector2(1, 0)) == 0.0
    assert angle_between_signed(Vector2(1, 0), Vector2(0, 0)) == 0.0


def test_approximately_equal():
    assert approximately_equal(1.0, 1.0 + 1e-9)
    assert not approximately_equal(1.0, 1.1)
    assert approximately_equal(1.0, 1.05, epsilon=0.1)
    assert approximately_equal(Vector2(1, 2), Vector2(1 + 1e-9, 2 - 1e-9))
    assert not approximately_equal(Vector2(1, 2), Vector2(1, 2.5))
