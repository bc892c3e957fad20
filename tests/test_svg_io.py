"""Tests for SVG input/output."""

from shapemath2d import ShapeKind, Vector2
from shapemath2d.svg_io import (
    create_svg_from_shapes,
    extract_shapes_from_svg,
    parse_path_d,
    shape_to_svg_element,
)
from shapemath2d.shape import Shape

SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" width="100" height="100">
  <g>
    <rect x="0" y="0" width="2" height="2"/>
    <circle cx="3" cy="1" r="1.5"/>
  </g>
  <polygon points="0,0 0,4 4,4 4,0 0,0"/>
  <polyline points="0,0 5,5"/>
</svg>'''


def test_parse_path_absolute():
    points = parse_path_d("M0,0 L10,0 L10,10 Z")
    assert points == [Vector2(0, 0), Vector2(10, 0), Vector2(10, 10)]


def test_parse_path_relative():
    points = parse_path_d("m0,0 l10,0 l0,10 h-10 z")
    assert points == [Vector2(0, 0), Vector2(10, 0), Vector2(10, 10), Vector2(0, 10)]


def test_parse_empty_path():
    assert parse_path_d("") == []


def test_extract_shapes():
    """rect, circle and polygon map to their kinds; short polylines are skipped."""
    shapes, metadata = extract_shapes_from_svg(SVG)
    assert [s.kind for s in shapes] == [ShapeKind.AABB, ShapeKind.CIRCLE, ShapeKind.POLYGON]
    assert metadata['viewBox'] == "0 0 100 100"

    box, circle, polygon = shapes
    assert box.payload.min == Vector2(0, 0)
    assert box.payload.max == Vector2(2, 2)
    assert circle.payload.center == Vector2(3, 1)
    assert circle.payload.radius == 1.5
    # closing vertex dropped
    assert len(polygon.payload.vertices) == 4


def test_shape_to_svg_element():
    element = shape_to_svg_element(Shape.circle(Vector2(1, 2), 3), stroke='red')
    assert 'cx="1.00"' in element
    assert 'r="3.00"' in element
    assert 'stroke="red"' in element

    element = shape_to_svg_element(Shape.aabb(Vector2(0, 0), Vector2(2, 2)))
    assert element.startswith('<polygon points="2.00,2.00 2.00,0.00 0.00,0.00 0.00,2.00"')


def test_written_svg_can_be_read_back():
    shapes, _ = extract_shapes_from_svg(SVG)
    svg = create_svg_from_shapes([(shapes, 'black')], viewbox="0 0 100 100")
    again, metadata = extract_shapes_from_svg(svg)
    assert len(again) == len(shapes)
    assert metadata['viewBox'] == "0 0 100 100"
