"""SVG input/output utilities for shapemath2d."""

import logging
import math
import re
import sys
from typing import List, Optional, Sequence, Tuple
from xml.etree import ElementTree as ET

from .config import SVG_PRECISION
from .geometry import Vector2
from .shape import Shape, ShapeKind

logger = logging.getLogger(__name__)

SHAPE_TAGS = ('path', 'polygon', 'polyline', 'rect', 'circle', 'ellipse')

_NUMBER_REGEX = r'-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?'


def parse_path_d(d: str) -> List[Vector2]:
    """Parse SVG path d attribute into points.

    Handles M, L, H, V, Z and their lowercase variants. Curves contribute
    only their endpoints.
    """
    if not d or not d.strip():
        return []

    commands = re.findall(r'[MLHVCSQTAZmlhvcsqtaz][^MLHVCSQTAZmlhvcsqtaz]*', d)

    points: List[Vector2] = []
    current_x, current_y = 0.0, 0.0
    start_x, start_y = 0.0, 0.0

    # Argument count per segment and offset of the segment endpoint.
    endpoint_layout = {'C': (6, 4), 'S': (4, 2), 'Q': (4, 2), 'T': (2, 0), 'A': (7, 5), 'L': (2, 0)}

    for cmd in commands:
        cmd_type = cmd[0]
        upper = cmd_type.upper()
        relative = cmd_type != upper
        args = [float(x) for x in re.findall(_NUMBER_REGEX, cmd[1:])]

        if upper == 'M':
            for i in range(0, len(args) - 1, 2):
                if relative:
                    current_x += args[i]
                    current_y += args[i + 1]
                else:
                    current_x, current_y = args[i], args[i + 1]
                if i == 0:
                    start_x, start_y = current_x, current_y
                points.append(Vector2(current_x, current_y))

        elif upper in endpoint_layout:
            size, offset = endpoint_layout[upper]
            for i in range(0, len(args) - size + 1, size):
                if relative:
                    current_x += args[i + offset]
                    current_y += args[i + offset + 1]
                else:
                    current_x, current_y = args[i + offset], args[i + offset + 1]
                points.append(Vector2(current_x, current_y))

        elif upper == 'H':
            for x in args:
                current_x = current_x + x if relative else x
                points.append(Vector2(current_x, current_y))

        elif upper == 'V':
            for y in args:
                current_y = current_y + y if relative else y
                points.append(Vector2(current_x, current_y))

        elif upper == 'Z':
            current_x, current_y = start_x, start_y

    return points


def _parse_points_attr(points_attr: str) -> List[Vector2]:
    coords = re.findall(_NUMBER_REGEX, points_attr)
    return [Vector2(float(coords[i]), float(coords[i + 1])) for i in range(0, len(coords) - 1, 2)]


def _drop_closing_point(points: List[Vector2]) -> List[Vector2]:
    if len(points) > 1 and points[0] == points[-1]:
        return points[:-1]
    return points


def element_to_shape(element: ET.Element) -> Optional[Shape]:
    """Convert an SVG element to a Shape.

    rect becomes an AABB, circle a Circle, and everything else a polygon
    built from its vertices (ellipses sampled at 32 points). Polygon
    vertices are taken as-is: convexity is the author's responsibility.
    """
    tag = element.tag.split('}')[-1].lower()

    if tag == 'rect':
        x = float(element.get('x', 0))
        y = float(element.get('y', 0))
        w = float(element.get('width', 0))
        h = float(element.get('height', 0))
        return Shape.aabb(Vector2(x, y), Vector2(x + w, y + h))

    if tag == 'circle':
        cx = float(element.get('cx', 0))
        cy = float(element.get('cy', 0))
        r = float(element.get('r', 0))
        return Shape.circle(Vector2(cx, cy), r)

    points: List[Vector2] = []

    if tag == 'path':
        points = parse_path_d(element.get('d', ''))

    elif tag in ('polygon', 'polyline'):
        points = _parse_points_attr(element.get('points', ''))

    elif tag == 'ellipse':
        cx = float(element.get('cx', 0))
        cy = float(element.get('cy', 0))
        rx = float(element.get('rx', 0))
        ry = float(element.get('ry', 0))
        segments = 32
        # Negative angle steps keep the outline clockwise in y-up terms.
        for i in range(segments):
            angle = -(i / segments) * math.pi * 2
            points.append(Vector2(cx + rx * math.cos(angle), cy + ry * math.sin(angle)))

    points = _drop_closing_point(points)
    if len(points) < 3:
        logger.debug("Skipping <%s> with %d usable vertices", tag, len(points))
        return None

    return Shape.polygon(points)


def extract_shapes_from_svg(svg_content: str) -> Tuple[List[Shape], dict]:
    """Extract all shapes from SVG content.

    Returns:
        Tuple of (list of shapes, SVG metadata dict with viewBox, width, height)
    """
    root = ET.fromstring(svg_content)

    metadata = {
        'viewBox': root.get('viewBox', ''),
        'width': root.get('width', ''),
        'height': root.get('height', ''),
    }

    shapes: List[Shape] = []

    def process_element(elem: ET.Element):
        tag = elem.tag.split('}')[-1].lower()
        if tag in SHAPE_TAGS:
            shape = element_to_shape(elem)
            if shape is not None:
                shapes.append(shape)

        for child in elem:
            process_element(child)

    process_element(root)

    return shapes, metadata


def _format_points(points: Sequence[Vector2], precision: int) -> str:
    return ' '.join(f"{p.x:.{precision}f},{p.y:.{precision}f}" for p in points)


def shape_to_svg_element(
    shape: Shape,
    stroke: str = 'black',
    stroke_width: str = '1',
    precision: int = SVG_PRECISION,
) -> str:
    """Render one shape as an SVG element string."""
    style = f'fill="none" stroke="{stroke}" stroke-width="{stroke_width}"'

    if shape.kind is ShapeKind.CIRCLE:
        circle = shape.payload
        return (
            f'<circle cx="{circle.center.x:.{precision}f}" cy="{circle.center.y:.{precision}f}" '
            f'r="{circle.radius:.{precision}f}" {style}/>'
        )

    return f'<polygon points="{_format_points(shape.vertices(), precision)}" {style}/>'


def create_svg_from_shapes(
    layers: Sequence[Tuple[Sequence[Shape], str]],
    viewbox: str = '',
    width: str = '',
    height: str = '',
    stroke_width: str = '1',
    precision: int = SVG_PRECISION,
) -> str:
    """Create a complete SVG document.

    Args:
        layers: (shapes, stroke color) pairs, each written as one <g> group
        viewbox: SVG viewBox attribute
        width: SVG width attribute
        height: SVG height attribute
        stroke_width: Stroke width
        precision: Decimal places for coordinates

    Returns:
        Complete SVG document as string
    """
    attrs = ['xmlns="http://www.w3.org/2000/svg"']
    if viewbox:
        attrs.append(f'viewBox="{viewbox}"')
    if width:
        attrs.append(f'width="{width}"')
    if height:
        attrs.append(f'height="{height}"')

    groups = []
    for shapes, stroke in layers:
        elements = '\n'.join(
            f'    {shape_to_svg_element(shape, stroke, stroke_width, precision)}'
            for shape in shapes
        )
        groups.append(f'  <g>\n{elements}\n  </g>')

    body = '\n'.join(groups)
    return f'''<?xml version="1.0" encoding="UTF-8"?>
<svg {' '.join(attrs)}>
{body}
</svg>'''


def read_svg(path: Optional[str] = None) -> str:
    """Read SVG content from file or stdin."""
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r') as f:
        return f.read()


def write_svg(content: str, path: Optional[str] = None):
    """Write SVG content to file or stdout."""
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)
