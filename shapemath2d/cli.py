"""Command-line interface for shapemath2d."""

import logging
import sys
import time
from typing import List

import click

from .config import DEFAULT_TOLERANCE, MAX_WELZL_ITERATIONS, WELZL_ITERATIONS_PER_POINT
from .geometry import Vector2, bounding_aabb_of
from .shape import Shape, ShapeKind
from .svg_io import (
    SHAPE_TAGS,
    create_svg_from_shapes,
    extract_shapes_from_svg,
    read_svg,
    write_svg,
)
from .wrap import bounding_circle_of, convex_hull, iteration_limit_for


def _configure_logging(verbose: bool):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_shapes(input: str, verbose: bool) -> tuple:
    try:
        svg_content = read_svg(input if input != '-' else None)
    except OSError as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Read {len(svg_content)} bytes", err=True)

    try:
        shapes, metadata = extract_shapes_from_svg(svg_content)
    except (ValueError, SyntaxError) as e:
        click.echo(f"Error parsing SVG: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Found {len(shapes)} shapes", err=True)

    if not shapes:
        click.echo("No shapes found in input", err=True)
        sys.exit(1)

    return shapes, metadata


def _points_of(shapes: List[Shape]) -> List[Vector2]:
    points: List[Vector2] = []
    for shape in shapes:
        if shape.kind is ShapeKind.CIRCLE:
            points.append(shape.payload.center)
        else:
            points.extend(shape.vertices())
    return points


@click.group()
@click.version_option()
def main():
    """shapemath2d: 2D intersection tests, bounding circles and convex hulls.

    Examples:

        shapemath2d wrap input.svg -o wrapped.svg

        cat input.svg | shapemath2d intersect
    """
    pass


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--hull/--no-hull', default=True, help='Draw the convex hull (default: on)')
@click.option('--circle/--no-circle', default=True,
              help='Draw the minimum enclosing circle (default: on)')
@click.option('--aabb/--no-aabb', default=True, help='Draw the bounding box (default: on)')
@click.option('--max-iterations', default=None, type=int,
              help='Step limit for the enclosing circle search '
                   f'(default: {WELZL_ITERATIONS_PER_POINT} per point, at least {MAX_WELZL_ITERATIONS})')
@click.option('--stroke', default='black', help='Stroke color of input shapes (default: black)')
@click.option('--stroke-width', default='1', help='Stroke width (default: 1)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def wrap(input, output, hull, circle, aabb, max_iterations, stroke, stroke_width, verbose):
    """Shrink-wrap every shape in an SVG file.

    INPUT: SVG file path, or - for stdin (default)

    Collects the vertices of all shapes (circle centers for circles) and
    draws their bounding box, minimum enclosing circle and convex hull on
    top of the input shapes.
    """
    _configure_logging(verbose)
    start_time = time.time()

    shapes, metadata = _load_shapes(input, verbose)
    points = _points_of(shapes)

    layers = [(shapes, stroke)]

    if aabb:
        box = bounding_aabb_of(points)
        layers.append(([Shape(box)], 'magenta'))

    if circle:
        if max_iterations is None:
            max_iterations = iteration_limit_for(len(points))
        enclosing = bounding_circle_of(points, max_iterations=max_iterations)
        if verbose:
            click.echo(
                f"Enclosing circle: center=({enclosing.center.x:.3f}, {enclosing.center.y:.3f}) "
                f"radius={enclosing.radius:.3f}", err=True
            )
        if enclosing.radius == 0 and len(set(points)) > 1:
            click.echo(
                f"Enclosing circle search hit the step limit of {max_iterations}; "
                "skipping the circle (try a larger --max-iterations)", err=True
            )
        else:
            layers.append(([Shape(enclosing)], 'magenta'))

    if hull:
        hull_vertices = convex_hull(points)
        if verbose:
            click.echo(f"Convex hull: {len(hull_vertices)} of {len(points)} points", err=True)
        if len(hull_vertices) >= 3:
            layers.append(([Shape.polygon(hull_vertices)], 'red'))

    output_svg = create_svg_from_shapes(
        layers,
        viewbox=metadata.get('viewBox', ''),
        width=metadata.get('width', ''),
        height=metadata.get('height', ''),
        stroke_width=stroke_width,
    )

    try:
        write_svg(output_svg, output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Completed in {time.time() - start_time:.3f}s", err=True)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def intersect(input, verbose):
    """Print every pair of intersecting shapes in an SVG file.

    INPUT: SVG file path, or - for stdin (default)

    Shapes are numbered in document order starting at 0. Each output line
    reads "i j kind_i kind_j".
    """
    _configure_logging(verbose)
    start_time = time.time()

    shapes, _ = _load_shapes(input, verbose)

    count = 0
    for i, shape_a in enumerate(shapes):
        for j in range(i + 1, len(shapes)):
            shape_b = shapes[j]
            if shape_a.intersects(shape_b):
                click.echo(f"{i} {j} {shape_a.kind.value} {shape_b.kind.value}")
                count += 1

    if verbose:
        click.echo(f"{count} intersecting pairs in {time.time() - start_time:.3f}s", err=True)


@main.command()
def kinds():
    """List how SVG elements map to shape kinds."""
    click.echo("Supported elements:")
    click.echo()
    click.echo("  rect      - aabb")
    click.echo("  circle    - circle")
    for tag in SHAPE_TAGS:
        if tag not in ('rect', 'circle'):
            click.echo(f"  {tag:<9} - polygon (must be convex)")
    click.echo()
    click.echo(f"Line intersection tolerance: {DEFAULT_TOLERANCE}")


if __name__ == '__main__':
    main()
