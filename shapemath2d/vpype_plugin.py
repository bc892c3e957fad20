"""vpype plugin for shapemath2d.

Adds a ``shrinkwrap`` command that outlines the geometry of each layer
with its convex hull and/or minimum enclosing circle.

Usage:
    vpype read input.svg shrinkwrap --hull --circle write output.svg
"""

from typing import Optional

import numpy as np

try:
    import vpype
    import vpype_cli
    VPYPE_AVAILABLE = True
except ImportError:
    VPYPE_AVAILABLE = False

from .geometry import Vector2
from .wrap import bounding_circle_of, convex_hull, iteration_limit_for


def layer_points(lines) -> list:
    """Flatten vpype lines (complex arrays, x + yj) into Vector2 points."""
    return [Vector2(float(p.real), float(p.imag)) for line in lines for p in line]


def hull_line(points: list):
    """Closed complex polyline through the hull vertices, or None below 3 vertices."""
    hull = convex_hull(points)
    if len(hull) < 3:
        return None
    return np.array([complex(v.x, v.y) for v in hull + hull[:1]])


def circle_line(points: list, segments: int = 64, max_iterations: Optional[int] = None):
    """Closed complex polyline approximating the minimum enclosing circle.

    The step limit defaults to one scaled by the number of points. Returns
    None when the search gives up or all points coincide.
    """
    if max_iterations is None:
        max_iterations = iteration_limit_for(len(points))
    circle = bounding_circle_of(points, max_iterations=max_iterations)
    if circle.radius <= 0:
        return None
    angles = np.linspace(0, 2 * np.pi, segments + 1)
    return circle.center.x + circle.center.y * 1j + circle.radius * np.exp(1j * angles)


if VPYPE_AVAILABLE:
    import click

    @vpype_cli.cli.command(group="Plugins")
    @click.option('--hull/--no-hull', default=True, help='Add the convex hull')
    @click.option('--circle/--no-circle', default=False, help='Add the minimum enclosing circle')
    @click.option('--segments', default=64, type=int,
                  help='Segments used to draw the circle')
    @click.option('--max-iterations', default=None, type=int,
                  help='Step limit for the enclosing circle search (default: scaled by point count)')
    @click.option('--layer', '-l', type=vpype_cli.LayerType(accept_new=True),
                  help='Target layer for output (default: same layer)')
    @vpype_cli.global_processor
    def shrinkwrap(document: vpype.Document, hull: bool, circle: bool, segments: int,
                    max_iterations, layer) -> vpype.Document:
        """Outline each layer with its convex hull and/or enclosing circle."""
        for layer_id in list(document.layers):
            points = layer_points(document.layers[layer_id])
            if not points:
                continue

            outlines = []
            if hull:
                outlines.append(hull_line(points))
            if circle:
                outlines.append(circle_line(points, segments, max_iterations))

            target = layer if layer else layer_id
            if target not in document.layers:
                document.add(vpype.LineCollection(), target)
            for outline in outlines:
                if outline is not None:
                    document.layers[target].append(outline)

        return document
