"""Vector outline generation for idealized and recognized shapes.

Converts a shape into a polyline of timed samples suitable for a smooth
vector stroke. Two entry points exist:

- shape_outline: a shape dragged out with the shape tool between two points
- recognized_outline: a recognized shape, optionally re-fitted into a
  moved or resized target rectangle

Unlike the rasterizer, the vector shape tool sizes squares and circles by
the LARGER drag extent.
"""

import math
from collections.abc import Sequence

from inkshape.config import OutlineConfig
from inkshape.domain import (
    ArcShape,
    CircleShape,
    LineShape,
    Point,
    RecognizedShape,
    Rect,
    RectangleShape,
    ShapeKind,
    StrokePoint,
    TriangleShape,
)

_DEFAULT_CONFIG = OutlineConfig()


def constrain_end(kind: ShapeKind, start: Point, end: Point) -> Point:
    """Push the drag end out to an equal-sided box for squares and circles.

    Other kinds return ``end`` unchanged.
    """
    if not kind.equal_sided:
        return end
    dx = end.x - start.x
    dy = end.y - start.y
    size = max(abs(dx), abs(dy))
    return Point(
        start.x + (size if dx >= 0 else -size),
        start.y + (size if dy >= 0 else -size),
    )


def _rect_outline(rect: Rect, config: OutlineConfig) -> list[StrokePoint]:
    """Clockwise-on-screen walk around a rectangle starting at its top-left corner."""
    steps = config.rect_points_per_side
    corners = [
        Point(rect.min_x, rect.min_y),
        Point(rect.max_x, rect.min_y),
        Point(rect.max_x, rect.max_y),
        Point(rect.min_x, rect.max_y),
        Point(rect.min_x, rect.min_y),
    ]
    samples: list[StrokePoint] = []
    time = 0.0
    for side, (a, b) in enumerate(zip(corners, corners[1:])):
        for i in range(0 if side == 0 else 1, steps + 1):
            t = i / steps
            samples.append(StrokePoint(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t, time))
            time += config.edge_time_step
    return samples


def _ellipse_outline(rect: Rect, config: OutlineConfig) -> list[StrokePoint]:
    cx, cy = rect.mid_x, rect.mid_y
    rx, ry = rect.width / 2, rect.height / 2
    segments = config.ellipse_segments
    samples = []
    for i in range(segments + 1):
        angle = i / segments * 2 * math.pi
        samples.append(
            StrokePoint(
                cx + rx * math.cos(angle),
                cy + ry * math.sin(angle),
                i * config.curve_time_step,
            )
        )
    return samples


def _polygon_outline(
    vertices: Sequence[Point],
    config: OutlineConfig,
    repeat_joints: bool,
) -> list[StrokePoint]:
    """Closed polygon sampled evenly along each edge.

    Args:
        vertices: Polygon corners in order
        config: Outline settings
        repeat_joints: Emit each shared vertex at the end of one edge and
            again at the start of the next
    """
    steps = config.polygon_points_per_edge
    samples: list[StrokePoint] = []
    time = 0.0
    n = len(vertices)
    for edge in range(n):
        a = vertices[edge]
        b = vertices[(edge + 1) % n]
        first = 0 if repeat_joints or edge == 0 else 1
        for j in range(first, steps + 1):
            t = j / steps
            samples.append(StrokePoint(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t, time))
            time += config.edge_time_step
    return samples


def star_points(center: Point, outer_radius: float, inner_ratio: float = 0.4) -> list[Point]:
    """The 10 alternating vertices of a regular 5-pointed star, top point first."""
    inner_radius = outer_radius * inner_ratio
    vertices = []
    for i in range(10):
        angle = i * math.pi / 5.0 - math.pi / 2.0
        radius = outer_radius if i % 2 == 0 else inner_radius
        vertices.append(
            Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))
        )
    return vertices


def shape_outline(
    kind: ShapeKind | str,
    start: Point,
    end: Point,
    config: OutlineConfig | None = None,
) -> list[StrokePoint]:
    """Vector outline of a shape dragged from ``start`` to ``end``.

    Args:
        kind: Shape to draw (a ShapeKind or its string value)
        start: Drag start
        end: Drag end (constrained for squares and circles)
        config: Outline settings (defaults if None)

    Returns:
        Timed outline samples

    Raises:
        UnknownShapeKindError: If ``kind`` names no shape
    """
    config = config or _DEFAULT_CONFIG
    kind = ShapeKind.parse(kind)
    end = constrain_end(kind, start, end)

    if kind is ShapeKind.LINE:
        return [
            StrokePoint(start.x, start.y, 0.0),
            StrokePoint(end.x, end.y, config.line_duration),
        ]
    if kind in (ShapeKind.RECTANGLE, ShapeKind.SQUARE):
        return _rect_outline(Rect.from_corners(start, end), config)
    if kind in (ShapeKind.OVAL, ShapeKind.CIRCLE):
        return _ellipse_outline(Rect.from_corners(start, end), config)

    center = Point((start.x + end.x) / 2, (start.y + end.y) / 2)
    outer_radius = max(abs(end.x - start.x), abs(end.y - start.y)) / 2
    vertices = star_points(center, outer_radius, config.star_inner_ratio)
    return _polygon_outline(vertices, config, repeat_joints=True)


class _Refit:
    """Maps points from a shape's original bounds into a target rectangle."""

    def __init__(self, source: Rect, target: Rect) -> None:
        self.source = source
        self.target = target
        self.scale_x = target.width / source.width if source.width > 1 else 1.0
        self.scale_y = target.height / source.height if source.height > 1 else 1.0

    def point(self, p: Point) -> Point:
        return Point(
            self.target.x + (p.x - self.source.x) * self.scale_x,
            self.target.y + (p.y - self.source.y) * self.scale_y,
        )


def recognized_outline(
    shape: RecognizedShape,
    target: Rect | None = None,
    config: OutlineConfig | None = None,
) -> list[StrokePoint]:
    """Vector outline of a recognized shape.

    Args:
        shape: Shape returned by the recognizer
        target: Where the shape's bounds were moved or resized to (the
            shape's own bounds if None)
        config: Outline settings (defaults if None)

    Returns:
        Timed outline samples

    Raises:
        TypeError: If ``shape`` is not a recognized-shape descriptor
    """
    config = config or _DEFAULT_CONFIG
    if not isinstance(shape, (LineShape, CircleShape, RectangleShape, ArcShape, TriangleShape)):
        raise TypeError(f"Not a recognized shape: {shape!r}")
    target = target or shape.bounding_rect
    refit = _Refit(shape.bounding_rect, target)

    if isinstance(shape, LineShape):
        start = refit.point(shape.start)
        end = refit.point(shape.end)
        return [
            StrokePoint(start.x, start.y, 0.0),
            StrokePoint(end.x, end.y, config.line_duration),
        ]
    if isinstance(shape, CircleShape):
        return _ellipse_outline(target, config)
    if isinstance(shape, RectangleShape):
        return _rect_outline(target, config)
    if isinstance(shape, ArcShape):
        return _arc_outline(shape, refit, config)
    vertices = [refit.point(v) for v in shape.vertices]
    return _polygon_outline(vertices, config, repeat_joints=False)


def _arc_outline(shape: ArcShape, refit: _Refit, config: OutlineConfig) -> list[StrokePoint]:
    center = refit.point(shape.center)
    radius = shape.radius * max(refit.scale_x, refit.scale_y)
    segments = config.arc_segments
    samples = []
    for i in range(segments + 1):
        angle = shape.angle_at(i / segments)
        samples.append(
            StrokePoint(
                center.x + radius * math.cos(angle),
                center.y + radius * math.sin(angle),
                i * config.curve_time_step,
            )
        )
    return samples
