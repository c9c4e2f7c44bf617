"""Geometric primitives for stroke analysis.

This module provides the numeric building blocks shared by the detectors:
- Distances and path length
- Perpendicular deviation from a chord
- Arc-length resampling
- Turn angle between two direction vectors
- Three-point circle fit and angular sweep
- Ellipse radius at an angle and Ramanujan's perimeter approximation

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from inkshape.domain import Point

# Direction vectors shorter than this carry no usable direction
MIN_VECTOR_LENGTH = 0.01


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def path_length(points: Sequence[Point]) -> float:
    """Sum of distances between consecutive points.

    Returns:
        Total length; 0.0 for fewer than two points
    """
    return sum(distance(a, b) for a, b in zip(points, points[1:]))


def perpendicular_distance(point: Point, start: Point, end: Point) -> float:
    """Distance from ``point`` to the infinite line through ``start`` and ``end``.

    Falls back to the distance to ``start`` when the chord has no length.
    """
    chord = distance(start, end)
    if chord <= 0:
        return distance(point, start)
    dx = end.x - start.x
    dy = end.y - start.y
    return abs((point.x - start.x) * dy - (point.y - start.y) * dx) / chord


def max_chord_deviation(points: Sequence[Point], start: Point, end: Point) -> float:
    """Largest perpendicular distance of any point from the chord start-end."""
    return max((perpendicular_distance(p, start, end) for p in points), default=0.0)


def resample(points: Sequence[Point], count: int) -> list[Point]:
    """Resample a path to ``count`` points equally spaced along its length.

    Walks the polyline accumulating arc length and interpolates a new point
    every ``length / (count - 1)`` units, so the result is independent of
    how fast the stroke was drawn. The first and last output points are the
    path's endpoints.

    Args:
        points: Path to resample
        count: Number of output points (at least 2)

    Returns:
        Resampled points. Paths with fewer than two points, or ``count``
        below two, are returned unchanged; a path with no length yields
        ``count`` copies of its first point.

    Examples:
        >>> resample([Point(0, 0), Point(10, 0)], 3)
        [Point(x=0, y=0), Point(x=5.0, y=0.0), Point(x=10, y=0)]
    """
    if len(points) < 2 or count < 2:
        return list(points)

    total = path_length(points)
    if total <= 0:
        return [points[0]] * count

    interval = total / (count - 1)
    result = [points[0]]
    accumulated = 0.0
    prev = points[0]

    for current in points[1:]:
        segment = distance(prev, current)
        while segment > 0 and accumulated + segment >= interval and len(result) < count - 1:
            t = (interval - accumulated) / segment
            prev = Point(
                prev.x + t * (current.x - prev.x),
                prev.y + t * (current.y - prev.y),
            )
            result.append(prev)
            accumulated = 0.0
            segment = distance(prev, current)
        accumulated += segment
        prev = current

    # The final point is always the path end; rounding may leave a gap
    while len(result) < count:
        result.append(points[-1])
    return result


def turn_angle(v1x: float, v1y: float, v2x: float, v2y: float) -> float | None:
    """Unsigned angle in radians between two direction vectors.

    Returns:
        Angle in [0, π], or None when either vector is too short to
        carry a direction
    """
    len1 = math.hypot(v1x, v1y)
    len2 = math.hypot(v2x, v2y)
    if len1 <= MIN_VECTOR_LENGTH or len2 <= MIN_VECTOR_LENGTH:
        return None
    cos_angle = (v1x * v2x + v1y * v2y) / (len1 * len2)
    return math.acos(max(-1.0, min(1.0, cos_angle)))


def fit_circle_three_points(
    p1: Point, p2: Point, p3: Point, epsilon: float = 0.001
) -> tuple[Point, float] | None:
    """Circumcircle through three points.

    Args:
        p1: First point
        p2: Second point
        p3: Third point
        epsilon: Determinants at or below this magnitude count as collinear

    Returns:
        Tuple of (center, radius), or None for (near-)collinear points

    Examples:
        >>> center, r = fit_circle_three_points(Point(1, 0), Point(0, 1), Point(-1, 0))
        >>> round(center.x, 6), round(center.y, 6), round(r, 6)
        (0.0, 0.0, 1.0)
    """
    ax, ay = p1.x, p1.y
    bx, by = p2.x, p2.y
    cx, cy = p3.x, p3.y

    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if abs(d) <= epsilon:
        return None

    a_sq = ax * ax + ay * ay
    b_sq = bx * bx + by * by
    c_sq = cx * cx + cy * cy
    ux = (a_sq * (by - cy) + b_sq * (cy - ay) + c_sq * (ay - by)) / d
    uy = (a_sq * (cx - bx) + b_sq * (ax - cx) + c_sq * (bx - ax)) / d
    return Point(ux, uy), math.hypot(ax - ux, ay - uy)


def angle_sweep(start_angle: float, end_angle: float, clockwise: bool) -> float:
    """Angle travelled from start to end in the given direction, in [0, 2π)."""
    sweep = start_angle - end_angle if clockwise else end_angle - start_angle
    if sweep < 0:
        sweep += 2 * math.pi
    return sweep


def ellipse_radius_at(angle: float, rx: float, ry: float) -> float:
    """Distance from an axis-aligned ellipse's centre to its edge at ``angle``."""
    denom = math.hypot(ry * math.cos(angle), rx * math.sin(angle))
    if denom <= 0:
        return 0.0
    return (rx * ry) / denom


def ellipse_perimeter(rx: float, ry: float) -> float:
    """Ramanujan's second approximation of an ellipse's perimeter."""
    if rx + ry <= 0:
        return 0.0
    h = (rx - ry) ** 2 / (rx + ry) ** 2
    return math.pi * (rx + ry) * (1 + 3 * h / (10 + math.sqrt(4 - 3 * h)))
