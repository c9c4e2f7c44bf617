"""Synthetic stroke factories shared by the test suite."""

import math
from collections.abc import Callable, Sequence

import pytest

from inkshape.domain import Point

Vertex = tuple[float, float]


def _polyline(vertices: Sequence[Vertex], per_edge: int) -> list[Point]:
    points = [Point(*vertices[0])]
    for (x0, y0), (x1, y1) in zip(vertices, vertices[1:]):
        for i in range(1, per_edge + 1):
            t = i / per_edge
            points.append(Point(x0 + (x1 - x0) * t, y0 + (y1 - y0) * t))
    return points


def _ellipse(cx: float, cy: float, rx: float, ry: float, count: int) -> list[Point]:
    return [
        Point(cx + rx * math.cos(2 * math.pi * i / count), cy + ry * math.sin(2 * math.pi * i / count))
        for i in range(count)
    ]


def _arc(
    cx: float, cy: float, radius: float, start: float, end: float, count: int
) -> list[Point]:
    return [
        Point(
            cx + radius * math.cos(start + (end - start) * i / (count - 1)),
            cy + radius * math.sin(start + (end - start) * i / (count - 1)),
        )
        for i in range(count)
    ]


@pytest.fixture
def polyline() -> Callable[[Sequence[Vertex], int], list[Point]]:
    """Densely sampled polyline through the given vertices."""
    return _polyline


@pytest.fixture
def ellipse() -> Callable[[float, float, float, float, int], list[Point]]:
    """Evenly spaced points on an axis-aligned ellipse, not repeating the start."""
    return _ellipse


@pytest.fixture
def arc() -> Callable[[float, float, float, float, float, int], list[Point]]:
    """Evenly spaced points on a circular arc from ``start`` to ``end`` angle."""
    return _arc


@pytest.fixture
def square_stroke() -> list[Point]:
    """Axis-aligned 100x100 square drawn from its top-left corner."""
    return _polyline([(0, 0), (100, 0), (100, 100), (0, 100), (0, 0)], 25)


@pytest.fixture
def triangle_stroke() -> list[Point]:
    """Triangle A(100,20) -> B(160,120) -> C(40,120) -> A."""
    return _polyline([(100, 20), (160, 120), (40, 120), (100, 20)], 30)


@pytest.fixture
def circle_stroke() -> list[Point]:
    """100 points on a circle of radius 50 centred at (100, 100)."""
    return _ellipse(100, 100, 50, 50, 100)


@pytest.fixture
def zigzag_stroke() -> list[Point]:
    """Scribble with no dominant geometric structure."""
    return [Point(10.0 * i, 30.0 if i % 2 else 0.0) for i in range(11)]
