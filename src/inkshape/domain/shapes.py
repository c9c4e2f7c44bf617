"""Shape vocabularies and recognized-shape descriptors.

Two closed vocabularies exist:
- ShapeKind: idealized shapes a user can request from the shape tool
  (and that the rasterizer and outline generator understand)
- RecognizedShapeKind: what the freehand recognizer can report

A recognized shape is one of five frozen dataclasses; each carries only the
fields that make sense for its kind plus the bounds used for preview and
resize. ``RecognizedShape`` is the union of the five.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from inkshape.domain.point import Point
from inkshape.domain.rect import Rect
from inkshape.exceptions import UnknownShapeKindError


class ShapeKind(str, Enum):
    """Idealized shapes drawn with the shape tool."""

    LINE = "line"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    CIRCLE = "circle"
    OVAL = "oval"
    STAR = "star"

    @property
    def fillable(self) -> bool:
        """Whether the ``filled`` modifier applies (never for lines)."""
        return self is not ShapeKind.LINE

    @property
    def equal_sided(self) -> bool:
        """Whether the drag box is constrained to equal width and height."""
        return self in (ShapeKind.SQUARE, ShapeKind.CIRCLE)

    @classmethod
    def parse(cls, value: "str | ShapeKind") -> "ShapeKind":
        """Look up a kind by value, case-insensitively.

        Raises:
            UnknownShapeKindError: If the value names no shape kind
        """
        if isinstance(value, ShapeKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownShapeKindError(value) from None


class RecognizedShapeKind(str, Enum):
    """Shapes the freehand recognizer can report."""

    LINE = "line"
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    ARC = "arc"
    TRIANGLE = "triangle"


@dataclass(frozen=True, slots=True)
class LineShape:
    """A recognized straight line.

    Attributes:
        start: First endpoint, in drawing order
        end: Last endpoint
        bounding_rect: Bounds of the (possibly snapped) segment
    """

    kind: ClassVar[RecognizedShapeKind] = RecognizedShapeKind.LINE

    start: Point
    end: Point
    bounding_rect: Rect

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "bounding_rect": self.bounding_rect.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class CircleShape:
    """A recognized circle, or an ellipse when the bounds are not square.

    Attributes:
        bounding_rect: Bounds of the ellipse (square when snapped to a circle)
    """

    kind: ClassVar[RecognizedShapeKind] = RecognizedShapeKind.CIRCLE

    bounding_rect: Rect

    @property
    def is_circle(self) -> bool:
        return math.isclose(self.bounding_rect.width, self.bounding_rect.height)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "bounding_rect": self.bounding_rect.to_dict()}


@dataclass(frozen=True, slots=True)
class RectangleShape:
    """A recognized axis-aligned rectangle.

    Attributes:
        bounding_rect: The rectangle itself (square when snapped)
    """

    kind: ClassVar[RecognizedShapeKind] = RecognizedShapeKind.RECTANGLE

    bounding_rect: Rect

    @property
    def is_square(self) -> bool:
        return math.isclose(self.bounding_rect.width, self.bounding_rect.height)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "bounding_rect": self.bounding_rect.to_dict()}


@dataclass(frozen=True, slots=True)
class ArcShape:
    """A recognized open circular arc.

    Angles are measured with ``atan2`` in the stroke's own coordinates
    (y grows downwards). ``clockwise`` means the stroke travels towards
    decreasing angles.

    Attributes:
        center: Centre of the fitted circle
        radius: Radius of the fitted circle
        start_angle: Angle of the first stroke point, in radians
        end_angle: Angle of the last stroke point, in radians
        clockwise: Direction of travel from start to end
        bounding_rect: Bounds of the fitted sweep (not of the raw stroke)
    """

    kind: ClassVar[RecognizedShapeKind] = RecognizedShapeKind.ARC

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool
    bounding_rect: Rect

    @property
    def sweep(self) -> float:
        """Angle covered from start to end in the direction of travel, in [0, 2π)."""
        if self.clockwise:
            sweep = self.start_angle - self.end_angle
        else:
            sweep = self.end_angle - self.start_angle
        if sweep < 0:
            sweep += 2 * math.pi
        return sweep

    def angle_at(self, t: float) -> float:
        """Angle at fraction ``t`` of the sweep (0 = start, 1 = end)."""
        if self.clockwise:
            return self.start_angle - t * self.sweep
        return self.start_angle + t * self.sweep

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "clockwise": self.clockwise,
            "bounding_rect": self.bounding_rect.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class TriangleShape:
    """A recognized triangle.

    Attributes:
        vertices: The three corners in drawing order
        bounding_rect: Bounds of the raw stroke
    """

    kind: ClassVar[RecognizedShapeKind] = RecognizedShapeKind.TRIANGLE

    vertices: tuple[Point, Point, Point]
    bounding_rect: Rect

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "vertices": [v.to_dict() for v in self.vertices],
            "bounding_rect": self.bounding_rect.to_dict(),
        }


RecognizedShape = LineShape | CircleShape | RectangleShape | ArcShape | TriangleShape


def shape_from_dict(data: dict[str, Any]) -> RecognizedShape:
    """Deserialize a recognized shape produced by ``to_dict``.

    Raises:
        UnknownShapeKindError: If the kind tag is not a recognized kind
    """
    try:
        kind = RecognizedShapeKind(data["kind"])
    except (KeyError, ValueError):
        raise UnknownShapeKindError(data.get("kind")) from None

    bounds = Rect.from_dict(data["bounding_rect"])
    if kind is RecognizedShapeKind.LINE:
        return LineShape(
            start=Point.from_dict(data["start"]),
            end=Point.from_dict(data["end"]),
            bounding_rect=bounds,
        )
    if kind is RecognizedShapeKind.CIRCLE:
        return CircleShape(bounding_rect=bounds)
    if kind is RecognizedShapeKind.RECTANGLE:
        return RectangleShape(bounding_rect=bounds)
    if kind is RecognizedShapeKind.ARC:
        return ArcShape(
            center=Point.from_dict(data["center"]),
            radius=float(data["radius"]),
            start_angle=float(data["start_angle"]),
            end_angle=float(data["end_angle"]),
            clockwise=bool(data["clockwise"]),
            bounding_rect=bounds,
        )
    a, b, c = (Point.from_dict(v) for v in data["vertices"])
    return TriangleShape(vertices=(a, b, c), bounding_rect=bounds)
