"""Axis-aligned rectangles used for shape bounds and preview/resize."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from inkshape.domain.point import Point


class ResizeHandle(str, Enum):
    """Corner handle dragged to resize a shape's bounds."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle with origin at its minimum corner.

    Attributes:
        x: Minimum x coordinate
        y: Minimum y coordinate
        width: Extent along x (never negative)
        height: Extent along y (never negative)
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Rect":
        """Bounding rectangle of a non-empty point collection."""
        xs: list[float] = []
        ys: list[float] = []
        for p in points:
            xs.append(p.x)
            ys.append(p.y)
        if not xs:
            return cls(0.0, 0.0, 0.0, 0.0)
        return cls.from_extents(min(xs), min(ys), max(xs), max(ys))

    @classmethod
    def from_extents(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> "Rect":
        """Rectangle spanned by two opposite corners in any order."""
        return cls.from_extents(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))

    @classmethod
    def centered(cls, cx: float, cy: float, width: float, height: float) -> "Rect":
        return cls(cx - width / 2, cy - height / 2, width, height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)

    @property
    def aspect(self) -> float:
        """Ratio of the shorter side to the longer side (0 for a degenerate rect)."""
        longest = max(self.width, self.height)
        if longest <= 0:
            return 0.0
        return min(self.width, self.height) / longest

    def offset(self, dx: float, dy: float) -> "Rect":
        """Translated copy of this rectangle."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def resized(self, handle: ResizeHandle, to: Point) -> "Rect":
        """Proportionally resize by dragging a corner handle to a new position.

        The corner opposite the handle stays fixed. The axis with the larger
        relative movement decides the scale and the aspect ratio is kept.
        Collapsing below 5% of the original size is ignored.

        Args:
            handle: Corner being dragged
            to: Current drag position

        Returns:
            Resized rectangle, or this rectangle when the resize is rejected
        """
        if handle is ResizeHandle.TOP_LEFT:
            anchor = Point(self.max_x, self.max_y)
        elif handle is ResizeHandle.TOP_RIGHT:
            anchor = Point(self.min_x, self.max_y)
        elif handle is ResizeHandle.BOTTOM_LEFT:
            anchor = Point(self.max_x, self.min_y)
        else:
            anchor = Point(self.min_x, self.min_y)

        if self.width <= 0 or self.height <= 0:
            return self

        dx = to.x - anchor.x
        dy = to.y - anchor.y
        scale = max(abs(dx) / self.width, abs(dy) / self.height)
        if scale <= 0.05:
            return self

        new_width = self.width * scale
        new_height = new_width / (self.width / self.height)
        new_x = anchor.x if dx >= 0 else anchor.x - new_width
        new_y = anchor.y if dy >= 0 else anchor.y - new_height
        return Rect(new_x, new_y, new_width, new_height)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rect":
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )
