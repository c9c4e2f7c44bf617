"""Freehand stroke representation.

A stroke is the ordered point sequence captured between pen-down and
pen-up. The measurements every detector needs (path length, bounds,
start-to-end gap) are computed lazily and cached.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from inkshape.domain.point import Point
from inkshape.domain.rect import Rect
from inkshape.exceptions import DegenerateStrokeError, StrokeFormatError

PointLike = Point | Sequence[float] | Mapping[str, Any]


@dataclass
class Stroke:
    """An ordered, read-only sequence of captured points.

    Attributes:
        points: Captured points in drawing order (at least 2)
        timestamps: Optional capture time for each point, in seconds
    """

    points: list[Point]
    timestamps: list[float] | None = None
    _cached_length: float | None = field(default=None, repr=False, init=False)
    _cached_bounds: Rect | None = field(default=None, repr=False, init=False)

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise DegenerateStrokeError(len(self.points))
        if self.timestamps is not None and len(self.timestamps) != len(self.points):
            raise ValueError(
                f"Got {len(self.timestamps)} timestamps for {len(self.points)} points"
            )

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> "Stroke":
        """Build a stroke from Points, (x, y) pairs or {"x", "y"} mappings.

        Timestamps are taken from a third item of every pair (or a "t" key)
        when all points carry one.

        Raises:
            StrokeFormatError: If a point or its timestamp cannot be read
            DegenerateStrokeError: If fewer than two points are given
        """
        coerced: list[Point] = []
        times: list[float] = []
        for raw in points:
            coerced.append(Point.coerce(raw))
            t = _timestamp_of(raw)
            if t is not None:
                times.append(t)
        timestamps = times if times and len(times) == len(coerced) else None
        return cls(points=coerced, timestamps=timestamps)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def first(self) -> Point:
        return self.points[0]

    @property
    def last(self) -> Point:
        return self.points[-1]

    @property
    def middle(self) -> Point:
        """The point at index len // 2."""
        return self.points[len(self.points) // 2]

    def path_length(self) -> float:
        """Sum of distances between consecutive points.

        Result is cached for efficiency.
        """
        if self._cached_length is None:
            self._cached_length = sum(
                math.hypot(b.x - a.x, b.y - a.y)
                for a, b in zip(self.points, self.points[1:])
            )
        return self._cached_length

    def direct_distance(self) -> float:
        """Straight-line distance from the first to the last point."""
        return math.hypot(self.last.x - self.first.x, self.last.y - self.first.y)

    def bounding_rect(self) -> Rect:
        """Axis-aligned bounds of the raw points.

        Result is cached for efficiency.
        """
        if self._cached_bounds is None:
            self._cached_bounds = Rect.from_points(self.points)
        return self._cached_bounds

    def straightness(self) -> float:
        """Direct distance over path length (1 for a perfectly straight stroke).

        Returns 0.0 when the stroke has no length.
        """
        length = self.path_length()
        if length <= 0:
            return 0.0
        return self.direct_distance() / length

    def gap_ratio(self) -> float:
        """Start-to-end gap relative to the bounding-box diagonal.

        Small values mean the pen was lifted near where it started.
        Returns infinity for a stroke whose bounds have no extent.
        """
        diagonal = self.bounding_rect().diagonal
        if diagonal <= 0:
            return math.inf
        return self.direct_distance() / diagonal

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"points": [list(p.to_tuple()) for p in self.points]}
        if self.timestamps is not None:
            data["timestamps"] = list(self.timestamps)
        return data


def _timestamp_of(raw: PointLike) -> float | None:
    if isinstance(raw, Point):
        return None
    if isinstance(raw, Mapping):
        t = raw.get("t")
    elif len(raw) >= 3:
        t = raw[2]
    else:
        return None
    if t is None:
        return None
    try:
        return float(t)
    except (TypeError, ValueError) as e:
        raise StrokeFormatError(f"cannot read timestamp from {raw!r}") from e
