"""Point types shared by the recognizer, rasterizer and outline generator."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from inkshape.exceptions import StrokeFormatError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in the caller's coordinate space
        y: Y coordinate (grows downwards on screen)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))

    @classmethod
    def coerce(cls, value: "Point | Sequence[float] | Mapping[str, Any]") -> "Point":
        """Build a point from a Point, an (x, y) pair or an {"x", "y"} mapping.

        Extra trailing items (such as a timestamp) are ignored.

        Raises:
            StrokeFormatError: If the value cannot be read as a point
        """
        if isinstance(value, Point):
            return value
        try:
            if isinstance(value, Mapping):
                return cls.from_dict(dict(value))
            if len(value) < 2:
                raise StrokeFormatError(f"point needs x and y, got {value!r}")
            return cls(x=float(value[0]), y=float(value[1]))
        except (KeyError, TypeError, ValueError) as e:
            raise StrokeFormatError(f"cannot read point from {value!r}") from e


@dataclass(frozen=True, slots=True)
class StrokePoint:
    """A sample of a generated vector outline.

    Attributes:
        x: X coordinate
        y: Y coordinate
        time_offset: Synthetic seconds since the outline's first sample
    """

    x: float
    y: float
    time_offset: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "t": self.time_offset}
