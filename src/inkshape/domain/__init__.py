"""Domain models for inkshape.

This module contains the value types exchanged between the recognizer,
the rasterizer and the outline generator. All models are:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Free of any GUI or rendering dependency

Key classes:
- Point: A 2D coordinate
- StrokePoint: A sample of a generated vector outline
- Stroke: One continuous freehand input gesture
- Rect: Axis-aligned bounds
- ShapeKind / RecognizedShapeKind: Shape vocabularies
- LineShape, CircleShape, RectangleShape, ArcShape, TriangleShape:
  Recognized-shape variants (``RecognizedShape`` is their union)
"""

from inkshape.domain.point import Point, StrokePoint
from inkshape.domain.rect import Rect, ResizeHandle
from inkshape.domain.shapes import (
    ArcShape,
    CircleShape,
    LineShape,
    RecognizedShape,
    RecognizedShapeKind,
    RectangleShape,
    ShapeKind,
    TriangleShape,
    shape_from_dict,
)
from inkshape.domain.stroke import Stroke

__all__: list[str] = [
    # Enums
    "ShapeKind",
    "RecognizedShapeKind",
    "ResizeHandle",
    # Core types
    "Point",
    "StrokePoint",
    "Stroke",
    "Rect",
    # Recognized shapes
    "RecognizedShape",
    "LineShape",
    "CircleShape",
    "RectangleShape",
    "ArcShape",
    "TriangleShape",
    "shape_from_dict",
]
