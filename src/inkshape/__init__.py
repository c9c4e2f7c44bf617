"""Inkshape - Freehand shape recognition and shape rasterization.

Inkshape classifies freehand strokes as lines, circles, rectangles, arcs or
triangles, and converts idealized shapes into pixel-grid cells or smooth
vector outlines.

Example:
    >>> from inkshape import recognize, rasterize, ShapeKind
    >>> shape = recognize([(0, 0), (30, 1), (60, 0), (100, 1)])
    >>> shape.kind.value
    'line'
    >>> cells = rasterize(ShapeKind.RECTANGLE, 0, 0, 3, 3, filled=True)
"""

from inkshape.core.rasterizer import rasterize
from inkshape.core.recognizer import ShapeRecognizer, recognize
from inkshape.domain import RecognizedShapeKind, ShapeKind

__version__ = "0.1.0"

__all__ = [
    "RecognizedShapeKind",
    "ShapeKind",
    "ShapeRecognizer",
    "__version__",
    "rasterize",
    "recognize",
]
