"""Core algorithms for inkshape.

This module contains the algorithms for:

- Geometry primitives (path length, resampling, circle fits)
- Corner detection on resampled paths
- Shape detection and recognition
- Pixel-grid rasterization
- Vector outline generation

All services are:
- Stateless apart from their configuration
- Pure (no side effects, no I/O)
- Safe to call from several threads at once

Key functions:
- recognize: Classify a freehand stroke
- recognize_strokes: Classify a batch of strokes with statistics
- rasterize: Convert an idealized shape to grid cells
- shape_outline: Vector outline of a dragged shape
- recognized_outline: Vector outline of a recognized shape

Key classes:
- ShapeRecognizer: Configured detector chain
- LineDetector, ArcDetector, RectangleDetector, TriangleDetector,
  CircleDetector: Individual detectors
"""

from inkshape.core.detectors import (
    ArcDetector,
    CircleDetector,
    LineDetector,
    RectangleDetector,
    TriangleDetector,
)
from inkshape.core.geometry import (
    fit_circle_three_points,
    path_length,
    resample,
)
from inkshape.core.outline import constrain_end, recognized_outline, shape_outline
from inkshape.core.rasterizer import (
    rasterize,
    rasterize_circle,
    rasterize_line,
    rasterize_oval,
    rasterize_rectangle,
    rasterize_square,
    rasterize_star,
)
from inkshape.core.recognizer import ShapeRecognizer, recognize, recognize_strokes

__all__ = [
    # Detector classes
    "ArcDetector",
    "CircleDetector",
    "LineDetector",
    "RectangleDetector",
    # Recognizer
    "ShapeRecognizer",
    "TriangleDetector",
    # Outline functions
    "constrain_end",
    # Geometry functions
    "fit_circle_three_points",
    "path_length",
    # Rasterizer functions
    "rasterize",
    "rasterize_circle",
    "rasterize_line",
    "rasterize_oval",
    "rasterize_rectangle",
    "rasterize_square",
    "rasterize_star",
    "recognize",
    "recognize_strokes",
    "recognized_outline",
    "resample",
    "shape_outline",
]
