"""Freehand stroke recognition.

The recognizer runs the detectors in a fixed priority order and returns
the first match:

    line -> arc -> rectangle -> triangle -> circle

There is no scoring: a nearly straight shallow arc is a line because the
line detector runs first. When every detector declines, the caller keeps
the stroke as freehand ink.

Key components:
- ShapeRecognizer: Configured detector chain
- recognize: One-shot convenience wrapper
- recognize_strokes: Batch recognition with statistics
"""

import logging
import time
from collections.abc import Callable, Iterable, Sequence

from inkshape.config import RecognizerConfig
from inkshape.core.detectors import (
    ArcDetector,
    CircleDetector,
    LineDetector,
    RectangleDetector,
    TriangleDetector,
)
from inkshape.domain import RecognizedShape, Stroke
from inkshape.domain.stroke import PointLike
from inkshape.utils.logging import RecognitionLogger, RecognitionStats

logger = logging.getLogger(__name__)


class ShapeRecognizer:
    """Classifies a freehand stroke as a line, arc, rectangle, triangle or circle.

    The recognizer holds only configuration and is safe to share between
    threads.

    Example:
        recognizer = ShapeRecognizer()
        shape = recognizer.recognize([(0, 0), (40, 1), (80, 0), (120, 1)])
        if shape is None:
            ...  # keep the raw ink
    """

    def __init__(self, config: RecognizerConfig | None = None) -> None:
        """Initialize the detector chain.

        Args:
            config: Recognizer thresholds (defaults if None)
        """
        self.config = config or RecognizerConfig()
        self.detectors: list[tuple[str, Callable[[Stroke], RecognizedShape | None]]] = [
            ("line", LineDetector(self.config.line).detect),
            ("arc", ArcDetector(self.config.arc).detect),
            ("rectangle", RectangleDetector(self.config.rectangle).detect),
            ("triangle", TriangleDetector(self.config.triangle).detect),
            ("circle", CircleDetector(self.config.circle).detect),
        ]

    def recognize(self, points: Stroke | Iterable[PointLike]) -> RecognizedShape | None:
        """Recognize a single stroke.

        Args:
            points: A Stroke, or its points as Points, (x, y) pairs or
                {"x", "y"} mappings

        Returns:
            The first matching shape, or None when the stroke is too short
            or no detector matches
        """
        if isinstance(points, Stroke):
            stroke = points
        else:
            raw = list(points)
            if len(raw) < self.config.min_points:
                logger.debug("Stroke too short for recognition: %d points", len(raw))
                return None
            stroke = Stroke.from_points(raw)

        if len(stroke) < self.config.min_points:
            logger.debug("Stroke too short for recognition: %d points", len(stroke))
            return None

        for name, detect in self.detectors:
            shape = detect(stroke)
            if shape is not None:
                logger.debug("Stroke recognized as %s", name)
                return shape

        logger.debug("No shape matched stroke of %d points", len(stroke))
        return None


def recognize(
    points: Stroke | Iterable[PointLike],
    config: RecognizerConfig | None = None,
) -> RecognizedShape | None:
    """Recognize a single stroke with a one-off recognizer.

    Args:
        points: Stroke or its points
        config: Recognizer thresholds (defaults if None)

    Returns:
        The recognized shape, or None
    """
    return ShapeRecognizer(config).recognize(points)


def recognize_strokes(
    strokes: Sequence[Stroke],
    recognizer: ShapeRecognizer | None = None,
    recognition_logger: RecognitionLogger | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> tuple[list[RecognizedShape | None], RecognitionStats]:
    """Recognize a batch of strokes, collecting per-kind statistics.

    Args:
        strokes: Strokes to recognize, in order
        recognizer: Recognizer to use (default configuration if None)
        recognition_logger: Logger that records outcomes (a quiet one if None)
        progress_callback: Called with (completed, total) after each stroke

    Returns:
        Tuple of (results aligned with ``strokes``, statistics)
    """
    recognizer = recognizer or ShapeRecognizer()
    recognition_logger = recognition_logger or RecognitionLogger()
    stats = recognition_logger.stats
    stats.start_time = time.time()

    results: list[RecognizedShape | None] = []
    for index, stroke in enumerate(strokes):
        started = time.perf_counter()
        if len(stroke) < recognizer.config.min_points:
            recognition_logger.log_too_short(index, len(stroke))
            results.append(None)
        else:
            shape = recognizer.recognize(stroke)
            duration_ms = (time.perf_counter() - started) * 1000
            if shape is None:
                recognition_logger.log_no_match(index, len(stroke), duration_ms)
            else:
                recognition_logger.log_recognized(index, shape.kind.value, duration_ms)
            results.append(shape)

        if progress_callback is not None:
            progress_callback(index + 1, len(strokes))

    stats.end_time = time.time()
    return results, stats
