"""Stroke reading from JSON.

Accepted layouts:
- a single stroke: ``[[x, y], [x, y], ...]``
- a list of strokes: ``[[[x, y], ...], [[x, y], ...]]``
- an object: ``{"strokes": [...]}`` where each stroke is a point list or
  ``{"points": [...]}``

A point is ``[x, y]``, ``[x, y, t]`` or ``{"x": .., "y": .., "t": ..}``.
"""

import json
import sys
from pathlib import Path
from typing import Any

from inkshape.domain import Stroke
from inkshape.exceptions import DegenerateStrokeError, StrokeFormatError, StrokeLoadError


def _is_point(value: Any) -> bool:
    if isinstance(value, dict):
        return "x" in value and "y" in value
    return (
        isinstance(value, list)
        and 2 <= len(value) <= 3
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)
    )


def _stroke_from(raw: Any, index: int) -> Stroke:
    if isinstance(raw, dict):
        if "points" not in raw:
            raise StrokeFormatError(f"stroke {index} has no 'points'")
        raw = raw["points"]
    if not isinstance(raw, list):
        raise StrokeFormatError(f"stroke {index} is not a list of points")
    try:
        return Stroke.from_points(raw)
    except DegenerateStrokeError as e:
        raise StrokeFormatError(f"stroke {index}: {e}") from e


def parse_strokes(text: str) -> list[Stroke]:
    """Parse one or more strokes from JSON text.

    Raises:
        StrokeFormatError: If the text is not JSON or not a known layout
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StrokeFormatError(f"not valid JSON ({e.msg} at line {e.lineno})") from e

    if isinstance(data, dict):
        if "strokes" not in data:
            raise StrokeFormatError("object has no 'strokes' key")
        data = data["strokes"]

    if not isinstance(data, list) or not data:
        raise StrokeFormatError("expected a non-empty list")

    if _is_point(data[0]):
        return [_stroke_from(data, 0)]
    return [_stroke_from(raw, i) for i, raw in enumerate(data)]


def read_strokes(path: Path | str) -> list[Stroke]:
    """Read strokes from a JSON file, or from stdin when ``path`` is "-".

    Raises:
        StrokeLoadError: If the file cannot be read
        StrokeFormatError: If its content is not a known layout
    """
    if str(path) == "-":
        return parse_strokes(sys.stdin.read())

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StrokeLoadError(str(path), e.strerror or str(e)) from e
    return parse_strokes(text)
