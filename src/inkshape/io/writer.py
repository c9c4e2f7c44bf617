"""JSON serialization of recognition, rasterization and outline results."""

import json
from collections.abc import Sequence

from inkshape.domain import RecognizedShape, StrokePoint


def results_to_json(results: Sequence[RecognizedShape | None], indent: int | None = 2) -> str:
    """Serialize recognition results, one entry per stroke (null for no match)."""
    return json.dumps(
        [shape.to_dict() if shape is not None else None for shape in results],
        indent=indent,
    )


def cells_to_json(cells: Sequence[tuple[int, int]], indent: int | None = None) -> str:
    """Serialize rasterized cells as ``[[row, col], ...]``."""
    return json.dumps([[r, c] for r, c in cells], indent=indent)


def outline_to_json(samples: Sequence[StrokePoint], indent: int | None = None) -> str:
    """Serialize outline samples as ``[{"x", "y", "t"}, ...]``."""
    return json.dumps([s.to_dict() for s in samples], indent=indent)
