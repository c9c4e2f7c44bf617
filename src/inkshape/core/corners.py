"""Corner detection on resampled paths.

Two detectors are provided, matching the two ways shapes are segmented:

- find_window_corners: compares the direction over ``window`` points
  before and after each candidate. Runs of candidates closer than the
  merge distance collapse into the sharpest one. Used for rectangles,
  whose hand-drawn corners are often rounded over several samples.
- find_turn_corners: compares consecutive segments only. Within the
  merge distance the first corner found wins. Used for triangles.

Both return indices into the resampled path, in increasing order.
"""

import logging
from collections.abc import Sequence

from inkshape.core.geometry import (
    MIN_VECTOR_LENGTH,
    distance,
    max_chord_deviation,
    turn_angle,
)
from inkshape.domain import Point

logger = logging.getLogger(__name__)


def window_turn_angle(points: Sequence[Point], index: int, window: int) -> float | None:
    """Turn angle at ``index`` using vectors spanning ``window`` points each way.

    Window ends are clamped to the path, so the angle is defined (if
    possibly shortened) near either end.

    Returns:
        Angle in radians, or None if a vector is too short
    """
    last = len(points) - 1
    before = points[max(index - window, 0)]
    here = points[index]
    after = points[min(index + window, last)]
    return turn_angle(
        here.x - before.x,
        here.y - before.y,
        after.x - here.x,
        after.y - here.y,
    )


def find_window_corners(
    points: Sequence[Point],
    window: int,
    threshold: float,
    merge_distance: int,
) -> list[int]:
    """Find corners with a windowed turn-angle test, keeping the sharper of close pairs.

    Args:
        points: Resampled path
        window: Points on each side used to measure direction
        threshold: Minimum turn angle in radians
        merge_distance: Candidates closer than this (in indices) to the last
            accepted corner replace it when sharper, and are dropped otherwise

    Returns:
        Sorted corner indices
    """
    corners: list[int] = []

    for i in range(window, len(points) - window):
        angle = window_turn_angle(points, i, window)
        if angle is None or angle <= threshold:
            continue

        if corners and i - corners[-1] < merge_distance:
            previous_angle = window_turn_angle(points, corners[-1], window)
            if previous_angle is not None and angle > previous_angle:
                corners[-1] = i
            continue

        corners.append(i)

    logger.debug("Window corners (window=%d): %s", window, corners)
    return corners


def find_turn_corners(
    points: Sequence[Point],
    threshold: float,
    merge_distance: int,
) -> list[int]:
    """Find corners where consecutive segments turn by more than ``threshold``.

    The angle at point ``i - 1`` is measured between segments
    (i-2, i-1) and (i-1, i).

    Args:
        points: Resampled path
        threshold: Minimum turn angle in radians
        merge_distance: Candidates closer than this (in indices) to the last
            accepted corner are dropped

    Returns:
        Sorted corner indices
    """
    corners: list[int] = []

    for i in range(2, len(points)):
        a, b, c = points[i - 2], points[i - 1], points[i]
        angle = turn_angle(b.x - a.x, b.y - a.y, c.x - b.x, c.y - b.y)
        if angle is None or angle <= threshold:
            continue
        if corners and i - corners[-1] < merge_distance:
            continue
        corners.append(i - 1)

    logger.debug("Turn corners: %s", corners)
    return corners


def segments_are_straight(
    points: Sequence[Point],
    corners: Sequence[int],
    max_deviation_ratio: float,
) -> bool:
    """Check that the path between consecutive corners is close to straight.

    The path is split at every corner plus its first and last index. Each
    piece's largest perpendicular distance from its own chord must not
    exceed ``max_deviation_ratio`` times the chord length. Pieces whose
    chord has no length are skipped.
    """
    bounds = [0, *corners, len(points) - 1]
    for lo, hi in zip(bounds, bounds[1:]):
        start, end = points[lo], points[hi]
        chord = distance(start, end)
        if chord <= MIN_VECTOR_LENGTH:
            continue
        deviation = max_chord_deviation(points[lo : hi + 1], start, end)
        if deviation / chord > max_deviation_ratio:
            logger.debug(
                "Segment %d-%d not straight (deviation=%.2f, chord=%.2f)",
                lo, hi, deviation, chord,
            )
            return False
    return True
