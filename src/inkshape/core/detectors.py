"""Shape detectors for freehand strokes.

Each detector tests one recognized kind against a stroke and returns a
shape descriptor, or None when any of its criteria fail. Detectors are
stateless apart from their configuration and never adjust thresholds or
retry.

Closedness is measured two ways:
- Open shapes (line, arc) compare the start-to-end distance with the
  stroke's path length
- Closed shapes (rectangle, triangle, circle) compare it with the
  bounding-box diagonal
"""

import logging
import math
import statistics

from inkshape.config import (
    ArcDetectionConfig,
    CircleDetectionConfig,
    LineDetectionConfig,
    RectangleDetectionConfig,
    TriangleDetectionConfig,
)
from inkshape.core.corners import find_turn_corners, find_window_corners, segments_are_straight
from inkshape.core.geometry import (
    angle_sweep,
    ellipse_perimeter,
    ellipse_radius_at,
    fit_circle_three_points,
    max_chord_deviation,
    resample,
)
from inkshape.domain import (
    ArcShape,
    CircleShape,
    LineShape,
    Point,
    Rect,
    RectangleShape,
    Stroke,
    TriangleShape,
)

logger = logging.getLogger(__name__)


class LineDetector:
    """Detects nearly straight strokes and snaps them to an axis when close."""

    def __init__(self, config: LineDetectionConfig | None = None) -> None:
        self.config = config or LineDetectionConfig()

    def detect(self, stroke: Stroke) -> LineShape | None:
        """Recognize a straight line.

        The stroke must travel at least ``min_direct_distance``, go mostly
        straight (direct distance / path length above ``min_straightness``)
        and never stray from its chord by ``max_deviation_ratio`` of the
        chord's length or more.

        Returns:
            LineShape with possibly axis-snapped endpoints, or None
        """
        cfg = self.config
        start, end = stroke.first, stroke.last
        direct = stroke.direct_distance()

        if direct < cfg.min_direct_distance:
            logger.debug("Line rejected: direct distance %.1f too short", direct)
            return None

        path = stroke.path_length()
        if path <= 0 or direct / path <= cfg.min_straightness:
            logger.debug("Line rejected: straightness %.3f", direct / path if path else 0.0)
            return None

        deviation = max_chord_deviation(stroke.points, start, end)
        if deviation / direct >= cfg.max_deviation_ratio:
            logger.debug("Line rejected: deviation ratio %.3f", deviation / direct)
            return None

        start, end = self._snap(start, end)
        bounds = Rect.from_extents(
            min(start.x, end.x),
            min(start.y, end.y),
            max(start.x, end.x),
            max(start.y, end.y),
        )
        # Keep a visible extent for perfectly axis-aligned lines
        bounds = Rect(bounds.x, bounds.y, max(bounds.width, 1.0), max(bounds.height, 1.0))
        return LineShape(start=start, end=end, bounding_rect=bounds)

    def _snap(self, start: Point, end: Point) -> tuple[Point, Point]:
        """Level a near-horizontal line or plumb a near-vertical one."""
        threshold = self.config.snap_angle
        angle = math.atan2(abs(end.y - start.y), abs(end.x - start.x))

        if angle < threshold:
            avg_y = (start.y + end.y) / 2
            return Point(start.x, avg_y), Point(end.x, avg_y)
        if angle > math.pi / 2 - threshold:
            avg_x = (start.x + end.x) / 2
            return Point(avg_x, start.y), Point(avg_x, end.y)
        return start, end


class ArcDetector:
    """Detects open strokes that follow a circular arc."""

    def __init__(self, config: ArcDetectionConfig | None = None) -> None:
        self.config = config or ArcDetectionConfig()

    def detect(self, stroke: Stroke) -> ArcShape | None:
        """Recognize a circular arc.

        Process:
        1. Require enough length and a closedness between "closed loop"
           and "straight line"
        2. Fit a circle through the first, middle and last points
        3. Require the mean radial deviation of all points to be small
        4. Read the direction of travel from the tangent at the middle point

        Returns:
            ArcShape whose bounds cover the fitted sweep, or None
        """
        cfg = self.config
        path = stroke.path_length()
        if path <= cfg.min_path_length:
            logger.debug("Arc rejected: path length %.1f too short", path)
            return None

        closedness = stroke.direct_distance() / path
        if not cfg.min_closedness < closedness < cfg.max_closedness:
            logger.debug("Arc rejected: closedness %.3f", closedness)
            return None

        start, mid, end = stroke.first, stroke.middle, stroke.last
        fit = fit_circle_three_points(start, mid, end, cfg.degenerate_determinant)
        if fit is None:
            logger.debug("Arc rejected: reference points are collinear")
            return None
        center, radius = fit
        if not cfg.min_radius < radius < cfg.max_radius:
            logger.debug("Arc rejected: radius %.1f out of range", radius)
            return None

        mean_deviation = statistics.fmean(
            abs(math.hypot(p.x - center.x, p.y - center.y) - radius) for p in stroke.points
        )
        if mean_deviation / radius >= cfg.max_mean_deviation_ratio:
            logger.debug("Arc rejected: mean deviation ratio %.3f", mean_deviation / radius)
            return None

        start_angle = math.atan2(start.y - center.y, start.x - center.x)
        end_angle = math.atan2(end.y - center.y, end.x - center.x)
        clockwise = self._is_clockwise(stroke, center)

        return ArcShape(
            center=center,
            radius=radius,
            start_angle=start_angle,
            end_angle=end_angle,
            clockwise=clockwise,
            bounding_rect=self._sweep_bounds(center, radius, start_angle, end_angle, clockwise),
        )

    @staticmethod
    def _is_clockwise(stroke: Stroke, center: Point) -> bool:
        """Direction of travel at the middle point.

        A negative cross product of (centre to middle) and the local tangent
        means the stroke moves towards decreasing angles.
        """
        points = stroke.points
        mid_index = len(points) // 2
        mid = points[mid_index]
        before = points[max(mid_index - 1, 0)]
        after = points[min(mid_index + 1, len(points) - 1)]

        to_mid_x = mid.x - center.x
        to_mid_y = mid.y - center.y
        tangent_x = after.x - before.x
        tangent_y = after.y - before.y
        return to_mid_x * tangent_y - to_mid_y * tangent_x < 0

    def _sweep_bounds(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> Rect:
        sweep = angle_sweep(start_angle, end_angle, clockwise)
        segments = self.config.bounds_samples
        samples = []
        for i in range(segments + 1):
            t = i / segments
            a = start_angle - t * sweep if clockwise else start_angle + t * sweep
            samples.append(Point(center.x + radius * math.cos(a), center.y + radius * math.sin(a)))
        return Rect.from_points(samples)


class RectangleDetector:
    """Detects closed strokes made of 3-5 straight runs between corners."""

    def __init__(self, config: RectangleDetectionConfig | None = None) -> None:
        self.config = config or RectangleDetectionConfig()

    def detect(self, stroke: Stroke) -> RectangleShape | None:
        """Recognize an axis-aligned rectangle.

        The closing corner usually sits at the stroke's ends, where the
        windowed corner test cannot see it, so 3 detected corners are
        enough. Nearly square results snap to a square of the average side
        centred on the raw bounds.

        Returns:
            RectangleShape, or None
        """
        cfg = self.config
        bounds = stroke.bounding_rect()
        if bounds.diagonal <= cfg.min_diagonal:
            logger.debug("Rectangle rejected: diagonal %.1f too small", bounds.diagonal)
            return None

        gap = stroke.gap_ratio()
        if gap >= cfg.max_gap_ratio:
            logger.debug("Rectangle rejected: gap ratio %.3f", gap)
            return None

        resampled = resample(stroke.points, cfg.resample_count)
        corners = find_window_corners(
            resampled,
            window=cfg.corner_window,
            threshold=cfg.corner_angle,
            merge_distance=cfg.corner_merge_distance,
        )
        if not cfg.min_corners <= len(corners) <= cfg.max_corners:
            logger.debug("Rectangle rejected: %d corners", len(corners))
            return None

        if not segments_are_straight(resampled, corners, cfg.max_edge_deviation_ratio):
            return None

        if bounds.aspect > cfg.square_snap_aspect:
            side = (bounds.width + bounds.height) / 2
            bounds = Rect.centered(bounds.mid_x, bounds.mid_y, side, side)
        return RectangleShape(bounding_rect=bounds)


class TriangleDetector:
    """Detects closed strokes with three straight sides."""

    def __init__(self, config: TriangleDetectionConfig | None = None) -> None:
        self.config = config or TriangleDetectionConfig()

    def detect(self, stroke: Stroke) -> TriangleShape | None:
        """Recognize a triangle.

        With only two corners found, the stroke's start is taken as the
        third vertex. Triangles are never regularized.

        Returns:
            TriangleShape with vertices in drawing order, or None
        """
        cfg = self.config
        bounds = stroke.bounding_rect()
        if bounds.diagonal <= cfg.min_diagonal:
            logger.debug("Triangle rejected: diagonal %.1f too small", bounds.diagonal)
            return None

        gap = stroke.gap_ratio()
        if gap >= cfg.max_gap_ratio:
            logger.debug("Triangle rejected: gap ratio %.3f", gap)
            return None

        resampled = resample(stroke.points, cfg.resample_count)
        corners = find_turn_corners(
            resampled,
            threshold=cfg.corner_angle,
            merge_distance=cfg.corner_merge_distance,
        )
        if not cfg.min_corners <= len(corners) <= cfg.max_corners:
            logger.debug("Triangle rejected: %d corners", len(corners))
            return None

        vertices = [resampled[i] for i in corners]
        if len(vertices) == 2:
            vertices.insert(0, resampled[0])
        if len(vertices) != 3:
            logger.debug("Triangle rejected: %d vertices", len(vertices))
            return None

        if not segments_are_straight(resampled, corners, cfg.max_edge_deviation_ratio):
            return None

        a, b, c = vertices
        return TriangleShape(vertices=(a, b, c), bounding_rect=bounds)


class CircleDetector:
    """Detects closed strokes that follow an axis-aligned ellipse."""

    def __init__(self, config: CircleDetectionConfig | None = None) -> None:
        self.config = config or CircleDetectionConfig()

    def detect(self, stroke: Stroke) -> CircleShape | None:
        """Recognize a circle or ellipse.

        Process:
        1. Require a closed stroke of reasonable size
        2. Take the ellipse inscribed in the stroke's bounds
        3. Compare each point's distance from the centre with the ellipse's
           radius at the same angle; the ratios must average close to 1
           with little spread
        4. Cross-check the path length against the ellipse's perimeter

        Returns:
            CircleShape (snapped to a circle when nearly round), or None
        """
        cfg = self.config
        bounds = stroke.bounding_rect()
        if bounds.diagonal <= cfg.min_diagonal:
            logger.debug("Circle rejected: diagonal %.1f too small", bounds.diagonal)
            return None

        gap = stroke.gap_ratio()
        if gap >= cfg.max_gap_ratio:
            logger.debug("Circle rejected: gap ratio %.3f", gap)
            return None

        cx, cy = bounds.mid_x, bounds.mid_y
        rx, ry = bounds.width / 2, bounds.height / 2
        if rx <= cfg.min_radius or ry <= cfg.min_radius:
            logger.debug("Circle rejected: radii %.1f x %.1f too small", rx, ry)
            return None

        ratios: list[float] = []
        for p in stroke.points:
            dx = p.x - cx
            dy = p.y - cy
            expected = ellipse_radius_at(math.atan2(dy, dx), rx, ry)
            if expected <= 0:
                continue
            ratios.append(math.hypot(dx, dy) / expected)

        if len(ratios) < 4:
            return None

        mean = statistics.fmean(ratios)
        stddev = statistics.pstdev(ratios, mu=mean)
        if not cfg.min_mean_ratio <= mean <= cfg.max_mean_ratio or stddev >= cfg.max_ratio_stddev:
            logger.debug("Circle rejected: radial ratio mean=%.3f stddev=%.3f", mean, stddev)
            return None

        perimeter = ellipse_perimeter(rx, ry)
        if perimeter <= 0:
            return None
        coverage = stroke.path_length() / perimeter
        if not cfg.min_perimeter_ratio <= coverage <= cfg.max_perimeter_ratio:
            logger.debug("Circle rejected: perimeter ratio %.3f", coverage)
            return None

        if bounds.aspect > cfg.circle_snap_aspect:
            diameter = (bounds.width + bounds.height) / 2
            bounds = Rect.centered(cx, cy, diameter, diameter)
        return CircleShape(bounding_rect=bounds)
