"""Configuration settings for Inkshape."""

import math
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


def _check_range(name: str, low: float, high: float, strict: bool = False) -> None:
    """Reject a min/max pair that no measurement could satisfy."""
    if low > high or (strict and low == high):
        raise ValueError(f"min {name} ({low}) must be below max {name} ({high})")


class LineDetectionConfig(BaseModel):
    """Thresholds for recognizing a straight line."""

    min_direct_distance: float = Field(
        default=20.0,
        ge=0.0,
        description="Minimum start-to-end distance in device units",
    )
    min_straightness: float = Field(
        default=0.70,
        gt=0.0,
        le=1.0,
        description="Minimum ratio of direct distance to path length",
    )
    max_deviation_ratio: float = Field(
        default=0.05,
        gt=0.0,
        le=1.0,
        description="Maximum perpendicular deviation from the chord, relative to its length",
    )
    snap_angle_degrees: float = Field(
        default=8.0,
        ge=0.0,
        le=45.0,
        description="Snap to horizontal/vertical when within this many degrees of an axis",
    )

    @property
    def snap_angle(self) -> float:
        """Snap threshold in radians."""
        return math.radians(self.snap_angle_degrees)


class ArcDetectionConfig(BaseModel):
    """Thresholds for recognizing an open circular arc."""

    min_path_length: float = Field(
        default=20.0,
        ge=0.0,
        description="Minimum stroke path length",
    )
    min_closedness: float = Field(
        default=0.15,
        ge=0.0,
        le=1.0,
        description="Direct distance / path length must exceed this (otherwise closed)",
    )
    max_closedness: float = Field(
        default=0.70,
        ge=0.0,
        le=1.0,
        description="Direct distance / path length must stay below this (otherwise straight)",
    )
    min_radius: float = Field(default=10.0, ge=0.0, description="Smallest accepted radius")
    max_radius: float = Field(default=2000.0, gt=0.0, description="Largest accepted radius")
    max_mean_deviation_ratio: float = Field(
        default=0.12,
        gt=0.0,
        le=1.0,
        description="Mean absolute radial deviation, relative to the fitted radius",
    )
    bounds_samples: int = Field(
        default=40,
        ge=2,
        le=1000,
        description="Samples along the fitted sweep used for the bounding box",
    )
    degenerate_determinant: float = Field(
        default=0.001,
        gt=0.0,
        description="Three-point fits with a smaller determinant are treated as collinear",
    )

    @model_validator(mode="after")
    def check_ranges(self) -> "ArcDetectionConfig":
        _check_range("closedness", self.min_closedness, self.max_closedness, strict=True)
        _check_range("radius", self.min_radius, self.max_radius, strict=True)
        return self


class RectangleDetectionConfig(BaseModel):
    """Thresholds for recognizing a rectangle."""

    min_diagonal: float = Field(default=10.0, ge=0.0, description="Minimum bounding-box diagonal")
    max_gap_ratio: float = Field(
        default=0.20,
        gt=0.0,
        le=1.0,
        description="Start-to-end gap relative to the bounding-box diagonal",
    )
    resample_count: int = Field(default=64, ge=16, le=1024, description="Resampled point count")
    corner_window: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Resampled points on each side of a corner candidate",
    )
    corner_angle_degrees: float = Field(
        default=30.0,
        gt=0.0,
        lt=180.0,
        description="Minimum turn angle for a corner",
    )
    corner_merge_distance: int = Field(
        default=8,
        ge=1,
        description="Corners closer than this many resampled indices are merged",
    )
    min_corners: int = Field(default=3, ge=1, description="Minimum detected corners")
    max_corners: int = Field(default=5, ge=1, description="Maximum detected corners")
    max_edge_deviation_ratio: float = Field(
        default=0.12,
        gt=0.0,
        le=1.0,
        description="Maximum edge deviation relative to the edge chord",
    )
    square_snap_aspect: float = Field(
        default=0.75,
        ge=0.0,
        le=1.0,
        description="Snap to a square when min/max side ratio exceeds this",
    )

    @model_validator(mode="after")
    def check_ranges(self) -> "RectangleDetectionConfig":
        _check_range("corners", self.min_corners, self.max_corners)
        return self

    @property
    def corner_angle(self) -> float:
        """Corner threshold in radians."""
        return math.radians(self.corner_angle_degrees)


class TriangleDetectionConfig(BaseModel):
    """Thresholds for recognizing a triangle."""

    min_diagonal: float = Field(default=10.0, ge=0.0, description="Minimum bounding-box diagonal")
    max_gap_ratio: float = Field(
        default=0.15,
        gt=0.0,
        le=1.0,
        description="Start-to-end gap relative to the bounding-box diagonal",
    )
    resample_count: int = Field(default=64, ge=16, le=1024, description="Resampled point count")
    corner_angle_degrees: float = Field(
        default=35.0,
        gt=0.0,
        lt=180.0,
        description="Minimum turn angle between consecutive resampled segments",
    )
    corner_merge_distance: int = Field(
        default=6,
        ge=1,
        description="Corners closer than this many resampled indices are dropped",
    )
    min_corners: int = Field(default=2, ge=1, description="Minimum detected corners")
    max_corners: int = Field(default=3, ge=1, description="Maximum detected corners")
    max_edge_deviation_ratio: float = Field(
        default=0.10,
        gt=0.0,
        le=1.0,
        description="Maximum edge deviation relative to the edge chord",
    )

    @property
    def corner_angle(self) -> float:
        """Corner threshold in radians."""
        return math.radians(self.corner_angle_degrees)

    @model_validator(mode="after")
    def check_ranges(self) -> "TriangleDetectionConfig":
        _check_range("corners", self.min_corners, self.max_corners)
        return self


class CircleDetectionConfig(BaseModel):
    """Thresholds for recognizing a circle or ellipse."""

    min_diagonal: float = Field(default=10.0, ge=0.0, description="Minimum bounding-box diagonal")
    max_gap_ratio: float = Field(
        default=0.15,
        gt=0.0,
        le=1.0,
        description="Start-to-end gap relative to the bounding-box diagonal",
    )
    min_radius: float = Field(default=1.0, ge=0.0, description="Minimum semi-axis length")
    min_mean_ratio: float = Field(default=0.75, gt=0.0, description="Lower bound of mean radial ratio")
    max_mean_ratio: float = Field(default=1.30, gt=0.0, description="Upper bound of mean radial ratio")
    max_ratio_stddev: float = Field(
        default=0.20,
        gt=0.0,
        description="Maximum standard deviation of the radial ratio",
    )
    min_perimeter_ratio: float = Field(
        default=0.7,
        gt=0.0,
        description="Lower bound of path length / ellipse perimeter",
    )
    max_perimeter_ratio: float = Field(
        default=1.5,
        gt=0.0,
        description="Upper bound of path length / ellipse perimeter",
    )
    circle_snap_aspect: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Snap to a circle when min/max axis ratio exceeds this",
    )

    @model_validator(mode="after")
    def check_ranges(self) -> "CircleDetectionConfig":
        _check_range("mean ratio", self.min_mean_ratio, self.max_mean_ratio, strict=True)
        _check_range(
            "perimeter ratio", self.min_perimeter_ratio, self.max_perimeter_ratio, strict=True
        )
        return self


class RecognizerConfig(BaseModel):
    """Configuration for the freehand shape recognizer."""

    min_points: int = Field(
        default=4,
        ge=2,
        description="Strokes with fewer points are never recognized",
    )
    line: LineDetectionConfig = Field(default_factory=LineDetectionConfig)
    arc: ArcDetectionConfig = Field(default_factory=ArcDetectionConfig)
    rectangle: RectangleDetectionConfig = Field(default_factory=RectangleDetectionConfig)
    triangle: TriangleDetectionConfig = Field(default_factory=TriangleDetectionConfig)
    circle: CircleDetectionConfig = Field(default_factory=CircleDetectionConfig)


class RasterConfig(BaseModel):
    """Configuration for pixel-grid rasterization."""

    oval_min_steps: int = Field(
        default=200,
        ge=8,
        description="Minimum parametric samples for an oval outline",
    )
    oval_steps_per_unit: float = Field(
        default=4.0,
        gt=0.0,
        description="Outline samples per unit of (a + b)",
    )
    star_inner_ratio: float = Field(
        default=0.4,
        gt=0.0,
        lt=1.0,
        description="Inner vertex radius as a fraction of the outer radius",
    )


class OutlineConfig(BaseModel):
    """Configuration for vector outline generation."""

    line_duration: float = Field(default=0.1, ge=0.0, description="Time offset of a line's end point")
    rect_points_per_side: int = Field(default=20, ge=1, description="Steps per rectangle side")
    ellipse_segments: int = Field(default=40, ge=4, description="Segments around an ellipse")
    arc_segments: int = Field(default=30, ge=2, description="Segments along an arc")
    polygon_points_per_edge: int = Field(default=15, ge=1, description="Steps per polygon edge")
    star_inner_ratio: float = Field(
        default=0.4,
        gt=0.0,
        lt=1.0,
        description="Inner vertex radius as a fraction of the outer radius",
    )
    edge_time_step: float = Field(default=0.005, ge=0.0, description="Time between edge samples")
    curve_time_step: float = Field(default=0.01, ge=0.0, description="Time between curve samples")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class InkshapeSettings(BaseModel):
    """Main application settings."""

    recognizer: RecognizerConfig = Field(default_factory=RecognizerConfig)
    raster: RasterConfig = Field(default_factory=RasterConfig)
    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> InkshapeSettings:
    """Get default application settings."""
    return InkshapeSettings()
