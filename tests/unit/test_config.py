"""Tests for configuration models."""

import math

import pytest
from pydantic import ValidationError

from inkshape.config import (
    ArcDetectionConfig,
    CircleDetectionConfig,
    InkshapeSettings,
    LineDetectionConfig,
    RasterConfig,
    RecognizerConfig,
    RectangleDetectionConfig,
    TriangleDetectionConfig,
    get_default_settings,
)


class TestDefaults:
    """The default thresholds the recognizer is tuned for."""

    def test_line_defaults(self) -> None:
        config = LineDetectionConfig()
        assert config.min_direct_distance == 20.0
        assert config.min_straightness == 0.70
        assert config.max_deviation_ratio == 0.05
        assert config.snap_angle == pytest.approx(math.radians(8))

    def test_arc_defaults(self) -> None:
        config = ArcDetectionConfig()
        assert (config.min_closedness, config.max_closedness) == (0.15, 0.70)
        assert (config.min_radius, config.max_radius) == (10.0, 2000.0)
        assert config.max_mean_deviation_ratio == 0.12

    def test_corner_defaults(self) -> None:
        rectangle = RectangleDetectionConfig()
        triangle = TriangleDetectionConfig()
        assert rectangle.corner_angle == pytest.approx(math.radians(30))
        assert triangle.corner_angle == pytest.approx(math.radians(35))
        assert (rectangle.min_corners, rectangle.max_corners) == (3, 5)
        assert (triangle.min_corners, triangle.max_corners) == (2, 3)

    def test_settings_tree(self) -> None:
        settings = get_default_settings()
        assert isinstance(settings, InkshapeSettings)
        assert settings.recognizer.min_points == 4
        assert settings.raster.star_inner_ratio == 0.4
        assert settings.outline.ellipse_segments == 40
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"


class TestValidation:
    """Out-of-range values are rejected."""

    @pytest.mark.parametrize(
        "model, field, value",
        [
            (LineDetectionConfig, "min_straightness", 1.5),
            (LineDetectionConfig, "snap_angle_degrees", 60.0),
            (ArcDetectionConfig, "max_closedness", -0.1),
            (RasterConfig, "star_inner_ratio", 1.0),
            (RecognizerConfig, "min_points", 1),
        ],
    )
    def test_out_of_range(self, model, field, value) -> None:
        with pytest.raises(ValidationError):
            model(**{field: value})

    @pytest.mark.parametrize(
        "model, overrides",
        [
            (ArcDetectionConfig, {"min_closedness": 0.8, "max_closedness": 0.5}),
            (ArcDetectionConfig, {"min_closedness": 0.5, "max_closedness": 0.5}),
            (ArcDetectionConfig, {"min_radius": 50.0, "max_radius": 40.0}),
            (RectangleDetectionConfig, {"min_corners": 5, "max_corners": 3}),
            (TriangleDetectionConfig, {"min_corners": 3, "max_corners": 2}),
            (CircleDetectionConfig, {"min_mean_ratio": 1.4}),
            (CircleDetectionConfig, {"min_perimeter_ratio": 2.0, "max_perimeter_ratio": 1.0}),
        ],
    )
    def test_inverted_range(self, model, overrides) -> None:
        """A min above its max would make the detector never match."""
        with pytest.raises(ValidationError, match="must be below"):
            model(**overrides)

    def test_equal_corner_bounds_allowed(self) -> None:
        config = TriangleDetectionConfig(min_corners=3, max_corners=3)
        assert config.min_corners == config.max_corners

    def test_nested_inverted_range(self) -> None:
        with pytest.raises(ValidationError):
            RecognizerConfig(rectangle={"min_corners": 6})

    def test_nested_override(self) -> None:
        config = RecognizerConfig(arc={"max_closedness": 0.95})
        assert isinstance(config.arc, ArcDetectionConfig)
        assert config.arc.max_closedness == 0.95
        assert config.line.min_straightness == 0.70
