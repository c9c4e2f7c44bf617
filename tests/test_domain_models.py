"""Tests for domain models to verify they work correctly."""

import math

import pytest

from inkshape.domain import (
    ArcShape,
    CircleShape,
    LineShape,
    Point,
    RecognizedShapeKind,
    Rect,
    RectangleShape,
    ResizeHandle,
    ShapeKind,
    Stroke,
    StrokePoint,
    TriangleShape,
    shape_from_dict,
)
from inkshape.exceptions import DegenerateStrokeError, StrokeFormatError, UnknownShapeKindError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(12.5, -3.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    @pytest.mark.parametrize(
        "value",
        [Point(3, 4), (3, 4), [3, 4, 0.5], {"x": 3, "y": 4}, {"x": "3", "y": 4.0, "t": 1}],
    )
    def test_coerce_accepts_point_like_values(self, value) -> None:
        """Points, pairs, triples and mappings all coerce."""
        assert Point.coerce(value) == Point(3.0, 4.0)

    @pytest.mark.parametrize("value", [[1], {"x": 1}, ["a", "b"], None, 5])
    def test_coerce_rejects_malformed_values(self, value) -> None:
        """Values without two numeric coordinates are rejected."""
        with pytest.raises(StrokeFormatError):
            Point.coerce(value)


class TestStrokePoint:
    """Tests for StrokePoint class."""

    def test_to_dict(self) -> None:
        assert StrokePoint(1.0, 2.0, 0.25).to_dict() == {"x": 1.0, "y": 2.0, "t": 0.25}


class TestStroke:
    """Tests for Stroke class."""

    def test_requires_two_points(self) -> None:
        """A single point is not a stroke."""
        with pytest.raises(DegenerateStrokeError) as exc_info:
            Stroke(points=[Point(0, 0)])
        assert exc_info.value.point_count == 1

    def test_timestamp_count_must_match(self) -> None:
        with pytest.raises(ValueError):
            Stroke(points=[Point(0, 0), Point(1, 1)], timestamps=[0.0])

    def test_from_points_mixed_input(self) -> None:
        """Pairs and mappings can be mixed."""
        stroke = Stroke.from_points([(0, 0), {"x": 3, "y": 4}, Point(6, 8)])
        assert stroke.points == [Point(0, 0), Point(3, 4), Point(6, 8)]
        assert stroke.timestamps is None

    def test_from_points_reads_timestamps(self) -> None:
        """Timestamps are kept when every point carries one."""
        stroke = Stroke.from_points([(0, 0, 0.0), (1, 0, 0.1), {"x": 2, "y": 0, "t": 0.2}])
        assert stroke.timestamps == [0.0, 0.1, 0.2]

    def test_from_points_ignores_partial_timestamps(self) -> None:
        stroke = Stroke.from_points([(0, 0, 0.0), (1, 0)])
        assert stroke.timestamps is None

    @pytest.mark.parametrize("bad", [(0, 0, "a"), {"x": 0, "y": 0, "t": "soon"}, (0, 0, [0.1])])
    def test_from_points_rejects_unreadable_timestamp(self, bad) -> None:
        with pytest.raises(StrokeFormatError, match="timestamp"):
            Stroke.from_points([bad, (1, 0, 0.1)])

    def test_measurements(self) -> None:
        """Path length, direct distance and bounds of an L-shaped stroke."""
        stroke = Stroke.from_points([(0, 0), (30, 0), (30, 40)])

        assert len(stroke) == 3
        assert stroke.first == Point(0, 0)
        assert stroke.last == Point(30, 40)
        assert stroke.middle == Point(30, 0)
        assert stroke.path_length() == pytest.approx(70.0)
        assert stroke.direct_distance() == pytest.approx(50.0)
        assert stroke.bounding_rect() == Rect(0, 0, 30, 40)
        assert stroke.straightness() == pytest.approx(50.0 / 70.0)
        assert stroke.gap_ratio() == pytest.approx(1.0)

    def test_closed_stroke_has_small_gap(self) -> None:
        stroke = Stroke.from_points([(0, 0), (10, 0), (10, 10), (0, 10), (0, 1)])
        assert stroke.gap_ratio() == pytest.approx(1 / math.hypot(10, 10))

    def test_zero_extent_stroke(self) -> None:
        """A stroke that never moves has no straightness and an infinite gap ratio."""
        stroke = Stroke.from_points([(5, 5), (5, 5)])
        assert stroke.straightness() == 0.0
        assert stroke.gap_ratio() == math.inf

    def test_measurements_are_cached(self) -> None:
        stroke = Stroke.from_points([(0, 0), (3, 4)])
        assert stroke.path_length() == pytest.approx(5.0)
        assert stroke._cached_length == pytest.approx(5.0)
        assert stroke.bounding_rect() is stroke.bounding_rect()

    def test_to_dict(self) -> None:
        stroke = Stroke.from_points([(0, 0, 0.0), (1, 2, 0.5)])
        assert stroke.to_dict() == {"points": [[0.0, 0.0], [1.0, 2.0]], "timestamps": [0.0, 0.5]}


class TestRect:
    """Tests for Rect class."""

    def test_from_points(self) -> None:
        rect = Rect.from_points([Point(5, 1), Point(-2, 7), Point(3, 3)])
        assert rect == Rect(-2, 1, 7, 6)

    def test_from_corners_any_order(self) -> None:
        assert Rect.from_corners(Point(10, 0), Point(0, 5)) == Rect(0, 0, 10, 5)

    def test_derived_properties(self) -> None:
        rect = Rect(10, 20, 30, 40)
        assert (rect.min_x, rect.min_y, rect.max_x, rect.max_y) == (10, 20, 40, 60)
        assert rect.center == Point(25, 40)
        assert rect.diagonal == pytest.approx(50.0)
        assert rect.aspect == pytest.approx(0.75)

    def test_degenerate_aspect(self) -> None:
        assert Rect(0, 0, 0, 0).aspect == 0.0

    def test_centered(self) -> None:
        assert Rect.centered(50, 50, 20, 10) == Rect(40, 45, 20, 10)

    def test_offset(self) -> None:
        assert Rect(0, 0, 5, 5).offset(3, -2) == Rect(3, -2, 5, 5)

    def test_serialization(self) -> None:
        rect = Rect(1.5, 2.5, 3.0, 4.0)
        assert Rect.from_dict(rect.to_dict()) == rect
        assert rect.to_tuple() == (1.5, 2.5, 3.0, 4.0)


class TestRectResize:
    """Tests for proportional corner-handle resizing."""

    def test_bottom_right_keeps_top_left_fixed(self) -> None:
        """The larger relative movement decides the scale; aspect is kept."""
        rect = Rect(0, 0, 100, 50)
        resized = rect.resized(ResizeHandle.BOTTOM_RIGHT, Point(200, 60))
        assert resized == Rect(0, 0, 200, 100)

    def test_top_left_drag_past_anchor(self) -> None:
        rect = Rect(0, 0, 100, 50)
        resized = rect.resized(ResizeHandle.TOP_LEFT, Point(-100, 20))
        assert resized == Rect(-100, -50, 200, 100)

    def test_top_right_shrinks(self) -> None:
        rect = Rect(0, 0, 100, 100)
        resized = rect.resized(ResizeHandle.TOP_RIGHT, Point(50, 60))
        assert resized == Rect(0, 50, 50, 50)

    def test_tiny_resize_is_ignored(self) -> None:
        rect = Rect(0, 0, 100, 50)
        assert rect.resized(ResizeHandle.BOTTOM_RIGHT, Point(1, 1)) is rect

    def test_degenerate_rect_is_not_resized(self) -> None:
        rect = Rect(0, 0, 100, 0)
        assert rect.resized(ResizeHandle.BOTTOM_RIGHT, Point(200, 200)) is rect


class TestShapeKind:
    """Tests for the shape vocabularies."""

    def test_parse_is_case_insensitive(self) -> None:
        assert ShapeKind.parse("Star") is ShapeKind.STAR
        assert ShapeKind.parse(" oval ") is ShapeKind.OVAL
        assert ShapeKind.parse(ShapeKind.LINE) is ShapeKind.LINE

    def test_parse_unknown(self) -> None:
        with pytest.raises(UnknownShapeKindError) as exc_info:
            ShapeKind.parse("hexagon")
        assert exc_info.value.kind == "hexagon"

    def test_modifiers(self) -> None:
        assert not ShapeKind.LINE.fillable
        assert all(k.fillable for k in ShapeKind if k is not ShapeKind.LINE)
        assert {k for k in ShapeKind if k.equal_sided} == {ShapeKind.SQUARE, ShapeKind.CIRCLE}

    def test_recognized_kinds(self) -> None:
        assert {k.value for k in RecognizedShapeKind} == {
            "line",
            "circle",
            "rectangle",
            "arc",
            "triangle",
        }


class TestRecognizedShapes:
    """Tests for the recognized-shape descriptors."""

    def test_line(self) -> None:
        line = LineShape(Point(0, 0), Point(30, 40), Rect(0, 0, 30, 40))
        assert line.kind is RecognizedShapeKind.LINE
        assert line.length == pytest.approx(50.0)

    def test_circle_and_ellipse(self) -> None:
        assert CircleShape(Rect(0, 0, 10, 10)).is_circle
        assert not CircleShape(Rect(0, 0, 10, 6)).is_circle

    def test_square_flag(self) -> None:
        assert RectangleShape(Rect(0, 0, 10, 10)).is_square
        assert not RectangleShape(Rect(0, 0, 10, 6)).is_square

    def test_arc_sweep_counter_clockwise(self) -> None:
        arc = ArcShape(Point(0, 0), 10, 0.0, math.pi / 2, False, Rect(0, 0, 10, 10))
        assert arc.sweep == pytest.approx(math.pi / 2)
        assert arc.angle_at(0.5) == pytest.approx(math.pi / 4)

    def test_arc_sweep_clockwise_wraps(self) -> None:
        """Clockwise travel from 0 to π/2 goes the long way round."""
        arc = ArcShape(Point(0, 0), 10, 0.0, math.pi / 2, True, Rect(-10, -10, 20, 20))
        assert arc.sweep == pytest.approx(3 * math.pi / 2)
        assert arc.angle_at(1.0) == pytest.approx(-3 * math.pi / 2)

    def test_to_dict_carries_kind(self) -> None:
        triangle = TriangleShape((Point(0, 0), Point(10, 0), Point(5, 8)), Rect(0, 0, 10, 8))
        data = triangle.to_dict()
        assert data["kind"] == "triangle"
        assert data["vertices"][2] == {"x": 5, "y": 8}

    @pytest.mark.parametrize(
        "shape",
        [
            LineShape(Point(0, 0), Point(30, 40), Rect(0, 0, 30, 40)),
            CircleShape(Rect(0, 0, 10, 10)),
            RectangleShape(Rect(0, 0, 10, 6)),
            ArcShape(Point(1, 2), 10, 0.5, 2.0, True, Rect(0, 0, 10, 10)),
            TriangleShape((Point(0, 0), Point(10, 0), Point(5, 8)), Rect(0, 0, 10, 8)),
        ],
    )
    def test_shape_from_dict(self, shape) -> None:
        """Every variant is rebuilt from its dictionary form."""
        assert shape_from_dict(shape.to_dict()) == shape

    def test_shape_from_dict_unknown_kind(self) -> None:
        with pytest.raises(UnknownShapeKindError):
            shape_from_dict({"kind": "hexagon", "bounding_rect": Rect(0, 0, 1, 1).to_dict()})
