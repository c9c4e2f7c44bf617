"""Tests for stroke reading and result serialization."""

import io
import json

import pytest

from inkshape.domain import CircleShape, LineShape, Point, Rect, StrokePoint
from inkshape.exceptions import StrokeFormatError, StrokeLoadError
from inkshape.io import cells_to_json, outline_to_json, parse_strokes, read_strokes, results_to_json


class TestParseStrokes:
    """Tests for parse_strokes."""

    def test_single_stroke(self) -> None:
        strokes = parse_strokes("[[0, 0], [10, 0], [20, 5]]")
        assert len(strokes) == 1
        assert strokes[0].points == [Point(0, 0), Point(10, 0), Point(20, 5)]

    def test_list_of_strokes(self) -> None:
        strokes = parse_strokes("[[[0, 0], [1, 1]], [[5, 5], [6, 6], [7, 7]]]")
        assert [len(s) for s in strokes] == [2, 3]

    def test_object_layout(self) -> None:
        text = json.dumps(
            {
                "strokes": [
                    {"points": [{"x": 0, "y": 0, "t": 0.0}, {"x": 3, "y": 4, "t": 0.02}]},
                    [[1, 1], [2, 2]],
                ]
            }
        )
        strokes = parse_strokes(text)

        assert len(strokes) == 2
        assert strokes[0].timestamps == [0.0, 0.02]
        assert strokes[0].last == Point(3, 4)

    def test_single_stroke_of_mappings(self) -> None:
        strokes = parse_strokes('[{"x": 0, "y": 0}, {"x": 1, "y": 2}]')
        assert len(strokes) == 1

    def test_timed_points(self) -> None:
        strokes = parse_strokes("[[0, 0, 0.0], [1, 0, 0.5]]")
        assert strokes[0].timestamps == [0.0, 0.5]

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "{}",
            "[]",
            '"stroke"',
            '{"strokes": [{"dots": []}]}',
            "[[[0, 0]]]",
            '[["a", "b"], ["c", "d"]]',
            "[[[0, 0], [1]]]",
            "[[[0, 0, \"a\"], [1, 1, \"b\"]]]",
            '[[{"x": 0, "y": 0, "t": "x"}, {"x": 1, "y": 1, "t": 0.1}]]',
            '[[{"x": 0, "y": 0, "t": [1]}, {"x": 1, "y": 1}]]',
        ],
    )
    def test_invalid_input(self, text) -> None:
        with pytest.raises(StrokeFormatError):
            parse_strokes(text)


class TestReadStrokes:
    """Tests for read_strokes."""

    def test_read_file(self, tmp_path) -> None:
        path = tmp_path / "strokes.json"
        path.write_text("[[0, 0], [10, 10]]", encoding="utf-8")

        strokes = read_strokes(path)
        assert strokes[0].last == Point(10, 10)

    def test_read_path_string(self, tmp_path) -> None:
        path = tmp_path / "strokes.json"
        path.write_text("[[0, 0], [10, 10]]", encoding="utf-8")
        assert len(read_strokes(str(path))) == 1

    def test_missing_file(self, tmp_path) -> None:
        missing = tmp_path / "missing.json"
        with pytest.raises(StrokeLoadError) as exc_info:
            read_strokes(missing)
        assert exc_info.value.path == str(missing)

    def test_read_stdin(self, monkeypatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("[[0, 0], [3, 4]]"))
        strokes = read_strokes("-")
        assert strokes[0].path_length() == pytest.approx(5.0)


class TestWriters:
    """Tests for JSON output."""

    def test_results_to_json(self) -> None:
        results = [
            LineShape(Point(0, 0), Point(10, 0), Rect(0, 0, 10, 1)),
            None,
            CircleShape(Rect(0, 0, 4, 4)),
        ]
        data = json.loads(results_to_json(results))

        assert data[0]["kind"] == "line"
        assert data[0]["end"] == {"x": 10, "y": 0}
        assert data[1] is None
        assert data[2] == {"kind": "circle", "bounding_rect": {"x": 0, "y": 0, "width": 4, "height": 4}}

    def test_cells_to_json(self) -> None:
        assert json.loads(cells_to_json([(0, 1), (2, 3)])) == [[0, 1], [2, 3]]

    def test_outline_to_json(self) -> None:
        data = json.loads(outline_to_json([StrokePoint(1.0, 2.0, 0.5)]))
        assert data == [{"x": 1.0, "y": 2.0, "t": 0.5}]
