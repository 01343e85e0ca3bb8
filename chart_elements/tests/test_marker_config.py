from __future__ import annotations

import json
import logging

import pytest

from chart_elements.logging_utils import LOGGER_NAME
from chart_elements.marker_config import (
    DEFAULT_HEIGHT,
    DEFAULT_SIZE,
    DEFAULT_WIDTH,
    MarkerSpec,
    PreviewConfig,
    build_markers,
    load_preview_config,
    marker_class,
)
from chart_elements.points import Circle, Cross, Pixel, TriangleMarker
from chart_elements.style import ShapeStyle


def _write(tmp_path, data) -> object:
    path = tmp_path / "preview.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "kind, expected",
    [("cross", Cross), ("Triangle", TriangleMarker), (" circle ", Circle), ("PIXEL", Pixel)],
)
def test_marker_class_lookup(kind, expected) -> None:
    assert marker_class(kind) is expected


def test_marker_class_unknown_kind() -> None:
    with pytest.raises(ValueError, match="hexagon"):
        marker_class("hexagon")


def test_missing_file_returns_defaults(tmp_path) -> None:
    config = load_preview_config(tmp_path / "absent.json")
    assert config == PreviewConfig()
    assert (config.width, config.height) == (DEFAULT_WIDTH, DEFAULT_HEIGHT)


def test_invalid_json_returns_defaults(tmp_path, caplog) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        assert load_preview_config(path) == PreviewConfig()
    assert caplog.records


def test_non_object_returns_defaults(tmp_path) -> None:
    assert load_preview_config(_write(tmp_path, [1, 2, 3])) == PreviewConfig()


def test_markers_inherit_defaults(tmp_path) -> None:
    path = _write(
        tmp_path,
        {
            "width": 64,
            "height": "48",
            "scale": 2,
            "defaults": {"kind": "triangle", "size": 6, "color": "red"},
            "markers": [
                {"x": 1, "y": 2},
                {"x": "3.5", "y": 4, "kind": "circle", "filled": True, "color": "blue"},
            ],
        },
    )
    config = load_preview_config(path)
    assert config.width == 64
    assert config.height == 48
    assert config.scale == 2.0
    assert config.markers == (
        MarkerSpec(x=1.0, y=2.0, kind="triangle", size=6, color="red"),
        MarkerSpec(x=3.5, y=4.0, kind="circle", size=6, color="blue", filled=True),
    )


def test_bad_entries_are_skipped_and_unknown_kind_falls_back(tmp_path, caplog) -> None:
    path = _write(
        tmp_path,
        {
            "markers": [
                "nope",
                {"x": 1},
                {"x": 1, "y": "abc"},
                {"x": 5, "y": 6, "kind": "star", "size": -3},
            ]
        },
    )
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        config = load_preview_config(path)
    assert config.markers == (MarkerSpec(x=5.0, y=6.0, kind="cross", size=0),)
    messages = " ".join(record.getMessage() for record in caplog.records)
    assert "star" in messages
    assert "Skipping" in messages


def test_build_markers_uses_factories() -> None:
    config = PreviewConfig(
        markers=(
            MarkerSpec(x=1.0, y=2.0, kind="cross", size=3, color="red"),
            MarkerSpec(x=4.0, y=5.0, kind="pixel", size=99, color="blue"),
        )
    )
    elements = build_markers(config)
    assert elements == [
        Cross((1.0, 2.0), 3, ShapeStyle(color="red")),
        Pixel((4.0, 5.0), ShapeStyle(color="blue")),
    ]


def test_non_finite_coordinates_are_skipped(tmp_path, caplog) -> None:
    path = tmp_path / "preview.json"
    path.write_text(
        '{"markers": [{"x": NaN, "y": 1}, {"x": "inf", "y": 2}, {"x": 3, "y": "-Infinity"},'
        ' {"x": 4, "y": 5}]}',
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        config = load_preview_config(path)
    assert config.markers == (MarkerSpec(x=4.0, y=5.0),)
    assert sum("non-finite" in record.getMessage() for record in caplog.records) == 3


def test_non_finite_scale_and_offsets_fall_back(tmp_path) -> None:
    path = tmp_path / "preview.json"
    path.write_text(
        '{"scale": Infinity, "offset_x": "nan", "offset_y": 2.5, "markers": [{"x": 1, "y": 1, "size": 1e999}]}',
        encoding="utf-8",
    )
    config = load_preview_config(path)
    assert config.scale == 1.0
    assert config.offset_x == 0.0
    assert config.offset_y == 2.5
    assert config.markers[0].size == DEFAULT_SIZE


def test_non_finite_config_renders_without_error(tmp_path) -> None:
    from chart_elements.render import draw_elements, scaled_projector
    from chart_elements.tests.fake_backend import RecordingBackend

    path = tmp_path / "preview.json"
    path.write_text('{"markers": [{"x": NaN, "y": 1}, {"x": 2, "y": 3, "kind": "pixel"}]}', encoding="utf-8")
    config = load_preview_config(path)
    backend = RecordingBackend()
    draw_elements(build_markers(config), scaled_projector(config.scale, config.scale), backend, (10, 10))
    assert backend.operations == [("pixel", ((2, 3), "white"))]


@pytest.mark.parametrize(
    "raw, expected",
    [("false", False), ("No", False), ("0", False), ("true", True), ("on", True), (True, True), (0, False)],
)
def test_filled_flag_parses_strings(tmp_path, raw, expected) -> None:
    path = _write(tmp_path, {"markers": [{"x": 1, "y": 1, "filled": raw}]})
    assert load_preview_config(path).markers[0].filled is expected


def test_unrecognised_filled_string_keeps_default(tmp_path) -> None:
    path = _write(tmp_path, {"defaults": {"filled": "yes"}, "markers": [{"x": 1, "y": 1, "filled": "maybe"}]})
    assert load_preview_config(path).markers[0].filled is True


def test_line_width_is_read(tmp_path) -> None:
    assert load_preview_config(_write(tmp_path, {"line_width": "3"})).line_width == 3
    assert load_preview_config(_write(tmp_path, {"line_width": "thick"})).line_width == 1
