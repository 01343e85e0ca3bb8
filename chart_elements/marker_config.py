"""Marker kind registry and preview configuration loader."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from chart_elements.logging_utils import LOGGER_NAME
from chart_elements.points import Circle, Cross, Pixel, PointElement, TriangleMarker
from chart_elements.style import ShapeStyle

_LOGGER = logging.getLogger(LOGGER_NAME)

MARKER_KINDS: Dict[str, Type[PointElement]] = {
    "cross": Cross,
    "triangle": TriangleMarker,
    "circle": Circle,
    "pixel": Pixel,
}

DEFAULT_KIND = "cross"
DEFAULT_SIZE = 4
DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 240


def marker_class(kind: str) -> Type[PointElement]:
    """Look up a marker class by its configuration name."""
    token = str(kind or "").strip().lower()
    try:
        return MARKER_KINDS[token]
    except KeyError:
        known = ", ".join(sorted(MARKER_KINDS))
        raise ValueError(f"Unknown marker kind {kind!r} (expected one of: {known})") from None


@dataclass(frozen=True)
class MarkerSpec:
    x: float
    y: float
    kind: str = DEFAULT_KIND
    size: int = DEFAULT_SIZE
    color: str = "white"
    filled: bool = False

    @property
    def style(self) -> ShapeStyle:
        return ShapeStyle(color=self.color, filled=self.filled)


@dataclass(frozen=True)
class PreviewConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background: str = "black"
    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    line_width: int = 1
    markers: Tuple[MarkerSpec, ...] = field(default_factory=tuple)


def _coerce_int(value: Any, default: int, *, minimum: int = 0) -> int:
    if value is None:
        return default
    try:
        numeric = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return max(minimum, numeric)


def _coerce_float(value: Any, default: float) -> float:
    if value is None:
        return default
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(numeric):
        _LOGGER.warning("Ignoring non-finite value %r; using %r", value, default)
        return default
    return numeric


def _coerce_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        token = value.strip().lower()
        if token in {"1", "true", "yes", "on"}:
            return True
        if token in {"0", "false", "no", "off", ""}:
            return False
        return default
    return bool(value)


def _coerce_kind(value: Any, default: str) -> str:
    if value is None:
        return default
    token = str(value).strip().lower()
    if token in MARKER_KINDS:
        return token
    _LOGGER.warning("Unknown marker kind %r; using %r", value, default)
    return default


def _parse_marker(entry: Mapping[str, Any], defaults: MarkerSpec) -> Optional[MarkerSpec]:
    try:
        x = float(entry["x"])
        y = float(entry["y"])
    except (KeyError, TypeError, ValueError):
        _LOGGER.warning("Skipping marker entry without numeric x/y: %r", entry)
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        _LOGGER.warning("Skipping marker entry with non-finite x/y: %r", entry)
        return None
    return MarkerSpec(
        x=x,
        y=y,
        kind=_coerce_kind(entry.get("kind"), defaults.kind),
        size=_coerce_int(entry.get("size"), defaults.size),
        color=str(entry.get("color") or defaults.color),
        filled=_coerce_bool(entry.get("filled"), defaults.filled),
    )


def load_preview_config(path: Path) -> PreviewConfig:
    """Read a preview configuration from JSON, falling back to defaults."""

    try:
        raw_text = path.read_text(encoding="utf-8")
        data = json.loads(raw_text)
    except FileNotFoundError:
        _LOGGER.debug("Preview config %s not found; using defaults", path)
        return PreviewConfig()
    except (OSError, json.JSONDecodeError) as exc:
        _LOGGER.warning("Failed to read preview config %s: %s", path, exc)
        return PreviewConfig()
    if not isinstance(data, dict):
        _LOGGER.warning("Preview config %s is not a JSON object; using defaults", path)
        return PreviewConfig()

    defaults_block = data.get("defaults")
    if not isinstance(defaults_block, dict):
        defaults_block = {}
    defaults = MarkerSpec(
        x=0.0,
        y=0.0,
        kind=_coerce_kind(defaults_block.get("kind"), DEFAULT_KIND),
        size=_coerce_int(defaults_block.get("size"), DEFAULT_SIZE),
        color=str(defaults_block.get("color") or "white"),
        filled=_coerce_bool(defaults_block.get("filled"), False),
    )

    markers: List[MarkerSpec] = []
    entries = data.get("markers")
    if isinstance(entries, list):
        for entry in entries:
            if not isinstance(entry, dict):
                _LOGGER.warning("Skipping non-object marker entry: %r", entry)
                continue
            marker = _parse_marker(entry, defaults)
            if marker is not None:
                markers.append(marker)

    return PreviewConfig(
        width=_coerce_int(data.get("width"), DEFAULT_WIDTH, minimum=1),
        height=_coerce_int(data.get("height"), DEFAULT_HEIGHT, minimum=1),
        background=str(data.get("background") or "black"),
        scale=_coerce_float(data.get("scale"), 1.0),
        offset_x=_coerce_float(data.get("offset_x"), 0.0),
        offset_y=_coerce_float(data.get("offset_y"), 0.0),
        line_width=_coerce_int(data.get("line_width"), 1),
        markers=tuple(markers),
    )


def build_markers(config: PreviewConfig) -> List[PointElement]:
    """Instantiate every configured marker through its ``make_point`` factory."""
    elements: List[PointElement] = []
    for spec in config.markers:
        cls = marker_class(spec.kind)
        elements.append(cls.make_point((spec.x, spec.y), spec.size, spec.style))
    return elements
