#!/usr/bin/env python3
"""Render a configured set of markers into a PNG image."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PyQt6.QtGui import QColor, QImage, QPainter

from chart_elements.backend import DrawingError
from chart_elements.logging_utils import LOGGER_NAME, configure_logger
from chart_elements.marker_config import PreviewConfig, build_markers, load_preview_config
from chart_elements.qt_backend import QtPainterBackend
from chart_elements.render import draw_elements, scaled_projector

_LOGGER = logging.getLogger(LOGGER_NAME)


def render_preview(config: PreviewConfig) -> QImage:
    """Paint every configured marker onto a fresh image."""
    image = QImage(config.width, config.height, QImage.Format.Format_ARGB32)
    background = QColor(config.background)
    if not background.isValid():
        background = QColor("black")
    image.fill(background)

    elements = build_markers(config)
    bounds = (config.width, config.height)
    project = scaled_projector(
        config.scale,
        config.scale,
        offset_x=config.offset_x,
        offset_y=config.offset_y,
        bounds=bounds,
    )
    painter = QPainter(image)
    try:
        backend = QtPainterBackend(painter, line_width=config.line_width)
        draw_elements(elements, project, backend, bounds)
    finally:
        painter.end()
    _LOGGER.debug("Rendered %d marker(s) onto %dx%d image", len(elements), config.width, config.height)
    return image


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, required=True, help="Path to the preview JSON file.")
    parser.add_argument("--output", type=Path, required=True, help="Destination PNG path.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-dir", type=Path, default=None, help="Write logs to a rotating file here.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logger(debug_enabled=args.debug, log_dir=args.log_dir)
    config = load_preview_config(args.config)
    try:
        image = render_preview(config)
    except DrawingError as exc:
        _LOGGER.error("Rendering aborted: %s", exc)
        return 1
    args.output.parent.mkdir(parents=True, exist_ok=True)
    if not image.save(str(args.output), "PNG"):
        _LOGGER.error("Failed to write %s", args.output)
        return 1
    _LOGGER.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
