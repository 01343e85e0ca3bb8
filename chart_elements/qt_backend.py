"""Drawing backend that paints through a Qt ``QPainter``."""
from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPen, QPolygon

from chart_elements.backend import BackendCoord, DrawingBackend, DrawingError


def _resolve_color(color: str) -> QColor:
    q_color = QColor(color)
    if not q_color.isValid():
        q_color = QColor("white")
    return q_color


class QtPainterBackend(DrawingBackend):
    """Bridge element primitives to an active ``QPainter``."""

    def __init__(self, painter: QPainter, *, line_width: int = 1) -> None:
        self._painter = painter
        self._line_width = max(0, int(line_width))

    def _ensure_active(self) -> QPainter:
        if not self._painter.isActive():
            raise DrawingError("QPainter is not active")
        return self._painter

    def _set_pen(self, color: str) -> QPainter:
        painter = self._ensure_active()
        pen = QPen(_resolve_color(color))
        pen.setWidth(self._line_width)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        return painter

    def draw_line(self, start: BackendCoord, end: BackendCoord, color: str) -> None:
        painter = self._set_pen(color)
        painter.drawLine(start[0], start[1], end[0], end[1])

    def fill_polygon(self, vertices: Sequence[BackendCoord], color: str) -> None:
        painter = self._ensure_active()
        q_color = _resolve_color(color)
        painter.setPen(QPen(q_color))
        painter.setBrush(QBrush(q_color))
        painter.drawPolygon(QPolygon([QPoint(x, y) for x, y in vertices]))

    def draw_circle(self, center: BackendCoord, radius: int, color: str, filled: bool) -> None:
        painter = self._set_pen(color)
        if filled:
            painter.setBrush(QBrush(_resolve_color(color)))
        painter.drawEllipse(QPoint(center[0], center[1]), radius, radius)

    def draw_pixel(self, point: BackendCoord, color: str) -> None:
        painter = self._ensure_active()
        pen = QPen(_resolve_color(color))
        pen.setWidth(1)
        painter.setPen(pen)
        painter.drawPoint(point[0], point[1])
