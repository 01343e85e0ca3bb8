"""Drawing backend capability consumed by chart elements."""
from __future__ import annotations

from typing import Sequence, Tuple

BackendCoord = Tuple[int, int]


class DrawingError(RuntimeError):
    """Raised by a backend when a primitive cannot be drawn."""


class DrawingBackend:
    """Primitive operations a drawing surface exposes to chart elements.

    Implementations raise on failure. Elements never catch these errors, so
    the first failing primitive aborts the element being drawn.
    """

    def draw_line(self, start: BackendCoord, end: BackendCoord, color: str) -> None:
        raise NotImplementedError

    def fill_polygon(self, vertices: Sequence[BackendCoord], color: str) -> None:
        raise NotImplementedError

    def draw_circle(self, center: BackendCoord, radius: int, color: str, filled: bool) -> None:
        raise NotImplementedError

    def draw_pixel(self, point: BackendCoord, color: str) -> None:
        raise NotImplementedError
