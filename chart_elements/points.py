"""Single-point marker elements: cross, triangle, circle and pixel."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Type, TypeVar

from chart_elements.backend import BackendCoord, DrawingBackend
from chart_elements.element import Coord, Drawable, PointCollection
from chart_elements.style import ShapeStyle, StyleLike, as_shape_style

_TRIANGLE_ANGLES_DEG = (-90, -210, -330)
# Unit trig factors this close to a multiple of one half are treated as exact.
_TRIG_EPSILON = 1e-12

_M = TypeVar("_M", bound="PointElement")


class PointElement(PointCollection[Coord], Drawable):
    """Uniform construction entry point shared by every marker kind."""

    @classmethod
    def make_point(cls: Type[_M], pos: Any, size: int, style: StyleLike) -> _M:
        return cls(pos, size, style)  # type: ignore[call-arg]


def _first_point(points: Iterable[BackendCoord]) -> Optional[BackendCoord]:
    return next(iter(points), None)


def _validate_size(size: Any) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"marker size must be an int, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"marker size must be >= 0, got {size}")
    return size


def _snap_unit(value: float) -> float:
    half = round(value * 2) / 2
    if abs(value - half) < _TRIG_EPSILON:
        return half
    return value


@dataclass(frozen=True)
class _SizedMarker(PointElement[Coord]):
    center: Coord
    size: int
    style: ShapeStyle

    def __post_init__(self) -> None:
        _validate_size(self.size)
        object.__setattr__(self, "style", as_shape_style(self.style))

    def point_iter(self) -> Tuple[Coord]:
        return (self.center,)


@dataclass(frozen=True)
class Cross(_SizedMarker[Coord]):
    """Two diagonals spanning the square of half-width ``size``."""

    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: DrawingBackend,
        parent_dim: Tuple[int, int],
    ) -> None:
        point = _first_point(points)
        if point is None:
            return
        x, y = point
        size = self.size
        x0, y0 = x - size, y - size
        x1, y1 = x + size, y + size
        backend.draw_line((x0, y0), (x1, y1), self.style.color)
        backend.draw_line((x0, y1), (x1, y0), self.style.color)


@dataclass(frozen=True)
class TriangleMarker(_SizedMarker[Coord]):
    """Filled triangle with circumradius ``size``, apex pointing up."""

    def vertices(self, x: int, y: int) -> Tuple[BackendCoord, ...]:
        """Device vertices of the triangle centred on ``(x, y)``.

        Coordinates are rounded with a ceiling, which biases every vertex
        toward +x/+y; existing renders depend on that bias.
        """
        result = []
        for deg in _TRIANGLE_ANGLES_DEG:
            rad = deg * math.pi / 180.0
            result.append(
                (
                    math.ceil(_snap_unit(math.cos(rad)) * self.size + x),
                    math.ceil(_snap_unit(math.sin(rad)) * self.size + y),
                )
            )
        return tuple(result)

    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: DrawingBackend,
        parent_dim: Tuple[int, int],
    ) -> None:
        point = _first_point(points)
        if point is None:
            return
        x, y = point
        backend.fill_polygon(self.vertices(x, y), self.style.color)


@dataclass(frozen=True)
class Circle(_SizedMarker[Coord]):
    """Circle of radius ``size``; filled when the style says so."""

    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: DrawingBackend,
        parent_dim: Tuple[int, int],
    ) -> None:
        point = _first_point(points)
        if point is None:
            return
        backend.draw_circle(point, self.size, self.style.color, self.style.filled)


@dataclass(frozen=True)
class Pixel(PointElement[Coord]):
    """A single device pixel. Has no size."""

    center: Coord
    style: ShapeStyle

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", as_shape_style(self.style))

    @classmethod
    def make_point(cls, pos: Any, size: int, style: StyleLike) -> "Pixel":
        # size is meaningless for a single pixel and is ignored.
        return cls(pos, style)

    def point_iter(self) -> Tuple[Coord]:
        return (self.center,)

    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: DrawingBackend,
        parent_dim: Tuple[int, int],
    ) -> None:
        point = _first_point(points)
        if point is None:
            return
        backend.draw_pixel(point, self.style.color)
