"""Point marker elements rendered onto pluggable drawing backends."""

from chart_elements.backend import BackendCoord, DrawingBackend, DrawingError
from chart_elements.element import Drawable, PointCollection
from chart_elements.points import Circle, Cross, Pixel, PointElement, TriangleMarker
from chart_elements.style import ShapeStyle, as_shape_style

__all__ = [
    "BackendCoord",
    "Circle",
    "Cross",
    "Drawable",
    "DrawingBackend",
    "DrawingError",
    "Pixel",
    "PointCollection",
    "PointElement",
    "ShapeStyle",
    "TriangleMarker",
    "as_shape_style",
]
