"""Shape style values shared by every chart element."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Union

DEFAULT_COLOR = "black"


@dataclass(frozen=True)
class ShapeStyle:
    """Rendering attributes for a shape.

    ``color`` is opaque to the elements: it is handed to the backend as-is
    and only the backend decides how to interpret it (``"red"``,
    ``"#ff0000"`` and so on for the Qt backend). Line width is a property
    of the backend, not of the style.
    """

    color: str = DEFAULT_COLOR
    filled: bool = False

    def filled_style(self) -> "ShapeStyle":
        return replace(self, filled=True)


StyleLike = Union[ShapeStyle, str, Mapping[str, Any]]


def as_shape_style(value: StyleLike) -> ShapeStyle:
    """Convert a color string, mapping or ``ShapeStyle`` into a ``ShapeStyle``."""
    if isinstance(value, ShapeStyle):
        return value
    if isinstance(value, str):
        color = value.strip()
        return ShapeStyle(color=color or DEFAULT_COLOR)
    if isinstance(value, Mapping):
        color = str(value.get("color") or DEFAULT_COLOR)
        return ShapeStyle(color=color, filled=bool(value.get("filled", False)))
    raise TypeError(f"Cannot build a ShapeStyle from {type(value).__name__}")
